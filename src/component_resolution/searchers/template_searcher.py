"""
File-backed template searcher.

Resolves terms naming local JSON template files, either directly by path or by
name inside a template directory.
"""
import json
import os
from pathlib import Path
from typing import Optional

from ..exceptions import SearchError
from ..models import ComponentMatch, ComponentMatches
from ..searcher import PathDiagnosingSearcher


def is_file(value: str) -> bool:
    """True if value names an existing regular file."""
    try:
        return os.path.isfile(value)
    except (TypeError, ValueError):
        return False


class TemplateFileSearcher(PathDiagnosingSearcher):
    """
    Exact-match searcher for local template files.

    A template that cannot be read or parsed raises SearchError carrying the
    underlying cause. Because it implements PathDiagnosingSearcher, a tiered
    resolver surfaces that error instead of a generic no-match when the value
    names a file.
    """

    source = "template-file"

    def __init__(self, template_dir: Optional[str] = None, suffix: str = ".json"):
        self.template_dir = Path(template_dir) if template_dir else None
        self.suffix = suffix

    def diagnoses(self, value: str) -> bool:
        return is_file(value)

    def search(self, *terms: str) -> ComponentMatches:
        matches = ComponentMatches()
        for term in terms:
            path = self._locate(term)
            if path is None:
                continue
            template = self._load(path)
            metadata = template.get("metadata")
            name = (metadata.get("name") if isinstance(metadata, dict) else None) or path.stem
            matches.append(
                ComponentMatch(
                    value=term,
                    score=0.0,
                    name=name,
                    description=f"template in file {path}",
                    argument=str(path),
                    source=self.source,
                    metadata={"path": str(path)},
                )
            )
        return matches

    def _locate(self, term: str) -> Optional[Path]:
        if is_file(term):
            return Path(term)
        if self.template_dir is not None:
            candidate = self.template_dir / f"{term}{self.suffix}"
            if candidate.is_file():
                return candidate
        return None

    def _load(self, path: Path) -> dict:
        try:
            with path.open(encoding="utf-8") as f:
                template = json.load(f)
        except OSError as e:
            raise SearchError(f"unable to read template file {path}: {e}") from e
        except ValueError as e:
            raise SearchError(f"unable to parse template file {path}: {e}") from e

        if not isinstance(template, dict):
            raise SearchError(f"template file {path} does not contain a template object")
        return template
