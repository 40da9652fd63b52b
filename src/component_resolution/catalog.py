"""
In-memory catalog of known components.

Builds the vocabulary the reference searchers match against.
"""
import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Component:
    name: str
    kind: str = "image"
    description: Optional[str] = None
    aliases: List[str] = field(default_factory=list, compare=False)


class ComponentCatalog:
    """
    Vocabulary of canonical component names and their aliases.

    Usage:
        catalog = ComponentCatalog([Component("nginx", aliases=["web"])])
        catalog.lookup("WEB")  # [Component(name="nginx", ...)]
    """

    def __init__(self, components: List[Component]):
        self._components = list(components)
        self._index: Dict[str, List[Component]] = {}

        self._build_index()

    def _build_index(self):
        for component in self._components:
            keys = {self.normalize(component.name)}
            keys.update(self.normalize(alias) for alias in component.aliases)
            for key in keys:
                self._index.setdefault(key, []).append(component)

    @staticmethod
    def normalize(value: str) -> str:
        return value.strip().lower()

    @property
    def components(self) -> List[Component]:
        return list(self._components)

    def lookup(self, value: str) -> List[Component]:
        """Components whose name or alias equals value, ignoring case."""
        return list(self._index.get(self.normalize(value), []))

    def get_names(self) -> List[str]:
        return [c.name for c in self._components]

    def get_candidates(self) -> Dict[str, List[Component]]:
        """Every name and alias, mapped to all components it refers to."""
        candidates: Dict[str, List[Component]] = {}
        for component in self._components:
            for key in dict.fromkeys([component.name] + list(component.aliases)):
                candidates.setdefault(key, []).append(component)
        return candidates

    @classmethod
    def from_json_file(cls, path: str) -> "ComponentCatalog":
        """
        Load a catalog from a JSON file.

        The file holds a list of objects with a required "name" and optional
        "kind", "description" and "aliases" keys.

        :param path: Path to the JSON catalog
        :return: ComponentCatalog
        :raises ConfigurationError: If the file cannot be read or is malformed
        """
        try:
            with open(path, encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Unable to load component catalog {path}: {e}") from e

        if not isinstance(entries, list):
            raise ConfigurationError(
                f"Component catalog {path} must contain a list of components"
            )

        components = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get("name"):
                raise ConfigurationError(
                    f"Component catalog {path}: entry {i} has no name"
                )
            if not isinstance(entry["name"], str):
                raise ConfigurationError(
                    f"Component catalog {path}: entry {i} name must be a string"
                )
            aliases = entry.get("aliases", [])
            if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
                raise ConfigurationError(
                    f"Component catalog {path}: entry {i} aliases must be a list of strings"
                )
            components.append(
                Component(
                    name=entry["name"],
                    kind=entry.get("kind", "image"),
                    description=entry.get("description"),
                    aliases=list(aliases),
                )
            )
        return cls(components)
