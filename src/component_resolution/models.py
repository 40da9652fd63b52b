"""
Scored candidates produced by searchers.

A score of 0.0 is an exact match; larger scores are worse matches.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class ComponentMatch:
    """
    Immutable scored candidate for a user-supplied identifier.

    Attributes:
        value: The identifier the match was found for
        score: 0.0 for an exact match, higher values for worse matches
        name: Canonical name of the matched component
        description: Human-readable description of the match
        argument: Argument a caller should use to refer to the component
        source: Name of the searcher that produced the match
        metadata: Searcher-specific auxiliary data
    """
    value: str
    score: float = 0.0
    name: Optional[str] = None
    description: Optional[str] = None
    argument: Optional[str] = None
    source: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    def is_exact(self) -> bool:
        return self.score == 0.0

    def with_score(self, score: float) -> "ComponentMatch":
        """Return a copy of this match carrying a new score."""
        return replace(self, score=score)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {
            "value": self.value,
            "score": self.score,
        }
        for key in ("name", "description", "argument", "source"):
            attr = getattr(self, key)
            if attr is not None:
                result[key] = attr
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        return result

    def __str__(self) -> str:
        return self.description or self.name or self.value


class ComponentMatches(list):
    """
    Ordered collection of component matches.

    Sorting is stable, so matches with equal scores keep the order in which
    searchers discovered them.
    """

    def __init__(self, matches: Iterable[ComponentMatch] = ()):
        super().__init__(matches)

    def sort_by_score(self) -> "ComponentMatches":
        """Sort in place by ascending score and return self."""
        self.sort(key=lambda match: match.score)
        return self

    def exact(self) -> "ComponentMatches":
        """Matches with a score of exactly 0.0."""
        return ComponentMatches(m for m in self if m.score == 0.0)

    def inexact(self) -> "ComponentMatches":
        """Matches with a nonzero score."""
        return ComponentMatches(m for m in self if m.score != 0.0)

    def __repr__(self) -> str:
        return f"ComponentMatches({list.__repr__(self)})"
