"""
Searcher abstractions and composite searchers.

A searcher returns every candidate it can find for the given terms, scored so
that 0.0 is an exact match. It never reports "no match" or "multiple matches"
as an error; an exception from a searcher is always an operational failure.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .exceptions import AggregateSearchError
from .models import ComponentMatches


class Searcher(ABC):
    """Protocol for lookup strategies that produce scored component matches."""

    @abstractmethod
    def search(self, *terms: str) -> ComponentMatches:
        """
        Search for components matching the given terms.

        :param terms: Query terms
        :return: All matches found, possibly empty
        :raises SearchError: If the search itself fails
        """
        pass


class PathDiagnosingSearcher(Searcher):
    """
    Capability for searchers that can explain why a local path did not resolve.

    When resolution finds no candidates at all, a resolver re-runs searchers
    that claim the value through diagnoses() and surfaces their error (for
    example a parse error in a template file) instead of a generic no-match.
    """

    @abstractmethod
    def diagnoses(self, value: str) -> bool:
        """Return True if this searcher can explain a failure for value."""
        pass


class MultiSimpleSearcher(Searcher):
    """
    Fan-out over several unweighted searchers.

    Failing members are logged and collected; the remaining matches are merged
    and sorted by score.
    """

    def __init__(
        self,
        searchers: Sequence[Searcher],
        logger: Optional[logging.Logger] = None,
    ):
        self._searchers = list(searchers)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def searchers(self) -> List[Searcher]:
        return list(self._searchers)

    def __len__(self) -> int:
        return len(self._searchers)

    def search(self, *terms: str) -> ComponentMatches:
        """
        Search with every member searcher, in order.

        :param terms: Query terms passed to each member
        :return: Merged matches sorted by ascending score
        :raises AggregateSearchError: If any member failed. The merged matches
            of the other members are available as ``matches`` on the error.
        """
        errors: List[Exception] = []
        matches = ComponentMatches()
        for searcher in self._searchers:
            try:
                found = searcher.search(*terms)
            except Exception as e:
                self._logger.warning(f"Error occurred during search: {e}")
                errors.append(e)
                continue
            matches.extend(found)

        matches.sort_by_score()
        if errors:
            raise AggregateSearchError(errors, matches)
        return matches


@dataclass(frozen=True)
class WeightedSearcher:
    """
    A searcher paired with a priority weight.

    Weight 0.0 marks an exact tier; lower weights have higher priority.
    """
    searcher: Searcher
    weight: float = 0.0

    def search(self, *terms: str) -> ComponentMatches:
        return self.searcher.search(*terms)


class MultiWeightedSearcher(Searcher):
    """
    Fan-out over weighted searchers where lower weight wins.

    Each match is biased by adding its searcher's weight to its score, so a
    lower-weight searchers rank ahead while base scores still order peers
    sharing a weight.
    """

    def __init__(
        self,
        searchers: Sequence[WeightedSearcher],
        logger: Optional[logging.Logger] = None,
    ):
        self._searchers = list(searchers)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def searchers(self) -> List[WeightedSearcher]:
        return list(self._searchers)

    def search(self, *terms: str) -> ComponentMatches:
        """
        Search with every member and score by searcher weight.

        Member failures are logged and their results dropped; they are never
        raised.
        """
        matches = ComponentMatches()
        for weighted in self._searchers:
            try:
                found = weighted.search(*terms)
            except Exception as e:
                self._logger.warning(f"Error occurred during search: {e!r}")
                continue
            for match in found:
                matches.append(match.with_score(match.score + weighted.weight))

        return matches.sort_by_score()
