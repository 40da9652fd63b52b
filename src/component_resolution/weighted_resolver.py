"""
Tiered resolution across weighted searchers.

Searchers sharing a weight form a tier. Tiers are searched from the lowest
weight up; a perfect match in a tier wins immediately, otherwise the tier's
matches are rescaled by its weight and kept as candidates for a final
decision once every tier has been searched.
"""
import logging
from dataclasses import dataclass
from itertools import groupby
from typing import Iterator, List, Optional, Sequence, Tuple

from .exceptions import (
    AggregateSearchError,
    MultipleMatchesError,
    NoMatchError,
    PartialMatchError,
)
from .models import ComponentMatches
from .resolver import ResolutionResult, Resolver
from .searcher import MultiSimpleSearcher, PathDiagnosingSearcher, Searcher


@dataclass(frozen=True)
class WeightedResolver:
    """
    A searcher used by a tiered resolver, identified as exact or not by its weight.

    Weight 0.0 marks an exact tier whose perfect matches are authoritative.
    """
    searcher: Searcher
    weight: float = 0.0

    def search(self, *terms: str) -> ComponentMatches:
        return self.searcher.search(*terms)


class PerfectMatchWeightedResolver(Resolver):
    """
    Resolver preferring perfect matches from the lowest weighted tier.

    Usage:
        resolver = PerfectMatchWeightedResolver([
            WeightedResolver(ExactNameSearcher(catalog), 0.0),
            WeightedResolver(FuzzyNameSearcher(catalog), 1.0),
        ])
        result = resolver.resolve("nginx")
        if result.is_partial:
            log.warning(result.warning)
        match = result.match

    Entries are ordered by ascending weight on construction. The sort is
    stable, so entries sharing a weight keep their configured order.
    """

    def __init__(
        self,
        resolvers: Sequence[WeightedResolver],
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        resolvers = list(resolvers)
        ordered = sorted(resolvers, key=lambda r: r.weight)
        if ordered != resolvers:
            self._logger.debug("Reordered weighted resolvers by ascending weight")
        self._resolvers: Tuple[WeightedResolver, ...] = tuple(ordered)

    @property
    def resolvers(self) -> List[WeightedResolver]:
        return list(self._resolvers)

    def tiers(self) -> Iterator[Tuple[float, List[Searcher]]]:
        """Yield (weight, searchers) for each run of equally weighted entries."""
        for weight, group in groupby(self._resolvers, key=lambda r: r.weight):
            yield weight, [r.searcher for r in group]

    def resolve(self, value: str) -> ResolutionResult:
        imperfect = ComponentMatches()

        for weight, searchers in self.tiers():
            tier = MultiSimpleSearcher(searchers, logger=self._logger)
            try:
                matches = tier.search(value)
            except AggregateSearchError as e:
                if not e.matches:
                    self._logger.debug(f"Error from resolver: {e}")
                    raise
                matches = e.matches

            if not matches:
                continue

            best = matches[0]
            if best.score == 0.0 and (len(matches) == 1 or matches[1].score != 0.0):
                return ResolutionResult(best)

            for match in matches:
                if weight != 0.0:
                    match = match.with_score(weight * match.score)
                imperfect.append(match)

        if not imperfect:
            self._raise_diagnosis(value)
            raise NoMatchError(value)

        imperfect.sort_by_score()
        if len(imperfect) > 1 and not imperfect[0].score < imperfect[1].score:
            raise MultipleMatchesError(value, imperfect)
        return self._partial(value, imperfect[0])

    def _partial(self, value: str, match) -> ResolutionResult:
        warning = None
        if match.score != 0.0:
            warning = PartialMatchError(value, match)
        return ResolutionResult(match, warning)

    def _raise_diagnosis(self, value: str) -> None:
        """
        Surface a searcher's own error for a value it claims, such as a local
        template file that fails to parse. Returns if no searcher objects.
        """
        for resolver in self._resolvers:
            searcher = resolver.searcher
            if not isinstance(searcher, PathDiagnosingSearcher):
                continue
            if not searcher.diagnoses(value):
                continue
            # Raises the searcher's error, if any.
            searcher.search(value)
