"""
Fuzzy search over a component catalog using rapidfuzz.

Handles typos, partial names and near-misses.
"""
from rapidfuzz import fuzz, process, utils

from ..catalog import ComponentCatalog
from ..models import ComponentMatch, ComponentMatches
from ..searcher import Searcher


class FuzzyNameSearcher(Searcher):
    """
    Fuzzy match strategy using rapidfuzz.

    Handles:
    - Typos ("ngnix" → "nginx")
    - Partial names ("postgres" → "postgresql")

    Similarity (0-100) is turned into a score as 1 - similarity / 100, so
    only an identical name (after rapidfuzz's default processing) scores 0.0.
    A component reachable through several names keeps its best score.
    """

    source = "fuzzy"

    def __init__(
        self,
        catalog: ComponentCatalog,
        threshold: float = 0.75,
        scorer: str = "ratio",
    ):
        """
        Initialize fuzzy searcher.

        :param catalog: Catalog to search
        :param threshold: Minimum similarity to accept a match (0.0-1.0)
        :param scorer: rapidfuzz scorer to use ("ratio", "partial_ratio", "token_sort_ratio", "token_set_ratio")
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")

        self._catalog = catalog
        self.threshold = threshold
        self.scorer = scorer

        self._scorer_map = {
            "ratio": fuzz.ratio,
            "partial_ratio": fuzz.partial_ratio,
            "token_sort_ratio": fuzz.token_sort_ratio,
            "token_set_ratio": fuzz.token_set_ratio,
        }

        if scorer not in self._scorer_map:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self._scorer_map.keys())}"
            )

    def search(self, *terms: str) -> ComponentMatches:
        candidates = self._catalog.get_candidates()
        if not candidates:
            return ComponentMatches()

        choices = list(candidates.keys())
        scorer_func = self._scorer_map[self.scorer]

        matches = ComponentMatches()
        for term in terms:
            best = {}
            results = process.extract(
                term,
                choices,
                scorer=scorer_func,
                processor=utils.default_process,
                score_cutoff=self.threshold * 100,
                limit=None,
            )
            for choice, similarity, _ in results:
                score = 1.0 - similarity / 100.0
                for component in candidates[choice]:
                    key = id(component)
                    if key not in best or score < best[key][0]:
                        best[key] = (score, choice, component)

            for score, choice, component in best.values():
                matches.append(
                    ComponentMatch(
                        value=term,
                        score=score,
                        name=component.name,
                        description=component.description or f"{component.kind} {component.name}",
                        argument=component.name,
                        source=self.source,
                        metadata={"kind": component.kind, "matched": choice},
                    )
                )
        return matches.sort_by_score()
