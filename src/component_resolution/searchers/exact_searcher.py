"""
Exact lookup against a component catalog.

Fast, deterministic matching. Every match it returns is exact (score 0.0).
"""
from ..catalog import ComponentCatalog
from ..models import ComponentMatch, ComponentMatches
from ..searcher import Searcher


class ExactNameSearcher(Searcher):
    """
    Case-insensitive exact match on component names and aliases.

    Usually the weight 0.0 tier of a tiered resolver.
    """

    source = "exact"

    def __init__(self, catalog: ComponentCatalog):
        self._catalog = catalog

    def search(self, *terms: str) -> ComponentMatches:
        matches = ComponentMatches()
        for term in terms:
            for component in self._catalog.lookup(term):
                matches.append(
                    ComponentMatch(
                        value=term,
                        score=0.0,
                        name=component.name,
                        description=component.description or f"{component.kind} {component.name}",
                        argument=component.name,
                        source=self.source,
                        metadata={"kind": component.kind},
                    )
                )
        return matches
