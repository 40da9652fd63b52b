"""
Shared fixtures and stub searchers for resolution tests.
"""
import pytest

from component_resolution import (
    Component,
    ComponentCatalog,
    ComponentMatch,
    ComponentMatches,
    Searcher,
)
from component_resolution.exceptions import SearchError


class StaticSearcher(Searcher):
    """Returns the same matches for every search, in the given order."""

    def __init__(self, *matches):
        self.matches = list(matches)
        self.calls = []

    def search(self, *terms):
        self.calls.append(terms)
        return ComponentMatches(self.matches)


class FailingSearcher(Searcher):
    """Raises SearchError for every search."""

    def __init__(self, message="search failed"):
        self.message = message
        self.calls = 0

    def search(self, *terms):
        self.calls += 1
        raise SearchError(self.message)


def match(name, score=0.0, value="query"):
    return ComponentMatch(value=value, score=score, name=name)


@pytest.fixture
def catalog():
    return ComponentCatalog([
        Component("nginx", description="nginx web server", aliases=["web"]),
        Component("postgresql", description="PostgreSQL database", aliases=["postgres"]),
        Component("redis", kind="image"),
        Component("rails-postgresql-example", kind="template"),
    ])
