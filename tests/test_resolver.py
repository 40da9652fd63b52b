"""
Tests for the simple resolution strategies.
"""
import pytest

from component_resolution import (
    FirstMatchResolver,
    HighestScoreResolver,
    HighestUniqueScoreResolver,
    MultipleMatchesError,
    NoMatchError,
    PartialMatchError,
    ResolutionResult,
    SearchError,
    UniqueExactOrInexactMatchResolver,
    search_exact,
)
from conftest import FailingSearcher, StaticSearcher, match


class TestResolutionResult:
    """Tests for ResolutionResult."""

    def test_perfect_result(self):
        result = ResolutionResult(match("a"))

        assert not result.is_partial
        assert result.raise_for_partial().name == "a"

    def test_partial_result(self):
        m = match("a", 0.4)
        result = ResolutionResult(m, PartialMatchError("query", m))

        assert result.is_partial
        with pytest.raises(PartialMatchError) as exc_info:
            result.raise_for_partial()
        assert exc_info.value.match is m


class TestFirstMatchResolver:
    """Tests for FirstMatchResolver."""

    def test_returns_first_in_raw_order(self):
        """Test that the searcher's order wins, not the score."""
        resolver = FirstMatchResolver(StaticSearcher(match("worse", 0.9), match("best", 0.0)))

        result = resolver.resolve("query")

        assert result.match.name == "worse"
        assert result.warning is None

    def test_no_match(self):
        with pytest.raises(NoMatchError, match="no match for 'query'"):
            FirstMatchResolver(StaticSearcher()).resolve("query")

    def test_searcher_error_propagates(self):
        with pytest.raises(SearchError, match="search failed"):
            FirstMatchResolver(FailingSearcher()).resolve("query")


class TestHighestScoreResolver:
    """Tests for HighestScoreResolver."""

    def test_returns_lowest_score(self):
        resolver = HighestScoreResolver(
            StaticSearcher(match("a", 0.9), match("b", 0.1), match("c", 0.5))
        )

        assert resolver.resolve("query").match.name == "b"

    def test_tie_goes_to_first_found(self):
        """Test that ties never raise MultipleMatchesError."""
        resolver = HighestScoreResolver(StaticSearcher(match("a", 0.1), match("b", 0.1)))

        assert resolver.resolve("query").match.name == "a"

    def test_no_match(self):
        with pytest.raises(NoMatchError):
            HighestScoreResolver(StaticSearcher()).resolve("query")


class TestHighestUniqueScoreResolver:
    """Tests for HighestUniqueScoreResolver."""

    def test_strict_minimum(self):
        resolver = HighestUniqueScoreResolver(
            StaticSearcher(match("a", 0.3), match("b", 0.2), match("c", 0.2001))
        )

        result = resolver.resolve("query")

        assert result.match.name == "b"
        assert result.warning is None

    def test_shared_minimum_is_ambiguous(self):
        """Test that two candidates with the best score raise MultipleMatchesError."""
        resolver = HighestUniqueScoreResolver(
            StaticSearcher(match("a", 0.5), match("b", 0.2), match("c", 0.2))
        )

        with pytest.raises(MultipleMatchesError) as exc_info:
            resolver.resolve("query")

        assert [m.name for m in exc_info.value.matches] == ["b", "c", "a"]

    def test_single_match(self):
        resolver = HighestUniqueScoreResolver(StaticSearcher(match("a", 0.7)))

        assert resolver.resolve("query").match.name == "a"

    def test_no_match(self):
        with pytest.raises(NoMatchError):
            HighestUniqueScoreResolver(StaticSearcher()).resolve("query")


class TestUniqueExactOrInexactMatchResolver:
    """Tests for UniqueExactOrInexactMatchResolver."""

    def test_single_exact_wins_over_inexact(self):
        resolver = UniqueExactOrInexactMatchResolver(
            StaticSearcher(match("close", 0.1), match("exact", 0.0), match("far", 0.8))
        )

        assert resolver.resolve("query").match.name == "exact"

    def test_multiple_exact_is_ambiguous(self):
        """Test that exact ties are ambiguous and inexact matches are ignored."""
        resolver = UniqueExactOrInexactMatchResolver(
            StaticSearcher(match("a", 0.0), match("b", 0.1), match("c", 0.0))
        )

        with pytest.raises(MultipleMatchesError) as exc_info:
            resolver.resolve("query")

        assert [m.name for m in exc_info.value.matches] == ["a", "c"]

    def test_single_inexact(self):
        """Test that a lone inexact match resolves without an advisory."""
        resolver = UniqueExactOrInexactMatchResolver(StaticSearcher(match("a", 0.4)))

        result = resolver.resolve("query")

        assert result.match.name == "a"
        assert result.warning is None

    def test_multiple_inexact_reports_empty_exact_set(self):
        """Test that several inexact matches raise with an empty candidate list."""
        resolver = UniqueExactOrInexactMatchResolver(
            StaticSearcher(match("a", 0.4), match("b", 0.2))
        )

        with pytest.raises(MultipleMatchesError) as exc_info:
            resolver.resolve("query")

        assert exc_info.value.matches == []
        assert str(exc_info.value) == "multiple matches found for 'query'"

    def test_no_match(self):
        with pytest.raises(NoMatchError):
            UniqueExactOrInexactMatchResolver(StaticSearcher()).resolve("query")


class TestSearchExact:
    """Tests for search_exact."""

    def test_single_exact(self):
        exact, inexact = search_exact(
            StaticSearcher(match("a", 0.0), match("b", 0.3)), "query"
        )

        assert exact.name == "a"
        assert [m.name for m in inexact] == ["b"]

    def test_no_exact(self):
        exact, inexact = search_exact(StaticSearcher(match("b", 0.3)), "query")

        assert exact is None
        assert [m.name for m in inexact] == ["b"]

    def test_multiple_exact(self):
        with pytest.raises(MultipleMatchesError):
            search_exact(StaticSearcher(match("a"), match("b")), "query")
