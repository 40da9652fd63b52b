"""
Resolver abstractions and the simple resolution strategies.

A resolver turns the matches of a searcher into exactly one match, or raises
NoMatchError / MultipleMatchesError. Errors raised by the searcher are
propagated unchanged.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .exceptions import MultipleMatchesError, NoMatchError, PartialMatchError
from .models import ComponentMatch, ComponentMatches
from .searcher import Searcher


@dataclass(frozen=True)
class ResolutionResult:
    """
    Immutable outcome of a successful resolution.

    Attributes:
        match: The resolved match
        warning: Advisory set when the match is usable but not perfect
    """
    match: ComponentMatch
    warning: Optional[PartialMatchError] = None

    @property
    def is_partial(self) -> bool:
        return self.warning is not None

    def raise_for_partial(self) -> ComponentMatch:
        """Return the match, raising the advisory if the match is only partial."""
        if self.warning is not None:
            raise self.warning
        return self.match


class Resolver(ABC):
    """Protocol for strategies that resolve a value to a single match."""

    @abstractmethod
    def resolve(self, value: str) -> ResolutionResult:
        """
        Resolve value to a single component match.

        :param value: User-supplied identifier
        :return: ResolutionResult holding the match
        :raises NoMatchError: If nothing matches
        :raises MultipleMatchesError: If the value is ambiguous
        """
        pass


class FirstMatchResolver(Resolver):
    """
    Resolves to the first match returned by the searcher, in the searcher's order.

    Never raises MultipleMatchesError.
    """

    def __init__(self, searcher: Searcher):
        self.searcher = searcher

    def resolve(self, value: str) -> ResolutionResult:
        matches = self.searcher.search(value)
        if not matches:
            raise NoMatchError(value)
        return ResolutionResult(matches[0])


class HighestScoreResolver(Resolver):
    """
    Resolves to the best scored match. Ties go to the earliest match found.

    Never raises MultipleMatchesError.
    """

    def __init__(self, searcher: Searcher):
        self.searcher = searcher

    def resolve(self, value: str) -> ResolutionResult:
        matches = self.searcher.search(value)
        if not matches:
            raise NoMatchError(value)
        matches = ComponentMatches(matches).sort_by_score()
        return ResolutionResult(matches[0])


class HighestUniqueScoreResolver(Resolver):
    """Resolves to the best scored match, which must be the only one with that score."""

    def __init__(self, searcher: Searcher):
        self.searcher = searcher

    def resolve(self, value: str) -> ResolutionResult:
        matches = ComponentMatches(self.searcher.search(value)).sort_by_score()
        if not matches:
            raise NoMatchError(value)
        if len(matches) > 1 and matches[0].score == matches[1].score:
            raise MultipleMatchesError(value, matches)
        return ResolutionResult(matches[0])


class UniqueExactOrInexactMatchResolver(Resolver):
    """
    Resolves to the single exact match, or failing that the single inexact one.

    More than one exact match is ambiguous even when inexact matches exist.
    With no exact match, more than one inexact match is ambiguous as well;
    the error then carries the (empty) exact set rather than the inexact
    candidates.
    """

    def __init__(self, searcher: Searcher):
        self.searcher = searcher

    def resolve(self, value: str) -> ResolutionResult:
        matches = ComponentMatches(self.searcher.search(value)).sort_by_score()

        exact = matches.exact()
        if len(exact) == 1:
            return ResolutionResult(exact[0])
        if len(exact) > 1:
            raise MultipleMatchesError(value, exact)

        inexact = matches.inexact()
        if not inexact:
            raise NoMatchError(value)
        if len(inexact) == 1:
            return ResolutionResult(inexact[0])
        # TODO: report the inexact candidates once callers stop relying on the
        # empty candidate list for this case.
        raise MultipleMatchesError(value, exact)


def search_exact(
    searcher: Searcher,
    value: str,
) -> Tuple[Optional[ComponentMatch], List[ComponentMatch]]:
    """
    Search and split the results into a single exact match and the inexact rest.

    :param searcher: Searcher to query
    :param value: Value to search for
    :return: (exact match or None, inexact matches)
    :raises MultipleMatchesError: If more than one exact match exists
    """
    matches = ComponentMatches(searcher.search(value))

    exact = matches.exact()
    if len(exact) > 1:
        raise MultipleMatchesError(value, exact)
    inexact = list(matches.inexact())
    if not exact:
        return None, inexact
    return exact[0], inexact
