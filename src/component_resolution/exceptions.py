"""
Exceptions raised while searching for and resolving components.

Resolution errors describe the outcome of adjudicating results (nothing found,
too many found, only a partial match found). Search errors are genuine
failures of a searcher itself.
"""
from typing import Iterable, List, Optional


class ResolutionError(Exception):
    """Base exception for resolution outcomes."""

    def __init__(self, value: str, message: str):
        super().__init__(message)
        self.value = value


class NoMatchError(ResolutionError):
    """Raised when no candidate matches the value."""

    def __init__(self, value: str, qualifier: Optional[str] = None):
        message = f"no match for {value!r}"
        if qualifier:
            message = f"{message}: {qualifier}"
        super().__init__(value, message)
        self.qualifier = qualifier


class MultipleMatchesError(ResolutionError):
    """Raised when the value is ambiguous between several candidates."""

    def __init__(self, value: str, matches: Iterable = ()):
        self.matches = list(matches)
        message = f"multiple matches found for {value!r}"
        if self.matches:
            message = f"{message}: {', '.join(str(m) for m in self.matches)}"
        super().__init__(value, message)


class PartialMatchError(ResolutionError):
    """
    Advisory for a usable match that is not a perfect match.

    Carried on a ResolutionResult next to the match rather than raised,
    unless the caller asks for strict resolution.
    """

    def __init__(self, value: str, match):
        super().__init__(value, f"only a partial match was found for {value!r}: {match}")
        self.match = match


class SearchError(Exception):
    """Raised when a searcher fails to perform a search."""


class AggregateSearchError(SearchError):
    """
    Raised when one or more member searchers of a composite search fail.

    The matches collected from the members that succeeded stay available on
    the exception.
    """

    def __init__(self, errors: List[Exception], matches=None):
        self.errors = list(errors)
        self.matches = matches if matches is not None else []
        if len(self.errors) == 1:
            message = str(self.errors[0])
        else:
            message = "[" + ", ".join(str(e) for e in self.errors) + "]"
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when resolver configuration is missing or invalid."""
