"""
Component resolution engine.

Decides which single component a user-supplied identifier refers to, using
pluggable searchers and a choice of resolution strategies.

Key components:
- Searcher / Resolver: capabilities for finding and adjudicating matches
- ComponentMatch / ComponentMatches: scored candidates (0.0 = exact)
- MultiSimpleSearcher / MultiWeightedSearcher: fan-out over several searchers
- Resolution strategies: first match, highest score, unique score,
  unique exact-or-inexact, and tiered perfect-match resolution
"""
from .models import ComponentMatch, ComponentMatches
from .exceptions import (
    AggregateSearchError,
    ConfigurationError,
    MultipleMatchesError,
    NoMatchError,
    PartialMatchError,
    ResolutionError,
    SearchError,
)
from .searcher import (
    MultiSimpleSearcher,
    MultiWeightedSearcher,
    PathDiagnosingSearcher,
    Searcher,
    WeightedSearcher,
)
from .resolver import (
    FirstMatchResolver,
    HighestScoreResolver,
    HighestUniqueScoreResolver,
    ResolutionResult,
    Resolver,
    UniqueExactOrInexactMatchResolver,
    search_exact,
)
from .weighted_resolver import PerfectMatchWeightedResolver, WeightedResolver
from .catalog import Component, ComponentCatalog
from .config import ResolverConfig
from .config_loader import configure_logging, load_config_from_env
from .resolver_factory import create_component_resolver

__all__ = [
    "ComponentMatch",
    "ComponentMatches",
    "AggregateSearchError",
    "ConfigurationError",
    "MultipleMatchesError",
    "NoMatchError",
    "PartialMatchError",
    "ResolutionError",
    "SearchError",
    "MultiSimpleSearcher",
    "MultiWeightedSearcher",
    "PathDiagnosingSearcher",
    "Searcher",
    "WeightedSearcher",
    "FirstMatchResolver",
    "HighestScoreResolver",
    "HighestUniqueScoreResolver",
    "ResolutionResult",
    "Resolver",
    "UniqueExactOrInexactMatchResolver",
    "search_exact",
    "PerfectMatchWeightedResolver",
    "WeightedResolver",
    "Component",
    "ComponentCatalog",
    "ResolverConfig",
    "configure_logging",
    "load_config_from_env",
    "create_component_resolver",
]
