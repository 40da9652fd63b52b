"""
Factory for creating tiered component resolvers.

Builds the catalog from configuration and wires the reference searchers into
a PerfectMatchWeightedResolver.
"""
import logging
from typing import List, Optional, Sequence

from .catalog import ComponentCatalog
from .config import ResolverConfig
from .config_loader import validate_config
from .exceptions import ConfigurationError
from .searchers import ExactNameSearcher, FuzzyNameSearcher, TemplateFileSearcher
from .weighted_resolver import PerfectMatchWeightedResolver, WeightedResolver


def create_component_resolver(
    config: Optional[ResolverConfig] = None,
    catalog: Optional[ComponentCatalog] = None,
    extra_resolvers: Sequence[WeightedResolver] = (),
    logger: Optional[logging.Logger] = None,
) -> PerfectMatchWeightedResolver:
    """
    Factory function to create a PerfectMatchWeightedResolver.

    Tiers, from the configured weights:
    - ExactNameSearcher over the catalog
    - TemplateFileSearcher, always present so local template files resolve
    - FuzzyNameSearcher over the catalog, unless fuzzy matching is disabled

    :param config: ResolverConfig instance, defaults to ResolverConfig()
    :param catalog: Optional pre-built catalog. If None, loaded from config.catalog_path
    :param extra_resolvers: Additional weighted searchers supplied by the caller
    :param logger: Logger for resolution diagnostics
    :return: Configured PerfectMatchWeightedResolver
    :raises: ConfigurationError if the configuration is invalid
    """
    config = validate_config(config or ResolverConfig())

    if catalog is None:
        if config.catalog_path:
            catalog = ComponentCatalog.from_json_file(config.catalog_path)
        else:
            catalog = ComponentCatalog([])

    resolvers: List[WeightedResolver] = [
        WeightedResolver(ExactNameSearcher(catalog), config.exact_weight),
        WeightedResolver(TemplateFileSearcher(config.template_dir), config.template_weight),
    ]

    if config.enable_fuzzy_matching:
        try:
            fuzzy = FuzzyNameSearcher(
                catalog,
                threshold=config.fuzzy_threshold,
                scorer=config.fuzzy_scorer,
            )
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        resolvers.append(WeightedResolver(fuzzy, config.fuzzy_weight))

    resolvers.extend(extra_resolvers)
    return PerfectMatchWeightedResolver(resolvers, logger=logger)
