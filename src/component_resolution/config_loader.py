"""
Configuration loader with validation.
"""
import logging
from dataclasses import replace

from dotenv import find_dotenv, load_dotenv

from .config import ResolverConfig
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_optional_env,
    log_level_value,
    validate_log_level,
    validate_path,
    validate_threshold,
    validate_weight,
)


def load_config_from_env(load_env_file: bool = True) -> ResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        resolver = create_component_resolver(config)

    :param load_env_file: Load a .env file first, if one exists (local development)
    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    config = ResolverConfig(
        catalog_path=get_optional_env("COMPONENT_CATALOG_PATH", check_placeholder=False),
        template_dir=get_optional_env("TEMPLATE_DIR", check_placeholder=False),
        enable_fuzzy_matching=get_bool_env("ENABLE_FUZZY_MATCHING", True),
        fuzzy_threshold=get_float_env("FUZZY_THRESHOLD", 0.75),
        fuzzy_scorer=get_optional_env("FUZZY_SCORER", default="ratio"),
        exact_weight=get_float_env("EXACT_WEIGHT", 0.0),
        fuzzy_weight=get_float_env("FUZZY_WEIGHT", 1.0),
        template_weight=get_float_env("TEMPLATE_WEIGHT", 0.0),
        log_level=get_optional_env("LOG_LEVEL", default="INFO"),
    )

    return validate_config(config)


def validate_config(config: ResolverConfig) -> ResolverConfig:
    """
    Validate a configuration built in code or loaded from the environment.

    Returns a copy with the log level normalized to upper case; the config
    passed in is left unchanged.

    :raises: ConfigurationError on the first invalid value
    """
    validate_threshold(config.fuzzy_threshold, "FUZZY_THRESHOLD")
    validate_weight(config.exact_weight, "EXACT_WEIGHT")
    validate_weight(config.fuzzy_weight, "FUZZY_WEIGHT")
    validate_weight(config.template_weight, "TEMPLATE_WEIGHT")
    config = replace(config, log_level=validate_log_level(config.log_level))

    if config.catalog_path:
        validate_path(config.catalog_path, "COMPONENT_CATALOG_PATH", must_exist=True)
    if config.template_dir:
        validate_path(config.template_dir, "TEMPLATE_DIR", must_exist=True)

    return config


def configure_logging(config: ResolverConfig) -> None:
    """Configure root logging for applications embedding the resolver."""
    logging.basicConfig(
        level=log_level_value(config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
