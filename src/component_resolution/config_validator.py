"""
Configuration validation utilities.

Reads environment variables and rejects invalid values with actionable errors.
"""
import logging
import math
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_optional_env(
    key: str,
    default: Optional[str] = None,
    check_placeholder: bool = True,
) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :param check_placeholder: Fall back to default for placeholder-looking values.
        Disable for paths, where words like "replace" are legitimate.
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if check_placeholder and value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_bool_env(key: str, default: bool) -> bool:
    """
    Get boolean environment variable ("true"/"false", "1"/"0", "yes"/"no").

    :raises: ConfigurationError if the value is not a recognised boolean
    """
    value = get_optional_env(key)
    if value is None or value == "":
        return default

    value_lower = value.strip().lower()
    if value_lower in ("true", "1", "yes"):
        return True
    if value_lower in ("false", "0", "no"):
        return False
    raise ConfigurationError(
        f"{key} must be true or false, got {value!r}"
    )


def get_float_env(key: str, default: float) -> float:
    """
    Get float environment variable.

    :raises: ConfigurationError if the value is not a number
    """
    value = get_optional_env(key)
    if value is None or value == "":
        return default

    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be a number, got {value!r}"
        ) from None


def validate_threshold(value: float, name: str) -> float:
    """
    Validate a similarity threshold.

    :raises: ConfigurationError if value is outside 0.0-1.0
    """
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(
            f"{name} must be between 0.0 and 1.0, got {value}"
        )
    return value


def validate_weight(value: float, name: str) -> float:
    """
    Validate a tier weight.

    :raises: ConfigurationError if value is negative or not finite
    """
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {value}")
    if value < 0.0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value


def validate_log_level(level: str) -> str:
    level_upper = (level or "").upper()
    if level_upper not in LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    return level_upper


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file/directory exists."
        )

    return path


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def log_level_value(level: str) -> int:
    return getattr(logging, validate_log_level(level))
