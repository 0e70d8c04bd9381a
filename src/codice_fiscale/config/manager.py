"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading functionality, including
support for JSON configuration files, environment variable overrides, and
configuration validation.
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from codice_fiscale.config.schema import (
    Config,
    DecodingConfig,
    LoggingConfig,
    RegistryConfig,
)
from codice_fiscale.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "CF_"

# Configuration file looked up in the working directory when none is given
DEFAULT_CONFIG_PATH = "config/config.json"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.

    Configuration is loaded with the following precedence (highest to lowest):
    1. Environment variables (CF_* prefix, .env file honoured)
    2. Configuration file (JSON)
    3. Default values

    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If configuration is invalid or malformed

    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> config.registry.active_places_file
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


@lru_cache(maxsize=1)
def get_default_config() -> Config:
    """Return the process-wide configuration, loaded once on first use.

    Raises:
        ConfigurationError: If configuration is invalid or malformed
    """
    return load_config()


def reset_default_config() -> None:
    """Drop the cached configuration so the next use reloads it.

    Primarily for testing purposes.
    """
    get_default_config.cache_clear()


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file, or an empty mapping when it does not exist.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If JSON is malformed or the file cannot be read
    """
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
            logger.info(f"Loaded configuration from {config_path}")
            return config_dict
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check file permissions and path"
            ) from e
    else:
        logger.debug(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Schema defaults fill every section
        return {}


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with CF_ prefix.

    Args:
        config_dict: Configuration dictionary to update

    Returns:
        Updated configuration dictionary with environment overrides applied

    Raises:
        ConfigurationError: If a numeric override is not a number
    """
    # Registry section
    if active_file := os.getenv(f"{ENV_PREFIX}ACTIVE_PLACES_FILE"):
        config_dict.setdefault("registry", {})["active_places_file"] = active_file
        logger.debug("Override: active_places_file from environment")

    if inactive_file := os.getenv(f"{ENV_PREFIX}INACTIVE_PLACES_FILE"):
        config_dict.setdefault("registry", {})["inactive_places_file"] = inactive_file
        logger.debug("Override: inactive_places_file from environment")

    # Decoding section
    if reference_year := os.getenv(f"{ENV_PREFIX}REFERENCE_YEAR"):
        try:
            config_dict.setdefault("decoding", {})["reference_year"] = int(
                reference_year
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid {ENV_PREFIX}REFERENCE_YEAR: {reference_year}. "
                f"Fix: Use a 4-digit year such as 2024"
            ) from e
        logger.debug("Override: reference_year from environment")

    # Logging section
    if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = log_level
        logger.debug("Override: log_level from environment")

    if log_file := os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config_dict.setdefault("logging", {})["log_file"] = log_file
        logger.debug("Override: log_file from environment")

    if redact_pii := os.getenv(f"{ENV_PREFIX}REDACT_PII"):
        config_dict.setdefault("logging", {})["redact_pii"] = _parse_bool(redact_pii)
        logger.debug("Override: redact_pii from environment")

    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string.

    Args:
        value: String value to parse (case-insensitive)

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "on")


def get_registry_config(config: Config) -> RegistryConfig:
    """Get municipality registry configuration.

    Args:
        config: Configuration instance

    Returns:
        RegistryConfig instance
    """
    return config.registry


def get_decoding_config(config: Config) -> DecodingConfig:
    """Get decoding configuration.

    Args:
        config: Configuration instance

    Returns:
        DecodingConfig instance
    """
    return config.decoding


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.

    Args:
        config: Configuration instance

    Returns:
        LoggingConfig instance

    Example:
        >>> config = load_config()
        >>> logging_cfg = get_logging_config(config)
        >>> log_level = logging_cfg.level
    """
    return config.logging
