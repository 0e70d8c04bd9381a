"""Config module.

This module provides configuration management functionality.
"""

from codice_fiscale.config.manager import (
    get_default_config,
    get_decoding_config,
    get_logging_config,
    get_registry_config,
    load_config,
    reset_default_config,
)
from codice_fiscale.config.schema import (
    Config,
    DecodingConfig,
    LoggingConfig,
    RegistryConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    "get_default_config",
    "reset_default_config",
    # Helper functions
    "get_registry_config",
    "get_decoding_config",
    "get_logging_config",
    # Configuration models
    "Config",
    "RegistryConfig",
    "DecodingConfig",
    "LoggingConfig",
]
