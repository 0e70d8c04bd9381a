"""Logging Audit module.

This module provides logging configuration and PII-redacting formatters.
"""

from .formatters import FISCAL_CODE_PATTERN, PIIRedactingFormatter
from .logger import configure_logging, configure_logging_from_config, get_logger

__all__ = [
    "configure_logging",
    "configure_logging_from_config",
    "get_logger",
    "FISCAL_CODE_PATTERN",
    "PIIRedactingFormatter",
]
