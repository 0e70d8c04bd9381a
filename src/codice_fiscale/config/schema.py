"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RegistryConfig(BaseModel):
    """Configuration for the municipality registry tables.

    Attributes:
        active_places_file: CSV of active municipalities and foreign states.
            None uses the table packaged with the library.
        inactive_places_file: CSV of suppressed or renamed municipalities.
            None uses the table packaged with the library.
    """

    active_places_file: Optional[Path] = Field(
        default=None,
        description="Path to the active municipalities CSV"
    )
    inactive_places_file: Optional[Path] = Field(
        default=None,
        description="Path to the inactive municipalities CSV"
    )


class DecodingConfig(BaseModel):
    """Configuration for decoding fiscal codes.

    Attributes:
        reference_year: Year used to resolve the century of a 2-digit birth
            year. None uses the current calendar year.
    """

    reference_year: Optional[int] = Field(
        default=None,
        ge=1700,
        description="Reference year for century resolution"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact fiscal codes and names from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/codice-fiscale.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=True,
        description="Redact fiscal codes and names from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept a standard level name in any case and store it uppercased."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        registry: Municipality registry configuration
        decoding: Decoding configuration
        logging: Logging configuration

    Example:
        >>> config = Config(decoding=DecodingConfig(reference_year=2024))
        >>> config.decoding.reference_year
        2024
        >>> config.registry.active_places_file is None
        True
    """

    registry: RegistryConfig = RegistryConfig()
    decoding: DecodingConfig = DecodingConfig()
    logging: LoggingConfig = LoggingConfig()
