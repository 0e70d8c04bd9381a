"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

from pathlib import Path

import pytest

from codice_fiscale.config import reset_default_config
from codice_fiscale.registry import InMemoryPlaceRegistry, reset_default_registry

CF_ENV_VARS = [
    "CF_ACTIVE_PLACES_FILE",
    "CF_INACTIVE_PLACES_FILE",
    "CF_REFERENCE_YEAR",
    "CF_LOG_LEVEL",
    "CF_LOG_FILE",
    "CF_REDACT_PII",
]


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch: pytest.MonkeyPatch):
    """
    Clear CF_* environment overrides and the cached config and registry.

    Every test starts from the packaged defaults, whatever the developer's
    shell or a previous test configured.
    """
    for name in CF_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_default_config()
    reset_default_registry()
    yield
    reset_default_config()
    reset_default_registry()


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """
    Return the test fixtures directory path.

    Returns:
        Path: Absolute path to the test fixtures directory.
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_registry() -> InMemoryPlaceRegistry:
    """
    Return a small registry with active and inactive municipalities.

    Returns:
        InMemoryPlaceRegistry: Registry independent of any CSV file.
    """
    return InMemoryPlaceRegistry(
        active={
            "milano,MI": "F205",
            "padova,PD": "G224",
            "roma,RM": "H501",
            "torino,TO": "L219",
            "abano-terme,PD": "A001",
            "san-dona-di-piave,VE": "H823",
            "napoli,NA": "F839",
        },
        inactive={
            "abano,PD": "A001",
            "vecchia-citta,XX": "Z999",
        },
    )
