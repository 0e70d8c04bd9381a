"""Integration test fixtures.

This module provides the subjects used by the encode/decode workflow tests.
Every subject is born in a municipality present in the shared sample registry.
"""

from datetime import date

import pytest

from codice_fiscale.models import Gender, Subject

# Year the decoder resolves centuries against in these tests
REFERENCE_YEAR = 2026


@pytest.fixture
def reference_year() -> int:
    """Return the reference year used for century resolution."""
    return REFERENCE_YEAR


@pytest.fixture
def subjects() -> list[Subject]:
    """
    Return subjects born between 1930 and 2020.

    Returns:
        list[Subject]: Subjects covering both genders, multi-word names and
            places, and a municipality only known among inactive entries.
    """
    return [
        Subject("Maria", "Rossi", date(1970, 1, 1), Gender.FEMALE, "Milano", "MI"),
        Subject("Giancarlo", "Galan", date(1956, 9, 10), Gender.MALE, "Padova", "PD"),
        Subject("Marco", "Bianchi", date(1990, 3, 15), Gender.MALE, "Roma", "RM"),
        Subject("Anna Maria", "De Luca", date(1930, 12, 31), Gender.FEMALE, "Napoli", "NA"),
        Subject("Yu", "Li", date(2000, 2, 29), Gender.MALE, "Torino", "TO"),
        Subject("Giulia", "Ferri", date(2020, 6, 30), Gender.FEMALE, "Abano Terme", "PD"),
        Subject("Luca", "Zanin", date(1984, 11, 5), Gender.MALE, "San Dona di Piave", "VE"),
        Subject("Elena", "Costa", date(1948, 7, 22), Gender.FEMALE, "Vecchia Citta", "XX"),
    ]
