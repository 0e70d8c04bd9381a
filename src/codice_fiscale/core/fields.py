"""Field encoders for the first 15 characters of a fiscal code.

Each encoder turns one part of a subject's identity into a fixed-width
fragment:

    RSS MRA 70A41 F205
    |   |   |     +-- birth place (Belfiore code)
    |   |   +-------- birth year, month letter, day (+40 if female)
    |   +------------ given name
    +---------------- surname
"""

from datetime import date
from typing import Optional

from codice_fiscale.core.tables import (
    CONSONANTS,
    FEMALE_DAY_OFFSET,
    MIN_BIRTH_YEAR,
    MONTH_CODES,
    VOWELS,
)
from codice_fiscale.models import Gender
from codice_fiscale.registry import PlaceRegistry, get_default_registry, normalize_city
from codice_fiscale.utils.exceptions import InvalidYearError

NAME_PADDING = "XXX"


def _split_letters(name: str) -> tuple[str, str]:
    """Return (consonants, vowels) of a name, uppercased, in original order."""
    upper = name.upper()
    consonants = "".join(char for char in upper if char not in VOWELS)
    vowels = "".join(char for char in upper if char not in CONSONANTS)
    return consonants, vowels


def encode_last_name(name: str) -> str:
    """Encode a surname as 3 letters.

    Consonants first, then vowels, then X padding.

    Example:
        >>> encode_last_name("De Rossi")
        'DRS'
        >>> encode_last_name("Yu")
        'YUX'
    """
    consonants, vowels = _split_letters(name)
    return (consonants + vowels + NAME_PADDING)[:3]


def encode_first_name(name: str) -> str:
    """Encode a given name as 3 letters.

    Same as the surname rule, except that a name with more than 3 consonants
    uses its 1st, 3rd and 4th consonants.

    Example:
        >>> encode_first_name("Giancarlo")
        'GCR'
        >>> encode_first_name("W")
        'WXX'
    """
    consonants, vowels = _split_letters(name)
    if len(consonants) > 3:
        return consonants[0] + consonants[2] + consonants[3]
    return (consonants + vowels + NAME_PADDING)[:3]


def encode_birth_date(birth_date: date, gender: Gender) -> str:
    """Encode birth date and gender as 5 characters (YY, month letter, DD).

    Args:
        birth_date: Date of birth
        gender: Gender.FEMALE adds 40 to the day of month

    Returns:
        Date fragment, e.g. '70A41'

    Raises:
        InvalidYearError: If the year is before 1700
    """
    if birth_date.year < MIN_BIRTH_YEAR:
        raise InvalidYearError(birth_date.year)

    day = birth_date.day
    if gender is Gender.FEMALE:
        day += FEMALE_DAY_OFFSET

    month = MONTH_CODES[birth_date.month - 1]
    return f"{birth_date.year % 100:02d}{month}{day:02d}"


def encode_birth_place(
    city: str,
    province: str,
    registry: Optional[PlaceRegistry] = None,
) -> Optional[str]:
    """Look up the 4-character Belfiore code of a municipality.

    The city is lowercased with spaces turned into hyphens and the province is
    uppercased before the lookup. Active municipalities are consulted before
    inactive ones.

    Args:
        city: Municipality name
        province: 2-letter province abbreviation
        registry: Registry to consult (default: the process-wide registry)

    Returns:
        Belfiore code, or None if neither registry set knows the place
    """
    if registry is None:
        registry = get_default_registry()
    return registry.lookup_code(normalize_city(city), province.upper())
