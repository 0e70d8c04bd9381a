"""Normalization and decoding of fiscal codes.

Decoding always works on the canonical form: omocode letters in the seven
substitutable positions are first mapped back to digits and the checksum is
recomputed.

The century of the 2-digit birth year is not stored in the code. It is
resolved against a reference year (default: the configured year, else the
current year): a 2-digit year lower than the reference year's last two digits
is taken as 20xx, any other as 19xx. People more than a century old, or born
in the reference year itself, therefore decode to the wrong century.
"""

from datetime import date
from typing import Optional, Union

from codice_fiscale.config import get_default_config
from codice_fiscale.core.checksum import compute_checksum
from codice_fiscale.core.code import CodiceFiscale, as_codice_fiscale
from codice_fiscale.core.tables import (
    FEMALE_DAY_OFFSET,
    MONTH_CODES,
    OMOCODE_LETTERS,
    OMOCODE_POSITIONS,
    PARTIAL_CODE_LENGTH,
)
from codice_fiscale.logging_audit import get_logger
from codice_fiscale.models import DecodedData, Gender
from codice_fiscale.registry import PlaceRegistry, get_default_registry
from codice_fiscale.utils.exceptions import (
    InvalidDateError,
    InvalidMonthLetterError,
    InvalidOmocodeLetterError,
    UnknownPlaceCodeError,
)

logger = get_logger(__name__)


def normalize(code: Union[CodiceFiscale, str]) -> CodiceFiscale:
    """Convert an omocode variant back to its canonical all-digit form.

    Digits are left alone; letters in the substitutable positions are mapped
    back through the omocode alphabet. The checksum is recomputed, so the
    result of normalizing any syntactically valid code carries a correct one.

    Args:
        code: Fiscal code or raw 16-character string

    Returns:
        Canonical fiscal code

    Raises:
        IncorrectLengthError: If a raw string is not 16 characters long
        NonAlphanumericError: If a raw string is not alphanumeric
        InvalidOmocodeLetterError: If a substitutable position holds a letter
            outside L, M, N, P, Q, R, S, T, U, V

    Example:
        >>> str(normalize("CCCFBAURDLPLNMVU"))
        'CCCFBA85D03L219P'
    """
    code = as_codice_fiscale(code)
    chars = list(code.value[:PARTIAL_CODE_LENGTH])

    for position in OMOCODE_POSITIONS:
        char = chars[position]
        if char.isdigit():
            continue
        digit = OMOCODE_LETTERS.find(char)
        if digit < 0:
            raise InvalidOmocodeLetterError(position, char)
        chars[position] = str(digit)

    partial = "".join(chars)
    return CodiceFiscale(partial + compute_checksum(partial))


def _resolve_reference_year(reference_year: Optional[int]) -> int:
    if reference_year is not None:
        return reference_year
    configured = get_default_config().decoding.reference_year
    if configured is not None:
        return configured
    return date.today().year


def _decode_date(canonical: str, reference_year: int) -> tuple[date, Gender]:
    parsed_year = int(canonical[6:8])
    if reference_year % 100 > parsed_year:
        year = 2000 + parsed_year
    else:
        year = 1900 + parsed_year

    month_letter = canonical[8]
    month_index = MONTH_CODES.find(month_letter)
    if month_index < 0:
        raise InvalidMonthLetterError(month_letter)
    month = month_index + 1

    day = int(canonical[9:11])
    gender = Gender.MALE
    if day > FEMALE_DAY_OFFSET:
        day -= FEMALE_DAY_OFFSET
        gender = Gender.FEMALE

    try:
        return date(year, month, day), gender
    except ValueError as e:
        raise InvalidDateError(year, month, day) from e


def _decode_birth_place(canonical: str, registry: PlaceRegistry) -> tuple[str, str]:
    place_code = canonical[11:15]
    place = registry.lookup_place(place_code)
    if place is None:
        raise UnknownPlaceCodeError(place_code)
    city, province = place
    return city.replace("-", " "), province


def decode_date(
    code: Union[CodiceFiscale, str],
    reference_year: Optional[int] = None,
) -> tuple[date, Gender]:
    """Decode birth date and gender from positions 6-10.

    Args:
        code: Fiscal code (canonical or omocode) or raw string
        reference_year: Year used for century resolution

    Returns:
        Tuple of (birth date, gender)

    Raises:
        InvalidOmocodeLetterError: If the code cannot be normalized
        InvalidMonthLetterError: If position 8 is not a month letter
        InvalidDateError: If the fragment is not a calendar date
    """
    canonical = normalize(code).value
    return _decode_date(canonical, _resolve_reference_year(reference_year))


def decode_birth_place(
    code: Union[CodiceFiscale, str],
    registry: Optional[PlaceRegistry] = None,
) -> tuple[str, str]:
    """Decode the birth place from positions 11-14.

    Args:
        code: Fiscal code (canonical or omocode) or raw string
        registry: Registry to consult (default: the process-wide registry)

    Returns:
        Tuple of (municipality with spaces, province)

    Raises:
        InvalidOmocodeLetterError: If the code cannot be normalized
        UnknownPlaceCodeError: If neither registry set knows the place code
    """
    if registry is None:
        registry = get_default_registry()
    canonical = normalize(code).value
    return _decode_birth_place(canonical, registry)


def decode(
    code: Union[CodiceFiscale, str],
    registry: Optional[PlaceRegistry] = None,
    reference_year: Optional[int] = None,
) -> DecodedData:
    """Decode birth date, gender and birth place from a fiscal code.

    The checksum of the input is not checked: the code is normalized first,
    which recomputes it.

    Args:
        code: Fiscal code (canonical or omocode) or raw string
        registry: Registry to consult (default: the process-wide registry)
        reference_year: Year used for century resolution

    Returns:
        DecodedData

    Raises:
        CodeValidationError: Any of the parsing, normalization or decoding errors

    Example:
        >>> decode("RSSMRA70A41F205Z", reference_year=2024).birth_date
        datetime.date(1970, 1, 1)
    """
    if registry is None:
        registry = get_default_registry()

    canonical = normalize(code).value
    birth_date, gender = _decode_date(canonical, _resolve_reference_year(reference_year))
    birth_place, birth_province = _decode_birth_place(canonical, registry)

    logger.debug(f"Decoded fiscal code {canonical}")
    return DecodedData(
        birth_date=birth_date,
        gender=gender,
        birth_place=birth_place,
        birth_province=birth_province,
    )
