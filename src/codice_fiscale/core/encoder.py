"""Fiscal code generation."""

from typing import Optional

from codice_fiscale.core.checksum import compute_checksum
from codice_fiscale.core.code import CodiceFiscale
from codice_fiscale.core.fields import (
    encode_birth_date,
    encode_birth_place,
    encode_first_name,
    encode_last_name,
)
from codice_fiscale.logging_audit import get_logger
from codice_fiscale.models import Subject
from codice_fiscale.registry import PlaceRegistry
from codice_fiscale.utils.exceptions import BelfioreCodeNotFoundError

logger = get_logger(__name__)


def encode(subject: Subject, registry: Optional[PlaceRegistry] = None) -> CodiceFiscale:
    """Compute the canonical fiscal code of a subject.

    Args:
        subject: Identity record
        registry: Registry to consult (default: the process-wide registry)

    Returns:
        Canonical 16-character fiscal code

    Raises:
        InvalidYearError: If the birth year is before 1700
        BelfioreCodeNotFoundError: If the birth place is in neither registry set

    Example:
        >>> subject = Subject(
        ...     first_name="Maria",
        ...     last_name="Rossi",
        ...     birth_date=date(1970, 1, 1),
        ...     gender=Gender.FEMALE,
        ...     birth_place="Milano",
        ...     birth_province="MI",
        ... )
        >>> str(encode(subject))
        'RSSMRA70A41F205Z'
    """
    date_code = encode_birth_date(subject.birth_date, subject.gender)

    place_code = encode_birth_place(
        subject.birth_place, subject.birth_province, registry=registry
    )
    if place_code is None:
        raise BelfioreCodeNotFoundError(subject.birth_place, subject.birth_province)

    partial = (
        encode_last_name(subject.last_name)
        + encode_first_name(subject.first_name)
        + date_code
        + place_code
    )
    code = CodiceFiscale(partial + compute_checksum(partial))

    logger.debug(f"Encoded fiscal code {code}")
    return code
