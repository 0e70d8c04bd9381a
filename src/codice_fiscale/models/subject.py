"""Subject and decoded data models.

This module defines the identity record a fiscal code is computed from and the
record recovered when a fiscal code is decoded.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from codice_fiscale.utils.exceptions import InvalidSubjectError
from codice_fiscale.utils.sanitizer import validate_cf_string


class Gender(Enum):
    """Gender as encoded in the day fragment of a fiscal code."""

    MALE = "M"
    FEMALE = "F"

    @classmethod
    def parse(cls, value: str) -> "Gender":
        """Parse a gender from 'M'/'F' or 'male'/'female' (case-insensitive).

        Raises:
            ValueError: If the value is not a recognised gender
        """
        normalized = value.strip().upper()
        if normalized in ("M", "MALE"):
            return cls.MALE
        if normalized in ("F", "FEMALE"):
            return cls.FEMALE
        raise ValueError(
            f"Invalid gender '{value}'. Must be one of: M, F (case-insensitive)"
        )


@dataclass(frozen=True)
class Subject:
    """Identity record a fiscal code is computed from.

    String fields are sanitized on construction: they must be non-empty and
    contain only ASCII letters and spaces. A gender given as text ("F",
    "male") is converted to its Gender member.

    Attributes:
        first_name: Given name(s)
        last_name: Surname(s)
        birth_date: Date of birth (year 1700 or later to be encodable)
        gender: Gender.MALE or Gender.FEMALE
        birth_place: Municipality name, as spelled in the registry
        birth_province: 2-letter province abbreviation
    """

    first_name: str
    last_name: str
    birth_date: date
    gender: Gender
    birth_place: str
    birth_province: str

    def __post_init__(self) -> None:
        validate_cf_string(self.first_name, "first_name")
        validate_cf_string(self.last_name, "last_name")
        validate_cf_string(self.birth_place, "birth_place")
        validate_cf_string(self.birth_province, "birth_province")

        if not isinstance(self.birth_date, date):
            raise InvalidSubjectError(
                f"expected a date, got {type(self.birth_date).__name__}", "birth_date"
            )

        if isinstance(self.gender, str):
            try:
                object.__setattr__(self, "gender", Gender.parse(self.gender))
            except ValueError as e:
                raise InvalidSubjectError(str(e), "gender") from e
        elif not isinstance(self.gender, Gender):
            raise InvalidSubjectError(
                f"expected Gender or M/F, got {type(self.gender).__name__}", "gender"
            )


@dataclass(frozen=True)
class DecodedData:
    """Data recovered from a fiscal code.

    Attributes:
        birth_date: Date of birth (century resolved heuristically)
        gender: Gender.MALE or Gender.FEMALE
        birth_place: Municipality name in lowercase, as stored in the registry
        birth_province: 2-letter province abbreviation
    """

    birth_date: date
    gender: Gender
    birth_place: str
    birth_province: str
