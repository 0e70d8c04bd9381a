"""Custom exception classes for the codice fiscale toolkit.

All exceptions inherit from CodiceFiscaleError to allow catching all custom exceptions.
Encoding failures derive from GenerationError, failures while parsing, normalizing
or decoding an existing code derive from CodeValidationError.
"""

from typing import Optional


class CodiceFiscaleError(Exception):
    """Base exception for all codice fiscale toolkit custom exceptions."""

    pass


class GenerationError(CodiceFiscaleError):
    """Raised when a fiscal code cannot be generated for a subject.

    Examples:
        - Birth place missing from the municipality registry
        - Birth year outside the supported range
    """

    pass


class BelfioreCodeNotFoundError(GenerationError):
    """Raised when a city/province pair is absent from both registry sets."""

    def __init__(self, city: str, province: str) -> None:
        self.city = city
        self.province = province
        super().__init__(
            f"Could not find a Belfiore code for city '{city}' in province '{province}'. "
            f"Fix: Check the municipality spelling and the 2-letter province abbreviation."
        )


class IncorrectChecksumInputLengthError(GenerationError):
    """Raised when the checksum input is not exactly 15 characters long."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Checksum input must be 15 characters long, got {length}."
        )


class InvalidYearError(GenerationError):
    """Raised when the birth year predates the registry (before 1700)."""

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"The birth year must be 1700 or later, got {year}.")


class CodeValidationError(CodiceFiscaleError):
    """Raised when an existing fiscal code is malformed or cannot be decoded.

    Examples:
        - Wrong length or non alphanumeric characters
        - Omocode letter outside the substitution alphabet
        - Month letter or date with no calendar representation
        - Place code not present in the registry
    """

    pass


class IncorrectLengthError(CodeValidationError):
    """Raised when a raw fiscal code is not exactly 16 characters long."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"A fiscal code must be 16 characters long, got {length}."
        )


class NonAlphanumericError(CodeValidationError):
    """Raised when a raw fiscal code contains characters other than A-Z and 0-9."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            "A fiscal code may only contain ASCII letters and digits."
        )


class InvalidOmocodeLetterError(CodeValidationError):
    """Raised when a substitutable position holds a letter outside L-V omocode letters."""

    def __init__(self, position: int, letter: str) -> None:
        self.position = position
        self.letter = letter
        super().__init__(
            f"Invalid omocode letter '{letter}' at position {position}. "
            f"Must be a digit or one of: L, M, N, P, Q, R, S, T, U, V"
        )


class InvalidMonthLetterError(CodeValidationError):
    """Raised when position 8 does not hold one of the twelve month letters."""

    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(
            f"Invalid month letter '{letter}'. "
            f"Must be one of: A, B, C, D, E, H, L, M, P, R, S, T"
        )


class InvalidDateError(CodeValidationError):
    """Raised when the date fragment decodes to a date with no calendar representation."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(
            f"Date fragment decodes to an invalid date: {year:04d}-{month:02d}-{day:02d}"
        )


class UnknownPlaceCodeError(CodeValidationError):
    """Raised when the place fragment matches neither registry set."""

    def __init__(self, place_code: str) -> None:
        self.place_code = place_code
        super().__init__(
            f"Unknown place code '{place_code}'. "
            f"Fix: Check that the municipality registry includes inactive municipalities."
        )


class InvalidStringError(CodiceFiscaleError):
    """Raised when a name or place string is not plain ASCII letters and spaces.

    Examples:
        - Empty first name
        - Accented characters (use the unaccented letter)
        - Digits, apostrophes or hyphens
    """

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        self.field_name = field_name
        if field_name:
            message = f"{field_name}: {message}"
        super().__init__(message)


class EmptyStringError(InvalidStringError):
    """Raised when a name or place string is empty."""

    pass


class NonAsciiStringError(InvalidStringError):
    """Raised when a name or place string contains non-ASCII characters."""

    pass


class NonAlphabeticStringError(InvalidStringError):
    """Raised when a name or place string contains characters other than letters and spaces."""

    pass


class InvalidSubjectError(CodiceFiscaleError):
    """Raised when a subject field has the wrong type or an unknown value.

    Examples:
        - Birth date given as a string instead of a date
        - Gender other than M/F, male/female or a Gender member
    """

    def __init__(self, message: str, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name}: {message}")


class ConfigurationError(CodiceFiscaleError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    pass


class RegistryLoadError(CodiceFiscaleError):
    """Raised when a municipality table cannot be loaded.

    Examples:
        - File not found
        - Missing code/municipality/province columns
        - Place code not in the 1 letter + 3 digits format
    """

    pass
