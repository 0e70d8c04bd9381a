"""Sanitization of free-text name and place strings.

Fiscal code fragments are only defined over the 26 ASCII letters, so every
surname, given name, municipality and province is checked here before it
reaches the field encoders.
"""

from codice_fiscale.utils.exceptions import (
    EmptyStringError,
    NonAlphabeticStringError,
    NonAsciiStringError,
)


def validate_cf_string(value: str, field_name: str = "value") -> str:
    """Validate that a string is non-empty and made of ASCII letters and spaces.

    Args:
        value: String to validate
        field_name: Name of the field, used in error messages

    Returns:
        The unchanged string

    Raises:
        EmptyStringError: If the string is empty
        NonAsciiStringError: If the string contains non-ASCII characters
        NonAlphabeticStringError: If the string contains anything other than
            letters and spaces

    Example:
        >>> validate_cf_string("De Rossi", "last_name")
        'De Rossi'
    """
    if not value:
        raise EmptyStringError("string must not be empty", field_name)

    for char in value:
        if char == " ":
            continue
        if not char.isascii():
            raise NonAsciiStringError(
                f"string must be valid ASCII, found '{char}'. "
                f"Fix: Replace accented letters with their unaccented form.",
                field_name,
            )
        if not char.isalpha():
            raise NonAlphabeticStringError(
                f"string must only have alphabetic or space characters, found '{char}'",
                field_name,
            )

    return value
