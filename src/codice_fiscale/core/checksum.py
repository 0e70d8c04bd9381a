"""Checksum letter computation.

The 16th character of a fiscal code is derived from the first 15 by scoring
each character through one of four substitution tables (chosen by position
parity and character class), summing the scores and reducing modulo 26.
The checksum catches transcription errors; it offers no security.
"""

from codice_fiscale.core.tables import (
    CHECK_CODE_LET_EVEN,
    CHECK_CODE_LET_ODD,
    CHECK_CODE_NUM_EVEN,
    CHECK_CODE_NUM_ODD,
    CODE_LENGTH,
    PARTIAL_CODE_LENGTH,
)
from codice_fiscale.utils.exceptions import (
    IncorrectChecksumInputLengthError,
    NonAlphanumericError,
)


def compute_checksum(partial: str) -> str:
    """Compute the checksum letter for the first 15 characters of a code.

    Args:
        partial: The first 15 characters of a fiscal code (case-insensitive)

    Returns:
        Checksum letter A-Z

    Raises:
        IncorrectChecksumInputLengthError: If partial is not 15 characters long
        NonAlphanumericError: If partial contains anything but ASCII letters and digits

    Example:
        >>> compute_checksum("RSSMRA70A41F205")
        'Z'
    """
    if len(partial) != PARTIAL_CODE_LENGTH:
        raise IncorrectChecksumInputLengthError(len(partial))
    if not (partial.isascii() and partial.isalnum()):
        raise NonAlphanumericError(partial)

    total = 0
    for position, char in enumerate(partial.upper(), start=1):
        if position % 2 == 0:
            if char.isdigit():
                total += CHECK_CODE_NUM_EVEN[int(char)]
            else:
                total += CHECK_CODE_LET_EVEN[ord(char) - ord("A")]
        else:
            if char.isdigit():
                total += CHECK_CODE_NUM_ODD[int(char)]
            else:
                total += CHECK_CODE_LET_ODD[ord(char) - ord("A")]

    return chr(ord("A") + total % 26)


def has_valid_checksum(code: str) -> bool:
    """Check whether the last character of a code is its checksum letter.

    Args:
        code: A 16-character fiscal code (case-insensitive)

    Returns:
        True if the checksum matches, False otherwise (including malformed input)
    """
    if len(code) != CODE_LENGTH or not (code.isascii() and code.isalnum()):
        return False
    return compute_checksum(code[:PARTIAL_CODE_LENGTH]) == code[-1].upper()
