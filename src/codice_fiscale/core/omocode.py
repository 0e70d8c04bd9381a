"""Omocode variant expansion.

When two people share the same first 15 characters, the tax office issues
the later one a variant in which some of the seven digits at positions
6, 7, 9, 10, 12, 13 and 14 are replaced by letters (0 -> L, 1 -> M, ... 9 -> V).
Any non-empty subset of those positions may be substituted, giving 127
variants per canonical code.
"""

from itertools import combinations
from typing import Union

from codice_fiscale.core.checksum import compute_checksum
from codice_fiscale.core.code import CodiceFiscale, as_codice_fiscale
from codice_fiscale.core.decoder import normalize
from codice_fiscale.core.tables import (
    OMOCODE_LETTERS,
    OMOCODE_POSITIONS,
    PARTIAL_CODE_LENGTH,
)

# All non-empty subsets of the substitutable positions, smallest first.
# Built at import time and never mutated.
OMOCODE_SUBSETS: tuple[tuple[int, ...], ...] = tuple(
    subset
    for size in range(1, len(OMOCODE_POSITIONS) + 1)
    for subset in combinations(OMOCODE_POSITIONS, size)
)


def is_omocode(code: Union[CodiceFiscale, str]) -> bool:
    """True if any substitutable position of the code holds a letter."""
    return as_codice_fiscale(code).is_omocode()


def all_omocodes(code: Union[CodiceFiscale, str]) -> list[CodiceFiscale]:
    """Enumerate the 127 omocode variants of a fiscal code.

    An omocode input is normalized first, so the variants are always those of
    the canonical code; the canonical code itself is not included. Each
    variant carries its own recomputed checksum.

    Args:
        code: Fiscal code or raw 16-character string

    Returns:
        List of 127 distinct fiscal codes

    Raises:
        CodeValidationError: If the code cannot be parsed or normalized
    """
    partial = normalize(code).value[:PARTIAL_CODE_LENGTH]

    variants = []
    for subset in OMOCODE_SUBSETS:
        chars = list(partial)
        for position in subset:
            chars[position] = OMOCODE_LETTERS[int(chars[position])]
        variant = "".join(chars)
        variants.append(CodiceFiscale(variant + compute_checksum(variant)))

    return variants
