"""Core module.

This module provides fiscal code encoding, checksum, normalization, decoding
and omocode expansion.
"""

from codice_fiscale.core.checksum import compute_checksum, has_valid_checksum
from codice_fiscale.core.code import CodiceFiscale
from codice_fiscale.core.decoder import decode, decode_birth_place, decode_date, normalize
from codice_fiscale.core.encoder import encode
from codice_fiscale.core.fields import (
    encode_birth_date,
    encode_birth_place,
    encode_first_name,
    encode_last_name,
)
from codice_fiscale.core.omocode import OMOCODE_SUBSETS, all_omocodes, is_omocode

__all__ = [
    "CodiceFiscale",
    "compute_checksum",
    "has_valid_checksum",
    "encode",
    "encode_last_name",
    "encode_first_name",
    "encode_birth_date",
    "encode_birth_place",
    "normalize",
    "decode",
    "decode_date",
    "decode_birth_place",
    "all_omocodes",
    "is_omocode",
    "OMOCODE_SUBSETS",
]
