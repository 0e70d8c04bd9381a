"""Italian fiscal code (codice fiscale) toolkit.

Encode a subject into its 16-character fiscal code, decode a code back into
birth date, gender and birth place, and expand or normalize omocode variants.

Example:
    >>> from datetime import date
    >>> from codice_fiscale import Gender, Subject, encode, decode
    >>> code = encode(Subject("Giancarlo", "Galan", date(1956, 9, 10),
    ...                       Gender.MALE, "Padova", "PD"))
    >>> str(code)
    'GLNGCR56P10G224Q'
"""

from codice_fiscale.core import (
    CodiceFiscale,
    all_omocodes,
    compute_checksum,
    decode,
    encode,
    is_omocode,
    normalize,
)
from codice_fiscale.models import DecodedData, Gender, Subject
from codice_fiscale.registry import InMemoryPlaceRegistry, PlaceRegistry, load_registry
from codice_fiscale.utils.exceptions import (
    CodeValidationError,
    CodiceFiscaleError,
    GenerationError,
)

__version__ = "0.1.0"

__all__ = [
    "CodiceFiscale",
    "Subject",
    "DecodedData",
    "Gender",
    "encode",
    "decode",
    "normalize",
    "all_omocodes",
    "is_omocode",
    "compute_checksum",
    "PlaceRegistry",
    "InMemoryPlaceRegistry",
    "load_registry",
    "CodiceFiscaleError",
    "GenerationError",
    "CodeValidationError",
]
