"""Fiscal code value type."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from codice_fiscale.core.checksum import has_valid_checksum
from codice_fiscale.core.tables import CODE_LENGTH, OMOCODE_POSITIONS
from codice_fiscale.utils.exceptions import IncorrectLengthError, NonAlphanumericError

if TYPE_CHECKING:
    from codice_fiscale.models import DecodedData
    from codice_fiscale.registry import PlaceRegistry


@dataclass(frozen=True)
class CodiceFiscale:
    """A syntactically valid 16-character fiscal code.

    Construction only checks the length and that every character is an ASCII
    letter or digit; the value is stored uppercased. The checksum is NOT
    verified: use has_valid_checksum(), or normalize(), which recomputes it.

    Attributes:
        value: The 16-character code

    Example:
        >>> cf = CodiceFiscale.parse("rssmra70a41f205z")
        >>> str(cf)
        'RSSMRA70A41F205Z'
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != CODE_LENGTH:
            raise IncorrectLengthError(len(self.value))
        if not (self.value.isascii() and self.value.isalnum()):
            raise NonAlphanumericError(self.value)
        object.__setattr__(self, "value", self.value.upper())

    @classmethod
    def parse(cls, text: str) -> "CodiceFiscale":
        """Parse raw text into a fiscal code.

        Raises:
            IncorrectLengthError: If the text is not 16 characters long
            NonAlphanumericError: If the text contains other than A-Z and 0-9
        """
        return cls(text)

    def __str__(self) -> str:
        return self.value

    def is_omocode(self) -> bool:
        """True if any substitutable position holds a letter."""
        return any(not self.value[position].isdigit() for position in OMOCODE_POSITIONS)

    def has_valid_checksum(self) -> bool:
        return has_valid_checksum(self.value)

    def normalize(self) -> "CodiceFiscale":
        """Return the canonical (all-digit) form with a recomputed checksum."""
        from codice_fiscale.core.decoder import normalize

        return normalize(self)

    def all_omocodes(self) -> list["CodiceFiscale"]:
        """Return the 127 omocode variants of this code's canonical form."""
        from codice_fiscale.core.omocode import all_omocodes

        return all_omocodes(self)

    def decode(
        self,
        registry: Optional["PlaceRegistry"] = None,
        reference_year: Optional[int] = None,
    ) -> "DecodedData":
        """Decode birth date, gender and birth place."""
        from codice_fiscale.core.decoder import decode

        return decode(self, registry=registry, reference_year=reference_year)


def as_codice_fiscale(code: Union[CodiceFiscale, str]) -> CodiceFiscale:
    """Return code unchanged if already parsed, otherwise parse it."""
    if isinstance(code, CodiceFiscale):
        return code
    return CodiceFiscale.parse(code)
