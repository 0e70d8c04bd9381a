"""Municipality registry interface.

The encoder and decoder only need two lookups against the Belfiore table:
place key to code, and code back to place. Each lookup consults the active
municipalities first and falls back to inactive (suppressed or renamed) ones.
"""

from typing import Optional, Protocol

from codice_fiscale.utils.exceptions import RegistryLoadError

PLACE_KEY_SEPARATOR = ","


class PlaceRegistry(Protocol):
    """Bidirectional Belfiore code lookup."""

    def lookup_code(self, normalized_city: str, province: str) -> Optional[str]:
        """Return the 4-character place code for a normalized city and province."""
        ...

    def lookup_place(self, code: str) -> Optional[tuple[str, str]]:
        """Return the (normalized city, province) pair for a place code."""
        ...


def normalize_city(city: str) -> str:
    """Lowercase a municipality name and replace spaces with hyphens."""
    return city.replace(" ", "-").lower()


def make_place_key(city: str, province: str) -> str:
    """Build the registry key for a city and province.

    Example:
        >>> make_place_key("Abano Terme", "pd")
        'abano-terme,PD'
    """
    return f"{normalize_city(city)}{PLACE_KEY_SEPARATOR}{province.upper()}"


def split_place_key(key: str) -> tuple[str, str]:
    """Split a registry key back into (normalized city, province).

    Raises:
        RegistryLoadError: If the key has no separator
    """
    city, separator, province = key.rpartition(PLACE_KEY_SEPARATOR)
    if not separator:
        raise RegistryLoadError(
            f"Invalid place key '{key}': expected 'city,PROVINCE'. "
            f"Fix: Build keys with make_place_key(city, province)."
        )
    return city, province
