"""Registry module.

This module provides the municipality (Belfiore code) registry used to encode
and decode the birth place fragment.
"""

from codice_fiscale.registry.base import (
    PlaceRegistry,
    make_place_key,
    normalize_city,
    split_place_key,
)
from codice_fiscale.registry.loader import (
    get_default_registry,
    load_place_table,
    load_registry,
    reset_default_registry,
)
from codice_fiscale.registry.memory import InMemoryPlaceRegistry

__all__ = [
    "PlaceRegistry",
    "InMemoryPlaceRegistry",
    "make_place_key",
    "normalize_city",
    "split_place_key",
    "load_place_table",
    "load_registry",
    "get_default_registry",
    "reset_default_registry",
]
