"""In-memory municipality registry."""

from collections.abc import Mapping
from typing import Optional

from codice_fiscale.logging_audit import get_logger
from codice_fiscale.registry.base import PLACE_KEY_SEPARATOR, split_place_key

logger = get_logger(__name__)


class InMemoryPlaceRegistry:
    """Registry backed by two immutable key -> code mappings.

    Keys are in the normalized ``"lowercase-hyphenated-city,PROVINCE"`` form.
    The inverse code -> place mappings are derived once at construction;
    when several keys share a code, the first one wins.
    A key without the ``,`` separator raises RegistryLoadError.

    Attributes:
        active: Active municipalities and foreign states
        inactive: Suppressed or renamed municipalities

    Example:
        >>> registry = InMemoryPlaceRegistry({"milano,MI": "F205"})
        >>> registry.lookup_code("milano", "MI")
        'F205'
        >>> registry.lookup_place("F205")
        ('milano', 'MI')
    """

    def __init__(
        self,
        active: Mapping[str, str],
        inactive: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._active = dict(active)
        self._inactive = dict(inactive or {})
        self._active_places = self._invert(self._active)
        self._inactive_places = self._invert(self._inactive)

    @staticmethod
    def _invert(places: Mapping[str, str]) -> dict[str, tuple[str, str]]:
        inverse: dict[str, tuple[str, str]] = {}
        for key, code in places.items():
            inverse.setdefault(code, split_place_key(key))
        return inverse

    def lookup_code(self, normalized_city: str, province: str) -> Optional[str]:
        key = f"{normalized_city}{PLACE_KEY_SEPARATOR}{province}"
        code = self._active.get(key)
        if code is not None:
            return code

        code = self._inactive.get(key)
        if code is not None:
            logger.debug(f"Place {key} resolved from inactive municipalities")
        return code

    def lookup_place(self, code: str) -> Optional[tuple[str, str]]:
        place = self._active_places.get(code)
        if place is not None:
            return place

        place = self._inactive_places.get(code)
        if place is not None:
            logger.debug(f"Place code {code} resolved from inactive municipalities")
        return place

    def __len__(self) -> int:
        return len(self._active) + len(self._inactive)
