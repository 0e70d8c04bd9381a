"""Loading of municipality tables from CSV.

Each table has ``code,municipality,province`` columns. Municipality names may
be written either in registry form (``abano-terme``) or plainly
(``Abano Terme``); both normalize to the same key.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

import pandas as pd

from codice_fiscale.config import get_default_config
from codice_fiscale.logging_audit import get_logger
from codice_fiscale.registry.base import make_place_key
from codice_fiscale.registry.memory import InMemoryPlaceRegistry
from codice_fiscale.utils.exceptions import RegistryLoadError

logger = get_logger(__name__)

# Sample tables shipped with the package
PACKAGED_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_ACTIVE_PLACES_FILE = PACKAGED_DATA_DIR / "active_places.csv"
DEFAULT_INACTIVE_PLACES_FILE = PACKAGED_DATA_DIR / "inactive_places.csv"

REQUIRED_COLUMNS = ["code", "municipality", "province"]

PLACE_CODE_PATTERN = re.compile(r"^[A-Z][0-9]{3}$")


def load_place_table(file_path: Path) -> dict[str, str]:
    """Load a municipality table into a place key -> code mapping.

    Every cell is read as a string: the Napoli province abbreviation ``NA``
    must never become a missing value. When a key appears more than once the
    last row wins.

    Args:
        file_path: Path to the CSV table

    Returns:
        Mapping of normalized ``"city,PROVINCE"`` keys to 4-character codes

    Raises:
        RegistryLoadError: If the file is missing, unreadable or malformed
    """
    logger.info(f"Loading municipality table from {file_path}")

    if not file_path.exists():
        raise RegistryLoadError(
            f"Municipality table not found: {file_path}. "
            f"Fix: Check the registry paths in your configuration."
        )

    try:
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False, encoding="utf-8")
    except Exception as e:
        raise RegistryLoadError(
            f"Failed to read municipality table {file_path}. "
            f"Ensure file is valid CSV with UTF-8 encoding. Error: {e}"
        ) from e

    missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_columns:
        raise RegistryLoadError(
            f"Municipality table {file_path} is missing columns: "
            f"{', '.join(missing_columns)}. "
            f"Required columns are: {', '.join(REQUIRED_COLUMNS)}"
        )

    df = df[REQUIRED_COLUMNS].copy()
    for column in REQUIRED_COLUMNS:
        df[column] = df[column].str.strip()
    df["code"] = df["code"].str.upper()

    errors: list[str] = []
    for idx, row in df.iterrows():
        row_num = idx + 2  # +2 because: +1 for header, +1 for 1-indexed
        if not PLACE_CODE_PATTERN.match(row["code"]):
            errors.append(
                f"Row {row_num}: Invalid place code '{row['code']}'. "
                "Expected 1 uppercase letter followed by 3 digits"
            )
        if not row["municipality"] or not row["province"]:
            errors.append(f"Row {row_num}: Missing municipality or province")

    if errors:
        raise RegistryLoadError(
            f"Found {len(errors)} error(s) in {file_path}:\n  - "
            + "\n  - ".join(errors)
        )

    places = {
        make_place_key(municipality, province): code
        for code, municipality, province in zip(
            df["code"], df["municipality"], df["province"]
        )
    }

    duplicates = len(df) - len(places)
    if duplicates:
        logger.warning(
            f"{duplicates} duplicate place key(s) in {file_path}; last row kept"
        )

    logger.info(f"Loaded {len(places)} place(s) from {file_path}")
    return places


def load_registry(
    active_places_file: Optional[Path] = None,
    inactive_places_file: Optional[Path] = None,
) -> InMemoryPlaceRegistry:
    """Build a registry from active and inactive municipality tables.

    Args:
        active_places_file: Active municipalities CSV (default: packaged table)
        inactive_places_file: Inactive municipalities CSV (default: packaged table)

    Returns:
        InMemoryPlaceRegistry over both tables

    Raises:
        RegistryLoadError: If either table cannot be loaded
    """
    active = load_place_table(active_places_file or DEFAULT_ACTIVE_PLACES_FILE)
    inactive = load_place_table(inactive_places_file or DEFAULT_INACTIVE_PLACES_FILE)
    return InMemoryPlaceRegistry(active, inactive)


@lru_cache(maxsize=1)
def get_default_registry() -> InMemoryPlaceRegistry:
    """Return the process-wide registry built from the loaded configuration.

    Built on first use and shared afterwards; it is never mutated.

    Raises:
        ConfigurationError: If the configuration is invalid
        RegistryLoadError: If a configured table cannot be loaded
    """
    registry_config = get_default_config().registry
    return load_registry(
        registry_config.active_places_file,
        registry_config.inactive_places_file,
    )


def reset_default_registry() -> None:
    """Drop the cached default registry so the next use reloads configuration.

    Primarily for testing purposes.
    """
    get_default_registry.cache_clear()
    logger.debug("Reset default municipality registry")
