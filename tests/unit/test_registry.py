"""Unit tests for the municipality registry."""

from pathlib import Path

import pytest

from codice_fiscale.registry import (
    InMemoryPlaceRegistry,
    get_default_registry,
    load_place_table,
    load_registry,
    make_place_key,
    reset_default_registry,
)
from codice_fiscale.registry.base import normalize_city, split_place_key
from codice_fiscale.utils.exceptions import CodiceFiscaleError, RegistryLoadError


class TestPlaceKeys:
    """Test suite for place key helpers."""

    @pytest.mark.parametrize(
        "city,province,expected",
        [
            ("Milano", "MI", "milano,MI"),
            ("Abano Terme", "pd", "abano-terme,PD"),
            ("abano-terme", "PD", "abano-terme,PD"),
            ("SAN DONA DI PIAVE", "Ve", "san-dona-di-piave,VE"),
        ],
    )
    def test_make_place_key(self, city: str, province: str, expected: str) -> None:
        """Test keys are lowercase-hyphenated city and uppercase province."""
        # Act & Assert
        assert make_place_key(city, province) == expected

    def test_normalize_city(self) -> None:
        """Test spaces become hyphens and case is folded."""
        # Act & Assert
        assert normalize_city("Reggio nell Emilia") == "reggio-nell-emilia"

    def test_split_place_key(self) -> None:
        """Test a key splits back into city and province."""
        # Act & Assert
        assert split_place_key("abano-terme,PD") == ("abano-terme", "PD")

    def test_split_place_key_without_separator(self) -> None:
        """Test a malformed key is rejected."""
        # Act & Assert
        with pytest.raises(RegistryLoadError, match="Invalid place key"):
            split_place_key("milano")


class TestInMemoryPlaceRegistry:
    """Test suite for InMemoryPlaceRegistry."""

    def test_lookup_code_active(self, sample_registry) -> None:
        """Test lookup of an active municipality."""
        # Act & Assert
        assert sample_registry.lookup_code("milano", "MI") == "F205"

    def test_lookup_code_inactive_fallback(self, sample_registry) -> None:
        """Test inactive municipalities are consulted after active ones."""
        # Act & Assert
        assert sample_registry.lookup_code("abano", "PD") == "A001"

    def test_lookup_code_unknown(self, sample_registry) -> None:
        """Test unknown keys return None."""
        # Act & Assert
        assert sample_registry.lookup_code("milano", "RM") is None

    def test_lookup_place_prefers_active(self, sample_registry) -> None:
        """Test a code present in both sets resolves to the active place."""
        # Act & Assert
        assert sample_registry.lookup_place("A001") == ("abano-terme", "PD")

    def test_lookup_place_inactive_only(self, sample_registry) -> None:
        """Test a code only found among inactive places is resolved."""
        # Act & Assert
        assert sample_registry.lookup_place("Z999") == ("vecchia-citta", "XX")

    def test_lookup_place_unknown(self, sample_registry) -> None:
        """Test an unknown code returns None."""
        # Act & Assert
        assert sample_registry.lookup_place("Z000") is None

    def test_inverse_keeps_first_key_for_shared_code(self) -> None:
        """Test the first key wins when several keys share a code."""
        # Arrange
        registry = InMemoryPlaceRegistry({"alpha,AA": "A123", "beta,BB": "A123"})

        # Act & Assert
        assert registry.lookup_place("A123") == ("alpha", "AA")
        assert registry.lookup_code("beta", "BB") == "A123"

    def test_registry_copies_input(self) -> None:
        """Test later changes to the source mapping do not leak in."""
        # Arrange
        active = {"milano,MI": "F205"}
        registry = InMemoryPlaceRegistry(active)

        # Act
        active["roma,RM"] = "H501"

        # Assert
        assert registry.lookup_code("roma", "RM") is None
        assert len(registry) == 1

    def test_key_without_province_rejected(self) -> None:
        """Test a mapping key missing the province raises RegistryLoadError."""
        # Act & Assert
        with pytest.raises(RegistryLoadError, match="Invalid place key 'milano'"):
            InMemoryPlaceRegistry({"milano": "F205"})

    def test_inactive_key_without_province_rejected(self) -> None:
        """Test malformed inactive keys are rejected too."""
        # Act & Assert
        with pytest.raises(CodiceFiscaleError):
            InMemoryPlaceRegistry({"milano,MI": "F205"}, {"abano": "A001"})

    def test_empty_registry(self) -> None:
        """Test an empty registry answers every lookup with None."""
        # Arrange
        registry = InMemoryPlaceRegistry({})

        # Act & Assert
        assert len(registry) == 0
        assert registry.lookup_code("milano", "MI") is None
        assert registry.lookup_place("F205") is None


class TestLoadPlaceTable:
    """Test suite for load_place_table function."""

    def test_load_valid_table(self, fixtures_dir: Path) -> None:
        """Test loading a well-formed table."""
        # Act
        places = load_place_table(fixtures_dir / "active_places.csv")

        # Assert
        assert places["milano,MI"] == "F205"
        assert places["padova,PD"] == "G224"
        assert len(places) == 4

    def test_province_na_is_not_missing(self, fixtures_dir: Path) -> None:
        """Test the Napoli province abbreviation is read as text."""
        # Act
        places = load_place_table(fixtures_dir / "active_places.csv")

        # Assert
        assert places["napoli,NA"] == "F839"

    def test_plain_names_are_normalized(self, fixtures_dir: Path) -> None:
        """Test plainly written names and provinces are normalized into keys."""
        # Act
        places = load_place_table(fixtures_dir / "active_places.csv")

        # Assert
        assert places["san-dona-di-piave,VE"] == "H823"

    def test_whitespace_and_lowercase_codes(self, tmp_path: Path) -> None:
        """Test cells are stripped and codes uppercased."""
        # Arrange
        csv_file = tmp_path / "places.csv"
        csv_file.write_text("code,municipality,province\n f205 , milano , MI \n")

        # Act
        places = load_place_table(csv_file)

        # Assert
        assert places == {"milano,MI": "F205"}

    def test_duplicate_keys_last_row_wins(self, tmp_path: Path, caplog) -> None:
        """Test a repeated key keeps the code from its last row."""
        # Arrange
        csv_file = tmp_path / "places.csv"
        csv_file.write_text(
            "code,municipality,province\nF205,milano,MI\nF206,Milano,mi\n"
        )

        # Act
        places = load_place_table(csv_file)

        # Assert
        assert places == {"milano,MI": "F206"}
        assert "duplicate place key" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises RegistryLoadError."""
        # Act & Assert
        with pytest.raises(RegistryLoadError, match="not found"):
            load_place_table(tmp_path / "nope.csv")

    def test_missing_columns(self, fixtures_dir: Path) -> None:
        """Test a table without the required columns is rejected."""
        # Act & Assert
        with pytest.raises(RegistryLoadError, match="missing columns") as exc_info:
            load_place_table(fixtures_dir / "missing_columns.csv")

        assert "municipality" in str(exc_info.value)
        assert "province" in str(exc_info.value)

    def test_invalid_rows_are_collected(self, fixtures_dir: Path) -> None:
        """Test every malformed row is reported in one error."""
        # Act & Assert
        with pytest.raises(RegistryLoadError) as exc_info:
            load_place_table(fixtures_dir / "invalid_codes.csv")

        message = str(exc_info.value)
        assert "Found 3 error(s)" in message
        assert "Row 2" in message
        assert "Row 3" in message
        assert "Row 4: Missing municipality or province" in message

    def test_header_only_table(self, tmp_path: Path) -> None:
        """Test a table with no rows loads as empty."""
        # Arrange
        csv_file = tmp_path / "places.csv"
        csv_file.write_text("code,municipality,province\n")

        # Act & Assert
        assert load_place_table(csv_file) == {}


class TestLoadRegistry:
    """Test suite for registry construction from tables."""

    def test_load_registry_from_files(self, fixtures_dir: Path) -> None:
        """Test both tables are loaded into one registry."""
        # Act
        registry = load_registry(
            fixtures_dir / "active_places.csv",
            fixtures_dir / "inactive_places.csv",
        )

        # Assert
        assert registry.lookup_code("padova", "PD") == "G224"
        assert registry.lookup_code("abano", "PD") == "A001"
        assert registry.lookup_place("A001") == ("abano", "PD")
        assert len(registry) == 5

    def test_load_registry_packaged_tables(self) -> None:
        """Test the packaged tables are used by default."""
        # Act
        registry = load_registry()

        # Assert
        assert registry.lookup_code("milano", "MI") == "F205"
        assert registry.lookup_code("abano", "PD") == "A001"
        assert registry.lookup_place("A001") == ("abano-terme", "PD")


class TestDefaultRegistry:
    """Test suite for the process-wide registry."""

    def test_default_registry_is_cached(self) -> None:
        """Test the same instance is returned until reset."""
        # Act
        first = get_default_registry()
        second = get_default_registry()
        reset_default_registry()
        third = get_default_registry()

        # Assert
        assert first is second
        assert third is not first

    def test_default_registry_uses_packaged_tables(self) -> None:
        """Test the default registry answers from the packaged tables."""
        # Act & Assert
        assert get_default_registry().lookup_code("roma", "RM") == "H501"

    def test_default_registry_env_override(
        self, fixtures_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test CF_ACTIVE_PLACES_FILE selects another active table."""
        # Arrange
        monkeypatch.setenv("CF_ACTIVE_PLACES_FILE", str(fixtures_dir / "active_places.csv"))

        # Act
        registry = get_default_registry()

        # Assert
        assert registry.lookup_code("san-dona-di-piave", "VE") == "H823"
        assert registry.lookup_code("roma", "RM") is None
