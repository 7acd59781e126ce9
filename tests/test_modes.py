"""Test per DatasetMode."""

import pytest

from story_relations.datasets import DatasetMode
from story_relations.exceptions import InvalidDatasetModeError


class TestDatasetMode:
    """Test suite per DatasetMode."""

    def test_closed_set(self):
        """Test insieme chiuso di modalità."""
        assert DatasetMode.values() == ["all", "personaggi", "luoghi"]

    def test_parse_string(self):
        """Test conversione da stringa."""
        assert DatasetMode.parse("personaggi") is DatasetMode.PERSONAGGI
        assert DatasetMode.parse("luoghi") is DatasetMode.LUOGHI

    @pytest.mark.parametrize("value", ["ALL", " luoghi ", "Personaggi"])
    def test_parse_exact_match(self, value):
        """Test nessuna normalizzazione di maiuscole o spazi."""
        with pytest.raises(InvalidDatasetModeError):
            DatasetMode.parse(value)

    def test_parse_enum(self):
        """Test conversione idempotente."""
        assert DatasetMode.parse(DatasetMode.ALL) is DatasetMode.ALL

    @pytest.mark.parametrize("value", ["eventi", "", None, 3, ["all"]])
    def test_parse_invalid(self, value):
        """Test rifiuto valori fuori enumerazione."""
        with pytest.raises(InvalidDatasetModeError):
            DatasetMode.parse(value)

    def test_invalid_is_value_error(self):
        """Test compatibilità con ValueError."""
        with pytest.raises(ValueError):
            DatasetMode.parse("eventi")

    def test_str(self):
        """Test rappresentazione stringa."""
        assert str(DatasetMode.LUOGHI) == "luoghi"
        assert DatasetMode.LUOGHI == "luoghi"
