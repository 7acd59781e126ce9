"""Test per RelationTable."""

import pytest

from story_relations.datasets import RelationTable
from story_relations.exceptions import RelationTableError, UnknownEntityError


class TestRelationTable:
    """Test suite per RelationTable."""

    def setup_method(self):
        """Setup per ogni test."""
        self.data = {
            "Renzo": ["Lucia", "Agnese"],
            "Lucia": ["Renzo"],
            "Perpetua": [],
        }
        self.table = RelationTable.from_dict(self.data, name="test")

    def test_lookup_preserves_order(self):
        """Test ordine delle liste invariato."""
        assert self.table["Renzo"] == ("Lucia", "Agnese")
        assert self.table.related("Renzo") == ["Lucia", "Agnese"]

    def test_empty_list_allowed(self):
        """Test lista vuota ammessa."""
        assert self.table["Perpetua"] == ()

    def test_entities_and_len(self):
        """Test chiavi e dimensione."""
        assert self.table.entities == ["Renzo", "Lucia", "Perpetua"]
        assert len(self.table) == 3
        assert "Lucia" in self.table
        assert "Griso" not in self.table

    def test_relation_count(self):
        """Test numero relazioni."""
        assert self.table.relation_count() == 3

    def test_unknown_entity(self):
        """Test entità inesistente."""
        with pytest.raises(UnknownEntityError):
            self.table["Griso"]
        with pytest.raises(KeyError):
            self.table.related("Griso")
        assert self.table.get("Griso") is None

    def test_equality_with_dict(self):
        """Test uguaglianza strutturale con il documento sorgente."""
        assert self.table == self.data
        assert self.table != {"Renzo": ["Agnese", "Lucia"], "Lucia": ["Renzo"], "Perpetua": []}
        assert self.table != {"Renzo": ["Lucia", "Agnese"]}

    def test_equality_between_tables(self):
        """Test uguaglianza tra tabelle."""
        other = RelationTable.from_dict(dict(self.data), name="altro")
        assert self.table == other

    def test_to_dict_is_copy(self):
        """Test copia indipendente."""
        copy = self.table.to_dict()
        copy["Renzo"].append("Griso")
        assert self.table["Renzo"] == ("Lucia", "Agnese")

    def test_source_not_shared(self):
        """Test modifiche al dict sorgente non si propagano."""
        self.data["Lucia"].append("Gertrude")
        assert self.table["Lucia"] == ("Renzo",)

    def test_read_only(self):
        """Test assenza di percorsi di modifica."""
        with pytest.raises(TypeError):
            self.table["Griso"] = ["Don Rodrigo"]

    def test_unhashable(self):
        """Test tabella non hashable."""
        with pytest.raises(TypeError):
            hash(self.table)


class TestRelationTableValidation:
    """Test validazione struttura."""

    @pytest.mark.parametrize("data", [
        ["Renzo", "Lucia"],
        "Renzo",
        None,
    ])
    def test_not_a_mapping(self, data):
        """Test documento non oggetto."""
        with pytest.raises(RelationTableError):
            RelationTable.from_dict(data)

    def test_string_value(self):
        """Test valore stringa invece di lista."""
        with pytest.raises(RelationTableError):
            RelationTable.from_dict({"Renzo": "Lucia"})

    def test_non_string_item(self):
        """Test elemento non stringa."""
        with pytest.raises(RelationTableError):
            RelationTable.from_dict({"Renzo": ["Lucia", 3]})

    def test_non_string_key(self):
        """Test chiave non stringa."""
        with pytest.raises(RelationTableError):
            RelationTable.from_dict({1: ["Lucia"]})

    def test_dict_value(self):
        """Test valore oggetto invece di lista."""
        with pytest.raises(RelationTableError):
            RelationTable.from_dict({"Renzo": {"Lucia": 1}})

    def test_empty_table(self):
        """Test tabella vuota."""
        table = RelationTable.from_dict({})
        assert len(table) == 0
        assert table == {}
