"""Tests unitaires pour la sérialisation."""

from ordered_ini.dotconf.handle import SectionHandle
from ordered_ini.dotconf.loader import load_lines, loads
from ordered_ini.dotconf.serializer import (
    dumps,
    entry_problem,
    header_problem,
    render_key_value,
    serialize,
)
from ordered_ini.dotconf.store import SectionStore


class TestSerialize:
    """Tests pour serialize et dumps."""

    def test_round_trip_normalizes_spacing(self):
        """Le contenu est conservé, l'espacement normalisé."""
        store = loads("[A]\nk=1\n  long key   =  a value  \n[B]\nx = y\n")
        assert serialize(store) == [
            "[A]",
            "k = 1",
            "long key = a value",
            "",
            "[B]",
            "x = y",
            "",
        ]

    def test_round_trip_reloads_identically(self):
        """Recharger la sortie redonne les mêmes sections et valeurs."""
        text = "[s]\na = 1\n\n[t]\nb = 2\n\n[s]\nc = 3\n\n"
        assert dumps(loads(text)) == text
        assert dumps(loads(dumps(loads(text)))) == text

    def test_sections_sorted_by_line(self):
        """La section de la ligne 3 précède celle de la ligne 10."""
        store = SectionStore()
        store.insert_section("ten", 10)
        store.insert_section("three", 3)
        assert serialize(store) == ["[three]", "", "[ten]", ""]

    def test_keys_sorted_by_line(self):
        """Les clés suivent leur ligne, pas leur ordre d'insertion."""
        store = SectionStore()
        handle = store.insert_section("s", 1)
        record = store.resolve(handle)
        store.add_key(record, "late", "2", 5)
        store.add_key(record, "early", "1", 2)
        assert serialize(store) == ["[s]", "early = 1", "late = 2", ""]

    def test_created_elements_after_parsed(self):
        """Sections et clés créées sont écrites après celles du fichier."""
        store = load_lines(["[a]", "k = 1", "[b]"])
        new = store.insert_section("a")
        store.set_value(store.resolve(new), "n", "x")
        store.set_value(store.resolve(SectionHandle("a")), "z", "2")
        assert serialize(store) == [
            "[a]", "k = 1", "z = 2", "",
            "[b]", "",
            "[a]", "n = x", "",
        ]

    def test_empty_store(self):
        """Un store vide ne produit aucune ligne."""
        assert serialize(SectionStore()) == []
        assert dumps(SectionStore()) == ""

    def test_serialize_is_repeatable(self):
        """Sérialiser ne modifie pas le store."""
        store = loads("[a]\nk = 1\n")
        assert serialize(store) == serialize(store)


def test_render_key_value():
    """Une espace de chaque côté du '='."""
    assert render_key_value("k", "v") == "k = v"


class TestEntryProblem:
    """Tests pour entry_problem et header_problem."""

    def test_valid_entries(self):
        assert entry_problem("k", "v") is None
        assert entry_problem("long key", "a = b") is None
        assert entry_problem("k", "[ouvert") is None

    def test_reasons(self):
        assert entry_problem("k", "") == "clé ou valeur vide"
        assert entry_problem("k", "a\nb") == "saut de ligne"
        assert "relue" in entry_problem("a=b", "v")
        assert "relue" in entry_problem("k", "[x]")
        assert "relue" in entry_problem("k", "v ")

    def test_header(self):
        assert header_problem("server") is None
        assert header_problem("a]b") is None
        assert header_problem("a\nb") == "saut de ligne"
