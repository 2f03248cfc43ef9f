"""Tests for merging per-language flat maps."""

from transcompare.engine.aggregator import aggregate, build_key_universe
from transcompare.models.enums import MISSING


class TestKeyUniverse:
    """Test key universe ordering."""

    def test_first_seen_order(self):
        """Keys keep the position where they first appear."""
        flat_maps = {
            "en": {"b": "B", "a": "A"},
            "fr": {"c": "C", "a": "A2", "d": "D"},
        }
        assert build_key_universe(flat_maps) == ["b", "a", "c", "d"]

    def test_no_languages(self):
        """No languages, no keys."""
        assert build_key_universe({}) == []

    def test_language_order_matters(self):
        """Swapping languages changes the order of first appearance."""
        en = {"x": 1}
        fr = {"y": 2, "x": 3}
        assert build_key_universe({"en": en, "fr": fr}) == ["x", "y"]
        assert build_key_universe({"fr": fr, "en": en}) == ["y", "x"]


class TestAggregate:
    """Test record table construction."""

    def test_every_language_has_an_entry(self):
        """Missing keys are recorded with the MISSING marker."""
        keys, table = aggregate({"en": {"greeting": "hi"}, "fr": {}})

        assert keys == ["greeting"]
        record = table["greeting"]
        assert record.key == "greeting"
        assert record.values == {"en": "hi", "fr": MISSING}

    def test_explicit_empty_string_is_kept(self):
        """An empty string value is stored as-is, distinct from MISSING."""
        _, table = aggregate({"en": {"k": ""}, "fr": {}})
        assert table["k"].values["en"] == ""
        assert table["k"].values["fr"] is MISSING

    def test_falsy_values_are_kept(self):
        """Zero, false and null are values, not absences."""
        _, table = aggregate({"en": {"a": 0, "b": False, "c": None}})
        assert table["a"].values["en"] == 0
        assert table["b"].values["en"] is False
        assert table["c"].values["en"] is None

    def test_idempotent(self):
        """Same input, same output."""
        flat_maps = {"en": {"a": "1", "b": "2"}, "fr": {"b": "3"}}
        assert aggregate(flat_maps) == aggregate(flat_maps)

    def test_record_dict_uses_empty_string_for_missing(self):
        """The flat row representation writes absences as ''."""
        _, table = aggregate({"en": {"greeting": "hi"}, "fr": {}})
        assert table["greeting"].to_dict() == {
            "key": "greeting",
            "values": {"en": "hi", "fr": ""},
            "missing": ["fr"],
            "status": "",
        }
