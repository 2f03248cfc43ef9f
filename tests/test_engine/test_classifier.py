"""Tests for cross-language status classification."""

import pytest

from transcompare.engine.aggregator import aggregate
from transcompare.engine.classifier import classify, classify_records, count_statuses
from transcompare.models.enums import MISSING, Status
from transcompare.models.record import Record


def _classify_key(flat_maps, key, primary, treat_empty_as_missing=True):
    _, table = aggregate(flat_maps)
    return classify(table[key], list(flat_maps), primary, treat_empty_as_missing)


class TestClassify:
    """Test the status rules."""

    def test_incomplete(self):
        """Primary has the key, another language does not."""
        flat_maps = {"en": {"greeting": "hi"}, "fr": {}}
        assert _classify_key(flat_maps, "greeting", "en") == Status.INCOMPLETE

    def test_error(self):
        """Another language has the key, the primary does not."""
        flat_maps = {"en": {}, "fr": {"greeting": "bonjour"}}
        assert _classify_key(flat_maps, "greeting", "en") == Status.ERROR

    def test_translated(self):
        """Every language has the key."""
        flat_maps = {"en": {"greeting": "hi"}, "fr": {"greeting": "bonjour"}}
        assert _classify_key(flat_maps, "greeting", "en") == Status.TRANSLATED

    @pytest.mark.parametrize("primary", [None, ""])
    def test_no_primary_is_unclassified(self, primary):
        """Without a primary language nothing is classified."""
        flat_maps = {"en": {"greeting": "hi"}, "fr": {"greeting": "bonjour"}}
        assert _classify_key(flat_maps, "greeting", primary) == Status.UNCLASSIFIED

    def test_nobody_has_the_key(self):
        """A key with no values anywhere is unclassified."""
        record = Record(key="stale", values={"en": MISSING, "fr": MISSING})
        assert classify(record, ["en", "fr"], "en") == Status.UNCLASSIFIED

    def test_single_language(self):
        """One language that has the key is translated."""
        assert _classify_key({"en": {"a": "x"}}, "a", "en") == Status.TRANSLATED

    def test_primary_outside_language_set(self):
        """An unknown primary never counts as present."""
        flat_maps = {"en": {"a": "x"}, "fr": {}}
        assert _classify_key(flat_maps, "a", "de") == Status.ERROR

    def test_empty_string_counts_as_missing_by_default(self):
        """An empty translation is treated like an absent one."""
        flat_maps = {"en": {"a": "x"}, "fr": {"a": ""}}
        assert _classify_key(flat_maps, "a", "en") == Status.INCOMPLETE

    def test_empty_string_can_count_as_present(self):
        """With the stricter setting only absence is missing."""
        flat_maps = {"en": {"a": "x"}, "fr": {"a": ""}}
        assert _classify_key(flat_maps, "a", "en", treat_empty_as_missing=False) == (
            Status.TRANSLATED
        )

    def test_falsy_values_are_present(self):
        """Zero, false and null are real values."""
        flat_maps = {"en": {"a": 0}, "fr": {"a": False}, "de": {"a": None}}
        assert _classify_key(flat_maps, "a", "en") == Status.TRANSLATED

    @pytest.mark.parametrize(
        ("value", "treat_empty_as_missing", "as_primary", "as_other"),
        [
            ("", True, Status.ERROR, Status.INCOMPLETE),
            ("", False, Status.TRANSLATED, Status.TRANSLATED),
            (0, True, Status.TRANSLATED, Status.TRANSLATED),
            (0, False, Status.TRANSLATED, Status.TRANSLATED),
            (False, True, Status.TRANSLATED, Status.TRANSLATED),
            (False, False, Status.TRANSLATED, Status.TRANSLATED),
            (None, True, Status.TRANSLATED, Status.TRANSLATED),
            (None, False, Status.TRANSLATED, Status.TRANSLATED),
        ],
    )
    def test_falsy_values_in_both_modes(self, value, treat_empty_as_missing, as_primary, as_other):
        """Only the empty string depends on the setting, in either position."""
        primary_holds_it = {"en": {"a": value}, "fr": {"a": "x"}}
        other_holds_it = {"en": {"a": "x"}, "fr": {"a": value}}

        assert _classify_key(primary_holds_it, "a", "en", treat_empty_as_missing) == as_primary
        assert _classify_key(other_holds_it, "a", "en", treat_empty_as_missing) == as_other

    def test_status_values(self):
        """Statuses serialize as lowercase labels, unclassified as empty."""
        assert Status.TRANSLATED.value == "translated"
        assert Status.UNCLASSIFIED.value == ""


class TestClassifyRecords:
    """Test batch classification and counting."""

    @pytest.fixture
    def flat_maps(self):
        """Three languages with one key of each status."""
        return {
            "en": {"ok": "1", "partial": "2"},
            "fr": {"ok": "1", "orphan": "3"},
            "de": {"ok": "1"},
        }

    def test_statuses(self, flat_maps):
        """Each record gets its own status, originals are untouched."""
        keys, table = aggregate(flat_maps)
        records = classify_records([table[k] for k in keys], list(flat_maps), "en")

        assert {r.key: r.status for r in records} == {
            "ok": Status.TRANSLATED,
            "partial": Status.INCOMPLETE,
            "orphan": Status.ERROR,
        }
        assert table["ok"].status == Status.UNCLASSIFIED

    def test_counts(self, flat_maps):
        """Counts include every status, zero when unused."""
        keys, table = aggregate(flat_maps)
        records = classify_records([table[k] for k in keys], list(flat_maps), "en")

        assert count_statuses(records) == {
            Status.TRANSLATED: 1,
            Status.INCOMPLETE: 1,
            Status.ERROR: 1,
            Status.UNCLASSIFIED: 0,
        }

    def test_counts_without_primary(self, flat_maps):
        """Without a primary every record is unclassified."""
        keys, table = aggregate(flat_maps)
        records = classify_records([table[k] for k in keys], list(flat_maps), None)
        assert count_statuses(records)[Status.UNCLASSIFIED] == 3

    def test_counts_empty(self):
        """No records, all counts zero."""
        assert set(count_statuses([]).values()) == {0}
