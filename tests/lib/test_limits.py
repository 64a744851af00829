"""Tests for the Limits record and property-name normalizer."""

import pytest

from proclimits.lib.limit import Limit
from proclimits.lib.limits import PROPERTY_LABELS, PROPERTY_NAMES, Limits, normalize_property


class TestNormalizeProperty:
    """Tests for normalize_property function."""

    def test_catalog_has_sixteen_properties(self):
        """Every label maps to a distinct Limits field."""
        assert len(PROPERTY_LABELS) == 16
        assert sorted(PROPERTY_LABELS.values()) == sorted(PROPERTY_NAMES)

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("Max cpu time", "max_cpu_time"),
            ("MAX OPEN FILES", "max_open_files"),
            ("max realtime timeout", "max_realtime_timeout"),
            ("Max msgqueue size", "max_msgqueue_size"),
        ],
    )
    def test_matches_case_insensitively(self, label, expected):
        """Labels are lowercased before lookup."""
        assert normalize_property(label) == expected

    def test_file_size_label_uses_underscore(self):
        """Only the underscore spelling selects max_file_size."""
        assert normalize_property("Max file_size") == "max_file_size"
        assert normalize_property("Max file size") is None

    @pytest.mark.parametrize("label", ["Does_not_exist", "", "Max cpu", "max  cpu time"])
    def test_unknown_labels_return_none(self, label):
        """Unknown labels are not an error."""
        assert normalize_property(label) is None


class TestLimits:
    """Tests for Limits record."""

    def test_default_is_all_unlimited(self):
        """A fresh record has every field at the default limit."""
        limits = Limits()

        assert len(PROPERTY_NAMES) == 16
        for name, limit in limits.items():
            assert limit == Limit(), name

    def test_unknown_property_is_ignored(self):
        """Setting an unknown property leaves the record untouched."""
        limits = Limits()

        limits.set_property_from_strings("Does_not_exist", "123", "456")

        assert limits == Limits()

    def test_known_property_sets_only_that_field(self):
        """Setting a known property changes exactly one field."""
        limits = Limits()

        limits.set_property_from_strings("Max file locks", "123", "456")

        assert limits.max_file_locks == Limit(soft=123, hard=456)
        for name, limit in limits.items():
            if name != "max_file_locks":
                assert limit == Limit(), name

    def test_bad_tokens_store_unlimited(self):
        """Unparseable values are stored as None."""
        limits = Limits()
        limits.set_property_from_strings("Max processes", "5", "5")

        limits.set_property_from_strings("Max processes", "lots", "-1")

        assert limits.max_processes == Limit()

    def test_rejects_dynamic_attributes(self):
        """The property set is closed."""
        limits = Limits()

        with pytest.raises(AttributeError):
            limits.max_unicorns = Limit()

    def test_items_in_catalog_order(self):
        """items() follows field declaration order."""
        names = [name for name, _ in Limits().items()]

        assert names == list(PROPERTY_NAMES)
        assert names[0] == "max_cpu_time"
        assert names[-1] == "max_realtime_timeout"

    def test_to_dict(self):
        """to_dict() maps every field to its soft/hard pair."""
        limits = Limits(max_open_files=Limit(1024, 524288))

        data = limits.to_dict()

        assert len(data) == 16
        assert data["max_open_files"] == {"soft": 1024, "hard": 524288}
        assert data["max_cpu_time"] == {"soft": None, "hard": None}
