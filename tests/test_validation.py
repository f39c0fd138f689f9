"""Tests for the override table validation pass."""

import pytest

from snapshot_config.custom_mapping import CUSTOM_MAPPING, precision
from snapshot_config.utils.classes.SnapshotConfiguration import SnapshotConfiguration
from snapshot_config.utils.validation.validation_helpers import (
    assert_valid_mapping,
    validate_mapping,
)


class TestValidateMapping:
    """Tests for validate_mapping."""

    def test_shipped_mapping_is_valid(self):
        assert validate_mapping() == []
        assert validate_mapping(CUSTOM_MAPPING) == []

    def test_upper_bound_inclusive(self):
        assert validate_mapping({"a": precision(1.0)}) == []

    @pytest.mark.parametrize("value", [0.0, -0.1, 1.01, float("nan")])
    def test_out_of_range(self, value):
        problems = validate_mapping({"bad": precision(value)})
        assert len(problems) == 1
        assert problems[0].startswith("bad: precision")

    @pytest.mark.parametrize("value", ["0.9", None, True])
    def test_not_a_number(self, value):
        problems = validate_mapping({"bad": SnapshotConfiguration(precision=value)})
        assert problems == [f"bad: precision {value!r} is not a number"]

    def test_reports_every_problem_sorted(self):
        mapping = {"z": precision(2.0), "ok": precision(0.5), "a": precision(0.0)}
        problems = validate_mapping(mapping)
        assert [p.split(":")[0] for p in problems] == ["a", "z"]


class TestAssertValidMapping:
    """Tests for assert_valid_mapping."""

    def test_valid_mapping_passes(self):
        assert_valid_mapping()

    def test_invalid_mapping_raises(self):
        with pytest.raises(ValueError, match="broken"):
            assert_valid_mapping({"broken": precision(1.5)})
