"""Tests for shaping enums, segments and result records."""

import pytest

from knitshaper.shaping.types import (
    CrewNeckResult,
    Distribution,
    Operation,
    ShapingResult,
    ShapingSegment,
)


class TestEnums:
    def test_operation_values(self):
        assert Operation.INCREASE.value == "increase"
        assert Operation.DECREASE.value == "decrease"

    def test_distribution_values(self):
        assert Distribution.AGGRESSIVE.value == "aggressive"
        assert Distribution.GENTLE.value == "gentle"

    def test_is_str(self):
        """Enums inherit from str so raw form values compare equal."""
        assert Operation.DECREASE == "decrease"
        assert Distribution("gentle") is Distribution.GENTLE


class TestShapingSegment:
    def test_derived_counts(self):
        seg = ShapingSegment(stitches=4, frequency=2, repetitions=10)
        assert seg.rows_used == 20
        assert seg.stitches_changed == 40

    def test_is_frozen(self):
        seg = ShapingSegment(stitches=1, frequency=2, repetitions=3)
        with pytest.raises(AttributeError):
            seg.repetitions = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field, kwargs",
        [
            ("stitches", {"stitches": 0, "frequency": 2, "repetitions": 1}),
            ("frequency", {"stitches": 1, "frequency": 0, "repetitions": 1}),
            ("repetitions", {"stitches": 1, "frequency": 2, "repetitions": -1}),
        ],
    )
    def test_rejects_non_positive_fields(self, field, kwargs):
        with pytest.raises(ValueError, match=f"{field} must be >= 1"):
            ShapingSegment(**kwargs)


class TestResults:
    def test_shaping_result_stitches_changed(self):
        result = ShapingResult(
            segments=(
                ShapingSegment(stitches=5, frequency=2, repetitions=2),
                ShapingSegment(stitches=4, frequency=2, repetitions=10),
            ),
            notation="-5/2/2, -4/2/10",
            instructions=(),
            total_rows_used=24,
            is_valid=True,
        )
        assert result.stitches_changed == 50
        assert result.warnings == ()
        assert result.cast_off == 0

    def test_results_are_hashable(self):
        """Fully immutable results can be cached and used as dict keys."""
        result = CrewNeckResult(
            cast_off=1,
            every_row_decrease=1,
            eor_decrease=1,
            notation="-1, -1/1/1, -1/2/1",
            instructions=("line",),
            total_rows_used=3,
            is_valid=True,
        )
        assert {result: "ok"}[result] == "ok"
        assert result.total_stitches == 3
