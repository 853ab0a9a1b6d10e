"""
Core type definitions for the shaping calculators.

Segments are frozen dataclasses with fail-fast validation in __post_init__.
Result records hold tuples rather than lists so a result can be cached and
shared between callers without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Direction of a shaping operation."""

    INCREASE = "increase"
    DECREASE = "decrease"


class Distribution(str, Enum):
    """
    Ordering preference for two-segment schedules.

    AGGRESSIVE — larger stitch counts / denser frequency knitted first
    GENTLE     — smaller stitch counts / sparser frequency knitted first
    """

    AGGRESSIVE = "aggressive"
    GENTLE = "gentle"


@dataclass(frozen=True)
class ShapingSegment:
    """
    One homogeneous run of shaping events.

    Change ``stitches`` stitches every ``frequency`` rows, ``repetitions``
    times. A segment consumes ``frequency * repetitions`` rows.
    """

    stitches: int
    frequency: int
    repetitions: int

    def __post_init__(self) -> None:
        if self.stitches < 1:
            raise ValueError(f"stitches must be >= 1, got {self.stitches}")
        if self.frequency < 1:
            raise ValueError(f"frequency must be >= 1, got {self.frequency}")
        if self.repetitions < 1:
            raise ValueError(f"repetitions must be >= 1, got {self.repetitions}")

    @property
    def rows_used(self) -> int:
        return self.frequency * self.repetitions

    @property
    def stitches_changed(self) -> int:
        return self.stitches * self.repetitions


@dataclass(frozen=True)
class ShapingResult:
    """Outcome of a straight-line shaping calculation.

    Attributes:
        segments: Shaping runs in knitting order (first segment knitted first).
        notation: Ratio notation, e.g. ``"-5/2/2, -4/2/10"``.
        instructions: One written sentence per segment, or a single diagnostic
            line when the input was rejected.
        total_rows_used: Sum of ``frequency * repetitions`` over all segments.
        is_valid: False for rejected input or a schedule that does not fit.
        warnings: Advisory messages; never block the calculation.
        cast_off: Immediate cast-off count. Straight-line shaping never casts
            off, so this is always 0; kept for parity with CrewNeckResult.
    """

    segments: tuple[ShapingSegment, ...]
    notation: str
    instructions: tuple[str, ...]
    total_rows_used: int
    is_valid: bool
    warnings: tuple[str, ...] = ()
    cast_off: int = 0

    @property
    def stitches_changed(self) -> int:
        return sum(seg.stitches_changed for seg in self.segments)


@dataclass(frozen=True)
class CrewNeckResult:
    """Per-side partition of a crew-neck decrease.

    ``cast_off + every_row_decrease + eor_decrease`` always equals the
    requested per-side total (all three are zero for rejected input).
    """

    cast_off: int
    every_row_decrease: int
    eor_decrease: int
    notation: str
    instructions: tuple[str, ...]
    total_rows_used: int
    is_valid: bool
    warnings: tuple[str, ...] = ()

    @property
    def total_stitches(self) -> int:
        return self.cast_off + self.every_row_decrease + self.eor_decrease
