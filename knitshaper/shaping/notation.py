"""
Notation and prose templates for shaping results.

render_notation converts segments into ratio notation (``S/F/R`` with a
leading ``-`` for decreases). render_instruction converts one segment into a
written sentence. The crew-neck helpers render the cast-off / every-row / EOR
partition.
"""

from __future__ import annotations

from collections.abc import Iterable

from knitshaper.shaping.types import Operation, ShapingSegment

NOTATION_SEPARATOR = ", "

_SIGNS: dict[Operation, str] = {Operation.DECREASE: "-", Operation.INCREASE: ""}
_VERBS: dict[Operation, str] = {Operation.DECREASE: "Decrease", Operation.INCREASE: "Increase"}


def stitch_phrase(count: int) -> str:
    """Return '1 stitch' or 'N stitches'."""
    return "1 stitch" if count == 1 else f"{count} stitches"


def render_segment(segment: ShapingSegment, operation: Operation) -> str:
    """Render a single segment as ``-S/F/R`` or ``S/F/R``."""
    return f"{_SIGNS[operation]}{segment.stitches}/{segment.frequency}/{segment.repetitions}"


def render_notation(segments: Iterable[ShapingSegment], operation: Operation) -> str:
    """Join segments in knitting order, e.g. ``"-5/2/2, -4/2/10"``."""
    return NOTATION_SEPARATOR.join(render_segment(seg, operation) for seg in segments)


def render_instruction(segment: ShapingSegment, operation: Operation) -> str:
    """Render a segment as pattern prose."""
    return (
        f"{_VERBS[operation]} {stitch_phrase(segment.stitches)} "
        f"every {segment.frequency} rows, {segment.repetitions} times"
    )


def render_crew_neck_notation(cast_off: int, every_row: int, eor: int) -> str:
    """Render the partition as ``"-4, -1/1/4, -1/2/4"``, omitting zero counts."""
    parts: list[str] = []
    if cast_off > 0:
        parts.append(f"-{cast_off}")
    if every_row > 0:
        parts.append(f"-1/1/{every_row}")
    if eor > 0:
        parts.append(f"-1/2/{eor}")
    return NOTATION_SEPARATOR.join(parts)


def render_crew_neck_instructions(
    total: int,
    cast_off: int,
    every_row: int,
    eor: int,
    total_rows: int,
    cast_off_divisor: int,
) -> tuple[str, ...]:
    """
    Render the per-side crew-neck partition as pattern prose.

    The header and cast-off lines are always present; the every-row and EOR
    lines only when their count is positive.
    """
    lines = [
        f"Per side calculations for {total} total stitches:",
        f"Cast off: {cast_off} stitches (minimum 1/{cast_off_divisor} of total)",
    ]
    if every_row > 0:
        lines.append(f"Decrease 1 stitch every row, {every_row} times")
    if eor > 0:
        lines.append(f"Decrease 1 stitch every other row, {eor} times")
    lines.append(f"Total rows for neck shaping: approximately {total_rows}")
    return tuple(lines)
