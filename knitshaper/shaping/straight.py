"""
Straight-line shaping: distribute a stitch change across the rows of a span.

Shaping on a flatbed manual machine happens every other row (EOR). One row
at the end of the span is kept plain, so a span of ``rows`` rows offers
``max(1, rows - 1)`` shaping rows and half as many EOR event slots
("decrease points").

The calculation picks exactly one of four cases, in priority order:

OVERFLOW  more stitches than shaping rows and decrease points; every point
          changes several stitches (``base`` or ``base + 1``).
SPARSE    fewer stitches than points; the Magic Formula spreads single-stitch
          events as evenly as possible over the points.
EXACT     one stitch per point.
DENSE     more stitches than points but no more than shaping rows; some
          events move to consecutive rows.

Distribution only reorders the two-segment OVERFLOW and SPARSE schedules:
AGGRESSIVE knits the larger stitch count / denser run first, GENTLE the
smaller / sparser run first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from knitshaper.config.policy import ShapingPolicy, StraightLinePolicy, get_policy
from knitshaper.shaping.notation import render_instruction, render_notation
from knitshaper.shaping.types import Distribution, Operation, ShapingResult, ShapingSegment

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input: stitches and rows must be positive"

# Rows between events on the every-other-row cadence.
EOR_FREQUENCY = 2


class ShapingCase(str, Enum):
    """Which allocation rule produced a schedule."""

    NONE = "none"
    OVERFLOW = "overflow"
    SPARSE = "sparse"
    EXACT = "exact"
    DENSE = "dense"


@dataclass(frozen=True)
class StraightLineInput:
    """Inputs for a straight-line calculation.

    Attributes:
        stitches: Total stitches to increase or decrease.
        rows: Rows in the span, including the trailing plain row.
        distribution: Ordering preference for two-segment schedules.
        operation: Whether stitches are added or removed.
    """

    stitches: int
    rows: int
    distribution: Distribution = Distribution.AGGRESSIVE
    operation: Operation = Operation.DECREASE

    def __post_init__(self) -> None:
        # Accept the plain string values; unknown strings raise ValueError.
        object.__setattr__(self, "distribution", Distribution(self.distribution))
        object.__setattr__(self, "operation", Operation(self.operation))


@dataclass(frozen=True)
class RowBudget:
    """Rows available for shaping and the EOR slots they offer."""

    available_rows: int
    decrease_points: int


def row_budget(rows: int, policy: StraightLinePolicy) -> RowBudget:
    available_rows = max(1, rows - policy.plain_rows_reserved)
    return RowBudget(
        available_rows=available_rows,
        decrease_points=available_rows // EOR_FREQUENCY,
    )


def select_case(stitches: int, budget: RowBudget) -> ShapingCase:
    """Return the allocation rule for *stitches* within *budget*."""
    if budget.decrease_points == 0:
        return ShapingCase.NONE
    if stitches > budget.available_rows and stitches > budget.decrease_points:
        return ShapingCase.OVERFLOW
    if stitches < budget.decrease_points:
        return ShapingCase.SPARSE
    if stitches == budget.decrease_points:
        return ShapingCase.EXACT
    return ShapingCase.DENSE


def _segments(*candidates: tuple[int, int, int]) -> list[ShapingSegment]:
    """Build segments from (stitches, frequency, repetitions), dropping empty runs."""
    return [
        ShapingSegment(stitches=s, frequency=f, repetitions=r)
        for s, f, r in candidates
        if s > 0 and r > 0
    ]


def overflow_segments(
    stitches: int, points: int, distribution: Distribution
) -> list[ShapingSegment]:
    base, extra = divmod(stitches, points)
    segments = _segments(
        (base + 1, EOR_FREQUENCY, extra), (base, EOR_FREQUENCY, points - extra)
    )
    if distribution is Distribution.GENTLE and len(segments) == 2:
        if segments[0].stitches > segments[1].stitches:
            segments.reverse()
    return segments


def sparse_segments(stitches: int, points: int, distribution: Distribution) -> list[ShapingSegment]:
    """Magic Formula: spread *stitches* single-stitch events over *points* EOR slots.

    ``c, d = divmod(points, stitches)``; ``stitches - d`` events every ``c``
    slots, then ``d`` events every ``c + 1`` slots.
    """
    c, d = divmod(points, stitches)
    e = stitches - d
    segments = _segments((1, c * EOR_FREQUENCY, e), (1, (c + 1) * EOR_FREQUENCY, d))
    if distribution is Distribution.GENTLE and len(segments) == 2:
        if segments[0].frequency < segments[1].frequency:
            segments.reverse()
    return segments


def dense_segments(stitches: int, available_rows: int) -> list[ShapingSegment]:
    """Every-row events first, then as many EOR events as the rows allow.

    ``x + y == stitches`` and ``x + 2y <= available_rows``, maximising ``y``.
    """
    eor_events = min(available_rows - stitches, stitches)
    every_row_events = stitches - eor_events
    return _segments((1, 1, every_row_events), (1, EOR_FREQUENCY, eor_events))


class StraightLineShaper:
    """
    Straight-line shaping calculator.

    Stateless apart from its policy; safe to share across threads.
    """

    def __init__(self, policy: ShapingPolicy | None = None) -> None:
        self._policy = (policy or get_policy()).straight_line

    def calculate(self, si: StraightLineInput) -> ShapingResult:
        """
        Compute the shaping schedule for *si*.

        Parameters
        ----------
        si:
            Stitch delta, row count, distribution and operation.

        Returns
        -------
        ShapingResult
            Always returned; non-positive stitches or rows give an invalid
            result with a diagnostic instruction instead of raising.
        """
        if si.stitches <= 0 or si.rows <= 0:
            logger.debug("rejecting stitches=%d rows=%d", si.stitches, si.rows)
            return ShapingResult(
                segments=(),
                notation="",
                instructions=(INVALID_INPUT_MESSAGE,),
                total_rows_used=0,
                is_valid=False,
            )

        policy = self._policy
        budget = row_budget(si.rows, policy)
        case = select_case(si.stitches, budget)
        logger.debug(
            "stitches=%d rows=%d available_rows=%d decrease_points=%d case=%s",
            si.stitches,
            si.rows,
            budget.available_rows,
            budget.decrease_points,
            case.value,
        )

        match case:
            case ShapingCase.OVERFLOW:
                segments = overflow_segments(si.stitches, budget.decrease_points, si.distribution)
            case ShapingCase.SPARSE:
                segments = sparse_segments(si.stitches, budget.decrease_points, si.distribution)
            case ShapingCase.EXACT:
                segments = _segments((1, EOR_FREQUENCY, si.stitches))
            case ShapingCase.DENSE:
                segments = dense_segments(si.stitches, budget.available_rows)
            case _:
                segments = []

        total_rows_used = sum(seg.rows_used for seg in segments)
        warnings = collect_warnings(si, budget, case, segments, policy)
        is_valid = (
            total_rows_used <= budget.available_rows
            and si.stitches > 0
            and si.rows >= policy.plain_rows_reserved + 1
        )

        return ShapingResult(
            segments=tuple(segments),
            notation=render_notation(segments, si.operation),
            instructions=tuple(render_instruction(seg, si.operation) for seg in segments),
            total_rows_used=total_rows_used,
            is_valid=is_valid,
            warnings=tuple(warnings),
        )


def collect_warnings(
    si: StraightLineInput,
    budget: RowBudget,
    case: ShapingCase,
    segments: list[ShapingSegment],
    policy: StraightLinePolicy,
) -> list[str]:
    """
    Advisory messages for a computed schedule, in display order.

    Warnings never change the schedule or its validity.
    """
    noun = "increases" if si.operation is Operation.INCREASE else "decreases"
    max_per_point = max((seg.stitches for seg in segments), default=0)
    total_rows_used = sum(seg.rows_used for seg in segments)
    warnings: list[str] = []

    if case is ShapingCase.OVERFLOW:
        if max_per_point > policy.max_stitches_per_point:
            warnings.append(
                f"Very large {noun} required: up to {max_per_point} stitches "
                f"per {noun[:-1]} point"
            )
    elif total_rows_used > budget.available_rows:
        warnings.append("Shaping exceeds available rows - adjust parameters")

    if max_per_point > policy.max_stitches_per_point:
        warnings.append(f"Very large {noun} per point - consider more rows for smoother curve")

    if budget.decrease_points == 0:
        warnings.append(f"Not enough rows for EOR {noun} - need at least {EOR_FREQUENCY} rows")

    min_rows = policy.plain_rows_reserved + 1
    if si.rows < min_rows:
        plain = policy.plain_rows_reserved
        warnings.append(
            f"Need at least {min_rows} rows total "
            f"(1 for shaping + {plain} plain row{'' if plain == 1 else 's'})"
        )

    return warnings


def calculate_straight_line(
    stitches: int,
    rows: int,
    distribution: Distribution | str = Distribution.AGGRESSIVE,
    operation: Operation | str = Operation.DECREASE,
    policy: ShapingPolicy | None = None,
) -> ShapingResult:
    """Convenience wrapper around StraightLineShaper.calculate()."""
    return StraightLineShaper(policy).calculate(
        StraightLineInput(
            stitches=stitches,
            rows=rows,
            distribution=Distribution(distribution),
            operation=Operation(operation),
        )
    )
