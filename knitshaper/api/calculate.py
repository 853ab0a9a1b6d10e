"""
Public shaping API.

straight_line_schedule() and crew_neck_schedule() are the entry points a
presentation layer calls on every input change. Both are pure functions of
their arguments under the default policy, so results are memoized by exact
input tuple. Results are immutable and safe to hand out repeatedly.
"""

from __future__ import annotations

from functools import lru_cache

from knitshaper.shaping.crew_neck import CrewNeckShaper
from knitshaper.shaping.straight import StraightLineInput, StraightLineShaper
from knitshaper.shaping.types import CrewNeckResult, Distribution, Operation, ShapingResult

_CACHE_SIZE = 1024


@lru_cache(maxsize=_CACHE_SIZE)
def _straight_line(
    stitches: int, rows: int, distribution: Distribution, operation: Operation
) -> ShapingResult:
    return StraightLineShaper().calculate(
        StraightLineInput(
            stitches=stitches, rows=rows, distribution=distribution, operation=operation
        )
    )


@lru_cache(maxsize=_CACHE_SIZE)
def _crew_neck(total_stitches_per_side: int) -> CrewNeckResult:
    return CrewNeckShaper().calculate(total_stitches_per_side)


def straight_line_schedule(
    stitches: int,
    rows: int,
    distribution: Distribution | str = Distribution.AGGRESSIVE,
    operation: Operation | str = Operation.DECREASE,
) -> ShapingResult:
    """
    Shaping schedule for changing *stitches* stitches over *rows* rows.

    Parameters
    ----------
    stitches:
        Stitches to increase or decrease in total.
    rows:
        Rows in the span, including the trailing plain row.
    distribution:
        ``"aggressive"`` (default) or ``"gentle"``.
    operation:
        ``"decrease"`` (default) or ``"increase"``.

    Returns
    -------
    ShapingResult
        Always returned for integer counts. Inspect ``is_valid`` and
        ``warnings``.

    Raises
    ------
    ValueError
        If *distribution* or *operation* is not a known value.
    """
    return _straight_line(stitches, rows, Distribution(distribution), Operation(operation))


def crew_neck_schedule(total_stitches_per_side: int) -> CrewNeckResult:
    """Per-side crew-neck partition for *total_stitches_per_side* stitches."""
    return _crew_neck(total_stitches_per_side)


def clear_cache() -> None:
    """Drop all memoized results."""
    _straight_line.cache_clear()
    _crew_neck.cache_clear()
