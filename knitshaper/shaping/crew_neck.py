"""
Crew-neck shaping: split a per-side decrease into cast-off, every-row and
every-other-row runs.

No case analysis and no row budget: the split is a fixed proportional rule
taken from CrewNeckPolicy. With the default policy:

    cast_off  = total // 3
    every_row = (total - cast_off) // 2
    eor       = total - cast_off - every_row
"""

from __future__ import annotations

import logging

from knitshaper.config.policy import CrewNeckPolicy, EveryRowBasis, ShapingPolicy, get_policy
from knitshaper.shaping.notation import (
    render_crew_neck_instructions,
    render_crew_neck_notation,
)
from knitshaper.shaping.types import CrewNeckResult

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input: stitches must be positive"


def partition(total: int, policy: CrewNeckPolicy) -> tuple[int, int, int]:
    """Return (cast_off, every_row, eor) for a positive per-side *total*."""
    cast_off = total // policy.cast_off_divisor
    remaining = total - cast_off
    if policy.every_row_basis is EveryRowBasis.TOTAL:
        every_row = min(total // 2, remaining)
    else:
        every_row = remaining // 2
    return cast_off, every_row, remaining - every_row


class CrewNeckShaper:
    """Per-side crew-neck decrease allocator."""

    def __init__(
        self,
        policy: ShapingPolicy | None = None,
        crew_neck_policy: CrewNeckPolicy | None = None,
    ) -> None:
        self._policy = crew_neck_policy or (policy or get_policy()).crew_neck

    def calculate(self, total_stitches_per_side: int) -> CrewNeckResult:
        """
        Partition *total_stitches_per_side* into cast-off, every-row and EOR counts.

        A non-positive total returns an invalid result with zero counts.
        """
        total = total_stitches_per_side
        if total <= 0:
            logger.debug("rejecting total_stitches_per_side=%d", total)
            return CrewNeckResult(
                cast_off=0,
                every_row_decrease=0,
                eor_decrease=0,
                notation="",
                instructions=(INVALID_INPUT_MESSAGE,),
                total_rows_used=0,
                is_valid=False,
            )

        policy = self._policy
        cast_off, every_row, eor = partition(total, policy)
        total_rows = every_row + 2 * eor
        logger.debug(
            "total=%d cast_off=%d every_row=%d eor=%d rows=%d",
            total,
            cast_off,
            every_row,
            eor,
            total_rows,
        )

        warnings: list[str] = []
        if total < policy.small_neck_threshold:
            warnings.append("Very small neck opening - consider more stitches for adult garment")
        if eor == 0:
            warnings.append("No EOR decreases - curve may be too steep")

        return CrewNeckResult(
            cast_off=cast_off,
            every_row_decrease=every_row,
            eor_decrease=eor,
            notation=render_crew_neck_notation(cast_off, every_row, eor),
            instructions=render_crew_neck_instructions(
                total, cast_off, every_row, eor, total_rows, policy.cast_off_divisor
            ),
            total_rows_used=total_rows,
            is_valid=True,
            warnings=tuple(warnings),
        )


def calculate_crew_neck(
    total_stitches_per_side: int, policy: ShapingPolicy | None = None
) -> CrewNeckResult:
    """Convenience wrapper around CrewNeckShaper.calculate()."""
    return CrewNeckShaper(policy).calculate(total_stitches_per_side)
