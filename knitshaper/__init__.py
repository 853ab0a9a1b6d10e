"""
knitshaper — shaping schedules for flatbed knitting machines.

Turns "change N stitches over R rows" into ratio notation
(stitches / row frequency / repetitions) that respects the every-other-row
shaping cadence, and splits crew-neck decreases into cast-off, every-row and
every-other-row runs.
"""

import logging

from knitshaper.api.calculate import clear_cache, crew_neck_schedule, straight_line_schedule
from knitshaper.shaping import (
    CrewNeckResult,
    CrewNeckShaper,
    Distribution,
    Operation,
    ShapingCase,
    ShapingResult,
    ShapingSegment,
    StraightLineInput,
    StraightLineShaper,
    calculate_crew_neck,
    calculate_straight_line,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CrewNeckResult",
    "CrewNeckShaper",
    "Distribution",
    "Operation",
    "ShapingCase",
    "ShapingResult",
    "ShapingSegment",
    "StraightLineInput",
    "StraightLineShaper",
    "calculate_crew_neck",
    "calculate_straight_line",
    "clear_cache",
    "crew_neck_schedule",
    "straight_line_schedule",
]
