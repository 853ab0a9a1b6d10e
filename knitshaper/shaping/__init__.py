"""shaping — straight-line and crew-neck shaping calculators."""

from knitshaper.shaping.crew_neck import CrewNeckShaper, calculate_crew_neck
from knitshaper.shaping.straight import (
    ShapingCase,
    StraightLineInput,
    StraightLineShaper,
    calculate_straight_line,
)
from knitshaper.shaping.types import (
    CrewNeckResult,
    Distribution,
    Operation,
    ShapingResult,
    ShapingSegment,
)

__all__ = [
    # enums
    "Distribution",
    "Operation",
    "ShapingCase",
    # types
    "CrewNeckResult",
    "ShapingResult",
    "ShapingSegment",
    "StraightLineInput",
    # shapers
    "CrewNeckShaper",
    "StraightLineShaper",
    "calculate_crew_neck",
    "calculate_straight_line",
]
