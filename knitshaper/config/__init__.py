"""config — shaping policy loaded from YAML."""

from knitshaper.config.policy import (
    QUARTER_CAST_OFF_RULE,
    CrewNeckPolicy,
    EveryRowBasis,
    ShapingPolicy,
    StraightLinePolicy,
    get_policy,
)

__all__ = [
    "CrewNeckPolicy",
    "EveryRowBasis",
    "QUARTER_CAST_OFF_RULE",
    "ShapingPolicy",
    "StraightLinePolicy",
    "get_policy",
]
