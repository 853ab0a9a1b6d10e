"""api — memoized public entry points."""

from knitshaper.api.calculate import clear_cache, crew_neck_schedule, straight_line_schedule

__all__ = ["clear_cache", "crew_neck_schedule", "straight_line_schedule"]
