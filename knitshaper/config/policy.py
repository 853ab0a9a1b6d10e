"""
Shaping policy: loads thresholds and proportional rules from YAML at startup,
validates them, and exposes them as frozen entries.

The policy is a module-level singleton; call get_policy() to obtain it.
Shapers accept an explicit policy so tests and alternative garments can
override the defaults without touching the shipped data file.

The crew-neck allocation exists in two published variants (a 1/3 cast-off
with the every-row count halved from the remainder, and a 1/4 cast-off with
the every-row count halved from the original total). The shipped default is
the 1/3 remainder rule. The quarter rule is only used when configured
explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, cast

import yaml

_DATA_DIR = Path(__file__).parent / "data"
_POLICY_FILE = "shaping_policy.yaml"


class EveryRowBasis(str, Enum):
    """Count the crew-neck every-row decreases are derived from."""

    REMAINING = "remaining"
    TOTAL = "total"


@dataclass(frozen=True)
class StraightLinePolicy:
    """Thresholds for straight-line shaping."""

    plain_rows_reserved: int = 1
    max_stitches_per_point: int = 8


@dataclass(frozen=True)
class CrewNeckPolicy:
    """Proportional rule and thresholds for crew-neck shaping."""

    small_neck_threshold: int = 8
    cast_off_divisor: int = 3
    every_row_basis: EveryRowBasis = EveryRowBasis.REMAINING


QUARTER_CAST_OFF_RULE = CrewNeckPolicy(cast_off_divisor=4, every_row_basis=EveryRowBasis.TOTAL)


class ShapingPolicy:
    """
    Read-only shaping policy.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_policy() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.straight_line: StraightLinePolicy
        self.crew_neck: CrewNeckPolicy

        data = self._load_yaml(_POLICY_FILE)
        errors: list[str] = []
        self.straight_line = self._load_straight_line(data.get("straight_line") or {}, errors)
        self.crew_neck = self._load_crew_neck(data.get("crew_neck") or {}, errors)
        if errors:
            raise ValueError(
                "Shaping policy validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Shaping policy file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse shaping policy file {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Shaping policy file {path} must contain a mapping")
        return cast(dict[str, Any], data)

    def _load_straight_line(self, data: dict[str, Any], errors: list[str]) -> StraightLinePolicy:
        defaults = StraightLinePolicy()
        section = "straight_line"
        plain_rows = _int_field(
            data, section, "plain_rows_reserved", defaults.plain_rows_reserved, errors, minimum=0
        )
        max_per_point = _int_field(
            data, section, "max_stitches_per_point", defaults.max_stitches_per_point, errors
        )
        return StraightLinePolicy(
            plain_rows_reserved=plain_rows,
            max_stitches_per_point=max_per_point,
        )

    def _load_crew_neck(self, data: dict[str, Any], errors: list[str]) -> CrewNeckPolicy:
        defaults = CrewNeckPolicy()
        section = "crew_neck"
        threshold = _int_field(
            data, section, "small_neck_threshold", defaults.small_neck_threshold, errors, minimum=0
        )
        divisor = _int_field(data, section, "cast_off_divisor", defaults.cast_off_divisor, errors)
        raw_basis = data.get("every_row_basis", defaults.every_row_basis.value)
        try:
            basis = EveryRowBasis(raw_basis)
        except ValueError:
            errors.append(
                f"crew_neck.every_row_basis: {raw_basis!r} is not one of "
                f"{[b.value for b in EveryRowBasis]}"
            )
            basis = defaults.every_row_basis
        return CrewNeckPolicy(
            small_neck_threshold=threshold,
            cast_off_divisor=divisor,
            every_row_basis=basis,
        )


def _int_field(
    data: dict[str, Any],
    section: str,
    key: str,
    default: int,
    errors: list[str],
    minimum: int = 1,
) -> int:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        errors.append(f"{section}.{key}: must be an integer >= {minimum}, got {value!r}")
        return default
    return value


# ── Module-level singleton ─────────────────────────────────────────────────────

_policy: ShapingPolicy = ShapingPolicy()


def get_policy() -> ShapingPolicy:
    """Return the module-level policy singleton."""
    return _policy
