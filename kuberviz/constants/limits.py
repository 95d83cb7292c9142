"""Limit values (max/min) for settings validation."""

from typing import Final

SCALE_UNIT_MIN: Final = 0.25
SCALE_UNIT_MAX: Final = 8.0

# Above this many cells per side a chart is clipped by the terminal anyway.
MAX_CHART_CELLS: Final = 2048

__all__ = [
    "MAX_CHART_CELLS",
    "SCALE_UNIT_MAX",
    "SCALE_UNIT_MIN",
]
