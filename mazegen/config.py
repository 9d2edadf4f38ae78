"""Generation settings and the normalization applied before every run.

Nothing here raises: out-of-range values are corrected and every correction
is reported as a human-readable warning string so the caller can decide
whether to surface it.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Iterable, List, Tuple

from .cells import Position, PositionSet
from .tiles import MAX_ROOMS

CHANCE_FIELDS = (
    "deadend_chance",
    "reconnect_deadends_chance",
    "wiggle_chance",
    "extra_connection_chance",
)
MIN_DIMENSION = 3


@dataclass
class MazeConfig:
    # Probability to keep (not trim) a dead end
    deadend_chance: float = 0.3
    # Probability to connect a dead end to an adjacent region with a door
    reconnect_deadends_chance: float = 0.5
    # Probability for a hall to reshuffle its growth direction
    wiggle_chance: float = 0.3
    # Probability to keep a redundant (cycle forming) door
    extra_connection_chance: float = 0.3
    # How many times room placement is attempted
    room_base_number: int = 30
    room_size_min: int = 5
    room_size_max: int = 7
    # Constraint points must end up in halls, never inside rooms
    constrain_hall_only: bool = True

    def to_dict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


def fix_config(config: MazeConfig, width: int, height: int) -> Tuple[MazeConfig, List[str]]:
    """Return a corrected copy of ``config`` for a ``width`` x ``height`` grid plus warnings."""
    warnings: List[str] = []
    changes: dict[str, Any] = {}

    for name in CHANCE_FIELDS:
        value = getattr(config, name)
        if value < 0.0 or value > 1.0:
            changes[name] = min(1.0, max(0.0, value))
            warnings.append(f"Warning! {name} must be between 0.0 and 1.0, got {value}. Fixed by clamping.")

    base = config.room_base_number
    if base < 0 or base >= MAX_ROOMS:
        changes["room_base_number"] = min(MAX_ROOMS - 1, max(0, base))
        warnings.append(
            f"Warning! room_base_number must belong to [0, {MAX_ROOMS - 1}], got {base}. Fixed by clamping."
        )

    size_min, size_max = config.room_size_min, config.room_size_max
    if size_min % 2 == 0 or size_max % 2 == 0:
        if size_min % 2 == 0:
            size_min -= 1
        if size_max % 2 == 0:
            size_max -= 1
        warnings.append("Warning! room_size_min and room_size_max must be odd. Fixed by subtracting 1.")

    min_dimension = min(width, height)
    if size_min > min_dimension or size_max > min_dimension:
        size_min = min(size_min, min_dimension)
        size_max = min(size_max, min_dimension)
        warnings.append(
            f"Warning! room_size_min and room_size_max must not exceed the smaller grid dimension "
            f"({min_dimension}). Fixed by clamping."
        )

    if size_min < 0 or size_max < 0 or size_max < size_min:
        size_min = max(0, size_min)
        size_max = max(0, size_max, size_min)
        warnings.append(
            "Warning! room_size_min and room_size_max must be >= 0 and room_size_max must be >= room_size_min. Fixed."
        )

    if (size_min, size_max) != (config.room_size_min, config.room_size_max):
        changes["room_size_min"] = size_min
        changes["room_size_max"] = size_max
    return replace(config, **changes), warnings


def fix_boundaries(width: int, height: int) -> Tuple[int, int, List[str]]:
    """Make maze width and height odd and at least ``MIN_DIMENSION``."""
    warnings: List[str] = []
    if width % 2 == 0 or height % 2 == 0:
        if width % 2 == 0:
            width -= 1
        if height % 2 == 0:
            height -= 1
        warnings.append("Warning! Maze width and height must be odd. Fixed by subtracting 1.")
    if width < MIN_DIMENSION or height < MIN_DIMENSION:
        width = max(width, MIN_DIMENSION)
        height = max(height, MIN_DIMENSION)
        warnings.append(f"Warning! Maze width and height must be >= {MIN_DIMENSION}. Fixed by increasing.")
    return width, height, warnings


def fix_constraints(backend, grid, constraints: Iterable) -> Tuple[PositionSet, List[str]]:
    """Keep only interior constraint points with odd x and y."""
    warnings: List[str] = []
    fixed: PositionSet = set()
    for raw in sorted({Position(*c) for c in constraints}):
        if not backend.in_bounds(grid, raw.x, raw.y):
            warnings.append(f"Warning! Constraint ({raw.x}, {raw.y}) is out of grid bounds. Skipped.")
        elif raw.x % 2 == 0 or raw.y % 2 == 0:
            warnings.append(f"Warning! Constraint ({raw.x}, {raw.y}) must have odd x and y. Skipped.")
        else:
            fixed.add(raw)
    return fixed, warnings


__all__ = ["MazeConfig", "fix_config", "fix_boundaries", "fix_constraints", "CHANCE_FIELDS", "MIN_DIMENSION"]
