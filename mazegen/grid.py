"""Grid backends.

The generation pipeline never touches a concrete grid type directly; it goes
through a backend object exposing the capability set below. Any object with
these methods works (structural typing), so callers can plug in their own
storage without subclassing anything.

Two backends ship with the package:
    * ``ListGridBackend``: rows of ints addressed ``grid[y][x]`` (default).
    * ``SparseGridBackend``: only carved cells are stored, walls are implicit.
"""
from __future__ import annotations

from typing import Any, Dict, List, Protocol, Tuple

from .tiles import NOTHING_ID

Grid = List[List[int]]


class GridBackend(Protocol):
    def construct(self, width: int, height: int) -> Any: ...

    def clear(self, grid: Any) -> None: ...

    def width(self, grid: Any) -> int: ...

    def height(self, grid: Any) -> int: ...

    def in_bounds(self, grid: Any, x: int, y: int) -> bool: ...

    def is_wall(self, grid: Any, x: int, y: int) -> bool: ...

    def get_region(self, grid: Any, x: int, y: int) -> int: ...

    def set_region(self, grid: Any, x: int, y: int, region_id: int) -> bool: ...


def is_empty(backend: GridBackend, grid: Any, x: int, y: int) -> bool:
    """True if (x, y) cannot hold anything more: outside the interior or a wall."""
    return not backend.in_bounds(grid, x, y) or backend.is_wall(grid, x, y)


class ListGridBackend:
    def construct(self, width: int, height: int) -> Grid:
        return [[NOTHING_ID for _ in range(width)] for _ in range(height)]

    def clear(self, grid: Grid) -> None:
        grid.clear()

    def width(self, grid: Grid) -> int:
        return len(grid[0]) if grid else 0

    def height(self, grid: Grid) -> int:
        return len(grid)

    # The outermost ring never counts as in bounds so the map always keeps a border wall
    def in_bounds(self, grid: Grid, x: int, y: int) -> bool:
        return 0 < x < self.width(grid) - 1 and 0 < y < self.height(grid) - 1

    def is_wall(self, grid: Grid, x: int, y: int) -> bool:
        return self.in_bounds(grid, x, y) and grid[y][x] == NOTHING_ID

    def get_region(self, grid: Grid, x: int, y: int) -> int:
        if not self.in_bounds(grid, x, y):
            return NOTHING_ID
        return grid[y][x]

    def set_region(self, grid: Grid, x: int, y: int, region_id: int) -> bool:
        if not self.in_bounds(grid, x, y):
            return False
        grid[y][x] = region_id
        return True


class SparseGrid:
    """Dimensions plus a dict of carved cells keyed by (x, y)."""

    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height
        self.cells: Dict[Tuple[int, int], int] = {}

    def to_rows(self) -> Grid:
        return [[self.cells.get((x, y), NOTHING_ID) for x in range(self.width)] for y in range(self.height)]


class SparseGridBackend:
    def construct(self, width: int, height: int) -> SparseGrid:
        return SparseGrid(width, height)

    def clear(self, grid: SparseGrid) -> None:
        grid.cells.clear()
        grid.width = 0
        grid.height = 0

    def width(self, grid: SparseGrid) -> int:
        return grid.width

    def height(self, grid: SparseGrid) -> int:
        return grid.height

    def in_bounds(self, grid: SparseGrid, x: int, y: int) -> bool:
        return 0 < x < grid.width - 1 and 0 < y < grid.height - 1

    def is_wall(self, grid: SparseGrid, x: int, y: int) -> bool:
        return self.in_bounds(grid, x, y) and (x, y) not in grid.cells

    def get_region(self, grid: SparseGrid, x: int, y: int) -> int:
        if not self.in_bounds(grid, x, y):
            return NOTHING_ID
        return grid.cells.get((x, y), NOTHING_ID)

    def set_region(self, grid: SparseGrid, x: int, y: int, region_id: int) -> bool:
        if not self.in_bounds(grid, x, y):
            return False
        if region_id == NOTHING_ID:
            grid.cells.pop((x, y), None)
        else:
            grid.cells[(x, y)] = region_id
        return True


__all__ = [
    "Grid",
    "GridBackend",
    "ListGridBackend",
    "SparseGrid",
    "SparseGridBackend",
    "is_empty",
]
