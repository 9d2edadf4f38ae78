"""Plain-text rendering of a generated grid.

Each cell becomes two characters so the map keeps a roughly square aspect in
a terminal: walls, doors and constraint points get fixed glyphs, every other
cell shows the last two digits of its region id.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .cells import Position
from .grid import GridBackend, ListGridBackend
from .tiles import MAX_ROOMS, NOTHING_ID, is_door_id

WALL_GLYPH = "██"
DOOR_GLYPH = "▒▒"
CONSTRAINT_GLYPH = "[]"


def render_rows(
    grid: Any,
    backend: Optional[GridBackend] = None,
    constraints: Iterable = (),
    wall: str = WALL_GLYPH,
    door: str = DOOR_GLYPH,
    constraint: str = CONSTRAINT_GLYPH,
) -> List[str]:
    backend = backend or ListGridBackend()
    marked = {Position(*c) for c in constraints}
    rows = []
    for y in range(backend.height(grid)):
        line = []
        for x in range(backend.width(grid)):
            region = backend.get_region(grid, x, y)
            if region == NOTHING_ID:
                line.append(wall)
            elif (x, y) in marked:
                line.append(constraint)
            elif is_door_id(region):
                line.append(door)
            else:
                line.append(f"{region % MAX_ROOMS % 100:2d}")
        rows.append("".join(line))
    return rows


def render_ascii(grid: Any, backend: Optional[GridBackend] = None, constraints: Iterable = (), **glyphs) -> str:
    return "\n".join(render_rows(grid, backend, constraints, **glyphs))


__all__ = ["render_ascii", "render_rows", "WALL_GLYPH", "DOOR_GLYPH", "CONSTRAINT_GLYPH"]
