"""Dead-end pruning pass.

Trims blind corridor runs back toward the nearest junction or room. Doors
swallowed by a trimmed run are marked hidden so the door list stays in sync
with the grid.
"""
from __future__ import annotations

from .cells import CARDINALS, Position
from .grid import is_empty
from .tiles import NOTHING_ID, is_door_id, is_hall_id
from .tunnels import is_dead_end


def _trimmable(gen: "Generator", p: Position) -> bool:
    region_id = gen.backend.get_region(gen.grid, p.x, p.y)
    if not (is_hall_id(region_id) or is_door_id(region_id)):
        return False
    if p in gen.constraints:
        return False
    return is_dead_end(gen.backend, gen.grid, p)


def reduce_maze(gen: "Generator") -> int:
    """Remove dead ends with probability ``1 - deadend_chance``.

    Returns the number of cells blanked.
    """
    backend, grid = gen.backend, gen.grid
    doors_by_id = {d.id: d for d in gen.doors}
    trimmed = 0
    for index, end in enumerate(gen.dead_ends):
        if gen.rng.random() < gen.config.deadend_chance:
            continue
        p = end
        while _trimmable(gen, p):
            region_id = backend.get_region(grid, p.x, p.y)
            for d in CARDINALS:
                n = p.neighbour_to(d)
                if not is_empty(backend, grid, n.x, n.y):
                    break
            backend.set_region(grid, p.x, p.y, NOTHING_ID)
            trimmed += 1
            if is_door_id(region_id):
                doors_by_id[region_id].is_hidden = True
            p = n
        gen.dead_ends[index] = p
    gen.dead_ends[:] = [
        p for p in gen.dead_ends
        if is_hall_id(backend.get_region(grid, p.x, p.y)) and is_dead_end(backend, grid, p)
    ]
    return trimmed


__all__ = ["reduce_maze"]
