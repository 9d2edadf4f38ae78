"""Hall (corridor) growth.

Halls live on the odd lattice: cells with odd x and y are nodes, the cells in
between are walls that get carved only when two nodes are joined. Every step
therefore carves two cells, which keeps corridors one cell wide with a wall
between parallel runs.
"""
from __future__ import annotations

from typing import List, Optional

from .cells import CARDINALS, Direction, Hall, Position
from .grid import is_empty


def is_dead_end(backend, grid, p: Position) -> bool:
    """True if exactly one cardinal neighbor of ``p`` is carved."""
    passways = 0
    for d in CARDINALS:
        n = p.neighbour_to(d)
        if not is_empty(backend, grid, n.x, n.y):
            passways += 1
    return passways == 1


def grow_maze(gen: "Generator", start: Position) -> bool:
    """Carve a new hall from ``start`` with a randomized iterative DFS.

    Returns False (and allocates nothing) when ``start`` is not a wall.
    Dead ends met while backtracking are appended to ``gen.dead_ends``, along
    with ``start`` itself, which a later door can turn into a dead end.
    """
    backend, grid, rng = gen.backend, gen.grid, gen.rng
    if not backend.is_wall(grid, start.x, start.y):
        return False
    gen.hall_id += 1
    hall_id = gen.hall_id
    gen.halls.append(Hall(start, hall_id))
    backend.set_region(grid, start.x, start.y, hall_id)

    directions: List[Direction] = list(CARDINALS)
    last_dir: Optional[Direction] = None
    found = {start}
    stack = [start]
    while stack:
        p = stack[-1]
        if rng.random() < gen.config.wiggle_chance:
            rng.shuffle(directions)
            # previous heading goes last
            if last_dir is not None:
                directions.remove(last_dir)
                directions.append(last_dir)
        step = None
        for d in directions:
            target = p.neighbour_to(d * 2)
            if backend.is_wall(grid, target.x, target.y):
                step = d
                break
        if step is None:
            if is_dead_end(backend, grid, p):
                found.add(p)
            stack.pop()
            continue
        last_dir = step
        middle = p.neighbour_to(step)
        target = middle.neighbour_to(step)
        backend.set_region(grid, middle.x, middle.y, hall_id)
        backend.set_region(grid, target.x, target.y, hall_id)
        stack.append(target)
    gen.dead_ends.extend(sorted(found))
    return True


def build_maze(gen: "Generator") -> int:
    """Fill every remaining lattice node with halls; returns halls grown."""
    backend, grid = gen.backend, gen.grid
    grown = 0
    # constraints first so each one is guaranteed to land inside some hall
    for constraint in sorted(gen.constraints):
        if grow_maze(gen, constraint):
            grown += 1
    width = backend.width(grid)
    height = backend.height(grid)
    for half_x in range(width // 2):
        for half_y in range(height // 2):
            pos = Position(half_x * 2 + 1, half_y * 2 + 1)
            if backend.is_wall(grid, pos.x, pos.y) and grow_maze(gen, pos):
                grown += 1
    return grown


__all__ = ["is_dead_end", "grow_maze", "build_maze"]
