"""Door insertion: room-to-region doors and dead-end reconnection doors."""
from __future__ import annotations

from typing import Dict, List, Set

from .cells import CARDINALS, Door, Position
from .grid import is_empty
from .tiles import NOTHING_ID, is_hall_id


def _add_connector(gen: "Generator", test_point: Position, connect_point: Position,
                   connections: Dict[int, List[Position]]) -> None:
    region_id = gen.backend.get_region(gen.grid, test_point.x, test_point.y)
    if region_id != NOTHING_ID:
        connections.setdefault(region_id, []).append(connect_point)


def connect_regions(gen: "Generator") -> int:
    """Give every room one door to each distinct region around it.

    Candidates are the wall cells between the room edge and a carved cell two
    steps out; one is chosen at random per neighboring region. A neighbor that
    is itself an already processed room is skipped so a pair of rooms is never
    joined twice. Returns the number of doors created.
    """
    created = 0
    connected_rooms: Set[int] = set()
    for room in gen.rooms:
        lo, hi = room.min_point, room.max_point
        connectors: Dict[int, List[Position]] = {}
        for x in range(lo.x, hi.x + 1, 2):
            _add_connector(gen, Position(x, lo.y - 2), Position(x, lo.y - 1), connectors)
            _add_connector(gen, Position(x, hi.y + 2), Position(x, hi.y + 1), connectors)
        for y in range(lo.y, hi.y + 1, 2):
            _add_connector(gen, Position(lo.x - 2, y), Position(lo.x - 1, y), connectors)
            _add_connector(gen, Position(hi.x + 2, y), Position(hi.x + 1, y), connectors)
        for region_id, points in connectors.items():
            if region_id in connected_rooms:
                continue
            p = gen.rng.choice(points)
            gen.door_id += 1
            gen.backend.set_region(gen.grid, p.x, p.y, gen.door_id)
            gen.doors.append(Door(p, gen.door_id, room.id, region_id))
            created += 1
        connected_rooms.add(room.id)
    return created


def reconnect_dead_ends(gen: "Generator") -> int:
    """Open a door from surviving dead ends into an adjacent foreign region.

    A hidden door already sitting on the chosen cell is revived rather than
    duplicated. Returns the number of doors opened.
    """
    backend, grid = gen.backend, gen.grid
    hidden_doors = {d.position: d for d in gen.doors if d.is_hidden}
    opened = 0
    for dead_end in gen.dead_ends:
        hall_id = backend.get_region(grid, dead_end.x, dead_end.y)
        if not is_hall_id(hall_id):
            continue
        candidates: Dict[Position, int] = {}
        connections = 0
        for d in CARDINALS:
            far = dead_end.neighbour_to(d * 2)
            neighbor_id = backend.get_region(grid, far.x, far.y)
            if neighbor_id == NOTHING_ID:
                continue
            middle = dead_end.neighbour_to(d)
            if not is_empty(backend, grid, middle.x, middle.y):
                connections += 1
                continue
            if neighbor_id != hall_id:
                candidates[middle] = neighbor_id
        if connections > 1 or not candidates:
            continue  # not a true dead end, or nothing to reach
        if gen.rng.random() >= gen.config.reconnect_deadends_chance:
            continue
        position = min(candidates)
        door = hidden_doors.pop(position, None)
        if door is not None:
            # reuse the hidden record so no two doors share a cell
            door.is_hidden = False
            backend.set_region(grid, position.x, position.y, door.id)
        else:
            gen.door_id += 1
            backend.set_region(grid, position.x, position.y, gen.door_id)
            gen.doors.append(Door(position, gen.door_id, candidates[position], hall_id))
        opened += 1
    return opened


__all__ = ["connect_regions", "reconnect_dead_ends"]
