from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from .cells import Position
from .tiles import ROOM_ID_START


@dataclass
class Room:
    min_point: Position
    max_point: Position  # inclusive
    id: int

    @property
    def width(self) -> int:
        return self.max_point.x - self.min_point.x + 1

    @property
    def height(self) -> int:
        return self.max_point.y - self.min_point.y + 1

    def cells(self) -> Iterator[Position]:
        for x in range(self.min_point.x, self.max_point.x + 1):
            for y in range(self.min_point.y, self.max_point.y + 1):
                yield Position(x, y)

    def too_close(self, another: "Room", distance: int) -> bool:
        return (
            self.min_point.x - distance < another.max_point.x
            and self.max_point.x + distance > another.min_point.x
            and self.min_point.y - distance < another.max_point.y
            and self.max_point.y + distance > another.min_point.y
        )

    def has_point(self, point: Position) -> bool:
        return (
            self.min_point.x <= point.x <= self.max_point.x
            and self.min_point.y <= point.y <= self.max_point.y
        )


def _odd(value: int) -> int:
    return value // 2 * 2 + 1


def place_rooms(gen: "Generator") -> List[Room]:
    """Scatter non-overlapping rooms on odd coordinates.

    Makes ``config.room_base_number`` single attempts; an attempt that lands
    too close to an earlier room (or covers a constraint point when
    ``constrain_hall_only`` is set) is simply dropped, so crowded grids end up
    with fewer rooms than requested.
    """
    backend, grid, cfg, rng = gen.backend, gen.grid, gen.config, gen.rng
    grid_width = backend.width(grid)
    grid_height = backend.height(grid)
    room_avg = cfg.room_size_min + (cfg.room_size_max - cfg.room_size_min) // 2
    rooms: List[Room] = []
    room_id = ROOM_ID_START

    for _ in range(cfg.room_base_number):
        room_width = _odd(rng.randint(cfg.room_size_min, cfg.room_size_max))
        room_height = _odd(rng.randint(cfg.room_size_min, cfg.room_size_max))
        room_x = _odd(rng.randint(0, grid_width - room_avg))
        room_y = _odd(rng.randint(0, grid_height - room_avg))

        # shrink to the largest odd size still inside the border wall
        x_overshoot = grid_width - room_x
        y_overshoot = grid_height - room_y
        if room_width >= x_overshoot:
            room_width = x_overshoot // 2 * 2 - 1
        if room_height >= y_overshoot:
            room_height = y_overshoot // 2 * 2 - 1
        if room_width < 1 or room_height < 1:
            continue

        room = Room(
            Position(room_x, room_y),
            Position(room_x + room_width - 1, room_y + room_height - 1),
            room_id,
        )
        if any(room.too_close(other, 1) for other in rooms):
            continue
        if cfg.constrain_hall_only and any(room.has_point(p) for p in gen.constraints):
            continue

        rooms.append(room)
        for p in room.cells():
            backend.set_region(grid, p.x, p.y, room_id)
        room_id += 1
    return rooms


__all__ = ["Room", "place_rooms"]
