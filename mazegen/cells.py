from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Set, Tuple


@dataclass(frozen=True)
class Direction:
    """Cardinal step on the grid; ``d * 2`` jumps over the wall between lattice nodes."""

    dx: int = 0
    dy: int = 0

    def __neg__(self) -> "Direction":
        return Direction(-self.dx, -self.dy)

    def __mul__(self, factor: int) -> "Direction":
        return Direction(self.dx * factor, self.dy * factor)

    __rmul__ = __mul__


NORTH = Direction(0, -1)
EAST = Direction(1, 0)
SOUTH = Direction(0, 1)
WEST = Direction(-1, 0)
CARDINALS: Tuple[Direction, ...] = (NORTH, EAST, SOUTH, WEST)


class Position(NamedTuple):
    x: int
    y: int

    def neighbour_to(self, d: Direction) -> "Position":
        return Position(self.x + d.dx, self.y + d.dy)


@dataclass
class Hall:
    start: Position  # any cell belonging to the hall
    id: int


@dataclass
class Door:
    position: Position
    id: int
    room_id: int
    hall_id: int
    # set when reduce_connectivity or dead-end trimming blanks the cell
    is_hidden: bool = False


PositionSet = Set[Position]
