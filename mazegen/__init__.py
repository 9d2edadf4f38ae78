"""Public mazegen package interface."""

from .cells import CARDINALS, Direction, Door, Hall, Position
from .config import MazeConfig, fix_boundaries, fix_config, fix_constraints
from .connectivity import DisjointSet
from .generator import Generator
from .grid import GridBackend, ListGridBackend, SparseGrid, SparseGridBackend, is_empty
from .render import render_ascii
from .rooms import Room
from .tiles import (
    DOOR_ID_START,
    HALL_ID_START,
    MAX_ROOMS,
    NOTHING_ID,
    ROOM_ID_START,
    is_door_id,
    is_hall_id,
    is_room_id,
)  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "CARDINALS",
    "Direction",
    "Door",
    "Hall",
    "Position",
    "Room",
    "MazeConfig",
    "fix_boundaries",
    "fix_config",
    "fix_constraints",
    "DisjointSet",
    "Generator",
    "GridBackend",
    "ListGridBackend",
    "SparseGrid",
    "SparseGridBackend",
    "is_empty",
    "render_ascii",
    "NOTHING_ID",
    "MAX_ROOMS",
    "HALL_ID_START",
    "ROOM_ID_START",
    "DOOR_ID_START",
    "is_hall_id",
    "is_room_id",
    "is_door_id",
]
