"""Maze generator: rooms joined by winding one-cell halls.

Generation phases (strictly ordered):
    * Normalize dimensions, config and constraint points; seed the RNG.
    * Scatter non-overlapping rooms on odd coordinates.
    * Grow halls over every remaining lattice node (constraint points first).
    * Connect each room to every neighboring region with one door.
    * Hide doors that close a cycle (union-find), keeping a few at random.
    * Trim dead ends back toward a junction or room.
    * Reconnect some surviving dead ends to an adjacent region.

Public contract:
    gen = Generator()                 # or Generator(SparseGridBackend())
    gen.set_seed(42)                  # optional, pins the RNG
    grid = gen.generate(43, 27, MazeConfig(), {(1, 1)})
    Attributes: rooms, halls, doors, dead_ends, warnings, seed, config,
    constraints, regions, metrics, grid, backend
"""

from __future__ import annotations

import random
import time
from typing import Any, Dict, Iterable, List, Optional

from .cells import Door, Hall, Position, PositionSet
from .config import MazeConfig, fix_boundaries, fix_config, fix_constraints
from .connectivity import DisjointSet, reduce_connectivity
from .doors import connect_regions, reconnect_dead_ends
from .grid import GridBackend, ListGridBackend
from .logging_utils import get_logger
from .metrics import init_metrics
from .pruning import reduce_maze
from .rooms import Room, place_rooms
from .tiles import DOOR_ID_START, HALL_ID_START
from .tunnels import build_maze

log = get_logger("mazegen.generator")

SEED_BITS = 32


class Generator:
    def __init__(self, backend: Optional[GridBackend] = None):
        self.backend: GridBackend = backend if backend is not None else ListGridBackend()
        self.config = MazeConfig()
        self.rng = random.Random()
        self._pinned_seed: Optional[int] = None
        self.seed: Optional[int] = None
        self._reset()

    def _reset(self) -> None:
        # grids handed out by earlier generate calls stay untouched
        self.grid = self.backend.construct(0, 0)
        self.rooms: List[Room] = []
        self.halls: List[Hall] = []
        self.doors: List[Door] = []
        self.dead_ends: List[Position] = []
        self.constraints: PositionSet = set()
        self.warnings: List[str] = []
        self.regions = DisjointSet()
        self.metrics: Dict[str, Any] = init_metrics()
        self.hall_id = HALL_ID_START
        self.door_id = DOOR_ID_START

    def clear(self) -> None:
        """Release the current grid and every generated record."""
        self.backend.clear(self.grid)
        self._reset()

    def set_seed(self, seed: Optional[int]) -> None:
        """Pin the seed used by every following ``generate`` call (None unpins)."""
        self._pinned_seed = seed

    def generate(
        self,
        width: int,
        height: int,
        config: Optional[MazeConfig] = None,
        constraints: Iterable = (),
    ):
        """Generate a maze and return the grid.

        ``constraints`` are (x, y) points that must never end up as wall; only
        interior points with odd x and y are honored.
        """
        self._reset()
        start = time.perf_counter()
        phase_times: Dict[str, int] = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            log.debug(event="phase_done", phase=label, ms=phase_times[label])
            return r

        _phase('init_generation', self._init_generation, width, height, config or MazeConfig(), constraints)
        self.rooms = _phase('place_rooms', place_rooms, self)
        self.metrics['halls_grown'] = _phase('build_maze', build_maze, self)
        self.metrics['dead_ends_found'] = len(self.dead_ends)
        self.metrics['doors_created'] = _phase('connect_regions', connect_regions, self)
        _phase('reduce_connectivity', reduce_connectivity, self)
        self.metrics['dead_end_cells_trimmed'] = _phase('reduce_maze', reduce_maze, self)
        self.metrics['dead_ends_reconnected'] = _phase('reconnect_dead_ends', reconnect_dead_ends, self)

        self.metrics['rooms_placed'] = len(self.rooms)
        self.metrics['doors_hidden'] = sum(1 for d in self.doors if d.is_hidden)
        self.metrics['warnings'] = len(self.warnings)
        self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        self.metrics['phase_ms'] = phase_times
        log.debug(
            event="maze_generated",
            seed=self.seed,
            width=self.backend.width(self.grid),
            height=self.backend.height(self.grid),
            rooms=len(self.rooms),
            halls=len(self.halls),
            doors=len(self.doors),
            runtime_ms=self.metrics['runtime_ms'],
        )
        return self.grid

    def _init_generation(self, width: int, height: int, config: MazeConfig, constraints: Iterable) -> None:
        grid_width, grid_height, warnings = fix_boundaries(width, height)
        self.warnings.extend(warnings)
        self.grid = self.backend.construct(grid_width, grid_height)
        self.config, warnings = fix_config(config, grid_width, grid_height)
        self.warnings.extend(warnings)
        self.constraints, warnings = fix_constraints(self.backend, self.grid, constraints)
        self.warnings.extend(warnings)
        for message in self.warnings:
            log.debug(event="input_corrected", message=message)
        if self._pinned_seed is not None:
            self.seed = self._pinned_seed
        else:
            self.seed = random.SystemRandom().getrandbits(SEED_BITS)
        self.rng.seed(self.seed)

    @property
    def width(self) -> int:
        return self.backend.width(self.grid)

    @property
    def height(self) -> int:
        return self.backend.height(self.grid)


__all__ = ["Generator"]
