from mazegen.cells import Door, Position
from mazegen.config import MazeConfig
from mazegen.doors import connect_regions
from mazegen.pruning import reduce_maze
from mazegen.rooms import Room
from mazegen.tunnels import build_maze
from mazegen.tiles import DOOR_ID_START, NOTHING_ID, ROOM_ID_START
from tests.maze_test_utils import carve, region_at


def _t_junction(prepared, chance, constraints=()):
    gen = prepared(11, 11, MazeConfig(room_base_number=0, deadend_chance=chance), constraints=constraints)
    carve(gen, [(1, y) for y in range(1, 6)] + [(2, 3), (3, 3)], 1)
    gen.dead_ends = [Position(1, 1), Position(1, 5), Position(3, 3)]
    return gen


def test_full_trim_collapses_tree(prepared):
    gen = _t_junction(prepared, 0.0)
    assert reduce_maze(gen) == 6
    carved = [(x, y) for x in range(11) for y in range(11) if region_at(gen, (x, y)) != NOTHING_ID]
    assert carved == [(3, 3)]
    assert gen.dead_ends == []


def test_trim_stops_at_junction(prepared):
    gen = _t_junction(prepared, 0.0)
    gen.dead_ends = [Position(1, 1)]
    assert reduce_maze(gen) == 2
    assert region_at(gen, (1, 3)) == 1
    assert region_at(gen, (1, 2)) == NOTHING_ID
    assert gen.dead_ends == []


def test_keep_all_dead_ends(prepared):
    gen = _t_junction(prepared, 1.0)
    assert reduce_maze(gen) == 0
    assert gen.dead_ends == [Position(1, 1), Position(1, 5), Position(3, 3)]


def test_trim_never_removes_constraints(prepared):
    gen = prepared(11, 11, MazeConfig(room_base_number=0, deadend_chance=0.0), constraints={(1, 5)})
    carve(gen, [(1, y) for y in range(1, 8)], 1)
    gen.dead_ends = [Position(1, 1), Position(1, 7)]
    assert reduce_maze(gen) == 6
    assert region_at(gen, (1, 5)) == 1
    assert region_at(gen, (1, 4)) == NOTHING_ID
    assert region_at(gen, (1, 6)) == NOTHING_ID


def test_trim_through_door_hides_it_and_spares_room(prepared):
    gen = prepared(11, 11, MazeConfig(room_base_number=0, deadend_chance=0.0))
    carve(gen, [(1, 1), (1, 2), (1, 3)], 1)
    carve(gen, [(3, 3)], ROOM_ID_START)
    door = Door(Position(2, 3), DOOR_ID_START + 1, ROOM_ID_START, 1)
    carve(gen, [door.position], door.id)
    gen.doors = [door]
    gen.dead_ends = [Position(1, 1)]
    assert reduce_maze(gen) == 4
    assert door.is_hidden is True
    assert region_at(gen, (2, 3)) == NOTHING_ID
    assert region_at(gen, (3, 3)) == ROOM_ID_START


def test_one_cell_hall_behind_a_door_is_trimmed(prepared):
    gen = prepared(5, 3, MazeConfig(room_base_number=0, deadend_chance=0.0))
    gen.rooms = [Room(Position(1, 1), Position(1, 1), ROOM_ID_START)]
    carve(gen, [(1, 1)], ROOM_ID_START)
    build_maze(gen)
    assert gen.dead_ends == [Position(3, 1)]
    assert connect_regions(gen) == 1
    assert reduce_maze(gen) == 2
    assert gen.doors[0].is_hidden is True
    assert region_at(gen, (3, 1)) == NOTHING_ID
    assert region_at(gen, (1, 1)) == ROOM_ID_START
    assert gen.dead_ends == []
