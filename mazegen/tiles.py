# Region id constants centralized for modular imports
NOTHING_ID = -1  # wall / unused cell
MAX_ROOMS = 1_000_000
HALL_ID_START = 0
ROOM_ID_START = MAX_ROOMS
DOOR_ID_START = MAX_ROOMS * 2


def is_hall_id(region_id: int) -> bool:
    return HALL_ID_START <= region_id < ROOM_ID_START


def is_room_id(region_id: int) -> bool:
    return ROOM_ID_START <= region_id < DOOR_ID_START


def is_door_id(region_id: int) -> bool:
    return region_id >= DOOR_ID_START


__all__ = [
    "NOTHING_ID",
    "MAX_ROOMS",
    "HALL_ID_START",
    "ROOM_ID_START",
    "DOOR_ID_START",
    "is_hall_id",
    "is_room_id",
    "is_door_id",
]
