from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms_placed': 0,
        'halls_grown': 0,
        'doors_created': 0,
        'doors_hidden': 0,
        'dead_ends_found': 0,
        'dead_end_cells_trimmed': 0,
        'dead_ends_reconnected': 0,
        'warnings': 0,
        'runtime_ms': 0.0,
    }
