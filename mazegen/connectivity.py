"""Region connectivity reduction.

After ``connect_regions`` every room has a door to each neighboring region,
which leaves plenty of cycles. This pass keeps one door per merge of two
components (a spanning forest over rooms and halls) and hides the rest,
except for the ones an ``extra_connection_chance`` roll decides to keep.
"""
from __future__ import annotations

from typing import Dict, Iterable

from .tiles import NOTHING_ID


class DisjointSet:
    """Union-find over region ids."""

    def __init__(self, region_ids: Iterable[int] = ()):
        self.parent: Dict[int, int] = {r: r for r in region_ids}

    def add(self, region_id: int) -> None:
        self.parent.setdefault(region_id, region_id)

    def __contains__(self, region_id: int) -> bool:
        return region_id in self.parent

    def find(self, region_id: int) -> int:
        root = region_id
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[region_id] != root:
            self.parent[region_id], region_id = root, self.parent[region_id]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already joined.

        The larger root id is attached under the smaller one.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[max(ra, rb)] = min(ra, rb)
        return True

    def roots(self):
        return {self.find(r) for r in self.parent}


def reduce_connectivity(gen: "Generator") -> int:
    """Hide redundant doors; returns how many were hidden."""
    regions = DisjointSet()
    for room in gen.rooms:
        regions.add(room.id)
    for hall in gen.halls:
        regions.add(hall.id)
    gen.regions = regions

    hidden = 0
    for door in gen.doors:
        if regions.union(door.room_id, door.hall_id):
            continue
        if gen.rng.random() >= gen.config.extra_connection_chance:
            door.is_hidden = True
            gen.backend.set_region(gen.grid, door.position.x, door.position.y, NOTHING_ID)
            hidden += 1
    return hidden


__all__ = ["DisjointSet", "reduce_connectivity"]
