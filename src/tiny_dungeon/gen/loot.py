"""Loot placement: convert random Normal rooms into Treasure rooms."""

from __future__ import annotations

import logging

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.ir.rooms import RoomKind

logger = logging.getLogger(__name__)

_MIN_AUTO_LOOT = 2
_ROOMS_PER_LOOT = 5


def auto_loot_count(normal_rooms: int) -> int:
    """Default treasure count when none is configured."""
    return max(_MIN_AUTO_LOOT, normal_rooms // _ROOMS_PER_LOOT)


class LootPostprocessor:
    """Marks up to ``loot_room_count`` Normal rooms as Treasure.

    Parameters
    ----------
    loot_room_count:
        Explicit target, or None for :func:`auto_loot_count`.
    """

    def __init__(self, loot_room_count: int | None = None) -> None:
        self.loot_room_count = loot_room_count

    def apply(self, graph: GridGraph, rng: DungeonRNG) -> GridGraph:
        pool = graph.positions_of(RoomKind.NORMAL)
        target = self.loot_room_count
        if target is None:
            target = auto_loot_count(len(pool))

        placed = 0
        while placed < target and pool:
            pos = pool.pop(rng.random_int(0, len(pool) - 1))
            graph.assign_kind(pos, RoomKind.TREASURE)
            placed += 1

        if placed < target:
            logger.debug(
                "Placed %d of %d treasure rooms (ran out of Normal rooms)",
                placed, target,
            )
        return graph
