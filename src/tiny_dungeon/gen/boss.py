"""Boss placement: the room farthest from the origin becomes the Boss."""

from __future__ import annotations

import logging

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.ir.rooms import RoomKind

logger = logging.getLogger(__name__)


class BossPlacer:
    """Marks the Normal room with the largest ``|x| + |y|`` as Boss.

    Ties go to the room created first, so a fixed seed always picks the
    same room.
    """

    def place(self, graph: GridGraph) -> GridGraph:
        candidates = graph.positions_of(RoomKind.NORMAL)
        if not candidates:
            logger.debug("No room available for the boss")
            return graph

        # max() keeps the first of equal keys
        boss = max(candidates, key=lambda pos: pos.manhattan())
        graph.assign_kind(boss, RoomKind.BOSS)
        logger.debug("Boss at %s (distance %d)", boss, boss.manhattan())
        return graph
