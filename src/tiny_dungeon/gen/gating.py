"""Metroidvania gating: lock the boss entrance and hide the key.

1. The first open corridor touching the Boss room (in corridor order)
   becomes a locked door.
2. Every room's degree is counted over open *and* locked edges.  Locked
   doors still connect rooms topologically; they only block traversal.
3. The key goes to a random Normal room of degree 1 (a dead end).  When
   no such room exists it goes to any random Normal room, and when there
   is no Normal room at all no key is placed.
"""

from __future__ import annotations

import logging

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.ir.rooms import Coordinate, RoomKind

logger = logging.getLogger(__name__)


class GatingPostprocessor:
    """Turns an open layout into a lock-and-key layout."""

    def apply(self, graph: GridGraph, rng: DungeonRNG) -> GridGraph:
        self.lock_boss_entrance(graph)
        self.place_key(graph, rng)
        return graph

    def lock_boss_entrance(self, graph: GridGraph) -> None:
        boss = graph.find(RoomKind.BOSS)
        if boss is None:
            logger.debug("No boss room, skipping lock")
            return
        entrance = graph.first_incident_corridor(boss)
        if entrance is None:
            logger.debug("Boss room at %s has no corridor, skipping lock", boss)
            return
        graph.lock(entrance)
        logger.debug("Locked boss entrance %s", entrance)

    def dead_ends(self, graph: GridGraph) -> list[Coordinate]:
        """Normal rooms with exactly one incident edge, in room order."""
        return [
            pos for pos, degree in graph.degrees().items()
            if degree == 1 and graph.rooms[pos] == RoomKind.NORMAL
        ]

    def place_key(self, graph: GridGraph, rng: DungeonRNG) -> None:
        candidates = self.dead_ends(graph)
        if candidates:
            policy = "dead end"
        else:
            candidates = graph.positions_of(RoomKind.NORMAL)
            policy = "fallback"

        if not candidates:
            logger.debug("No Normal room left, key not placed")
            return

        key = rng.random_choice(candidates)
        graph.assign_kind(key, RoomKind.KEY)
        logger.debug("Key at %s (%s)", key, policy)
