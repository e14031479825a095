"""Random-walk growth of the room graph.

Starting from a single Start room at the origin, repeatedly pick a room
from the frontier and try to grow Normal rooms into its free neighbours.
After each new room a fresh float is drawn; when it exceeds the branching
factor the current room stops growing for this round.  Low branching
factors therefore give long corridors, high ones give branchy layouts.

Growth stops when the room budget is reached or the frontier runs dry
(every frontier room fully surrounded).
"""

from __future__ import annotations

import logging

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.ir.rooms import DIRECTIONS, ORIGIN, RoomKind

logger = logging.getLogger(__name__)


class GrowthEngine:
    """Builds the initial connected room graph.

    Parameters
    ----------
    max_rooms:
        Room budget including the Start room.
    branching_factor:
        Threshold in ``[0, 1]`` for continuing to grow from the same room.
    """

    def __init__(self, max_rooms: int, branching_factor: float) -> None:
        if max_rooms < 1:
            raise ValueError(f"max_rooms must be >= 1, got {max_rooms}")
        self.max_rooms = max_rooms
        self.branching_factor = branching_factor

    def grow(self, rng: DungeonRNG) -> GridGraph:
        graph = GridGraph()
        graph.add_room(ORIGIN, RoomKind.START)
        frontier = [ORIGIN]

        while len(graph) < self.max_rooms and frontier:
            idx = rng.random_int(0, len(frontier) - 1)
            current = frontier[idx]

            moves = list(DIRECTIONS)
            rng.shuffle(moves)

            grown = False
            for dx, dy in moves:
                if len(graph) >= self.max_rooms:
                    break
                neighbor = current.offset(dx, dy)
                if neighbor in graph:
                    continue

                graph.add_room(neighbor, RoomKind.NORMAL)
                graph.connect(current, neighbor)
                frontier.append(neighbor)
                grown = True

                if rng.random_float() > self.branching_factor:
                    break

            if not grown:
                frontier.pop(idx)

        # On the unbounded grid the outermost room always has a free
        # neighbour, so only a broken frontier can land here.
        if len(graph) < self.max_rooms:
            logger.warning(
                "Growth self-blocked at %d of %d rooms",
                len(graph), self.max_rooms,
            )
        logger.debug(
            "Grew %d rooms, %d corridors", len(graph), len(graph.corridors),
        )
        return graph
