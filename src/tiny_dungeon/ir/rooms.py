"""Room-level primitives: grid coordinates, room kinds, and corridors."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Coordinate(NamedTuple):
    """Integer grid position of a room.  Identity is value equality."""

    x: int
    y: int

    def manhattan(self) -> int:
        """Manhattan distance from the origin (``|x| + |y|``)."""
        return abs(self.x) + abs(self.y)

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    def neighbors(self) -> list[Coordinate]:
        """The four axis-aligned neighbours, in up/down/left/right order."""
        return [self.offset(dx, dy) for dx, dy in DIRECTIONS]

    def is_adjacent(self, other: Coordinate) -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1


ORIGIN = Coordinate(0, 0)

# up, down, left, right
DIRECTIONS: list[tuple[int, int]] = [(0, 1), (0, -1), (-1, 0), (1, 0)]


class RoomKind(str, Enum):
    """What a room is used for.  Visual mapping is left to the renderer."""

    NONE = "NONE"
    START = "START"
    NORMAL = "NORMAL"
    BOSS = "BOSS"
    KEY = "KEY"
    TREASURE = "TREASURE"


# Kinds that may replace a NORMAL room after growth.
OVERWRITE_KINDS = frozenset({RoomKind.BOSS, RoomKind.KEY, RoomKind.TREASURE})

# An edge between two adjacent rooms, kept in the orientation it was created.
Corridor = tuple[Coordinate, Coordinate]


def corridor_key(a: Coordinate, b: Coordinate) -> frozenset[Coordinate]:
    """Orientation-free identity of the corridor between *a* and *b*."""
    return frozenset((a, b))


def touches(corridor: Corridor, pos: Coordinate) -> bool:
    return corridor[0] == pos or corridor[1] == pos
