"""Mutable room graph owned by a single generation run.

Each pipeline stage takes the graph, mutates it, and hands it on.  Once
the run completes the graph is frozen into a ``DungeonLayout`` and
discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tiny_dungeon.ir.layout import DungeonLayout, PlacedRoom
from tiny_dungeon.ir.rooms import (
    OVERWRITE_KINDS,
    Coordinate,
    Corridor,
    RoomKind,
    corridor_key,
    touches,
)


@dataclass
class GridGraph:
    """Rooms keyed by coordinate plus two disjoint edge collections.

    Attributes
    ----------
    rooms:
        ``Coordinate -> RoomKind``, in insertion order.
    corridors:
        Open corridors, in creation order.
    locked_doors:
        Corridors moved out of ``corridors`` by the gating stage.
    """

    rooms: dict[Coordinate, RoomKind] = field(default_factory=dict)
    corridors: list[Corridor] = field(default_factory=list)
    locked_doors: list[Corridor] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rooms)

    def __contains__(self, pos: object) -> bool:
        return pos in self.rooms

    # -- mutation ------------------------------------------------------------

    def add_room(self, pos: Coordinate, kind: RoomKind) -> None:
        """Create a room at an empty coordinate."""
        if pos in self.rooms:
            raise ValueError(
                f"Room already exists at {pos} ({self.rooms[pos].value})"
            )
        self.rooms[pos] = kind

    def connect(self, a: Coordinate, b: Coordinate) -> Corridor:
        """Add an open corridor between two existing, adjacent rooms."""
        if a not in self.rooms or b not in self.rooms:
            raise ValueError(f"Cannot connect {a} and {b}: missing room")
        if not a.is_adjacent(b):
            raise ValueError(f"Cannot connect {a} and {b}: not adjacent")
        key = corridor_key(a, b)
        if any(corridor_key(*e) == key for e in self.all_edges()):
            raise ValueError(f"Corridor between {a} and {b} already exists")
        corridor = (a, b)
        self.corridors.append(corridor)
        return corridor

    def assign_kind(self, pos: Coordinate, kind: RoomKind) -> None:
        """Overwrite a NORMAL room's kind with BOSS, KEY or TREASURE.

        This is the only way to change a room after it was created.
        """
        current = self.rooms.get(pos)
        if current is None:
            raise ValueError(f"No room at {pos}")
        if current != RoomKind.NORMAL:
            raise ValueError(
                f"Cannot overwrite {current.value} room at {pos} with {kind.value}"
            )
        if kind not in OVERWRITE_KINDS:
            raise ValueError(f"{kind.value} cannot be assigned after growth")
        self.rooms[pos] = kind

    def lock(self, corridor: Corridor) -> None:
        """Move an open corridor into the locked-door collection."""
        try:
            self.corridors.remove(corridor)
        except ValueError:
            raise ValueError(f"{corridor} is not an open corridor") from None
        self.locked_doors.append(corridor)

    # -- queries -------------------------------------------------------------

    def all_edges(self) -> list[Corridor]:
        return self.corridors + self.locked_doors

    def first_incident_corridor(self, pos: Coordinate) -> Corridor | None:
        """First open corridor (in list order) touching *pos*."""
        for corridor in self.corridors:
            if touches(corridor, pos):
                return corridor
        return None

    def degrees(self) -> dict[Coordinate, int]:
        """Incident edge count per room, counting open and locked edges."""
        counts = {pos: 0 for pos in self.rooms}
        for a, b in self.all_edges():
            counts[a] += 1
            counts[b] += 1
        return counts

    def positions_of(self, kind: RoomKind) -> list[Coordinate]:
        return [pos for pos, k in self.rooms.items() if k == kind]

    def find(self, kind: RoomKind) -> Coordinate | None:
        positions = self.positions_of(kind)
        return positions[0] if positions else None

    def freeze(self, seed: int | None = None) -> DungeonLayout:
        """Snapshot the graph into an immutable layout."""
        return DungeonLayout(
            rooms=tuple(
                PlacedRoom(position=pos, kind=kind)
                for pos, kind in self.rooms.items()
            ),
            corridors=tuple(self.corridors),
            locked_doors=tuple(self.locked_doors),
            seed=seed,
        )
