"""The finished dungeon layout handed to renderers and other consumers.

A ``DungeonLayout`` is a frozen snapshot of the working graph: rooms in
insertion order, open corridors, and locked doors.  It offers read-only
topology helpers (degree, neighbours, reachability) so consumers never
need to rebuild the graph themselves.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator

from .rooms import Coordinate, Corridor, RoomKind, corridor_key


class PlacedRoom(BaseModel):
    """A room at a grid position."""

    model_config = ConfigDict(frozen=True)

    position: Coordinate
    kind: RoomKind


class DungeonLayout(BaseModel):
    """Immutable result of one generation run."""

    model_config = ConfigDict(frozen=True)

    rooms: tuple[PlacedRoom, ...]
    """Every room, in the order it was created."""

    corridors: tuple[Corridor, ...] = ()
    """Open, always-traversable edges."""

    locked_doors: tuple[Corridor, ...] = ()
    """Edges that need the key to traverse."""

    seed: int | None = None
    """Seed of the RNG that produced this layout, if known."""

    @model_validator(mode="after")
    def _validate_topology(self) -> DungeonLayout:
        positions: set[Coordinate] = set()
        for room in self.rooms:
            if room.position in positions:
                raise ValueError(f"Duplicate room at {room.position}")
            positions.add(room.position)

        seen: set[frozenset[Coordinate]] = set()
        for a, b in self.corridors + self.locked_doors:
            if a not in positions or b not in positions:
                raise ValueError(f"Corridor {a} -> {b} references a missing room")
            if not a.is_adjacent(b):
                raise ValueError(f"Corridor {a} -> {b} joins non-adjacent rooms")
            key = corridor_key(a, b)
            if key in seen:
                raise ValueError(f"Corridor between {a} and {b} appears twice")
            seen.add(key)
        return self

    # -- room lookup ---------------------------------------------------------

    def room_map(self) -> dict[Coordinate, RoomKind]:
        return {room.position: room.kind for room in self.rooms}

    def kind_at(self, pos: Coordinate) -> RoomKind:
        """Kind of the room at *pos*, or ``RoomKind.NONE`` if empty."""
        for room in self.rooms:
            if room.position == pos:
                return room.kind
        return RoomKind.NONE

    def positions_of(self, kind: RoomKind) -> list[Coordinate]:
        return [room.position for room in self.rooms if room.kind == kind]

    def find(self, kind: RoomKind) -> Coordinate | None:
        """First room of *kind* in insertion order, or None."""
        positions = self.positions_of(kind)
        return positions[0] if positions else None

    # -- topology ------------------------------------------------------------

    def edges(self, include_locked: bool = True) -> list[Corridor]:
        edges = list(self.corridors)
        if include_locked:
            edges.extend(self.locked_doors)
        return edges

    def degrees(self) -> dict[Coordinate, int]:
        """Incident edge count per room, open and locked edges both count."""
        counts = {room.position: 0 for room in self.rooms}
        for a, b in self.edges(include_locked=True):
            counts[a] += 1
            counts[b] += 1
        return counts

    def neighbors(
        self, pos: Coordinate, include_locked: bool = True,
    ) -> list[Coordinate]:
        result: list[Coordinate] = []
        for a, b in self.edges(include_locked):
            if a == pos:
                result.append(b)
            elif b == pos:
                result.append(a)
        return result

    def reachable_from(
        self, pos: Coordinate, include_locked: bool = True,
    ) -> set[Coordinate]:
        """Rooms reachable from *pos* by breadth-first search."""
        adjacency: dict[Coordinate, list[Coordinate]] = {
            room.position: [] for room in self.rooms
        }
        for a, b in self.edges(include_locked):
            adjacency[a].append(b)
            adjacency[b].append(a)

        seen = {pos}
        queue = deque([pos])
        while queue:
            current = queue.popleft()
            for nxt in adjacency.get(current, []):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def distances_from(
        self, pos: Coordinate, include_locked: bool = True,
    ) -> dict[Coordinate, int]:
        """Shortest edge count from *pos* to every reachable room."""
        dist = {pos: 0}
        queue = deque([pos])
        while queue:
            current = queue.popleft()
            for nxt in self.neighbors(current, include_locked):
                if nxt not in dist:
                    dist[nxt] = dist[current] + 1
                    queue.append(nxt)
        return dist


def save_layout(layout: DungeonLayout, path: Path) -> None:
    """Save a layout to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(layout.model_dump_json(indent=2))


def load_layout(path: Path) -> DungeonLayout:
    """Load a layout from a JSON file."""
    return DungeonLayout.model_validate_json(path.read_text())
