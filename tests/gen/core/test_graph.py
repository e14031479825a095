"""Tests for the mutable working graph."""

import pytest

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.ir.rooms import Coordinate, RoomKind

S = Coordinate(0, 0)
A = Coordinate(1, 0)
B = Coordinate(2, 0)


def _make_line() -> GridGraph:
    graph = GridGraph()
    graph.add_room(S, RoomKind.START)
    graph.add_room(A, RoomKind.NORMAL)
    graph.add_room(B, RoomKind.NORMAL)
    graph.connect(S, A)
    graph.connect(A, B)
    return graph


class TestAddRoom:
    def test_add_room(self):
        graph = GridGraph()
        graph.add_room(S, RoomKind.START)
        assert graph.rooms == {S: RoomKind.START}
        assert S in graph
        assert len(graph) == 1

    def test_occupied_coordinate_rejected(self):
        graph = GridGraph()
        graph.add_room(S, RoomKind.START)
        with pytest.raises(ValueError, match="already exists"):
            graph.add_room(S, RoomKind.NORMAL)


class TestConnect:
    def test_connect_adjacent(self):
        graph = _make_line()
        assert graph.corridors == [(S, A), (A, B)]

    def test_non_adjacent_rejected(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="not adjacent"):
            graph.connect(S, B)

    def test_missing_room_rejected(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="missing room"):
            graph.connect(B, Coordinate(3, 0))

    def test_duplicate_rejected_in_either_orientation(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="already exists"):
            graph.connect(A, S)

    def test_duplicate_of_locked_door_rejected(self):
        graph = _make_line()
        graph.lock((A, B))
        with pytest.raises(ValueError, match="already exists"):
            graph.connect(B, A)


class TestAssignKind:
    def test_normal_to_boss(self):
        graph = _make_line()
        graph.assign_kind(B, RoomKind.BOSS)
        assert graph.rooms[B] == RoomKind.BOSS

    def test_start_cannot_be_overwritten(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="Cannot overwrite START"):
            graph.assign_kind(S, RoomKind.KEY)

    def test_special_room_cannot_be_overwritten(self):
        graph = _make_line()
        graph.assign_kind(B, RoomKind.BOSS)
        with pytest.raises(ValueError, match="Cannot overwrite BOSS"):
            graph.assign_kind(B, RoomKind.TREASURE)

    def test_cannot_assign_start(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="cannot be assigned"):
            graph.assign_kind(A, RoomKind.START)

    def test_missing_room(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="No room"):
            graph.assign_kind(Coordinate(5, 5), RoomKind.KEY)


class TestLockAndQueries:
    def test_lock_moves_corridor(self):
        graph = _make_line()
        graph.lock((A, B))
        assert graph.corridors == [(S, A)]
        assert graph.locked_doors == [(A, B)]

    def test_lock_unknown_corridor(self):
        graph = _make_line()
        with pytest.raises(ValueError, match="not an open corridor"):
            graph.lock((S, B))

    def test_degrees_count_locked_doors(self):
        graph = _make_line()
        graph.lock((A, B))
        assert graph.degrees() == {S: 1, A: 2, B: 1}

    def test_first_incident_corridor_uses_list_order(self):
        graph = _make_line()
        assert graph.first_incident_corridor(A) == (S, A)
        assert graph.first_incident_corridor(B) == (A, B)

    def test_first_incident_corridor_none(self):
        graph = GridGraph()
        graph.add_room(S, RoomKind.START)
        assert graph.first_incident_corridor(S) is None

    def test_freeze(self):
        graph = _make_line()
        graph.lock((A, B))
        layout = graph.freeze(seed=11)
        assert layout.seed == 11
        assert [r.position for r in layout.rooms] == [S, A, B]
        assert layout.corridors == ((S, A),)
        assert layout.locked_doors == ((A, B),)
