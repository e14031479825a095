"""Tests for treasure room placement."""

import pytest

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.gen.loot import LootPostprocessor, auto_loot_count
from tiny_dungeon.ir.rooms import ORIGIN, Coordinate, RoomKind


def _make_graph(n_normal: int) -> GridGraph:
    """Start at the origin followed by a straight line of rooms; the last is Boss."""
    graph = GridGraph()
    graph.add_room(ORIGIN, RoomKind.START)
    for x in range(1, n_normal + 2):
        kind = RoomKind.BOSS if x == n_normal + 1 else RoomKind.NORMAL
        graph.add_room(Coordinate(x, 0), kind)
        graph.connect(Coordinate(x - 1, 0), Coordinate(x, 0))
    return graph


class TestAutoLootCount:
    @pytest.mark.parametrize("normal,expected", [
        (0, 2), (4, 2), (10, 2), (14, 2), (15, 3), (27, 5),
    ])
    def test_formula(self, normal, expected):
        assert auto_loot_count(normal) == expected


class TestLootPostprocessor:
    def test_explicit_count(self):
        graph = LootPostprocessor(3).apply(_make_graph(8), DungeonRNG(1))
        assert len(graph.positions_of(RoomKind.TREASURE)) == 3
        assert len(graph.positions_of(RoomKind.NORMAL)) == 5

    def test_zero_count(self):
        graph = LootPostprocessor(0).apply(_make_graph(8), DungeonRNG(1))
        assert graph.positions_of(RoomKind.TREASURE) == []

    def test_count_capped_by_available_rooms(self):
        graph = LootPostprocessor(10).apply(_make_graph(4), DungeonRNG(1))
        assert len(graph.positions_of(RoomKind.TREASURE)) == 4
        assert graph.positions_of(RoomKind.NORMAL) == []

    def test_auto_count(self):
        graph = LootPostprocessor().apply(_make_graph(15), DungeonRNG(1))
        assert len(graph.positions_of(RoomKind.TREASURE)) == 3

    def test_special_rooms_untouched(self):
        for seed in range(50):
            graph = LootPostprocessor(20).apply(_make_graph(6), DungeonRNG(seed))
            assert graph.rooms[ORIGIN] == RoomKind.START
            assert graph.rooms[Coordinate(7, 0)] == RoomKind.BOSS

    def test_selection_varies_with_seed(self):
        picks = set()
        for seed in range(30):
            graph = LootPostprocessor(1).apply(_make_graph(8), DungeonRNG(seed))
            picks.add(graph.positions_of(RoomKind.TREASURE)[0])
        assert len(picks) > 1
