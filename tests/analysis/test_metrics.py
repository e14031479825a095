"""Tests for layout metric computation."""

from tiny_dungeon.analysis.metrics import compute_batch_metrics, compute_layout_metrics
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.gen.generator import generate, generate_batch
from tiny_dungeon.ir.config import GeneratorConfig
from tiny_dungeon.ir.layout import DungeonLayout, PlacedRoom
from tiny_dungeon.ir.rooms import ORIGIN, Coordinate, RoomKind

A = Coordinate(1, 0)
B = Coordinate(2, 0)
C = Coordinate(1, -1)
T = Coordinate(1, 1)


def _make_layout() -> DungeonLayout:
    return DungeonLayout(
        rooms=(
            PlacedRoom(position=ORIGIN, kind=RoomKind.START),
            PlacedRoom(position=A, kind=RoomKind.NORMAL),
            PlacedRoom(position=B, kind=RoomKind.BOSS),
            PlacedRoom(position=C, kind=RoomKind.KEY),
            PlacedRoom(position=T, kind=RoomKind.TREASURE),
        ),
        corridors=((ORIGIN, A), (A, C), (A, T)),
        locked_doors=((A, B),),
        seed=8,
    )


class TestLayoutMetrics:
    def test_counts(self):
        m = compute_layout_metrics(_make_layout())
        assert m.seed == 8
        assert m.room_count == 5
        assert m.corridor_count == 3
        assert m.locked_door_count == 1
        assert m.dead_end_count == 4
        assert m.branch_room_count == 1
        assert m.treasure_count == 1

    def test_gating(self):
        m = compute_layout_metrics(_make_layout())
        assert m.boss_distance == 2
        assert m.key_distance == 2
        assert m.key_on_dead_end is True
        assert m.boss_gated is True

    def test_single_room(self):
        layout = DungeonLayout(rooms=(PlacedRoom(position=ORIGIN, kind=RoomKind.START),))
        m = compute_layout_metrics(layout)
        assert m.room_count == 1
        assert m.dead_end_count == 0
        assert m.boss_distance is None
        assert m.key_distance is None
        assert m.boss_gated is False


class TestBatchMetrics:
    def test_empty(self):
        batch = compute_batch_metrics([])
        assert batch.total_layouts == 0
        assert batch.gated_rate == 0.0

    def test_metroidvania_batch_always_gated(self):
        layouts = generate_batch(GeneratorConfig(max_rooms=12), 40, base_seed=1)
        batch = compute_batch_metrics(layouts)
        assert batch.total_layouts == 40
        assert batch.avg_room_count == 12.0
        assert batch.gated_rate == 1.0
        assert 0.0 < batch.key_dead_end_rate <= 1.0

    def test_open_batch_never_gated(self):
        cfg = GeneratorConfig(max_rooms=12, use_metroidvania_logic=False)
        batch = compute_batch_metrics(generate_batch(cfg, 20))
        assert batch.gated_rate == 0.0
        assert batch.key_dead_end_rate == 0.0

    def test_branching_increases_branch_rooms(self):
        low = GeneratorConfig(max_rooms=25, branching_factor=0.0)
        high = GeneratorConfig(max_rooms=25, branching_factor=1.0)
        low_batch = compute_batch_metrics(generate_batch(low, 50))
        high_batch = compute_batch_metrics(generate_batch(high, 50))
        assert high_batch.avg_branch_rooms > low_batch.avg_branch_rooms

    def test_single_layout_matches_layout_metrics(self):
        layout = generate(GeneratorConfig(), DungeonRNG(3))
        m = compute_layout_metrics(layout)
        batch = compute_batch_metrics([layout])
        assert batch.avg_room_count == m.room_count
        assert batch.avg_dead_ends == m.dead_end_count
