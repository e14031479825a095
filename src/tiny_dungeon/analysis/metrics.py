"""Pure metric computation functions for layout analysis.

All functions take layouts and return structured metrics.
No side effects, no I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tiny_dungeon.analysis.models import BatchMetrics, LayoutMetrics
from tiny_dungeon.ir.rooms import RoomKind

if TYPE_CHECKING:
    from tiny_dungeon.ir.layout import DungeonLayout


def compute_layout_metrics(layout: DungeonLayout) -> LayoutMetrics:
    """Compute topology metrics for one layout."""
    degrees = layout.degrees()
    start = layout.find(RoomKind.START)
    boss = layout.find(RoomKind.BOSS)
    key = layout.find(RoomKind.KEY)

    boss_distance = key_distance = None
    boss_gated = False
    if start is not None:
        distances = layout.distances_from(start, include_locked=True)
        if boss is not None:
            boss_distance = distances.get(boss)
            open_side = layout.reachable_from(start, include_locked=False)
            boss_gated = boss not in open_side
        if key is not None:
            key_distance = distances.get(key)

    return LayoutMetrics(
        seed=layout.seed,
        room_count=len(layout.rooms),
        corridor_count=len(layout.corridors),
        locked_door_count=len(layout.locked_doors),
        dead_end_count=sum(1 for d in degrees.values() if d == 1),
        branch_room_count=sum(1 for d in degrees.values() if d >= 3),
        treasure_count=len(layout.positions_of(RoomKind.TREASURE)),
        boss_distance=boss_distance,
        key_distance=key_distance,
        key_on_dead_end=key is not None and degrees[key] == 1,
        boss_gated=boss_gated,
    )


def compute_batch_metrics(layouts: list[DungeonLayout]) -> BatchMetrics:
    """Compute aggregate statistics over a batch of layouts."""
    total = len(layouts)
    if total == 0:
        return BatchMetrics(
            total_layouts=0, avg_room_count=0.0, avg_dead_ends=0.0,
            avg_branch_rooms=0.0, avg_treasure_count=0.0,
            avg_boss_distance=0.0, gated_rate=0.0, key_dead_end_rate=0.0,
        )

    per_layout = [compute_layout_metrics(layout) for layout in layouts]
    with_boss = [m.boss_distance for m in per_layout if m.boss_distance is not None]
    keyed = [m for m in per_layout if m.key_distance is not None]

    return BatchMetrics(
        total_layouts=total,
        avg_room_count=sum(m.room_count for m in per_layout) / total,
        avg_dead_ends=sum(m.dead_end_count for m in per_layout) / total,
        avg_branch_rooms=sum(m.branch_room_count for m in per_layout) / total,
        avg_treasure_count=sum(m.treasure_count for m in per_layout) / total,
        avg_boss_distance=sum(with_boss) / len(with_boss) if with_boss else 0.0,
        gated_rate=sum(1 for m in per_layout if m.boss_gated) / total,
        key_dead_end_rate=(
            sum(1 for m in keyed if m.key_on_dead_end) / len(keyed)
            if keyed else 0.0
        ),
    )
