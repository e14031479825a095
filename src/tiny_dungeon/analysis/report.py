"""Report generation for layouts and layout batches.

Plain-text summaries for the terminal.  Drawing the layout itself is left
to rendering front-ends.
"""

from __future__ import annotations

from tiny_dungeon.analysis.models import BatchMetrics, LayoutMetrics
from tiny_dungeon.ir.config import GeneratorConfig
from tiny_dungeon.ir.layout import DungeonLayout
from tiny_dungeon.ir.rooms import RoomKind

_SPECIAL_KINDS = (RoomKind.START, RoomKind.BOSS, RoomKind.KEY, RoomKind.TREASURE)


def generate_layout_report(layout: DungeonLayout, metrics: LayoutMetrics) -> str:
    """Human-readable summary of a single layout."""
    lines: list[str] = []

    lines.append("=" * 50)
    seed = "random" if layout.seed is None else str(layout.seed)
    lines.append(f"Dungeon layout (seed {seed})")
    lines.append("=" * 50)

    lines.append(f"  Rooms:         {metrics.room_count}")
    lines.append(f"  Corridors:     {metrics.corridor_count}")
    lines.append(f"  Locked doors:  {metrics.locked_door_count}")
    lines.append(f"  Dead ends:     {metrics.dead_end_count}")
    lines.append(f"  Branch rooms:  {metrics.branch_room_count}")

    lines.append("")
    lines.append("## Special rooms")
    for kind in _SPECIAL_KINDS:
        positions = layout.positions_of(kind)
        if not positions:
            continue
        coords = ", ".join(f"({p.x}, {p.y})" for p in positions)
        lines.append(f"  {kind.value:10s} {coords}")

    if metrics.boss_distance is not None:
        lines.append("")
        lines.append(f"  Boss is {metrics.boss_distance} rooms from Start"
                     f"{' behind the locked door' if metrics.boss_gated else ''}")
    if metrics.key_distance is not None:
        where = "a dead end" if metrics.key_on_dead_end else "a fallback room"
        lines.append(f"  Key is {metrics.key_distance} rooms from Start, on {where}")

    for a, b in layout.locked_doors:
        lines.append(f"  Locked door: ({a.x}, {a.y}) <-> ({b.x}, {b.y})")

    lines.append("")
    return "\n".join(lines)


def generate_batch_report(config: GeneratorConfig, batch: BatchMetrics) -> str:
    """Human-readable summary of a batch of layouts."""
    lines: list[str] = []

    lines.append("=" * 50)
    lines.append(f"Layout survey -- {batch.total_layouts:,} layouts")
    lines.append(
        f"max_rooms={config.max_rooms} branching={config.branching_factor:.2f}"
        f" metroidvania={config.use_metroidvania_logic}"
    )
    lines.append("=" * 50)

    lines.append(f"  Avg rooms:          {batch.avg_room_count:.1f}")
    lines.append(f"  Avg dead ends:      {batch.avg_dead_ends:.1f}")
    lines.append(f"  Avg branch rooms:   {batch.avg_branch_rooms:.1f}")
    lines.append(f"  Avg treasure rooms: {batch.avg_treasure_count:.1f}")
    lines.append(f"  Avg boss distance:  {batch.avg_boss_distance:.1f}")
    lines.append(f"  Boss gated:         {batch.gated_rate:.1%}")
    lines.append(f"  Key on dead end:    {batch.key_dead_end_rate:.1%}")

    lines.append("")
    return "\n".join(lines)
