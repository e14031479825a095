"""Generation pipeline -- growth, boss placement, gating, and loot."""

from tiny_dungeon.gen.boss import BossPlacer
from tiny_dungeon.gen.core import DungeonRNG, GridGraph
from tiny_dungeon.gen.gating import GatingPostprocessor
from tiny_dungeon.gen.generator import DungeonGenerator, generate, generate_batch
from tiny_dungeon.gen.growth import GrowthEngine
from tiny_dungeon.gen.loot import LootPostprocessor, auto_loot_count

__all__ = [
    "BossPlacer",
    "DungeonGenerator",
    "DungeonRNG",
    "GatingPostprocessor",
    "GridGraph",
    "GrowthEngine",
    "LootPostprocessor",
    "auto_loot_count",
    "generate",
    "generate_batch",
]
