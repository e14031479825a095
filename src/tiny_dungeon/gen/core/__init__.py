"""Core generation primitives -- seeded RNG and the working room graph."""

from tiny_dungeon.gen.core.graph import GridGraph
from tiny_dungeon.gen.core.rng import DungeonRNG

__all__ = ["DungeonRNG", "GridGraph"]
