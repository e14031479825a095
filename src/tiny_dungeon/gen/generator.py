"""Dungeon generation pipeline.

Growth -> boss placement -> (metroidvania only) gating -> loot.  The
working ``GridGraph`` is handed from stage to stage and frozen into a
``DungeonLayout`` at the end.  Each randomised stage draws from its own
fork of the run RNG, so a fixed seed always reproduces the same layout.
"""

from __future__ import annotations

import logging

from tiny_dungeon.gen.boss import BossPlacer
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.gen.gating import GatingPostprocessor
from tiny_dungeon.gen.growth import GrowthEngine
from tiny_dungeon.gen.loot import LootPostprocessor
from tiny_dungeon.ir.config import GeneratorConfig
from tiny_dungeon.ir.layout import DungeonLayout

logger = logging.getLogger(__name__)


class DungeonGenerator:
    """Runs the full generation pipeline for one configuration.

    Parameters
    ----------
    config:
        Caller-owned settings.  Read on every call to :meth:`generate`,
        never modified.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config if config is not None else GeneratorConfig()

    def generate(self, rng: DungeonRNG | None = None) -> DungeonLayout:
        """Generate a fresh layout.

        Passing an RNG with a known seed makes the result reproducible;
        without one a random seed is drawn and recorded on the layout.
        """
        if rng is None:
            rng = DungeonRNG.from_entropy()
        cfg = self.config

        growth = GrowthEngine(cfg.max_rooms, cfg.branching_factor)
        graph = growth.grow(rng.fork("growth"))
        graph = BossPlacer().place(graph)
        if cfg.use_metroidvania_logic:
            graph = GatingPostprocessor().apply(graph, rng.fork("gating"))
        graph = LootPostprocessor(cfg.loot_room_count).apply(
            graph, rng.fork("loot"),
        )

        layout = graph.freeze(seed=rng.seed)
        logger.debug(
            "Generated layout seed=%d rooms=%d corridors=%d locked=%d",
            rng.seed, len(layout.rooms), len(layout.corridors),
            len(layout.locked_doors),
        )
        return layout


def generate(
    config: GeneratorConfig, rng: DungeonRNG | None = None,
) -> DungeonLayout:
    """Generate one layout for *config*."""
    return DungeonGenerator(config).generate(rng)


def generate_batch(
    config: GeneratorConfig,
    n_layouts: int,
    base_seed: int = 42,
) -> list[DungeonLayout]:
    """Generate *n_layouts* layouts with seeds ``base_seed + i``."""
    generator = DungeonGenerator(config)
    return [
        generator.generate(DungeonRNG(base_seed + i))
        for i in range(n_layouts)
    ]
