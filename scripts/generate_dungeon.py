"""Generate a single dungeon layout and print a summary.

Usage:
    uv run python scripts/generate_dungeon.py [--rooms 15] [--branching 0.5] [--seed 42] [--output layout.json]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tiny_dungeon.analysis.metrics import compute_layout_metrics
from tiny_dungeon.analysis.report import generate_layout_report
from tiny_dungeon.gen.core.rng import DungeonRNG
from tiny_dungeon.gen.generator import generate
from tiny_dungeon.ir.config import GeneratorConfig, load_config
from tiny_dungeon.ir.layout import save_layout


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a dungeon layout")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--rooms", type=int, default=15, help="Room budget")
    parser.add_argument("--branching", type=float, default=0.5, help="Branching factor")
    parser.add_argument("--loot", type=int, default=None, help="Treasure room count")
    parser.add_argument("--open", action="store_true", help="Skip lock-and-key gating")
    parser.add_argument("--seed", type=int, default=None, help="Seed (random if omitted)")
    parser.add_argument("--output", type=str, default=None, help="Write layout JSON here")
    parser.add_argument("--verbose", action="store_true", help="Log generation steps")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.config:
        config = load_config(Path(args.config))
    else:
        config = GeneratorConfig(
            max_rooms=args.rooms,
            branching_factor=args.branching,
            use_metroidvania_logic=not args.open,
            loot_room_count=args.loot,
        )

    rng = DungeonRNG(args.seed) if args.seed is not None else None
    layout = generate(config, rng)
    print(generate_layout_report(layout, compute_layout_metrics(layout)))

    if args.output:
        out_path = Path(args.output)
        save_layout(layout, out_path)
        print(f"Saved layout to {out_path}")


if __name__ == "__main__":
    main()
