"""Generate many layouts and report aggregate topology statistics.

Usage:
    uv run python scripts/survey_layouts.py [--layouts 1000] [--rooms 15] [--branching 0.5]
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from tiny_dungeon.analysis.metrics import compute_batch_metrics
from tiny_dungeon.analysis.report import generate_batch_report
from tiny_dungeon.gen.generator import generate_batch
from tiny_dungeon.ir.config import GeneratorConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Survey generated layouts")
    parser.add_argument("--layouts", type=int, default=1_000, help="Number of layouts")
    parser.add_argument("--rooms", type=int, default=15, help="Room budget")
    parser.add_argument("--branching", type=float, default=0.5, help="Branching factor")
    parser.add_argument("--open", action="store_true", help="Skip lock-and-key gating")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--output", type=str, default=None, help="Write metrics JSON here")
    args = parser.parse_args()

    config = GeneratorConfig(
        max_rooms=args.rooms,
        branching_factor=args.branching,
        use_metroidvania_logic=not args.open,
    )

    print(f"Generating {args.layouts:,} layouts...")
    t0 = time.perf_counter()
    layouts = generate_batch(config, args.layouts, base_seed=args.seed)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    batch = compute_batch_metrics(layouts)
    print()
    print(generate_batch_report(config, batch))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(batch.model_dump(), indent=2))
        print(f"Saved metrics to {out_path}")


if __name__ == "__main__":
    main()
