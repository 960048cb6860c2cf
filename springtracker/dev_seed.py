# Rev 0.1.0
"""
Developer seed: wipes the database, creates sample tags and issues, and
prints the sidebar (smart filters, tag filters with open-issue badges) plus
the awards the sample data unlocks.

Usage:
    python -m springtracker.dev_seed [--db PATH] [--tags N] [--issues N]
"""
from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional, Sequence

from .app_context import AppContext
from .services.award_evaluator import counters_for
from .utils.logging_setup import setup_logging
from .utils.paths import ensure_dirs


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed springtracker with sample data.")
    parser.add_argument("--db", type=Path, default=None, help="database path (default: settings / SPRINGTRACKER_DB)")
    parser.add_argument("--tags", type=int, default=5)
    parser.add_argument("--issues", type=int, default=10, help="issues per tag")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible data")
    return parser.parse_args(argv)


def run_seed(ctx: AppContext, tags: int, issues: int, seed: Optional[int] = None) -> None:
    print("=== Deleting existing data ===")
    deleted = ctx.store.delete_all()
    print(f"Deleted {len(deleted)} objects")

    print("=== Creating sample data ===")
    ctx.store.create_sample_data(tags, issues, rng=random.Random(seed))
    ctx.save()

    print("=== Smart filters ===")
    for flt in ctx.catalog.list_smart_filters():
        print(f" - {flt.name}: {len(ctx.query.select(flt))} issues")

    print("=== Tags ===")
    for flt in ctx.catalog.list_tag_filters(ctx.store.tags()):
        print(f" - {flt.name} [{ctx.query.active_issue_count(flt)} open]")

    print("=== Awards ===")
    counters = counters_for(ctx.store)
    for award in ctx.awards.awards:
        print(f" - {ctx.awards.award_title(award, counters)} ({award.description})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    ensure_dirs()
    setup_logging()
    ctx = AppContext.create(args.db)
    try:
        run_seed(ctx, args.tags, args.issues, args.seed)
    finally:
        ctx.close()
    print("=== Seed complete ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
