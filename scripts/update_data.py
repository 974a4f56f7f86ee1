#!/usr/bin/env python3
"""
Data Update Script for the lottery statistics site

1. Fetches the full draw history of each game from data.ny.gov
2. Validates ranges, schedule and duplicate draws
3. Stores the history as CSV (never replacing it with a shorter one)

Usage: python scripts/update_data.py [slug ...]
"""
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lottostats.config import configure_logging
from lottostats.exceptions import LotteryStatsError
from lottostats.games import Game
from lottostats.scraper import update_game


def main(argv=None):
    configure_logging()
    slugs = (argv if argv is not None else sys.argv[1:]) or [g.slug for g in Game]

    print("=" * 60)
    print("LOTTERY DATA UPDATE")
    print("=" * 60)

    failures = 0
    for slug in slugs:
        try:
            summary = update_game(Game.from_slug(slug))
        except LotteryStatsError as e:
            failures += 1
            print(f"\n✗ {slug}: {e}")
            continue

        status = "saved" if summary["saved"] else "KEPT EXISTING (record count guard)"
        print(f"\n✓ {slug}: fetched {summary['fetched']} draws, previously {summary['stored']} -> {status}")
        if summary["warnings"]:
            print(f"  {len(summary['warnings'])} validation warnings:")
            for w in summary["warnings"][:10]:
                print(f"    - {w}")

    print(f"\n{'=' * 60}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
