#!/usr/bin/env python3
"""
Standalone analysis report for one game.
Reads the stored history and prints frequency, hot/cold, overdue,
combination and recommendation summaries.

Usage: python scripts/run_analysis.py <slug>
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lottostats.analysis import get_full_analysis, rank_by_frequency
from lottostats.config import configure_logging
from lottostats.games import Game
from lottostats.odds import jackpot_odds
from lottostats.predictor import generate_all_strategies
from lottostats.schedule import next_draw
from lottostats.scraper import load_draws


def main(argv=None):
    configure_logging()
    args = argv if argv is not None else sys.argv[1:]
    game = Game.from_slug(args[0] if args else "powerball")
    schema = game.schema

    draws = load_draws(game)
    print(f"Loaded {len(draws)} {schema.name} draws")
    if draws:
        print(f"Date range: {draws[-1].date} to {draws[0].date}")

    report = get_full_analysis(draws, game)

    print(f"\n{'=' * 60}")
    print(f"{schema.name.upper()} - FREQUENCY")
    print(f"{'=' * 60}")
    ranked = rank_by_frequency(report["main_frequency"])
    for rank, f in ranked[:10]:
        print(f"  #{rank:2d}. Number {f.number:2d} - {f.count} draws ({f.percentage:.2f}%), "
              f"last seen {f.draws_since_last_drawn} draws ago")

    print(f"\n{'=' * 60}")
    print("HOT / COLD")
    print(f"{'=' * 60}")
    for label in ("hot", "warm", "cold"):
        nums = [h.number for h in report["main_hot_cold"] if h.classification == label]
        print(f"  {label.capitalize():5s}: {nums}")

    print(f"\n{'=' * 60}")
    print("MOST OVERDUE")
    print(f"{'=' * 60}")
    summary = report["main_summary"]
    if len(summary):
        top = summary.sort_values(["overdue_ratio", "number"], ascending=[False, True]).head(10)
        for _, row in top.iterrows():
            print(f"  Number {int(row['number']):2d}: {int(row['draws_since_last_drawn'])} draws "
                  f"(ratio {row['overdue_ratio']:.2f}, avg gap {row['avg_gap']:.1f})")

    print(f"\n{'=' * 60}")
    print("TOP COMBINATIONS")
    print(f"{'=' * 60}")
    for key in ("pairs", "triplets", "quadruplets"):
        top = report[key][:5]
        shown = ", ".join(f"{'-'.join(map(str, e.numbers))} ({e.count}x)" for e in top)
        print(f"  {key.capitalize():11s}: {shown or 'no data'}")

    print(f"\n{'=' * 60}")
    print("RECOMMENDATION SETS")
    print(f"{'=' * 60}")
    for name, sets in generate_all_strategies(draws, game).items():
        print(f"\n  {name.capitalize()}:")
        for s in sets:
            bonus = f" + {schema.bonus_label} {s.bonus_number}" if s.bonus_number is not None else ""
            print(f"    {', '.join(str(n) for n in s.numbers)}{bonus}  (score {s.score:.3f})")

    upcoming = next_draw(game)
    if upcoming.is_retired:
        print(f"\n{schema.name} retired after {upcoming.when:%Y-%m-%d}")
    else:
        print(f"\nNext draw: {upcoming.when:%A %Y-%m-%d %H:%M %Z}")
    print(f"Jackpot odds: 1 in {jackpot_odds(game):,}")

    print(f"\n{'=' * 60}")
    print("DISCLAIMER: Lottery draws are independent random events. Hot, cold")
    print("and overdue describe history only; no set is more likely to win.")
    print(f"{'=' * 60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
