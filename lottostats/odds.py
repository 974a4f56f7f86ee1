"""
Odds Calculator

Exact jackpot odds and per-tier match probabilities for each game.
Main-number matches follow a hypergeometric distribution. A separate bonus
ball is an independent 1-in-bonus_max draw; a bonus drawn from the main
pool (NY Lotto) can only land on one of the ticket's unmatched numbers.
"""
import pandas as pd
from scipy.special import comb
from scipy.stats import hypergeom

from lottostats.games import resolve_schema


def jackpot_odds(game) -> int:
    """Total combinations, i.e. the N in "1 in N" for the jackpot."""
    schema = resolve_schema(game)
    main_combos = comb(schema.main_max, schema.main_count, exact=True)
    if schema.bonus_from_main:
        return main_combos
    return main_combos * max(schema.bonus_max, 1)


def _bonus_probability(schema, matches):
    if schema.bonus_from_main:
        remaining = schema.main_max - schema.main_count
        return (schema.main_count - matches) / remaining if remaining else 0.0
    return 1.0 / schema.bonus_max


def match_probability(game, matches: int, bonus_match: bool = False) -> float:
    """Probability that one ticket matches exactly ``matches`` main numbers (and the bonus, if asked)."""
    schema = resolve_schema(game)
    if not 0 <= matches <= schema.main_count:
        return 0.0
    p_main = float(hypergeom(schema.main_max, schema.main_count, schema.main_count).pmf(matches))
    if not schema.has_bonus:
        return p_main if not bonus_match else 0.0
    p_bonus = _bonus_probability(schema, matches)
    return p_main * (p_bonus if bonus_match else 1.0 - p_bonus)


def odds_table(game) -> pd.DataFrame:
    """Every match tier with its probability and "1 in N" odds, best tier first."""
    schema = resolve_schema(game)
    bonus_options = (True, False) if schema.has_bonus else (False,)
    records = []
    for k in range(schema.main_count, -1, -1):
        for bonus in bonus_options:
            p = match_probability(schema, k, bonus)
            if schema.bonus_from_main and bonus and p == 0.0:
                continue
            label = f"{k}" + (f" + {schema.bonus_label}" if bonus else "")
            records.append({
                "tier": label,
                "main_matches": k,
                "bonus_match": bonus,
                "probability": p,
                "one_in": round(1.0 / p, 2) if p > 0 else float("inf"),
            })
    return pd.DataFrame(records)
