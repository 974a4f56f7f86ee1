"""
Weighted Scoring Model for lottery number recommendations

Scores every number of a pool as a weighted blend of min-max normalised
signals:
- Frequency: all-time appearance count
- Hot/cold: three-horizon momentum score
- Overdue: draws since last seen / expected interval
- Pair bonus: co-occurrence with numbers already picked for the same set
  (applied during set construction, see lottostats.predictor)

Three strategies ship with different weightings of those four signals.
"""
import logging
import math
from dataclasses import dataclass

import numpy as np

from lottostats.analysis import (
    calculate_frequency,
    calculate_hot_cold,
    expected_interval,
    overdue_ratio,
)
from lottostats.exceptions import ConfigurationError
from lottostats.games import resolve_schema

logger = logging.getLogger(__name__)

SIGNALS = ("frequency", "hot", "overdue")


@dataclass(frozen=True)
class StrategyWeights:
    frequency: float
    hot: float
    overdue: float
    pairs: float

    def __post_init__(self):
        total = self.frequency + self.hot + self.overdue + self.pairs
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigurationError(f"Strategy weights must sum to 1.0, got {total:.6f}")
        if min(self.frequency, self.hot, self.overdue, self.pairs) < 0:
            raise ConfigurationError("Strategy weights must not be negative")

    def without_pairs(self) -> dict:
        """Static-signal weights re-scaled to sum to 1 (used for bonus pools)."""
        static = {"frequency": self.frequency, "hot": self.hot, "overdue": self.overdue}
        total = sum(static.values())
        if total <= 0:
            return {k: 1.0 / len(static) for k in static}
        return {k: v / total for k, v in static.items()}


@dataclass(frozen=True)
class Strategy:
    name: str
    label: str
    description: str
    weights: StrategyWeights


STRATEGIES = {
    "balanced": Strategy(
        name="balanced",
        label="Balanced",
        description="A well-rounded blend of frequency trends, momentum, and overdue numbers.",
        weights=StrategyWeights(frequency=0.30, hot=0.30, overdue=0.25, pairs=0.15),
    ),
    "trending": Strategy(
        name="trending",
        label="Trending",
        description="Favors numbers showing strong momentum in recent draws.",
        weights=StrategyWeights(frequency=0.20, hot=0.50, overdue=0.15, pairs=0.15),
    ),
    "contrarian": Strategy(
        name="contrarian",
        label="Contrarian",
        description="Targets numbers that have been absent longer than their expected interval.",
        weights=StrategyWeights(frequency=0.15, hot=0.10, overdue=0.60, pairs=0.15),
    ),
}


def get_strategy(strategy) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return STRATEGIES[strategy]
    except KeyError:
        raise ConfigurationError(
            f"Unknown strategy {strategy!r} (known: {', '.join(STRATEGIES)})"
        ) from None


def normalize_scores(scores_dict):
    """Min-max normalize a dict of {number: score} to [0, 1]."""
    if not scores_dict:
        return {}
    vals = np.array(list(scores_dict.values()), dtype=float)
    mn, mx = vals.min(), vals.max()
    if mx - mn < 1e-12:
        return {k: 0.5 for k in scores_dict}
    return {k: float((v - mn) / (mx - mn)) for k, v in scores_dict.items()}


def compute_signals(draws, pool_max, per_draw, target="main"):
    """
    Normalised frequency, hot/cold and overdue signals for one pool.

    Returns
    -------
    dict {signal_name: {number: value in [0, 1]}}
    """
    logger.debug("Computing %s signals over %d draws (pool 1-%d)", target, len(draws), pool_max)
    freq = calculate_frequency(draws, pool_max, target)
    hot_cold = calculate_hot_cold(draws, pool_max, target)
    interval = expected_interval(pool_max, per_draw)

    raw = {
        "frequency": {f.number: f.count for f in freq},
        "hot": {h.number: h.score for h in hot_cold},
        "overdue": {f.number: overdue_ratio(f.draws_since_last_drawn, interval) for f in freq},
    }
    return {key: normalize_scores(values) for key, values in raw.items()}


def base_scores(signals, weights):
    """Weighted sum of the static signals for every number."""
    numbers = next(iter(signals.values())).keys()
    return {
        n: sum(weights[key] * signals[key][n] for key in SIGNALS)
        for n in numbers
    }


def score_numbers(draws, game, strategy="balanced", target="main"):
    """
    Rank a pool by a strategy's static blend (pair bonus excluded).

    Returns
    -------
    dict with:
        'rankings'         : list of (number, score) sorted by score descending
        'component_scores' : {signal_name: {number: normalised value}}
        'strategy'         : strategy name
    """
    schema = resolve_schema(game)
    strategy = get_strategy(strategy)
    pool_max = schema.pool_max(target)
    per_draw = schema.numbers_per_draw(target)
    if pool_max <= 0:
        raise ConfigurationError(f"{schema.name} has no {target} pool")

    signals = compute_signals(draws, pool_max, per_draw, target)
    if target == "main":
        w = strategy.weights
        weights = {"frequency": w.frequency, "hot": w.hot, "overdue": w.overdue}
    else:
        weights = strategy.weights.without_pairs()
    final_scores = base_scores(signals, weights)

    rankings = sorted(final_scores.items(), key=lambda x: (-x[1], x[0]))
    return {
        "rankings": rankings,
        "component_scores": signals,
        "strategy": strategy.name,
    }
