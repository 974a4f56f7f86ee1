"""
US Lottery - Statistical Analysis Engine

Pure, deterministic statistics over a game's draw history:
frequency, hot/cold momentum, gap/overdue metrics and pair, triplet and
quadruplet co-occurrence.

Every public function accepts draws in any order and sorts them
most-recent-first before measuring anything. No function performs I/O,
and none raises for an empty history: each returns a fully-shaped,
zero-valued result instead.

Values outside ``[1, max_number]`` are ignored and reported with a
``DataIntegrityWarning``.

Lottery draws are independent events. "Hot", "cold" and "overdue" describe
history only and carry no predictive value.
"""

import warnings
from collections import Counter
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from lottostats.draws import DrawResult, as_pool, ordered_draws, pool_values
from lottostats.exceptions import ConfigurationError, DataIntegrityWarning
from lottostats.games import resolve_schema


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

RECENT_WINDOW = 20
MEDIUM_WINDOW = 100
HORIZON_WEIGHTS = (3.0, 2.0, 1.0)  # recent, medium, all-time

HOT, WARM, COLD = "hot", "warm", "cold"

PAIR_WINDOW = 200
TRIPLET_TOP_COUNT = 15
QUADRUPLET_TOP_COUNT = 10
# C(10, 4) = 210 subsets per draw; larger draws are rejected.
MAX_COMBINATION_DRAW_SIZE = 10


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFrequency:
    number: int
    count: int
    percentage: float
    draws_since_last_drawn: int


@dataclass(frozen=True)
class HotColdEntry:
    number: int
    score: float
    classification: str
    recent_freq: float
    medium_freq: float
    all_time_freq: float


@dataclass(frozen=True)
class GapEntry:
    number: int
    avg_gap: float
    min_gap: int
    max_gap: int
    appearances: int
    current_gap: int


@dataclass(frozen=True)
class CombinationEntry:
    numbers: Tuple[int, ...]
    count: int
    percentage: float


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_pool(max_number: int) -> None:
    if max_number is None or max_number <= 0:
        raise ConfigurationError(f"max_number must be a positive integer, got {max_number!r}")


def _valid_values(draw: DrawResult, target, max_number: int) -> Tuple[int, ...]:
    """Pool values of one draw with out-of-range entries dropped (and reported)."""
    values = pool_values(draw, target)
    kept = tuple(n for n in values if 1 <= n <= max_number)
    if len(kept) != len(values):
        bad = sorted(set(values) - set(kept))
        warnings.warn(
            f"Draw {draw.label}: ignoring {bad} outside [1, {max_number}]",
            DataIntegrityWarning,
            stacklevel=3,
        )
    return kept


def _pool_rows(draws: Sequence[DrawResult], max_number: int, target) -> List[Tuple[int, ...]]:
    """Most-recent-first list of each draw's valid values for one pool."""
    target = as_pool(target)
    _check_pool(max_number)
    return [_valid_values(d, target, max_number) for d in ordered_draws(draws)]


def _window_frequency(rows: List[Tuple[int, ...]], max_number: int) -> Dict[int, float]:
    """Appearances per draw for every number within ``rows``."""
    counter = Counter(n for row in rows for n in row)
    size = len(rows)
    return {n: (counter.get(n, 0) / size if size else 0.0) for n in range(1, max_number + 1)}


def expected_interval(pool_max: int, per_draw: int) -> float:
    """Draws expected between two appearances of a number (pool / drawn)."""
    if per_draw <= 0:
        return 0.0
    return pool_max / per_draw


def overdue_ratio(draws_since: int, interval: float) -> float:
    """Current absence measured in expected intervals (1.0 = exactly on schedule)."""
    if interval <= 0:
        return 0.0
    return draws_since / interval


# ===================================================================
# 1. Frequency Analysis
# ===================================================================

def calculate_frequency(draws: Sequence[DrawResult], max_number: int,
                        target="main") -> List[NumberFrequency]:
    """
    Count every number 1..max_number in the chosen pool.

    Numbers never drawn are included with count 0, so the result always
    has exactly ``max_number`` entries, ordered by number.

    Returns
    -------
    list of NumberFrequency with
        count                  : times drawn
        percentage             : count / total draws * 100 (0 with no draws)
        draws_since_last_drawn : index of the newest draw containing the
                                 number; total draws if never seen
    """
    rows = _pool_rows(draws, max_number, target)
    total = len(rows)

    counts = Counter()
    last_seen: Dict[int, int] = {}
    for idx, row in enumerate(rows):
        for n in row:
            counts[n] += 1
            last_seen.setdefault(n, idx)

    return [
        NumberFrequency(
            number=n,
            count=counts.get(n, 0),
            percentage=(100.0 * counts.get(n, 0) / total) if total else 0.0,
            draws_since_last_drawn=last_seen.get(n, total),
        )
        for n in range(1, max_number + 1)
    ]


def rank_by_frequency(entries: Sequence[NumberFrequency]) -> List[Tuple[int, NumberFrequency]]:
    """(rank, entry) pairs, most frequent first; ties broken by number."""
    ranked = sorted(entries, key=lambda e: (-e.count, e.number))
    return [(i, e) for i, e in enumerate(ranked, 1)]


# ===================================================================
# 2. Hot / Warm / Cold Momentum
# ===================================================================

def _classify(scores: Dict[int, float]) -> Dict[int, str]:
    """
    Top third of the score ranking is hot when strictly above the pool
    mean, bottom third is cold when strictly below it, everything else is
    warm. Flat scores classify every number warm.
    """
    if not scores:
        return {}
    mean = float(np.mean(list(scores.values())))
    ranked = sorted(scores, key=lambda n: (-scores[n], n))
    third = len(ranked) // 3

    labels = {n: WARM for n in ranked}
    for n in ranked[:third]:
        if scores[n] > mean:
            labels[n] = HOT
    for n in ranked[len(ranked) - third:]:
        if scores[n] < mean:
            labels[n] = COLD
    return labels


def calculate_hot_cold(draws: Sequence[DrawResult], max_number: int,
                       target="main") -> List[HotColdEntry]:
    """
    Three-horizon momentum score per number.

    recent = newest 20 draws, medium = newest 100, all-time = everything.
    Each horizon's frequency is normalised by its own length, then

        score = 3 * recent + 2 * medium + 1 * all_time
    """
    rows = _pool_rows(draws, max_number, target)

    recent = _window_frequency(rows[:RECENT_WINDOW], max_number)
    medium = _window_frequency(rows[:MEDIUM_WINDOW], max_number)
    all_time = _window_frequency(rows, max_number)

    w_recent, w_medium, w_all = HORIZON_WEIGHTS
    scores = {
        n: w_recent * recent[n] + w_medium * medium[n] + w_all * all_time[n]
        for n in range(1, max_number + 1)
    }
    labels = _classify(scores)

    return [
        HotColdEntry(
            number=n,
            score=scores[n],
            classification=labels[n],
            recent_freq=recent[n],
            medium_freq=medium[n],
            all_time_freq=all_time[n],
        )
        for n in range(1, max_number + 1)
    ]


# ===================================================================
# 3. Number Gap / Overdue Analysis
# ===================================================================

def calculate_gaps(draws: Sequence[DrawResult], max_number: int,
                   target="main") -> List[GapEntry]:
    """
    For each number: average, minimum and maximum number of draws between
    consecutive appearances, plus the current gap since it was last seen.

    A number seen fewer than twice has no gaps; its avg/min/max are 0.
    """
    rows = _pool_rows(draws, max_number, target)
    total = len(rows)

    appearances: Dict[int, List[int]] = {n: [] for n in range(1, max_number + 1)}
    for idx, row in enumerate(rows):
        for n in row:
            appearances[n].append(idx)

    entries = []
    for n in range(1, max_number + 1):
        idxs = appearances[n]
        current_gap = idxs[0] if idxs else total
        if len(idxs) < 2:
            entries.append(GapEntry(n, 0.0, 0, 0, len(idxs), current_gap))
            continue

        gaps = np.diff(idxs)
        entries.append(GapEntry(
            number=n,
            avg_gap=float(np.mean(gaps)),
            min_gap=int(gaps.min()),
            max_gap=int(gaps.max()),
            appearances=len(idxs),
            current_gap=current_gap,
        ))
    return entries


# ===================================================================
# 4. Pair / Triplet / Quadruplet Analysis
# ===================================================================

def calculate_combinations(draws: Sequence[DrawResult], size: int,
                           window_size: Optional[int] = None,
                           top_count: Optional[int] = None,
                           max_number: Optional[int] = None) -> List[CombinationEntry]:
    """
    Co-occurrence counts of every ``size``-number subset of the main numbers.

    Only the newest ``window_size`` draws are examined (all draws when
    None). Results are sorted by count descending, ties by the tuple
    itself, and truncated to ``top_count`` when given.
    """
    if size not in (2, 3, 4):
        raise ConfigurationError(f"Combination size must be 2, 3 or 4, got {size}")
    if max_number is not None:
        _check_pool(max_number)

    window = ordered_draws(draws)
    if window_size is not None:
        window = window[:max(window_size, 0)]
    examined = len(window)

    counter: Counter = Counter()
    for draw in window:
        if max_number is None:
            nums = draw.numbers
        else:
            nums = _valid_values(draw, "main", max_number)
        if len(nums) > MAX_COMBINATION_DRAW_SIZE:
            raise ConfigurationError(
                f"Draw {draw.label} has {len(nums)} main numbers; "
                f"combination analysis supports at most {MAX_COMBINATION_DRAW_SIZE}"
            )
        for combo in combinations(sorted(set(nums)), size):
            counter[combo] += 1

    ranked = sorted(counter.items(), key=lambda x: (-x[1], x[0]))
    if top_count is not None:
        ranked = ranked[:max(top_count, 0)]

    return [
        CombinationEntry(
            numbers=combo,
            count=count,
            percentage=(100.0 * count / examined) if examined else 0.0,
        )
        for combo, count in ranked
    ]


def calculate_pairs(draws, window_size: Optional[int] = PAIR_WINDOW,
                    top_count: Optional[int] = None, max_number: Optional[int] = None):
    return calculate_combinations(draws, 2, window_size, top_count, max_number)


def calculate_triplets(draws, window_size: Optional[int] = None,
                       top_count: Optional[int] = TRIPLET_TOP_COUNT, max_number: Optional[int] = None):
    return calculate_combinations(draws, 3, window_size, top_count, max_number)


def calculate_quadruplets(draws, window_size: Optional[int] = None,
                          top_count: Optional[int] = QUADRUPLET_TOP_COUNT, max_number: Optional[int] = None):
    return calculate_combinations(draws, 4, window_size, top_count, max_number)


def pairings_for(number: int, pairs: Sequence[CombinationEntry], limit: int = 10) -> List[Tuple[int, int]]:
    """Companion numbers of ``number`` in a pair table, as (companion, count)."""
    companions = []
    for entry in pairs:
        a, b = entry.numbers
        if a == number:
            companions.append((b, entry.count))
        elif b == number:
            companions.append((a, entry.count))
    companions.sort(key=lambda x: (-x[1], x[0]))
    return companions[:limit]


# ===================================================================
# 5. Summary Tables
# ===================================================================

def number_summary(draws: Sequence[DrawResult], max_number: int, target="main",
                   per_draw: Optional[int] = None) -> pd.DataFrame:
    """
    One row per number joining frequency, hot/cold and gap statistics.

    ``per_draw`` (numbers drawn per draw from this pool) enables the
    ``overdue_ratio`` column; it is 0 when omitted.
    """
    freq = calculate_frequency(draws, max_number, target)
    hot_cold = calculate_hot_cold(draws, max_number, target)
    gaps = calculate_gaps(draws, max_number, target)
    interval = expected_interval(max_number, per_draw or 0)
    ranks = {e.number: rank for rank, e in rank_by_frequency(freq)}

    records = []
    for f, h, g in zip(freq, hot_cold, gaps):
        records.append({
            "number": f.number,
            "count": f.count,
            "percentage": round(f.percentage, 2),
            "rank": ranks[f.number],
            "draws_since_last_drawn": f.draws_since_last_drawn,
            "hot_cold_score": round(h.score, 4),
            "classification": h.classification,
            "avg_gap": round(g.avg_gap, 2),
            "min_gap": g.min_gap,
            "max_gap": g.max_gap,
            "overdue_ratio": round(overdue_ratio(f.draws_since_last_drawn, interval), 3),
        })
    return pd.DataFrame(records)


def combinations_frame(entries: Sequence[CombinationEntry]) -> pd.DataFrame:
    records = [{
        "combination": "-".join(str(n) for n in e.numbers),
        "count": e.count,
        "percentage": round(e.percentage, 2),
    } for e in entries]
    return pd.DataFrame(records, columns=["combination", "count", "percentage"])


def get_full_analysis(draws: Sequence[DrawResult], game) -> dict:
    """
    Run every analysis for one game.

    Returns
    -------
    dict with keys:
        total_draws, main_frequency, main_hot_cold, main_gaps,
        bonus_frequency, bonus_hot_cold, bonus_gaps (None without a bonus),
        pairs, triplets, quadruplets, main_summary, bonus_summary
    """
    schema = resolve_schema(game)
    result = {
        "total_draws": len(draws),
        "main_frequency": calculate_frequency(draws, schema.main_max, "main"),
        "main_hot_cold": calculate_hot_cold(draws, schema.main_max, "main"),
        "main_gaps": calculate_gaps(draws, schema.main_max, "main"),
        "pairs": calculate_pairs(draws, max_number=schema.main_max),
        "triplets": calculate_triplets(draws, max_number=schema.main_max),
        "quadruplets": calculate_quadruplets(draws, max_number=schema.main_max),
        "main_summary": number_summary(draws, schema.main_max, "main", schema.main_count),
        "bonus_frequency": None,
        "bonus_hot_cold": None,
        "bonus_gaps": None,
        "bonus_summary": None,
    }
    if schema.has_bonus:
        result["bonus_frequency"] = calculate_frequency(draws, schema.bonus_max, "bonus")
        result["bonus_hot_cold"] = calculate_hot_cold(draws, schema.bonus_max, "bonus")
        result["bonus_gaps"] = calculate_gaps(draws, schema.bonus_max, "bonus")
        result["bonus_summary"] = number_summary(draws, schema.bonus_max, "bonus", 1)
    return result
