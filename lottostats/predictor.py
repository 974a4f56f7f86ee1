"""
Recommendation set generation

Builds number sets for a game from the weighted scoring model. Each set is
assembled greedily: the best-scoring number is taken, then every remaining
candidate's pair bonus is refreshed against the numbers already chosen, and
so on until the set is full. Later picks therefore depend on earlier ones.

Sets are historical summaries only; they are no more likely to win than
any other combination.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from lottostats.analysis import calculate_pairs
from lottostats.draws import ordered_draws
from lottostats.exceptions import ConfigurationError
from lottostats.games import resolve_schema
from lottostats.models.weighted_scoring import (
    STRATEGIES,
    base_scores,
    compute_signals,
    get_strategy,
    normalize_scores,
)

logger = logging.getLogger(__name__)

PAIR_WINDOW = 200
PAIR_TABLE_SIZE = 100


@dataclass(frozen=True)
class RecommendedSet:
    numbers: Tuple[int, ...]
    bonus_number: Optional[int]
    score: float
    strategy: str


@dataclass(frozen=True)
class SelectionState:
    """Accumulator threaded through the greedy picks of one set."""

    chosen: Tuple[int, ...] = ()
    step_scores: Tuple[float, ...] = field(default=())

    def add(self, number: int, score: float) -> "SelectionState":
        return SelectionState(self.chosen + (number,), self.step_scores + (score,))

    @property
    def mean_score(self) -> float:
        if not self.step_scores:
            return 0.0
        return sum(self.step_scores) / len(self.step_scores)


# ── Helpers ──────────────────────────────────────────────────────────────

def _pair_key(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a < b else (b, a)


def build_pair_table(draws, max_number) -> Dict[Tuple[int, int], int]:
    """{(a, b): count} for the top co-occurring pairs of the recent window."""
    pairs = calculate_pairs(draws, window_size=PAIR_WINDOW, top_count=PAIR_TABLE_SIZE,
                            max_number=max_number)
    return {entry.numbers: entry.count for entry in pairs}


def pair_bonus(candidates, chosen, pair_table) -> Dict[int, float]:
    """Normalised co-occurrence of each candidate with the chosen numbers."""
    raw = {
        c: sum(pair_table.get(_pair_key(c, s), 0) for s in chosen)
        for c in candidates
    }
    if not raw or max(raw.values()) == 0:
        return {c: 0.0 for c in candidates}
    return normalize_scores(raw)


def _pick(ranked: List[Tuple[int, float]], breadth: int, rng: random.Random) -> Tuple[int, float]:
    pool = ranked[:max(1, min(breadth, len(ranked)))]
    if len(pool) == 1:
        return pool[0]
    return rng.choice(pool)


def select_next(state: SelectionState, base: Dict[int, float], pair_table, pair_weight: float,
                breadth: int, rng: random.Random) -> SelectionState:
    """One greedy step: rescore the remaining candidates and take one."""
    candidates = [n for n in base if n not in state.chosen]
    bonus = pair_bonus(candidates, state.chosen, pair_table)
    scored = {c: base[c] + pair_weight * bonus[c] for c in candidates}
    ranked = sorted(scored.items(), key=lambda x: (-x[1], x[0]))
    number, score = _pick(ranked, breadth, rng)
    return state.add(number, score)


def _default_seed(strategy_name, schema, draws) -> str:
    newest = draws[0].label if draws else "none"
    return f"{schema.slug}:{strategy_name}:{len(draws)}:{newest}"


# ── Set Generation ───────────────────────────────────────────────────────

def generate_recommendations(draws, game, strategy="balanced", set_count=3,
                             seed=None) -> List[RecommendedSet]:
    """
    Produce ``set_count`` recommendation sets for one strategy.

    Set ``k`` (0-based) picks uniformly among the top ``k + 1`` candidates
    at every step, so set 0 is the pure greedy set and later sets vary.
    Numbers never repeat within a set but may repeat across sets.

    With ``seed=None`` the random source is seeded from the game, strategy
    and newest draw, so identical input gives identical sets.
    """
    schema = resolve_schema(game)
    strategy = get_strategy(strategy)
    if set_count < 0:
        raise ConfigurationError(f"set_count must not be negative, got {set_count}")

    draws = ordered_draws(draws)
    rng = random.Random(seed if seed is not None else _default_seed(strategy.name, schema, draws))
    weights = strategy.weights

    main_signals = compute_signals(draws, schema.main_max, schema.main_count, "main")
    main_base = base_scores(main_signals, {
        "frequency": weights.frequency, "hot": weights.hot, "overdue": weights.overdue,
    })
    pair_table = build_pair_table(draws, schema.main_max)

    bonus_ranked = []
    if schema.has_bonus:
        bonus_signals = compute_signals(draws, schema.bonus_max, 1, "bonus")
        bonus_base = base_scores(bonus_signals, weights.without_pairs())
        bonus_ranked = sorted(bonus_base.items(), key=lambda x: (-x[1], x[0]))

    sets = []
    for k in range(set_count):
        breadth = k + 1
        state = SelectionState()
        while len(state.chosen) < schema.main_count:
            state = select_next(state, main_base, pair_table, weights.pairs, breadth, rng)

        bonus_number = _pick(bonus_ranked, breadth, rng)[0] if bonus_ranked else None
        sets.append(RecommendedSet(
            numbers=tuple(sorted(state.chosen)),
            bonus_number=bonus_number,
            score=state.mean_score,
            strategy=strategy.name,
        ))

    logger.debug("Generated %d %s sets for %s from %d draws",
                 len(sets), strategy.name, schema.name, len(draws))
    return sets


def generate_all_strategies(draws, game, set_count=3) -> Dict[str, List[RecommendedSet]]:
    """Recommendation sets for every shipped strategy, keyed by strategy name."""
    return {
        name: generate_recommendations(draws, game, name, set_count)
        for name in STRATEGIES
    }
