import random
from datetime import date, timedelta

from lottostats.draws import DrawResult


def make_history(numbers_list, start=date(2024, 1, 1), bonuses=None):
    """Draws on consecutive days, oldest first, in the order given."""
    bonuses = bonuses or [None] * len(numbers_list)
    return [
        DrawResult(date=start + timedelta(days=i), numbers=tuple(nums), bonus_number=bonus)
        for i, (nums, bonus) in enumerate(zip(numbers_list, bonuses))
    ]


def random_history(game, count, seed=7, start=date(2020, 1, 1)):
    schema = game.schema
    rng = random.Random(seed)
    draws = []
    for i in range(count):
        nums = tuple(sorted(rng.sample(range(1, schema.main_max + 1), schema.main_count)))
        bonus = rng.randint(1, schema.bonus_max) if schema.has_bonus else None
        draws.append(DrawResult(date=start + timedelta(days=i), numbers=nums, bonus_number=bonus))
    return draws
