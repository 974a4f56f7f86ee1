import pytest

from lottostats.analysis import calculate_frequency, rank_by_frequency
from lottostats.exceptions import ConfigurationError, DataIntegrityWarning
from tests.helpers import make_history


def _by_number(entries):
    return {e.number: e for e in entries}


def test_scenario_counts_and_recency(scenario_draws):
    freq = _by_number(calculate_frequency(scenario_draws, 13))
    assert freq[1].count == 2
    assert freq[9].count == 1
    assert freq[3].draws_since_last_drawn == 2
    assert freq[9].draws_since_last_drawn == 0
    assert freq[1].draws_since_last_drawn == 1
    assert freq[1].percentage == pytest.approx(200 / 3)


def test_input_order_does_not_matter(scenario_draws):
    assert calculate_frequency(scenario_draws, 13) == calculate_frequency(scenario_draws[::-1], 13)


def test_never_drawn_numbers_are_covered(scenario_draws):
    freq = calculate_frequency(scenario_draws, 20)
    assert [e.number for e in freq] == list(range(1, 21))
    assert freq[19].count == 0
    assert freq[19].draws_since_last_drawn == 3
    assert freq[19].percentage == 0.0


def test_total_invariant(powerball_history):
    main = calculate_frequency(powerball_history, 69, "main")
    bonus = calculate_frequency(powerball_history, 26, "bonus")
    assert len(main) == 69
    assert sum(e.count for e in main) == len(powerball_history) * 5
    assert sum(e.count for e in bonus) == len(powerball_history)


def test_idempotent(powerball_history):
    assert calculate_frequency(powerball_history, 69) == calculate_frequency(powerball_history, 69)


def test_empty_history():
    freq = calculate_frequency([], 39)
    assert len(freq) == 39
    assert all(e.count == 0 and e.percentage == 0.0 and e.draws_since_last_drawn == 0 for e in freq)


def test_bonus_absent_draws_count_nothing():
    draws = make_history([[1, 2, 3, 4, 5], [6, 7, 8, 9, 10]])
    bonus = calculate_frequency(draws, 26, "bonus")
    assert sum(e.count for e in bonus) == 0
    assert all(e.draws_since_last_drawn == 2 for e in bonus)


def test_out_of_range_values_are_ignored_with_warning():
    draws = make_history([[1, 2, 3, 4, 70]])
    with pytest.warns(DataIntegrityWarning):
        freq = calculate_frequency(draws, 69)
    assert sum(e.count for e in freq) == 4


@pytest.mark.parametrize("max_number", [0, -1])
def test_invalid_pool_size(max_number, scenario_draws):
    with pytest.raises(ConfigurationError):
        calculate_frequency(scenario_draws, max_number)


def test_rank_by_frequency(scenario_draws):
    ranked = rank_by_frequency(calculate_frequency(scenario_draws, 13))
    assert [(rank, e.number) for rank, e in ranked[:3]] == [(1, 1), (2, 2), (3, 3)]
    assert ranked[-1][0] == 13
