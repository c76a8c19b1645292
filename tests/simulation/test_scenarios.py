#!filepath: tests/simulation/test_scenarios.py
"""
原始实验脚本中的 8 组样例（NUM_DAYS=60，每天吃 1 个）
"""
import pytest

from breadsim.simulation.engine import run_simulation
from breadsim.simulation.parser import parse_deliveries
from breadsim.utils.errors import ValidationError


# name → (delivered, consumed, waste, shortfall_days, max_staleness, stale_eaten, expired_eaten)
EXPECTED = {
    "default": (830, 51, 779, 9, 50, 50, 21),
    "multiple_per_day": (1819, 51, 1768, 9, 50, 50, 21),
    "long_gap": (490, 42, 448, 18, 41, 41, 12),
    "empty": (0, 0, 0, 60, 0, 0, 0),
    "single_early": (500, 56, 444, 4, 55, 55, 26),
    "single_late": (200, 46, 154, 14, 45, 45, 16),
    "two_providers": (1100, 60, 1040, 0, 59, 59, 30),
}


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_sample_outcomes(name, events_of, num_days):
    m = run_simulation(events_of(name), num_days).metrics

    assert (
        m.total_delivered,
        m.total_consumed,
        m.total_waste,
        m.shortfall_days,
        m.max_staleness_observed,
        m.stale_units_eaten,
        m.expired_units_eaten,
    ) == EXPECTED[name]
    assert m.total_delivered == m.total_consumed + m.total_waste


def test_all_shortfall(events_of, num_days):
    m = run_simulation(events_of("empty"), num_days).metrics

    assert m.shortfall_days == 60
    assert m.total_shortfall_units == 60
    assert m.total_consumed == 0
    assert m.total_waste == 0


def test_single_batch_no_shortfall_from_day_5(events_of, num_days):
    result = run_simulation(events_of("single_early"), num_days)

    assert result.metrics.total_delivered == 500
    assert all(d.shortfall == 1 for d in result.days[:4])
    assert all(d.shortfall == 0 for d in result.days[4:])


def test_late_single_provider_keeps_earlier_shortfalls(events_of, num_days):
    result = run_simulation(events_of("single_late"), num_days)

    assert [d.day for d in result.days if d.shortfall] == list(range(1, 15))


def test_long_gap_staleness(events_of, num_days):
    result = run_simulation(events_of("long_gap"), num_days)

    # 第 19 天的批次熬过 21 天空档
    assert result.days[40 - 1].oldest_age_eaten == 21
    assert result.metrics.max_staleness_observed == num_days - 19


def test_long_gap_staleness_short_horizon(events_of):
    m = run_simulation(events_of("long_gap"), 50).metrics

    assert m.max_staleness_observed == 31
    assert m.total_delivered == 490
    assert m.total_consumed == 32
    assert m.total_waste == 458


def test_two_providers_consumed_oldest_first(events_of, num_days):
    result = run_simulation(events_of("two_providers"), num_days)

    # 第二个供应商的批次从未被动过
    assert [d.oldest_age_eaten for d in result.days] == list(range(60))


def test_long_gap_with_initial_stock(events_of, num_days):
    m = run_simulation(events_of("long_gap"), num_days, initial_stock=10).metrics

    assert m.total_delivered == 500
    assert m.shortfall_days == 8
    assert m.stale_units_eaten == 51
    assert m.total_delivered == m.total_consumed + m.total_waste


def test_invalid_sample_rejected(sample_data):
    with pytest.raises(ValidationError):
        parse_deliveries(sample_data["invalid"])
