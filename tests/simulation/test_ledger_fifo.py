#!filepath: tests/simulation/test_ledger_fifo.py
import pytest

from breadsim.simulation.core.ledger import Ledger, Portion

"""
同日多批次 FIFO
部分消耗穿透到下一批
乱序 admit 的排序正确性
"""


def _layout(ledger: Ledger):
    return [(b.arrival_day, b.remaining) for b in ledger]


def test_admit_keeps_sorted_and_stable_order():
    ledger = Ledger()
    ledger.admit(10, 5)
    ledger.admit(5, 3)
    ledger.admit(10, 2)
    ledger.admit(7, 1)

    assert _layout(ledger) == [(5, 3), (7, 1), (10, 5), (10, 2)]


def test_same_day_deliveries_are_never_merged():
    ledger = Ledger()
    ledger.admit(10, 200)
    ledger.admit(10, 190)

    assert len(ledger) == 2
    assert ledger.stock == 390


def test_fifo_same_day_first_admitted_first():
    ledger = Ledger()
    ledger.admit(10, 200)
    ledger.admit(10, 190)

    w = ledger.consume(250, current_day=12)

    assert w.portions == (
        Portion(arrival_day=10, quantity=200, age=2),
        Portion(arrival_day=10, quantity=50, age=2),
    )
    assert w.shortfall == 0
    assert _layout(ledger) == [(10, 140)]


def test_partial_consume_does_not_touch_next_batch():
    ledger = Ledger()
    ledger.admit(1, 3)
    ledger.admit(2, 5)

    w = ledger.consume(2, current_day=3)

    assert w.portions == (Portion(arrival_day=1, quantity=2, age=2),)
    assert _layout(ledger) == [(1, 1), (2, 5)]


def test_consume_moves_on_only_after_exhaustion():
    ledger = Ledger()
    ledger.admit(1, 3)
    ledger.admit(2, 5)

    w = ledger.consume(4, current_day=3)

    assert w.portions == (
        Portion(arrival_day=1, quantity=3, age=2),
        Portion(arrival_day=2, quantity=1, age=1),
    )
    assert w.consumed == 4
    assert _layout(ledger) == [(2, 4)]
    assert ledger.oldest_arrival_day == 2


def test_shortfall_when_stock_insufficient():
    ledger = Ledger()
    ledger.admit(1, 2)

    w = ledger.consume(5, current_day=1)

    assert w.consumed == 2
    assert w.shortfall == 3
    assert ledger.stock == 0
    assert len(ledger) == 0
    assert ledger.oldest_arrival_day is None


def test_consume_from_empty_ledger():
    w = Ledger().consume(1, current_day=1)

    assert w.portions == ()
    assert w.shortfall == 1


def test_consume_zero_is_noop():
    ledger = Ledger()
    ledger.admit(1, 2)

    w = ledger.consume(0, current_day=1)

    assert w.portions == ()
    assert w.shortfall == 0
    assert ledger.stock == 2


def test_tuple_unpacking():
    ledger = Ledger()
    ledger.admit(1, 1)

    portions, shortfall = ledger.consume(1, current_day=4)

    assert portions[0].age == 3
    assert shortfall == 0


def test_age_stays_relative_to_arrival_across_days():
    ledger = Ledger()
    ledger.admit(3, 10)

    ages = [ledger.consume(1, current_day=d).portions[0].age for d in (3, 4, 9, 20)]

    assert ages == [0, 1, 6, 17]
    assert _layout(ledger) == [(3, 6)]


def test_iteration_returns_copies():
    ledger = Ledger()
    ledger.admit(1, 5)

    for b in ledger:
        b.remaining = 0

    assert ledger.stock == 5


@pytest.mark.parametrize("qty", [0, -1])
def test_admit_rejects_non_positive(qty):
    with pytest.raises(ValueError):
        Ledger().admit(1, qty)


def test_consume_rejects_negative_amount():
    with pytest.raises(ValueError):
        Ledger().consume(-1, current_day=1)


def test_consume_rejects_batch_from_the_future():
    ledger = Ledger()
    ledger.admit(5, 1)

    with pytest.raises(ValueError):
        ledger.consume(1, current_day=4)
