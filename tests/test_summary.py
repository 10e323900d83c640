import random

import pytest

from cn_insider.summary import summarize

from tests.conftest import make_record


def test_empty_list_has_no_summary():
    assert summarize([]) is None


def test_buy_and_sell():
    s = summarize([make_record(1000, 10), make_record(-400, 12)])
    assert s.buy_shares == 1000
    assert s.buy_cost == 10000
    assert s.buy_avg_price == 10
    assert s.sell_shares == 400
    assert s.sell_proceeds == 4800
    assert s.sell_avg_price == 12
    assert s.net_shares == 600
    assert s.net_cost == 5200
    assert s.record_count == 2


def test_zero_share_record_counts_toward_neither_side():
    s = summarize([make_record(0, 5)])
    assert s is not None
    assert s.buy_shares == 0
    assert s.sell_shares == 0
    assert s.buy_avg_price is None
    assert s.sell_avg_price is None
    assert s.buy_cost == 0
    assert s.sell_proceeds == 0


def test_only_buys():
    s = summarize([make_record(100, 2), make_record(300, 4)])
    assert s.sell_shares == 0
    assert s.sell_avg_price is None
    assert s.buy_avg_price == pytest.approx(3.5)


def test_unknown_values_are_excluded():
    nan = float("nan")
    s = summarize([make_record(1000, 10), make_record(nan, 10), make_record(-200, nan)])
    assert s.buy_shares == 1000
    assert s.sell_shares == 0
    assert s.excluded_count == 2
    assert s.record_count == 3


def test_order_does_not_matter():
    records = [make_record(n, p) for n, p in [(1000, 10), (-400, 12), (250, 8.4), (-50, 9.1), (0, 3)]]
    expected = summarize(records)
    shuffled = list(records)
    random.Random(7).shuffle(shuffled)
    got = summarize(shuffled)
    assert got.buy_shares == expected.buy_shares
    assert got.sell_shares == expected.sell_shares
    assert got.buy_cost == pytest.approx(expected.buy_cost)
    assert got.sell_proceeds == pytest.approx(expected.sell_proceeds)
    assert got.buy_avg_price == pytest.approx(expected.buy_avg_price)
    assert got.sell_avg_price == pytest.approx(expected.sell_avg_price)
