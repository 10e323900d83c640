"""Aggregate buy/sell statistics over canonical trading records."""
import logging
from typing import Iterable, Optional

from .coerce import is_unknown
from .models import TradingRecord, TradingSummary

LOG = logging.getLogger("cn_insider.summary")


def summarize(records: Iterable[TradingRecord]) -> Optional[TradingSummary]:
    """
    Single pass over records, partitioned by the sign of change_shares.
    Returns None for an empty list (no transactions in range).

    Zero-share records count toward neither side. Records whose shares or
    price are unknown (NaN) are left out entirely and tallied in
    excluded_count. Average prices are None when a side has no shares.
    """
    records = list(records)
    if not records:
        return None

    buy_shares = sell_shares = 0.0
    buy_cost = sell_proceeds = 0.0
    excluded = 0
    for r in records:
        if is_unknown(r.change_shares) or is_unknown(r.avg_price):
            excluded += 1
            continue
        if r.change_shares > 0:
            buy_shares += r.change_shares
            buy_cost += r.change_shares * r.avg_price
        elif r.change_shares < 0:
            sell_shares += abs(r.change_shares)
            sell_proceeds += abs(r.change_shares * r.avg_price)

    if excluded:
        LOG.info("Excluded %d of %d records with unknown shares or price", excluded, len(records))

    return TradingSummary(
        buy_shares=buy_shares,
        sell_shares=sell_shares,
        net_shares=buy_shares - sell_shares,
        buy_avg_price=buy_cost / buy_shares if buy_shares != 0 else None,
        sell_avg_price=sell_proceeds / sell_shares if sell_shares != 0 else None,
        buy_cost=buy_cost,
        sell_proceeds=sell_proceeds,
        net_cost=buy_cost - sell_proceeds,
        record_count=len(records),
        excluded_count=excluded,
    )
