"""Text report for one query: header, summary and transaction table."""
import unicodedata
from dataclasses import asdict
from datetime import date
from typing import List, Optional

import pandas as pd

from .coerce import is_unknown
from .config import INPUT_DATE_FORMAT
from .models import SZ, InsiderReport, TradingRecord, TradingSummary

PLACEHOLDER = "-"
NOT_APPLICABLE = "N/A"
NO_TRADING = "No director/officer transactions in this window."

# (header, width, right-aligned)
SZ_COLUMNS = [
    ("Name", 10, False), ("Code", 7, False), ("Trader", 8, False), ("Shares", 14, True),
    ("Avg", 9, True), ("Holding", 14, True), ("Date", 11, False), ("Reason", 14, False),
    ("Insider", 8, False), ("Relation", 10, False), ("Duty", 12, False),
]
SH_COLUMNS = [
    ("Name", 10, False), ("Code", 7, False), ("Trader", 8, False), ("Shares", 14, True),
    ("Avg", 9, True), ("Holding", 14, True), ("Date", 11, False), ("Filed", 11, False),
    ("Reason", 14, False), ("Duty", 12, False),
]


def _width(text: str) -> int:
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def pad(text: str, width: int, right: bool = False) -> str:
    """Pad to a display width; CJK characters take two columns."""
    fill = " " * max(0, width - _width(text))
    return fill + text if right else text + fill


def format_shares(v: Optional[float]) -> str:
    if is_unknown(v):
        return PLACEHOLDER
    return f"{v:,.0f}"


def format_price(v: Optional[float]) -> str:
    if v is None:
        return NOT_APPLICABLE
    if is_unknown(v):
        return PLACEHOLDER
    return f"{v:,.2f}"


def format_money(v: float) -> str:
    if is_unknown(v):
        return PLACEHOLDER
    return f"{v:,.2f}"


def format_date(d: Optional[date]) -> str:
    return d.strftime(INPUT_DATE_FORMAT) if d else PLACEHOLDER


def _row(cells: List[str], columns) -> str:
    return " ".join(pad(c or "", w, right) for c, (_, w, right) in zip(cells, columns))


def _record_cells(r: TradingRecord) -> List[str]:
    head = [r.company_abbr, r.company_code, r.person_name, format_shares(r.change_shares),
            format_price(r.avg_price), format_shares(r.holding_shares), format_date(r.change_date)]
    if r.market == SZ:
        return head + [r.change_reason, r.insider_name or "", r.insider_relation or "", r.duty]
    return head + [format_date(r.form_date), r.change_reason, r.duty]


def render_summary(summary: TradingSummary) -> List[str]:
    lines = [
        f"Net shares:   {pad(format_shares(summary.net_shares), 18, True)}"
        f"   Net amount:  {pad(format_money(summary.net_cost), 20, True)}",
        f"Bought:       {pad(format_shares(summary.buy_shares), 18, True)}"
        f"   Avg price:   {pad(format_price(summary.buy_avg_price), 20, True)}"
        f"   Cost:     {pad(format_money(summary.buy_cost), 18, True)}",
        f"Sold:         {pad(format_shares(summary.sell_shares), 18, True)}"
        f"   Avg price:   {pad(format_price(summary.sell_avg_price), 20, True)}"
        f"   Proceeds: {pad(format_money(summary.sell_proceeds), 18, True)}",
    ]
    if summary.excluded_count:
        lines.append(f"({summary.excluded_count} records with unknown shares or price not included)")
    return lines


def render_report(report: InsiderReport, elapsed_ms: Optional[float] = None) -> str:
    """Render one report. The window shown is the one resolved for this query."""
    lines = [
        f"Insider trading for {report.code}, from {format_date(report.date_from)}"
        f" to {format_date(report.date_to)}"
    ]
    if report.summary is None:
        lines.append(NO_TRADING)
    else:
        lines.extend(render_summary(report.summary))
        columns = SZ_COLUMNS if report.market == SZ else SH_COLUMNS
        lines.append("")
        lines.append(_row([c[0] for c in columns], columns))
        for r in report.records:
            lines.append(_row(_record_cells(r), columns))
    footer = f"Total records: {len(report.records)}"
    if elapsed_ms is not None:
        footer = f"Done in {elapsed_ms:.0f} ms, " + footer.lower()
    lines.append(footer)
    return "\n".join(lines)


def records_to_frame(reports: List[InsiderReport]) -> pd.DataFrame:
    """All records of the given reports as one DataFrame (one row per record)."""
    rows = [asdict(r) for rep in reports for r in rep.records]
    if not rows:
        return pd.DataFrame(columns=list(TradingRecord.__dataclass_fields__))
    return pd.DataFrame(rows)


def report_to_dict(report: InsiderReport) -> dict:
    """JSON-safe dict: dates as ISO strings, unknown numbers as None."""
    def clean(v):
        if isinstance(v, date):
            return v.isoformat()
        if isinstance(v, float) and is_unknown(v):
            return None
        return v

    records = [{k: clean(v) for k, v in asdict(r).items()} for r in report.records]
    summary = asdict(report.summary) if report.summary else None
    return {
        "code": report.code,
        "market": report.market,
        "date_from": report.date_from.isoformat(),
        "date_to": report.date_to.isoformat(),
        "records": records,
        "summary": summary,
    }
