"""Build exchange query parameters and resolve the effective date window."""
import re
from datetime import date, datetime
from typing import Optional, Union

import pandas as pd

from .config import INPUT_DATE_FORMAT, MAX_SPAN_MONTHS, MIN_SPAN_MONTHS, QUERY_DATE_FORMAT
from .errors import InvalidDateRange
from .markets import catalog_for, get_template, validate_code
from .models import SZ, QuerySpec

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

DateInput = Union[str, date, None]


def clamp_span(raw, default: int) -> int:
    """Span in months clamped to [MIN_SPAN_MONTHS, MAX_SPAN_MONTHS].

    Accepts ints or strings with a leading integer ("3", "6m"). Anything
    without a leading integer falls back to default (clamped as well).
    """
    span = None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool) and raw == raw:
        span = int(max(MIN_SPAN_MONTHS - 1, min(MAX_SPAN_MONTHS + 1, raw)))
    elif isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        if m:
            span = int(m.group(1))
    if span is None:
        span = default
    return max(MIN_SPAN_MONTHS, min(MAX_SPAN_MONTHS, span))


def parse_input_date(raw: DateInput) -> date:
    """Parse a user date strictly in INPUT_DATE_FORMAT. Raises InvalidDateRange."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    try:
        return datetime.strptime(str(raw).strip(), INPUT_DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateRange(
            f"Invalid date {raw!r}, expected format {INPUT_DATE_FORMAT.replace('%', '')}"
        ) from None


def months_before(day: date, months: int) -> date:
    return (pd.Timestamp(day) - pd.DateOffset(months=months)).date()


def build_query(
    code: str,
    market: str,
    span_months=None,
    date_from: DateInput = None,
    date_to: DateInput = None,
    page: Optional[int] = None,
    today: Optional[date] = None,
) -> QuerySpec:
    """
    Resolve the query window and request parameters for one security.

    Later steps override earlier ones: template default span, then
    span_months (clamped), then explicit date_from / date_to. An end date
    given alone moves the span-based begin with it. Explicit bounds
    that do not parse raise InvalidDateRange instead of being ignored.
    """
    code = validate_code(code)
    today = today or date.today()
    template = get_template(market)

    span = template.default_span_months
    if span_months is not None and span_months != "":
        span = span_months
    span = clamp_span(span, template.default_span_months)
    begin = months_before(today, span)
    end = today

    if date_from:
        begin = parse_input_date(date_from)
    if date_to:
        end = parse_input_date(date_to)
        if not date_from:
            begin = months_before(end, span)
    if begin > end:
        raise InvalidDateRange(
            f"Begin date {begin.strftime(INPUT_DATE_FORMAT)} is after end date {end.strftime(INPUT_DATE_FORMAT)}"
        )

    params = dict(template.base_params)
    params[template.code_key] = code
    params[template.begin_key] = begin.strftime(QUERY_DATE_FORMAT)
    params[template.end_key] = end.strftime(QUERY_DATE_FORMAT)
    if market == SZ:
        params["CATALOGID"] = catalog_for(code)
        params["tab1PAGENUM"] = max(1, int(page or 1))

    return QuerySpec(
        market=market,
        code=code,
        begin=begin,
        end=end,
        url=template.url,
        params=params,
        headers=dict(template.headers),
    )
