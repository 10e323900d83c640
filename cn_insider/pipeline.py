"""Run the resolve -> build -> fetch -> parse -> summarize pipeline per security."""
import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

import requests

from .clients import PARSERS, get_client
from .errors import InsiderQueryError
from .markets import resolve_market, validate_code
from .models import InsiderReport, QueryOutcome
from .query import build_query
from .summary import summarize

LOG = logging.getLogger("cn_insider.pipeline")


def query_insider(
    code: str,
    span_months=None,
    date_from=None,
    date_to=None,
    page: Optional[int] = None,
    today: Optional[date] = None,
    session: Optional[requests.Session] = None,
) -> InsiderReport:
    """Query one security. Raises InsiderQueryError subclasses on failure."""
    code = validate_code(code)
    market = resolve_market(code)
    query = build_query(
        code, market, span_months=span_months, date_from=date_from, date_to=date_to,
        page=page, today=today,
    )
    LOG.info("Querying %s (%s) from %s to %s", code, market, query.begin, query.end)

    payload = get_client(market, session=session).fetch(query)
    records = PARSERS[market](payload)
    LOG.info("Parsed %d records for %s", len(records), code)

    return InsiderReport(
        code=code,
        market=market,
        date_from=query.begin,
        date_to=query.end,
        records=records,
        summary=summarize(records),
    )


def split_codes(raw: str) -> List[str]:
    """'000768, 002456,600118' -> ['000768', '002456', '600118']"""
    return [c.strip() for c in (raw or "").split(",") if c.strip()]


def query_insiders(codes: Iterable[str], **options) -> List[QueryOutcome]:
    """
    Run query_insider for each code in input order.
    A failing code is recorded in its outcome and does not stop the others.
    """
    outcomes: List[QueryOutcome] = []
    session = options.pop("session", None) or requests.Session()
    for code in codes:
        try:
            report = query_insider(code, session=session, **options)
            outcomes.append(QueryOutcome(code=code, report=report))
        except InsiderQueryError as e:
            LOG.warning("Query for %s failed: %s", code, e)
            outcomes.append(QueryOutcome(code=code, error=e))
    return outcomes


def outcome_counts(outcomes: List[QueryOutcome]) -> Dict[str, int]:
    return {
        "ok": sum(1 for o in outcomes if o.ok),
        "failed": sum(1 for o in outcomes if not o.ok),
    }
