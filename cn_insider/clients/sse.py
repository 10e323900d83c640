"""Shanghai exchange client - director/officer shareholding changes (JSONP)."""
import json
import logging
import re
from datetime import date, datetime
from typing import List, Optional

from ..coerce import FallbackPolicy, parse_optional_number
from ..errors import PayloadError
from ..models import SH, TradingRecord
from .base import ExchangeClient

LOG = logging.getLogger("cn_insider.clients.sse")

_JSONP = re.compile(r"^[^(]*?\((.*)\)[^)]*$", re.DOTALL)


def _parse_date(s: Optional[str]) -> Optional[date]:
    if not s:
        return None
    try:
        return datetime.strptime(str(s)[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def _text(v) -> str:
    return "" if v is None else str(v).strip()


def strip_jsonp(body: str):
    """Return the JSON value of a prefix(JSON)suffix body; plain JSON passes through."""
    s = (body or "").strip()
    m = None if s[:1] in ("{", "[") else _JSONP.match(s)
    raw = m.group(1) if m else s
    try:
        return json.loads(raw)
    except ValueError as e:
        raise PayloadError("Shanghai response is not valid JSONP", status=200, detail=s[:500]) from e


def _items(data) -> list:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        items = data.get("result")
        if items is None:
            items = (data.get("pageHelp") or {}).get("data")
        if isinstance(items, list):
            return items
    raise PayloadError("Shanghai response has no result list", status=200, detail=str(data)[:500])


def parse_sse_jsonp(body: str) -> List[TradingRecord]:
    """
    Parse the callback-wrapped JSON into records.
    Average price is often null (e.g. older disclosures) and becomes 0, not
    unknown: such records count shares but no cost in the summary.
    """
    records: List[TradingRecord] = []
    for item in _items(strip_jsonp(body)):
        if not isinstance(item, dict):
            LOG.warning("Skipping non-object Shanghai item: %r", item)
            continue
        records.append(
            TradingRecord(
                company_code=_text(item.get("COMPANY_CODE")),
                company_abbr=re.sub(r"\s+", "", _text(item.get("COMPANY_ABBR"))),
                person_name=re.sub(r"\s+", "", _text(item.get("NAME"))),
                change_date=_parse_date(item.get("CHANGE_DATE")),
                form_date=_parse_date(item.get("FORM_DATE")),
                change_shares=parse_optional_number(item.get("CHANGE_NUM"), FallbackPolicy.UNKNOWN),
                holding_shares=parse_optional_number(item.get("HOLDSTOCK_NUM"), FallbackPolicy.UNKNOWN),
                avg_price=parse_optional_number(item.get("CURRENT_AVG_PRICE"), FallbackPolicy.ZERO_DEFAULT),
                change_reason=_text(item.get("CHANGE_REASON")),
                duty=_text(item.get("DUTY")),
                market=SH,
            )
        )
    return records


class SSEClient(ExchangeClient):
    """Fetch insider trading for the Shanghai main board."""

    market = SH
