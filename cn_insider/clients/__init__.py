"""Exchange insider trading tracker - exchange clients and record parsers."""
from typing import Callable, Dict, List, Optional

import requests

from ..models import SH, SZ, TradingRecord
from .base import ExchangeClient
from .sse import SSEClient, parse_sse_jsonp
from .szse import SZSEClient, parse_szse_html

# Market id -> parser producing canonical records
PARSERS: Dict[str, Callable[[str], List[TradingRecord]]] = {
    SZ: parse_szse_html,
    SH: parse_sse_jsonp,
}

CLIENTS: Dict[str, type] = {
    SZ: SZSEClient,
    SH: SSEClient,
}


def get_client(market: str, session: Optional[requests.Session] = None) -> ExchangeClient:
    try:
        cls = CLIENTS[market]
    except KeyError:
        raise ValueError(f"Unknown market id: {market!r}") from None
    return cls(session=session)


__all__ = [
    "CLIENTS",
    "PARSERS",
    "ExchangeClient",
    "SSEClient",
    "SZSEClient",
    "get_client",
    "parse_sse_jsonp",
    "parse_szse_html",
]
