"""Shenzhen exchange client - director/officer shareholding changes (HTML table)."""
import logging
import re
from datetime import date, datetime
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from ..coerce import FallbackPolicy, parse_optional_number
from ..config import SZSE_ENCODING
from ..models import SZ, TradingRecord
from .base import ExchangeClient

LOG = logging.getLogger("cn_insider.clients.szse")

ROW_CLASS = "cls-data-tr"
MIN_CELLS = 11


def _parse_date(s: Optional[str]) -> Optional[date]:
    if not s:
        return None
    try:
        return datetime.strptime(s[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def _number(text: str) -> float:
    return parse_optional_number(text, FallbackPolicy.UNKNOWN)


def parse_szse_html(html: str) -> List[TradingRecord]:
    """
    Parse the report's data rows into records.
    Cells by position: code, abbreviation, trader, change date, change shares,
    avg price, reason, holding ratio, holding shares, insider, duty and,
    when present, the trader's relation to the insider.
    No data rows is a normal empty result.
    """
    records: List[TradingRecord] = []
    soup = BeautifulSoup(html or "", "html.parser")
    for row in soup.find_all("tr", class_=ROW_CLASS):
        cols = [td.get_text(strip=True) for td in row.find_all("td")]
        if len(cols) < MIN_CELLS:
            LOG.warning("Skipping Shenzhen row with %d cells (need %d)", len(cols), MIN_CELLS)
            continue
        records.append(
            TradingRecord(
                company_code=cols[0],
                company_abbr=re.sub(r"\s+", "", cols[1]),
                person_name=cols[2],
                change_date=_parse_date(cols[3]),
                change_shares=_number(cols[4]),
                avg_price=_number(cols[5]),
                change_reason=cols[6],
                holding_ratio=_number(cols[7]),
                holding_shares=_number(cols[8]),
                insider_name=cols[9],
                duty=cols[10],
                insider_relation=cols[11] if len(cols) > 11 else None,
                market=SZ,
            )
        )
    return records


class SZSEClient(ExchangeClient):
    """Fetch insider trading for Shenzhen main, SME and ChiNext boards."""

    market = SZ

    def decode(self, response: requests.Response) -> str:
        # Undecodable bytes are dropped
        return response.content.decode(SZSE_ENCODING, errors="ignore")
