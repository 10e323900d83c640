"""Map security codes to exchange markets and their query templates."""
import copy
from typing import Dict

from .config import DEFAULT_SPAN_MONTHS, SSE_REFERER, SSE_URL, SZSE_URL
from .errors import InvalidCode, UnknownMarket
from .models import SH, SZ, MarketTemplate

# First three digits of the code -> market
MARKET_BY_PREFIX: Dict[str, str] = {
    # Shenzhen main board
    "000": SZ,
    "001": SZ,
    # Shenzhen SME board
    "002": SZ,
    "003": SZ,
    # Shenzhen growth enterprise board (ChiNext)
    "300": SZ,
    "301": SZ,
    # Shanghai main board
    "600": SH,
    "601": SH,
    "603": SH,
    "605": SH,
}

# Shenzhen report catalog per board. Opaque to us, the endpoint requires it.
SZSE_CATALOG_BY_PREFIX: Dict[str, str] = {
    "000": "1801_cxda",
    "001": "1801_cxda",
    "002": "1801_cxda_zxb",
    "003": "1801_cxda_zxb",
    "300": "1801_cxda_cyb",
    "301": "1801_cxda_cyb",
}

_TEMPLATES: Dict[str, MarketTemplate] = {
    SZ: MarketTemplate(
        market=SZ,
        url=SZSE_URL,
        code_key="txtDMorJC",
        begin_key="txtStart",
        end_key="txtEnd",
        default_span_months=DEFAULT_SPAN_MONTHS,
        base_params={
            "ACTIONID": 7,
            "AJAX": "AJAX-TRUE",
            "TABKEY": "tab1",
            "REPORT_ACTION": "search",
        },
    ),
    SH: MarketTemplate(
        market=SH,
        url=SSE_URL,
        code_key="COMPANY_CODE",
        begin_key="BEGIN_DATE",
        end_key="END_DATE",
        default_span_months=DEFAULT_SPAN_MONTHS,
        base_params={
            "jsonCallBack": "jsonpCallback",
            "isPagination": "false",
            "sqlId": "COMMON_SSE_XXPL_CXJL_SSGSGFBDQK_S",
            "NAME": "",
        },
        headers={"Referer": SSE_REFERER},
    ),
}


def validate_code(code) -> str:
    """Return the stripped code, or raise InvalidCode unless it is 6 digits."""
    s = str(code or "").strip()
    if len(s) != 6 or not s.isdigit():
        raise InvalidCode(str(code))
    return s


def resolve_market(code: str) -> str:
    """Return "sz" or "sh" for a security code. Unknown prefixes raise UnknownMarket."""
    code = validate_code(code)
    market = MARKET_BY_PREFIX.get(code[:3])
    if market is None:
        raise UnknownMarket(code)
    return market


def get_template(market: str) -> MarketTemplate:
    """Fresh copy of the market's query template; callers may mutate it."""
    try:
        return copy.deepcopy(_TEMPLATES[market])
    except KeyError:
        raise ValueError(f"Unknown market id: {market!r}") from None


def catalog_for(code: str) -> str:
    """Shenzhen report catalog for a Shenzhen code."""
    try:
        return SZSE_CATALOG_BY_PREFIX[code[:3]]
    except KeyError:
        raise UnknownMarket(code) from None
