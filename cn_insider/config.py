"""Configuration and environment for the exchange insider trading tracker."""
import os
from pathlib import Path

from dotenv import load_dotenv
_root = Path(__file__).resolve().parent.parent
load_dotenv(_root / ".env")

def _get(key: str, default: str = "") -> str:
    return (os.getenv(key) or "").strip() or default


# Shenzhen exchange: director/officer shareholding change report (HTML, GBK)
SZSE_URL = _get("SZSE_URL", "http://www.szse.cn/szseWeb/FrontController.szse")

# Shanghai exchange: common query endpoint (JSONP)
SSE_URL = _get("SSE_URL", "http://query.sse.com.cn/commonQuery.do")
SSE_REFERER = _get(
    "SSE_REFERER", "http://www.sse.com.cn/disclosure/listedinfo/credibility/change/"
)

USER_AGENT = _get("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)")
REQUEST_TIMEOUT = float(_get("REQUEST_TIMEOUT", "30"))

# Exchanges answer 408 when they are overloaded
BUSY_STATUS = 408

SZSE_ENCODING = "gbk"

# Query window in months when the user gives neither span nor explicit dates
DEFAULT_SPAN_MONTHS = int(_get("DEFAULT_SPAN_MONTHS", "12"))
MIN_SPAN_MONTHS = 1
MAX_SPAN_MONTHS = 24

# User input and display format / exchange query parameter format
INPUT_DATE_FORMAT = "%Y/%m/%d"
QUERY_DATE_FORMAT = "%Y-%m-%d"

LOG_LEVEL = _get("LOG_LEVEL", "INFO").upper()
