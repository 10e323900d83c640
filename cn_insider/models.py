"""Exchange insider trading tracker - data models and shared types."""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

SZ = "sz"  # Shenzhen exchange, HTML report
SH = "sh"  # Shanghai exchange, JSONP feed


@dataclass
class TradingRecord:
    """Single normalized director/officer transaction (either exchange).

    Numeric fields hold NaN when the source cell was not a number.
    change_shares > 0 is an acquisition, < 0 a disposal.
    """
    company_code: str
    company_abbr: str
    person_name: str
    change_date: Optional[date]
    change_shares: float
    avg_price: float
    change_reason: str
    duty: str
    form_date: Optional[date] = None  # sh only
    holding_ratio: Optional[float] = None  # sz only
    holding_shares: Optional[float] = None
    insider_name: Optional[str] = None  # sz only
    insider_relation: Optional[str] = None  # sz only
    market: str = SZ


@dataclass
class MarketTemplate:
    """Endpoint and parameter key names of one exchange's query."""
    market: str
    url: str
    code_key: str
    begin_key: str
    end_key: str
    default_span_months: int
    base_params: Dict[str, object] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class QuerySpec:
    """Fully resolved request for one security. begin/end are inclusive."""
    market: str
    code: str
    begin: date
    end: date
    url: str
    params: Dict[str, object]
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class TradingSummary:
    """Aggregate buy/sell statistics. Avg prices are None when not applicable."""
    buy_shares: float
    sell_shares: float
    net_shares: float
    buy_avg_price: Optional[float]
    sell_avg_price: Optional[float]
    buy_cost: float
    sell_proceeds: float
    net_cost: float
    record_count: int = 0
    excluded_count: int = 0


@dataclass
class InsiderReport:
    """Result of one pipeline run. summary is None when no transactions were found."""
    code: str
    market: str
    date_from: date
    date_to: date
    records: List[TradingRecord]
    summary: Optional[TradingSummary]


@dataclass
class QueryOutcome:
    """One code's result in a batch: exactly one of report / error is set."""
    code: str
    report: Optional[InsiderReport] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
