from datetime import date

from cn_insider.clients.szse import parse_szse_html
from cn_insider.models import SZ, InsiderReport
from cn_insider.report import (
    NO_TRADING,
    format_price,
    format_shares,
    pad,
    records_to_frame,
    render_report,
    report_to_dict,
)
from cn_insider.summary import summarize


def _report(records):
    return InsiderReport(
        code="002065",
        market=SZ,
        date_from=date(2024, 3, 15),
        date_to=date(2024, 6, 15),
        records=records,
        summary=summarize(records),
    )


def test_formatting_helpers():
    assert format_shares(1234567) == "1,234,567"
    assert format_shares(-400) == "-400"
    assert format_shares(float("nan")) == "-"
    assert format_price(None) == "N/A"
    assert format_price(10.5) == "10.50"
    assert pad("东华", 6) == "东华  "
    assert pad("12", 4, right=True) == "  12"


def test_empty_report():
    text = render_report(_report([]))
    assert "from 2024/03/15 to 2024/06/15" in text
    assert NO_TRADING in text


def test_report_with_records(sz_html):
    text = render_report(_report(parse_szse_html(sz_html)), elapsed_ms=12)
    assert "600" in text
    bought = (
        "Bought:       " + pad("1,000", 18, True)
        + "   Avg price:   " + pad("10.50", 20, True)
        + "   Cost:     " + pad("10,500.00", 18, True)
    )
    sold = (
        "Sold:         " + pad("400", 18, True)
        + "   Avg price:   " + pad("12.00", 20, True)
        + "   Proceeds: " + pad("4,800.00", 18, True)
    )
    lines = text.splitlines()
    assert bought in lines
    assert sold in lines
    assert "2015/06/12" in text
    assert "东华软件" in text
    assert "Done in 12 ms" in text


def test_report_to_dict_is_json_safe(sz_html):
    data = report_to_dict(_report(parse_szse_html(sz_html)))
    assert data["date_from"] == "2024-03-15"
    assert data["records"][0]["change_date"] == "2015-06-12"
    assert data["records"][1]["holding_shares"] is None
    assert data["summary"]["net_shares"] == 600


def test_records_to_frame(sz_html):
    df = records_to_frame([_report(parse_szse_html(sz_html))])
    assert len(df) == 2
    assert list(df["change_shares"]) == [1000, -400]
    assert records_to_frame([]).empty
