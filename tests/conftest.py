import json
from datetime import date

import pytest

from cn_insider.models import SZ, TradingRecord

TODAY = date(2024, 6, 15)

SZ_HTML = """
<html><body>
<table id="REPORTID_tab1">
  <tr class="cls-data-th"><td>证券代码</td><td>证券简称</td><td>...</td></tr>
  <tr class="cls-data-tr">
    <td>002065</td><td>东华 软件</td><td>薛向东</td><td>2015-06-12</td><td>1000</td>
    <td>10.5</td><td>竞价交易</td><td>0.52</td><td>25000</td><td>薛向东</td>
    <td>董事长</td><td>本人</td>
  </tr>
  <tr class="cls-data-tr">
    <td>002065</td><td>东华软件</td><td>吕波</td><td>2015-05-20</td><td>-400</td>
    <td>12</td><td>竞价交易</td><td>0.10</td><td>--</td><td>吕波</td>
    <td>董事</td>
  </tr>
</table>
</body></html>
"""

SZ_HTML_EMPTY = """
<html><body><table><tr class="cls-data-th"><td>证券代码</td></tr></table></body></html>
"""

SH_ITEMS = [
    {
        "COMPANY_CODE": "603993",
        "COMPANY_ABBR": "洛阳钼业",
        "NAME": "李 朝春",
        "CHANGE_DATE": "2015-07-08",
        "FORM_DATE": "2015-07-10",
        "CHANGE_NUM": "200000",
        "CURRENT_AVG_PRICE": "9.80",
        "CHANGE_REASON": "二级市场买卖",
        "HOLDSTOCK_NUM": "1200000",
        "DUTY": "董事长",
    },
    {
        "COMPANY_CODE": "603993",
        "COMPANY_ABBR": "洛阳钼业",
        "NAME": "顾美凤",
        "CHANGE_DATE": "2015-07-09",
        "FORM_DATE": "2015-07-11",
        "CHANGE_NUM": "-5000",
        "CURRENT_AVG_PRICE": None,
        "CHANGE_REASON": "二级市场买卖",
        "HOLDSTOCK_NUM": "15000",
        "DUTY": "监事",
    },
]


def jsonp(items, callback="jsonpCallback12345"):
    return f"{callback}({json.dumps({'result': items}, ensure_ascii=False)})"


class FakeResponse:
    def __init__(self, status_code=200, text="", content=None, request_headers=None):
        self.status_code = status_code
        self.text = text
        self.content = content if content is not None else text.encode("utf-8")
        self.request = type("Req", (), {"headers": request_headers or {}})()


class FakeSession:
    """Stands in for requests.Session; returns queued responses per market url."""

    def __init__(self, responses=None, error=None):
        self.headers = {}
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.responses[url]


@pytest.fixture
def sz_html():
    return SZ_HTML


@pytest.fixture
def sh_body():
    return jsonp(SH_ITEMS)


def make_record(shares, price, market=SZ):
    return TradingRecord(
        company_code="000001",
        company_abbr="平安银行",
        person_name="张三",
        change_date=date(2024, 1, 2),
        change_shares=shares,
        avg_price=price,
        change_reason="竞价交易",
        duty="董事",
        market=market,
    )
