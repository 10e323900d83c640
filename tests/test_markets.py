import pytest

from cn_insider.errors import InvalidCode, UnknownMarket
from cn_insider.markets import catalog_for, get_template, resolve_market, validate_code
from cn_insider.models import SH, SZ


@pytest.mark.parametrize("code,market", [
    ("000001", SZ),
    ("001979", SZ),
    ("002065", SZ),
    ("300036", SZ),
    ("301236", SZ),
    ("600118", SH),
    ("601777", SH),
    ("603993", SH),
    ("605499", SH),
])
def test_resolve_market_known_prefixes(code, market):
    assert resolve_market(code) == market
    assert resolve_market(code) == resolve_market(code)


@pytest.mark.parametrize("code", ["900901", "200002", "688981", "430047"])
def test_resolve_market_unknown_prefix_fails(code):
    with pytest.raises(UnknownMarket):
        resolve_market(code)


@pytest.mark.parametrize("code", ["", "abc", "00206", "0020655", "60a118", None, "600 18"])
def test_validate_code_rejects_non_codes(code):
    with pytest.raises(InvalidCode):
        validate_code(code)


def test_validate_code_strips_whitespace():
    assert validate_code(" 600118 ") == "600118"


def test_catalog_by_board():
    assert catalog_for("000768") == "1801_cxda"
    assert catalog_for("002456") == "1801_cxda_zxb"
    assert catalog_for("300036") == "1801_cxda_cyb"
    with pytest.raises(UnknownMarket):
        catalog_for("600118")


def test_get_template_returns_independent_copies():
    t1 = get_template(SZ)
    t1.base_params["txtDMorJC"] = "000001"
    t2 = get_template(SZ)
    assert "txtDMorJC" not in t2.base_params
    with pytest.raises(ValueError):
        get_template("hk")
