#!/usr/bin/env python3
"""FastAPI server for the exchange insider trading tracker."""
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
import logging
import sys
import os

_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from fastapi import FastAPI, HTTPException, Query

from cn_insider.config import LOG_LEVEL
from cn_insider.errors import (
    InsiderQueryError,
    InvalidCode,
    InvalidDateRange,
    TransportBusy,
    UnknownMarket,
)
from cn_insider.pipeline import query_insider, query_insiders, split_codes
from cn_insider.report import report_to_dict

logging.basicConfig(level=LOG_LEVEL)
LOG = logging.getLogger("cn_insider.api")

app = FastAPI(title="Exchange Insider Trading Tracker", version="1.0.0")
_executor = ThreadPoolExecutor(max_workers=2)


def _status_for(e: InsiderQueryError) -> int:
    if isinstance(e, (InvalidCode, InvalidDateRange)):
        return 400
    if isinstance(e, UnknownMarket):
        return 404
    if isinstance(e, TransportBusy):
        return 503
    return 502


def _error_dict(e: InsiderQueryError) -> dict:
    out = {"error": type(e).__name__, "message": str(e)}
    if getattr(e, "status", None) is not None:
        out["status"] = e.status
    return out


def _do_query(code: str, span: Optional[str], date_from: Optional[str], date_to: Optional[str], page: int):
    return report_to_dict(
        query_insider(code, span_months=span, date_from=date_from, date_to=date_to, page=page)
    )


@app.get("/api/insider/{code}")
async def get_insider(
    code: str,
    span: Optional[str] = Query(default=None, description="Months back from today (1-24)"),
    date_from: Optional[str] = Query(default=None, alias="from", description="YYYY/MM/DD"),
    date_to: Optional[str] = Query(default=None, alias="to", description="YYYY/MM/DD"),
    page: int = Query(default=1, ge=1, description="Result page (Shenzhen only)"),
):
    """Insider trading records and summary for one security code."""
    import asyncio
    loop = asyncio.get_event_loop()
    try:
        return await loop.run_in_executor(_executor, _do_query, code, span, date_from, date_to, page)
    except InsiderQueryError as e:
        LOG.warning("Query for %s failed: %s", code, e)
        raise HTTPException(status_code=_status_for(e), detail=_error_dict(e))


def _do_batch(codes, span, date_from, date_to):
    out = []
    for o in query_insiders(codes, span_months=span, date_from=date_from, date_to=date_to):
        if o.ok:
            out.append({"code": o.code, "report": report_to_dict(o.report)})
        else:
            out.append({"code": o.code, "error": _error_dict(o.error)})
    return out


@app.get("/api/insiders")
async def get_insiders(
    codes: str = Query(..., description="Comma-separated security codes"),
    span: Optional[str] = Query(default=None),
    date_from: Optional[str] = Query(default=None, alias="from"),
    date_to: Optional[str] = Query(default=None, alias="to"),
):
    """Batch query. Each code succeeds or fails on its own."""
    import asyncio
    code_list = split_codes(codes)
    if not code_list:
        raise HTTPException(status_code=400, detail={"error": "InvalidCode", "message": "No codes given"})
    loop = asyncio.get_event_loop()
    results = await loop.run_in_executor(_executor, _do_batch, code_list, span, date_from, date_to)
    return {"results": results}


@app.get("/api/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
