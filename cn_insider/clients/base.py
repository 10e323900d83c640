"""Shared HTTP transport for the exchange clients."""
import logging
from typing import Optional

import requests

from ..config import BUSY_STATUS, REQUEST_TIMEOUT, USER_AGENT
from ..errors import TransportBusy, TransportFailure
from ..models import QuerySpec

LOG = logging.getLogger("cn_insider.clients")


class ExchangeClient:
    """One GET per query; subclasses decode the body into parser input."""

    market = ""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = REQUEST_TIMEOUT):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.timeout = timeout

    def _get(self, query: QuerySpec) -> requests.Response:
        try:
            r = self.session.get(query.url, params=query.params, headers=query.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportFailure(f"Request to {query.url} failed: {e}", detail=str(e)) from e
        if r.status_code == BUSY_STATUS:
            sent = getattr(r.request, "headers", None) or {}
            raise TransportBusy(r.status_code, headers=dict(sent))
        if r.status_code != 200:
            raise TransportFailure(
                f"Request to {query.url} returned HTTP {r.status_code}",
                status=r.status_code,
                detail=(r.text or "")[:500],
            )
        return r

    def decode(self, response: requests.Response) -> str:
        return response.text

    def fetch(self, query: QuerySpec) -> str:
        """Perform the request and return the body as text."""
        LOG.debug("GET %s %s", query.url, query.params)
        return self.decode(self._get(query))
