"""Errors raised while querying one security. Each aborts that code only."""
from typing import Optional


class InsiderQueryError(Exception):
    """Base class; str(exc) is the message shown to the user."""
    pass


class InvalidCode(InsiderQueryError):
    """Input is not a 6-digit numeric security code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid security code {code!r}: only single 6-digit codes are supported")


class UnknownMarket(InsiderQueryError):
    """Code prefix has no exchange mapping."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No exchange market known for code {code} (prefix {code[:3]})")


class InvalidDateRange(InsiderQueryError):
    """User supplied from/to date does not parse, or begin falls after end."""
    pass


class TransportFailure(InsiderQueryError):
    """Source request did not succeed. Carries the raw diagnostic payload."""

    def __init__(self, message: str, status: Optional[int] = None, detail: Optional[str] = None):
        self.status = status
        self.detail = detail
        super().__init__(message)


class TransportBusy(TransportFailure):
    """Source endpoint signaled overload."""

    def __init__(self, status: int, headers: Optional[dict] = None):
        self.headers = dict(headers or {})
        super().__init__("Exchange system is busy, please try again later", status=status)


class PayloadError(TransportFailure):
    """A 200 response whose body is not the expected shape."""
    pass
