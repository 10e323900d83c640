"""Numeric coercion of loosely typed source fields (strings, None, missing keys)."""
from enum import Enum

import numpy as np


class FallbackPolicy(Enum):
    """What a missing or non-numeric value becomes.

    UNKNOWN: NaN, displayed as a placeholder and left out of aggregation.
    ZERO_DEFAULT: 0, used where a source routinely omits the value
    (Shanghai average price).
    """
    UNKNOWN = "unknown"
    ZERO_DEFAULT = "zero_default"


def is_unknown(value) -> bool:
    return value is None or (isinstance(value, float) and np.isnan(value))


def parse_optional_number(raw, policy: FallbackPolicy = FallbackPolicy.UNKNOWN) -> float:
    """Parse raw into a float, applying policy when raw is absent or not a number."""
    fallback = 0.0 if policy is FallbackPolicy.ZERO_DEFAULT else np.nan
    if raw is None or isinstance(raw, bool):
        return fallback
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        s = str(raw).strip().replace(",", "")
        if not s:
            return fallback
        try:
            value = float(s)
        except ValueError:
            return fallback
    if np.isnan(value) or np.isinf(value):
        return fallback
    return value
