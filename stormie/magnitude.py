"""
Damage magnitude normalization
==============================

Storm damage amounts are recorded as a number plus a one-character magnitude
code, e.g. `25` with code `M` means 25 million US$. This module maps codes to
multipliers and converts raw amounts to dollars.

Code table (case-insensitive):
- "", "-", "?"   -> 0   (unknown magnitude; the amount contributes nothing)
- "+"            -> 1
- "0" .. "8"     -> 10
- "H"            -> 100
- "K"            -> 1,000
- "M"            -> 1,000,000
- "B"            -> 1,000,000,000

Anything else raises `UnmappedMagnitudeCode`. Callers that want a lossy
fallback must catch it themselves (see `ImpactEngine` and its "zero" policy).
"""

from __future__ import annotations
from typing import Dict, Optional
import math
from .errors import UnmappedMagnitudeCode

# Closed alphabet of magnitude codes, uppercase.
ALPHABET = frozenset(["", "-", "?", "+", "H", "K", "M", "B"] + [str(d) for d in range(9)])

MULTIPLIERS: Dict[str, int] = {
    "": 0,
    "-": 0,
    "?": 0,
    "+": 1,
    "0": 10, "1": 10, "2": 10, "3": 10, "4": 10,
    "5": 10, "6": 10, "7": 10, "8": 10,
    "H": 100,
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}

def _check_table() -> None:
    """Fail at import time if the table and the alphabet ever drift apart."""
    missing = ALPHABET - MULTIPLIERS.keys()
    extra = MULTIPLIERS.keys() - ALPHABET
    if missing or extra:
        raise RuntimeError(f"Magnitude table out of sync: missing={sorted(missing)} extra={sorted(extra)}")

_check_table()

def is_valid_code(code: object) -> bool:
    return isinstance(code, str) and code.upper() in MULTIPLIERS

def multiplier(code: object) -> int:
    """Return the multiplier for a magnitude code.

    Raises:
        UnmappedMagnitudeCode: if `code` is not a string from the alphabet.
    """
    if not isinstance(code, str):
        raise UnmappedMagnitudeCode(code)
    try:
        return MULTIPLIERS[code.upper()]
    except KeyError:
        raise UnmappedMagnitudeCode(code) from None

def normalize(amount: Optional[float], code: object) -> float:
    """Convert a raw damage amount and its magnitude code to US$.

    A missing amount (None/NaN) counts as 0. Negative amounts are passed
    through unchanged. The code is always checked, even when the amount is 0.
    """
    m = multiplier(code)
    if amount is None:
        return 0.0
    a = float(amount)
    if math.isnan(a):
        return 0.0
    return a * m
