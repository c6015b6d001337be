"""
Categorical aggregation
=======================

Group records by event-type label, sum one measure per group, and rank the
groups.

Labels are compared by exact string equality. "TSTM WIND" and "TSTM WIND "
are two different groups; that is how the source data is keyed and we do not
hide it.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Mapping, Tuple, TypeVar, Union
import math

R = TypeVar("R")
Number = Union[int, float]

def _measure_value(v: object) -> Number:
    """Null-safe numeric value: None, NaN, booleans and non-numbers count as 0."""
    if v is None or isinstance(v, bool):
        return 0
    if isinstance(v, (int, float)):
        return 0 if isinstance(v, float) and math.isnan(v) else v
    try:
        f = float(v)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    return 0 if math.isnan(f) else f

def aggregate(
    records: Iterable[R],
    measure: Callable[[R], object],
    label: Callable[[R], str],
) -> Dict[str, Number]:
    """Sum `measure(r)` per `label(r)` in one pass.

    The returned dict keeps first-encountered group order, which `top_n`
    relies on for tie-breaking. No records -> empty dict.
    """
    totals: Dict[str, Number] = {}
    for r in records:
        k = label(r)
        totals[k] = totals.get(k, 0) + _measure_value(measure(r))
    return totals

def top_n(summary: Mapping[str, Number], n: int) -> List[Tuple[str, Number]]:
    """Return the `n` largest (label, value) pairs, descending.

    Ties keep the summary's insertion order. If `n` exceeds the number of
    groups, all groups are returned.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")
    # sorted() stays stable with reverse=True
    ranked = sorted(summary.items(), key=lambda kv: kv[1], reverse=True)
    return ranked[:n]
