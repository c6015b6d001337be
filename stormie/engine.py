"""
Core engine (stormie)
=====================

The engine turns a list of storm records into four ranked impact tables:

1) Normalize damage -> per-record (property US$, crop US$), computed once
2) Aggregate four measures by event type:
   - fatalities, injuries          (human health impact)
   - property damage, crop damage  (economic impact)
3) Rank each summary and keep the top N groups

Records are never modified; normalized damage lives in a list parallel to
`events`.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import logging
from .aggregate import Number, aggregate, top_n
from .config import EngineConfig
from .errors import UnmappedMagnitudeCode
from .magnitude import normalize
from .models import StormEvent

logger = logging.getLogger(__name__)

Table = List[Tuple[str, Number]]

MEASURES = ("fatalities", "injuries", "property", "crop")
HEALTH_MEASURES = ("fatalities", "injuries")
ECONOMIC_MEASURES = ("property", "crop")

_ALIASES = {
    "fatalities": "fatalities", "deaths": "fatalities", "fatal": "fatalities",
    "injuries": "injuries", "injured": "injuries",
    "property": "property", "prop": "property", "propdmg": "property",
    "crop": "crop", "crops": "crop", "cropdmg": "crop",
}

def measure_key(name: str) -> str:
    """Resolve a measure name or alias (e.g. 'deaths') to its canonical name."""
    m = _ALIASES.get(name.lower().strip())
    if m is None:
        raise ValueError(f"measure must be one of: {', '.join(MEASURES)}")
    return m

def is_damage_measure(measure: str) -> bool:
    return measure_key(measure) in ECONOMIC_MEASURES

@dataclass
class ImpactTables:
    """The four ranked (label, value) tables. Damage values are in US$."""
    fatalities: Table
    injuries: Table
    property: Table
    crop: Table

    def items(self) -> List[Tuple[str, Table]]:
        return [(m, getattr(self, m)) for m in MEASURES]

@dataclass
class ImpactEngine:
    """Storm impact engine.

    The engine stores:
    - events: all StormEvent records (immutable)
    - config: ranking size and the unmapped-code policy
    - unmapped: tally of (field, code) pairs zeroed under the "zero" policy
    """
    events: List[StormEvent]
    config: EngineConfig = field(default_factory=EngineConfig)
    dataset_path: Optional[str] = None
    unmapped: Counter = field(default_factory=Counter, init=False)
    _damage: Optional[List[Tuple[float, float]]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.config.validate()

    # ---------------- Normalization ----------------
    def _normalize_field(self, e: StormEvent, fld: str) -> float:
        if fld == "prop":
            amount, code = e.prop_dmg, e.prop_dmg_exp
        else:
            amount, code = e.crop_dmg, e.crop_dmg_exp
        try:
            return normalize(amount, code)
        except UnmappedMagnitudeCode:
            if self.config.unmapped_policy == "raise":
                raise UnmappedMagnitudeCode(code, event_id=e.event_id, field=fld) from None
            self.unmapped[(fld, code)] += 1
            return 0.0

    def normalized_damage(self) -> List[Tuple[float, float]]:
        """Per-record (property US$, crop US$), aligned with `events`."""
        if self._damage is None:
            self.unmapped.clear()
            damage = [(self._normalize_field(e, "prop"), self._normalize_field(e, "crop")) for e in self.events]
            if self.unmapped:
                logger.warning(
                    "Zeroed damage for %d values with unmapped magnitude codes: %s",
                    sum(self.unmapped.values()),
                    ", ".join(f"{f}={c!r} x{n}" for (f, c), n in self.unmapped.most_common()),
                )
            self._damage = damage
        return self._damage

    # ---------------- Aggregation ----------------
    def summary(self, measure: str) -> Dict[str, Number]:
        """Total of one measure per event type, in first-seen label order."""
        m = measure_key(measure)
        if m in HEALTH_MEASURES:
            get: Callable[[StormEvent], object] = (lambda e: e.fatalities) if m == "fatalities" else (lambda e: e.injuries)
            out = aggregate(self.events, measure=get, label=lambda e: e.event_type)
        else:
            idx = 0 if m == "property" else 1
            rows: Iterable[Tuple[StormEvent, Tuple[float, float]]] = zip(self.events, self.normalized_damage())
            out = aggregate(rows, measure=lambda r: r[1][idx], label=lambda r: r[0].event_type)
        logger.debug("Aggregated %s over %d events into %d groups", m, len(self.events), len(out))
        return out

    def top(self, measure: str, n: Optional[int] = None) -> Table:
        """Top-n event types by one measure (default n from config)."""
        return top_n(self.summary(measure), self.config.top_n if n is None else n)

    def tables(self, n: Optional[int] = None) -> ImpactTables:
        return ImpactTables(**{m: self.top(m, n) for m in MEASURES})

    def health_tables(self, n: Optional[int] = None) -> Dict[str, Table]:
        return {m: self.top(m, n) for m in HEALTH_MEASURES}

    def economic_tables(self, n: Optional[int] = None) -> Dict[str, Table]:
        return {m: self.top(m, n) for m in ECONOMIC_MEASURES}

    # ---------------- Inspection ----------------
    def code_counts(self, fld: str) -> List[Tuple[str, int]]:
        """Frequency of raw magnitude codes in the 'prop' or 'crop' column."""
        f = fld.lower().strip()
        if f in ("prop", "property"):
            c = Counter(e.prop_dmg_exp for e in self.events)
        elif f in ("crop", "crops"):
            c = Counter(e.crop_dmg_exp for e in self.events)
        else:
            raise ValueError("field must be: prop | crop")
        return c.most_common()

    def stats(self) -> Dict[str, int]:
        """Record/label counts and the unmapped-code tally."""
        # the tally only exists once damage has been normalized
        if self.config.unmapped_policy == "zero":
            self.normalized_damage()
        return {
            "events": len(self.events),
            "event_types": len({e.event_type for e in self.events}),
            "unmapped": sum(self.unmapped.values()),
        }
