"""
Data model (StormEvent)
=======================

Each row of the storm events file is converted into a `StormEvent` object.
We keep it immutable (`frozen=True`) so that:
- events cannot be accidentally modified after loading, and
- the engine derives normalized damage *next to* the records, never inside them.

Only the seven fields needed for impact analysis are carried.
"""

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class StormEvent:
    """Immutable record for one storm events row.

    `event_type` is the exact free-text label from the file (no trimming or
    case-folding). The `*_exp` fields hold the raw magnitude code, "" when absent.
    """
    event_id: int
    event_type: str
    fatalities: Optional[int]
    injuries: Optional[int]
    prop_dmg: Optional[float]
    prop_dmg_exp: str
    crop_dmg: Optional[float]
    crop_dmg_exp: str
