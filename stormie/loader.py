"""
Dataset loader (CSV -> StormEvent list)
=======================================

This module reads a storm events CSV (plain or compressed, e.g. the
`StormData.csv.bz2` export) and converts each row into a `StormEvent`.

Key ideas:
- We try multiple possible column names because exports vary in naming.
- Everything is read as text, then converted with null-safe helpers.
- Only the seven fields used for impact analysis are kept.
- Event type labels and magnitude codes are passed through raw: no trimming,
  no case-folding, no interpretation. That is the engine's job (codes) or
  nobody's (labels).
"""

from __future__ import annotations
from typing import List, Optional
import logging
import re
import pandas as pd
from .models import StormEvent

logger = logging.getLogger(__name__)

def _to_int(x) -> Optional[int]:
    """Convert a cell to int, returning None if missing/invalid."""
    if pd.isna(x): return None
    try: return int(float(x))
    except (TypeError, ValueError): return None

def _to_float(x) -> Optional[float]:
    """Convert a cell to float, returning None if missing/invalid."""
    if pd.isna(x): return None
    try: return float(x)
    except (TypeError, ValueError): return None

def _to_raw(x) -> str:
    if pd.isna(x): return ""
    return str(x)

def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())

def _col(df: pd.DataFrame, *names: str) -> str:
    cols = list(df.columns)
    for n in names:
        if n in cols:
            return n
    norm_map = {_norm(c): c for c in cols}
    for n in names:
        nn = _norm(n)
        if nn in norm_map:
            return norm_map[nn]
    raise KeyError(f"Missing required column. Tried={names}. Available={cols}")

def events_from_frame(df: pd.DataFrame) -> List[StormEvent]:
    """Convert an already-loaded DataFrame into StormEvent records."""
    type_col = _col(df, "EVTYPE", "EVENT_TYPE", "Event Type")
    fat_col = _col(df, "FATALITIES", "DEATHS_DIRECT", "Fatalities")
    inj_col = _col(df, "INJURIES", "INJURIES_DIRECT", "Injuries")
    prop_col = _col(df, "PROPDMG", "Property Damage")
    prop_exp_col = _col(df, "PROPDMGEXP", "Property Damage Exp")
    crop_col = _col(df, "CROPDMG", "Crop Damage")
    crop_exp_col = _col(df, "CROPDMGEXP", "Crop Damage Exp")

    events: List[StormEvent] = []
    for i, row in enumerate(df[[type_col, fat_col, inj_col, prop_col, prop_exp_col, crop_col, crop_exp_col]].itertuples(index=False)):
        label, fat, inj, prop, prop_exp, crop, crop_exp = row
        events.append(StormEvent(
            event_id=i,
            event_type=_to_raw(label),
            fatalities=_to_int(fat),
            injuries=_to_int(inj),
            prop_dmg=_to_float(prop),
            prop_dmg_exp=_to_raw(prop_exp),
            crop_dmg=_to_float(crop),
            crop_dmg_exp=_to_raw(crop_exp),
        ))
    return events

def load_storm_csv(path: str) -> List[StormEvent]:
    """Load a storm events CSV. Compression is inferred from the file name."""
    # dtype=str keeps magnitude codes like "0" from turning into floats;
    # only empty cells are missing, so "NA"/"null" codes and labels stay as text
    df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""], compression="infer")
    df.rename(columns={c: str(c).strip() for c in df.columns}, inplace=True)
    events = events_from_frame(df)
    logger.info("Loaded %d events from %s", len(events), path)
    return events
