"""
Export ranked tables
====================

CSV is great for spreadsheets; JSON is great for programs and preserves field
names. Both write one row per (measure, rank) with raw values: damage stays
in US$, no display scaling.
"""

from __future__ import annotations
from typing import Dict, List
import csv
import json
from .engine import ImpactTables

def _rows(tables: ImpactTables) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for measure, table in tables.items():
        for rank, (label, value) in enumerate(table, start=1):
            rows.append({"measure": measure, "rank": rank, "event_type": label, "value": value})
    return rows

def export_csv(tables: ImpactTables, path: str) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["measure", "rank", "event_type", "value"])
        for r in _rows(tables):
            w.writerow([r["measure"], r["rank"], r["event_type"], r["value"]])

def export_json(tables: ImpactTables, path: str) -> None:
    """Export the four tables as a JSON object keyed by measure."""
    payload: Dict[str, List[Dict[str, object]]] = {m: [] for m, _ in tables.items()}
    for r in _rows(tables):
        payload[str(r["measure"])].append({"rank": r["rank"], "event_type": r["event_type"], "value": r["value"]})
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
