"""
Unit tests for table export.
"""

import csv
import json

from stormie.engine import ImpactTables
from stormie.export import export_csv, export_json


def _tables():
    return ImpactTables(
        fatalities=[("TORNADO", 5), ("FLOOD", 1)],
        injuries=[("TORNADO", 17)],
        property=[("FLOOD", 5_100_000.0)],
        crop=[],
    )


def test_export_csv(tmp_path):
    path = tmp_path / "tables.csv"
    export_csv(_tables(), str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert rows[0] == {"measure": "fatalities", "rank": "1", "event_type": "TORNADO", "value": "5"}
    assert rows[3]["measure"] == "property"
    assert float(rows[3]["value"]) == 5_100_000


def test_export_json(tmp_path):
    path = tmp_path / "tables.json"
    export_json(_tables(), str(path))
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert list(payload) == ["fatalities", "injuries", "property", "crop"]
    assert payload["fatalities"][1] == {"rank": 2, "event_type": "FLOOD", "value": 1}
    assert payload["crop"] == []
