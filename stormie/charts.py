"""
Charts for ranked impact tables
-------------------------------
One horizontal bar chart per ranked table, written as PNG files.

matplotlib/numpy are imported lazily so the engine and CLI work without them
until a chart is actually requested.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging
import os
from .config import EngineConfig
from .engine import ImpactTables, is_damage_measure

logger = logging.getLogger(__name__)

_TITLES = {
    "fatalities": "Fatalities by Event Type",
    "injuries": "Injuries by Event Type",
    "property": "Property Damage by Event Type",
    "crop": "Crop Damage by Event Type",
}

def _pyplot():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib.\n"
            "Install it with: python -m pip install matplotlib numpy"
        ) from e
    return plt

def plot_table(
    table: Sequence[Tuple[str, float]],
    out_path: str,
    *,
    title: str,
    ylabel: str,
    scale: float = 1.0,
) -> Optional[str]:
    """Write a bar chart for one ranked table. Returns None for an empty table."""
    if not table:
        logger.info("Skipping chart %r: table is empty", title)
        return None
    plt = _pyplot()
    import numpy as np

    labels = [label for label, _ in table]
    values = np.array([float(v) for _, v in table]) / scale
    pos = np.arange(len(labels))

    plt.figure()
    # largest first, top to bottom
    plt.barh(pos, values[::-1])
    plt.yticks(pos, labels[::-1])
    plt.title(title)
    plt.xlabel(ylabel)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
    return out_path

def plot_tables(tables: ImpactTables, out_dir: str, config: Optional[EngineConfig] = None) -> List[str]:
    """Write all four charts into `out_dir`; returns the written paths."""
    config = config or EngineConfig()
    os.makedirs(out_dir, exist_ok=True)
    written: List[str] = []
    for measure, table in tables.items():
        damage = is_damage_measure(measure)
        path = plot_table(
            table,
            os.path.join(out_dir, f"top_{measure}.png"),
            title=f"Top {len(table)} {_TITLES[measure]}",
            ylabel=f"Damage ({config.damage_unit})" if damage else "Count",
            scale=config.damage_scale if damage else 1.0,
        )
        if path:
            written.append(path)
    return written
