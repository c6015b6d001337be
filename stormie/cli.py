"""
Stormie Command Line Interface (CLI)
====================================

This file provides the terminal program you run like:

    python -m stormie.cli --csv "path/to/StormData.csv.bz2"

It:
- parses arguments (argparse) and configures logging
- loads the dataset once and builds the impact engine
- either prints the four ranked tables and exits (--summary), or
- starts a REPL (Read-Eval-Print Loop) mapping commands to engine methods

The CLI DOES NOT modify your dataset file.
"""

from __future__ import annotations
import argparse, logging, shlex
from typing import List, Optional, Sequence, Tuple
from .config import EngineConfig, UNMAPPED_POLICIES
from .engine import ImpactEngine, is_damage_measure, measure_key
from .loader import load_storm_csv

logger = logging.getLogger(__name__)

HELP_TEXT = """
Stormie commands
----------------

1) View / Inspect
   help
   stats
   codes <prop|crop>                (raw magnitude code frequencies)

2) Impact tables
   health                           (top fatalities + injuries)
   economic                         (top property + crop damage)
   top <k> <measure>                (example: top 5 property)
   measures: fatalities, injuries, property, crop

3) Export / Charts
   export csv "<out.csv>"
   export json "<out.json>"
   chart "<out_dir>"

4) Exit
   quit
"""

_HEADINGS = {
    "fatalities": "Fatalities",
    "injuries": "Injuries",
    "property": "Property damage",
    "crop": "Crop damage",
}

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="stormie", description="Storm Impact Engine")
    ap.add_argument("--csv", required=True, help="Path to storm events CSV (may be .bz2/.gz compressed)")
    ap.add_argument("--top", type=int, default=10, help="Number of event types per table (default 10)")
    ap.add_argument("--on-unmapped", choices=UNMAPPED_POLICIES, default="raise",
                    help="What to do with unknown damage magnitude codes")
    ap.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    ap.add_argument("--summary", action="store_true", help="Print the four tables and exit")
    return ap

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the stormie CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = EngineConfig(top_n=args.top, unmapped_policy=args.on_unmapped).validate()
    events = load_storm_csv(args.csv)
    engine = ImpactEngine(events=events, config=config, dataset_path=args.csv)

    if args.summary:
        handle(engine, "health")
        handle(engine, "economic")
        return 0

    print(f"Loaded {len(events)} events. Type 'help' for commands.")
    while True:
        try:
            line = input("stormie> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line.lower() in ("quit", "exit"):
            break
        try:
            handle(engine, line)
        except Exception as e:
            logger.debug("Command failed: %s", line, exc_info=True)
            print(f"Error: {e}")
    return 0

def handle(engine: ImpactEngine, line: str) -> None:
    """Handle one CLI command line."""
    parts = shlex.split(line)
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP_TEXT)
        return

    if cmd == "stats":
        s = engine.stats()
        if engine.dataset_path:
            print(f"Dataset: {engine.dataset_path}")
        print(f"Events: {s['events']} | Event types: {s['event_types']} | Unmapped codes zeroed: {s['unmapped']}")
        return

    if cmd == "codes":
        fld = parts[1] if len(parts) >= 2 else "prop"
        for code, n in engine.code_counts(fld):
            print(f"{code!r:>6}  {n}")
        return

    if cmd == "health":
        for m, table in engine.health_tables().items():
            _print_table(engine, m, table)
        return

    if cmd == "economic":
        for m, table in engine.economic_tables().items():
            _print_table(engine, m, table)
        return

    if cmd == "top":
        if len(parts) < 3:
            raise ValueError("usage: top <k> <measure>")
        k = int(parts[1]); m = measure_key(parts[2])
        _print_table(engine, m, engine.top(m, k))
        return

    if cmd == "export":
        if len(parts) < 3:
            print('Usage: export csv "out.csv"  OR  export json "out.json"')
            return
        from .export import export_csv, export_json
        fmt, out_path = parts[1].lower(), parts[2]
        if fmt == "csv":
            export_csv(engine.tables(), out_path)
        elif fmt == "json":
            export_json(engine.tables(), out_path)
        else:
            print("Unknown export format. Use: csv or json")
            return
        print(f"Exported {fmt.upper()} to {out_path}")
        return

    if cmd == "chart":
        from .charts import plot_tables
        out_dir = parts[1] if len(parts) >= 2 else "charts"
        paths = plot_tables(engine.tables(), out_dir, engine.config)
        print(f"Wrote {len(paths)} charts to {out_dir}")
        return

    print("Unknown command. Type 'help'.")

def _print_table(engine: ImpactEngine, measure: str, table: List[Tuple[str, float]]) -> None:
    cfg = engine.config
    damage = is_damage_measure(measure)
    unit = f" ({cfg.damage_unit})" if damage else ""
    print(f"Top {len(table)} event types by {_HEADINGS[measure].lower()}{unit}:")
    for rank, (label, value) in enumerate(table, start=1):
        shown = f"{value / cfg.damage_scale:,.2f}" if damage else f"{value:,.0f}"
        print(f"{rank:>3}. {label:<30} {shown}")

if __name__ == "__main__":
    raise SystemExit(main())
