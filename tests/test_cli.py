"""
Unit tests for CLI command handling.
"""

import json

import pytest

from stormie.cli import build_parser, handle, main
from stormie.config import EngineConfig
from stormie.engine import ImpactEngine


@pytest.fixture
def engine(create_event):
    return ImpactEngine(
        [
            create_event("TORNADO", fatalities=5, injuries=15, prop_dmg=2.5, prop_dmg_exp="M"),
            create_event("FLOOD", fatalities=1, injuries=3, prop_dmg=100, prop_dmg_exp="K", crop_dmg=5, crop_dmg_exp="M"),
        ],
        config=EngineConfig(top_n=10),
    )


class TestHandle:
    """Tests for handle()."""

    def test_stats(self, engine, capsys):
        handle(engine, "stats")
        assert "Events: 2 | Event types: 2" in capsys.readouterr().out

    def test_stats_shows_dataset(self, engine, capsys):
        engine.dataset_path = "StormData.csv.bz2"
        handle(engine, "stats")
        assert "Dataset: StormData.csv.bz2" in capsys.readouterr().out

    def test_health(self, engine, capsys):
        handle(engine, "health")
        out = capsys.readouterr().out
        assert "by fatalities" in out
        assert "by injuries" in out
        assert out.index("TORNADO") < out.index("FLOOD")

    def test_economic_scaled_to_millions(self, engine, capsys):
        handle(engine, "economic")
        out = capsys.readouterr().out
        assert "(million US$)" in out
        assert "2.50" in out
        assert "5.00" in out

    def test_top(self, engine, capsys):
        handle(engine, "top 1 deaths")
        out = capsys.readouterr().out
        assert "Top 1 event types by fatalities" in out
        assert "FLOOD" not in out

    def test_top_unknown_measure(self, engine):
        with pytest.raises(ValueError):
            handle(engine, "top 3 affected")

    def test_codes(self, engine, capsys):
        handle(engine, "codes crop")
        out = capsys.readouterr().out
        assert "'M'" in out
        assert "''" in out

    def test_export_json(self, engine, tmp_path, capsys):
        path = tmp_path / "out.json"
        handle(engine, f'export json "{path}"')
        assert "Exported JSON" in capsys.readouterr().out
        assert json.loads(path.read_text(encoding="utf-8"))["crop"][0]["event_type"] == "FLOOD"

    def test_unknown_command(self, engine, capsys):
        handle(engine, "frobnicate")
        assert "Unknown command" in capsys.readouterr().out


class TestMain:
    """Tests for main()."""

    def test_parser_defaults(self):
        args = build_parser().parse_args(["--csv", "x.csv"])
        assert args.top == 10
        assert args.on_unmapped == "raise"
        assert not args.summary

    def test_summary_mode(self, storm_csv, capsys):
        assert main(["--csv", str(storm_csv), "--summary", "--top", "2"]) == 0
        out = capsys.readouterr().out
        assert "Top 2 event types by fatalities" in out
        assert "Top 2 event types by crop damage (million US$)" in out

    def test_repl_reports_errors_and_continues(self, storm_csv, monkeypatch, capsys):
        lines = iter(["top 1 nonsense", "top 1 injuries", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        assert main(["--csv", str(storm_csv)]) == 0
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "Top 1 event types by injuries" in out
