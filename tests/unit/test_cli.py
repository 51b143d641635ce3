"""Tests for the Typer CLI (``bracket-sim simulate`` / ``bracket-sim upsets``)."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from bracket_sim.cli.main import app
from bracket_sim.ingest import build_seed_roster

runner = CliRunner()


def _chalk_config(tmp_path: Path) -> Path:
    """Config under which no upset can ever happen."""
    path = tmp_path / "chalk.json"
    path.write_text(json.dumps({"upset_table": {}, "default_upset_probability": 0.0}))
    return path


class TestSimulateCommand:
    """Tests for ``simulate``."""

    def test_single_run(self) -> None:
        result = runner.invoke(app, ["simulate", "--seed", "7"])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        for region in ("East", "West", "South", "Midwest"):
            assert f"{region} Region" in result.output
        assert "Final Four" in result.output
        assert "National Champion:" in result.output

    def test_seeded_runs_repeat(self) -> None:
        args = ["simulate", "--seed", "123", "--log-level", "QUIET"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == second.exit_code == 0
        assert first.output == second.output

    def test_chalk_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["simulate", "--config", str(_chalk_config(tmp_path))])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "National Champion: West 1 (1)" in result.output
        assert "(upset)" not in result.output

    def test_roster_file(self, roster_csv: Path) -> None:
        result = runner.invoke(app, ["simulate", "--roster", str(roster_csv), "--seed", "1"])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "National Champion:" in result.output

    def test_many_runs(self) -> None:
        result = runner.invoke(app, ["simulate", "--runs", "40", "--top", "3", "--seed", "2"])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "Title odds over 40 tournaments" in result.output
        assert "Upset rate:" in result.output

    def test_runs_must_be_positive(self) -> None:
        result = runner.invoke(app, ["simulate", "--runs", "0"])
        assert result.exit_code != 0

    def test_missing_roster_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["simulate", "--roster", str(tmp_path / "absent.csv")])
        assert result.exit_code == 1
        assert "Roster file not found" in result.output

    def test_invalid_roster(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("name,seed,region\nConnecticut,42,East\n")
        result = runner.invoke(app, ["simulate", "--roster", str(path)])
        assert result.exit_code == 1
        assert "Invalid roster" in result.output

    def test_incomplete_roster(self, tmp_path: Path) -> None:
        path = tmp_path / "three_regions.csv"
        lines = ["name,seed,region"]
        lines.extend(f"{e.name},{e.seed},{e.region}" for e in build_seed_roster() if e.region != "Midwest")
        path.write_text("\n".join(lines) + "\n")
        result = runner.invoke(app, ["simulate", "--roster", str(path)])
        assert result.exit_code == 1
        assert "Warning: Midwest is missing seed(s)" in result.output
        assert "No champion for region(s)" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["simulate", "--config", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"default_upset_probability": 2.0}))
        result = runner.invoke(app, ["simulate", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid upset config" in result.output

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(app, ["simulate", "--log-level", "LOUD"])
        assert result.exit_code == 1
        assert "Unknown log level" in result.output


class TestUpsetsCommand:
    """Tests for ``upsets``."""

    def test_default_table(self) -> None:
        result = runner.invoke(app, ["upsets"])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "5-12" in result.output
        assert "0.35" in result.output
        assert "any other" in result.output
        assert "0.30" in result.output

    def test_override(self, tmp_path: Path) -> None:
        path = tmp_path / "upsets.json"
        path.write_text(json.dumps({"upset_table": {"8-9": 0.45}, "default_upset_probability": 0.2}))
        result = runner.invoke(app, ["upsets", "--config", str(path)])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "8-9" in result.output
        assert "0.45" in result.output
        assert "1-16" not in result.output
