"""Typer CLI application for bracket simulation."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandera.errors
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from bracket_sim.cli.render import render_bracket_run, render_summary, render_upset_table
from bracket_sim.ingest import REGIONS, Entrant, build_seed_roster, load_roster, missing_seeds
from bracket_sim.simulation import (
    DEFAULT_UPSET_CONFIG,
    IncompleteBracketError,
    UpsetConfig,
    load_upset_config,
    simulate_bracket,
    simulate_tournaments,
)
from bracket_sim.utils.logger import configure_logging, get_logger

app = typer.Typer(help="Single-elimination bracket simulator")
console = Console()
log = get_logger("cli")


@app.callback()
def _callback() -> None:
    """bracket-sim: simulate a 64-team tournament bracket."""


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_config(config_path: Path | None) -> UpsetConfig:
    if config_path is None:
        return DEFAULT_UPSET_CONFIG
    if not config_path.exists():
        raise _fail(f"Config file not found: {config_path}")
    try:
        return load_upset_config(config_path)
    except ValidationError as exc:
        raise _fail(f"Invalid upset config {config_path}: {exc}") from exc


def _load_roster(roster_path: Path | None) -> list[Entrant]:
    if roster_path is None:
        return build_seed_roster()
    if not roster_path.exists():
        raise _fail(f"Roster file not found: {roster_path}")
    try:
        roster = load_roster(roster_path)
    except (pandera.errors.SchemaError, ValidationError, ValueError) as exc:
        raise _fail(f"Invalid roster {roster_path}: {exc}") from exc

    for region in REGIONS:
        gaps = missing_seeds(roster, region)
        if gaps:
            console.print(f"[yellow]Warning: {region} is missing seed(s) {gaps}[/yellow]")
    return roster


@app.command()
def simulate(  # noqa: PLR0913
    roster_path: Path | None = typer.Option(None, "--roster", help="CSV roster (name, seed, region)"),
    config_path: Path | None = typer.Option(None, "--config", help="JSON upset-model override"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for a reproducible run"),
    runs: int = typer.Option(1, "--runs", min=1, help="Number of tournaments to simulate"),
    top: int = typer.Option(10, "--top", min=1, help="Contenders listed when --runs > 1"),
    log_level: str | None = typer.Option(None, "--log-level", help="QUIET | NORMAL | VERBOSE | DEBUG"),
) -> None:
    """Simulate the tournament once (full bracket) or many times (title odds)."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise _fail(str(exc)) from exc

    config = _load_config(config_path)
    roster = _load_roster(roster_path)
    rng = np.random.default_rng(seed)
    log.debug("Simulating %d run(s) with seed=%s", runs, seed)

    try:
        if runs == 1:
            render_bracket_run(console, simulate_bracket(roster, rng, config))
        else:
            render_summary(console, simulate_tournaments(roster, runs, rng, config), top)
    except IncompleteBracketError as exc:
        raise _fail(str(exc)) from exc


@app.command()
def upsets(
    config_path: Path | None = typer.Option(None, "--config", help="JSON upset-model override"),
) -> None:
    """Show the upset probabilities used by the simulator."""
    render_upset_table(console, _load_config(config_path))


if __name__ == "__main__":
    app()
