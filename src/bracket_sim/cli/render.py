"""Rich rendering of bracket runs, summaries and the upset table."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from bracket_sim.simulation.bracket import SEMIFINAL_PAIRINGS, BracketRun, FinalStageResult
from bracket_sim.simulation.engine import REGION_ROUNDS, ROUND_NAMES, GameResult, RegionResult
from bracket_sim.simulation.summary import TournamentSummary
from bracket_sim.simulation.upset import UpsetConfig, format_pairing


def _game_line(game: GameResult) -> str:
    marker = " [magenta](upset)[/magenta]" if game.is_upset else ""
    return (
        f"[bold]{game.winner.name}[/bold] ({game.winner.seed}) def. "
        f"[dim]{game.loser.name}[/dim] ({game.loser.seed}){marker}"
    )


def render_region(console: Console, result: RegionResult) -> None:
    """Print one table per region with a column per round."""
    table = Table(title=f"{result.region} Region")
    rounds = [result.games_in_round(r) for r in range(1, REGION_ROUNDS + 1)]
    for round_number in range(1, REGION_ROUNDS + 1):
        table.add_column(ROUND_NAMES[round_number], style="cyan")
    depth = max((len(games) for games in rounds), default=0)
    for row in range(depth):
        table.add_row(*(_game_line(games[row]) if row < len(games) else "" for games in rounds))
    console.print(table)


def render_final_stage(console: Console, final_stage: FinalStageResult) -> None:
    """Print the semifinals, the title game and the champion."""
    table = Table(title=ROUND_NAMES[5])
    table.add_column("Game", style="cyan")
    table.add_column("Result", style="green")
    for idx, ((left, right), game) in enumerate(zip(SEMIFINAL_PAIRINGS, final_stage.semifinals, strict=True), start=1):
        table.add_row(f"Semifinal {idx}: {left} vs {right}", _game_line(game))
    table.add_row(ROUND_NAMES[6], _game_line(final_stage.championship))
    console.print(table)
    console.print(f"\nNational Champion: [bold blue]{final_stage.champion}[/bold blue]")


def render_bracket_run(console: Console, run: BracketRun) -> None:
    """Print every region followed by the final stage."""
    for result in run.regions.values():
        render_region(console, result)
    render_final_stage(console, run.final_stage)


def render_summary(console: Console, summary: TournamentSummary, top: int) -> None:
    """Print the *top* title contenders of a multi-run summary."""
    table = Table(title=f"Title odds over {summary.n_runs:,} tournaments")
    table.add_column("Entrant", style="cyan")
    table.add_column("Region")
    table.add_column("Seed", justify="right")
    table.add_column("Final Four", justify="right")
    table.add_column("Title", justify="right", style="green")
    top_rows = summary.advancement.head(top)
    for name, region, seed, ff, title in top_rows[["name", "region", "seed", "round_4", "round_6"]].itertuples(
        index=False
    ):
        table.add_row(str(name), str(region), str(seed), f"{ff:.1%}", f"{title:.1%}")
    console.print(table)
    console.print(f"Upset rate: {summary.upset_rate:.1%} of games won by the higher seed number")


def render_upset_table(console: Console, config: UpsetConfig) -> None:
    """Print the configured upset probabilities and fallback."""
    table = Table(title="Upset probabilities")
    table.add_column("Pairing", style="cyan")
    table.add_column("P(weaker seed wins)", justify="right", style="green")
    for (stronger, weaker), prob in sorted(config.upset_table.items()):
        table.add_row(format_pairing(stronger, weaker), f"{prob:.2f}")
    table.add_row("any other", f"{config.default_upset_probability:.2f}")
    console.print(table)
