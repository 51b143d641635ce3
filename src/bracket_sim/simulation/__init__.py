"""Tournament simulation engine."""

from __future__ import annotations

from bracket_sim.simulation.bracket import (
    SEMIFINAL_PAIRINGS,
    BracketRun,
    FinalStageResult,
    IncompleteBracketError,
    simulate_bracket,
    simulate_final_stage,
)
from bracket_sim.simulation.engine import (
    FIRST_ROUND_PAIRINGS,
    ROUND_NAMES,
    GameResult,
    Matchup,
    RandomSource,
    RegionResult,
    generate_first_round,
    play_matchup,
    simulate_game,
    simulate_region,
)
from bracket_sim.simulation.summary import TournamentSummary, simulate_tournaments
from bracket_sim.simulation.upset import (
    DEFAULT_UPSET_CONFIG,
    UpsetConfig,
    load_upset_config,
    upset_probability,
)

__all__ = [
    "DEFAULT_UPSET_CONFIG",
    "FIRST_ROUND_PAIRINGS",
    "ROUND_NAMES",
    "SEMIFINAL_PAIRINGS",
    "BracketRun",
    "FinalStageResult",
    "GameResult",
    "IncompleteBracketError",
    "Matchup",
    "RandomSource",
    "RegionResult",
    "TournamentSummary",
    "UpsetConfig",
    "generate_first_round",
    "load_upset_config",
    "play_matchup",
    "simulate_bracket",
    "simulate_final_stage",
    "simulate_game",
    "simulate_region",
    "simulate_tournaments",
    "upset_probability",
]
