"""Final Four orchestration and full bracket runs.

The four region champions meet in fixed semifinals, East vs Midwest and
South vs West, and the semifinal winners play for the title.  A
:class:`BracketRun` bundles the four region logs with the final stage; all
63 games of a complete field are drawn from one random stream in the order
East, West, South, Midwest, semifinal 1, semifinal 2, championship.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import pandas as pd  # type: ignore[import-untyped]

from bracket_sim.ingest.roster import REGIONS
from bracket_sim.ingest.schema import Entrant
from bracket_sim.simulation.engine import (
    GameResult,
    Matchup,
    RandomSource,
    RegionResult,
    _resolve_rng,
    play_matchup,
    simulate_region,
)
from bracket_sim.simulation.upset import DEFAULT_UPSET_CONFIG, UpsetConfig

logger = logging.getLogger(__name__)

#: Region pairs meeting in the semifinals, in the order they are played.
SEMIFINAL_PAIRINGS: tuple[tuple[str, str], ...] = (
    ("East", "Midwest"),
    ("South", "West"),
)

SEMIFINAL_ROUND: int = 5
CHAMPIONSHIP_ROUND: int = 6
FINAL_STAGE_LABEL: str = "Final Four"

RESULT_COLUMNS: tuple[str, ...] = (
    "region",
    "round",
    "winner",
    "winner_seed",
    "winner_region",
    "loser",
    "loser_seed",
    "loser_region",
    "upset",
)


class IncompleteBracketError(ValueError):
    """Raised when a region produces no champion for the Final Four."""


@dataclass(frozen=True)
class FinalStageResult:
    """Semifinals (round 5) and championship (round 6)."""

    semifinals: tuple[GameResult, GameResult]
    championship: GameResult

    @property
    def champion(self) -> Entrant:
        """Tournament champion."""
        return self.championship.winner

    @property
    def games(self) -> tuple[GameResult, ...]:
        """The three final-stage results in the order they were played."""
        return (*self.semifinals, self.championship)


@dataclass(frozen=True)
class BracketRun:
    """One complete simulated tournament.

    Attributes:
        regions: Region label → :class:`RegionResult`, in simulation order.
        final_stage: Semifinals and championship.
    """

    regions: dict[str, RegionResult]
    final_stage: FinalStageResult

    @property
    def champion(self) -> Entrant:
        """Overall champion (the championship winner)."""
        return self.final_stage.champion

    @property
    def games(self) -> tuple[GameResult, ...]:
        """Every result of the run in decision order."""
        region_games = tuple(g for result in self.regions.values() for g in result.games)
        return region_games + self.final_stage.games

    def to_frame(self) -> pd.DataFrame:
        """Return one row per game with the columns in ``RESULT_COLUMNS``."""
        rows = [
            (
                g.region,
                g.round_number,
                g.winner.name,
                g.winner.seed,
                g.winner.region,
                g.loser.name,
                g.loser.seed,
                g.loser.region,
                g.is_upset,
            )
            for g in self.games
        ]
        return pd.DataFrame(rows, columns=list(RESULT_COLUMNS))


def simulate_final_stage(
    champions: Mapping[str, Entrant],
    rng: RandomSource | None = None,
    config: UpsetConfig = DEFAULT_UPSET_CONFIG,
) -> FinalStageResult:
    """Play the semifinals and the championship.

    Args:
        champions: Region label → region champion; must contain East, West,
            South and Midwest.
        rng: Random source for the three games.
        config: Upset model parameters.

    Returns:
        :class:`FinalStageResult`.

    Raises:
        ValueError: If any of the four regions is missing from *champions*.
    """
    missing = [region for pair in SEMIFINAL_PAIRINGS for region in pair if region not in champions]
    if missing:
        msg = f"Final Four requires champions for {list(REGIONS)}; missing {missing}"
        raise ValueError(msg)

    rng = _resolve_rng(rng)
    semi_1, semi_2 = (
        play_matchup(
            Matchup(champions[left], champions[right], round_number=SEMIFINAL_ROUND),
            rng,
            config,
            region=FINAL_STAGE_LABEL,
        )
        for left, right in SEMIFINAL_PAIRINGS
    )
    title_game = play_matchup(
        Matchup(semi_1.winner, semi_2.winner, round_number=CHAMPIONSHIP_ROUND),
        rng,
        config,
        region=FINAL_STAGE_LABEL,
    )
    logger.info("Champion: %s", title_game.winner)
    return FinalStageResult(semifinals=(semi_1, semi_2), championship=title_game)


def simulate_bracket(
    roster: Iterable[Entrant],
    rng: RandomSource | None = None,
    config: UpsetConfig = DEFAULT_UPSET_CONFIG,
) -> BracketRun:
    """Simulate all four regions and the final stage on one random stream.

    Raises:
        IncompleteBracketError: If a region yields no champion (no
            first-round game could be formed for it).
    """
    entrants = list(roster)
    rng = _resolve_rng(rng)

    regions = {region: simulate_region(entrants, region, rng, config) for region in REGIONS}

    empty = [region for region, result in regions.items() if result.champion is None]
    if empty:
        msg = f"No champion for region(s) {empty}; check the roster"
        raise IncompleteBracketError(msg)

    champions = {region: result.champion for region, result in regions.items() if result.champion is not None}
    final_stage = simulate_final_stage(champions, rng, config)
    return BracketRun(regions=regions, final_stage=final_stage)
