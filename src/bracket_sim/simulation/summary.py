"""Repeated bracket runs aggregated into advancement probabilities.

Each run is a full :func:`~bracket_sim.simulation.bracket.simulate_bracket`
call on a shared random stream.  For every entrant the summary records the
fraction of runs in which it won a game in each round; ``round_6`` is the
title probability.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
import pandas as pd  # type: ignore[import-untyped]

from bracket_sim.ingest.schema import Entrant
from bracket_sim.simulation.bracket import CHAMPIONSHIP_ROUND, simulate_bracket
from bracket_sim.simulation.engine import RandomSource, _resolve_rng
from bracket_sim.simulation.upset import DEFAULT_UPSET_CONFIG, UpsetConfig

logger = logging.getLogger(__name__)

#: Run count at or above which progress is logged at INFO.
_PROGRESS_THRESHOLD: int = 1_000

ROUND_COLUMNS: tuple[str, ...] = tuple(f"round_{r}" for r in range(1, CHAMPIONSHIP_ROUND + 1))


@dataclass(frozen=True)
class TournamentSummary:
    """Aggregate of *n_runs* simulated tournaments.

    Attributes:
        n_runs: Number of bracket runs.
        advancement: One row per entrant with ``name``, ``region``,
            ``seed`` and ``round_1`` … ``round_6`` win fractions, sorted by
            title probability (descending) then seed.
        upset_rate: Fraction of all games won by the higher seed number.
    """

    n_runs: int
    advancement: pd.DataFrame
    upset_rate: float

    def title_odds(self, top: int | None = None) -> pd.DataFrame:
        """Return ``name``, ``region``, ``seed`` and title probability.

        Args:
            top: Keep only the first *top* rows; all rows when ``None``.
        """
        title = self.advancement[["name", "region", "seed", ROUND_COLUMNS[-1]]]
        title = title.rename(columns={ROUND_COLUMNS[-1]: "title"})
        return title if top is None else title.head(top)


def simulate_tournaments(
    roster: Iterable[Entrant],
    n_runs: int,
    rng: RandomSource | None = None,
    config: UpsetConfig = DEFAULT_UPSET_CONFIG,
) -> TournamentSummary:
    """Simulate *n_runs* brackets and tabulate round-by-round survival.

    Args:
        roster: Complete four-region roster.
        n_runs: Number of tournaments to simulate (>= 1).
        rng: Random source shared across all runs.
        config: Upset model parameters.

    Returns:
        :class:`TournamentSummary`.

    Raises:
        ValueError: If ``n_runs < 1``.
        IncompleteBracketError: If the roster cannot produce four
            region champions.
    """
    if n_runs < 1:
        msg = f"n_runs must be >= 1, got {n_runs}"
        raise ValueError(msg)

    entrants = list(roster)
    rng = _resolve_rng(rng)
    position = {(e.region, e.seed): i for i, e in enumerate(entrants)}
    wins: npt.NDArray[np.int64] = np.zeros((len(entrants), CHAMPIONSHIP_ROUND), dtype=np.int64)
    upsets = 0
    games = 0

    if n_runs >= _PROGRESS_THRESHOLD:
        logger.info("Simulating %d tournaments", n_runs)

    for _ in range(n_runs):
        run = simulate_bracket(entrants, rng, config)
        for game in run.games:
            wins[position[(game.winner.region, game.winner.seed)], game.round_number - 1] += 1
            upsets += game.is_upset
            games += 1

    advancement = pd.DataFrame(wins / n_runs, columns=list(ROUND_COLUMNS))
    advancement.insert(0, "name", [e.name for e in entrants])
    advancement.insert(1, "region", [e.region for e in entrants])
    advancement.insert(2, "seed", [e.seed for e in entrants])
    advancement = advancement.sort_values(
        [ROUND_COLUMNS[-1], "seed"],
        ascending=[False, True],
        kind="stable",
    ).reset_index(drop=True)

    if n_runs >= _PROGRESS_THRESHOLD:
        logger.info("Simulation complete: %d tournaments, %d games", n_runs, games)

    return TournamentSummary(n_runs=n_runs, advancement=advancement, upset_rate=upsets / games)
