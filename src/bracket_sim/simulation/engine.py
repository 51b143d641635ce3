"""Game and region simulation.

A game is decided by a single draw from the random source.  The upset
model supplies the nominal probability that the weaker seed wins; the draw
is stretched by ``1 + seed_gap / 32`` so lopsided pairings land on the
favourite more often than the nominal rate suggests while near-even
pairings stay close to a coin flip.

A region is simulated round by round: every matchup of the current round
is played in bracket-position order, winners are collected, then adjacent
winners are paired for the next round.  The random stream is therefore
consumed strictly in the order games appear in the result log, which makes
a seeded run reproducible draw for draw.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from bracket_sim.ingest.schema import Entrant
from bracket_sim.simulation.upset import DEFAULT_UPSET_CONFIG, UpsetConfig, upset_probability
from bracket_sim.utils.logger import VERBOSE

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: First-round seed pairings in bracket-position order.  Adjacent pairs
#: meet in round 2 (1/16 vs 8/9, 5/12 vs 4/13, 6/11 vs 3/14, 7/10 vs 2/15).
FIRST_ROUND_PAIRINGS: tuple[tuple[int, int], ...] = (
    (1, 16),
    (8, 9),
    (5, 12),
    (4, 13),
    (6, 11),
    (3, 14),
    (7, 10),
    (2, 15),
)

#: Divisor of the seed gap in the draw amplification factor.
SEED_GAP_SCALE: float = 32.0

#: Rounds played inside a complete 16-entrant region.
REGION_ROUNDS: int = 4

#: Games played inside a complete 16-entrant region (8 + 4 + 2 + 1).
REGION_GAMES: int = 15

ROUND_NAMES: dict[int, str] = {
    1: "First Round",
    2: "Second Round",
    3: "Sweet 16",
    4: "Elite 8",
    5: "Final Four",
    6: "Championship",
}

# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniform floats in ``[0, 1)``.

    ``numpy.random.Generator`` and ``random.Random`` both qualify.
    """

    def random(self) -> float:
        """Return the next uniform float in ``[0, 1)``."""
        ...


def _resolve_rng(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else np.random.default_rng()


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Matchup:
    """Two entrants contesting a game in *round_number*."""

    entrant_a: Entrant
    entrant_b: Entrant
    round_number: int


@dataclass(frozen=True)
class GameResult:
    """Outcome of one simulated game.

    Attributes:
        winner: Entrant that advanced.
        loser: Entrant that was eliminated.
        round_number: 1–4 inside a region, 5 for semifinals, 6 for the
            championship.
        region: Where the game was played (a region label, or
            ``"Final Four"`` for rounds 5 and 6).
    """

    winner: Entrant
    loser: Entrant
    round_number: int
    region: str = ""

    @property
    def is_upset(self) -> bool:
        """``True`` when the numerically higher seed won."""
        return self.winner.seed > self.loser.seed

    def __str__(self) -> str:
        return f"{self.winner} def. {self.loser}"


@dataclass(frozen=True)
class RegionResult:
    """Ordered result log of one region.

    ``games`` is round-major, bracket-position order within a round, which
    is also the order in which the games were decided.
    """

    region: str
    games: tuple[GameResult, ...]

    @property
    def champion(self) -> Entrant | None:
        """Winner of the last game, or ``None`` when nothing was played."""
        return self.games[-1].winner if self.games else None

    def games_in_round(self, round_number: int) -> tuple[GameResult, ...]:
        """Return the results of *round_number* in bracket-position order."""
        return tuple(g for g in self.games if g.round_number == round_number)


# ---------------------------------------------------------------------------
# Game simulation
# ---------------------------------------------------------------------------


def simulate_game(
    entrant_a: Entrant,
    entrant_b: Entrant,
    rng: RandomSource | None = None,
    config: UpsetConfig = DEFAULT_UPSET_CONFIG,
) -> Entrant:
    """Decide a single game and return the winner.

    Consumes exactly one draw from *rng*.  On equal seeds *entrant_b* is
    treated as the favourite.

    Args:
        entrant_a: First entrant.
        entrant_b: Second entrant.
        rng: Random source; a fresh ``numpy.random.default_rng()`` when
            ``None``.
        config: Upset model parameters.

    Returns:
        The winning entrant (one of the two arguments, by identity).
    """
    if entrant_a.seed < entrant_b.seed:
        favourite, underdog = entrant_a, entrant_b
    else:
        favourite, underdog = entrant_b, entrant_a

    p_upset = upset_probability(favourite.seed, underdog.seed, config)
    amplification = 1.0 + abs(entrant_a.seed - entrant_b.seed) / SEED_GAP_SCALE
    draw = float(_resolve_rng(rng).random()) * amplification

    return underdog if draw < p_upset else favourite


def play_matchup(
    matchup: Matchup,
    rng: RandomSource | None = None,
    config: UpsetConfig = DEFAULT_UPSET_CONFIG,
    region: str = "",
) -> GameResult:
    """Simulate *matchup* and package the outcome as a :class:`GameResult`."""
    winner = simulate_game(matchup.entrant_a, matchup.entrant_b, rng, config)
    loser = matchup.entrant_b if winner is matchup.entrant_a else matchup.entrant_a
    result = GameResult(winner=winner, loser=loser, round_number=matchup.round_number, region=region)
    logger.debug("%s round %d: %s", region or "-", matchup.round_number, result)
    return result


# ---------------------------------------------------------------------------
# Region simulation
# ---------------------------------------------------------------------------


def generate_first_round(roster: Iterable[Entrant], region: str) -> list[Matchup]:
    """Build the round-1 matchups of *region* in bracket-position order.

    A pairing is skipped (with a warning) when either seed is absent from
    the roster; an unknown *region* therefore yields an empty list.
    """
    by_seed = {e.seed: e for e in roster if e.region == region}
    if not by_seed:
        logger.warning("No entrants found for region %r", region)
        return []

    matchups: list[Matchup] = []
    for seed_a, seed_b in FIRST_ROUND_PAIRINGS:
        entrant_a = by_seed.get(seed_a)
        entrant_b = by_seed.get(seed_b)
        if entrant_a is None or entrant_b is None:
            logger.warning("Region %s: skipping %d vs %d, seed missing from roster", region, seed_a, seed_b)
            continue
        matchups.append(Matchup(entrant_a, entrant_b, round_number=1))
    return matchups


def _pair_survivors(survivors: Sequence[Entrant], round_number: int) -> tuple[list[Matchup], list[Entrant]]:
    """Pair survivors 0-1, 2-3, …; an odd one out advances on a bye."""
    matchups = [
        Matchup(survivors[i], survivors[i + 1], round_number=round_number) for i in range(0, len(survivors) - 1, 2)
    ]
    byes = [survivors[-1]] if len(survivors) % 2 else []
    return matchups, byes


def simulate_region(
    roster: Iterable[Entrant],
    region: str,
    rng: RandomSource | None = None,
    config: UpsetConfig = DEFAULT_UPSET_CONFIG,
) -> RegionResult:
    """Play *region* from round 1 down to a single champion.

    Each round plays all of its matchups in order, appending each result to
    the log as it is decided, then pairs adjacent winners for the next
    round.  A complete region produces 15 games over rounds 1–4.

    Args:
        roster: All entrants; only those labelled *region* are used.
        region: Region label.
        rng: Random source shared by every game of the region.
        config: Upset model parameters.

    Returns:
        :class:`RegionResult`; empty for an unknown region.
    """
    rng = _resolve_rng(rng)
    games: list[GameResult] = []
    matchups = generate_first_round(roster, region)
    byes: list[Entrant] = []
    round_number = 1

    while matchups:
        survivors: list[Entrant] = []
        for matchup in matchups:
            result = play_matchup(matchup, rng, config, region=region)
            games.append(result)
            survivors.append(result.winner)
        survivors.extend(byes)

        if len(survivors) == 1:
            break
        round_number += 1
        matchups, byes = _pair_survivors(survivors, round_number)

    outcome = RegionResult(region=region, games=tuple(games))
    if outcome.champion is not None:
        logger.log(VERBOSE, "%s region champion: %s", region, outcome.champion)
    return outcome
