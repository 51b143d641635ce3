"""Roster construction and CSV ingestion.

A roster is a flat ``list[Entrant]``; each region is expected to hold seeds
1–16 exactly once.  Gaps are tolerated here and reported by
:func:`missing_seeds`; the simulation engine skips any first-round pairing
whose seed is absent.  Duplicate ``(region, seed)`` pairs are rejected at
load time because the engine could not tell the two entrants apart.

CSV layout (extra columns are ignored)::

    name,seed,region
    Connecticut,1,East
    Stetson,16,East
    ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import pandas as pd  # type: ignore[import-untyped]

from bracket_sim.ingest.schema import MAX_SEED, MIN_SEED, Entrant
from bracket_sim.utils.assertions import assert_columns, assert_dtypes, assert_no_nulls, assert_value_range

logger = logging.getLogger(__name__)

#: Region labels in the order their results are reported.
REGIONS: tuple[str, ...] = ("East", "West", "South", "Midwest")

ROSTER_COLUMNS: tuple[str, ...] = ("name", "seed", "region")


def build_seed_roster(
    regions: Sequence[str] = REGIONS,
    name_format: str = "{region} {seed}",
) -> list[Entrant]:
    """Generate a complete placeholder roster.

    Args:
        regions: Region labels to populate with seeds 1–16.
        name_format: ``str.format`` template receiving ``region`` and
            ``seed``; ``"Seed{seed}"`` yields ``"Seed1"`` … ``"Seed16"``.

    Returns:
        ``16 * len(regions)`` entrants, region-major then seed order.
    """
    return [
        Entrant(name=name_format.format(region=region, seed=seed), seed=seed, region=region)
        for region in regions
        for seed in range(MIN_SEED, MAX_SEED + 1)
    ]


def load_roster(path: Path) -> list[Entrant]:
    """Read a roster CSV into validated entrants.

    Args:
        path: CSV file with ``name``, ``seed`` and ``region`` columns.

    Returns:
        Entrants in file order.

    Raises:
        pandera.errors.SchemaError: If a required column is missing, holds
            nulls, or a seed is not an integer in 1–16.
        ValueError: If a ``(region, seed)`` pair appears more than once.
    """
    df = pd.read_csv(path)
    assert_columns(df, ROSTER_COLUMNS)
    assert_no_nulls(df, ROSTER_COLUMNS)
    assert_dtypes(df, {"seed": "int64"})
    assert_value_range(df, "seed", min_val=MIN_SEED, max_val=MAX_SEED)

    dupes = df[df.duplicated(subset=["region", "seed"], keep=False)]
    if not dupes.empty:
        pairs = sorted({(str(r), int(s)) for r, s in dupes[["region", "seed"]].itertuples(index=False)})
        msg = f"Duplicate (region, seed) pairs in {path}: {pairs}"
        raise ValueError(msg)

    roster = [
        Entrant(name=str(name), seed=seed, region=str(region))
        for name, seed, region in df[list(ROSTER_COLUMNS)].itertuples(index=False)
    ]
    logger.info("Loaded %d entrants from %s", len(roster), path)
    return roster


def missing_seeds(roster: Iterable[Entrant], region: str) -> list[int]:
    """Return the seeds 1–16 absent from *region* (sorted)."""
    present = {e.seed for e in roster if e.region == region}
    return [seed for seed in range(MIN_SEED, MAX_SEED + 1) if seed not in present]
