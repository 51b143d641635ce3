"""Roster ingestion module."""

from __future__ import annotations

from bracket_sim.ingest.roster import REGIONS, build_seed_roster, load_roster, missing_seeds
from bracket_sim.ingest.schema import Entrant

__all__ = [
    "REGIONS",
    "Entrant",
    "build_seed_roster",
    "load_roster",
    "missing_seeds",
]
