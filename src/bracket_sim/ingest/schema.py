"""Pydantic v2 schema for tournament entrants.

An :class:`Entrant` is the only roster-level entity the simulation engine
consumes.  Instances are frozen: once a roster is built, the engine passes
the same objects around and reports winners and losers by identity.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MIN_SEED: int = 1
MAX_SEED: int = 16


class Entrant(BaseModel):
    """A seeded team in one region of the bracket.

    Attributes:
        name: Display name (e.g. ``"Houston"``).
        seed: Seed line 1–16; lower is stronger.
        region: Region label (e.g. ``"East"``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    seed: int = Field(..., ge=MIN_SEED, le=MAX_SEED)
    region: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"{self.name} ({self.seed})"
