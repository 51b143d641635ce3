"""Seed-based upset model and its configuration.

The model answers one question: given two seed lines, how likely is the
weaker (numerically higher) seed to win?  First-round pairings use
historical upset rates; every other pairing falls back to a flat default.

Both the table and the default live in an :class:`UpsetConfig` so callers
and tests can inject their own values instead of patching module globals.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from bracket_sim.ingest.schema import MAX_SEED, MIN_SEED

#: Historical rate at which the weaker seed wins, keyed (stronger, weaker).
HISTORICAL_UPSET_RATES: dict[tuple[int, int], float] = {
    (1, 16): 0.01,
    (2, 15): 0.06,
    (3, 14): 0.13,
    (4, 13): 0.21,
    (5, 12): 0.35,
    (6, 11): 0.37,
    (7, 10): 0.40,
    (8, 9): 0.50,
}

#: Probability used for any pairing missing from the table.
DEFAULT_UPSET_PROBABILITY: float = 0.30


def format_pairing(stronger: int, weaker: int) -> str:
    """Return the canonical ``"stronger-weaker"`` text key (e.g. ``"5-12"``)."""
    return f"{stronger}-{weaker}"


def parse_pairing(key: str) -> tuple[int, int]:
    """Parse a ``"5-12"`` style key into ``(5, 12)``.

    Raises:
        ValueError: If *key* is not two integers joined by ``-``.
    """
    parts = key.split("-")
    if len(parts) != 2:
        msg = f"Invalid seed pairing {key!r}; expected '<stronger>-<weaker>'"
        raise ValueError(msg)
    return int(parts[0]), int(parts[1])


class UpsetConfig(BaseModel):
    """Tunable parameters of the upset model.

    Attributes:
        upset_table: Upset probability keyed by ``(stronger, weaker)`` seed.
            Accepts ``"5-12"`` string keys on input (the JSON form).
        default_upset_probability: Probability for pairings absent from
            ``upset_table``.
    """

    model_config = ConfigDict(frozen=True)

    upset_table: dict[tuple[int, int], float] = Field(default_factory=lambda: dict(HISTORICAL_UPSET_RATES))
    default_upset_probability: float = Field(default=DEFAULT_UPSET_PROBABILITY, ge=0.0, le=1.0)

    @field_validator("upset_table", mode="before")
    @classmethod
    def _parse_text_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {parse_pairing(k) if isinstance(k, str) else k: v for k, v in value.items()}
        return value

    @field_serializer("upset_table", when_used="json")
    def _dump_text_keys(self, table: dict[tuple[int, int], float]) -> dict[str, float]:
        return {format_pairing(s, w): p for (s, w), p in table.items()}

    @model_validator(mode="after")
    def _check_table(self) -> UpsetConfig:
        for (stronger, weaker), prob in self.upset_table.items():
            if not (MIN_SEED <= stronger < weaker <= MAX_SEED):
                msg = (
                    f"Invalid seed pairing {format_pairing(stronger, weaker)}: "
                    f"need {MIN_SEED} <= stronger < weaker <= {MAX_SEED}"
                )
                raise ValueError(msg)
            if not 0.0 <= prob <= 1.0:
                msg = f"Upset probability for {format_pairing(stronger, weaker)} must be in [0, 1], got {prob}"
                raise ValueError(msg)
        return self


DEFAULT_UPSET_CONFIG: UpsetConfig = UpsetConfig()


def load_upset_config(path: Path) -> UpsetConfig:
    """Read an :class:`UpsetConfig` from a JSON file.

    Omitted fields keep their historical defaults, so
    ``{"default_upset_probability": 0.25}`` is a valid file.  A supplied
    ``upset_table`` replaces the historical table entirely; pairings it
    leaves out fall back to ``default_upset_probability``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the content is invalid.
    """
    return UpsetConfig.model_validate_json(path.read_text())


def upset_probability(seed_a: int, seed_b: int, config: UpsetConfig = DEFAULT_UPSET_CONFIG) -> float:
    """Return P(weaker seed beats stronger seed).

    Argument order does not matter: ``upset_probability(12, 5)`` equals
    ``upset_probability(5, 12)``.

    Example:
        >>> upset_probability(5, 12)
        0.35
        >>> upset_probability(1, 8)
        0.3
    """
    stronger, weaker = min(seed_a, seed_b), max(seed_a, seed_b)
    return config.upset_table.get((stronger, weaker), config.default_upset_probability)
