"""Shared pytest fixtures for the bracket_sim test suite.

Fixtures defined here are available to all tests without explicit imports.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from bracket_sim.ingest import Entrant, build_seed_roster


@pytest.fixture(autouse=True)
def _reset_bracket_sim_logger() -> Iterator[None]:
    """Undo `configure_logging` side effects so caplog sees every record."""
    yield
    root = logging.getLogger("bracket_sim")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


class ConstantRandom:
    """Random source returning the same value forever, counting draws."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value


@pytest.fixture
def full_roster() -> list[Entrant]:
    """Complete 64-entrant placeholder roster (East, West, South, Midwest)."""
    return build_seed_roster()


@pytest.fixture
def test_region_roster() -> list[Entrant]:
    """Single region ``"Test"`` with entrants named ``Seed1`` … ``Seed16``."""
    return build_seed_roster(regions=("Test",), name_format="Seed{seed}")


@pytest.fixture
def never_upset_rng() -> ConstantRandom:
    """Random source whose draws never fall below an upset probability."""
    return ConstantRandom(1.0)


@pytest.fixture
def always_upset_rng() -> ConstantRandom:
    """Random source whose draws fall below any positive upset probability."""
    return ConstantRandom(0.0)


@pytest.fixture
def roster_csv(tmp_path: Path) -> Path:
    """Write the full placeholder roster to a CSV and return its path."""
    lines = ["name,seed,region"]
    lines.extend(f"{e.name},{e.seed},{e.region}" for e in build_seed_roster())
    path = tmp_path / "roster.csv"
    path.write_text("\n".join(lines) + "\n")
    return path
