import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from langton_ca.config import ResetConfig, SimulationConfig, SpawnVariant  # noqa: E402
from langton_ca.model.agent import Agent  # noqa: E402
from langton_ca.model.engine import SimulationEngine  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_engine():
    """Factory for engines with a given spawn variant and reset options."""

    def _make(spawn_variant=SpawnVariant.PER_COLLISION, seed=0, **reset_kwargs):
        config = SimulationConfig(
            reset=ResetConfig(spawn_variant=spawn_variant, **reset_kwargs),
            seed=seed,
        )
        return SimulationEngine(config)

    return _make


@pytest.fixture
def two_collision_roster():
    """Five agents that land as a group of three on (0, 0) and two on (10, 10)."""
    return [
        Agent(-1, 0, 0),   # turns right, moves to (0, 0)
        Agent(1, 0, 2),    # turns to left, moves to (0, 0)
        Agent(0, 1, 3),    # turns to up, moves to (0, 0)
        Agent(9, 10, 0),   # moves to (10, 10)
        Agent(11, 10, 2),  # moves to (10, 10)
    ]
