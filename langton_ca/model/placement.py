"""Initial roster placement strategies."""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple
import math
import numpy as np

from .agent import Agent

DEFAULT_SCATTER_RADIUS = 20
DEFAULT_RETRY_BUDGET = 1000


@dataclass
class PlacementResult:
    """
    Outcome of a placement pass.

    `placed` can be lower than `requested` when the scattered sampler ran
    out of retries; callers are expected to surface that.
    """
    requested: int
    agents: List[Agent] = field(default_factory=list)

    @property
    def placed(self) -> int:
        return len(self.agents)

    @property
    def degraded(self) -> bool:
        return self.placed < self.requested


def place_clustered(count: int, rng: np.random.Generator,
                    heading: Optional[int] = None) -> PlacementResult:
    """Stack every agent on the origin, each with its own random heading."""
    agents = []
    for _ in range(count):
        h = heading if heading is not None else int(rng.integers(0, 4))
        agents.append(Agent(0, 0, h))
    return PlacementResult(requested=count, agents=agents)


def _polar_cell(rng: np.random.Generator, max_radius: int) -> Tuple[int, int]:
    """Sample a cell by angle and integer radius around the origin."""
    angle = rng.uniform(0.0, 2.0 * math.pi)
    radius = int(rng.integers(0, max_radius + 1))
    return (int(round(radius * math.cos(angle))),
            int(round(radius * math.sin(angle))))


def place_scattered(count: int, rng: np.random.Generator,
                    max_radius: int = DEFAULT_SCATTER_RADIUS,
                    retry_budget: int = DEFAULT_RETRY_BUDGET) -> PlacementResult:
    """
    Place agents on distinct cells near the origin.

    Every candidate draw spends one unit of a budget shared by the whole
    pass, not by each agent. When the budget runs out the result holds
    fewer agents than requested.
    """
    result = PlacementResult(requested=count)
    occupied: Set[Tuple[int, int]] = set()
    attempts = 0

    while result.placed < count and attempts < retry_budget:
        attempts += 1
        pos = _polar_cell(rng, max_radius)
        if pos in occupied:
            continue
        occupied.add(pos)
        result.agents.append(Agent(pos[0], pos[1], int(rng.integers(0, 4))))

    return result
