"""Spawn policies converting same-cell collisions into new agents."""

from typing import List, Sequence
import numpy as np

from .agent import Agent
from ..config import SpawnConfig, SpawnVariant


def _random_agent(rng: np.random.Generator, half_width: int) -> Agent:
    """Agent uniformly placed in [-half_width, half_width]^2 with a random heading."""
    x, y = rng.integers(-half_width, half_width + 1, size=2)
    heading = rng.integers(0, 4)
    return Agent(int(x), int(y), int(heading))


class SpawnPolicy:
    """
    Base class for collision-triggered reproduction.

    Subclasses receive every collision group found in a tick, together
    with the roster size at detection time, and return the agents to add.
    The engine appends them only after detection is complete, and builds
    a fresh policy on every reset.
    """

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def spawn(self, collisions: Sequence[List[Agent]],
              roster_size: int) -> List[Agent]:
        raise NotImplementedError


class PerCollisionSpawnPolicy(SpawnPolicy):
    """One new agent per collision group, anywhere in a fixed box. No cap."""

    def __init__(self, rng: np.random.Generator, extent: int = 100):
        super().__init__(rng)
        self.extent = extent

    def spawn(self, collisions: Sequence[List[Agent]],
              roster_size: int) -> List[Agent]:
        return [_random_agent(self.rng, self.extent) for _ in collisions]


class CappedSpawnPolicy(SpawnPolicy):
    """
    At most one new agent per tick, sampled in a radius that grows.

    The spawn is attributed to the first collision group; later groups in
    the same tick are ignored. With a nonzero cap the spawn is suppressed
    once the roster reaches the cap. The radius only grows after a spawn
    actually happens, so suppressed ticks leave it unchanged.
    """

    def __init__(self, rng: np.random.Generator, max_agents: int = 0,
                 initial_radius: int = 100, radius_step: int = 2):
        super().__init__(rng)
        self.max_agents = max_agents
        self.initial_radius = initial_radius
        self.radius_step = radius_step
        self.radius = initial_radius

    def at_cap(self, roster_size: int) -> bool:
        return self.max_agents != 0 and roster_size >= self.max_agents

    def spawn(self, collisions: Sequence[List[Agent]],
              roster_size: int) -> List[Agent]:
        """
        Spawn for collisions[0] only.

        The child's position does not depend on the group, so only the
        presence of a first group matters here.
        """
        if not collisions or self.at_cap(roster_size):
            return []
        child = _random_agent(self.rng, self.radius)
        self.radius += self.radius_step
        return [child]


def make_spawn_policy(variant: SpawnVariant, rng: np.random.Generator,
                      spawn_config: SpawnConfig,
                      max_agents: int = 0) -> SpawnPolicy:
    """Build the policy selected by configuration."""
    if variant == SpawnVariant.PER_COLLISION:
        return PerCollisionSpawnPolicy(rng, extent=spawn_config.extent)
    elif variant == SpawnVariant.CAPPED:
        return CappedSpawnPolicy(
            rng,
            max_agents=max_agents,
            initial_radius=spawn_config.initial_radius,
            radius_step=spawn_config.radius_step
        )
    raise ValueError(f"Unknown spawn variant: {variant!r}")
