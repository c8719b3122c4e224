"""Simulation engine for Langton's ant simulation."""

import numpy as np
from typing import List, Dict, Tuple, Iterator, Optional, Sequence, TYPE_CHECKING
from collections import defaultdict

from .grid import GridStore
from .agent import Agent
from .spawn import SpawnPolicy, make_spawn_policy
from .placement import PlacementResult, place_clustered, place_scattered
from .state import SimulationState, AgentSnapshot
from ..config import PlacementStrategy, ResetConfig, clamp_agent_count

if TYPE_CHECKING:
    from ..config import SimulationConfig

FRAME_RATE = 60


def batch_size(step_rate: float) -> int:
    """Ticks to run per displayed frame for a steps-per-second rate."""
    return max(1, int(step_rate // FRAME_RATE))


def find_collisions(agents: Sequence[Agent]) -> List[List[Agent]]:
    """
    Group agents sharing a cell; return every group of two or more.

    Groups come out in order of each cell's first occupant in the roster,
    so iteration order is stable for a given roster.
    """
    by_cell: Dict[Tuple[int, int], List[Agent]] = defaultdict(list)
    for agent in agents:
        by_cell[(agent.x, agent.y)].append(agent)
    return [group for group in by_cell.values() if len(group) > 1]


class SimulationEngine:
    """
    Orchestrates the discrete-time simulation loop.

    Owns the grid, the agent roster and the spawn policy. Readers must
    only look at state between ticks (cells(), roster(), snapshot()).

    One tick:
    1. Move every agent present at tick start, in roster order
    2. Group agents by resulting cell
    3. Hand collision groups to the spawn policy
    4. Append spawned agents (they move from the next tick on)
    """

    def __init__(self, config: "SimulationConfig"):
        self.config = config
        self.current_step = 0
        self.rng = np.random.default_rng(config.seed)

        self.grid = GridStore()
        self.agents: List[Agent] = []
        self.reset_config: ResetConfig = config.reset
        self.spawn_policy: SpawnPolicy = self._make_policy(config.reset)
        self.placement: Optional[PlacementResult] = None

        # Metrics tracking
        self.total_spawns = 0
        self.initial_roster_size = 0
        self.peak_collisions = 0

        self.reset()

    def _make_policy(self, reset_config: ResetConfig) -> SpawnPolicy:
        return make_spawn_policy(
            reset_config.spawn_variant, self.rng,
            self.config.spawn, max_agents=reset_config.max_agents
        )

    def _clear(self) -> None:
        # Rebuilt rather than reset so edits to config.spawn take effect
        self.grid.clear()
        self.spawn_policy = self._make_policy(self.reset_config)
        self.current_step = 0
        self.total_spawns = 0
        self.peak_collisions = 0

    def reset(self, reset_config: Optional[ResetConfig] = None) -> PlacementResult:
        """
        Clear the grid, rebuild the roster and reinitialise spawn state.

        Returns the placement outcome; check `degraded` to see whether the
        scattered sampler placed fewer agents than requested.
        """
        if reset_config is not None:
            self.reset_config = reset_config.validate()
        self._clear()

        count = clamp_agent_count(self.reset_config.agent_count)
        placement_cfg = self.config.placement
        if self.reset_config.strategy == PlacementStrategy.SCATTERED:
            result = place_scattered(
                count, self.rng,
                max_radius=placement_cfg.scatter_radius,
                retry_budget=placement_cfg.retry_budget
            )
        else:
            result = place_clustered(count, self.rng, heading=placement_cfg.heading)

        self.agents = list(result.agents)
        self.initial_roster_size = len(self.agents)
        self.placement = result
        return result

    def load(self, agents: Sequence[Agent]) -> None:
        """Replace the roster with explicit agents on a cleared grid."""
        self._clear()
        self.agents = list(agents)
        self.initial_roster_size = len(self.agents)
        self.placement = PlacementResult(requested=len(self.agents),
                                         agents=list(self.agents))

    def tick(self) -> List[Agent]:
        """
        Execute one discrete time step.

        Agents update sequentially against the shared grid, so a later
        agent sees cells flipped earlier in the same tick. Returns the
        agents spawned by this tick.
        """
        self.current_step += 1

        # Phase 1: move the roster as it stood at tick start
        for agent in list(self.agents):
            agent.step(self.grid)

        # Phase 2: collision groups
        collisions = find_collisions(self.agents)
        self.peak_collisions = max(self.peak_collisions, len(collisions))

        # Phase 3: spawns join after detection is complete
        spawned = self.spawn_policy.spawn(collisions, len(self.agents)) if collisions else []
        self.agents.extend(spawned)
        self.total_spawns += len(spawned)
        return spawned

    def run_frame(self, step_rate: Optional[float] = None) -> List[Agent]:
        """Run one frame's batch of ticks back to back, stopping at max_steps."""
        rate = self.config.step_rate if step_rate is None else step_rate
        spawned: List[Agent] = []
        for _ in range(batch_size(rate)):
            if self.is_finished():
                break
            spawned.extend(self.tick())
        return spawned

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Read-only pass over visited cells as (x, y, value)."""
        return self.grid.cells()

    def roster(self) -> Iterator[Tuple[int, int, int]]:
        """Read-only pass over the roster as (x, y, heading)."""
        return (agent.as_tuple() for agent in self.agents)

    @property
    def spawn_radius(self) -> Optional[int]:
        return getattr(self.spawn_policy, 'radius', None)

    def snapshot(self) -> SimulationState:
        """Create immutable snapshot of current simulation state."""
        agent_snapshots = [
            AgentSnapshot(index=i, x=a.x, y=a.y, heading=a.heading)
            for i, a in enumerate(self.agents)
        ]

        metrics = {
            'roster_size': len(self.agents),
            'visited_cells': len(self.grid),
            'set_cells': self.grid.count_set(),
            'total_spawns': self.total_spawns,
        }
        if self.spawn_radius is not None:
            metrics['spawn_radius'] = self.spawn_radius

        return SimulationState(
            step=self.current_step,
            agents=agent_snapshots,
            cells=self.grid.copy_cells(),
            metrics=metrics
        )

    def is_finished(self) -> bool:
        """Check if simulation should terminate."""
        return self.config.max_steps > 0 and self.current_step >= self.config.max_steps

    def get_summary(self) -> Dict:
        """Get summary statistics for the simulation."""
        requested = self.placement.requested if self.placement else 0
        return {
            'total_steps': self.current_step,
            'agents_requested': requested,
            'agents_placed': self.initial_roster_size,
            'agents_final': len(self.agents),
            'total_spawns': self.total_spawns,
            'peak_collisions': self.peak_collisions,
            'visited_cells': len(self.grid),
            'set_cells': self.grid.count_set(),
            'spawn_variant': self.reset_config.spawn_variant.value,
            'spawn_radius': self.spawn_radius,
        }
