"""Configuration dataclasses and YAML loader for Langton's ant simulation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional
from pathlib import Path
import yaml


MIN_AGENTS = 1
MAX_AGENTS = 100
THEMES = ("classic", "neon")


class PlacementStrategy(Enum):
    """How the initial roster is laid out on reset."""
    CLUSTERED = "clustered"
    SCATTERED = "scattered"


class SpawnVariant(Enum):
    """Which rule turns collisions into new agents."""
    PER_COLLISION = "per_collision"
    CAPPED = "capped"


def _require_int(value: Any, name: str) -> int:
    # bool is an int subclass, but "agent_count: yes" is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def clamp_agent_count(value: Any) -> int:
    """
    Clamp a requested agent count into [MIN_AGENTS, MAX_AGENTS].

    Non-numeric and non-positive requests become a single agent.
    """
    try:
        count = int(value)
    except (TypeError, ValueError):
        return MIN_AGENTS
    if count <= 0:
        return MIN_AGENTS
    return min(MAX_AGENTS, count)


@dataclass
class ResetConfig:
    agent_count: int = 1
    strategy: PlacementStrategy = PlacementStrategy.CLUSTERED
    max_agents: int = 0  # 0 = unlimited
    spawn_variant: SpawnVariant = SpawnVariant.PER_COLLISION

    def validate(self) -> "ResetConfig":
        """Reject ambiguous input instead of coercing it later."""
        _require_int(self.agent_count, 'agent_count')
        _require_int(self.max_agents, 'max_agents')
        if self.max_agents < 0:
            raise ValueError(f"max_agents must be >= 0, got {self.max_agents}")
        if not isinstance(self.strategy, PlacementStrategy):
            raise ValueError(f"Unknown placement strategy: {self.strategy!r}")
        if not isinstance(self.spawn_variant, SpawnVariant):
            raise ValueError(f"Unknown spawn variant: {self.spawn_variant!r}")
        return self


@dataclass
class PlacementConfig:
    heading: Optional[int] = None  # fixed heading for clustered placement
    scatter_radius: int = 20
    retry_budget: int = 1000


@dataclass
class SpawnConfig:
    extent: int = 100          # per-collision spawn box half-width
    initial_radius: int = 100  # capped variant starting radius
    radius_step: int = 2


@dataclass
class SimulationConfig:
    reset: ResetConfig = field(default_factory=ResetConfig)
    placement: PlacementConfig = field(default_factory=PlacementConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    max_steps: int = 11000     # 0 = run until interrupted
    step_rate: int = 60        # steps per second, against a 60 Hz frame cadence
    theme: str = "classic"

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    quiet: bool = False
    seed: Optional[int] = None
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _parse_strategy(value: Any) -> PlacementStrategy:
    try:
        return PlacementStrategy(value)
    except ValueError:
        raise ValueError(f"Unknown placement strategy: {value!r}") from None


def _parse_variant(value: Any) -> SpawnVariant:
    try:
        return SpawnVariant(value)
    except ValueError:
        raise ValueError(f"Unknown spawn variant: {value!r}") from None


def _parse_reset(reset_raw: Dict) -> ResetConfig:
    """Parse reset section from raw YAML data."""
    return ResetConfig(
        agent_count=_require_int(reset_raw.get('agent_count', 1), 'agent_count'),
        strategy=_parse_strategy(reset_raw.get('strategy', 'clustered')),
        max_agents=_require_int(reset_raw.get('max_agents', 0), 'max_agents'),
        spawn_variant=_parse_variant(reset_raw.get('spawn_variant', 'per_collision'))
    ).validate()


def _parse_placement(placement_raw: Dict) -> PlacementConfig:
    """Parse placement section from raw YAML data."""
    heading = placement_raw.get('heading')
    if heading is not None:
        _require_int(heading, 'heading')
        if heading not in (0, 1, 2, 3):
            raise ValueError(f"heading must be one of 0-3, got {heading}")
    placement = PlacementConfig(
        heading=heading,
        scatter_radius=_require_int(placement_raw.get('scatter_radius', 20), 'scatter_radius'),
        retry_budget=_require_int(placement_raw.get('retry_budget', 1000), 'retry_budget')
    )
    if placement.scatter_radius < 0 or placement.retry_budget < 0:
        raise ValueError("scatter_radius and retry_budget must be >= 0")
    return placement


def _parse_spawn(spawn_raw: Dict) -> SpawnConfig:
    """Parse spawn section from raw YAML data."""
    spawn = SpawnConfig(
        extent=_require_int(spawn_raw.get('extent', 100), 'extent'),
        initial_radius=_require_int(spawn_raw.get('initial_radius', 100), 'initial_radius'),
        radius_step=_require_int(spawn_raw.get('radius_step', 2), 'radius_step')
    )
    if spawn.extent < 0 or spawn.initial_radius < 0 or spawn.radius_step < 0:
        raise ValueError("spawn extent, initial_radius and radius_step must be >= 0")
    return spawn


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a mapping at top level of {config_path}")

    sim_raw = raw.get('simulation') or {}
    display_raw = raw.get('display') or {}
    export_raw = raw.get('export') or {}

    max_steps = _require_int(sim_raw.get('max_steps', 11000), 'max_steps')
    step_rate = _require_int(sim_raw.get('step_rate', 60), 'step_rate')
    if max_steps < 0 or step_rate < 0:
        raise ValueError("max_steps and step_rate must be >= 0")

    seed = sim_raw.get('seed')
    if seed is not None:
        _require_int(seed, 'seed')

    theme = display_raw.get('theme', 'classic')
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme!r} (expected one of {THEMES})")

    return SimulationConfig(
        reset=_parse_reset(raw.get('reset') or {}),
        placement=_parse_placement(raw.get('placement') or {}),
        spawn=_parse_spawn(raw.get('spawn') or {}),
        max_steps=max_steps,
        step_rate=step_rate,
        theme=theme,
        seed=seed,
        csv_enabled=export_raw.get('csv', True),
        snapshot_enabled=export_raw.get('snapshot', True),
        gif_enabled=export_raw.get('gif', False)
    )
