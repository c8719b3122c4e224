"""Model package for Langton's ant simulation."""

from .state import AgentSnapshot, SimulationState
from .grid import GridStore
from .agent import Agent, Heading
from .spawn import SpawnPolicy, PerCollisionSpawnPolicy, CappedSpawnPolicy
from .placement import PlacementResult, place_clustered, place_scattered
from .engine import SimulationEngine, batch_size, find_collisions

__all__ = [
    'AgentSnapshot',
    'SimulationState',
    'GridStore',
    'Agent',
    'Heading',
    'SpawnPolicy',
    'PerCollisionSpawnPolicy',
    'CappedSpawnPolicy',
    'PlacementResult',
    'place_clustered',
    'place_scattered',
    'SimulationEngine',
    'batch_size',
    'find_collisions',
]
