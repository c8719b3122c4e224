"""State snapshot dataclasses for Langton's ant simulation."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class AgentSnapshot:
    """Immutable snapshot of an agent at a given tick."""
    index: int
    x: int
    y: int
    heading: int  # 0=up, 1=right, 2=down, 3=left


@dataclass
class SimulationState:
    """Complete snapshot of simulation state between two ticks."""
    step: int
    agents: List[AgentSnapshot]
    cells: Dict[Tuple[int, int], int]  # Copy of visited cells
    metrics: Dict[str, float]          # roster size, visited cells, spawns...

    def set_cells(self) -> Iterator[Tuple[int, int]]:
        """Positions of cells holding 1."""
        return (pos for pos, value in self.cells.items() if value)

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format."""
        return [
            {
                "step": self.step,
                "agent_index": a.index,
                "x": a.x,
                "y": a.y,
                "heading": a.heading
            }
            for a in self.agents
        ]
