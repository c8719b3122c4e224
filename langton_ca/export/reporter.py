"""Summary report generation for Langton's ant simulation."""

from typing import Dict, Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: str, seed: Optional[int]):
        self.config_path = config_path
        self.seed = seed
        self.peak_roster = 0
        self.spawn_frames = 0
        self._prev_spawns = 0

    def update(self, state: "SimulationState") -> None:
        """Accumulate metrics per recorded frame."""
        roster = int(state.metrics.get('roster_size', 0))
        if roster > self.peak_roster:
            self.peak_roster = roster

        spawns = int(state.metrics.get('total_spawns', 0))
        if spawns > self._prev_spawns:
            self.spawn_frames += 1
        self._prev_spawns = spawns

    def generate_summary(self, summary: Dict,
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report from SimulationEngine.get_summary()."""
        requested = summary.get('agents_requested', 0)
        placed = summary.get('agents_placed', 0)
        degraded = placed < requested
        radius = summary.get('spawn_radius')

        lines = [
            "",
            "=" * 80,
            "                    LANGTON'S ANT SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Total Steps:           {summary.get('total_steps', 0)}",
            f"Agents Placed:         {placed} / {requested}"
            + (" (degraded: retry budget exhausted)" if degraded else ""),
            f"Agents Final:          {summary.get('agents_final', 0)}",
            f"Peak Roster:           {max(self.peak_roster, summary.get('agents_final', 0))}",
            f"Total Spawns:          {summary.get('total_spawns', 0)}",
            f"Frames With Spawns:    {self.spawn_frames}",
            f"Peak Collision Groups: {summary.get('peak_collisions', 0)}",
            f"Visited Cells:         {summary.get('visited_cells', 0)}",
            f"Set Cells:             {summary.get('set_cells', 0)}",
            f"Spawn Variant:         {summary.get('spawn_variant', '?')}",
        ]
        if radius is not None:
            lines.append(f"Spawn Radius:          {radius}")

        lines += [
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'simulation_log.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'simulation.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
