"""Visualization and export for Langton's ant simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, Tuple, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.state import SimulationState


# Triangle markers pointing along each heading; y grows downwards on screen
HEADING_MARKERS = {0: '^', 1: '>', 2: 'v', 3: '<'}


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation
    """

    THEMES = {
        'classic': {
            'bg': '#222222',
            'cell': '#FFFFFF',
            'ant': '#E74C3C',
        },
        'neon': {
            'bg': '#000000',
            'cell': '#39FF14',
            'ant': '#00EAFF',
        },
    }

    def __init__(self, theme: str = 'classic', margin: int = 2):
        if theme not in self.THEMES:
            raise ValueError(f"Unknown theme: {theme!r}")
        self.theme = theme
        self.margin = margin
        self.frames: List[Image.Image] = []

    @property
    def colors(self) -> dict:
        return self.THEMES[self.theme]

    def _view_bounds(self, state: "SimulationState") -> Tuple[int, int, int, int]:
        """Bounding box of visited cells and agents, padded by the margin."""
        xs = [x for x, _ in state.cells] + [a.x for a in state.agents]
        ys = [y for _, y in state.cells] + [a.y for a in state.agents]
        if not xs:
            xs, ys = [0], [0]
        return (min(xs) - self.margin, min(ys) - self.margin,
                max(xs) + self.margin, max(ys) + self.margin)

    def render_array(self, state: "SimulationState") -> Tuple[np.ndarray, Tuple[int, int, int, int]]:
        """Rasterise set cells into an RGB array indexed [y, x]."""
        min_x, min_y, max_x, max_y = self._view_bounds(state)
        width = max_x - min_x + 1
        height = max_y - min_y + 1

        image = np.empty((height, width, 3))
        image[:, :] = to_rgb(self.colors['bg'])
        cell_rgb = to_rgb(self.colors['cell'])
        for x, y in state.set_cells():
            image[y - min_y, x - min_x] = cell_rgb
        return image, (min_x, min_y, max_x, max_y)

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        image, (min_x, min_y, max_x, max_y) = self.render_array(state)

        # Determine figure size based on grid aspect ratio
        aspect = image.shape[1] / image.shape[0]
        fig_height = 6
        fig_width = max(6, min(16, fig_height * aspect))
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))
        fig.patch.set_facecolor(self.colors['bg'])

        # origin='upper' keeps smaller y at the top, matching screen space
        ax.imshow(image, origin='upper', aspect='equal', interpolation='nearest',
                  extent=[min_x - 0.5, max_x + 0.5, max_y + 0.5, min_y - 0.5])

        # Draw agents
        markersize = max(2, min(8, 300 / max(image.shape)))
        for heading, marker in HEADING_MARKERS.items():
            xs = [a.x for a in state.agents if a.heading == heading]
            ys = [a.y for a in state.agents if a.heading == heading]
            if xs:
                ax.plot(xs, ys, marker, color=self.colors['ant'],
                        markersize=markersize, linestyle='none')

        ax.set_title(f'Step {state.step} | Agents: {len(state.agents)} | '
                     f'Spawns: {int(state.metrics.get("total_spawns", 0))}',
                     color=self.colors['cell'])
        ax.set_axis_off()

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80, facecolor=fig.get_facecolor())
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight',
                    facecolor=fig.get_facecolor())
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        self.frames.clear()
