"""2D renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from typing import Optional, Tuple
from nbody_sim.render.base import Renderer


class Renderer2D(Renderer):
    """2D renderer: bodies as points, trails as fading lines."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_trails: bool = True,
        interactive: bool = True,
        view_margin: float = 0.5
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            show_trails: Whether to draw body trails
            interactive: Show a window and pause for GUI events; if False,
                draw to the canvas only (headless use)
            view_margin: Extra space around the bodies, in AU
        """
        self.figsize = figsize
        self.dpi = dpi
        self.show_trails = show_trails
        self.interactive = interactive
        self.view_margin = view_margin

        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False

    def _initialize(self):
        """Create the figure if not already done."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.fig.patch.set_facecolor('black')
        if self.interactive:
            plt.show(block=False)
        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None or not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True

    def render(self, engine):
        """Render current frame."""
        if self.initialized and not self._is_figure_open():
            return
        self._initialize()

        ax = self.ax
        ax.clear()
        ax.set_facecolor('black')
        ax.set_aspect('equal')
        ax.set_xlabel('x [AU]', color='white')
        ax.set_ylabel('y [AU]', color='white')
        ax.tick_params(colors='white')
        ax.set_title(
            f"Scenario {engine.scenario_index + 1}: {engine.scenario_name} | "
            f"{engine.integrator_name} | t = {engine.time:.1f} yr",
            color='white',
        )

        bodies = engine.bodies
        if not bodies:
            self._draw()
            return

        if self.show_trails:
            for body in bodies:
                segments = trail_segments(body.trail.as_array())
                if len(segments) == 0:
                    continue
                # Older segments fade out
                alphas = np.linspace(0.05, 0.8, len(segments))
                colors = np.tile(to_rgba(body.color), (len(segments), 1))
                colors[:, 3] = alphas
                ax.add_collection(LineCollection(segments, colors=colors, linewidths=1.0))

        positions = np.stack([body.position for body in bodies])
        sizes = [(2.0 * body.radius) ** 2 for body in bodies]
        ax.scatter(
            positions[:, 0], positions[:, 1],
            s=sizes, c=[body.color for body in bodies],
            edgecolors='none', zorder=3,
        )

        x_min, y_min = positions.min(axis=0) - self.view_margin
        x_max, y_max = positions.max(axis=0) + self.view_margin
        half = max(x_max - x_min, y_max - y_min) / 2
        x_center, y_center = (x_max + x_min) / 2, (y_max + y_min) / 2
        ax.set_xlim(x_center - half, x_center + half)
        ax.set_ylim(y_center - half, y_center + half)

        self._draw()

    def _draw(self):
        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)
        else:
            self.fig.canvas.draw()

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return np.array(rgba[:, :, :3], dtype=np.uint8)

    def clear(self):
        """Blank the axes; the figure stays open."""
        if self.ax is not None:
            self.ax.clear()

    def close(self):
        """Close the matplotlib figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False


def trail_segments(points: np.ndarray) -> np.ndarray:
    """Consecutive trail points as (n - 1, 2, 2) line segments."""
    if len(points) < 2:
        return np.zeros((0, 2, 2))
    return np.stack([points[:-1], points[1:]], axis=1)
