"""Interface shared by the views that draw a running simulation."""

from abc import ABC, abstractmethod
import numpy as np


class Renderer(ABC):
    """Draws bodies, trails and engine metadata once per frame.

    A renderer is a read-only consumer of SimulationEngine: it never moves
    bodies or touches their trails.
    """

    @abstractmethod
    def render(self, engine):
        """Draw the engine's bodies, their trails and the frame title.

        Args:
            engine: SimulationEngine to draw; only read, never stepped
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Pixels of the most recently drawn frame.

        Returns:
            RGB image (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def clear(self):
        """Blank the view without closing it."""
        pass

    @abstractmethod
    def close(self):
        """Release the figure or window."""
        pass
