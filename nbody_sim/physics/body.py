"""Celestial body state and bounded trail history."""

from collections import deque
from typing import Iterator, Optional, Sequence
import numpy as np


DEFAULT_TRAIL_CAPACITY = 1000


class TrailBuffer:
    """Bounded FIFO of past positions, oldest evicted first."""

    def __init__(self, capacity: int = DEFAULT_TRAIL_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Trail capacity must be positive, got {capacity}")
        self._points = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, position) -> None:
        """Record a copy of position; evicts the oldest point when full."""
        self._points.append(np.array(position, dtype=np.float64))

    def clear(self) -> None:
        self._points.clear()

    def as_array(self) -> np.ndarray:
        """Return points as an (n, 2) array, oldest first."""
        if not self._points:
            return np.zeros((0, 2))
        return np.stack(list(self._points))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._points)

    def __getitem__(self, index: int) -> np.ndarray:
        return self._points[index]


class Body:
    """Point mass in the plane.

    Units are solar masses, AU and AU per year. Acceleration and
    previous_acceleration are written by the integrators; previous_acceleration
    only carries meaning inside a Verlet step.
    """

    def __init__(
        self,
        name: str,
        mass: float,
        position: Sequence[float],
        velocity: Sequence[float] = (0.0, 0.0),
        acceleration: Optional[Sequence[float]] = None,
        radius: float = 5.0,
        color: str = "white",
        trail_capacity: int = DEFAULT_TRAIL_CAPACITY
    ):
        """Initialize body.

        Args:
            name: Display name
            mass: Mass in solar masses (must be > 0)
            position: Initial position (x, y) in AU
            velocity: Initial velocity (vx, vy) in AU/yr
            acceleration: Initial acceleration (defaults to zero)
            radius: Display radius (rendering only)
            color: Matplotlib color spec (rendering only)
            trail_capacity: Maximum number of trail points kept

        Raises:
            ValueError: If mass is not positive or a vector is not 2-D
        """
        mass = float(mass)
        if not mass > 0.0:
            raise ValueError(f"Body '{name}' must have positive mass, got {mass}")

        self.name = name
        self.mass = mass
        self.position = _as_vector(position, "position")
        self.velocity = _as_vector(velocity, "velocity")
        if acceleration is None:
            self.acceleration = np.zeros(2)
        else:
            self.acceleration = _as_vector(acceleration, "acceleration")
        self.previous_acceleration = self.acceleration.copy()
        self.radius = float(radius)
        self.color = color
        self.trail = TrailBuffer(trail_capacity)

    @property
    def trail_capacity(self) -> int:
        return self.trail.capacity

    def record_trail(self):
        """Append the current position to the trail."""
        self.trail.append(self.position)

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * float(np.dot(self.velocity, self.velocity))

    def __repr__(self) -> str:
        return (
            f"Body(name={self.name!r}, mass={self.mass}, "
            f"position={self.position.tolist()}, velocity={self.velocity.tolist()})"
        )


def _as_vector(value, label: str) -> np.ndarray:
    vec = np.array(value, dtype=np.float64).reshape(-1)
    if vec.shape != (2,):
        raise ValueError(f"{label} must be a 2-D vector, got shape {vec.shape}")
    return vec
