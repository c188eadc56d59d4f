"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from nbody_sim.physics.body import Body, DEFAULT_TRAIL_CAPACITY
from nbody_sim.physics.force_calculator import GRAVITATIONAL_CONSTANT


class Preset(ABC):
    """Abstract base class for preset scenarios.

    generate() must build new Body objects on every call; the engine owns
    what it receives and mutates it freely.
    """

    def __init__(self, G: float = GRAVITATIONAL_CONSTANT, trail_capacity: int = DEFAULT_TRAIL_CAPACITY):
        """Initialize preset.

        Args:
            G: Gravitational constant the initial velocities are computed for
            trail_capacity: Trail capacity given to every generated body
        """
        self.G = G
        self.trail_capacity = trail_capacity

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.

        Returns:
            Fresh list of bodies
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

    def _body(self, name, mass, position, velocity, color, radius=5.0) -> Body:
        return Body(
            name=name,
            mass=mass,
            position=position,
            velocity=velocity,
            radius=radius,
            color=color,
            trail_capacity=self.trail_capacity,
        )
