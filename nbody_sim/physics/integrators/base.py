"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import List, Optional
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator


class Integrator(ABC):
    """Abstract interface for numerical integrators.

    An integrator advances a body list in place by one step of size dt.
    """

    def __init__(self, force_calculator: Optional[ForceCalculator] = None):
        """Initialize integrator.

        Args:
            force_calculator: Gravity model (default: G = 4*pi^2, eps = 1e-3 AU)
        """
        self.force_calculator = force_calculator or ForceCalculator()

    @abstractmethod
    def advance(self, bodies: List[Body], dt: float, record_trail: bool = False) -> None:
        """Perform one integration step.

        Args:
            bodies: Bodies to advance (mutated in place)
            dt: Time step in years
            record_trail: Append each body's pre-step position to its trail
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (e.g., 1 for Euler, 2 for Verlet, 4 for Yoshida)."""
        pass

    @property
    def symplectic(self) -> bool:
        return False

    def update_accelerations(self, bodies: List[Body]) -> None:
        """Write accelerations computed from one snapshot of all positions."""
        accelerations = self.force_calculator.compute_accelerations(bodies)
        for body, acceleration in zip(bodies, accelerations):
            body.acceleration = acceleration
