"""Diagnostics for N-body simulations."""

from typing import Sequence, Tuple
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import GRAVITATIONAL_CONSTANT, EPSILON_DEFAULT


class Diagnostics:
    """Compute conserved quantities consistent with the force law."""

    def __init__(self, G: float = GRAVITATIONAL_CONSTANT, epsilon: float = EPSILON_DEFAULT):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            epsilon: Softening length (must match force calculation)
        """
        self.G = G
        self.epsilon = epsilon

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Potential uses the same Plummer softening as the force law:
        U = -G * Σ_{i<j} m_i * m_j / sqrt(r_ij^2 + eps^2)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        if not bodies:
            return 0.0, 0.0, 0.0

        positions = np.stack([body.position for body in bodies])
        velocities = np.stack([body.velocity for body in bodies])
        masses = np.array([body.mass for body in bodies])

        # Kinetic energy: K = 0.5 * Σ m_i * v_i^2
        K = 0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1))

        U = 0.0
        n = len(masses)
        for i in range(n):
            for j in range(i + 1, n):
                r_diff = positions[j] - positions[i]
                r_soft = np.sqrt(np.sum(r_diff ** 2) + self.epsilon ** 2)
                U -= self.G * masses[i] * masses[j] / r_soft

        return float(K), float(U), float(K + U)

    def compute_total_energy(self, bodies: Sequence[Body]) -> float:
        return self.compute_energies(bodies)[2]

    def compute_momentum(self, bodies: Sequence[Body]) -> np.ndarray:
        """Total linear momentum Σ m_i v_i."""
        total = np.zeros(2)
        for body in bodies:
            total += body.mass * body.velocity
        return total

    def compute_angular_momentum(self, bodies: Sequence[Body]) -> float:
        """Total angular momentum about the origin (z component).

        L_z = Σ m_i * (x_i * vy_i - y_i * vx_i)
        """
        L_z = 0.0
        for body in bodies:
            x, y = body.position
            vx, vy = body.velocity
            L_z += body.mass * (x * vy - y * vx)
        return float(L_z)

    def compute_center_of_mass(self, bodies: Sequence[Body]) -> np.ndarray:
        if not bodies:
            return np.zeros(2)
        masses = np.array([body.mass for body in bodies])
        positions = np.stack([body.position for body in bodies])
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / np.sum(masses)


def relative_energy_drift(initial_energy: float, energy: float) -> float:
    """|E - E0| / |E0|, or the absolute change when E0 is zero."""
    if initial_energy == 0.0:
        return abs(energy)
    return abs(energy - initial_energy) / abs(initial_energy)
