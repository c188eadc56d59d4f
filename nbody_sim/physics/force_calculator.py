"""Softened Newtonian gravity.

Every function here is pure: it reads body positions and masses and returns
accelerations. Writing the result back onto bodies is the integrators' job.
"""

import math
from typing import Literal, Sequence
import numpy as np
from nbody_sim.physics.body import Body

# G in AU^3 / (Msun * yr^2): a 1 AU orbit around 1 Msun takes one year
GRAVITATIONAL_CONSTANT = 4.0 * math.pi ** 2
EPSILON_DEFAULT = 1e-3  # AU


def compute_acceleration(
    target: Body,
    bodies: Sequence[Body],
    G: float = GRAVITATIONAL_CONSTANT,
    epsilon: float = EPSILON_DEFAULT,
) -> np.ndarray:
    """Net acceleration on target from every other body.

    For each other body j:
        d = r_target - r_j
        a += -d * G * m_j / (|d|^2 + eps^2)^(3/2)

    The minus sign makes the acceleration point from target toward j.
    Self-exclusion is by identity, so two bodies at the same position
    still act on each other (with a finite, softened pull of zero).

    Args:
        target: Body being evaluated
        bodies: Full current body set (read-only)
        G: Gravitational constant
        epsilon: Softening length in AU

    Returns:
        Acceleration vector (2,)
    """
    acceleration = np.zeros(2)
    eps_sq = epsilon * epsilon
    for other in bodies:
        if other is target:
            continue
        displacement = target.position - other.position
        distance = math.sqrt(float(np.dot(displacement, displacement)) + eps_sq)
        factor = G * other.mass / distance ** 3
        acceleration -= displacement * factor
    return acceleration


def compute_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    G: float = GRAVITATIONAL_CONSTANT,
    epsilon: float = EPSILON_DEFAULT,
) -> np.ndarray:
    """Vectorized accelerations for all bodies at once.

    Args:
        positions: (n, 2) array
        masses: (n,) array
        G: Gravitational constant
        epsilon: Softening length

    Returns:
        (n, 2) accelerations, row i matching compute_acceleration for body i
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    n = positions.shape[0]
    # r_diff[i, j] = r_i - r_j
    r_diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    r_sq = np.sum(r_diff ** 2, axis=2)
    r_soft_cubed = (r_sq + epsilon ** 2) ** 1.5
    factor = G * masses[np.newaxis, :] / r_soft_cubed
    # Zero diagonal: no self-interaction
    factor = factor * (1.0 - np.eye(n))
    return -np.sum(factor[:, :, np.newaxis] * r_diff, axis=1)


class ForceCalculator:
    """Gravity for a whole body list from one snapshot of positions."""

    def __init__(
        self,
        G: float = GRAVITATIONAL_CONSTANT,
        epsilon: float = EPSILON_DEFAULT,
        method: Literal["direct", "vectorized"] = "direct",
    ):
        if G <= 0:
            raise ValueError(f"Gravitational constant must be positive, got {G}")
        if epsilon <= 0:
            raise ValueError(f"Softening length must be positive, got {epsilon}")
        if method not in ("direct", "vectorized"):
            raise ValueError(f"Unknown force method '{method}'. Available: ['direct', 'vectorized']")
        self.G = G
        self.epsilon = epsilon
        self.method = method

    def acceleration_of(self, target: Body, bodies: Sequence[Body]) -> np.ndarray:
        return compute_acceleration(target, bodies, self.G, self.epsilon)

    def compute_accelerations(self, bodies: Sequence[Body]) -> np.ndarray:
        """Accelerations for every body, all from the current positions.

        Nothing is written back, so the result never mixes old and new
        positions even if the caller updates bodies afterwards.

        Returns:
            (n, 2) array in body order
        """
        if not bodies:
            return np.zeros((0, 2))
        if self.method == "vectorized":
            positions = np.stack([body.position for body in bodies])
            masses = np.array([body.mass for body in bodies])
            return compute_accelerations(positions, masses, self.G, self.epsilon)
        return np.stack([self.acceleration_of(body, bodies) for body in bodies])
