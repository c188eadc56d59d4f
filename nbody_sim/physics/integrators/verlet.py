"""Velocity Verlet integrator (better energy conservation, O(h²) accuracy)."""

from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.physics.integrators.base import Integrator


class VerletIntegrator(Integrator):
    """Velocity Verlet integrator - second-order, symplectic.

    Canonical Velocity Verlet algorithm:
    1. a_old = a(x)
    2. x_new = x + v*dt + 0.5*a_old*dt^2
    3. a_new = a(x_new)
    4. v_new = v + 0.5*(a_old + a_new)*dt

    Each stage runs over every body before the next stage starts.
    Interleaving the position and velocity updates per body would make the
    forces depend on body order and lose the symplectic property.
    """

    @property
    def name(self) -> str:
        return "verlet"

    @property
    def order(self) -> int:
        return 2

    @property
    def symplectic(self) -> bool:
        return True

    def advance(self, bodies: List[Body], dt: float, record_trail: bool = False) -> None:
        # 1. accelerations at the current positions
        self.update_accelerations(bodies)
        for body in bodies:
            body.previous_acceleration = body.acceleration

        # 2. drift
        dt_sq = dt * dt
        for body in bodies:
            if record_trail:
                body.record_trail()
            body.position = body.position + body.velocity * dt + 0.5 * body.acceleration * dt_sq

        # 3. accelerations at the new positions
        self.update_accelerations(bodies)

        # 4. kick with the average acceleration
        for body in bodies:
            body.velocity = body.velocity + 0.5 * (body.previous_acceleration + body.acceleration) * dt
