"""Euler method integrator (baseline, O(h) accuracy)."""

from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Euler method - simple first-order integrator.

    Cheap but inaccurate; energy error grows with step size. Kept as the
    baseline the symplectic schemes are measured against.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def advance(self, bodies: List[Body], dt: float, record_trail: bool = False) -> None:
        """Euler step: v_new = v + a*dt, r_new = r + v_new*dt.

        Accelerations for all bodies come from the positions at the start
        of the step, before any body moves.
        """
        self.update_accelerations(bodies)

        for body in bodies:
            body.velocity = body.velocity + body.acceleration * dt

            if record_trail:
                body.record_trail()

            body.position = body.position + body.velocity * dt
