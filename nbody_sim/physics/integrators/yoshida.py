"""Yoshida fourth-order integrator (composed from Velocity Verlet, O(h⁴))."""

from typing import List, Optional
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.verlet import VerletIntegrator

_CBRT2 = 2.0 ** (1.0 / 3.0)
# Triple-jump weights: w1 + w0 + w1 == 1, w0 < 0
YOSHIDA_W1 = 1.0 / (2.0 - _CBRT2)
YOSHIDA_W0 = -_CBRT2 / (2.0 - _CBRT2)


class YoshidaIntegrator(Integrator):
    """Yoshida 4th order - symmetric triple composition of Velocity Verlet.

    Runs Verlet with steps w1*dt, w0*dt, w1*dt, which together span exactly
    dt. The middle step goes backwards in time. Only the last sub-step may
    record trail points, so the intermediate positions never show up in a
    body's history.
    """

    def __init__(self, force_calculator: Optional[ForceCalculator] = None):
        super().__init__(force_calculator)
        self._verlet = VerletIntegrator(self.force_calculator)

    @property
    def name(self) -> str:
        return "yoshida4"

    @property
    def order(self) -> int:
        return 4

    @property
    def symplectic(self) -> bool:
        return True

    def advance(self, bodies: List[Body], dt: float, record_trail: bool = False) -> None:
        self._verlet.advance(bodies, YOSHIDA_W1 * dt, record_trail=False)
        self._verlet.advance(bodies, YOSHIDA_W0 * dt, record_trail=False)
        self._verlet.advance(bodies, YOSHIDA_W1 * dt, record_trail=record_trail)
