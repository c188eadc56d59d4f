"""Numerical integrators for N-body simulations."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import EulerIntegrator
from nbody_sim.physics.integrators.verlet import VerletIntegrator
from nbody_sim.physics.integrators.yoshida import YoshidaIntegrator

__all__ = ["Integrator", "EulerIntegrator", "VerletIntegrator", "YoshidaIntegrator"]
