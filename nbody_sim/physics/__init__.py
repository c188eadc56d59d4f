"""Physics engine for few-body gravitational simulations."""

from nbody_sim.physics.body import Body, TrailBuffer
from nbody_sim.physics.force_calculator import ForceCalculator, compute_acceleration
from nbody_sim.physics.simulator import SimulationEngine, IntegrationMethod

__all__ = [
    "Body",
    "TrailBuffer",
    "ForceCalculator",
    "compute_acceleration",
    "SimulationEngine",
    "IntegrationMethod",
]
