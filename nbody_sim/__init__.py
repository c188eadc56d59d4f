"""
N-body Simulator - planar gravitational dynamics of a few celestial bodies.

Features:
- Softened Newtonian gravity in AU / solar mass / year units
- Multiple integrators (Euler, Velocity Verlet, Yoshida 4th order)
- Classic few-body scenarios (binary, Pythagorean, Lagrange, figure-eight)
- Bounded position trails and a matplotlib 2D renderer
- CLI driving loop with energy diagnostics
"""

__version__ = "0.1.0"

from nbody_sim.physics.body import Body
from nbody_sim.physics.simulator import SimulationEngine, IntegrationMethod

__all__ = [
    "Body",
    "SimulationEngine",
    "IntegrationMethod",
]
