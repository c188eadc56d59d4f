"""Catalog of few-body initial conditions.

All scenarios are centred on their centre of mass, in AU, solar masses and
AU/yr.
"""

import math
from typing import Callable, Dict, List
import numpy as np
from nbody_sim.physics.body import Body, DEFAULT_TRAIL_CAPACITY
from nbody_sim.physics.force_calculator import GRAVITATIONAL_CONSTANT
from nbody_sim.presets.base import Preset


class TwoBodyOrbit(Preset):
    """Equal-mass binary on a circular orbit."""

    def __init__(self, separation: float = 2.0, mass: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.separation = separation
        self.mass = mass

    @property
    def name(self) -> str:
        return "two_body"

    def generate(self) -> List[Body]:
        d = self.separation
        # Each star circles the COM at d/2: v = sqrt(G*m / (2*d))
        v = math.sqrt(self.G * self.mass / (2.0 * d))
        return [
            self._body("Star 1", self.mass, (-d / 2, 0.0), (0.0, -v), "yellow"),
            self._body("Star 2", self.mass, (d / 2, 0.0), (0.0, v), "orangered"),
        ]


class PythagoreanThreeBody(Preset):
    """Burrau's problem: masses 3, 4, 5 at rest on a 3-4-5 right triangle.

    Each mass sits opposite the side of matching length.
    """

    def __init__(self, scale: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.scale = scale

    @property
    def name(self) -> str:
        return "pythagorean"

    def generate(self) -> List[Body]:
        s = self.scale
        return [
            self._body("Star 1", 3.0, (1.0 * s, 3.0 * s), (0.0, 0.0), "orangered"),
            self._body("Star 2", 4.0, (-2.0 * s, -1.0 * s), (0.0, 0.0), "yellowgreen"),
            self._body("Star 3", 5.0, (1.0 * s, -1.0 * s), (0.0, 0.0), "lightsteelblue"),
        ]


class LagrangeTriangle(Preset):
    """Three equal masses rigidly rotating on an equilateral triangle."""

    def __init__(self, radius: float = 1.0, mass: float = 1.0, **kwargs):
        """Initialize preset.

        Args:
            radius: Distance from each body to the centre of mass (AU)
            mass: Mass of each body
        """
        super().__init__(**kwargs)
        self.radius = radius
        self.mass = mass

    @property
    def name(self) -> str:
        return "lagrange_triangle"

    def generate(self) -> List[Body]:
        R = self.radius
        side = R * math.sqrt(3.0)
        omega = math.sqrt(3.0 * self.G * self.mass / side ** 3)
        speed = omega * R
        colors = ["orangered", "azure", "limegreen"]
        bodies = []
        for i, angle_deg in enumerate((90.0, 210.0, 330.0)):
            theta = math.radians(angle_deg)
            position = (R * math.cos(theta), R * math.sin(theta))
            velocity = (-speed * math.sin(theta), speed * math.cos(theta))
            bodies.append(self._body(f"Star {i + 1}", self.mass, position, velocity, colors[i]))
        return bodies


class FigureEight(Preset):
    """Chenciner-Montgomery figure-eight choreography.

    Reference values are for G = m = 1; velocities are rescaled by
    sqrt(G * m / scale) for the configured constant.
    """

    X1 = (0.97000436, -0.24308753)
    V3 = (-0.93240737, -0.86473146)

    def __init__(self, scale: float = 1.0, mass: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.scale = scale
        self.mass = mass

    @property
    def name(self) -> str:
        return "figure_eight"

    def generate(self) -> List[Body]:
        x1 = np.array(self.X1) * self.scale
        v3 = np.array(self.V3) * math.sqrt(self.G * self.mass / self.scale)
        v1 = -0.5 * v3
        return [
            self._body("Star 1", self.mass, x1, v1, "orangered"),
            self._body("Star 2", self.mass, -x1, v1, "azure"),
            self._body("Star 3", self.mass, (0.0, 0.0), v3, "limegreen"),
        ]


class BHHConfiguration(Preset):
    """Liao, Li and Yang (2022) collinear three-body periodic orbit.

    Reference values are for G = 1 with masses 1.0283, 0.9879 and 1.0;
    velocities are rescaled by sqrt(G / scale) and the whole system is
    shifted to its centre-of-mass frame.
    """

    MASSES = (1.0283, 0.9879, 1.0)
    X = (-1.62064, 1.0, 0.0)
    VY = (-0.65955, -0.14784, 0.8222)

    def __init__(self, scale: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.scale = scale

    @property
    def name(self) -> str:
        return "bhh"

    def generate(self) -> List[Body]:
        masses = np.array(self.MASSES)
        positions = np.column_stack([np.array(self.X) * self.scale, np.zeros(3)])
        velocities = np.column_stack(
            [np.zeros(3), np.array(self.VY) * math.sqrt(self.G / self.scale)]
        )
        # Reference momenta do not cancel exactly
        positions -= masses @ positions / masses.sum()
        velocities -= masses @ velocities / masses.sum()

        colors = ["orangered", "azure", "limegreen"]
        return [
            self._body(f"Star {i + 1}", float(masses[i]), positions[i], velocities[i], colors[i])
            for i in range(3)
        ]


class SunEarth(Preset):
    """Sun-like star with an Earth-mass planet on a circular 1 AU orbit."""

    EARTH_MASS = 3.003e-6  # Msun

    def __init__(self, semi_major_axis: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.semi_major_axis = semi_major_axis

    @property
    def name(self) -> str:
        return "sun_earth"

    def generate(self) -> List[Body]:
        a = self.semi_major_axis
        m_sun, m_earth = 1.0, self.EARTH_MASS
        total = m_sun + m_earth
        omega = math.sqrt(self.G * total / a ** 3)
        r_sun = a * m_earth / total
        r_earth = a * m_sun / total
        return [
            self._body("Sun", m_sun, (-r_sun, 0.0), (0.0, -omega * r_sun), "yellow", radius=8.0),
            self._body("Earth", m_earth, (r_earth, 0.0), (0.0, omega * r_earth), "deepskyblue", radius=3.0),
        ]


SCENARIO_PRESETS = [
    TwoBodyOrbit,
    PythagoreanThreeBody,
    LagrangeTriangle,
    FigureEight,
    BHHConfiguration,
    SunEarth,
]


def list_scenarios() -> List[str]:
    """Scenario names in catalog order."""
    return [preset_class().name for preset_class in SCENARIO_PRESETS]


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    presets = {preset_class().name: preset_class for preset_class in SCENARIO_PRESETS}
    preset_class = presets.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown scenario: {name}. Available: {list(presets.keys())}")
    return preset_class(**kwargs)


def default_scenarios(
    G: float = GRAVITATIONAL_CONSTANT,
    trail_capacity: int = DEFAULT_TRAIL_CAPACITY,
) -> Dict[int, Callable[[], List[Body]]]:
    """Index -> generator mapping consumed by SimulationEngine."""
    return {
        index: preset_class(G=G, trail_capacity=trail_capacity).generate
        for index, preset_class in enumerate(SCENARIO_PRESETS)
    }


def make_sunlike_body(position=(0.0, 0.0), velocity=(0.0, 0.0), trail_capacity: int = DEFAULT_TRAIL_CAPACITY) -> Body:
    """One solar mass at the given position, for adding to a running scenario."""
    return Body(
        name="Sun",
        mass=1.0,
        position=position,
        velocity=velocity,
        radius=5.0,
        color="yellow",
        trail_capacity=trail_capacity,
    )
