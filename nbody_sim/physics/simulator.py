"""Main simulation controller."""

import math
from enum import Enum
from typing import Callable, Dict, List, Optional
from nbody_sim.physics.body import Body, DEFAULT_TRAIL_CAPACITY
from nbody_sim.physics.force_calculator import (
    ForceCalculator,
    GRAVITATIONAL_CONSTANT,
    EPSILON_DEFAULT,
)
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import EulerIntegrator
from nbody_sim.physics.integrators.verlet import VerletIntegrator
from nbody_sim.physics.integrators.yoshida import YoshidaIntegrator
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.presets.scenarios import default_scenarios, list_scenarios

ScenarioProvider = Dict[int, Callable[[], List[Body]]]


class IntegrationMethod(Enum):
    """Selectable integration schemes, in switching order."""

    EULER = "euler"
    VERLET = "verlet"
    YOSHIDA4 = "yoshida4"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def create(self, force_calculator: ForceCalculator) -> Integrator:
        if self is IntegrationMethod.EULER:
            return EulerIntegrator(force_calculator)
        if self is IntegrationMethod.VERLET:
            return VerletIntegrator(force_calculator)
        return YoshidaIntegrator(force_calculator)

    def next(self) -> "IntegrationMethod":
        members = list(IntegrationMethod)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_name(cls, name: str) -> "IntegrationMethod":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(
                f"Unknown integrator: {name}. Available: {[m.value for m in cls]}"
            ) from None


_DISPLAY_NAMES = {
    IntegrationMethod.EULER: "Euler's Method",
    IntegrationMethod.VERLET: "Verlet Integration",
    IntegrationMethod.YOSHIDA4: "Yoshida Fourth Order",
}


class SimulationEngine:
    """Main simulation controller.

    Owns the body list, the gravity model, the active integrator and the
    sub-stepping policy. The driving loop calls update() once per frame and
    reads bodies and metadata back; it never mutates them.
    """

    def __init__(
        self,
        scenarios: Optional[ScenarioProvider] = None,
        scenario_names: Optional[Dict[int, str]] = None,
        method: IntegrationMethod = IntegrationMethod.VERLET,
        G: float = GRAVITATIONAL_CONSTANT,
        epsilon: float = EPSILON_DEFAULT,
        target_substep: float = 0.01,
        force_method: str = "direct",
        trail_capacity: int = DEFAULT_TRAIL_CAPACITY,
    ):
        """Initialize engine.

        No scenario is loaded until load_scenario() is called.

        Args:
            scenarios: Index -> body-list factory (default: built-in catalog)
            scenario_names: Index -> display name (default: catalog names, or
                the index itself for a custom provider)
            method: Initial integration method (default: Verlet)
            G: Gravitational constant in AU^3 / (Msun yr^2)
            epsilon: Softening length in AU
            target_substep: Largest sub-step update() will take, in years
            force_method: 'direct' or 'vectorized' force evaluation
            trail_capacity: Trail capacity for bodies of the built-in catalog
        """
        if target_substep <= 0:
            raise ValueError(f"Target sub-step must be positive, got {target_substep}")

        self.force_calculator = ForceCalculator(G=G, epsilon=epsilon, method=force_method)
        self.diagnostics = Diagnostics(G=G, epsilon=epsilon)
        if scenarios is None:
            scenarios = default_scenarios(G, trail_capacity)
            if scenario_names is None:
                scenario_names = dict(enumerate(list_scenarios()))
        self.scenarios = scenarios
        self.scenario_names = dict(scenario_names or {})
        if 0 not in self.scenarios:
            raise ValueError("Scenario provider must define index 0")

        self.method = method
        self.integrator = method.create(self.force_calculator)
        self.target_substep = target_substep

        self._bodies: List[Body] = []
        self.scenario_index = 0
        self.time = 0.0
        self.step_count = 0

        self.on_step_callback: Optional[Callable] = None

    @classmethod
    def from_config(
        cls,
        config,
        scenarios: Optional[ScenarioProvider] = None,
        scenario_names: Optional[Dict[int, str]] = None,
    ) -> "SimulationEngine":
        """Build an engine from a SimulationConfig."""
        return cls(
            scenarios=scenarios,
            scenario_names=scenario_names,
            method=IntegrationMethod.from_name(config.integrator),
            G=config.G,
            epsilon=config.epsilon,
            target_substep=config.target_substep,
            force_method=config.force_method,
            trail_capacity=config.trail_capacity,
        )

    @property
    def bodies(self) -> List[Body]:
        return self._bodies

    @property
    def G(self) -> float:
        return self.force_calculator.G

    @property
    def epsilon(self) -> float:
        return self.force_calculator.epsilon

    @property
    def integrator_name(self) -> str:
        return self.method.display_name

    @property
    def scenario_name(self) -> str:
        return self.scenario_names.get(self.scenario_index, str(self.scenario_index))

    def add_body(self, body: Body):
        self._bodies.append(body)

    def clear_bodies(self):
        self._bodies = []

    def load_scenario(self, index: int = 0):
        """Replace all bodies with a fresh copy of scenario index.

        Unknown indices fall back to scenario 0.
        """
        if index not in self.scenarios:
            index = 0
        self.scenario_index = index
        self.clear_bodies()
        for body in self.scenarios[index]():
            self.add_body(body)
        self.time = 0.0
        self.step_count = 0

    def reset(self):
        """Reload the current scenario's initial conditions."""
        self.load_scenario(self.scenario_index)

    def switch_scenario(self):
        """Advance to the next scenario, wrapping to 0 past the end."""
        self.load_scenario(self.scenario_index + 1)

    def switch_integrator(self, method: Optional[IntegrationMethod] = None):
        """Change integration method and reset the current scenario.

        State produced by one scheme is not carried into another.

        Args:
            method: Method to use (default: next one in IntegrationMethod order)
        """
        self.method = method if method is not None else self.method.next()
        self.integrator = self.method.create(self.force_calculator)
        self.reset()

    def substep_count(self, timestep: float) -> int:
        """Number of sub-steps update(timestep) will take."""
        if not math.isfinite(timestep):
            raise ValueError(f"timestep must be finite, got {timestep}")
        if timestep <= 0:
            return 0
        # Tolerance keeps e.g. 0.07 / 0.01 from rounding up to 8
        return max(1, math.ceil(timestep / self.target_substep - 1e-9))

    def update(self, timestep: float):
        """Advance the simulation by timestep years.

        The step is split into ceil(timestep / target_substep) equal
        sub-steps. Trails are recorded on the first and the middle sub-step
        only, so trail growth per call does not depend on timestep.

        Args:
            timestep: Simulated years to advance (<= 0 does nothing)

        Raises:
            ValueError: If timestep is NaN or infinite
        """
        steps = self.substep_count(timestep)
        if steps == 0:
            return
        dt = timestep / steps
        middle = steps // 2

        for i in range(steps):
            self.integrator.advance(self._bodies, dt, record_trail=(i == 0 or i == middle))
            self.step_count += 1
        self.time += timestep

        if self.on_step_callback:
            self.on_step_callback(self)

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        return self.diagnostics.compute_total_energy(self._bodies)

    def get_kinetic_energy(self) -> float:
        return self.diagnostics.compute_energies(self._bodies)[0]

    def get_potential_energy(self) -> float:
        return self.diagnostics.compute_energies(self._bodies)[1]
