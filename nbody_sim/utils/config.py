"""Configuration management."""

import json
import yaml
from typing import Union
from pathlib import Path
from dataclasses import dataclass, asdict
from nbody_sim.physics.body import DEFAULT_TRAIL_CAPACITY
from nbody_sim.physics.force_calculator import GRAVITATIONAL_CONSTANT, EPSILON_DEFAULT


@dataclass
class SimulationConfig:
    """Simulation configuration."""
    # Scenario: catalog name or index
    scenario: Union[str, int] = 0
    integrator: str = "verlet"

    # Time stepping (years)
    timestep: float = 10.0
    target_substep: float = 0.01

    # Physics
    G: float = GRAVITATIONAL_CONSTANT
    epsilon: float = EPSILON_DEFAULT
    force_method: str = "direct"
    trail_capacity: int = DEFAULT_TRAIL_CAPACITY

    # Driving loop
    frames: int = 100
    render: bool = False
    debug_every: int = 10


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return SimulationConfig(**(data or {}))


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
