"""Preset scenario generators for few-body simulations."""

from nbody_sim.presets.base import Preset
from nbody_sim.presets.scenarios import (
    TwoBodyOrbit,
    PythagoreanThreeBody,
    LagrangeTriangle,
    FigureEight,
    BHHConfiguration,
    SunEarth,
    SCENARIO_PRESETS,
    default_scenarios,
    get_preset,
    list_scenarios,
    make_sunlike_body,
)

__all__ = [
    "Preset",
    "TwoBodyOrbit",
    "PythagoreanThreeBody",
    "LagrangeTriangle",
    "FigureEight",
    "BHHConfiguration",
    "SunEarth",
    "SCENARIO_PRESETS",
    "default_scenarios",
    "get_preset",
    "list_scenarios",
    "make_sunlike_body",
]
