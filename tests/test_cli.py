"""Tests for the command-line driving loop."""

import json
import os
import tempfile
import pytest
from nbody_sim.cli.main import main, resolve_scenario_index, run_simulation
from nbody_sim.utils.config import SimulationConfig


def test_list_scenarios(capsys):
    main(['--list-scenarios'])
    out = capsys.readouterr().out

    assert "0: two_body" in out
    assert "3: figure_eight" in out


def test_resolve_scenario_index():
    assert resolve_scenario_index(2) == 2
    assert resolve_scenario_index("4") == 4
    assert resolve_scenario_index("Pythagorean") == 1
    with pytest.raises(ValueError):
        resolve_scenario_index("dragonfly")


def test_run_from_flags(capsys):
    main([
        '--scenario', 'two_body',
        '--integrator', 'yoshida4',
        '--timestep', '0.1',
        '--frames', '4',
        '--debug-every', '2',
    ])
    out = capsys.readouterr().out

    assert "Yoshida Fourth Order" in out
    assert "sub-steps/frame: 10" in out
    assert "Simulation complete!" in out


def test_unknown_scenario_exits(capsys):
    with pytest.raises(SystemExit):
        main(['--scenario', 'dragonfly', '--frames', '1'])
    assert "Unknown scenario" in capsys.readouterr().out


def test_non_finite_timestep_exits(capsys):
    with pytest.raises(SystemExit):
        main(['--timestep', 'nan', '--frames', '1'])
    assert "timestep must be finite" in capsys.readouterr().out


def test_config_file_with_override(capsys):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump({"scenario": 1, "integrator": "euler", "timestep": 0.02, "frames": 2}, f)
        temp_path = f.name

    try:
        main(['--config', temp_path, '--integrator', 'verlet'])
    finally:
        os.remove(temp_path)

    out = capsys.readouterr().out
    assert "pythagorean" in out
    assert "Verlet Integration" in out


def test_run_simulation_returns_engine():
    config = SimulationConfig(scenario="sun_earth", timestep=0.25, frames=4, debug_every=0)
    engine = run_simulation(config)

    assert abs(engine.time - 1.0) < 1e-12
    assert engine.step_count == 100
