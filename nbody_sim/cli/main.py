"""CLI main entry point."""

import argparse
import sys
from nbody_sim.physics.simulator import SimulationEngine
from nbody_sim.physics.diagnostics import relative_energy_drift
from nbody_sim.presets.scenarios import list_scenarios
from nbody_sim.utils.config import SimulationConfig, load_config


def resolve_scenario_index(scenario) -> int:
    """Map a scenario name or index (int or numeric string) to an index."""
    if isinstance(scenario, int):
        return scenario
    if str(scenario).isdigit():
        return int(scenario)
    names = list_scenarios()
    if scenario.lower() not in names:
        raise ValueError(f"Unknown scenario: {scenario}. Available: {names}")
    return names.index(scenario.lower())


def build_config(args) -> SimulationConfig:
    """Config file values, overridden by any flags given on the command line."""
    config = load_config(args.config) if args.config else SimulationConfig()
    overrides = {
        'scenario': args.scenario,
        'integrator': args.integrator,
        'timestep': args.timestep,
        'target_substep': args.substep,
        'epsilon': args.epsilon,
        'trail_capacity': args.trail_length,
        'frames': args.frames,
        'debug_every': args.debug_every,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.render:
        config.render = True
    return config


def run_simulation(config: SimulationConfig):
    """Run a simulation."""
    engine = SimulationEngine.from_config(config)
    engine.load_scenario(resolve_scenario_index(config.scenario))

    renderer = None
    if config.render:
        from nbody_sim.render.renderer_2d import Renderer2D
        renderer = Renderer2D()

    print(f"Running simulation: {engine.scenario_name} with {len(engine.bodies)} bodies")
    print(
        f"Integrator: {engine.integrator_name}, timestep: {config.timestep} yr, "
        f"sub-steps/frame: {engine.substep_count(config.timestep)}, eps: {engine.epsilon:.4g} AU"
    )

    K0, U0, E0 = engine.diagnostics.compute_energies(engine.bodies)
    print(f"{'Frame':<8} {'Time':<10} {'K':<14} {'U':<14} {'E':<14} {'dE/E0':<10}")
    print("-" * 72)
    print(f"{0:<8} {0.0:<10.2f} {K0:<14.6g} {U0:<14.6g} {E0:<14.6g} {0.0:<10.2e}")

    for frame in range(1, config.frames + 1):
        engine.update(config.timestep)

        if renderer:
            renderer.render(engine)

        due = config.debug_every > 0 and frame % config.debug_every == 0
        if due or frame == config.frames:
            K, U, E = engine.diagnostics.compute_energies(engine.bodies)
            drift = relative_energy_drift(E0, E)
            print(f"{frame:<8} {engine.time:<10.2f} {K:<14.6g} {U:<14.6g} {E:<14.6g} {drift:<10.2e}")

    if renderer:
        renderer.close()

    print("Simulation complete!")
    return engine


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="N-body Simulator - planar few-body gravity")

    parser.add_argument('--config', type=str, default=None,
                       help='Load settings from a .json or .yaml file (flags override it)')
    parser.add_argument('--scenario', type=str, default=None,
                       help='Scenario name or index (see --list-scenarios)')
    parser.add_argument('--integrator', type=str, default=None,
                       choices=['euler', 'verlet', 'yoshida4'],
                       help='Numerical integrator (default: verlet)')
    parser.add_argument('--timestep', type=float, default=None,
                       help='Simulated years per frame (default: 10)')
    parser.add_argument('--substep', type=float, default=None,
                       help='Largest integration sub-step in years (default: 0.01)')
    parser.add_argument('--frames', type=int, default=None,
                       help='Number of frames to run (default: 100)')
    parser.add_argument('--epsilon', type=float, default=None,
                       help='Softening length in AU (default: 1e-3)')
    parser.add_argument('--trail-length', type=int, default=None,
                       help='Trail capacity per body (default: 1000)')
    parser.add_argument('--debug-every', type=int, default=None,
                       help='Print diagnostics every N frames (default: 10)')
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--list-scenarios', action='store_true',
                       help='List available scenarios and exit')

    args = parser.parse_args(argv)

    if args.list_scenarios:
        print("Available scenarios:")
        for index, name in enumerate(list_scenarios()):
            print(f"  {index}: {name}")
        return

    try:
        config = build_config(args)
        run_simulation(config)
    except ValueError as e:
        print(e)
        sys.exit(1)


if __name__ == '__main__':
    main()
