"""Basic example of using the N-body simulator."""

from nbody_sim import SimulationEngine, IntegrationMethod


def main():
    """Run the figure-eight choreography with each integrator."""
    engine = SimulationEngine(method=IntegrationMethod.EULER)
    engine.load_scenario(3)

    for _ in IntegrationMethod:
        print(f"{engine.integrator_name} on {engine.scenario_name}")
        initial_energy = engine.get_energy()

        # One simulated year per frame, 0.01 yr sub-steps
        for frame in range(5):
            engine.update(1.0)
            energy = engine.get_energy()
            print(f"  t={engine.time:.1f} yr  E={energy:.6f}  dE/E0={(energy - initial_energy) / abs(initial_energy):.2e}")

        # Moves to the next scheme and restarts the scenario
        engine.switch_integrator()

    print("Simulation complete!")


if __name__ == "__main__":
    main()
