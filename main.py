#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
States of Matter Simulation - Command Line Interface
================================================================================

Project:        States of Matter Simulation
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Command line interface for running and inspecting the states of matter
simulation.
"""

import argparse
import logging
import time
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional

from matter_sim.simulation import (
    MatterSimulation, SimulationConfig, clamp_environment, create_simulation
)
from matter_sim.thermodynamics import (
    Phase, PHASE_RANGES, PRESETS, classify_phase, identify_phase
)
from matter_sim.visualization import (
    VisualizationConfig, create_animation, render_phase_map,
    render_snapshot_matplotlib
)


def build_simulation(
    state: str,
    temperature: Optional[float],
    pressure: Optional[float],
    seed: Optional[int]
) -> MatterSimulation:
    """Create a simulation from a preset, overriding T/P when given."""
    sim = create_simulation(state, seed=seed)

    if temperature is not None or pressure is not None:
        env = sim.environment
        t, p = clamp_environment(
            env.temperature if temperature is None else temperature,
            env.pressure if pressure is None else pressure,
            sim.config
        )
        sim.set_environment(t, p)

    return sim


def print_phase_table():
    """Print the presets and how sample environments classify."""
    print("=" * 60)
    print("States of Matter - Phase Rules")
    print("=" * 60)

    print("\nPresets:")
    for phase, (t, p) in PRESETS.items():
        result = classify_phase(t, p)
        mark = "✓" if result is phase else "✗"
        print(f"  {phase.label:<7} T = {t:6.1f}°C  P = {p:4.2f} atm  -> {result.label:<7} {mark}")

    print("\nDisplay ranges:")
    for phase, (t_range, p_range) in PHASE_RANGES.items():
        print(f"  {phase.label:<7} {t_range:<9} {p_range}")

    print("\nSample environments:")
    config = SimulationConfig()
    for t in np.linspace(*config.temperature_range, 9):
        row = "  ".join(
            f"{classify_phase(t, p).label:<6}"
            for p in (0.1, 0.5, 0.8, 1.0, 3.0, 5.0)
        )
        print(f"  T = {t:6.1f}°C  {row}")
    print("  (columns: P = 0.1, 0.5, 0.8, 1.0, 3.0, 5.0 atm)")


def run_headless(sim: MatterSimulation, n_ticks: int = 200, plot: bool = True):
    """
    Advance the simulation without a display and report the result.

    Args:
        sim: Simulation to run
        n_ticks: Number of ticks
        plot: Save a picture of the final snapshot
    """
    print("=" * 60)
    print("States of Matter - Headless Run")
    print("=" * 60)

    env = sim.environment
    info = identify_phase(env.temperature, env.pressure)
    print(f"\nT = {env.temperature:.1f}°C, P = {env.pressure:.2f} atm")
    print(f"Phase: {info.phase.label} - {info.description}")

    print(f"\nRunning {n_ticks} ticks...")
    t_start = time.time()
    snapshot = sim.run(n_ticks)
    t_end = time.time()

    elapsed = t_end - t_start
    print(f"Completed in {elapsed:.3f} seconds")
    if elapsed > 0:
        print(f"Ticks per second: {n_ticks / elapsed:.1f}")

    positions = snapshot.positions
    speeds = [np.hypot(p.dx, p.dy) for p in snapshot.particles]
    on_wall = np.sum((positions == 0.0) | (positions == 100.0))

    print(f"\nFinal State (tick {snapshot.tick}):")
    print(f"  Particles:       {snapshot.n_particles}")
    print(f"  Spacing:         {snapshot.spacing[0]:.2f}")
    print(f"  Mean speed:      {np.mean(speeds):.3f} per tick")
    print(f"  Mean position:   ({positions[:, 0].mean():.1f}, {positions[:, 1].mean():.1f})")
    print(f"  On a wall:       {on_wall} coordinates")

    if plot:
        fig, axes = plt.subplots(1, 2, figsize=(14, 4))
        config = VisualizationConfig()
        render_snapshot_matplotlib(snapshot, config, ax=axes[0])
        render_phase_map(snapshot.environment, sim.config, ax=axes[1])
        plt.tight_layout()
        plt.savefig('headless_run.png', dpi=150)
        print(f"\nPlot saved to headless_run.png")
        plt.close(fig)


def run_animation(sim: MatterSimulation, n_frames: int = 200, save: bool = False):
    """
    Show a live animation of the simulation.

    Args:
        sim: Simulation to animate
        n_frames: Number of animation frames
        save: Save to a GIF instead of showing a window
    """
    print("=" * 60)
    print("States of Matter - Animation")
    print("=" * 60)

    ani = create_animation(sim, n_frames=n_frames)

    if save:
        print("Saving animation (this may take a while)...")
        fps = int(round(1.0 / sim.config.tick_interval))
        ani.save('simulation_animation.gif', writer='pillow', fps=fps)
        print("Animation saved to simulation_animation.gif")
    else:
        plt.show()


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="States of Matter Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --table                   Show phase rules and presets
  python main.py --run --state gas         Run the gas preset headless
  python main.py --animate -t -5 -p 2      Animate a custom environment
  python main.py --app                     Launch Streamlit app
        """
    )

    parser.add_argument('--table', action='store_true',
                        help='Print phase rules and presets')
    parser.add_argument('--run', action='store_true',
                        help='Run headless and save a plot')
    parser.add_argument('--animate', action='store_true',
                        help='Show a live animation')
    parser.add_argument('--save', action='store_true',
                        help='Save the animation as a GIF instead of showing it')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--state', choices=[p.value for p in Phase],
                        default=Phase.LIQUID.value,
                        help='Starting preset (default: liquid)')
    parser.add_argument('--temperature', '-t', type=float, default=None,
                        help='Temperature in °C, overrides the preset')
    parser.add_argument('--pressure', '-p', type=float, default=None,
                        help='Pressure in atm, overrides the preset')
    parser.add_argument('--ticks', '-n', type=int, default=200,
                        help='Number of ticks or frames (default: 200)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.table:
        print_phase_table()
    elif args.run:
        sim = build_simulation(args.state, args.temperature, args.pressure, args.seed)
        run_headless(sim, n_ticks=args.ticks)
    elif args.animate:
        sim = build_simulation(args.state, args.temperature, args.pressure, args.seed)
        run_animation(sim, n_frames=args.ticks, save=args.save)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --table, --run, --animate, or --app")


if __name__ == "__main__":
    main()
