#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Snapshot Visualization Module
================================================================================

Project:        States of Matter Simulation
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module draws simulation snapshots for the command line and Streamlit
front-ends:
- Phase colors
- Particle rendering for Matplotlib and Streamlit
- Phase map over the temperature/pressure input range
- Live animation driven by the simulation tick
"""

import io
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.colors import ListedColormap
from typing import Tuple, Optional, Dict
from dataclasses import dataclass

from .physics import DOMAIN_MIN, DOMAIN_MAX
from .simulation import MatterSimulation, SimulationConfig, Snapshot, Environment
from .thermodynamics import Phase, classify_phase


PHASE_COLORS: Dict[Phase, str] = {
    Phase.SOLID: "#2563eb",   # Dark blue
    Phase.LIQUID: "#60a5fa",  # Blue
    Phase.GAS: "#bfdbfe",     # Pale blue
}

# Row order of the phase map
PHASE_ORDER = (Phase.SOLID, Phase.LIQUID, Phase.GAS)
PHASE_CMAP = ListedColormap([PHASE_COLORS[p] for p in PHASE_ORDER], name="phase")


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    marker_size: float = 60.0         # Scatter area at spacing 1.0
    background_color: str = "#f3f4f6"
    edge_color: str = "#1e3a8a"
    show_velocities: bool = False
    invert_y: bool = True             # y grows downward, like the web canvas
    show_title: bool = True
    figsize: Tuple[float, float] = (8, 4)
    dpi: int = 100


def get_phase_color(phase: Phase) -> str:
    """Get the display color of a phase."""
    return PHASE_COLORS[phase]


def render_snapshot_matplotlib(
    snapshot: Snapshot,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render a snapshot using Matplotlib.

    Marker area scales with spacing squared, so compressed ensembles are
    drawn with smaller particles.

    Args:
        snapshot: Snapshot to draw
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig = plt.figure(figsize=config.figsize)
        ax = fig.add_axes([0, 0, 1, 1])
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)

    positions = snapshot.positions
    color = get_phase_color(snapshot.phase)

    if snapshot.n_particles > 0:
        ax.scatter(
            positions[:, 0], positions[:, 1],
            s=config.marker_size * snapshot.spacing ** 2,
            c=color,
            edgecolors=config.edge_color,
            linewidths=0.3
        )

    if config.show_velocities and snapshot.n_particles > 0:
        dx = np.array([p.dx for p in snapshot.particles])
        dy = np.array([p.dy for p in snapshot.particles])
        ax.quiver(
            positions[:, 0], positions[:, 1], dx, dy,
            color=config.edge_color, alpha=0.5,
            angles='xy', scale_units='xy', scale=0.2, width=0.003
        )

    ax.set_xlim(DOMAIN_MIN, DOMAIN_MAX)
    if config.invert_y:
        ax.set_ylim(DOMAIN_MAX, DOMAIN_MIN)
    else:
        ax.set_ylim(DOMAIN_MIN, DOMAIN_MAX)

    if config.show_title:
        env = snapshot.environment
        ax.set_title(
            f"{snapshot.phase.label} (T = {env.temperature:.1f}°C, "
            f"P = {env.pressure:.2f} atm)"
        )

    ax.set_xticks([])
    ax.set_yticks([])

    return fig


def render_snapshot_png(
    snapshot: Snapshot,
    config: Optional[VisualizationConfig] = None
) -> bytes:
    """
    Render a snapshot and return PNG bytes for Streamlit.

    Args:
        snapshot: Snapshot to draw
        config: Visualization configuration

    Returns:
        PNG image as bytes
    """
    if config is None:
        config = VisualizationConfig()

    fig = render_snapshot_matplotlib(snapshot, config)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=config.dpi,
                facecolor=config.background_color, edgecolor='none')
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def compute_phase_map(
    config: Optional[SimulationConfig] = None,
    resolution: Tuple[int, int] = (201, 50)
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Classify a grid over the temperature and pressure ranges.

    Args:
        config: Simulation configuration holding the ranges
        resolution: (n_temperature, n_pressure) grid points

    Returns:
        temperatures: Temperature axis
        pressures: Pressure axis
        phase_index: [n_pressure, n_temperature] indices into PHASE_ORDER
    """
    config = config or SimulationConfig()
    n_t, n_p = resolution

    temperatures = np.linspace(*config.temperature_range, n_t)
    pressures = np.linspace(*config.pressure_range, n_p)

    phase_index = np.zeros((n_p, n_t), dtype=np.int64)
    for j, p in enumerate(pressures):
        for i, t in enumerate(temperatures):
            phase_index[j, i] = PHASE_ORDER.index(classify_phase(t, p))

    return temperatures, pressures, phase_index


def render_phase_map(
    environment: Optional[Environment] = None,
    config: Optional[SimulationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render the phase regions over the input ranges, marking the environment.

    Args:
        environment: Optional current environment to mark
        config: Simulation configuration holding the ranges
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    config = config or SimulationConfig()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 4))
    else:
        fig = ax.figure

    ax.clear()

    temperatures, pressures, phase_index = compute_phase_map(config)
    ax.pcolormesh(
        temperatures, pressures, phase_index,
        cmap=PHASE_CMAP, vmin=-0.5, vmax=len(PHASE_ORDER) - 0.5,
        shading='nearest'
    )

    for phase in PHASE_ORDER:
        ax.plot([], [], 's', color=PHASE_COLORS[phase], label=phase.label)

    if environment is not None:
        ax.plot(environment.temperature, environment.pressure,
                'ko', markersize=8, label='Current')

    ax.set_xlabel('Temperature (°C)')
    ax.set_ylabel('Pressure (atm)')
    ax.set_title('Phase Map')
    ax.legend(loc='upper right', fontsize=8)

    return fig


def create_animation(
    simulation: MatterSimulation,
    n_frames: int = 200,
    config: Optional[VisualizationConfig] = None
) -> animation.FuncAnimation:
    """
    Create an animation that ticks the simulation once per frame.

    Args:
        simulation: Simulation to advance
        n_frames: Number of frames
        config: Visualization configuration

    Returns:
        Matplotlib animation
    """
    if config is None:
        config = VisualizationConfig()

    fig, ax = plt.subplots(1, 1, figsize=config.figsize)

    def update(frame):
        snapshot = simulation.on_tick()
        render_snapshot_matplotlib(snapshot, config, ax=ax)
        return ax,

    ani = animation.FuncAnimation(
        fig, update, frames=n_frames,
        interval=simulation.config.tick_interval * 1000, blit=False
    )

    return ani
