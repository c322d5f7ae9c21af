#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.animation import FuncAnimation
from matter_sim.simulation import SimulationConfig, create_simulation
from matter_sim.thermodynamics import Phase
from matter_sim.visualization import (
    PHASE_COLORS,
    PHASE_ORDER,
    VisualizationConfig,
    compute_phase_map,
    create_animation,
    get_phase_color,
    render_phase_map,
    render_snapshot_matplotlib,
    render_snapshot_png
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPhaseColors:
    """Tests for phase colors."""

    def test_every_phase_colored(self):
        for phase in Phase:
            assert get_phase_color(phase) == PHASE_COLORS[phase]

    def test_colors_distinct(self):
        assert len(set(PHASE_COLORS.values())) == len(Phase)


class TestRenderSnapshot:
    """Tests for particle rendering."""

    def test_scatter_all_particles(self):
        """One marker per particle, inside the container limits."""
        snapshot = create_simulation("liquid", seed=1).get_snapshot()
        fig = render_snapshot_matplotlib(snapshot)
        ax = fig.axes[0]

        offsets = ax.collections[0].get_offsets()
        assert len(offsets) == 30
        assert ax.get_xlim() == (0.0, 100.0)
        assert ax.get_ylim() == (100.0, 0.0)

    def test_marker_size_follows_spacing(self):
        """Higher pressure draws smaller particles."""
        config = VisualizationConfig(marker_size=100.0)

        sim = create_simulation("liquid", seed=2)
        loose = render_snapshot_matplotlib(sim.get_snapshot(), config)
        sim.set_environment(25.0, 4.0)
        dense = render_snapshot_matplotlib(sim.get_snapshot(), config)

        loose_size = loose.axes[0].collections[0].get_sizes()[0]
        dense_size = dense.axes[0].collections[0].get_sizes()[0]
        assert loose_size == pytest.approx(100.0 * 0.8 ** 2)
        assert dense_size == pytest.approx(100.0 * 0.2 ** 2)

    def test_existing_axes(self):
        fig, ax = plt.subplots()
        snapshot = create_simulation("gas", seed=3).get_snapshot()
        assert render_snapshot_matplotlib(snapshot, ax=ax) is fig
        assert "Gas" in ax.get_title()

    def test_velocity_arrows(self):
        snapshot = create_simulation("gas", seed=4).get_snapshot()
        fig = render_snapshot_matplotlib(snapshot, VisualizationConfig(show_velocities=True))
        assert len(fig.axes[0].collections) == 2

    def test_png_bytes(self):
        snapshot = create_simulation("solid", seed=5).get_snapshot()
        data = render_snapshot_png(snapshot)
        assert data.startswith(b"\x89PNG")


class TestPhaseMap:
    """Tests for the phase map."""

    def test_grid_shape(self):
        temperatures, pressures, phase_index = compute_phase_map(resolution=(21, 10))
        assert temperatures.shape == (21,)
        assert pressures.shape == (10,)
        assert phase_index.shape == (10, 21)

    def test_corners(self):
        """Cold/high pressure is solid, hot/low pressure is gas."""
        _, _, phase_index = compute_phase_map(SimulationConfig())
        assert PHASE_ORDER[phase_index[-1, 0]] is Phase.SOLID
        assert PHASE_ORDER[phase_index[0, -1]] is Phase.GAS
        assert PHASE_ORDER[phase_index[0, 0]] is Phase.LIQUID

    def test_render_marks_environment(self):
        sim = create_simulation("gas", seed=6)
        fig = render_phase_map(sim.environment)
        lines = fig.axes[0].get_lines()
        assert any(
            line.get_xydata().shape == (1, 2)
            and np.allclose(line.get_xydata(), [[120.0, 0.5]])
            for line in lines
        )


class TestAnimation:
    """Tests for the live animation."""

    def test_create_animation(self):
        sim = create_simulation("liquid", seed=7)
        ani = create_animation(sim, n_frames=5)
        assert isinstance(ani, FuncAnimation)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
