#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
States of Matter Simulation - Interactive Streamlit Application
================================================================================

Project:        States of Matter Simulation
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This is the Streamlit front-end for the states of matter simulation.
Users can:
- Pick a state (solid, liquid, gas) to load its preset
- Adjust temperature and pressure with sliders
- Watch the particles move under the current phase's rule
"""

import time
import streamlit as st
import matplotlib.pyplot as plt

from matter_sim.simulation import MatterSimulation, SimulationConfig, clamp_environment
from matter_sim.thermodynamics import (
    Phase, PHASE_RANGES, identify_phase, preset_for
)
from matter_sim.visualization import (
    VisualizationConfig, get_phase_color, render_phase_map, render_snapshot_png
)


st.set_page_config(
    page_title="States of Matter Simulation",
    page_icon="🧊",
    layout="wide"
)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'simulation' not in st.session_state:
        st.session_state.simulation = MatterSimulation(SimulationConfig())
    if 'selected_state' not in st.session_state:
        st.session_state.selected_state = Phase.LIQUID.value
    if 'temperature' not in st.session_state:
        st.session_state.temperature = st.session_state.simulation.environment.temperature
    if 'pressure' not in st.session_state:
        st.session_state.pressure = st.session_state.simulation.environment.pressure
    if 'vis_config' not in st.session_state:
        st.session_state.vis_config = VisualizationConfig()
    if 'running' not in st.session_state:
        st.session_state.running = False


def on_state_selected():
    """Load the preset of the selected state into the sliders."""
    temperature, pressure = preset_for(st.session_state.selected_state)
    st.session_state.temperature = temperature
    st.session_state.pressure = pressure


def render_sidebar():
    """Render the sidebar with controls."""
    sim = st.session_state.simulation
    config = sim.config

    st.sidebar.title("🧊 States of Matter")

    st.sidebar.selectbox(
        "Select State",
        [p.value for p in Phase],
        format_func=lambda name: name.capitalize(),
        key="selected_state",
        on_change=on_state_selected
    )

    st.sidebar.slider(
        "Temperature (°C)",
        min_value=config.temperature_range[0],
        max_value=config.temperature_range[1],
        step=0.1,
        key="temperature"
    )

    st.sidebar.slider(
        "Pressure (atm)",
        min_value=config.pressure_range[0],
        max_value=config.pressure_range[1],
        step=0.1,
        key="pressure"
    )

    st.sidebar.markdown("---")

    run_label = "⏸️ Pause" if st.session_state.running else "▶️ Run"
    if st.sidebar.button(run_label, use_container_width=True):
        st.session_state.running = not st.session_state.running
        st.rerun()

    st.session_state.vis_config.show_velocities = st.sidebar.checkbox(
        "Show Velocity Arrows", value=False
    )


def sync_environment():
    """Push slider values into the simulation when they changed."""
    sim = st.session_state.simulation
    temperature, pressure = clamp_environment(
        st.session_state.temperature, st.session_state.pressure, sim.config
    )

    env = sim.environment
    if (temperature, pressure) != (env.temperature, env.pressure):
        sim.set_environment(temperature, pressure)


def render_main_content():
    """Render the simulation canvas and the phase panel."""
    sim = st.session_state.simulation

    # One tick per rerun while running
    if st.session_state.running:
        sim.on_tick()

    snapshot = sim.get_snapshot()
    env = snapshot.environment
    info = identify_phase(env.temperature, env.pressure)

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("States of Matter Simulation")
        st.image(
            render_snapshot_png(snapshot, st.session_state.vis_config),
            use_container_width=True
        )

    with col2:
        color = get_phase_color(info.phase)
        st.markdown(f"""
        <div style="padding: 12px; border-radius: 8px; background-color: #f9fafb;">
            <span style="display: inline-block; width: 14px; height: 14px;
                         border-radius: 50%; background-color: {color};"></span>
            <b>Current State: {info.phase.label}</b>
            <p style="font-size: 14px; margin-top: 4px;">{info.description}</p>
        </div>
        """, unsafe_allow_html=True)

        st.metric("Temperature", f"{env.temperature:.1f}°C")
        st.metric("Pressure", f"{env.pressure:.2f} atm")
        st.metric("Tick", snapshot.tick)

        fig = render_phase_map(env, sim.config)
        st.pyplot(fig)
        plt.close(fig)

    range_cols = st.columns(len(PHASE_RANGES))
    for col, (phase, (t_range, p_range)) in zip(range_cols, PHASE_RANGES.items()):
        with col:
            st.markdown(f"**{phase.label}**  \n{t_range}  \n{p_range}")

    # Auto-refresh when running
    if st.session_state.running:
        time.sleep(sim.config.tick_interval)
        st.rerun()


def main():
    """Main application entry point."""
    initialize_session_state()
    render_sidebar()
    sync_environment()
    render_main_content()


if __name__ == "__main__":
    main()
