#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Phase Classification and State Presets
================================================================================

Project:        States of Matter Simulation
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module decides which state of matter a (temperature, pressure) pair
belongs to, including:
- Phase identification (solid, liquid, gas)
- Canonical temperature/pressure presets for each phase
- Descriptions and display ranges for each phase
- Phase transition tracking
"""

from typing import Tuple, Optional, List, Union, Dict
from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    """Classical states of matter."""
    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"

    @property
    def label(self) -> str:
        """Capitalized name for display, e.g. 'Solid'."""
        return self.value.capitalize()


@dataclass(frozen=True)
class PhaseInfo:
    """Information about the phase of an environment."""
    phase: Phase
    temperature: float
    pressure: float
    description: str


# Phase boundaries (°C and atm)
FREEZING_POINT = 0.0        # At or below this may be solid
SOLID_MIN_PRESSURE = 0.8    # Solid needs at least this much pressure
BOILING_POINT = 100.0       # Above this may be gas
GAS_MAX_PRESSURE = 1.0      # Gas needs at most this much pressure


PHASE_DESCRIPTIONS: Dict[Phase, str] = {
    Phase.SOLID: "Particles vibrate in fixed positions with strong bonds",
    Phase.LIQUID: "Particles flow freely while maintaining some contact",
    Phase.GAS: "Particles move rapidly with large spaces between them",
}

# Approximate ranges shown to the user. Labels only, see classify_phase
# for the rule actually applied.
PHASE_RANGES: Dict[Phase, Tuple[str, str]] = {
    Phase.SOLID: ("≤ 0°C", "≥ 0.8 atm"),
    Phase.LIQUID: ("0-100°C", "0.5-3 atm"),
    Phase.GAS: ("≥ 100°C", "≤ 1 atm"),
}

# Canonical (temperature, pressure) for each selectable state
PRESETS: Dict[Phase, Tuple[float, float]] = {
    Phase.SOLID: (-10.0, 1.0),
    Phase.LIQUID: (25.0, 1.0),
    Phase.GAS: (120.0, 0.5),
}


def classify_phase(temperature: float, pressure: float) -> Phase:
    """
    Classify a (temperature, pressure) pair into a phase.

    Rules are checked in order and the first match wins:
    1. T <= 0 and P >= 0.8  -> solid
    2. T > 100 and P <= 1   -> gas
    3. otherwise            -> liquid

    Args:
        temperature: Temperature in °C
        pressure: Pressure in atm

    Returns:
        The phase
    """
    if temperature <= FREEZING_POINT and pressure >= SOLID_MIN_PRESSURE:
        return Phase.SOLID

    if temperature > BOILING_POINT and pressure <= GAS_MAX_PRESSURE:
        return Phase.GAS

    return Phase.LIQUID


def identify_phase(temperature: float, pressure: float) -> PhaseInfo:
    """
    Classify the environment and attach the phase description.

    Args:
        temperature: Temperature in °C
        pressure: Pressure in atm

    Returns:
        PhaseInfo for the environment
    """
    phase = classify_phase(temperature, pressure)
    return PhaseInfo(
        phase=phase,
        temperature=temperature,
        pressure=pressure,
        description=PHASE_DESCRIPTIONS[phase]
    )


def parse_phase(name: Union[Phase, str]) -> Phase:
    """
    Resolve a phase from a Phase or a case-insensitive name.

    Raises:
        ValueError: If the name is not a known phase
    """
    if isinstance(name, Phase):
        return name

    try:
        return Phase(str(name).strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in Phase)
        raise ValueError(f"Unknown state {name!r}, expected one of: {valid}") from None


def preset_for(name: Union[Phase, str]) -> Tuple[float, float]:
    """
    Look up the canonical (temperature, pressure) for a named state.

    Every preset classifies back to the phase it was selected for.

    Args:
        name: Phase or phase name ("solid", "Liquid", ...)

    Returns:
        (temperature, pressure) tuple
    """
    return PRESETS[parse_phase(name)]


class PhaseTransitionTracker:
    """
    Track phase transitions over time.

    Records the phase every time the environment is classified and
    reports when it differs from the previous one.
    """

    def __init__(self, history_length: int = 100):
        self.history_length = history_length
        self.phase_history: List[Phase] = []
        self.tick_history: List[int] = []

        self.transition_events: List[Tuple[int, Phase, Phase]] = []

    @property
    def current_phase(self) -> Optional[Phase]:
        return self.phase_history[-1] if self.phase_history else None

    def update(self, tick: int, phase: Phase) -> Optional[Tuple[Phase, Phase]]:
        """
        Record a new classification.

        Args:
            tick: Simulation tick at which the phase was observed
            phase: Observed phase

        Returns:
            (old_phase, new_phase) if a transition happened, else None
        """
        previous = self.current_phase

        self.phase_history.append(phase)
        self.tick_history.append(tick)

        if len(self.phase_history) > self.history_length:
            self.phase_history.pop(0)
            self.tick_history.pop(0)

        if previous is not None and previous != phase:
            self.transition_events.append((tick, previous, phase))
            return (previous, phase)

        return None

    def get_recent_transitions(self, n: int = 5) -> List[Tuple[int, Phase, Phase]]:
        """Get the n most recent phase transitions."""
        return self.transition_events[-n:]
