#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Particle Ensemble and Motion Rules
================================================================================

Project:        States of Matter Simulation
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module implements the particle ensemble and the per-tick motion rules
of the states of matter simulation. It is a pedagogical model, not a
molecular dynamics one: particles never interact, and how they move depends
only on the current phase.

Kinematics are derived from the environment:
    speed   = T / 25
    spacing = max(1 - P / 5, 0.2)

Motion per tick:
    - Solid:         x += (u - 0.5) * 0.5     (random jitter, velocity unused)
    - Liquid / Gas:  x += dx, and dx flips sign if x left [0, 100]

After either rule both coordinates are clamped to [0, 100]. Positions are
percentages of the container, not physical units.
"""

import math
import logging
import numpy as np
from numba import jit
from typing import Tuple, Optional, Any
from dataclasses import dataclass

from .thermodynamics import Phase, parse_phase

logger = logging.getLogger(__name__)


# Container bounds (percent of container)
DOMAIN_MIN = 0.0
DOMAIN_MAX = 100.0

# Kinematic scales
SPEED_DIVISOR = 25.0        # speed = T / SPEED_DIVISOR
PRESSURE_SCALE = 5.0        # spacing = 1 - P / PRESSURE_SCALE
MIN_SPACING = 0.2           # spacing never drops below this
SOLID_JITTER = 0.5          # Peak-to-peak jitter per tick in the solid phase


@dataclass(frozen=True)
class KinematicParameters:
    """Ensemble-wide motion parameters derived from the environment."""
    speed: float      # Velocity scale, signed (negative below 0°C)
    spacing: float    # Packing/render scale in [0.2, 1.0]


@dataclass(frozen=True)
class Particle:
    """Read-only record of a single particle."""
    id: int
    x: float
    y: float
    dx: float
    dy: float
    spacing: float


@dataclass
class Ensemble:
    """
    Fixed-size collection of particles, stored as arrays.

    Row i of every array belongs to the particle with id ids[i].
    """
    ids: np.ndarray
    positions: np.ndarray     # Nx2, percent of container
    velocities: np.ndarray    # Nx2, displacement per tick
    spacing: np.ndarray       # N

    @property
    def n_particles(self) -> int:
        return self.positions.shape[0]

    def __len__(self) -> int:
        return self.n_particles

    def particles(self) -> Tuple[Particle, ...]:
        """Return the particles as immutable records, in id order."""
        return tuple(
            Particle(
                id=int(self.ids[i]),
                x=float(self.positions[i, 0]),
                y=float(self.positions[i, 1]),
                dx=float(self.velocities[i, 0]),
                dy=float(self.velocities[i, 1]),
                spacing=float(self.spacing[i])
            )
            for i in range(self.n_particles)
        )

    def copy(self) -> "Ensemble":
        return Ensemble(
            ids=self.ids.copy(),
            positions=self.positions.copy(),
            velocities=self.velocities.copy(),
            spacing=self.spacing.copy()
        )


def validate_environment(temperature: float, pressure: float) -> Tuple[float, float]:
    """
    Check that temperature and pressure are finite numbers.

    Range limits are not enforced here; callers clamp their inputs.
    NaN and infinite values are rejected.

    Returns:
        (temperature, pressure) as floats

    Raises:
        ValueError: If either value is NaN or infinite
    """
    temperature = float(temperature)
    pressure = float(pressure)

    if not math.isfinite(temperature):
        raise ValueError(f"Temperature must be finite, got {temperature}")
    if not math.isfinite(pressure):
        raise ValueError(f"Pressure must be finite, got {pressure}")

    return temperature, pressure


def derive_kinematics(temperature: float, pressure: float) -> KinematicParameters:
    """
    Derive motion parameters from the environment.

    Args:
        temperature: Temperature in °C
        pressure: Pressure in atm

    Returns:
        KinematicParameters with speed and spacing
    """
    speed = temperature / SPEED_DIVISOR
    spacing = max(1.0 - pressure / PRESSURE_SCALE, MIN_SPACING)
    return KinematicParameters(speed=speed, spacing=spacing)


def generate_ensemble(
    temperature: float,
    pressure: float,
    count: int,
    rng: Optional[Any] = None
) -> Ensemble:
    """
    Create a fresh ensemble for the given environment.

    Positions are uniform in [0, 100) on both axes. Velocities are
    (u - 0.5) * speed per axis, so a negative speed only mirrors the draws.
    All particles share the same spacing.

    Args:
        temperature: Temperature in °C
        pressure: Pressure in atm
        count: Number of particles
        rng: Uniform random source with a ``random(size)`` method
             (default: a new numpy Generator)

    Returns:
        New Ensemble with ids 0..count-1

    Raises:
        ValueError: On a negative or non-integer count or non-finite inputs
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise ValueError(f"Particle count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"Particle count must be non-negative, got {count}")

    temperature, pressure = validate_environment(temperature, pressure)

    if rng is None:
        rng = np.random.default_rng()

    kinematics = derive_kinematics(temperature, pressure)
    span = DOMAIN_MAX - DOMAIN_MIN

    positions = DOMAIN_MIN + np.asarray(rng.random((count, 2)), dtype=np.float64) * span
    velocities = (np.asarray(rng.random((count, 2)), dtype=np.float64) - 0.5) * kinematics.speed

    logger.debug(
        "Generated %d particles (speed=%.3f, spacing=%.3f)",
        count, kinematics.speed, kinematics.spacing
    )

    return Ensemble(
        ids=np.arange(count, dtype=np.int64),
        positions=np.ascontiguousarray(positions),
        velocities=np.ascontiguousarray(velocities),
        spacing=np.full(count, kinematics.spacing, dtype=np.float64)
    )


@jit(nopython=True, cache=True)
def advance_with_reflection(
    positions: np.ndarray,
    velocities: np.ndarray,
    lower: float,
    upper: float
) -> np.ndarray:
    """
    Move every particle by its velocity and reflect at the walls.

    A velocity component flips sign when the moved (not yet clamped)
    coordinate lies outside [lower, upper]. Operates in place.

    Args:
        positions: Nx2 array of positions
        velocities: Nx2 array of per-tick displacements
        lower: Lower wall
        upper: Upper wall

    Returns:
        The updated positions array
    """
    n_particles = positions.shape[0]

    for i in range(n_particles):
        for k in range(2):
            p = positions[i, k] + velocities[i, k]
            if p < lower or p > upper:
                velocities[i, k] = -velocities[i, k]
            positions[i, k] = p

    return positions


@jit(nopython=True, cache=True)
def clamp_positions(positions: np.ndarray, lower: float, upper: float) -> np.ndarray:
    """Clamp every coordinate to [lower, upper] in place."""
    n_particles = positions.shape[0]

    for i in range(n_particles):
        for k in range(2):
            if positions[i, k] < lower:
                positions[i, k] = lower
            elif positions[i, k] > upper:
                positions[i, k] = upper

    return positions


def apply_jitter(positions: np.ndarray, rng: Any, amplitude: float = SOLID_JITTER) -> np.ndarray:
    """
    Displace every coordinate by an independent draw in [-amplitude/2, amplitude/2).

    Args:
        positions: Nx2 array of positions, updated in place
        rng: Uniform random source with a ``random(size)`` method
        amplitude: Peak-to-peak jitter

    Returns:
        The updated positions array
    """
    jitter = (np.asarray(rng.random(positions.shape), dtype=np.float64) - 0.5) * amplitude
    positions += jitter
    return positions


def tick(
    ensemble: Ensemble,
    phase: Phase,
    rng: Optional[Any] = None,
    jitter: float = SOLID_JITTER
) -> Ensemble:
    """
    Advance the ensemble by one tick under the motion rule of a phase.

    The ensemble is updated in place and returned. Solid particles only
    jitter and keep their stored velocity untouched. Liquid and gas
    particles move by their velocity and reflect at the walls. Both axes
    are clamped to the container afterwards, so a reflected particle can
    sit exactly on a wall.

    Args:
        ensemble: Ensemble to advance
        phase: Current phase
        rng: Uniform random source for the solid jitter
             (default: a new numpy Generator)
        jitter: Peak-to-peak solid jitter

    Returns:
        The same ensemble, advanced

    Raises:
        ValueError: If phase is not a Phase or a known phase name
    """
    phase = parse_phase(phase)

    if ensemble.n_particles == 0:
        return ensemble

    if phase is Phase.SOLID:
        if rng is None:
            rng = np.random.default_rng()
        apply_jitter(ensemble.positions, rng, jitter)
    else:
        advance_with_reflection(
            ensemble.positions, ensemble.velocities, DOMAIN_MIN, DOMAIN_MAX
        )

    clamp_positions(ensemble.positions, DOMAIN_MIN, DOMAIN_MAX)

    return ensemble
