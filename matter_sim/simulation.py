#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
States of Matter Simulation Engine
================================================================================

Project:        States of Matter Simulation
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Simulation controller tying phase classification, ensemble generation and
the tick rule together. Front-ends set the environment, pick presets and
read snapshots; a periodic ticker advances the particles every 50 ms.
"""

import logging
import threading
import time
import weakref
import numpy as np
from typing import Tuple, Optional, Callable, Any, Union
from dataclasses import dataclass, replace

from .physics import (
    Ensemble,
    Particle,
    SOLID_JITTER,
    generate_ensemble,
    tick,
    validate_environment
)
from .thermodynamics import (
    Phase,
    PhaseTransitionTracker,
    classify_phase,
    preset_for
)

logger = logging.getLogger(__name__)


N_PARTICLES = 30            # Ensemble size
TICK_INTERVAL = 0.05        # Seconds between ticks (20 Hz)


@dataclass
class SimulationConfig:
    """Configuration for the states of matter simulation."""
    n_particles: int = N_PARTICLES
    tick_interval: float = TICK_INTERVAL
    jitter: float = SOLID_JITTER

    # Input ranges, enforced by clamp_environment on the caller side
    temperature_range: Tuple[float, float] = (-50.0, 150.0)  # °C
    pressure_range: Tuple[float, float] = (0.1, 5.0)         # atm

    # Starting environment (the liquid preset)
    initial_temperature: float = 25.0
    initial_pressure: float = 1.0

    # Name of the ticker thread
    ticker_name: str = "matter-sim-ticker"

    # Seed for the default random generator (None = nondeterministic)
    seed: Optional[int] = None


@dataclass(frozen=True)
class Environment:
    """Temperature (°C) and pressure (atm) driving the simulation."""
    temperature: float
    pressure: float


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    Fully-updated, read-only view of the simulation.

    Built after every completed tick or regeneration. The arrays are
    private copies flagged read-only.
    """
    phase: Phase
    environment: Environment
    particles: Tuple[Particle, ...]
    positions: np.ndarray
    spacing: np.ndarray
    tick: int

    @property
    def n_particles(self) -> int:
        return len(self.particles)


def clamp_environment(
    temperature: float,
    pressure: float,
    config: Optional[SimulationConfig] = None
) -> Tuple[float, float]:
    """
    Clamp raw user input into the allowed temperature and pressure ranges.

    Args:
        temperature: Requested temperature in °C
        pressure: Requested pressure in atm
        config: Configuration holding the ranges

    Returns:
        (temperature, pressure) inside the configured ranges
    """
    config = config or SimulationConfig()
    t_min, t_max = config.temperature_range
    p_min, p_max = config.pressure_range
    return (
        float(min(max(temperature, t_min), t_max)),
        float(min(max(pressure, p_min), p_max))
    )


class PeriodicTicker:
    """
    Calls a function at a fixed interval on a single worker thread.

    At most one worker is active: start() on a running ticker does
    nothing, and restart() stops the current worker before starting a new
    one. An exception raised by the callback is logged and stops the
    ticker.

    The callback may be a weakref.WeakMethod. The ticker then does not keep
    the method's owner alive and stops once the owner is collected.
    """

    def __init__(
        self,
        callback: Union[Callable[[], Any], weakref.WeakMethod],
        interval: float = TICK_INTERVAL,
        name: str = "matter-sim-ticker"
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")

        self.callback = callback
        self.interval = interval
        self.name = name

        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    @property
    def running(self) -> bool:
        with self._lock:
            return self._is_alive()

    def _is_alive(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._stop_event.is_set()
        )

    def _spawn(self) -> None:
        """Start a new worker. Caller holds self._lock."""
        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run, args=(stop_event,), name=self.name, daemon=True
        )
        self._stop_event = stop_event
        self._thread = thread
        thread.start()

    def _retire(self, thread: Optional[threading.Thread], timeout: Optional[float] = None) -> None:
        # A callback may stop its own ticker; it cannot join itself
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def start(self) -> None:
        """Start ticking. No-op if already running."""
        with self._lock:
            if self._is_alive():
                return
            self._spawn()

        logger.info("Ticker started (interval=%.3fs)", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop ticking and wait for the worker to finish its current call."""
        with self._lock:
            thread, stop_event = self._thread, self._stop_event
            self._thread = None
            self._stop_event = None

            if stop_event is not None:
                stop_event.set()

        if thread is None:
            return

        self._retire(thread, timeout)
        logger.info("Ticker stopped")

    def restart(self) -> None:
        self.stop()
        self.start()

    def restart_if_running(self) -> bool:
        """
        Replace the worker only if the ticker is running.

        The check and the swap happen under one lock, so a concurrent
        stop() is never undone.

        Returns:
            True if the ticker was restarted
        """
        with self._lock:
            if not self._is_alive():
                return False

            old_thread = self._thread
            self._stop_event.set()
            self._spawn()

        self._retire(old_thread)
        logger.info("Ticker restarted")
        return True

    def _resolve_callback(self) -> Optional[Callable[[], Any]]:
        if isinstance(self.callback, weakref.WeakMethod):
            return self.callback()
        return self.callback

    def _run(self, stop_event: threading.Event) -> None:
        next_time = time.monotonic() + self.interval

        while not stop_event.wait(max(0.0, next_time - time.monotonic())):
            callback = self._resolve_callback()
            if callback is None:
                logger.info("Tick target collected, stopping ticker")
                stop_event.set()
                break

            try:
                callback()
            except Exception:
                logger.exception("Tick callback failed, stopping ticker")
                stop_event.set()
                break
            finally:
                # No strong reference to the owner between ticks
                callback = None

            next_time += self.interval
            # Fell behind by more than a tick: skip ahead instead of bursting
            now = time.monotonic()
            if next_time < now:
                next_time = now + self.interval


class MatterSimulation:
    """
    States of matter simulation.

    Owns the particle ensemble. Every environment change reclassifies the
    phase and regenerates the ensemble; every tick advances it under the
    cached phase's motion rule. Writers are serialized and readers only
    ever see complete snapshots.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[Any] = None
    ):
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.tracker = PhaseTransitionTracker()

        self._lock = threading.RLock()
        self._ensemble: Optional[Ensemble] = None
        self._environment: Optional[Environment] = None
        self._phase: Optional[Phase] = None
        self._tick_count = 0
        self._snapshot: Optional[Snapshot] = None

        # The ticker holds the simulation weakly; dropping the last
        # reference stops the worker
        self._ticker = PeriodicTicker(
            weakref.WeakMethod(self.on_tick),
            self.config.tick_interval,
            name=self.config.ticker_name
        )
        self._finalizer = weakref.finalize(self, self._ticker.stop)

        # Performance tracking
        self.ticks_per_second = 0.0
        self._last_time = time.time()
        self._perf_count = 0

        self.set_environment(self.config.initial_temperature, self.config.initial_pressure)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def running(self) -> bool:
        return self._ticker.running

    def set_environment(self, temperature: float, pressure: float) -> None:
        """
        Set temperature and pressure.

        Reclassifies the phase and replaces the ensemble with a freshly
        drawn one. Inputs are expected to be clamped by the caller already
        (see clamp_environment).

        Raises:
            ValueError: If temperature or pressure is NaN or infinite
        """
        temperature, pressure = validate_environment(temperature, pressure)

        with self._lock:
            phase = classify_phase(temperature, pressure)
            ensemble = generate_ensemble(
                temperature, pressure, self.config.n_particles, self.rng
            )

            transition = self.tracker.update(self._tick_count, phase)

            self._environment = Environment(temperature, pressure)
            self._phase = phase
            self._ensemble = ensemble
            self._tick_count = 0
            self._publish()

        logger.info(
            "Environment set to T=%.1f°C, P=%.2f atm (%s)",
            temperature, pressure, phase.value
        )

        if transition is not None:
            old_phase, new_phase = transition
            logger.info("Phase transition: %s -> %s", old_phase.value, new_phase.value)
            # New motion rule: restart the tick schedule
            self._ticker.restart_if_running()

    def select_preset(self, name: Union[Phase, str]) -> None:
        """Set the environment to the canonical preset of a named state."""
        temperature, pressure = preset_for(name)
        self.set_environment(temperature, pressure)

    def get_snapshot(self) -> Snapshot:
        """Return the most recently completed state."""
        return self._snapshot

    def on_tick(self) -> Snapshot:
        """Advance the ensemble by one tick under the cached phase."""
        with self._lock:
            tick(self._ensemble, self._phase, self.rng, self.config.jitter)
            self._tick_count += 1
            snapshot = self._publish()

        self._track_performance()
        return snapshot

    def run(self, n_ticks: int) -> Snapshot:
        """Run n_ticks synchronously, without the ticker."""
        for _ in range(n_ticks):
            self.on_tick()
        return self._snapshot

    def start(self) -> None:
        """Start advancing on the ticker thread."""
        self._ticker.start()

    def stop(self) -> None:
        self._ticker.stop()

    def close(self) -> None:
        self.stop()

    def __enter__(self) -> "MatterSimulation":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _publish(self) -> Snapshot:
        """Build a snapshot from a private copy and swap it in."""
        ensemble = self._ensemble.copy()
        ensemble.positions.setflags(write=False)
        ensemble.spacing.setflags(write=False)

        self._snapshot = Snapshot(
            phase=self._phase,
            environment=self._environment,
            particles=ensemble.particles(),
            positions=ensemble.positions,
            spacing=ensemble.spacing,
            tick=self._tick_count
        )
        return self._snapshot

    def _track_performance(self) -> None:
        self._perf_count += 1
        if self._perf_count % 100 == 0:
            current_time = time.time()
            elapsed = current_time - self._last_time
            if elapsed > 0:
                self.ticks_per_second = 100.0 / elapsed
            self._last_time = current_time


def create_simulation(
    state: Union[Phase, str] = Phase.LIQUID,
    seed: Optional[int] = None,
    config: Optional[SimulationConfig] = None
) -> MatterSimulation:
    """
    Create a simulation starting from the preset of a named state.

    Args:
        state: Phase or phase name to start in
        seed: Seed for the random generator
        config: Base configuration (seed and initial environment overridden)

    Returns:
        Initialized MatterSimulation
    """
    temperature, pressure = preset_for(state)

    config = replace(
        config or SimulationConfig(),
        initial_temperature=temperature,
        initial_pressure=pressure
    )
    if seed is not None:
        config = replace(config, seed=seed)

    return MatterSimulation(config)
