#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermodynamics Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from matter_sim.thermodynamics import (
    Phase,
    PhaseTransitionTracker,
    PHASE_DESCRIPTIONS,
    PHASE_RANGES,
    PRESETS,
    classify_phase,
    identify_phase,
    parse_phase,
    preset_for
)


class TestClassifyPhase:
    """Tests for the phase classification rule."""

    def test_reference_examples(self):
        """Known environments classify as expected."""
        assert classify_phase(-10, 1) is Phase.SOLID
        assert classify_phase(120, 0.5) is Phase.GAS
        assert classify_phase(25, 1) is Phase.LIQUID

    def test_solid_region(self):
        """T <= 0 and P >= 0.8 is always solid."""
        for t in np.linspace(-50, 0, 11):
            for p in np.linspace(0.8, 5, 11):
                assert classify_phase(t, p) is Phase.SOLID

    def test_gas_region(self):
        """T > 100 and P <= 1 is always gas."""
        for t in np.linspace(100.1, 150, 11):
            for p in np.linspace(0.1, 1.0, 10):
                assert classify_phase(t, p) is Phase.GAS

    def test_everything_else_is_liquid(self):
        """Points outside the solid and gas regions are liquid."""
        for t in np.linspace(-50, 150, 41):
            for p in np.linspace(0.1, 5, 50):
                solid = t <= 0 and p >= 0.8
                gas = t > 100 and p <= 1
                if not solid and not gas:
                    assert classify_phase(t, p) is Phase.LIQUID

    def test_boundaries(self):
        """Solid includes T = 0 and P = 0.8; gas excludes T = 100."""
        assert classify_phase(0.0, 0.8) is Phase.SOLID
        assert classify_phase(0.01, 0.8) is Phase.LIQUID
        assert classify_phase(-10.0, 0.79) is Phase.LIQUID
        assert classify_phase(100.0, 0.5) is Phase.LIQUID
        assert classify_phase(100.01, 1.0) is Phase.GAS
        assert classify_phase(120.0, 1.01) is Phase.LIQUID

    def test_cold_low_pressure_is_liquid(self):
        """Freezing temperature alone is not enough for a solid."""
        assert classify_phase(-50, 0.1) is Phase.LIQUID


class TestIdentifyPhase:
    """Tests for the phase info helper."""

    def test_info_fields(self):
        """PhaseInfo carries the inputs and description."""
        info = identify_phase(-10, 1)
        assert info.phase is Phase.SOLID
        assert info.temperature == -10
        assert info.pressure == 1
        assert info.description == PHASE_DESCRIPTIONS[Phase.SOLID]

    def test_every_phase_described(self):
        """Every phase has a description and display ranges."""
        for phase in Phase:
            assert PHASE_DESCRIPTIONS[phase]
            assert len(PHASE_RANGES[phase]) == 2

    def test_label(self):
        assert Phase.GAS.label == "Gas"


class TestPresets:
    """Tests for the state presets."""

    def test_preset_values(self):
        """Presets match the canonical environments."""
        assert preset_for(Phase.SOLID) == (-10.0, 1.0)
        assert preset_for(Phase.LIQUID) == (25.0, 1.0)
        assert preset_for(Phase.GAS) == (120.0, 0.5)

    def test_presets_round_trip(self):
        """Every preset classifies back to its own phase."""
        for phase in Phase:
            assert classify_phase(*preset_for(phase)) is phase

    def test_every_phase_has_preset(self):
        assert set(PRESETS) == set(Phase)

    def test_lookup_by_name(self):
        """Names are accepted case-insensitively."""
        assert preset_for("Solid") == preset_for(Phase.SOLID)
        assert preset_for("gas") == preset_for(Phase.GAS)
        assert preset_for(" LIQUID ") == preset_for(Phase.LIQUID)

    def test_unknown_name(self):
        """Unknown state names are rejected."""
        with pytest.raises(ValueError, match="plasma"):
            preset_for("plasma")

    def test_parse_phase_passthrough(self):
        assert parse_phase(Phase.GAS) is Phase.GAS


class TestPhaseTransitionTracker:
    """Tests for transition tracking."""

    def test_first_update_no_transition(self):
        tracker = PhaseTransitionTracker()
        assert tracker.update(0, Phase.LIQUID) is None
        assert tracker.current_phase is Phase.LIQUID

    def test_same_phase_no_transition(self):
        tracker = PhaseTransitionTracker()
        tracker.update(0, Phase.LIQUID)
        assert tracker.update(5, Phase.LIQUID) is None
        assert tracker.transition_events == []

    def test_transition_detected(self):
        """A change of phase is reported and recorded."""
        tracker = PhaseTransitionTracker()
        tracker.update(0, Phase.LIQUID)
        assert tracker.update(12, Phase.SOLID) == (Phase.LIQUID, Phase.SOLID)
        assert tracker.get_recent_transitions() == [(12, Phase.LIQUID, Phase.SOLID)]

    def test_history_trimmed(self):
        """History never grows past its length."""
        tracker = PhaseTransitionTracker(history_length=3)
        for i, phase in enumerate([Phase.SOLID, Phase.LIQUID, Phase.GAS, Phase.SOLID, Phase.GAS]):
            tracker.update(i, phase)

        assert len(tracker.phase_history) == 3
        assert tracker.tick_history == [2, 3, 4]
        assert len(tracker.get_recent_transitions(2)) == 2
        assert len(tracker.transition_events) == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
