#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
States of Matter Simulation
================================================================================

Project:        States of Matter Simulation
Description:    Real-time 2D particle simulation showing solid, liquid and gas
                behaviour as a function of temperature and pressure

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This package implements a pedagogical states of matter simulation featuring:
- Phase classification from temperature and pressure
- Particle ensembles whose speed and packing follow the environment
- Phase-specific motion: jitter for solids, wall-reflected drift for fluids
- Thread-safe snapshots for real-time rendering

Modules:
    - thermodynamics: Phase classification, presets and transition tracking
    - physics: Ensemble generation and the per-tick motion rules
    - simulation: Simulation controller and periodic ticker
    - visualization: Rendering of snapshots and the phase map
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
