"""
Configuration & Global Constants
================================
This module serves as the central registry for numerical constants shared by
the generators.

Why is this file needed?
------------------------
1. Single source: the golden angle is computed once at import time instead of
   in every hot loop.
2. Tuning: the fixed integration step trades accuracy for iteration count and
   is kept here so callers can see (and override per call) the default.

Exports:
    GOLDEN_ANGLE (float): Default divergence angle in radians, pi * (3 - sqrt(5)).
    DEFAULT_STEP_SIZE (float): Arc-length step of the surface-of-revolution packer.
    DEFAULT_BEZIER_SAMPLES (int): Size of the arc-length lookup table of Bezier curves.
    DEFAULT_GLYPH_RESOLUTION (int): Theta/phi resolution of preview spheres.
"""
import math

GOLDEN_ANGLE: float = math.pi * (3.0 - math.sqrt(5.0))  # ~137.508 deg

DEFAULT_STEP_SIZE: float = 0.001
DEFAULT_BEZIER_SAMPLES: int = 512
DEFAULT_GLYPH_RESOLUTION: int = 12
