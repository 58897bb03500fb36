"""
Generator Parameters (Data Model)
=================================
One configuration dataclass per phyllotaxis model.

Why is this file needed?
------------------------
1. Validation: every field is checked in ``__post_init__`` so that a generator
   never starts iterating on bad input.
2. Dispatch: the class of the parameters object selects the generator (see
   ``phyllotaxis.generators.registry``).

All fields are keyword-only and all angles are in radians.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Optional

import numpy as np

from phyllotaxis.config import DEFAULT_STEP_SIZE, GOLDEN_ANGLE
from phyllotaxis.errors import DegenerateInput, InvalidParameter
from phyllotaxis.model.curves import ProfileCurve


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class PhyllotaxisModel(StrEnum):
    PLANAR = "planar"
    CYLINDRICAL = "cylindrical"
    CONICAL = "conical"
    SPHERICAL = "spherical"
    ELLIPSOIDAL = "ellipsoidal"
    REVOLUTION = "revolution"


# ------------------------------------------------------------------------------
# Validation helpers
# ------------------------------------------------------------------------------
def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(f"'{name}' must be finite, got {value}.")

def _require_positive(name: str, value: float) -> None:
    _require_finite(name, value)
    if value <= 0.0:
        raise InvalidParameter(f"'{name}' must be positive, got {value}.")

def _require_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameter(f"'{name}' must be an integer, got {type(value).__name__}.")
    if value < 0:
        raise InvalidParameter(f"'{name}' must not be negative, got {value}.")

def _require_ratio(name: str, value: float) -> None:
    _require_finite(name, value)
    if not 0.0 < value <= 1.0:
        raise InvalidParameter(f"'{name}' must be in (0, 1], got {value}.")


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(kw_only=True)
class GeneratorParams:
    """Fields shared by every model."""
    MODEL: ClassVar[PhyllotaxisModel]

    divergence_angle: float = GOLDEN_ANGLE

    def __post_init__(self) -> None:
        _require_finite("divergence_angle", self.divergence_angle)


@dataclass(kw_only=True)
class IndexedParams(GeneratorParams):
    """
    Models that place a caller-supplied number of organs by index.

    Models spreading the index range over a fixed extent divide by
    ``organs - 1`` and reject one organ or fewer as degenerate.
    """
    NORMALISED: ClassVar[bool] = True

    organs: int

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_count("organs", self.organs)
        if self.NORMALISED and self.organs <= 1:
            raise DegenerateInput(
                f"The {self.MODEL} model spreads organs over a fixed extent "
                f"and needs at least 2 of them, got {self.organs}."
            )


@dataclass(kw_only=True)
class PlanarParams(IndexedParams):
    """Vogel disc in the XY plane."""
    MODEL = PhyllotaxisModel.PLANAR

    radius: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive("radius", self.radius)


@dataclass(kw_only=True)
class CylindricalParams(IndexedParams):
    """Helix of organs on a cylinder, climbing `rise` per organ."""
    MODEL = PhyllotaxisModel.CYLINDRICAL
    NORMALISED = False

    radius: float = 1.0
    rise: float = 0.1

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive("radius", self.radius)
        _require_finite("rise", self.rise)


@dataclass(kw_only=True)
class ConicalParams(IndexedParams):
    """Cone standing on the XY plane with its apex at Z = height."""
    MODEL = PhyllotaxisModel.CONICAL

    base_radius: float = 1.0
    height: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive("base_radius", self.base_radius)
        _require_positive("height", self.height)


@dataclass(kw_only=True)
class SphericalParams(IndexedParams):
    """
    Sphere centred at the origin, filled from the north pole down.

    `coverage` is the fraction of the pole-to-pole height covered, 1.0 being
    the full sphere and 0.5 the upper hemisphere.
    """
    MODEL = PhyllotaxisModel.SPHERICAL

    radius: float = 1.0
    coverage: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive("radius", self.radius)
        _require_ratio("coverage", self.coverage)


@dataclass(kw_only=True)
class EllipsoidalParams(IndexedParams):
    """Axis-aligned ellipsoid, same ordering and coverage as the sphere."""
    MODEL = PhyllotaxisModel.ELLIPSOIDAL

    radius_x: float = 1.0
    radius_y: float = 1.0
    radius_z: float = 1.0
    coverage: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive("radius_x", self.radius_x)
        _require_positive("radius_y", self.radius_y)
        _require_positive("radius_z", self.radius_z)
        _require_ratio("coverage", self.coverage)


@dataclass(kw_only=True)
class RevolutionParams(GeneratorParams):
    """
    Compact packing on the surface swept by `curve` around the Z axis.

    Attributes:
        curve: Profile curve, anything satisfying `ProfileCurve`.
        organ_size: Radius of the disc approximating one organ footprint.
        step_size: Fixed arc-length integration step. Smaller is more
            accurate and slower; a step that alone sweeps more than one
            footprint makes the packing uneven.
        emit_partial: Emit the last organ even if the curve ran out before
            its footprint was complete.
        max_steps: Optional cap on integration steps, for curves or sizes
            coming from untrusted input.
    """
    MODEL = PhyllotaxisModel.REVOLUTION

    curve: ProfileCurve
    organ_size: float
    step_size: float = DEFAULT_STEP_SIZE
    emit_partial: bool = True
    max_steps: Optional[int] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.curve, ProfileCurve):
            raise InvalidParameter(
                f"{type(self.curve).__name__} does not provide length() and point_at_arc_length()."
            )
        _require_positive("organ_size", self.organ_size)
        _require_positive("step_size", self.step_size)
        if self.max_steps is not None:
            _require_count("max_steps", self.max_steps)
            if self.max_steps == 0:
                raise InvalidParameter("'max_steps' must be positive when given.")
