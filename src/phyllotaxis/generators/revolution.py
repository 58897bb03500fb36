"""
Compact Surface-of-Revolution Packer
====================================
Places organs on the surface swept by revolving a profile curve around the Z
axis so that each organ covers roughly one footprint of surface area.

The profile is walked by arc length in fixed steps. Every step adds the
normalised area of the thin band it sweeps to a running budget; whenever the
budget reaches one footprint an organ is emitted at the last sampled position,
rotated by ``organ_index * divergence_angle``, and exactly 1.0 is taken off
the budget so the overshoot carries into the next organ.

The band swept by a step at distance ``r`` from the axis has area
``2*pi*r*step``. One organ is counted as ``2*pi*organ_size**2``, the cap of a
sphere of radius ``organ_size`` resting on the surface, so the normalised
increment is ``r * step / organ_size**2``.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterator, NamedTuple, Optional

import numpy as np

from phyllotaxis.errors import InvalidParameter
from phyllotaxis.generators.registry import register_generator
from phyllotaxis.model.curves import ProfileCurve
from phyllotaxis.model.geometry_primitives import Point
from phyllotaxis.model.parameters import RevolutionParams

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackingState:
    """
    Running state of one packing walk.

    Attributes:
        steps: Integration steps taken so far.
        arc_length: Distance walked along the profile, always steps * step_size.
        area_budget: Footprints accumulated since the last emission.
        organ_index: Organs emitted so far.
        sampled_at: Arc length of the last sampled position.
        position: Last sampled (unrotated) position, None before the first step.
    """
    steps: int = 0
    arc_length: float = 0.0
    area_budget: float = 0.0
    organ_index: int = 0
    sampled_at: float = 0.0
    position: Optional[Point] = None


class EmittedOrgan(NamedTuple):
    index: int
    arc_length: float
    position: Point


def area_increment(position: Point, organ_size: float, step_size: float) -> float:
    """Normalised area swept by one step taken at `position`."""
    return position.radial_distance * step_size / organ_size**2


def advance(state: PackingState, curve: ProfileCurve, organ_size: float, step_size: float) -> PackingState:
    """
    Take one integration step: sample the curve at the current arc length,
    add the swept area to the budget and move one step forward.
    """
    position = Point.coerce(curve.point_at_arc_length(state.arc_length))
    steps = state.steps + 1
    return replace(
        state,
        steps=steps,
        arc_length=steps * step_size,
        area_budget=state.area_budget + area_increment(position, organ_size, step_size),
        sampled_at=state.arc_length,
        position=position,
    )


def emit(state: PackingState, divergence_angle: float) -> tuple[PackingState, EmittedOrgan]:
    """
    Emit the organ for the last sampled position.

    A full budget is reduced by exactly one footprint; a partial one (curve
    exhausted) is left untouched.
    """
    if state.position is None:
        raise RuntimeError("Cannot emit an organ before the first step.")
    budget = state.area_budget - 1.0 if state.area_budget >= 1.0 else state.area_budget
    organ = EmittedOrgan(
        index=state.organ_index,
        arc_length=state.sampled_at,
        position=state.position.rotate_z(state.organ_index * divergence_angle),
    )
    return replace(state, area_budget=budget, organ_index=state.organ_index + 1), organ


def _validated_length(params: RevolutionParams) -> float:
    length = params.curve.length()
    try:
        length = float(length)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"Curve length must be a number, got {length!r}.") from e
    if not math.isfinite(length) or length < 0.0:
        raise InvalidParameter(f"Curve length must be finite and non-negative, got {length}.")
    if params.max_steps is not None:
        needed = math.ceil(length / params.step_size)
        if needed > params.max_steps:
            raise InvalidParameter(
                f"Walking a curve of length {length} in steps of {params.step_size} "
                f"needs {needed} steps, more than max_steps={params.max_steps}."
            )
    return length


def walk_profile(params: RevolutionParams) -> Iterator[EmittedOrgan]:
    """
    Lazily emit organs along the profile, in order of increasing arc length.

    Parameters are validated before the iterator is returned, so a failure
    never follows partial output.
    """
    length = _validated_length(params)
    return _walk(params, length)


def _walk(params: RevolutionParams, length: float) -> Iterator[EmittedOrgan]:
    curve, organ_size, step_size = params.curve, params.organ_size, params.step_size
    state = PackingState()
    warned = False

    while state.arc_length < length:
        # At least one step per organ, so emission positions strictly advance
        while True:
            previous = state.area_budget
            state = advance(state, curve, organ_size, step_size)
            if not warned and state.area_budget - previous > 1.0:
                logger.warning(
                    f"A single step of {step_size} sweeps {state.area_budget - previous:.2f} "
                    f"footprints at arc length {state.sampled_at:.4g}; packing will be sparse. "
                    f"Reduce step_size."
                )
                warned = True
            if state.area_budget >= 1.0 or state.arc_length >= length:
                break

        if state.area_budget < 1.0 and not params.emit_partial:
            logger.debug(f"Discarding trailing partial organ (budget {state.area_budget:.3f}).")
            break

        state, organ = emit(state, params.divergence_angle)
        yield organ


@register_generator(RevolutionParams)
def surface_of_revolution(params: RevolutionParams) -> npt.NDArray[np.float64]:
    """
    Pack organs on the surface of revolution of `params.curve`.

    Returns:
        An (n, 3) array in emission order; empty for a zero-length curve.
    """
    organs = [organ.position.to_array() for organ in walk_profile(params)]
    points = np.array(organs, dtype=np.float64).reshape(-1, 3)
    logger.debug(
        f"Revolution model: {len(points)} organs, organ size {params.organ_size}, "
        f"step {params.step_size}."
    )
    return points
