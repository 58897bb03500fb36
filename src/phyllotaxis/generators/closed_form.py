"""
Closed-form phyllotaxis models.

Each generator evaluates one formula per organ index in a single vectorised
pass; organ `n` sits at polar angle `n * divergence_angle`.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from phyllotaxis.generators.registry import register_generator
from phyllotaxis.model.parameters import (
    ConicalParams,
    CylindricalParams,
    EllipsoidalParams,
    PlanarParams,
    SphericalParams,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _polar_to_cartesian(
    radius: npt.NDArray[np.float64],
    theta: npt.NDArray[np.float64],
    z: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """Stack polar coordinates around the Z axis into an (N, 3) array."""
    return np.column_stack((radius * np.cos(theta), radius * np.sin(theta), z))


def _unit_shell(organs: int, coverage: float, divergence_angle: float) -> npt.NDArray[np.float64]:
    """
    Points on the unit sphere from the north pole down.

    Heights are evenly spaced, which by Archimedes' hat-box theorem gives each
    organ an equal share of the surface.
    """
    n = np.arange(organs, dtype=np.float64)
    z = 1.0 - 2.0 * coverage * n / (organs - 1)
    r = np.sqrt(np.clip(1.0 - z**2, 0.0, None))
    return _polar_to_cartesian(r, n * divergence_angle, z)


@register_generator(PlanarParams)
def planar(params: PlanarParams) -> npt.NDArray[np.float64]:
    """Vogel's model: r = radius * sqrt(n / (N - 1)), so the last organ lies on the rim."""
    n = np.arange(params.organs, dtype=np.float64)
    r = params.radius * np.sqrt(n / (params.organs - 1))
    points = _polar_to_cartesian(r, n * params.divergence_angle, np.zeros_like(n))
    logger.debug(f"Planar model: {len(points)} organs, radius {params.radius}.")
    return points


@register_generator(CylindricalParams)
def cylindrical(params: CylindricalParams) -> npt.NDArray[np.float64]:
    n = np.arange(params.organs, dtype=np.float64)
    points = _polar_to_cartesian(np.full_like(n, params.radius), n * params.divergence_angle, n * params.rise)
    logger.debug(f"Cylindrical model: {len(points)} organs, radius {params.radius}, rise {params.rise}.")
    return points


@register_generator(ConicalParams)
def conical(params: ConicalParams) -> npt.NDArray[np.float64]:
    """
    Organs on the lateral surface of a cone, apex first.

    The lateral area above a given slant distance grows with its square, so
    the normalised slant distance goes as sqrt(n / (N - 1)).
    """
    n = np.arange(params.organs, dtype=np.float64)
    d = np.sqrt(n / (params.organs - 1))
    points = _polar_to_cartesian(params.base_radius * d, n * params.divergence_angle, params.height * (1.0 - d))
    logger.debug(f"Conical model: {len(points)} organs.")
    return points


@register_generator(SphericalParams)
def spherical(params: SphericalParams) -> npt.NDArray[np.float64]:
    points = params.radius * _unit_shell(params.organs, params.coverage, params.divergence_angle)
    logger.debug(f"Spherical model: {len(points)} organs, radius {params.radius}.")
    return points


@register_generator(EllipsoidalParams)
def ellipsoidal(params: EllipsoidalParams) -> npt.NDArray[np.float64]:
    radii = np.array([params.radius_x, params.radius_y, params.radius_z])
    points = _unit_shell(params.organs, params.coverage, params.divergence_angle) * radii
    logger.debug(f"Ellipsoidal model: {len(points)} organs, radii {radii.tolist()}.")
    return points
