"""
3D Preview (PyVista)
Turns organ sequences into renderable meshes and shows them.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt
import pyvista as pv

from phyllotaxis.config import DEFAULT_GLYPH_RESOLUTION
from phyllotaxis.errors import InvalidParameter
from phyllotaxis.model.curves import ProfileCurve
from phyllotaxis.model.geometry_primitives import Point

logger = logging.getLogger(__name__)


def organs_to_polydata(
    points: npt.ArrayLike,
    organ_size: float,
    resolution: int = DEFAULT_GLYPH_RESOLUTION
) -> pv.PolyData:
    """
    Place a sphere of radius `organ_size` on every organ.

    Args:
        points: (N, 3) organ positions in emission order.
        organ_size: Sphere radius.
        resolution: Theta and phi resolution of each sphere.

    Returns:
        The merged sphere glyphs, empty if there are no organs.
    """
    if organ_size <= 0.0:
        raise InvalidParameter(f"'organ_size' must be positive, got {organ_size}.")
    arr = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    if len(arr) == 0:
        return pv.PolyData()

    cloud = pv.PolyData(arr)
    cloud["organ_index"] = np.arange(len(arr))
    sphere = pv.Sphere(radius=organ_size, theta_resolution=resolution, phi_resolution=resolution)
    glyphs = cloud.glyph(geom=sphere, scale=False, orient=False)
    if "organ_index" not in glyphs.point_data:
        glyphs["organ_index"] = np.repeat(np.arange(len(arr)), sphere.n_points)
    logger.debug(f"Built {len(arr)} organ glyphs ({glyphs.n_points} vertices).")
    return glyphs


def revolve_profile(curve: ProfileCurve, n_profile: int = 64, n_around: int = 64) -> pv.PolyData:
    """
    Sweep the profile curve around the Z axis into a surface mesh.

    Args:
        curve: The profile curve.
        n_profile: Samples along the curve.
        n_around: Samples around the axis.
    """
    if n_profile < 2 or n_around < 3:
        raise InvalidParameter("Need at least 2 profile samples and 3 angular samples.")
    offsets = np.linspace(0.0, curve.length(), n_profile)
    profile = np.array([Point.coerce(curve.point_at_arc_length(s)).to_array() for s in offsets])
    radial = np.hypot(profile[:, 0], profile[:, 1])
    phase = np.arctan2(profile[:, 1], profile[:, 0])

    angles = np.linspace(0.0, 2.0 * np.pi, n_around)
    theta = phase[:, None] + angles[None, :]
    x = radial[:, None] * np.cos(theta)
    y = radial[:, None] * np.sin(theta)
    z = np.repeat(profile[:, 2:3], n_around, axis=1)

    return pv.StructuredGrid(x, y, z).extract_surface()


def show_organs(
    points: npt.ArrayLike,
    organ_size: float,
    curve: Optional[ProfileCurve] = None,
    off_screen: bool = False,
    screenshot: Optional[str] = None
) -> None:
    """
    Open a plotter with the organs coloured by emission order, and the swept
    surface of `curve` when given.
    """
    plotter = pv.Plotter(off_screen=off_screen)
    plotter.set_background("white")

    glyphs = organs_to_polydata(points, organ_size)
    if glyphs.n_points:
        plotter.add_mesh(glyphs, scalars="organ_index", cmap="viridis", show_scalar_bar=False)
    else:
        logger.warning("No organs to display.")

    if curve is not None:
        plotter.add_mesh(revolve_profile(curve), color="tan", opacity=0.35)

    plotter.add_axes()
    plotter.show(screenshot=screenshot)
