"""
Phyllotaxis point sets for 3D rendering.

Build a parameters object for a model and pass it to `generate()`:

    >>> from phyllotaxis import generate, RevolutionParams, LineCurve, Point
    >>> curve = LineCurve(Point(10, 0, 0), Point(10, 0, 20))
    >>> points = generate(RevolutionParams(curve=curve, organ_size=2.0))
"""
from importlib.metadata import version, PackageNotFoundError

from phyllotaxis.config import GOLDEN_ANGLE
from phyllotaxis.errors import DegenerateInput, InvalidParameter, PhyllotaxisError
from phyllotaxis.generators import generate, list_models
from phyllotaxis.model.curves import (
    ArcCurve,
    BezierCurve,
    CompositeCurve,
    LineCurve,
    PolylineCurve,
    ProfileCurve,
)
from phyllotaxis.model.geometry_primitives import Point
from phyllotaxis.model.parameters import (
    ConicalParams,
    CylindricalParams,
    EllipsoidalParams,
    PhyllotaxisModel,
    PlanarParams,
    RevolutionParams,
    SphericalParams,
)

try:
    __version__ = version("phyllotaxis")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "GOLDEN_ANGLE",
    "ArcCurve",
    "BezierCurve",
    "CompositeCurve",
    "ConicalParams",
    "CylindricalParams",
    "DegenerateInput",
    "EllipsoidalParams",
    "InvalidParameter",
    "LineCurve",
    "PhyllotaxisError",
    "PhyllotaxisModel",
    "PlanarParams",
    "Point",
    "PolylineCurve",
    "ProfileCurve",
    "RevolutionParams",
    "SphericalParams",
    "generate",
    "list_models",
]
