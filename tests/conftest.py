import logging
import math

import pytest

from phyllotaxis.model.curves import ArcCurve, BezierCurve, CompositeCurve, LineCurve
from phyllotaxis.model.geometry_primitives import Point


@pytest.fixture
def cylinder_profile() -> LineCurve:
    """Straight profile at constant distance 10 from the axis, length 20."""
    return LineCurve(Point(10.0, 0.0, 0.0), Point(10.0, 0.0, 20.0))


@pytest.fixture
def sphere_profile() -> ArcCurve:
    """Half circle of radius 10 from the south to the north pole."""
    return ArcCurve(center=Point(0.0, 0.0, 0.0), radius=10.0, start_angle=-math.pi / 2, end_angle=math.pi / 2)


@pytest.fixture
def vase_profile() -> CompositeCurve:
    body = BezierCurve(Point(0.0, 0.0, 0.0), Point(12.0, 0.0, 0.0), Point(14.0, 0.0, 12.0), Point(5.0, 0.0, 18.0))
    neck = LineCurve(Point(5.0, 0.0, 18.0), Point(6.0, 0.0, 24.0))
    return CompositeCurve([body, neck])


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("phyllotaxis")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
