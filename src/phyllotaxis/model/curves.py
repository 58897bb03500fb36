"""
Profile Curves
==============
Curves whose revolution about the Z axis defines the surface the packer fills.

The packer only relies on the ``ProfileCurve`` capability (``length`` and
``point_at_arc_length``), so any object providing those two methods can be
packed. The concrete curves below share the ``Curve`` base for sampling and
plotting helpers.

Classes:
    ProfileCurve: Structural interface consumed by the packer.
    Curve: Abstract base of the shipped curves.
    LineCurve, ArcCurve, BezierCurve, PolylineCurve, CompositeCurve.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

import numpy as np
import matplotlib.pyplot as plt
from scipy import integrate

from phyllotaxis.config import DEFAULT_BEZIER_SAMPLES
from phyllotaxis.errors import InvalidParameter
from phyllotaxis.model.geometry_primitives import Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfileCurve(Protocol):
    """Anything that can report its arc length and be evaluated by arc length."""

    def length(self) -> float: ...

    def point_at_arc_length(self, s: float) -> Point: ...


# ==========================================
# ABSTRACT CLASS FOR CURVES
# ==========================================
class Curve(ABC):
    """
    Abstract base class for the profile curves shipped with the package.
    """
    NAME: str = "Curve"

    @abstractmethod
    def length(self) -> float:
        """Total arc length of the curve."""
        pass

    @abstractmethod
    def point_at_arc_length(self, s: float) -> Point:
        """
        Evaluate the curve at a distance `s` from its start.

        Args:
            s: Arc length offset. Values outside [0, length] are clamped.

        Returns:
            The position on the curve.
        """
        pass

    def _clamp(self, s: float) -> float:
        return min(max(s, 0.0), self.length())

    def sample(self, n_points: int) -> npt.NDArray[np.float64]:
        """
        Sample the curve at `n_points` positions evenly spaced by arc length.

        Returns:
            An array of shape (n_points, 3), start and end included.
        """
        if n_points < 2:
            raise InvalidParameter(f"At least 2 samples are needed, got {n_points}.")
        offsets = np.linspace(0.0, self.length(), n_points)
        return np.array([self.point_at_arc_length(s).to_array() for s in offsets])

    def plot(self, n_points: int = 200) -> None:
        """
        Plot the profile as radial distance against height.
        """
        pts = self.sample(n_points)
        radial = np.hypot(pts[:, 0], pts[:, 1])

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(5, 7))

        plt.plot(radial, pts[:, 2], 'g', lw=2)
        plt.axvline(0.0, color='gray', ls='--', lw=0.8)  # revolution axis

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.gca().set_aspect('equal', adjustable='datalim')

        plt.title(f"{self.NAME} profile")
        plt.xlabel("Distance from axis")
        plt.ylabel("Z")
        plt.show()


# ==========================================
# ANALYTIC CURVES
# ==========================================
@dataclass(frozen=True)
class LineCurve(Curve):
    """A straight segment between two points."""
    start: Point
    end: Point
    NAME = "Line"

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def point_at_arc_length(self, s: float) -> Point:
        total = self.length()
        if total == 0.0:
            return self.start
        return self.start.lerp(self.end, self._clamp(s) / total)


@dataclass(frozen=True)
class ArcCurve(Curve):
    """
    A circular arc in the XZ plane.

    Angles are in radians, measured from +X towards +Z, so an arc from -pi/2
    to pi/2 around the origin runs from the south pole over the equator to
    the north pole of a sphere profile.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    NAME = "Arc"

    def __post_init__(self) -> None:
        if not (math.isfinite(self.radius) and self.radius > 0.0):
            raise InvalidParameter(f"Arc radius must be positive, got {self.radius}.")

    def length(self) -> float:
        return self.radius * abs(self.end_angle - self.start_angle)

    def point_at_arc_length(self, s: float) -> Point:
        direction = 1.0 if self.end_angle >= self.start_angle else -1.0
        angle = self.start_angle + direction * self._clamp(s) / self.radius
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y,
            self.center.z + self.radius * math.sin(angle),
        )


# ==========================================
# NUMERICAL CURVES
# ==========================================
@dataclass(frozen=True)
class BezierCurve(Curve):
    """
    A cubic Bezier curve.

    The total length is integrated with `scipy.integrate.quad`; arc-length
    queries go through a cumulative lookup table of the parameter `t`.
    """
    p0: Point
    p1: Point
    p2: Point
    p3: Point
    samples: int = DEFAULT_BEZIER_SAMPLES
    NAME = "Bezier"

    def __post_init__(self) -> None:
        if self.samples < 2:
            raise InvalidParameter(f"Bezier lookup table needs at least 2 samples, got {self.samples}.")

    @cached_property
    def _control(self) -> npt.NDArray[np.float64]:
        return np.array([p.to_array() for p in (self.p0, self.p1, self.p2, self.p3)])

    def evaluate(self, t: float | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Position(s) at curve parameter `t` in [0, 1]."""
        t = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
        c = self._control
        u = 1.0 - t
        return u**3 * c[0] + 3 * u**2 * t * c[1] + 3 * u * t**2 * c[2] + t**3 * c[3]

    def _speed(self, t: float | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        t = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
        c = self._control
        u = 1.0 - t
        derivative = 3 * u**2 * (c[1] - c[0]) + 6 * u * t * (c[2] - c[1]) + 3 * t**2 * (c[3] - c[2])
        return np.linalg.norm(derivative, axis=1)

    @cached_property
    def _length(self) -> float:
        value, _ = integrate.quad(lambda t: float(self._speed(t)[0]), 0.0, 1.0)
        return value

    @cached_property
    def _table(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        ts = np.linspace(0.0, 1.0, self.samples)
        cumulative = integrate.cumulative_trapezoid(self._speed(ts), ts, initial=0.0)
        return ts, cumulative

    def length(self) -> float:
        return self._length

    def point_at_arc_length(self, s: float) -> Point:
        total = self.length()
        if total == 0.0:
            return self.p0
        ts, cumulative = self._table
        # The table is slightly shorter than the quad length, rescale into it
        target = self._clamp(s) / total * cumulative[-1]
        t = float(np.interp(target, cumulative, ts))
        return Point.coerce(self.evaluate(t)[0])


@dataclass(frozen=True)
class PolylineCurve(Curve):
    """A piecewise linear curve through two or more points."""
    points: Sequence[Point]
    NAME = "Polyline"

    def __post_init__(self) -> None:
        points = tuple(Point.coerce(p) for p in self.points)
        if len(points) < 2:
            raise InvalidParameter(f"A polyline needs at least 2 points, got {len(points)}.")
        object.__setattr__(self, "points", points)

    @cached_property
    def _vertices(self) -> npt.NDArray[np.float64]:
        return np.array([p.to_array() for p in self.points])

    @cached_property
    def _cumulative(self) -> npt.NDArray[np.float64]:
        segments = np.linalg.norm(np.diff(self._vertices, axis=0), axis=1)
        return np.concatenate(([0.0], np.cumsum(segments)))

    def length(self) -> float:
        return float(self._cumulative[-1])

    def point_at_arc_length(self, s: float) -> Point:
        s = self._clamp(s)
        cumulative = self._cumulative
        idx = int(np.searchsorted(cumulative, s, side='right')) - 1
        idx = min(max(idx, 0), len(self.points) - 2)
        segment = cumulative[idx + 1] - cumulative[idx]
        t = (s - cumulative[idx]) / segment if segment > 0.0 else 0.0
        return self.points[idx].lerp(self.points[idx + 1], t)


@dataclass(frozen=True)
class CompositeCurve(Curve):
    """
    Several profile curves traversed one after another.

    Members only need to satisfy `ProfileCurve`; the end of one member is
    expected (not enforced) to coincide with the start of the next.
    """
    curves: Sequence[ProfileCurve]
    NAME = "Composite"

    def __post_init__(self) -> None:
        curves = tuple(self.curves)
        if not curves:
            raise InvalidParameter("A composite curve needs at least one member.")
        for curve in curves:
            if not isinstance(curve, ProfileCurve):
                raise InvalidParameter(f"{type(curve).__name__} does not provide length/point_at_arc_length.")
        object.__setattr__(self, "curves", curves)

    @cached_property
    def _cumulative(self) -> npt.NDArray[np.float64]:
        return np.concatenate(([0.0], np.cumsum([curve.length() for curve in self.curves])))

    def length(self) -> float:
        return float(self._cumulative[-1])

    def point_at_arc_length(self, s: float) -> Point:
        s = self._clamp(s)
        cumulative = self._cumulative
        idx = int(np.searchsorted(cumulative, s, side='right')) - 1
        idx = min(max(idx, 0), len(self.curves) - 1)
        return Point.coerce(self.curves[idx].point_at_arc_length(s - cumulative[idx]))
