from typing import Sequence, Union

import numpy as np
from scipy.interpolate import PchipInterpolator

ArrayLike = Union[float, Sequence[float], np.ndarray]


class Spline:
    """
    Shape-preserving interpolating curve over equally spaced control points on [0, 1].

    The curve is built once from the control points and never changes afterwards.
    Between control points it is monotone (piecewise cubic Hermite, PCHIP), so a
    non-negative set of points never produces overshoot between them.

    The area is expressed in segment units, i.e. ``(entries - 1) * integral(0..1)``,
    which makes ``eval(x) * number_of_entries() / area()`` close to one for a flat
    curve. This is the normalization used by the density evaluators.
    """

    def __init__(self, values: Sequence[float]):
        points = np.asarray(values, dtype=np.float64)
        if points.ndim != 1 or points.size == 0:
            raise ValueError("Spline requires at least one control point")

        self._entries = int(points.size)

        if points.size == 1:
            # A single point describes a constant curve
            points = np.repeat(points, 2)
            segments = 1
        else:
            segments = points.size - 1

        self._curve = PchipInterpolator(
            np.linspace(0.0, 1.0, points.size), points, extrapolate=False
        )
        self._unit_area = float(self._curve.integrate(0.0, 1.0))
        self._area = self._unit_area * segments

        control_points = np.array(values, dtype=np.float64)
        control_points.setflags(write=False)
        self._points = control_points

    def eval(self, x: ArrayLike):
        """Evaluate the curve, clamping the argument into [0, 1]."""
        result = self._curve(np.clip(x, 0.0, 1.0))
        return float(result) if np.ndim(result) == 0 else result

    def integral(self, x: float) -> float:
        """Cumulative integral from 0 to x, normalized to the total area (in [0, 1]).

        NaN is passed through unchanged.
        """
        if np.isnan(x):
            return float("nan")
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        if self._area < 1.0e-9:
            return 0.0
        return float(self._curve.integrate(0.0, x)) / self._unit_area

    def number_of_entries(self) -> int:
        return self._entries

    def area(self) -> float:
        return self._area

    @property
    def control_points(self) -> np.ndarray:
        """Read-only view of the control points."""
        return self._points
