"""
Binned histogram with explicit underflow and overflow bins.

The layout follows the usual calibration convention: ``values[0]`` is the
underflow bin, ``values[-1]`` the overflow bin and everything in between the
regular bins covering ``[range_min, range_max)`` with equal widths.
"""

import math
from typing import Sequence

import numpy as np


class Histogram:
    """Immutable binned histogram used for histogram-based density lookups."""

    def __init__(self, values: Sequence[float], range_min: float, range_max: float):
        contents = np.array(values, dtype=np.float64)
        if contents.ndim != 1 or contents.size < 3:
            raise ValueError(
                "Histogram needs at least one regular bin plus underflow and overflow bins"
            )
        if not range_max > range_min:
            raise ValueError(
                f"Histogram range must have positive width, got [{range_min}, {range_max})"
            )

        contents.setflags(write=False)
        self._values = contents
        self._min = float(range_min)
        self._max = float(range_max)
        self._normalization = float(contents.sum())

    @property
    def values(self) -> np.ndarray:
        """All bin contents including underflow and overflow (read-only)."""
        return self._values

    @property
    def range_min(self) -> float:
        return self._min

    @property
    def range_max(self) -> float:
        return self._max

    @property
    def width(self) -> float:
        return self._max - self._min

    def number_of_bins(self) -> int:
        return self._values.size - 2

    def interior_values(self) -> np.ndarray:
        """Bin contents without the underflow and overflow bins."""
        return self._values[1:-1]

    def find_bin(self, x: float) -> int:
        if x < self._min:
            return 0
        if x >= self._max or math.isnan(x):
            return self._values.size - 1
        nbins = self.number_of_bins()
        # Guard against rounding pushing the last regular value onto the overflow bin
        return 1 + min(int((x - self._min) / self.width * nbins), nbins - 1)

    def value(self, x: float) -> float:
        return float(self._values[self.find_bin(x)])

    def normalization(self) -> float:
        """Sum over all bins, including underflow and overflow."""
        return self._normalization

    def normalized_value(self, x: float) -> float:
        if self._normalization == 0.0:
            return 0.0
        return self.value(x) / self._normalization
