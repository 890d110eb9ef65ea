from abc import ABC, abstractmethod

from hep_varproc.calibration.spline import Spline
from hep_varproc.config.calibration_config import HistogramCalibration, SigBkgCalibration


class PDF(ABC):
    """Base class for calibrated density estimators.

    ``density`` may return small negative interpolation artifacts; callers clamp
    the result at zero.
    """

    @abstractmethod
    def density(self, value: float) -> float:
        pass


class SplinePDF(PDF):
    """Density from a spline through the interior bins of a calibration histogram."""

    def __init__(self, calib: HistogramCalibration):
        self.min = calib.range_min
        self.width = calib.range_max - calib.range_min
        # Underflow and overflow bins do not belong to the curve
        self.spline = Spline(calib.values[1:-1])
        area = self.spline.area()
        # An all-zero curve carries no information; keep its density at zero
        self._scale = self.spline.number_of_entries() / area if area > 0.0 else 0.0

    def density(self, value: float) -> float:
        value = (value - self.min) / self.width
        return self.spline.eval(value) * self._scale


class HistogramPDF(PDF):
    """Density from the normalized bin content, rescaled by the bin count."""

    def __init__(self, calib: HistogramCalibration):
        self.histogram = calib.to_histogram()
        self._bins = self.histogram.number_of_bins()

    def density(self, value: float) -> float:
        return self.histogram.normalized_value(value) * self._bins


class SigBkg:
    """Signal and background density pair for one variable."""

    def __init__(self, calib: SigBkgCalibration):
        pdf_class = SplinePDF if calib.use_splines else HistogramPDF
        self.signal = pdf_class(calib.signal)
        self.background = pdf_class(calib.background)
