"""Small builders for calibration records used across the test modules."""

from hep_varproc.config.calibration_config import (
    HistogramCalibration,
    LikelihoodCalibration,
    NormalizeCalibration,
    SigBkgCalibration,
)


def single_bin(density: float, range_min: float = 0.0, range_max: float = 1.0):
    """One regular bin whose histogram density is exactly ``density`` inside the range.

    The remaining weight goes into the underflow bin, so values below the range
    get a density of ``1 - density`` and values above it a density of zero.
    """
    return HistogramCalibration(
        values=[1.0 - density, density, 0.0],
        range_min=range_min,
        range_max=range_max,
    )


def flat(n_bins: int = 4, range_min: float = 0.0, range_max: float = 1.0, level: float = 1.0):
    return HistogramCalibration(
        values=[0.0] + [level] * n_bins + [0.0],
        range_min=range_min,
        range_max=range_max,
    )


def histogram_pair(signal: float, background: float) -> SigBkgCalibration:
    return SigBkgCalibration(
        signal=single_bin(signal),
        background=single_bin(background),
        use_splines=False,
    )


def likelihood_calibration(pairs, category_idx: int = -1, bias: float = 1.0):
    return LikelihoodCalibration(pdfs=tuple(pairs), category_idx=category_idx, bias=bias)


def normalize_calibration(distributions, category_idx: int = -1):
    return NormalizeCalibration(distr=tuple(distributions), category_idx=category_idx)
