import math

import numpy as np
import pytest
from calibration_factories import flat, single_bin

from hep_varproc.config.calibration_config import HistogramCalibration, SigBkgCalibration
from hep_varproc.processors.pdf import HistogramPDF, SigBkg, SplinePDF

PEAKED = HistogramCalibration(
    values=[3.0, 0.5, 2.0, 8.0, 2.0, 0.5, 1.0],
    range_min=-2.0,
    range_max=3.0,
)


def test_histogram_pdf_flat_density_is_one():
    pdf = HistogramPDF(flat(n_bins=4, range_min=0.0, range_max=4.0))

    for value in (0.0, 1.3, 2.5, 3.99):
        assert pdf.density(value) == pytest.approx(1.0)
    # Empty under/overflow bins
    assert pdf.density(-1.0) == 0.0
    assert pdf.density(4.0) == 0.0


def test_histogram_pdf_scales_by_bin_count():
    pdf = HistogramPDF(single_bin(0.8))

    assert pdf.density(0.5) == pytest.approx(0.8)


def test_spline_pdf_flat_density():
    # Four control points, area of three segments: 1 * 4 / 3
    pdf = SplinePDF(flat(n_bins=4, range_min=10.0, range_max=20.0, level=5.0))

    assert pdf.density(12.0) == pytest.approx(4.0 / 3.0)
    assert pdf.density(19.0) == pytest.approx(4.0 / 3.0)


def test_spline_pdf_ignores_overflow_bins():
    with_overflow = HistogramCalibration([100.0, 1.0, 2.0, 1.0, 100.0], 0.0, 1.0)
    without_overflow = HistogramCalibration([0.0, 1.0, 2.0, 1.0, 0.0], 0.0, 1.0)

    a = SplinePDF(with_overflow)
    b = SplinePDF(without_overflow)
    for value in np.linspace(-0.5, 1.5, 9):
        assert a.density(value) == pytest.approx(b.density(value))


def test_spline_pdf_all_zero_curve_is_zero():
    pdf = SplinePDF(HistogramCalibration([1.0, 0.0, 0.0, 0.0, 1.0], 0.0, 1.0))

    assert pdf.density(0.5) == 0.0


@pytest.mark.parametrize("pdf_class", [SplinePDF, HistogramPDF])
def test_clamped_density_is_non_negative(pdf_class):
    pdf = pdf_class(PEAKED)

    for value in np.linspace(-10.0, 10.0, 401):
        assert max(0.0, pdf.density(value)) >= 0.0
        assert pdf.density(value) >= 0.0


def test_spline_pdf_propagates_nan():
    assert math.isnan(SplinePDF(PEAKED).density(float("nan")))


@pytest.mark.parametrize(
    "use_splines,pdf_class", [(True, SplinePDF), (False, HistogramPDF)]
)
def test_sigbkg_selects_representation(use_splines, pdf_class):
    pair = SigBkg(SigBkgCalibration(PEAKED, flat(), use_splines=use_splines))

    assert isinstance(pair.signal, pdf_class)
    assert isinstance(pair.background, pdf_class)
