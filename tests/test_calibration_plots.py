from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")  # Use non-interactive backend for testing

from hep_varproc.config.config_loader import load_processor_config  # noqa: E402
from hep_varproc.pipeline.processor_runner import ProcessorRunner  # noqa: E402
from hep_varproc.plots.calibration_plots import (  # noqa: E402
    plot_likelihood_pdfs,
    plot_normalization_maps,
)

TEST_CONFIG = Path(__file__).parent / "_test_processor_config.yaml"


@pytest.fixture(scope="module")
def runners():
    run_config = load_processor_config(TEST_CONFIG)
    return {
        spec.name: ProcessorRunner(spec.create_processor(), spec.inputs, spec.input_flags)
        for spec in run_config.processors
    }


@pytest.fixture(scope="module")
def plots_dir(results_dir):
    path = results_dir / "plots"
    path.mkdir(exist_ok=True)
    return path


def test_plot_likelihood_pdfs(runners, plots_dir):
    output = plot_likelihood_pdfs(
        runners["jet_likelihood"].processor,
        plots_dir / "jet_likelihood_pdfs.png",
        variable_names=["pt", "eta"],
    )

    assert output.exists()
    assert output.stat().st_size > 0


def test_plot_normalization_maps(runners, plots_dir):
    output = plot_normalization_maps(
        runners["jet_normalize"].processor, plots_dir / "jet_normalize_maps.png"
    )

    assert output.exists()
    assert output.stat().st_size > 0
