#!/usr/bin/env python3
"""
Plot the calibration curves of every processor in a YAML run configuration.

Likelihood processors get their signal/background densities drawn, normalization
processors their equalization curves. Processors are configured against their
inputs first so that category blocks are drawn separately.
"""

import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from hep_varproc.config.config_loader import load_processor_config  # noqa: E402
from hep_varproc.config.logging_config import get_logger, setup_logging  # noqa: E402
from hep_varproc.pipeline.processor_runner import ProcessorRunner  # noqa: E402
from hep_varproc.plots.calibration_plots import (  # noqa: E402
    plot_likelihood_pdfs,
    plot_normalization_maps,
)
from hep_varproc.processors.likelihood import LikelihoodProcessor  # noqa: E402
from hep_varproc.processors.normalize import NormalizeProcessor  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Plot processor calibration curves")
    parser.add_argument("--config", type=str, required=True, help="YAML run configuration")
    parser.add_argument(
        "--output-dir",
        type=str,
        default="calibration_plots",
        help="Directory for the plots (default: calibration_plots)",
    )
    args = parser.parse_args()

    run_config = load_processor_config(args.config)
    setup_logging(level=run_config.log_level)
    logger = get_logger(__name__)
    output_dir = Path(args.output_dir)

    for spec in run_config.processors:
        runner = ProcessorRunner(spec.create_processor(), spec.inputs, spec.input_flags)
        processor = runner.processor
        variable_names = [
            name for index, name in enumerate(spec.inputs)
            if index != processor.category_idx
        ]

        if isinstance(processor, LikelihoodProcessor):
            plot_likelihood_pdfs(
                processor, output_dir / f"{spec.name}_pdfs.png", variable_names
            )
        elif isinstance(processor, NormalizeProcessor):
            plot_normalization_maps(
                processor, output_dir / f"{spec.name}_maps.png", variable_names
            )
        else:
            logger.warning(f"No plot available for processor type {spec.type}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
