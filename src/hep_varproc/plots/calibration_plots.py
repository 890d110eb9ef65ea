"""
Diagnostic plots of the calibration held by configured processors.

One subplot per input variable; categories are overlaid with different colors.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from hep_varproc.config.logging_config import get_logger
from hep_varproc.plots.plot_utils import (
    LINE_WIDTHS,
    SIGBKG_LINE_STYLES,
    get_color_cycle,
    get_figure_size,
    set_science_style,
)
from hep_varproc.processors.likelihood import LikelihoodProcessor
from hep_varproc.processors.normalize import NormalizeProcessor
from hep_varproc.processors.pdf import PDF, HistogramPDF

logger = get_logger(__name__)

N_POINTS = 200


def _layout(processor, table_size: int) -> tuple[int, int]:
    """(block_size, n_categories) of a processor, assuming one block if unconfigured."""
    if processor.blocks is None:
        return table_size, 1
    return processor.blocks.block_size, processor.blocks.n_categories


def _pdf_range(pdf: PDF) -> tuple[float, float]:
    if isinstance(pdf, HistogramPDF):
        return pdf.histogram.range_min, pdf.histogram.range_max
    return pdf.min, pdf.min + pdf.width


def _make_axes(n_variables: int):
    n_cols = min(n_variables, 3)
    n_rows = int(np.ceil(n_variables / n_cols))
    width, height = get_figure_size("double" if n_cols > 1 else "single")
    fig, axes = plt.subplots(n_rows, n_cols, figsize=(width, height * n_rows), squeeze=False)
    for ax in axes.flat[n_variables:]:
        ax.set_visible(False)
    return fig, axes.flat


def _variable_label(variable_names: Optional[Sequence[str]], index: int) -> str:
    if variable_names is not None and index < len(variable_names):
        return variable_names[index]
    return f"variable {index}"


def plot_likelihood_pdfs(
    processor: LikelihoodProcessor,
    output_path: Union[str, Path],
    variable_names: Optional[Sequence[str]] = None,
) -> Path:
    """Draw the clamped signal and background densities of every variable."""
    set_science_style()
    output_path = Path(output_path)
    block_size, n_categories = _layout(processor, len(processor.pdfs))
    colors = get_color_cycle("aesthetic" if n_categories > 2 else "high_contrast", n_categories)

    fig, axes = _make_axes(block_size)
    for index, ax in enumerate(axes):
        if index >= block_size:
            break
        for category in range(n_categories):
            pair = processor.pdfs[category * block_size + index]
            low, high = _pdf_range(pair.signal)
            x = np.linspace(low, high, N_POINTS)
            suffix = f" (cat {category})" if n_categories > 1 else ""
            for kind, pdf in (("signal", pair.signal), ("background", pair.background)):
                y = [max(0.0, pdf.density(value)) for value in x]
                ax.plot(
                    x,
                    y,
                    color=colors[category],
                    linestyle=SIGBKG_LINE_STYLES[kind],
                    linewidth=LINE_WIDTHS["thick"],
                    label=f"{kind}{suffix}",
                )
        ax.set_xlabel(_variable_label(variable_names, index))
        ax.set_ylabel("Density")
        ax.legend(loc="best")

    fig.suptitle(f"{processor.name}: signal/background densities")
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path)
    plt.close(fig)

    logger.info(f"Saved likelihood density plot to {output_path}")
    return output_path


def plot_normalization_maps(
    processor: NormalizeProcessor,
    output_path: Union[str, Path],
    variable_names: Optional[Sequence[str]] = None,
) -> Path:
    """Draw the cumulative equalization curve of every variable."""
    set_science_style()
    output_path = Path(output_path)
    block_size, n_categories = _layout(processor, len(processor.maps))
    colors = get_color_cycle("aesthetic", n_categories)

    fig, axes = _make_axes(block_size)
    for index, ax in enumerate(axes):
        if index >= block_size:
            break
        for category in range(n_categories):
            normalization_map = processor.maps[category * block_size + index]
            x = np.linspace(
                normalization_map.min,
                normalization_map.min + normalization_map.width,
                N_POINTS,
            )
            ax.plot(
                x,
                [normalization_map(value) for value in x],
                color=colors[category],
                linewidth=LINE_WIDTHS["thick"],
                label=f"category {category}" if n_categories > 1 else None,
            )
        ax.set_xlabel(_variable_label(variable_names, index))
        ax.set_ylabel("Normalized value")
        ax.set_ylim(-0.05, 1.05)
        if n_categories > 1:
            ax.legend(loc="best")

    fig.suptitle(f"{processor.name}: equalization curves")
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path)
    plt.close(fig)

    logger.info(f"Saved normalization curve plot to {output_path}")
    return output_path
