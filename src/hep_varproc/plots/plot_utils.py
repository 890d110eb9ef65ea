"""
Plotting utilities and theme settings for consistent calibration diagnostics.

The module includes:
- HIGH_CONTRAST_COLORS: palette for overlapping curves (signal vs background)
- AESTHETIC_COLORS: gradient palette for per-category curves
- Figure sizing helpers and a publication style
"""

import logging

import matplotlib.pyplot as plt

# Disable LaTeX rendering by default
plt.rcParams["text.usetex"] = False

# ============================================================================
# Color Palettes
# ============================================================================

# High contrast colors for curves drawn on the same axes
HIGH_CONTRAST_COLORS: list[str] = [
    "dodgerblue",  # Strong blue #0370DB
    "crimson",  # Deep red #BA0020
    "forestgreen",  # Rich green #076C07
    "darkorange",  # Bright orange #DB6D00
    "dimgrey",  # Neutral grey #4B4B4B
    "purple",  # Deep purple #610061
    "orchid",  # Light purple #B752B4
]

# Aesthetic gradient for sequential data such as category blocks
AESTHETIC_COLORS: list[tuple[float, float, float]] = [
    (4 / 256, 87 / 256, 172 / 256),  # Deep blue #0457AC
    (48 / 256, 143 / 256, 172 / 256),  # Light blue #308FAC
    (55 / 256, 189 / 256, 121 / 256),  # Bright green #37BD79
    (167 / 256, 226 / 256, 55 / 256),  # Light green #A7E237
    (244 / 256, 230 / 256, 4 / 256),  # Yellow #F4E604
]

# Signal is drawn solid, background dashed
SIGBKG_LINE_STYLES = {
    "signal": "-",
    "background": "--",
}

# ============================================================================
# Figure Sizing and Text Parameters
# ============================================================================

SINGLE_COLUMN_WIDTH = 8.5
DOUBLE_COLUMN_WIDTH = 12.0
GOLDEN_RATIO = 1.618

FONT_SIZES = {
    "tiny": 8,
    "small": 10,
    "normal": 12,
    "large": 14,
    "xlarge": 16,
    "huge": 18,
}

LINE_WIDTHS = {"thin": 0.5, "normal": 1.0, "thick": 2.0, "heavy": 3.0}

# ============================================================================
# Style Configuration
# ============================================================================


def set_science_style(use_tex: bool = False) -> None:
    """Configure matplotlib for scientific publication plots"""
    plt.style.use("seaborn-v0_8-paper")

    logging.getLogger("matplotlib.font_manager").setLevel(logging.ERROR)

    if use_tex:
        plt.rcParams.update(
            {
                "text.usetex": True,
                "text.latex.preamble": r"\usepackage{lmodern}",
                "font.family": "serif",
                "font.serif": ["Latin Modern Roman"],
            }
        )

    plt.rcParams.update(
        {
            "font.size": FONT_SIZES["normal"],
            "axes.labelsize": FONT_SIZES["large"],
            "axes.titlesize": FONT_SIZES["xlarge"],
            "xtick.labelsize": FONT_SIZES["normal"],
            "ytick.labelsize": FONT_SIZES["normal"],
            "legend.fontsize": FONT_SIZES["normal"],
            "figure.dpi": 150,
        }
    )


def get_figure_size(width: str = "single", ratio: float = None) -> tuple[float, float]:
    """
    Get recommended figure dimensions

    Args:
        width: 'single' or 'double' for column width
        ratio: Optional custom aspect ratio (default: golden ratio)

    Returns:
        Tuple of (width, height) in inches
    """
    w = SINGLE_COLUMN_WIDTH if width == "single" else DOUBLE_COLUMN_WIDTH
    r = ratio if ratio is not None else GOLDEN_RATIO
    return (w, w / r)


def get_color_cycle(palette: str = "high_contrast", n: int = None) -> list:
    """
    Get a color cycle for plotting multiple data series

    Args:
        palette: 'high_contrast' or 'aesthetic'
        n: Number of colors needed (if None, returns full palette)

    Returns:
        List of colors
    """
    colors = HIGH_CONTRAST_COLORS if palette == "high_contrast" else AESTHETIC_COLORS
    if n is not None:
        # Cycle colors if more are needed than available
        return [colors[i % len(colors)] for i in range(n)]
    return colors
