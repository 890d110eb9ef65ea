# vulture_whitelist.py

# Plot utils are for standardization of plots so is okay if not all used
from src.hep_varproc.plots import plot_utils
plot_utils.FONT_SIZES
plot_utils.AESTHETIC_COLORS

# Slot flags are part of the pipeline-facing vocabulary even where no processor declares them
from src.hep_varproc.processors.variable import VariableFlags
VariableFlags.MULTIPLE

# Extension point called by pipelines at startup to add processor types
from src.hep_varproc.processors.processor_registry import ProcessorFactory
ProcessorFactory.register_processor

# Calibration helpers used by tests and diagnostics
from src.hep_varproc.calibration.histogram import Histogram
Histogram.interior_values
from src.hep_varproc.calibration.spline import Spline
Spline.control_points
