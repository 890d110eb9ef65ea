"""
Normalization variable processor.

Every value of every input variable is mapped into [0, 1]: first the calibration
range is normalized to the unit interval, then the value is passed through the
cumulative distribution of the calibration curve, which equalizes the
distribution. The number of values per variable is preserved.
"""

from hep_varproc.calibration.spline import Spline
from hep_varproc.config.calibration_config import (
    HistogramCalibration,
    NormalizeCalibration,
)
from hep_varproc.processors.base_processor import VarProcessor
from hep_varproc.processors.variable import (
    ConfigurationCursor,
    EventCursor,
    VariableFlags,
)


class NormalizationMap:
    """Equalization curve for one variable."""

    def __init__(self, calib: HistogramCalibration):
        self.min = calib.range_min
        self.width = calib.range_max - calib.range_min
        self.spline = Spline(calib.values[1:-1])

    def __call__(self, value: float) -> float:
        return self.spline.integral((value - self.min) / self.width)


class NormalizeProcessor(VarProcessor):
    """Maps raw variable values onto their calibrated cumulative distribution."""

    def __init__(self, name: str, calib: NormalizeCalibration):
        super().__init__(name)
        self.maps = tuple(NormalizationMap(distr) for distr in calib.distr)
        self.category_idx = calib.category_idx

    def configure(self, cursor: ConfigurationCursor, n: int) -> None:
        if not self._configure_blocks(len(self.maps), n, self.category_idx):
            return

        index = 0
        while cursor:
            if index == self.category_idx:
                cursor.accept(VariableFlags.NONE)
            else:
                cursor.declare_output(cursor.accept(VariableFlags.ALL))
            index += 1

    def evaluate(self, cursor: EventCursor, n: int) -> None:
        if self.blocks is None:
            raise ValueError(f"Processor '{self.name}' has not been configured")

        block = self.blocks.resolve(cursor)
        if block is None:
            for _ in range(self.blocks.block_size):
                cursor.emit()
            return

        maps = iter(self.maps[block])
        for index in range(n):
            if index == self.category_idx:
                cursor.advance()
                continue

            normalization_map = next(maps)
            cursor.emit(*(normalization_map(value) for value in cursor.values().tolist()))
            cursor.advance()
