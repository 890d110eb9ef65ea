"""
Likelihood ratio variable processor.

Reads zero or more values for each of m variables and combines the per-variable
signal and background densities into a single ``s / (s + b)`` output. An
optional category slot selects which block of densities is used.
"""

import math

from hep_varproc.config.calibration_config import LikelihoodCalibration
from hep_varproc.processors.base_processor import VarProcessor
from hep_varproc.processors.pdf import SigBkg
from hep_varproc.processors.variable import (
    ConfigurationCursor,
    EventCursor,
    VariableFlags,
)

# Density pairs summing below this are treated as carrying no information
MIN_COMBINED_DENSITY = 1.0e-30


def underflow_floor(informative_count: int) -> float:
    """Smallest acceptable ``signal + background`` after multiplying in that many factors."""
    return math.exp(-6 * informative_count - 2)


class LikelihoodProcessor(VarProcessor):
    """Combines calibrated signal/background densities into a likelihood ratio."""

    def __init__(self, name: str, calib: LikelihoodCalibration):
        super().__init__(name)
        self.pdfs = tuple(SigBkg(pdf) for pdf in calib.pdfs)
        self.category_idx = calib.category_idx
        self.bias = calib.bias

    def configure(self, cursor: ConfigurationCursor, n: int) -> None:
        if not self._configure_blocks(len(self.pdfs), n, self.category_idx):
            return

        index = 0
        while cursor:
            if index == self.category_idx:
                cursor.accept(VariableFlags.NONE)
            else:
                cursor.accept(VariableFlags.ALL)
            index += 1

        cursor.declare_output(VariableFlags.OPTIONAL)

    def evaluate(self, cursor: EventCursor, n: int) -> None:
        if self.blocks is None:
            raise ValueError(f"Processor '{self.name}' has not been configured")

        block = self.blocks.resolve(cursor)
        if block is None:
            cursor.emit()
            return

        pdfs = iter(self.pdfs[block])
        informative = 0
        signal = self.bias
        background = 1.0

        for index in range(n):
            if index == self.category_idx:
                cursor.advance()
                continue

            pdf = next(pdfs)
            for value in cursor.values().tolist():
                # max() with 0.0 first also maps NaN densities to zero
                signal_prob = max(0.0, pdf.signal.density(value))
                background_prob = max(0.0, pdf.background.density(value))
                if signal_prob + background_prob < MIN_COMBINED_DENSITY:
                    continue
                informative += 1
                signal *= signal_prob
                background *= background_prob
            cursor.advance()

        if not informative or signal + background < underflow_floor(informative):
            cursor.emit()
        else:
            cursor.emit(signal / (signal + background))
