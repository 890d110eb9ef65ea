"""
Calibration records consumed by the variable processors.

These are plain immutable records: they are built once (from code or from a
dictionary produced by the YAML config loader), validated, and then handed to
a processor constructor. Nothing here evaluates densities.
"""

from dataclasses import dataclass, field
from typing import Any

from hep_varproc.calibration.histogram import Histogram


@dataclass(frozen=True)
class HistogramCalibration:
    """Histogram contents (with underflow/overflow bins) and value range."""

    values: tuple[float, ...]
    range_min: float
    range_max: float

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def validate(self) -> None:
        """Validate histogram calibration parameters"""
        if len(self.values) < 3:
            raise ValueError(
                "values must hold underflow, overflow and at least one regular bin"
            )
        if not self.range_max > self.range_min:
            raise ValueError(
                f"range_max ({self.range_max}) must be greater than range_min ({self.range_min})"
            )

    def to_histogram(self) -> Histogram:
        return Histogram(self.values, self.range_min, self.range_max)

    def to_dict(self) -> dict:
        return {
            "values": list(self.values),
            "range": [self.range_min, self.range_max],
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "HistogramCalibration":
        """Create config from dictionary.

        The range may be given either as ``range: [min, max]`` or as separate
        ``range_min`` / ``range_max`` keys.
        """
        if "range" in config_dict:
            range_min, range_max = config_dict["range"]
        else:
            range_min = config_dict["range_min"]
            range_max = config_dict["range_max"]

        return cls(
            values=config_dict["values"],
            range_min=float(range_min),
            range_max=float(range_max),
        )


@dataclass(frozen=True)
class SigBkgCalibration:
    """Signal and background densities for one variable in one category."""

    signal: HistogramCalibration
    background: HistogramCalibration
    use_splines: bool = True

    def validate(self) -> None:
        self.signal.validate()
        self.background.validate()

    def to_dict(self) -> dict:
        return {
            "signal": self.signal.to_dict(),
            "background": self.background.to_dict(),
            "use_splines": self.use_splines,
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "SigBkgCalibration":
        return cls(
            signal=HistogramCalibration.from_dict(config_dict["signal"]),
            background=HistogramCalibration.from_dict(config_dict["background"]),
            use_splines=bool(config_dict.get("use_splines", True)),
        )


@dataclass(frozen=True)
class LikelihoodCalibration:
    """Configuration for the likelihood ratio processor"""

    pdfs: tuple[SigBkgCalibration, ...] = field(default_factory=tuple)
    category_idx: int = -1  # -1 means no categorization
    bias: float = 1.0  # prior weight folded into the signal product

    def __post_init__(self):
        object.__setattr__(self, "pdfs", tuple(self.pdfs))

    def validate(self) -> None:
        """Validate likelihood calibration parameters"""
        if not self.pdfs:
            raise ValueError("pdfs cannot be empty")
        if self.category_idx < -1:
            raise ValueError(
                f"category_idx must be -1 (no categories) or a slot index, got {self.category_idx}"
            )
        for index, pdf in enumerate(self.pdfs):
            try:
                pdf.validate()
            except ValueError as e:
                raise ValueError(f"Invalid PDF pair at index {index}: {e}") from e

    def to_dict(self) -> dict:
        return {
            "category_idx": self.category_idx,
            "bias": self.bias,
            "pdfs": [pdf.to_dict() for pdf in self.pdfs],
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "LikelihoodCalibration":
        """Create config from dictionary."""
        return cls(
            pdfs=tuple(SigBkgCalibration.from_dict(pdf) for pdf in config_dict["pdfs"]),
            category_idx=int(config_dict.get("category_idx", -1)),
            bias=float(config_dict.get("bias", 1.0)),
        )


@dataclass(frozen=True)
class NormalizeCalibration:
    """Configuration for the distribution-equalizing normalization processor"""

    distr: tuple[HistogramCalibration, ...] = field(default_factory=tuple)
    category_idx: int = -1

    def __post_init__(self):
        object.__setattr__(self, "distr", tuple(self.distr))

    def validate(self) -> None:
        """Validate normalization calibration parameters"""
        if not self.distr:
            raise ValueError("distr cannot be empty")
        if self.category_idx < -1:
            raise ValueError(
                f"category_idx must be -1 (no categories) or a slot index, got {self.category_idx}"
            )
        for index, histogram in enumerate(self.distr):
            try:
                histogram.validate()
            except ValueError as e:
                raise ValueError(f"Invalid distribution at index {index}: {e}") from e

    def to_dict(self) -> dict:
        return {
            "category_idx": self.category_idx,
            "distr": [histogram.to_dict() for histogram in self.distr],
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "NormalizeCalibration":
        """Create config from dictionary."""
        return cls(
            distr=tuple(
                HistogramCalibration.from_dict(histogram)
                for histogram in config_dict["distr"]
            ),
            category_idx=int(config_dict.get("category_idx", -1)),
        )
