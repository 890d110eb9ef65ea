from typing import Any, Optional, Union

from hep_varproc.config.calibration_config import (
    LikelihoodCalibration,
    NormalizeCalibration,
)
from hep_varproc.config.logging_config import get_logger
from hep_varproc.processors.base_processor import VarProcessor
from hep_varproc.processors.likelihood import LikelihoodProcessor
from hep_varproc.processors.normalize import NormalizeProcessor

logger = get_logger(__name__)


class ProcessorFactory:
    """Factory class for creating variable processors by registered type name"""

    # Map processor types to their respective calibration classes
    CALIBRATION_CLASSES: dict[str, type] = {
        "ProcLikelihood": LikelihoodCalibration,
        "ProcNormalize": NormalizeCalibration,
    }

    # Map processor types to their respective processor classes
    PROCESSOR_CLASSES: dict[str, type] = {
        "ProcLikelihood": LikelihoodProcessor,
        "ProcNormalize": NormalizeProcessor,
    }

    @classmethod
    def register_processor(
        cls, processor_type: str, processor_class: type, calibration_class: type
    ) -> None:
        """Register an additional processor type at startup."""
        if processor_type in cls.PROCESSOR_CLASSES:
            logger.warning(f"Replacing registered processor type: {processor_type}")
        cls.PROCESSOR_CLASSES[processor_type] = processor_class
        cls.CALIBRATION_CLASSES[processor_type] = calibration_class

    @classmethod
    def available_types(cls) -> list[str]:
        return sorted(cls.PROCESSOR_CLASSES)

    @classmethod
    def create_processor(
        cls,
        processor_type: str,
        calibration: Union[dict[str, Any], Any],
        name: Optional[str] = None,
    ) -> VarProcessor:
        """Create a processor instance based on type and calibration."""
        # 1. Get the classes for this processor type
        processor_class = cls.PROCESSOR_CLASSES.get(processor_type)
        calibration_class = cls.CALIBRATION_CLASSES.get(processor_type)
        if processor_class is None or calibration_class is None:
            raise ValueError(
                f"Unknown processor type: {processor_type} "
                f"(available: {', '.join(cls.available_types())})"
            )

        # 2. Build the calibration record from a dict if needed
        if isinstance(calibration, dict):
            calibration = calibration_class.from_dict(calibration)
        elif not isinstance(calibration, calibration_class):
            raise ValueError(
                f"Processor type {processor_type} expects a {calibration_class.__name__}, "
                f"got {type(calibration).__name__}"
            )

        # 3. Validate before building any density objects
        calibration.validate()

        # 4. Create processor with validated calibration
        return processor_class(name or processor_type, calibration)
