"""
Configuration loading system for variable processor runs.

This module provides a small configuration layer that:
1. Uses YAML for human-readable, versionable run configs
2. Creates proper calibration objects for each configured processor
3. Keeps the source file path so results can be traced back to their config

The processors never read files themselves; they only receive the calibration
records built here.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from hep_varproc.config.logging_config import get_logger, parse_log_level
from hep_varproc.processors.processor_registry import ProcessorFactory
from hep_varproc.processors.variable import VariableFlags


@dataclass
class ProcessorSpec:
    """One configured processor: its type, its input variables and its calibration"""

    name: str
    type: str
    inputs: list[str]
    calibration: Any
    input_flags: Optional[list[VariableFlags]] = None

    def validate(self) -> None:
        if not self.inputs:
            raise ValueError(f"Processor '{self.name}' has no inputs")
        if len(set(self.inputs)) != len(self.inputs):
            raise ValueError(f"Processor '{self.name}' lists an input more than once")
        if self.input_flags is not None and len(self.input_flags) != len(self.inputs):
            raise ValueError(
                f"Processor '{self.name}' has {len(self.inputs)} inputs but "
                f"{len(self.input_flags)} input flags"
            )
        self.calibration.validate()

    def create_processor(self):
        return ProcessorFactory.create_processor(self.type, self.calibration, self.name)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "inputs": self.inputs,
            "input_flags": [flags.name for flags in self.input_flags]
            if self.input_flags is not None
            else None,
            "calibration": self.calibration.to_dict(),
        }


@dataclass
class RunConfig:
    """Settings for a processor run"""

    log_level: int = logging.INFO
    show_progress: bool = True
    processors: list[ProcessorSpec] = field(default_factory=list)
    source_config_file: Optional[str] = None

    def validate(self) -> None:
        if not self.processors:
            raise ValueError("processors cannot be empty")
        names = [spec.name for spec in self.processors]
        if len(set(names)) != len(names):
            raise ValueError("processor names must be unique")
        for spec in self.processors:
            spec.validate()


class ProcessorConfigLoader:
    """
    Loads and processes processor run configuration files.

    Features:
    - YAML-based configuration files
    - Automatic calibration object creation via the processor registry
    - Source file tracking
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def load_config(self, config_path: Union[str, Path]) -> dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Dictionary containing the raw configuration
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")

        # Store the source file path for traceability
        config["_source_config_file"] = str(config_path.absolute())

        return config

    def create_config_objects(self, config_dict: dict[str, Any]) -> RunConfig:
        """
        Create proper config objects from the loaded configuration.

        Args:
            config_dict: Dictionary from loaded YAML config

        Returns:
            Validated RunConfig
        """
        self.logger.info("Creating configuration objects...")

        run_dict = config_dict.get("run", {}) or {}
        run_config = RunConfig(
            log_level=parse_log_level(run_dict.get("log_level", "INFO")),
            show_progress=bool(run_dict.get("show_progress", True)),
            processors=[
                self._create_processor_spec(processor_dict)
                for processor_dict in config_dict.get("processors", [])
            ],
            source_config_file=config_dict.get("_source_config_file"),
        )
        run_config.validate()

        self.logger.info(
            f"Loaded {len(run_config.processors)} processor configuration(s): "
            f"{', '.join(spec.name for spec in run_config.processors)}"
        )
        return run_config

    def _create_processor_spec(self, processor_dict: dict[str, Any]) -> ProcessorSpec:
        """Create ProcessorSpec from dictionary."""
        processor_type = processor_dict["type"]
        calibration_class = ProcessorFactory.CALIBRATION_CLASSES.get(processor_type)
        if calibration_class is None:
            raise ValueError(f"Unknown processor type: {processor_type}")

        input_flags = processor_dict.get("input_flags")
        if input_flags is not None:
            input_flags = [VariableFlags[str(flags).upper()] for flags in input_flags]

        return ProcessorSpec(
            name=processor_dict.get("name", processor_type),
            type=processor_type,
            inputs=list(processor_dict["inputs"]),
            calibration=calibration_class.from_dict(processor_dict["calibration"]),
            input_flags=input_flags,
        )


def load_processor_config(config_path: Union[str, Path]) -> RunConfig:
    """
    Convenience function to load a processor run configuration.

    Args:
        config_path: Path to the configuration file

    Returns:
        RunConfig holding all processor specs and settings
    """
    loader = ProcessorConfigLoader()
    config_dict = loader.load_config(config_path)
    return loader.create_config_objects(config_dict)
