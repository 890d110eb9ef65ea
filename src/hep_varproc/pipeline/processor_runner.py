"""
Minimal pipeline driver for a single variable processor.

The runner owns the named input slots, configures the processor exactly once
and then evaluates events (mappings from variable name to zero or more values).
Configuration problems are turned into exceptions here, before any event is
processed. Evaluation only reads the processor's calibration, so a configured
runner can be shared by several threads.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence

import numpy as np
from tqdm import tqdm

from hep_varproc.config.logging_config import get_logger
from hep_varproc.processors.base_processor import VarProcessor
from hep_varproc.processors.variable import (
    ConfigurationCursor,
    EventCursor,
    VariableFlags,
)


class ProcessorConfigurationError(ValueError):
    """Raised when a processor declares no usable outputs for its inputs."""


def check_arity(flags: VariableFlags, count: int) -> bool:
    """Whether ``count`` values are allowed by the slot flags."""
    if count == 0:
        return bool(flags & VariableFlags.OPTIONAL)
    if count > 1:
        return bool(flags & VariableFlags.MULTIPLE)
    return True


class ProcessorRunner:
    """Configures one processor against named inputs and evaluates events with it."""

    def __init__(
        self,
        processor: VarProcessor,
        input_names: Sequence[str],
        input_flags: Optional[Sequence[VariableFlags]] = None,
    ):
        self.logger = get_logger(__name__)
        self.processor = processor
        self.input_names = list(input_names)

        if input_flags is None:
            input_flags = [VariableFlags.ALL] * len(self.input_names)
        if len(input_flags) != len(self.input_names):
            raise ValueError(
                f"Got {len(input_flags)} input flags for {len(self.input_names)} inputs"
            )
        self.input_flags = [VariableFlags(flags) for flags in input_flags]

        cursor = ConfigurationCursor(self.input_flags)
        processor.configure(cursor, len(self.input_names))

        if not cursor.outputs:
            raise ProcessorConfigurationError(
                f"Processor '{processor.name}' declared no outputs for inputs "
                f"{self.input_names}; check the calibration against the input list"
            )

        self.accepted_flags = list(cursor.accepted)
        self.output_flags = list(cursor.outputs)
        self.output_names = self._make_output_names()

        self.logger.info(
            f"Configured processor '{processor.name}' with {len(self.input_names)} "
            f"inputs and {len(self.output_flags)} outputs"
        )

    def _make_output_names(self) -> list[str]:
        if len(self.output_flags) == 1:
            return [self.processor.name]

        mapped_inputs = [
            name
            for name, flags in zip(self.input_names, self.accepted_flags)
            if flags != VariableFlags.NONE
        ]
        if len(mapped_inputs) == len(self.output_flags):
            return [f"{self.processor.name}.{name}" for name in mapped_inputs]
        return [f"{self.processor.name}.{i}" for i in range(len(self.output_flags))]

    def _event_inputs(self, event: Mapping[str, Any]) -> list[np.ndarray]:
        inputs = []
        for name, flags in zip(self.input_names, self.accepted_flags):
            values = np.atleast_1d(np.asarray(event.get(name, ()), dtype=np.float64))
            if not check_arity(flags, values.size):
                raise ValueError(
                    f"Input '{name}' of processor '{self.processor.name}' "
                    f"got {values.size} values, which {flags!r} does not allow"
                )
            inputs.append(values)
        return inputs

    def evaluate_event(self, event: Mapping[str, Any]) -> list[tuple[float, ...]]:
        """Evaluate one event; returns one tuple of values per output slot.

        Missing variables are treated as holding no values.
        """
        cursor = EventCursor(self._event_inputs(event))
        self.processor.evaluate(cursor, len(self.input_names))
        return cursor.outputs

    def evaluate_events(
        self, events: Iterable[Mapping[str, Any]], show_progress: bool = True
    ) -> list[list[tuple[float, ...]]]:
        """Evaluate a batch of events in order."""
        results = []
        empty_events = 0

        for event in tqdm(
            events,
            desc=f"Evaluating {self.processor.name}",
            disable=not show_progress,
            unit="event",
        ):
            outputs = self.evaluate_event(event)
            if not any(outputs):
                empty_events += 1
            results.append(outputs)

        self.logger.progress(
            f"Processor '{self.processor.name}' evaluated {len(results)} events "
            f"({empty_events} with all outputs empty)"
        )
        return results

    def to_records(
        self, results: Iterable[list[tuple[float, ...]]]
    ) -> list[dict[str, Any]]:
        """Turn evaluation results into name-keyed records.

        A single-valued output becomes a float, an empty one ``None`` and
        multi-valued outputs stay lists.
        """
        records = []
        for outputs in results:
            record = {}
            for name, flags, values in zip(self.output_names, self.output_flags, outputs):
                if flags & VariableFlags.MULTIPLE:
                    record[name] = list(values)
                else:
                    record[name] = values[0] if values else None
            records.append(record)
        return records
