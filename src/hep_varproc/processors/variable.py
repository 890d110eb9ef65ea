"""
Slot flags and the cursors a pipeline hands to a variable processor.

A processor never sees the pipeline's storage directly. During configuration it
walks a ``ConfigurationCursor`` to declare what it accepts and what it produces;
during evaluation it walks an ``EventCursor`` to read each slot's values and to
emit its outputs.
"""

from enum import IntFlag
from typing import Iterable, Optional, Sequence

import numpy as np


class VariableFlags(IntFlag):
    """Arity of a slot.

    NONE means exactly one value, OPTIONAL allows zero or one, MULTIPLE allows
    one or more and ALL allows any number of values (including none).
    """

    NONE = 0
    OPTIONAL = 1
    MULTIPLE = 2
    ALL = OPTIONAL | MULTIPLE


class ConfigurationCursor:
    """Ordered view over the input slots offered to a processor at configuration time."""

    def __init__(self, input_flags: Sequence[VariableFlags]):
        self._input_flags = [VariableFlags(flags) for flags in input_flags]
        self._position = 0
        self.accepted: list[VariableFlags] = []
        self.outputs: list[VariableFlags] = []

    @property
    def input_count(self) -> int:
        return len(self._input_flags)

    def has_next(self) -> bool:
        return self._position < len(self._input_flags)

    def __bool__(self) -> bool:
        return self.has_next()

    def current_flags(self) -> VariableFlags:
        """Flags the pipeline provides for the current slot."""
        return self._input_flags[self._position]

    def accept(self, flags: VariableFlags) -> VariableFlags:
        """Declare the accepted arity of the current slot and advance to the next one."""
        if not self.has_next():
            raise IndexError("No input slot left to accept")
        flags = VariableFlags(flags)
        self.accepted.append(flags)
        self._position += 1
        return flags

    def declare_output(self, flags: VariableFlags) -> None:
        self.outputs.append(VariableFlags(flags))


class EventCursor:
    """Ordered view over one event's input slots, collecting emitted outputs."""

    def __init__(self, inputs: Iterable[Iterable[float]]):
        self._inputs = [
            np.atleast_1d(np.asarray(values, dtype=np.float64)) for values in inputs
        ]
        self._position = 0
        self.outputs: list[tuple[float, ...]] = []

    def has_next(self) -> bool:
        return self._position < len(self._inputs)

    def __bool__(self) -> bool:
        return self.has_next()

    def values(self) -> np.ndarray:
        """Values held by the current slot."""
        return self._inputs[self._position]

    def value_at(self, index: int) -> Optional[float]:
        """First value of the slot at ``index``, or None if that slot is empty."""
        values = self._inputs[index]
        return float(values[0]) if values.size else None

    def advance(self) -> None:
        self._position += 1

    def emit(self, *values: float) -> None:
        """Append one output slot holding ``values``. No values means "no value"."""
        self.outputs.append(tuple(float(value) for value in values))
