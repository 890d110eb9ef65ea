import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from hep_varproc.config.logging_config import get_logger
from hep_varproc.processors.variable import ConfigurationCursor, EventCursor


@dataclass(frozen=True)
class CategoryBlocks:
    """Addressing of a flat, category-partitioned calibration table.

    With ``category_idx == -1`` there is a single block covering the whole
    table. Otherwise the table holds ``n_categories`` contiguous blocks of
    ``block_size`` entries, one entry per non-category input slot.
    """

    category_idx: int
    block_size: int
    n_categories: int

    @classmethod
    def from_table(
        cls, table_size: int, slot_count: int, category_idx: int
    ) -> Optional["CategoryBlocks"]:
        """Derive the block layout, or return None if the table does not fit the slots."""
        if category_idx >= 0:
            if slot_count < category_idx + 1:
                return None
            block_size = slot_count - 1
            if block_size == 0:
                return None
            n_categories = table_size // block_size
            if n_categories == 0 or n_categories * block_size != table_size:
                return None
            return cls(category_idx, block_size, n_categories)

        if slot_count != table_size:
            return None
        return cls(-1, table_size, 1)

    @property
    def categorized(self) -> bool:
        return self.category_idx >= 0

    def block(self, category: int) -> Optional[slice]:
        if category < 0 or category >= self.n_categories:
            return None
        start = category * self.block_size
        return slice(start, start + self.block_size)

    def resolve(self, cursor: EventCursor) -> Optional[slice]:
        """Select the table block for this event; None means the event is abstained."""
        if not self.categorized:
            return slice(0, self.block_size)

        value = cursor.value_at(self.category_idx)
        if value is None or not math.isfinite(value):
            return None
        # Truncate toward zero like an integer cast
        return self.block(int(value))


class VarProcessor(ABC):
    """Base class for all variable processors"""

    def __init__(self, name: str):
        self.name = name
        self.logger = get_logger(f"{__name__}.{name}")
        self.blocks: Optional[CategoryBlocks] = None

    @property
    def is_configured(self) -> bool:
        return self.blocks is not None

    def _configure_blocks(self, table_size: int, n: int, category_idx: int) -> bool:
        """Validate the calibration table shape against ``n`` input slots."""
        self.blocks = CategoryBlocks.from_table(table_size, n, category_idx)
        if self.blocks is None:
            if category_idx >= 0:
                self.logger.warning(
                    f"{self.name}: {table_size} calibration entries cannot be split into "
                    f"blocks of {n - 1} for {n} inputs with category slot {category_idx}, "
                    f"declaring no outputs"
                )
            else:
                self.logger.warning(
                    f"{self.name}: expected {table_size} inputs, got {n}, declaring no outputs"
                )
            return False

        self.logger.debug(
            f"{self.name}: configured {n} inputs in {self.blocks.n_categories} "
            f"category block(s) of size {self.blocks.block_size}"
        )
        return True

    @abstractmethod
    def configure(self, cursor: ConfigurationCursor, n: int) -> None:
        """Declare accepted inputs and produced outputs for ``n`` input slots"""
        pass

    @abstractmethod
    def evaluate(self, cursor: EventCursor, n: int) -> None:
        """Read one event's inputs from ``cursor`` and emit the outputs"""
        pass
