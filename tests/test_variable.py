import numpy as np
import pytest

from hep_varproc.processors.base_processor import CategoryBlocks
from hep_varproc.processors.variable import (
    ConfigurationCursor,
    EventCursor,
    VariableFlags,
)


def test_all_is_optional_and_multiple():
    assert VariableFlags.ALL == VariableFlags.OPTIONAL | VariableFlags.MULTIPLE
    assert not VariableFlags.NONE & VariableFlags.OPTIONAL


def test_configuration_cursor_walks_slots():
    cursor = ConfigurationCursor([VariableFlags.NONE, VariableFlags.ALL])

    assert cursor.input_count == 2
    assert cursor.current_flags() == VariableFlags.NONE
    cursor.accept(VariableFlags.NONE)
    assert cursor.current_flags() == VariableFlags.ALL
    cursor.declare_output(cursor.accept(VariableFlags.ALL))

    assert not cursor
    assert cursor.accepted == [VariableFlags.NONE, VariableFlags.ALL]
    assert cursor.outputs == [VariableFlags.ALL]
    with pytest.raises(IndexError):
        cursor.accept(VariableFlags.ALL)


def test_event_cursor_reads_and_emits():
    cursor = EventCursor([3, [], [1.5, 2.5]])

    assert cursor.value_at(0) == 3.0
    assert cursor.value_at(1) is None
    np.testing.assert_array_equal(cursor.values(), [3.0])
    cursor.advance()
    assert cursor.values().size == 0
    cursor.advance()
    np.testing.assert_array_equal(cursor.values(), [1.5, 2.5])
    cursor.advance()
    assert not cursor.has_next()

    cursor.emit()
    cursor.emit(0.25, 0.75)
    assert cursor.outputs == [(), (0.25, 0.75)]


class TestCategoryBlocks:
    def test_uncategorized(self):
        blocks = CategoryBlocks.from_table(3, 3, -1)

        assert not blocks.categorized
        assert blocks.resolve(EventCursor([[1], [2], [3]])) == slice(0, 3)

    def test_categorized_layout(self):
        blocks = CategoryBlocks.from_table(6, 3, 0)

        assert blocks.n_categories == 3
        assert blocks.block_size == 2
        assert blocks.block(0) == slice(0, 2)
        assert blocks.block(2) == slice(4, 6)
        assert blocks.block(3) is None
        assert blocks.block(-1) is None

    @pytest.mark.parametrize(
        "table_size,slot_count,category_idx",
        [
            (5, 4, 0),  # not divisible into blocks of 3
            (2, 3, 3),  # category slot past the last input
            (2, 1, 0),  # only the category slot, no variables
            (1, 3, 0),  # fewer entries than one block
            (2, 3, -1),  # uncategorized size mismatch
        ],
    )
    def test_invalid_layouts(self, table_size, slot_count, category_idx):
        assert CategoryBlocks.from_table(table_size, slot_count, category_idx) is None

    @pytest.mark.parametrize(
        "value,expected",
        [(1.0, slice(2, 4)), (1.9, slice(2, 4)), (-0.5, slice(0, 2)), (float("inf"), None)],
    )
    def test_resolve_truncates_category(self, value, expected):
        blocks = CategoryBlocks.from_table(4, 3, 2)

        assert blocks.resolve(EventCursor([[0.1], [0.2], [value]])) == expected
