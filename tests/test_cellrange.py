import pytest

from sheetxml.cellrange import CellRange
from sheetxml.cellreference import CellReference


def test_default_range_is_invalid():
    cell_range = CellRange()
    assert not cell_range.is_valid()
    assert cell_range.to_string() == ""
    assert cell_range.row_count() == 0
    assert cell_range.column_count() == 0


@pytest.mark.parametrize("text", ["A1:B5", "A1:B2", "A1:C9", "B3:B5", "C3:C10", "D2:D19"])
def test_round_trip(text):
    assert CellRange.from_string(text).to_string() == text


def test_single_cell():
    cell_range = CellRange.from_string("A1")
    assert cell_range.is_valid()
    assert cell_range.top_left() == cell_range.bottom_right()
    assert cell_range.to_string() == "A1"
    assert cell_range.row_count() == 1
    assert cell_range.column_count() == 1


def test_same_cell_twice_collapses_to_single():
    assert CellRange.from_string("A1:A1").to_string() == "A1"


def test_absolute_string():
    assert CellRange.from_string("A1:A10").to_string(True, True) == "$A$1:$A$10"


def test_absolute_input_parses_like_relative():
    assert CellRange.from_string("$A$1:$A$10") == CellRange.from_string("A1:A10")


def test_column_range_counts():
    cell_range = CellRange.from_string("A1:A9")
    assert cell_range.column_count() == 1
    assert cell_range.row_count() > cell_range.column_count()


def test_counts_match_corner_positions():
    cell_range = CellRange.from_string("B3:F20")
    assert cell_range.first_row + cell_range.row_count() - 1 == cell_range.last_row
    assert cell_range.first_column + cell_range.column_count() - 1 == cell_range.last_column


def test_corners():
    cell_range = CellRange.from_string("A1:B5")
    assert cell_range.top_left() == CellReference.from_string("A1")
    assert cell_range.bottom_right() == CellReference.from_string("B5")
    assert cell_range.top_right() == CellReference(
        cell_range.top_left().row, cell_range.bottom_right().column
    )
    assert cell_range.bottom_left() == CellReference(
        cell_range.bottom_right().row, cell_range.top_left().column
    )


def test_from_references_matches_from_string():
    built = CellRange.from_references(
        CellReference.from_string("B3"), CellReference.from_string("B5")
    )
    assert built == CellRange.from_string("B3:B5")


def test_backwards_range_is_invalid():
    cell_range = CellRange(5, 5, 1, 1)
    assert not cell_range.is_valid()
    assert cell_range.to_string() == ""


def test_setting_bounds():
    cell_range = CellRange.from_string("A1")
    cell_range.last_row = 9
    cell_range.last_column = 3
    assert cell_range == CellRange.from_string("A1:C9")


def test_unparsable_text_has_no_notation():
    cell_range = CellRange.from_string("nonsense")
    assert cell_range.to_string() == ""
    assert not cell_range.top_left().is_valid()


def test_equality():
    assert CellRange.from_string("A1:B2") == CellRange(1, 1, 2, 2)
    assert CellRange.from_string("A1:B2") != CellRange.from_string("A1:B5")