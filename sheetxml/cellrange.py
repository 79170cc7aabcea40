"""Rectangular cell ranges such as ``A1:B2``, or a single cell ``A1``."""

from __future__ import annotations

from dataclasses import dataclass

from sheetxml.cellreference import CellReference

__all__ = ["CellRange"]


@dataclass
class CellRange:
    """The top-left and bottom-right rows and columns of a range.

    The default range is empty and invalid.
    """

    first_row: int = -1
    first_column: int = -1
    last_row: int = -2
    last_column: int = -2

    @classmethod
    def from_string(cls, text: str) -> CellRange:
        """Parse ``"A1:B5"`` or a single cell ``"A1"``."""
        parts = text.split(":")
        if len(parts) == 2:
            start = CellReference.from_string(parts[0])
            end = CellReference.from_string(parts[1])
        else:
            start = end = CellReference.from_string(parts[0])
        return cls(start.row, start.column, end.row, end.column)

    @classmethod
    def from_references(
        cls, top_left: CellReference, bottom_right: CellReference
    ) -> CellRange:
        """Build a range from its two corner references."""
        return cls(top_left.row, top_left.column, bottom_right.row, bottom_right.column)

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Return notation such as ``"A1:B5"``; a single cell gives ``"A1"``."""
        if not self.is_valid():
            return ""
        start = self.top_left().to_string(row_abs, col_abs)
        if self.first_row == self.last_row and self.first_column == self.last_column:
            return start
        return start + ":" + self.bottom_right().to_string(row_abs, col_abs)

    def is_valid(self) -> bool:
        """Return True when the range does not run backwards."""
        return self.first_column <= self.last_column and self.first_row <= self.last_row

    def row_count(self) -> int:
        return self.last_row - self.first_row + 1

    def column_count(self) -> int:
        return self.last_column - self.first_column + 1

    def top_left(self) -> CellReference:
        return CellReference(self.first_row, self.first_column)

    def top_right(self) -> CellReference:
        return CellReference(self.first_row, self.last_column)

    def bottom_left(self) -> CellReference:
        return CellReference(self.last_row, self.first_column)

    def bottom_right(self) -> CellReference:
        return CellReference(self.last_row, self.last_column)

    def __str__(self) -> str:
        return self.to_string()