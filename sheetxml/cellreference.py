"""Single-cell references in A1 notation, such as ``A1`` or ``$B$7``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

__all__ = ["CellReference", "column_to_name", "column_from_name"]

_CELL_PATTERN = re.compile(r"^\$?([A-Z]{1,3})\$?(\d+)$")


@lru_cache(maxsize=None)
def column_to_name(column: int) -> str:
    """Return the letters naming a 1-based column, e.g. 1 -> "A", 27 -> "AA".

    Columns below 1 have no name and yield an empty string.
    """
    letters = []
    while column > 0:
        remainder = column % 26 or 26
        letters.append(chr(ord("A") + remainder - 1))
        column = (column - 1) // 26
    return "".join(reversed(letters))


def column_from_name(name: str) -> int:
    """Return the 1-based column number for letters such as "A" or "AB"."""
    column = 0
    for letter in name:
        column = column * 26 + (ord(letter) - ord("A") + 1)
    return column


@dataclass(frozen=True)
class CellReference:
    """The location of one cell in a worksheet; rows and columns start at 1."""

    row: int = -1
    column: int = -1

    @classmethod
    def from_string(cls, cell: str) -> CellReference:
        """Parse A1 notation; text that does not match gives an invalid reference."""
        match = _CELL_PATTERN.match(cell)
        if match is None:
            return cls()
        column_letters, row_digits = match.groups()
        return cls(int(row_digits), column_from_name(column_letters))

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Return A1 notation, with ``$`` markers as requested; empty if invalid."""
        if not self.is_valid():
            return ""
        column_part = ("$" if col_abs else "") + column_to_name(self.column)
        row_part = ("$" if row_abs else "") + str(self.row)
        return column_part + row_part

    def is_valid(self) -> bool:
        """Return True when both row and column are positive."""
        return self.row > 0 and self.column > 0

    def __str__(self) -> str:
        return self.to_string()