"""Cell formulas: normal, array, data-table and shared formulas."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET

from sheetxml.cellrange import CellRange

__all__ = ["FormulaType", "CellFormula"]


class FormulaType(enum.Enum):
    """The kind of formula stored in a cell."""

    NORMAL = 0
    ARRAY = 1
    DATA_TABLE = 2
    SHARED = 3


_TYPE_NAMES = {FormulaType.ARRAY: "array", FormulaType.SHARED: "shared"}
_TYPES_BY_NAME = {name: kind for kind, name in _TYPE_NAMES.items()}

_TRUE_WORDS = {"1", "true"}
_FALSE_WORDS = {"0", "false"}


def _parse_xsd_boolean(text: str | None, default: bool) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return default


def _parse_int(text: str | None) -> int:
    try:
        return int(text) if text is not None else 0
    except ValueError:
        return 0


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _strip_equals(formula: str) -> str:
    """Drop a leading ``=`` or the ``{=...}`` wrapping of an array formula."""
    if formula.startswith("="):
        return formula[1:]
    if formula.startswith("{=") and formula.endswith("}"):
        return formula[2:-1]
    return formula


class CellFormula:
    """A formula held by a cell.

    A formula built without text is invalid: it stands for "no formula".
    """

    def __init__(
        self,
        formula: str | None = None,
        reference: CellRange | str | None = None,
        formula_type: FormulaType = FormulaType.NORMAL,
    ) -> None:
        self._valid = formula is not None
        self._text = _strip_equals(formula) if formula is not None else ""
        if isinstance(reference, str):
            reference = CellRange.from_string(reference)
        self._reference = reference if reference is not None else CellRange()
        self._type = formula_type
        self._ca = False
        self._si = 0

    def is_valid(self) -> bool:
        """Return True if this object holds a formula."""
        return self._valid

    def formula_type(self) -> FormulaType:
        return self._type if self._valid else FormulaType.NORMAL

    def formula_text(self) -> str:
        """Return the formula without its leading ``=``."""
        return self._text if self._valid else ""

    def reference(self) -> CellRange:
        """Return the cells the formula covers; invalid for a normal formula."""
        return self._reference if self._valid else CellRange()

    def shared_index(self) -> int:
        """Return the shared index of a shared formula, or -1 for other kinds."""
        if self._valid and self._type is FormulaType.SHARED:
            return self._si
        return -1

    def to_element(self) -> ET.Element:
        """Return the ``<f>`` element describing this formula."""
        if not self._valid:
            raise ValueError("an invalid formula cannot be written")
        element = ET.Element("f")
        type_name = _TYPE_NAMES.get(self._type)
        if type_name:
            element.set("t", type_name)
        if self._reference.is_valid():
            element.set("ref", self._reference.to_string())
        if self._ca:
            element.set("ca", "1")
        if self._type is FormulaType.SHARED:
            element.set("si", str(self._si))
        if self._text:
            element.text = self._text
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> CellFormula:
        """Build a formula from an ``<f>`` element."""
        if _local_name(element.tag) != "f":
            raise ValueError(f"expected an <f> element, got <{element.tag}>")
        formula = cls("", None, _TYPES_BY_NAME.get(element.get("t", ""), FormulaType.NORMAL))
        ref = element.get("ref")
        if ref is not None:
            formula._reference = CellRange.from_string(ref)
        formula._ca = _parse_xsd_boolean(element.get("ca"), False)
        if element.get("si") is not None:
            formula._si = _parse_int(element.get("si"))
        formula._text = "".join(element.itertext())
        return formula

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellFormula):
            return NotImplemented
        if not (self._valid and other._valid):
            return self._valid == other._valid
        return (
            self._text == other._text
            and self._type == other._type
            and self._si == other._si
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._valid:
            return "CellFormula()"
        return (
            f"CellFormula({self._text!r}, {self._reference.to_string()!r}, "
            f"{self._type.name})"
        )