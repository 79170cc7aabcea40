import xml.etree.ElementTree as ET

import pytest

from sheetxml.cellformula import CellFormula, FormulaType
from sheetxml.cellrange import CellRange


def test_default_formula_is_invalid():
    formula = CellFormula()
    assert formula.is_valid() is False
    assert formula.formula_text() == ""
    assert formula.formula_type() is FormulaType.NORMAL
    assert formula.reference().is_valid() is False
    assert formula.shared_index() == -1


def test_leading_equals_is_removed():
    formula = CellFormula("=SUM(B3:B5)")
    assert formula.is_valid()
    assert formula.formula_text() == "SUM(B3:B5)"


def test_array_braces_are_removed():
    formula = CellFormula("{=B2:B19+C2:C19}")
    assert formula.formula_text() == "B2:B19+C2:C19"


def test_text_without_equals_is_kept():
    assert CellFormula("B2:B19+C2:C19").formula_text() == "B2:B19+C2:C19"


def test_reference_from_string():
    formula = CellFormula("B2:B19+C2:C19", "D2:D19", FormulaType.ARRAY)
    assert formula.reference() == CellRange.from_string("D2:D19")
    assert formula.formula_type() is FormulaType.ARRAY


def test_shared_index_only_for_shared():
    assert CellFormula("=B2+C2", "D2:D19", FormulaType.ARRAY).shared_index() == -1
    assert CellFormula("=B2+C2", "D2:D19", FormulaType.SHARED).shared_index() == 0


def test_array_formula_element():
    formula = CellFormula("B2:B19+C2:C19", "D2:D19", FormulaType.ARRAY)
    element = formula.to_element()
    assert element.tag == "f"
    assert element.get("t") == "array"
    assert element.get("ref") == "D2:D19"
    assert element.get("si") is None
    assert element.text == "B2:B19+C2:C19"


def test_shared_formula_element_has_si():
    element = CellFormula("=B2+C2", "D2:D19", FormulaType.SHARED).to_element()
    assert element.get("t") == "shared"
    assert element.get("si") == "0"


def test_normal_formula_element_has_no_type():
    element = CellFormula("=44+33").to_element()
    assert element.get("t") is None
    assert element.get("ref") is None
    assert element.text == "44+33"


def test_invalid_formula_cannot_be_written():
    with pytest.raises(ValueError):
        CellFormula().to_element()


@pytest.mark.parametrize(
    "formula",
    [
        CellFormula("=44+33"),
        CellFormula("B2:B19+C2:C19", "D2:D19", FormulaType.ARRAY),
        CellFormula("=B2+C2", "D2:D19", FormulaType.SHARED),
    ],
)
def test_round_trip_through_xml(formula):
    text = ET.tostring(formula.to_element())
    loaded = CellFormula.from_element(ET.fromstring(text))
    assert loaded == formula
    assert loaded.reference() == formula.reference()
    assert loaded.formula_type() is formula.formula_type()


def test_from_element_reads_si_and_ca():
    element = ET.fromstring('<f t="shared" ref="D2:D19" si="3" ca="1">B2+C2</f>')
    formula = CellFormula.from_element(element)
    assert formula.shared_index() == 3
    assert formula.to_element().get("ca") == "1"
    assert formula.formula_text() == "B2+C2"


def test_from_element_shared_without_text():
    formula = CellFormula.from_element(ET.fromstring('<f t="shared" si="2"/>'))
    assert formula.is_valid()
    assert formula.formula_text() == ""
    assert formula.shared_index() == 2


def test_from_element_accepts_namespaced_tag():
    ns = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
    element = ET.fromstring(f'<f xmlns="{ns}">SUM(A1:A3)</f>')
    assert CellFormula.from_element(element).formula_text() == "SUM(A1:A3)"


def test_from_element_rejects_other_tags():
    with pytest.raises(ValueError):
        CellFormula.from_element(ET.fromstring("<v>1</v>"))


def test_equality_depends_on_text_type_and_index():
    assert CellFormula("=A1") == CellFormula("A1")
    assert CellFormula("=A1") != CellFormula("=A2")
    assert CellFormula("=A1") != CellFormula("=A1", "B1:B2", FormulaType.ARRAY)
    assert CellFormula() == CellFormula()
    assert CellFormula() != CellFormula("=A1")