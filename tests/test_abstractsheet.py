import pytest

from sheetxml.abstractsheet import AbstractSheet, SheetState, SheetType
from sheetxml.ooxmlfile import CreateFlag


class _Sheet(AbstractSheet):
    def save_to_xml_file(self, device):
        device.write(b"<sheet/>")

    def load_from_xml_file(self, device):
        device.read()

    def copy(self, dist_name, dist_id):
        other = _Sheet(dist_name, dist_id, self.workbook, self.flag)
        other.sheet_state = self.sheet_state
        return other


def test_abstract_sheet_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractSheet("Sheet1", 1)


def test_defaults():
    sheet = _Sheet("Sheet1", 1)
    assert AbstractSheet.is_visible(sheet)
    assert sheet.sheet_name == "Sheet1"
    assert sheet.sheet_id == 1
    assert sheet.sheet_type is SheetType.WORKSHEET
    assert sheet.sheet_state is SheetState.VISIBLE
    assert sheet.workbook is None
    assert sheet.drawing is None
    assert sheet.flag is CreateFlag.NEW_FROM_SCRATCH


def test_visible_by_default():
    sheet = _Sheet("Sheet1", 1)
    assert AbstractSheet.is_visible(sheet)
    assert not AbstractSheet.is_hidden(sheet)


def test_set_hidden_and_back():
    sheet = _Sheet("Sheet1", 1)
    AbstractSheet.set_hidden(sheet, True)
    assert sheet.sheet_state is SheetState.HIDDEN
    assert AbstractSheet.is_hidden(sheet)
    AbstractSheet.set_hidden(sheet, False)
    assert sheet.sheet_state is SheetState.VISIBLE


def test_very_hidden_counts_as_hidden():
    sheet = _Sheet("Sheet1", 1)
    sheet.sheet_state = SheetState.VERY_HIDDEN
    assert AbstractSheet.is_hidden(sheet)
    assert not AbstractSheet.is_visible(sheet)


def test_hiding_a_very_hidden_sheet_keeps_state():
    sheet = _Sheet("Sheet1", 1)
    sheet.sheet_state = SheetState.VERY_HIDDEN
    AbstractSheet.set_hidden(sheet, True)
    assert sheet.sheet_state is SheetState.VERY_HIDDEN


def test_set_visible_reveals_very_hidden_sheet():
    sheet = _Sheet("Sheet1", 1)
    sheet.sheet_state = SheetState.VERY_HIDDEN
    AbstractSheet.set_visible(sheet, True)
    assert sheet.sheet_state is SheetState.VISIBLE


def test_set_visible_false_hides():
    sheet = _Sheet("Sheet1", 1)
    AbstractSheet.set_visible(sheet, False)
    assert sheet.sheet_state is SheetState.HIDDEN


def test_workbook_is_kept():
    book = object()
    sheet = _Sheet("Sheet1", 1, book)
    assert sheet.workbook is book
    assert AbstractSheet.is_visible(sheet)


def test_copy_gives_new_name_and_id():
    sheet = _Sheet("Sheet1", 1)
    AbstractSheet.set_hidden(sheet, True)
    other = sheet.copy("Copy", 2)
    assert (other.sheet_name, other.sheet_id) == ("Copy", 2)
    assert other.sheet_state is SheetState.HIDDEN
    assert sheet.sheet_name == "Sheet1"


def test_save_to_xml_data_uses_subclass():
    assert AbstractSheet.save_to_xml_data(_Sheet("Sheet1", 1)) == b"<sheet/>"