"""Common behaviour of worksheets, chartsheets and other sheet kinds."""

from __future__ import annotations

import enum
from abc import abstractmethod
from typing import Any

from sheetxml.ooxmlfile import AbstractOOXmlFile, CreateFlag

__all__ = ["SheetType", "SheetState", "AbstractSheet"]


class SheetType(enum.Enum):
    """The kind of a sheet."""

    WORKSHEET = 0
    CHARTSHEET = 1
    DIALOGSHEET = 2
    MACROSHEET = 3


class SheetState(enum.Enum):
    """How visible a sheet is.

    A very hidden sheet cannot be made visible by the user in the usual way.
    """

    VISIBLE = 0
    HIDDEN = 1
    VERY_HIDDEN = 2


class AbstractSheet(AbstractOOXmlFile):
    """Base class for every sheet held by a workbook."""

    def __init__(
        self,
        sheet_name: str,
        sheet_id: int,
        workbook: Any = None,
        flag: CreateFlag = CreateFlag.NEW_FROM_SCRATCH,
    ) -> None:
        super().__init__(flag)
        self.sheet_name = sheet_name
        self.sheet_id = sheet_id
        self.workbook = workbook
        self.sheet_type = SheetType.WORKSHEET
        self.sheet_state = SheetState.VISIBLE
        self.drawing: Any = None

    def is_hidden(self) -> bool:
        """Return True unless the sheet is visible."""
        return self.sheet_state is not SheetState.VISIBLE

    def is_visible(self) -> bool:
        return not self.is_hidden()

    def set_hidden(self, hidden: bool) -> None:
        """Hide or show the sheet; a sheet already hidden keeps its state."""
        if hidden == self.is_hidden():
            return
        self.sheet_state = SheetState.HIDDEN if hidden else SheetState.VISIBLE

    def set_visible(self, visible: bool) -> None:
        self.set_hidden(not visible)

    @abstractmethod
    def copy(self, dist_name: str, dist_id: int) -> AbstractSheet:
        """Return a copy of this sheet named *dist_name* with id *dist_id*."""