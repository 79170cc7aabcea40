"""Base class for the XML parts that make up a spreadsheet package."""

from __future__ import annotations

import enum
import io
from abc import ABC, abstractmethod
from typing import BinaryIO

__all__ = ["CreateFlag", "AbstractOOXmlFile"]


class CreateFlag(enum.Enum):
    """Whether a part is built fresh or read from an existing package."""

    NEW_FROM_SCRATCH = 0
    LOAD_FROM_EXISTS = 1


class AbstractOOXmlFile(ABC):
    """One XML part of a package, such as a worksheet or a chart.

    Subclasses write themselves to, and read themselves from, a binary
    stream.  ``file_path`` is the part's path inside the package (for
    example ``"xl/worksheets/sheet1.xml"``) and is set when loading.
    """

    def __init__(self, flag: CreateFlag = CreateFlag.NEW_FROM_SCRATCH) -> None:
        self.flag = flag
        self.file_path = ""

    @abstractmethod
    def save_to_xml_file(self, device: BinaryIO) -> None:
        """Write the part's XML to the binary stream *device*."""

    @abstractmethod
    def load_from_xml_file(self, device: BinaryIO) -> None:
        """Read the part's XML from the binary stream *device*."""

    def save_to_xml_data(self) -> bytes:
        """Return the part's XML as bytes."""
        buffer = io.BytesIO()
        self.save_to_xml_file(buffer)
        return buffer.getvalue()

    def load_from_xml_data(self, data: bytes) -> None:
        """Read the part from XML held in *data*."""
        self.load_from_xml_file(io.BytesIO(data))