"""Chart parts: data series taken from worksheet ranges, written as chart XML."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import BinaryIO

from sheetxml.abstractsheet import AbstractSheet, SheetType
from sheetxml.cellrange import CellRange
from sheetxml.chartparts import (
    Axis,
    AxisPosition,
    AxisType,
    ChartType,
    Series,
    default_axes,
    write_chart_xml,
)
from sheetxml.ooxmlfile import AbstractOOXmlFile, CreateFlag

__all__ = ["Chart"]

_CHART_TYPES_BY_ELEMENT = {
    "pieChart": ChartType.PIE,
    "pie3DChart": ChartType.PIE_3D,
    "barChart": ChartType.BAR,
    "bar3DChart": ChartType.BAR_3D,
    "lineChart": ChartType.LINE,
    "line3DChart": ChartType.LINE_3D,
    "scatterChart": ChartType.SCATTER,
    "areaChart": ChartType.AREA,
    "area3DChart": ChartType.AREA_3D,
    "doughnutChart": ChartType.DOUGHNUT,
}

_AXIS_TYPES_BY_ELEMENT = {
    "valAx": AxisType.VAL,
    "catAx": AxisType.CAT,
    "serAx": AxisType.SER,
}

_AXIS_POSITIONS_BY_CODE = {
    "l": AxisPosition.LEFT,
    "r": AxisPosition.RIGHT,
    "b": AxisPosition.BOTTOM,
}

_NEEDS_QUOTING = re.compile(r"[^\w.]")


def _escape_sheet_name(name: str) -> str:
    """Quote a sheet name for use in a formula when it holds spaces or quotes."""
    if not _NEEDS_QUOTING.search(name):
        return name
    return "'" + name.replace("'", "''") + "'"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children_named(element: ET.Element, name: str):
    return (child for child in element if _local_name(child.tag) == name)


def _descendants(element: ET.Element):
    iterator = element.iter()
    next(iterator)  # the element itself
    return iterator


def _parse_int(text: str | None) -> int:
    try:
        return int(text) if text is not None else 0
    except ValueError:
        return 0


def _num_ref_formula(source: ET.Element) -> str | None:
    """Return the formula of the first ``numRef`` below *source*, if any."""
    for element in _descendants(source):
        if _local_name(element.tag) == "numRef":
            for inner in _descendants(element):
                if _local_name(inner.tag) == "f":
                    return "".join(inner.itertext())
            return ""
    return None


class Chart(AbstractOOXmlFile):
    """A chart part, drawn from data series on worksheets."""

    def __init__(
        self,
        sheet: AbstractSheet | None = None,
        flag: CreateFlag = CreateFlag.NEW_FROM_SCRATCH,
    ) -> None:
        super().__init__(flag)
        self.sheet = sheet
        self.chart_type = ChartType.UNKNOWN
        self.chart_style: int | None = None
        self.series_list: list[Series] = []
        self.axis_list: list[Axis] = []

    def add_series(
        self, cell_range: CellRange | str, sheet: AbstractSheet | None = None
    ) -> None:
        """Add the data series found in *cell_range* of *sheet*.

        Without *sheet*, the sheet holding the chart is used.  Invalid ranges
        and sheets that are not worksheets are ignored.
        """
        if isinstance(cell_range, str):
            cell_range = CellRange.from_string(cell_range)
        if not cell_range.is_valid():
            return
        source = sheet if sheet is not None else self.sheet
        if source is None:
            raise ValueError("no sheet given and the chart belongs to no sheet")
        if source.sheet_type is not SheetType.WORKSHEET:
            return

        prefix = _escape_sheet_name(source.sheet_name) + "!"

        def ref(top: int, left: int, bottom: int, right: int) -> str:
            return prefix + CellRange(top, left, bottom, right).to_string(True, True)

        xy = self.chart_type in (ChartType.SCATTER, ChartType.BUBBLE)
        r = cell_range

        if r.column_count() == 1 or r.row_count() == 1:
            self.series_list.append(Series(number_ref=prefix + r.to_string(True, True)))
        elif r.column_count() < r.row_count():
            first = r.first_column
            category = ""
            if xy:
                first += 1
                category = ref(r.first_row, r.first_column, r.last_row, r.first_column)
            for col in range(first, r.last_column + 1):
                self.series_list.append(
                    Series(ref(r.first_row, col, r.last_row, col), category)
                )
        else:
            first = r.first_row
            category = ""
            if xy:
                first += 1
                category = ref(r.first_row, r.first_column, r.first_row, r.last_column)
            for row in range(first, r.last_row + 1):
                self.series_list.append(
                    Series(ref(row, r.first_column, row, r.last_column), category)
                )

    def set_chart_type(self, chart_type: ChartType) -> None:
        self.chart_type = chart_type

    def set_chart_style(self, style_id: int) -> None:
        """Record a chart style id; it is not yet written to the part."""
        self.chart_style = style_id

    def save_to_xml_file(self, device: BinaryIO) -> None:
        """Write the chart part to *device*, filling in default axes if none."""
        if not self.axis_list:
            self.axis_list = default_axes(self.chart_type)
        device.write(write_chart_xml(self.chart_type, self.series_list, self.axis_list))

    def load_from_xml_file(self, device: BinaryIO) -> None:
        """Read chart kind, series and axes from a chart part."""
        try:
            root = ET.parse(device).getroot()
        except ET.ParseError as exc:
            raise ValueError(f"malformed chart XML: {exc}") from exc
        for element in root.iter():
            if _local_name(element.tag) == "chart":
                self._load_chart(element)
                break

    def _load_chart(self, chart: ET.Element) -> None:
        for plot_area in _children_named(chart, "plotArea"):
            for child in plot_area:
                name = _local_name(child.tag)
                if name.endswith("Chart"):
                    self._load_xxx_chart(child, name)
                elif name.endswith("Ax"):
                    self._load_axis(child, name)

    def _load_xxx_chart(self, element: ET.Element, name: str) -> None:
        chart_type = _CHART_TYPES_BY_ELEMENT.get(name)
        if chart_type is not None:
            self.chart_type = chart_type
        for child in _descendants(element):
            if _local_name(child.tag) == "ser":
                self._load_series(child)

    def _load_series(self, element: ET.Element) -> None:
        series = Series()
        self.series_list.append(series)
        for child in element:
            name = _local_name(child.tag)
            if name in ("cat", "xVal"):
                formula = _num_ref_formula(child)
                if formula is not None:
                    series.category_ref = formula
            elif name in ("val", "yVal"):
                formula = _num_ref_formula(child)
                if formula is not None:
                    series.number_ref = formula

    def _load_axis(self, element: ET.Element, name: str) -> None:
        axis = Axis(axis_type=_AXIS_TYPES_BY_ELEMENT.get(name, AxisType.DATE))
        self.axis_list.append(axis)
        for child in _descendants(element):
            child_name = _local_name(child.tag)
            if child_name == "axPos":
                axis.position = _AXIS_POSITIONS_BY_CODE.get(
                    child.get("val", ""), AxisPosition.TOP
                )
            elif child_name == "axId":
                axis.axis_id = _parse_int(child.get("val"))
            elif child_name == "crossAx":
                axis.cross_axis = _parse_int(child.get("val"))