"""Building blocks of a chart part: chart kinds, data series, axes and XML output."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

__all__ = [
    "ChartType",
    "AxisType",
    "AxisPosition",
    "Series",
    "Axis",
    "default_axes",
    "write_chart_xml",
]

CHART_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/chart"
DRAWING_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/main"
RELATIONSHIPS_NAMESPACE = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
)

_XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


class ChartType(enum.Enum):
    """The kind of chart; ``UNKNOWN`` marks a chart whose kind is not known."""

    UNKNOWN = 0
    AREA = 1
    AREA_3D = 2
    LINE = 3
    LINE_3D = 4
    STOCK = 5
    RADAR = 6
    SCATTER = 7
    PIE = 8
    PIE_3D = 9
    DOUGHNUT = 10
    BAR = 11
    BAR_3D = 12
    OF_PIE = 13
    SURFACE = 14
    SURFACE_3D = 15
    BUBBLE = 16


class AxisType(enum.Enum):
    """The kind of an axis; the value is the element name used for it."""

    CAT = "catAx"
    VAL = "valAx"
    DATE = "dateAx"
    SER = "serAx"


class AxisPosition(enum.Enum):
    """Where an axis sits; the value is the code used in ``axPos``."""

    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    BOTTOM = "b"


@dataclass
class Series:
    """One data series, given by cell-range formulas.

    ``number_ref`` holds the values (``val`` or ``yVal``), ``category_ref``
    the categories or x values (``cat`` or ``xVal``).
    """

    number_ref: str = ""
    category_ref: str = ""


@dataclass
class Axis:
    """One chart axis and the id of the axis it crosses."""

    axis_type: AxisType = AxisType.CAT
    position: AxisPosition = AxisPosition.BOTTOM
    axis_id: int = 0
    cross_axis: int = 0


def default_axes(chart_type: ChartType) -> list[Axis]:
    """Return the axes a chart of *chart_type* gets when none are given."""
    if chart_type in (ChartType.BAR, ChartType.BAR_3D, ChartType.AREA, ChartType.AREA_3D):
        return [
            Axis(AxisType.CAT, AxisPosition.BOTTOM, 0, 1),
            Axis(AxisType.VAL, AxisPosition.LEFT, 1, 0),
        ]
    if chart_type in (ChartType.LINE, ChartType.LINE_3D):
        axes = [
            Axis(AxisType.CAT, AxisPosition.BOTTOM, 0, 1),
            Axis(AxisType.VAL, AxisPosition.LEFT, 1, 0),
        ]
        if chart_type is ChartType.LINE_3D:
            axes.append(Axis(AxisType.SER, AxisPosition.BOTTOM, 2, 0))
        return axes
    if chart_type is ChartType.SCATTER:
        return [
            Axis(AxisType.VAL, AxisPosition.BOTTOM, 0, 1),
            Axis(AxisType.VAL, AxisPosition.LEFT, 1, 0),
        ]
    return []


def _empty(parent: ET.Element, tag: str, val: str | None = None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    if val is not None:
        element.set("val", val)
    return element


def _uses_xy_values(chart_type: ChartType) -> bool:
    return chart_type in (ChartType.SCATTER, ChartType.BUBBLE)


def _write_series(
    parent: ET.Element, chart_type: ChartType, series: Series, index: int
) -> None:
    ser = ET.SubElement(parent, "c:ser")
    _empty(ser, "c:idx", str(index))
    _empty(ser, "c:order", str(index))
    xy = _uses_xy_values(chart_type)
    for ref, tag in (
        (series.category_ref, "c:xVal" if xy else "c:cat"),
        (series.number_ref, "c:yVal" if xy else "c:val"),
    ):
        if ref:
            source = ET.SubElement(ser, tag)
            num_ref = ET.SubElement(source, "c:numRef")
            ET.SubElement(num_ref, "c:f").text = ref


def _write_all_series(
    parent: ET.Element, chart_type: ChartType, series_list: Iterable[Series]
) -> None:
    for index, series in enumerate(series_list):
        _write_series(parent, chart_type, series, index)


def _write_axis_ids(parent: ET.Element, axes: Iterable[Axis]) -> None:
    for axis in axes:
        _empty(parent, "c:axId", str(axis.axis_id))


def _pie(plot, chart_type, series_list, axes):
    name = "c:pieChart" if chart_type is ChartType.PIE else "c:pie3DChart"
    chart = ET.SubElement(plot, name)
    # Pie charts vary their colours per point, as the spreadsheet program does.
    _empty(chart, "c:varyColors", "1")
    _write_all_series(chart, chart_type, series_list)


def _bar(plot, chart_type, series_list, axes):
    name = "c:barChart" if chart_type is ChartType.BAR else "c:bar3DChart"
    chart = ET.SubElement(plot, name)
    _empty(chart, "c:barDir", "col")
    _write_all_series(chart, chart_type, series_list)
    _write_axis_ids(chart, axes)


def _line(plot, chart_type, series_list, axes):
    name = "c:lineChart" if chart_type is ChartType.LINE else "c:line3DChart"
    chart = ET.SubElement(plot, name)
    _empty(chart, "grouping")
    _write_all_series(chart, chart_type, series_list)
    _write_axis_ids(chart, axes)


def _scatter(plot, chart_type, series_list, axes):
    chart = ET.SubElement(plot, "c:scatterChart")
    _empty(chart, "c:scatterStyle")
    _write_all_series(chart, chart_type, series_list)
    _write_axis_ids(chart, axes)


def _area(plot, chart_type, series_list, axes):
    name = "c:areaChart" if chart_type is ChartType.AREA else "c:area3DChart"
    chart = ET.SubElement(plot, name)
    _empty(chart, "grouping")
    _write_all_series(chart, chart_type, series_list)
    _write_axis_ids(chart, axes)


def _doughnut(plot, chart_type, series_list, axes):
    chart = ET.SubElement(plot, "c:doughnutChart")
    _empty(chart, "c:varyColors", "1")
    _write_all_series(chart, chart_type, series_list)
    _empty(chart, "c:holeSize", "50")


_WRITERS: dict[ChartType, Callable[..., None]] = {
    ChartType.PIE: _pie,
    ChartType.PIE_3D: _pie,
    ChartType.BAR: _bar,
    ChartType.BAR_3D: _bar,
    ChartType.LINE: _line,
    ChartType.LINE_3D: _line,
    ChartType.SCATTER: _scatter,
    ChartType.AREA: _area,
    ChartType.AREA_3D: _area,
    ChartType.DOUGHNUT: _doughnut,
}


def _write_axes(plot: ET.Element, axes: Iterable[Axis]) -> None:
    for axis in axes:
        element = ET.SubElement(plot, "c:" + axis.axis_type.value)
        _empty(element, "c:axId", str(axis.axis_id))
        scaling = ET.SubElement(element, "c:scaling")
        _empty(scaling, "c:orientation", "minMax")
        _empty(element, "c:axPos", axis.position.value)
        _empty(element, "c:crossAx", str(axis.cross_axis))


def write_chart_xml(
    chart_type: ChartType,
    series_list: Sequence[Series],
    axis_list: Sequence[Axis],
) -> bytes:
    """Return the XML document of a chart part.

    When *axis_list* is empty the chart kind's default axes are used.
    Chart kinds that cannot be written produce an empty plot area apart
    from any axes given.
    """
    axes = list(axis_list) or default_axes(chart_type)

    root = ET.Element("c:chartSpace")
    root.set("xmlns:c", CHART_NAMESPACE)
    root.set("xmlns:a", DRAWING_NAMESPACE)
    root.set("xmlns:r", RELATIONSHIPS_NAMESPACE)

    chart = ET.SubElement(root, "c:chart")
    plot = ET.SubElement(chart, "c:plotArea")
    writer = _WRITERS.get(chart_type)
    if writer is not None:
        writer(plot, chart_type, series_list, axes)
    _write_axes(plot, axes)

    return _XML_DECLARATION + ET.tostring(root, encoding="unicode").encode("utf-8")