# sheetxml

Small, dependency-free building blocks for the XML parts of `.xlsx`
workbooks (SpreadsheetML). Everything is built on the standard library's
`xml.etree.ElementTree`.

## Modules

- `sheetxml.cellreference` — `CellReference` for one cell such as `A1` or
  `$B$7` (`from_string`, `to_string`, `is_valid`), and `column_to_name` /
  `column_from_name` for column letters.
- `sheetxml.cellrange` — `CellRange` for ranges such as `A1:C9`
  (`from_string`, `from_references`, `to_string`, `is_valid`, `row_count`,
  `column_count`, and the corner references `top_left`, `top_right`,
  `bottom_left`, `bottom_right`).
- `sheetxml.cellformula` — `CellFormula` and `FormulaType` (`NORMAL`,
  `ARRAY`, `DATA_TABLE`, `SHARED`), with `to_element` / `from_element` for the
  `<f>` element. A leading `=` or an `{=...}` wrapping is dropped from the
  formula text.
- `sheetxml.color` — `XlsxColor` (an RGB, indexed or theme colour, or the
  invalid automatic colour), `Rgba`, and `from_argb_string` /
  `to_argb_string` for `AARRGGBB` strings. `to_element` / `from_element`
  convert to and from colour elements.
- `sheetxml.ooxmlfile` — `AbstractOOXmlFile`, the base of every package part,
  and `CreateFlag`. Subclasses implement `save_to_xml_file(device)` and
  `load_from_xml_file(device)` on binary streams; `save_to_xml_data()` and
  `load_from_xml_data(data)` work on bytes.
- `sheetxml.abstractsheet` — `AbstractSheet` with `SheetType` and
  `SheetState` (`VISIBLE`, `HIDDEN`, `VERY_HIDDEN`), and `is_hidden`,
  `is_visible`, `set_hidden`, `set_visible`. Subclasses also implement `copy`.
- `sheetxml.chartparts` — `ChartType`, `AxisType`, `AxisPosition`, the
  `Series` and `Axis` dataclasses, `default_axes(chart_type)` and
  `write_chart_xml(chart_type, series_list, axis_list)`.
- `sheetxml.chart` — `Chart`, a chart part: `set_chart_type`, `add_series`,
  `set_chart_style`, and saving to and loading from chart XML.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Cell references and ranges:

```python
from sheetxml.cellreference import CellReference, column_to_name
from sheetxml.cellrange import CellRange

ref = CellReference.from_string("$C$12")
print(ref.to_string(row_abs=True, col_abs=True))  # $C$12
print(column_to_name(28))                         # AB

rng = CellRange.from_string("A1:C9")
print(rng.row_count(), rng.column_count())        # 9 3
print(rng.bottom_right().to_string())             # C9
```

Text that is not A1 notation gives an invalid reference or range, whose
`to_string()` is empty.

Formulas:

```python
import xml.etree.ElementTree as ET
from sheetxml.cellformula import CellFormula, FormulaType

f = CellFormula("=B2+C2", "D2:D19", FormulaType.SHARED)
print(f.formula_text())               # B2+C2
print(ET.tostring(f.to_element()))    # b'<f t="shared" ref="D2:D19" si="0">B2+C2</f>'
```

Colours:

```python
from sheetxml.color import Rgba, XlsxColor, from_argb_string, to_argb_string

print(to_argb_string(from_argb_string("FF0000FF")))   # FF0000FF
blue = XlsxColor(Rgba(0, 0, 255))
print(blue.to_element().get("rgb"))                   # FF0000FF
print(XlsxColor.theme("1", "0.5").theme_color())      # ('1', '0.5')
```

Charts take their series from a sheet. `AbstractSheet` is abstract, so a
sheet class supplies `copy`, `save_to_xml_file` and `load_from_xml_file`:

```python
from sheetxml.abstractsheet import AbstractSheet
from sheetxml.chart import Chart
from sheetxml.chartparts import ChartType


class DataSheet(AbstractSheet):
    def copy(self, dist_name, dist_id):
        return DataSheet(dist_name, dist_id, self.workbook)

    def save_to_xml_file(self, device):
        device.write(b"<worksheet/>")

    def load_from_xml_file(self, device):
        pass


chart = Chart(DataSheet("Sheet1", 1))
chart.set_chart_type(ChartType.BAR)
chart.add_series("A1:C9")
print([s.number_ref for s in chart.series_list])
# ['Sheet1!$A$1:$A$9', 'Sheet1!$B$1:$B$9', 'Sheet1!$C$1:$C$9']

data = chart.save_to_xml_data()

loaded = Chart()
loaded.load_from_xml_data(data)
print(loaded.chart_type, len(loaded.series_list), len(loaded.axis_list))
# ChartType.BAR 3 2
```

A range with more rows than columns gives one series per column, otherwise
one per row; a single row or column gives one series. For scatter and bubble
charts the first column (or row) becomes the x values of every series.
Sheet names holding spaces or quotes are quoted in the references. Ranges
that are invalid, and sheets that are not worksheets, are ignored.

## What it does not do

This package holds the parts, not a whole workbook. It does not open or
write `.xlsx` zip packages, keep worksheet cells, styles, shared strings,
drawings or relationships, or evaluate formulas. Charts are written with
their plot area, series and axes only: no titles or legends, and a style set
with `set_chart_style` is recorded but not written.