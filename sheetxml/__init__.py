"""Cell references, ranges, formulas, colours, sheet and chart parts for .xlsx workbooks."""

__version__ = "0.1.0"