[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetxml"
version = "0.1.0"
description = "Building blocks for SpreadsheetML (.xlsx) parts: cell references, ranges, formulas, colours, sheets and charts."
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "spreadsheet", "ooxml", "spreadsheetml", "chart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sheetxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
