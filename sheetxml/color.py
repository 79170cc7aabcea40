"""Colors as stored in spreadsheet styles: RGB, indexed or theme colors."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Union

__all__ = ["Rgba", "XlsxColor", "from_argb_string", "to_argb_string"]


@dataclass(frozen=True)
class Rgba:
    """An RGB color with an alpha channel, each component 0..255."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component out of range: {value}")


def from_argb_string(text: str) -> Rgba:
    """Parse an eight-digit hexadecimal ``AARRGGBB`` string."""
    if len(text) != 8:
        raise ValueError(f"ARGB string must have 8 digits: {text!r}")
    alpha, red, green, blue = (int(text[i:i + 2], 16) for i in range(0, 8, 2))
    return Rgba(red, green, blue, alpha)


def to_argb_string(color: Rgba) -> str:
    """Return the color as upper-case ``AARRGGBB``."""
    return f"{color.alpha:02X}{color.red:02X}{color.green:02X}{color.blue:02X}"


ColorValue = Union[Rgba, int, "tuple[str, str]", None]


class XlsxColor:
    """A color given by RGB value, palette index, or theme and tint.

    ``XlsxColor()`` is the invalid (automatic) color.
    """

    __slots__ = ("_value",)

    def __init__(self, value: ColorValue = None) -> None:
        if isinstance(value, bool):
            raise TypeError("a color cannot be a boolean")
        if isinstance(value, tuple):
            if len(value) != 2:
                raise ValueError("a theme color is a (theme, tint) pair")
            value = (str(value[0]), str(value[1]))
        elif value is not None and not isinstance(value, (Rgba, int)):
            raise TypeError(f"unsupported color value: {value!r}")
        self._value = value

    @classmethod
    def theme(cls, theme: str, tint: str = "") -> XlsxColor:
        """Build a theme color."""
        return cls((theme, tint))

    def is_rgb_color(self) -> bool:
        return isinstance(self._value, Rgba)

    def is_indexed_color(self) -> bool:
        return isinstance(self._value, int)

    def is_theme_color(self) -> bool:
        return isinstance(self._value, tuple)

    def is_invalid(self) -> bool:
        return self._value is None

    def rgb_color(self) -> Rgba | None:
        return self._value if isinstance(self._value, Rgba) else None

    def indexed_color(self) -> int:
        """Return the palette index, or -1 if this is not an indexed color."""
        return self._value if isinstance(self._value, int) else -1

    def theme_color(self) -> tuple[str, ...]:
        """Return ``(theme, tint)``, or an empty tuple for other colors."""
        return self._value if isinstance(self._value, tuple) else ()

    def to_element(self, node: str = "") -> ET.Element:
        """Return an empty element (``color`` unless *node* is given) for this color."""
        element = ET.Element(node or "color")
        value = self._value
        if isinstance(value, Rgba):
            element.set("rgb", to_argb_string(value))
        elif isinstance(value, tuple):
            theme, tint = value
            element.set("theme", theme)
            if tint:
                element.set("tint", tint)
        elif isinstance(value, int):
            element.set("indexed", str(value))
        else:
            element.set("auto", "1")
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> XlsxColor:
        """Read a color from the attributes of a color element."""
        rgb = element.get("rgb")
        if rgb is not None:
            return cls(from_argb_string(rgb))
        indexed = element.get("indexed")
        if indexed is not None:
            try:
                return cls(int(indexed))
            except ValueError:
                return cls(0)
        theme = element.get("theme")
        if theme is not None:
            return cls((theme, element.get("tint", "")))
        return cls()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XlsxColor):
            return NotImplemented
        return type(self._value) is type(other._value) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self._value).__name__, self._value))

    def __repr__(self) -> str:
        value = self._value
        if value is None:
            return "XlsxColor(invalid)"
        if isinstance(value, Rgba):
            return f"XlsxColor(rgb,{to_argb_string(value)})"
        if isinstance(value, int):
            return f"XlsxColor(indexed,{value})"
        return f"XlsxColor(theme,{':'.join(value)})"