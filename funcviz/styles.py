"""Colours and the per-function style sheets derived from them."""

from __future__ import annotations

import random
from dataclasses import dataclass

_HUE_RANGE = (180, 400)
_SATURATION_RANGE = (100, 200)
_VALUE_RANGE = (150, 240)


def _channel(fraction: float) -> int:
    """Scale a 0..1 fraction to 16 bits, round, and keep the high byte."""
    return int(fraction * 0xFFFF + 0.5) >> 8


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def name(self) -> str:
        """Return the colour as ``#rrggbb`` in lower case."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hsv(cls, hue: int, saturation: int, value: int) -> Color:
        """Build a colour from HSV; hue wraps modulo 360, -1 means achromatic."""
        if hue < -1 or not 0 <= saturation <= 255 or not 0 <= value <= 255:
            raise ValueError("HSV parameters out of range")

        v = value / 255
        if hue == -1 or saturation == 0:
            gray = _channel(v)
            return cls(gray, gray, gray)

        h = (hue % 360) / 60
        s = saturation / 255
        sector = int(h)
        fraction = h - sector
        p = v * (1.0 - s)
        if sector % 2:
            q = v * (1.0 - s * fraction)
            rgb = {1: (q, v, p), 3: (p, q, v), 5: (v, p, q)}[sector]
        else:
            t = v * (1.0 - s * (1.0 - fraction))
            rgb = {0: (v, t, p), 2: (p, v, t), 4: (t, p, v)}[sector]
        return cls(*(_channel(component) for component in rgb))


BLACK = Color(0, 0, 0)


def scrollbar_style(color: Color) -> str:
    """Style sheet for a function box's vertical scroll bar in ``color``."""
    rgb = f"{color.red}, {color.green}, {color.blue}"
    return (
        "QScrollBar:vertical {"
        f"    background-color: rgba({rgb}, 0.2);"
        "    width: 6px;"
        "    border-radius: 4px;"
        "}"
        "QScrollBar:hover:vertical {"
        f"    background-color: rgba({rgb}, 0.3);"
        "}"
        "QScrollBar::handle:vertical {"
        f"    background-color: rgba({rgb}, 0.45);"
        "    min-height: 20px;"
        "    border-radius: 3px;"
        "}"
        "QScrollBar::handle:vertical:hover {"
        f"    background-color: rgba({rgb}, 0.6);"
        "}"
        "QScrollBar::sub-line:vertical,"
        "QScrollBar::add-line:vertical {"
        "    height: 0;"
        "    width: 0;"
        "}"
        "QScrollBar::up-arrow:vertical,"
        "QScrollBar::down-arrow:vertical {"
        "    background: none;"
        "}"
        "QScrollBar::add-page:vertical,"
        "QScrollBar::sub-page:vertical {"
        "    background: none;"
        "}"
        "QScrollBar::up-arrow:vertical:hover,"
        "QScrollBar::down-arrow:vertical:hover {"
        f"    background-color: rgba({rgb}, 0.7);"
        "}"
    )


def focus_style(color: Color) -> str:
    """Style sheet underlining a focused function box in ``color``."""
    return (
        "QTextEdit:focus {"
        f"   border-bottom: 2px solid rgba({color.red}, {color.green}, {color.blue}, 0.7);"
        "}"
    )


def generate_pastel_colors(count: int, rng: random.Random | None = None) -> list[Color]:
    """Return ``count`` random pastel colours drawn from ``rng``."""
    source = rng if rng is not None else random.Random()
    return [
        Color.from_hsv(
            source.randrange(*_HUE_RANGE),
            source.randrange(*_SATURATION_RANGE),
            source.randrange(*_VALUE_RANGE),
        )
        for _ in range(count)
    ]


def recolor_svg(svg_text: str, new_color: Color, old_color: Color = BLACK) -> str:
    """Replace every occurrence of ``old_color``'s name with ``new_color``'s."""
    return svg_text.replace(old_color.name(), new_color.name())