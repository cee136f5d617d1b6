from __future__ import annotations

from dataclasses import dataclass
import math
import re

from .errors import FormatError

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class Color:
    """RGB triple in the 0-255 range. Channels are not clamped."""

    r: float
    g: float
    b: float


def is_hex_color(text: str | None) -> bool:
    return bool(text) and _HEX_COLOR.match(text) is not None


def parse_color(text: str) -> Color:
    if not is_hex_color(text):
        raise FormatError(f"Color failed to match pattern #RRGGBB: {text!r}")
    return Color(
        r=int(text[1:3], 16),
        g=int(text[3:5], 16),
        b=int(text[5:7], 16),
    )


def color_to_hex(color: Color) -> str:
    return "#" + "".join(format(_round_channel(c), "02x") for c in (color.r, color.g, color.b))


def color_to_rgb(color: Color) -> str:
    r, g, b = (_round_channel(c) for c in (color.r, color.g, color.b))
    return f"rgb({r}, {g}, {b})"


def blend(a: Color, b: Color, amount: float) -> Color:
    """Linear interpolation: amount=1 yields `a`, amount=0 yields `b`."""
    return Color(
        r=a.r * amount + b.r * (1 - amount),
        g=a.g * amount + b.g * (1 - amount),
        b=a.b * amount + b.b * (1 - amount),
    )


def _round_channel(value: float) -> int:
    # Half-up, so 127.5 renders as 128 in both hex and rgb() output.
    return int(math.floor(value + 0.5))
