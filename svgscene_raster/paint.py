from __future__ import annotations

import logging
import math

from PIL import ImageColor

from svgscene_core.geometry import parse_number

from .canvas import RGBA


LOGGER = logging.getLogger(__name__)


def resolve_paint(value: str, global_alpha: str = "1", warned: set[str] | None = None) -> RGBA | None:
    """Map a surface paint string to RGBA, or None when nothing should be painted.

    `warned` collects paint strings already reported, so a caller such as a
    surface logs each unsupported value once.
    """
    value = value.strip()
    if not value or value == "none":
        return None
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError:
        if warned is None or value not in warned:
            if warned is not None:
                warned.add(value)
            LOGGER.warning("unsupported paint value %r; nothing will be drawn", value)
        return None
    alpha = rgb[3] if len(rgb) == 4 else 255
    alpha = int(round(alpha * parse_alpha(global_alpha)))
    return (rgb[0], rgb[1], rgb[2], alpha)


def parse_alpha(value: str) -> float:
    alpha = parse_number(value)
    if math.isnan(alpha):
        return 1.0
    return max(0.0, min(1.0, alpha))


def parse_line_width(value: str) -> float:
    width = parse_number(value)
    if math.isnan(width) or width < 0:
        return 1.0
    return width
