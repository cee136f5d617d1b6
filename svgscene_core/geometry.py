from __future__ import annotations

from enum import Enum
import logging
import math
import re
from typing import Any, Sequence

from .style import AttributeSource


LOGGER = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")

Point = tuple[float, float]


class GeometryAttribute(str, Enum):
    CX = "cx"
    CY = "cy"
    R = "r"
    RX = "rx"
    RY = "ry"
    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"
    X1 = "x1"
    Y1 = "y1"
    X2 = "x2"
    Y2 = "y2"
    POINTS = "points"
    D = "d"


def parse_number(text: str) -> float:
    """Parse the leading numeric prefix of `text`; NaN when there is none."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def parse_points(text: str) -> list[Point]:
    points: list[Point] = []
    for token in text.split(" "):
        if not token:
            continue
        coords = [parse_number(part) for part in token.split(",")]
        x = coords[0] if len(coords) > 0 else math.nan
        y = coords[1] if len(coords) > 1 else math.nan
        points.append((x, y))
    return points


def parse_attribute(attribute: GeometryAttribute, raw: str) -> Any:
    if attribute is GeometryAttribute.POINTS:
        return parse_points(raw)
    if attribute is GeometryAttribute.D:
        return raw
    value = parse_number(raw)
    if math.isnan(value):
        LOGGER.debug("attribute `%s` is not numeric: %r", attribute.value, raw)
    return value


def default_attribute(attribute: GeometryAttribute, element: AttributeSource) -> Any:
    if attribute is GeometryAttribute.RX:
        return _radius_from_sibling(element.get(GeometryAttribute.RY.value))
    if attribute is GeometryAttribute.RY:
        return _radius_from_sibling(element.get(GeometryAttribute.RX.value))
    if attribute in (GeometryAttribute.WIDTH, GeometryAttribute.HEIGHT):
        return 100.0
    if attribute is GeometryAttribute.POINTS:
        return []
    if attribute is GeometryAttribute.D:
        return None
    return 0.0


def resolve_attribute(element: AttributeSource, attribute: GeometryAttribute) -> Any:
    raw = element.get(attribute.value)
    if raw:
        return parse_attribute(attribute, raw)
    return default_attribute(attribute, element)


def resolve_attributes(element: AttributeSource, attributes: Sequence[GeometryAttribute]) -> list[Any]:
    return [resolve_attribute(element, attribute) for attribute in attributes]


def _radius_from_sibling(raw: str | None) -> float:
    if not raw or raw == "auto":
        return 0.0
    value = parse_number(raw)
    return 0.0 if math.isnan(value) else value
