from __future__ import annotations

from enum import Enum
import logging
import math
from typing import Any, Mapping, Sequence

from .geometry import GeometryAttribute, Point, resolve_attributes
from .path import PathGeometry
from .style import Style, StyleProperty, parse_style


LOGGER = logging.getLogger(__name__)

_A = GeometryAttribute


class ShapeKind(str, Enum):
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    PATH = "path"

    @property
    def attributes(self) -> tuple[GeometryAttribute, ...]:
        return _SHAPE_ATTRIBUTES[self]

    @classmethod
    def from_tag(cls, tag: str) -> ShapeKind | None:
        try:
            return cls(strip_namespace(tag))
        except ValueError:
            return None


_SHAPE_ATTRIBUTES: dict[ShapeKind, tuple[GeometryAttribute, ...]] = {
    ShapeKind.RECT: (_A.X, _A.Y, _A.WIDTH, _A.HEIGHT, _A.RX, _A.RY),
    ShapeKind.CIRCLE: (_A.CX, _A.CY, _A.R),
    ShapeKind.ELLIPSE: (_A.CX, _A.CY, _A.RX, _A.RY),
    ShapeKind.LINE: (_A.X1, _A.Y1, _A.X2, _A.Y2),
    ShapeKind.POLYLINE: (_A.POINTS,),
    ShapeKind.POLYGON: (_A.POINTS,),
    ShapeKind.PATH: (_A.D,),
}


def strip_namespace(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def compile_shape(kind: ShapeKind, values: Sequence[Any]) -> PathGeometry:
    path = PathGeometry()
    if kind is ShapeKind.RECT:
        # Corner radii are resolved but do not round the rectangle.
        x, y, width, height, _rx, _ry = values
        path.rect(x, y, width, height)
    elif kind is ShapeKind.CIRCLE:
        cx, cy, r = values
        path.ellipse(cx, cy, r, r, 0.0, 0.0, 2 * math.pi)
    elif kind is ShapeKind.ELLIPSE:
        cx, cy, rx, ry = values
        path.ellipse(cx, cy, rx, ry, 0.0, 0.0, 2 * math.pi)
    elif kind is ShapeKind.LINE:
        x1, y1, x2, y2 = values
        path.move_to(x1, y1)
        path.line_to(x2, y2)
    elif kind is ShapeKind.POLYLINE:
        _trace_points(path, values[0])
    elif kind is ShapeKind.POLYGON:
        _trace_points(path, values[0])
        path.close_path()
    elif kind is ShapeKind.PATH:
        (d,) = values
        if d:
            path.path_data(d)
    else:
        raise ValueError(f"unhandled shape kind: {kind!r}")
    return path


def compile_element(
    element: Any,
    global_style: Mapping[StyleProperty | str, str] | None = None,
) -> tuple[Style, PathGeometry] | None:
    """Compile one SVG element into its style and path, or None if unsupported."""
    kind = ShapeKind.from_tag(element.tag)
    if kind is None:
        LOGGER.warning("Unsupported SVG node type %s; skipping", strip_namespace(element.tag))
        return None
    style = parse_style(element, global_style)
    values = resolve_attributes(element, kind.attributes)
    return style, compile_shape(kind, values)


def _trace_points(path: PathGeometry, points: Sequence[Point]) -> None:
    for i, (x, y) in enumerate(points):
        if i == 0:
            path.move_to(x, y)
        else:
            path.line_to(x, y)
