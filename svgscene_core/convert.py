from __future__ import annotations

import math
from typing import Mapping
import xml.etree.ElementTree as ET

from .config import SceneConfig
from .errors import StructureError
from .geometry import parse_number
from .grouping import Shape, group_runs
from .scene import Drawing, SVGDrawing
from .shapes import compile_element, strip_namespace
from .style import StyleProperty


def create_drawing_from_svg(
    document: ET.ElementTree | ET.Element | None,
    global_style: Mapping[StyleProperty | str, str] | None = None,
    config: SceneConfig | None = None,
) -> SVGDrawing | None:
    """Convert a parsed SVG document into a drawable scene.

    Only direct children of the single `svg` root are compiled. Adjacent
    shapes with identical styles are merged into one Drawing each.
    """
    if document is None:
        return None

    root = _find_svg_root(document)
    width = _root_dimension(root, "width")
    height = _root_dimension(root, "height")

    shapes: list[Shape] = []
    for element in root:
        if not isinstance(element.tag, str):
            continue
        shape = compile_element(element, global_style)
        if shape is not None:
            shapes.append(shape)

    drawing = SVGDrawing(width, height, config=config)
    for style, path in group_runs(shapes):
        drawing.add_child(Drawing(style, path))
    return drawing


def create_drawing_from_markup(
    markup: str | bytes,
    global_style: Mapping[StyleProperty | str, str] | None = None,
    config: SceneConfig | None = None,
) -> SVGDrawing | None:
    return create_drawing_from_svg(ET.fromstring(markup), global_style, config)


def _find_svg_root(document: ET.ElementTree | ET.Element) -> ET.Element:
    top = document.getroot() if isinstance(document, ET.ElementTree) else document
    roots = [el for el in top.iter() if isinstance(el.tag, str) and strip_namespace(el.tag) == "svg"]
    if not roots:
        raise StructureError("Can't find root element `svg` in the given SVG document")
    if len(roots) > 1:
        raise StructureError("Invalid SVG: can only have one root `svg` element")
    return roots[0]


def _root_dimension(root: ET.Element, name: str) -> float:
    raw = root.get(name)
    if not raw:
        raise StructureError(f"Failed to find SVG `{name}` attribute")
    value = parse_number(raw)
    if math.isnan(value) or value <= 0:
        raise StructureError(f"SVG `{name}` must be a positive number, got {raw!r}")
    return value
