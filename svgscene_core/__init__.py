from .color import Color, blend, color_to_hex, color_to_rgb, is_hex_color, parse_color
from .config import DEFAULT_CONFIG, SceneConfig, load_scene_config, validate_scene_config
from .convert import create_drawing_from_markup, create_drawing_from_svg
from .errors import FormatError, StructureError, SvgSceneError
from .geometry import GeometryAttribute, parse_number, parse_points, resolve_attribute, resolve_attributes
from .grouping import group_runs
from .path import ClosePath, Ellipse, LineTo, MoveTo, PathData, PathDirective, PathGeometry, Rect
from .scene import Drawing, DrawingSurface, SurfaceStyle, SVGDrawing, saved_state
from .shapes import ShapeKind, compile_element, compile_shape
from .style import STYLE_TABLE, Style, StyleProperty, build_style, parse_style, styles_equal

__all__ = [
    "ClosePath",
    "Color",
    "DEFAULT_CONFIG",
    "Drawing",
    "DrawingSurface",
    "Ellipse",
    "FormatError",
    "GeometryAttribute",
    "LineTo",
    "MoveTo",
    "PathData",
    "PathDirective",
    "PathGeometry",
    "Rect",
    "STYLE_TABLE",
    "SVGDrawing",
    "SceneConfig",
    "ShapeKind",
    "StructureError",
    "Style",
    "StyleProperty",
    "SurfaceStyle",
    "SvgSceneError",
    "blend",
    "build_style",
    "color_to_hex",
    "color_to_rgb",
    "compile_element",
    "compile_shape",
    "create_drawing_from_markup",
    "create_drawing_from_svg",
    "group_runs",
    "is_hex_color",
    "load_scene_config",
    "parse_color",
    "parse_number",
    "parse_points",
    "parse_style",
    "resolve_attribute",
    "resolve_attributes",
    "saved_state",
    "styles_equal",
    "validate_scene_config",
]
