from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Protocol

from .color import Color, is_hex_color, parse_color


class StyleProperty(str, Enum):
    FILL_STYLE = "fill_style"
    STROKE_STYLE = "stroke_style"
    GLOBAL_ALPHA = "global_alpha"
    LINE_CAP = "line_cap"
    LINE_DASH_OFFSET = "line_dash_offset"
    LINE_JOIN = "line_join"
    LINE_WIDTH = "line_width"
    MITER_LIMIT = "miter_limit"
    FONT = "font"
    GLOBAL_COMPOSITE_OPERATION = "global_composite_operation"
    SHADOW_BLUR = "shadow_blur"
    SHADOW_COLOR = "shadow_color"
    SHADOW_OFFSET_X = "shadow_offset_x"
    SHADOW_OFFSET_Y = "shadow_offset_y"
    TEXT_ALIGN = "text_align"
    TEXT_BASELINE = "text_baseline"


@dataclass(frozen=True)
class StyleEntry:
    prop: StyleProperty
    attribute: str | None
    default: str


# Rows without an attribute are surface-only properties with no SVG counterpart.
STYLE_TABLE: tuple[StyleEntry, ...] = (
    StyleEntry(StyleProperty.FILL_STYLE, "fill", "black"),
    StyleEntry(StyleProperty.STROKE_STYLE, "stroke", "none"),
    StyleEntry(StyleProperty.GLOBAL_ALPHA, "opacity", ""),
    StyleEntry(StyleProperty.LINE_CAP, "stroke-linecap", ""),
    StyleEntry(StyleProperty.LINE_DASH_OFFSET, "stroke-dashoffset", ""),
    StyleEntry(StyleProperty.LINE_JOIN, "stroke-linejoin", ""),
    StyleEntry(StyleProperty.LINE_WIDTH, "stroke-width", "1"),
    StyleEntry(StyleProperty.MITER_LIMIT, "stroke-miterlimit", ""),
    StyleEntry(StyleProperty.FONT, None, ""),
    StyleEntry(StyleProperty.GLOBAL_COMPOSITE_OPERATION, None, ""),
    StyleEntry(StyleProperty.SHADOW_BLUR, None, ""),
    StyleEntry(StyleProperty.SHADOW_COLOR, None, ""),
    StyleEntry(StyleProperty.SHADOW_OFFSET_X, None, ""),
    StyleEntry(StyleProperty.SHADOW_OFFSET_Y, None, ""),
    StyleEntry(StyleProperty.TEXT_ALIGN, None, ""),
    StyleEntry(StyleProperty.TEXT_BASELINE, None, ""),
)


class AttributeSource(Protocol):
    def get(self, key: str, default: str | None = None) -> str | None:
        ...


@dataclass(frozen=True)
class Style:
    """Presentation properties for one drawing node.

    `properties` keeps table order. A fill or stroke that is a strict
    `#RRGGBB` string lives in `fill_color`/`stroke_color` instead, so the
    scene graph can tint it at draw time.
    """

    properties: tuple[tuple[StyleProperty, str], ...] = ()
    fill_color: Color | None = None
    stroke_color: Color | None = None

    def get(self, prop: StyleProperty) -> str | None:
        for key, value in self.properties:
            if key is prop:
                return value
        return None

    def keys(self) -> tuple[StyleProperty, ...]:
        return tuple(key for key, _ in self.properties)


def build_style(properties: Iterable[tuple[StyleProperty, str]]) -> Style:
    kept: list[tuple[StyleProperty, str]] = []
    fill_color: Color | None = None
    stroke_color: Color | None = None
    for prop, value in properties:
        if prop is StyleProperty.FILL_STYLE and is_hex_color(value):
            fill_color = parse_color(value)
            continue
        if prop is StyleProperty.STROKE_STYLE and is_hex_color(value):
            stroke_color = parse_color(value)
            continue
        kept.append((prop, value))
    return Style(properties=tuple(kept), fill_color=fill_color, stroke_color=stroke_color)


def parse_style(
    element: AttributeSource,
    global_style: Mapping[StyleProperty | str, str] | None = None,
) -> Style:
    values: dict[StyleProperty, str] = {}
    for entry in STYLE_TABLE:
        if not entry.attribute:
            continue
        value = element.get(entry.attribute) or entry.default
        if not value:
            continue
        values[entry.prop] = value
    if global_style:
        # dict.update keeps the position of existing keys and appends new ones.
        values.update({StyleProperty(key): value for key, value in global_style.items()})
    return build_style(values.items())


def styles_equal(a: Style, b: Style) -> bool:
    """Order-sensitive comparison of keys and values, plus extracted colors."""
    if len(a.properties) != len(b.properties):
        return False
    for (key_a, value_a), (key_b, value_b) in zip(a.properties, b.properties):
        if key_a is not key_b or value_a != value_b:
            return False
    return a.fill_color == b.fill_color and a.stroke_color == b.stroke_color
