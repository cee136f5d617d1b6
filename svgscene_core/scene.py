from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol

from .color import Color, blend, color_to_hex, color_to_rgb
from .config import DEFAULT_CONFIG, SceneConfig
from .path import PathGeometry
from .style import Style, StyleProperty


@dataclass
class SurfaceStyle:
    """Settable style state of a drawing surface, one field per StyleProperty."""

    fill_style: str = "#000000"
    stroke_style: str = "#000000"
    global_alpha: str = "1"
    line_cap: str = "butt"
    line_dash_offset: str = "0"
    line_join: str = "miter"
    line_width: str = "1"
    miter_limit: str = "10"
    font: str = "10px sans-serif"
    global_composite_operation: str = "source-over"
    shadow_blur: str = "0"
    shadow_color: str = "rgba(0, 0, 0, 0)"
    shadow_offset_x: str = "0"
    shadow_offset_y: str = "0"
    text_align: str = "start"
    text_baseline: str = "alphabetic"

    def read(self, prop: StyleProperty) -> str:
        return getattr(self, prop.value)

    def write(self, prop: StyleProperty, value: str) -> None:
        setattr(self, prop.value, value)


class DrawingSurface(Protocol):
    """Immediate-mode 2D target the scene graph draws onto.

    `fill`/`stroke` receive a PathGeometry; PathData directives are parsed by
    the surface itself.
    """

    style: SurfaceStyle

    def save(self) -> None:
        ...

    def restore(self) -> None:
        ...

    def translate(self, x: float, y: float) -> None:
        ...

    def scale(self, sx: float, sy: float) -> None:
        ...

    def fill(self, path: PathGeometry) -> None:
        ...

    def stroke(self, path: PathGeometry) -> None:
        ...


@contextmanager
def saved_state(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


def format_color(color: Color, color_format: str = "rgb") -> str:
    if color_format == "hex":
        return color_to_hex(color)
    return color_to_rgb(color)


class Drawing:
    def __init__(self, style: Style | None = None, path: PathGeometry | None = None) -> None:
        self._children: list[Drawing] = []
        self._style = style
        self._path = path

    @property
    def style(self) -> Style | None:
        return self._style

    @property
    def path(self) -> PathGeometry | None:
        return self._path

    @property
    def children(self) -> tuple[Drawing, ...]:
        return tuple(self._children)

    def add_child(self, child: Drawing) -> None:
        self._children.append(child)

    def draw(
        self,
        surface: DrawingSurface,
        tint: Color | None = None,
        tint_amount: float = 0.5,
        *,
        color_format: str = "rgb",
        propagate_tint: bool = False,
    ) -> None:
        self._apply_style(surface, tint, tint_amount, color_format)

        if self._path is not None and self._style is not None:
            if self._style.get(StyleProperty.FILL_STYLE) != "none":
                surface.fill(self._path)
            if self._style.get(StyleProperty.STROKE_STYLE) != "none":
                surface.stroke(self._path)

        child_tint = tint if propagate_tint else None
        for child in self._children:
            child.draw(
                surface,
                child_tint,
                tint_amount,
                color_format=color_format,
                propagate_tint=propagate_tint,
            )

    def _apply_style(
        self,
        surface: DrawingSurface,
        tint: Color | None,
        tint_amount: float,
        color_format: str,
    ) -> None:
        style = self._style
        if style is None:
            return
        current = surface.style
        for prop, value in style.properties:
            if current.read(prop) != value:
                current.write(prop, value)

        # Extracted colors are written last so they win over any literal string.
        if style.stroke_color is not None:
            col = blend(style.stroke_color, tint, tint_amount) if tint is not None else style.stroke_color
            current.stroke_style = format_color(col, color_format)
        if style.fill_color is not None:
            col = blend(style.fill_color, tint, tint_amount) if tint is not None else style.fill_color
            current.fill_style = format_color(col, color_format)


class SVGDrawing:
    """Root of a converted document, placed and scaled at draw time."""

    def __init__(self, width: float, height: float, config: SceneConfig | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self._children: list[Drawing] = []
        self.width = width
        self.height = height
        self.config = config or DEFAULT_CONFIG
        self._inv_width = 1.0 / width
        self._inv_height = 1.0 / height

    @property
    def children(self) -> tuple[Drawing, ...]:
        return tuple(self._children)

    def add_child(self, child: Drawing) -> None:
        self._children.append(child)

    def scale_factors(self, width: float | None = None, height: float | None = None) -> tuple[float, float] | None:
        """Scale for a requested draw size; a missing axis reuses the other's factor."""
        if width is None and height is None:
            return None
        sw = width * self._inv_width if width is not None else height * self._inv_height
        sh = height * self._inv_height if height is not None else width * self._inv_width
        return sw, sh

    def draw(
        self,
        surface: DrawingSurface,
        x: float = 0.0,
        y: float = 0.0,
        width: float | None = None,
        height: float | None = None,
        tint: Color | None = None,
        tint_amount: float | None = None,
    ) -> None:
        amount = self.config.tint_amount if tint_amount is None else tint_amount
        with saved_state(surface):
            surface.translate(x, y)
            factors = self.scale_factors(width, height)
            if factors is not None:
                surface.scale(*factors)
            for child in self._children:
                child.draw(
                    surface,
                    tint,
                    amount,
                    color_format=self.config.color_format,
                    propagate_tint=self.config.propagate_tint,
                )
