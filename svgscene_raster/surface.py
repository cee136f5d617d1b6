from __future__ import annotations

from dataclasses import replace
import math

import numpy as np
from PIL import Image

from svgscene_core.path import PathGeometry
from svgscene_core.scene import SurfaceStyle

from .canvas import RGBA, blend_mask, blend_span, new_canvas
from .flatten import Polyline, flatten_path, identity
from .paint import parse_line_width, resolve_paint


class RasterSurface:
    """numpy RGBA canvas that implements the DrawingSurface protocol."""

    def __init__(self, width: int, height: int, background: RGBA = (0, 0, 0, 0)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.canvas = new_canvas(width, height, background)
        self.style = SurfaceStyle()
        self._transform = identity()
        self._stack: list[tuple[np.ndarray, SurfaceStyle]] = []
        self._warned_paints: set[str] = set()

    @property
    def transform(self) -> np.ndarray:
        return self._transform.copy()

    def save(self) -> None:
        self._stack.append((self._transform.copy(), replace(self.style)))

    def restore(self) -> None:
        if not self._stack:
            return
        self._transform, self.style = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        step = identity()
        step[0, 2] = x
        step[1, 2] = y
        self._transform = self._transform @ step

    def scale(self, sx: float, sy: float) -> None:
        step = identity()
        step[0, 0] = sx
        step[1, 1] = sy
        self._transform = self._transform @ step

    def fill(self, path: PathGeometry) -> None:
        color = resolve_paint(self.style.fill_style, self.style.global_alpha, self._warned_paints)
        if color is None:
            return
        _fill_nonzero(self.canvas, flatten_path(path, self._transform), color)

    def stroke(self, path: PathGeometry) -> None:
        color = resolve_paint(self.style.stroke_style, self.style.global_alpha, self._warned_paints)
        if color is None:
            return
        line_width = parse_line_width(self.style.line_width)
        if line_width <= 0:
            return
        det = float(np.linalg.det(self._transform[:2, :2]))
        thickness = max(1, int(round(line_width * math.sqrt(abs(det)))))
        mask = np.zeros(self.canvas.shape[:2], dtype=bool)
        for line in flatten_path(path, self._transform):
            _stroke_polyline(mask, line, thickness)
        # One blend per covered pixel keeps translucent strokes at their alpha.
        blend_mask(self.canvas, mask, color)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.canvas)


def _fill_nonzero(dst: np.ndarray, polylines: list[Polyline], color: RGBA) -> None:
    edges: list[tuple[float, float, float, float, int]] = []
    for line in polylines:
        pts = line.points
        if pts.shape[0] < 3:
            continue
        for (x0, y0), (x1, y1) in zip(pts, np.roll(pts, -1, axis=0)):
            if y0 == y1:
                continue
            direction = 1 if y1 > y0 else -1
            edges.append((float(x0), float(y0), float(x1), float(y1), direction))
    if not edges:
        return
    min_y = max(0, int(math.floor(min(min(e[1], e[3]) for e in edges))))
    max_y = min(dst.shape[0] - 1, int(math.ceil(max(max(e[1], e[3]) for e in edges))))
    for y in range(min_y, max_y + 1):
        sample_y = y + 0.5
        crossings: list[tuple[float, int]] = []
        for x0, y0, x1, y1, direction in edges:
            if min(y0, y1) <= sample_y < max(y0, y1):
                x = x0 + (sample_y - y0) * (x1 - x0) / (y1 - y0)
                crossings.append((x, direction))
        crossings.sort()
        winding = 0
        for i, (x, direction) in enumerate(crossings[:-1]):
            winding += direction
            if winding == 0:
                continue
            x_next = crossings[i + 1][0]
            # Pixel centers in [x, x_next).
            xa = int(math.ceil(x - 0.5))
            xb = int(math.ceil(x_next - 0.5)) - 1
            if xb >= xa:
                blend_span(dst, y, xa, xb, color)


def _stroke_polyline(mask: np.ndarray, line: Polyline, thickness: int) -> None:
    pts = [(float(x), float(y)) for x, y in line.points]
    if line.closed and len(pts) > 1:
        pts.append(pts[0])
    if len(pts) == 1:
        _stamp_brush(mask, int(round(pts[0][0])), int(round(pts[0][1])), thickness)
        return
    height, width = mask.shape
    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        clipped = _clip_segment(
            x0, y0, x1, y1,
            -float(thickness), -float(thickness),
            float(width - 1 + thickness), float(height - 1 + thickness),
        )
        if clipped is None:
            continue
        cx0, cy0, cx1, cy1 = (int(round(v)) for v in clipped)
        _draw_line_segment(mask, cx0, cy0, cx1, cy1, thickness)


def _clip_segment(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    xmin: float,
    ymin: float,
    xmax: float,
    ymax: float,
) -> tuple[float, float, float, float] | None:
    """Liang-Barsky clip of a segment to an axis-aligned box."""
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            t0 = max(t0, r)
        else:
            if r < t0:
                return None
            t1 = min(t1, r)
    return x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy


def _draw_line_segment(mask: np.ndarray, x0: int, y0: int, x1: int, y1: int, thickness: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _stamp_brush(mask, x0, y0, thickness)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _stamp_brush(mask: np.ndarray, x: int, y: int, thickness: int) -> None:
    half = thickness // 2
    xa = max(0, x - half)
    ya = max(0, y - half)
    xb = min(mask.shape[1], x - half + thickness)
    yb = min(mask.shape[0], y - half + thickness)
    if xb > xa and yb > ya:
        mask[ya:yb, xa:xb] = True
