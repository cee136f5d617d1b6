from __future__ import annotations

from dataclasses import dataclass
import logging
import math

import numpy as np
from svgpathtools import Line, parse_path

from svgscene_core.path import ClosePath, Ellipse, LineTo, MoveTo, PathData, PathGeometry, Rect


LOGGER = logging.getLogger(__name__)

CURVE_SAMPLES = 24
MIN_ELLIPSE_SAMPLES = 16
MAX_ELLIPSE_SAMPLES = 512


@dataclass
class Polyline:
    """Device-space subpath. Fill treats every polyline as closed."""

    points: np.ndarray
    closed: bool = False


def identity() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def flatten_path(path: PathGeometry, transform: np.ndarray) -> list[Polyline]:
    builder = _SubpathBuilder(transform)
    for directive in path:
        if isinstance(directive, MoveTo):
            builder.move_to(directive.x, directive.y)
        elif isinstance(directive, LineTo):
            builder.line_to(directive.x, directive.y)
        elif isinstance(directive, ClosePath):
            builder.close()
        elif isinstance(directive, Rect):
            builder.add_rect(directive)
        elif isinstance(directive, Ellipse):
            builder.add_ellipse(directive)
        elif isinstance(directive, PathData):
            builder.add_path_data(directive.d)
    return builder.finish()


class _SubpathBuilder:
    def __init__(self, transform: np.ndarray) -> None:
        self._transform = transform
        self._scale = math.sqrt(abs(float(np.linalg.det(transform[:2, :2])))) or 1.0
        self._done: list[Polyline] = []
        self._current: list[tuple[float, float]] = []

    def move_to(self, x: float, y: float) -> None:
        self._flush(closed=False)
        self._current = [(x, y)]

    def line_to(self, x: float, y: float) -> None:
        if not self._current:
            self._current = [(x, y)]
            return
        self._current.append((x, y))

    def close(self) -> None:
        if not self._current:
            return
        start = self._current[0]
        self._flush(closed=True)
        self._current = [start]

    def add_rect(self, rect: Rect) -> None:
        self._flush(closed=False)
        x, y, w, h = rect.x, rect.y, rect.width, rect.height
        self._current = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
        self._flush(closed=True)

    def add_ellipse(self, ellipse: Ellipse) -> None:
        self._flush(closed=False)
        values = (ellipse.cx, ellipse.cy, ellipse.rx, ellipse.ry)
        if any(math.isnan(v) for v in values) or ellipse.rx < 0 or ellipse.ry < 0:
            return
        sweep = ellipse.end_angle - ellipse.start_angle
        full = abs(sweep) >= 2 * math.pi
        radius_px = max(ellipse.rx, ellipse.ry) * self._scale
        count = int(min(MAX_ELLIPSE_SAMPLES, max(MIN_ELLIPSE_SAMPLES, math.ceil(radius_px))))
        t = ellipse.start_angle + np.linspace(0.0, sweep, count, endpoint=not full)
        cos_r = math.cos(ellipse.rotation)
        sin_r = math.sin(ellipse.rotation)
        ex = ellipse.rx * np.cos(t)
        ey = ellipse.ry * np.sin(t)
        xs = ellipse.cx + ex * cos_r - ey * sin_r
        ys = ellipse.cy + ex * sin_r + ey * cos_r
        self._current = list(zip(xs.tolist(), ys.tolist()))
        self._flush(closed=full)

    def add_path_data(self, d: str) -> None:
        self._flush(closed=False)
        try:
            parsed = parse_path(d)
        except (ValueError, IndexError) as exc:
            LOGGER.warning("could not parse path data %r: %s", d, exc)
            return
        last_end: complex | None = None
        for seg in parsed:
            if last_end is None or seg.start != last_end:
                self._flush(closed=False)
                self._current = [(seg.start.real, seg.start.imag)]
            if isinstance(seg, Line):
                self._current.append((seg.end.real, seg.end.imag))
            else:
                for t in np.linspace(0.0, 1.0, CURVE_SAMPLES + 1)[1:]:
                    p = seg.point(float(t))
                    self._current.append((p.real, p.imag))
            last_end = seg.end
        self._flush(closed=False)

    def finish(self) -> list[Polyline]:
        self._flush(closed=False)
        return self._done

    def _flush(self, closed: bool) -> None:
        pts = self._current
        self._current = []
        if len(pts) < 2 and not closed:
            return
        if not pts:
            return
        arr = np.asarray(pts, dtype=np.float64)
        if not np.all(np.isfinite(arr)):
            return
        homogeneous = np.hstack([arr, np.ones((arr.shape[0], 1))])
        device = homogeneous @ self._transform.T
        self._done.append(Polyline(points=device[:, :2], closed=closed))
