from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TypeAlias


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class Ellipse:
    cx: float
    cy: float
    rx: float
    ry: float
    rotation: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ClosePath:
    pass


@dataclass(frozen=True)
class PathData:
    """Raw SVG path data, handed to the drawing surface's own parser."""

    d: str


PathDirective: TypeAlias = MoveTo | LineTo | Ellipse | Rect | ClosePath | PathData


class PathGeometry:
    """Append-only list of path directives, the Path2D of the scene graph."""

    def __init__(self, directives: tuple[PathDirective, ...] = ()) -> None:
        self._directives: list[PathDirective] = list(directives)

    @property
    def directives(self) -> tuple[PathDirective, ...]:
        return tuple(self._directives)

    def move_to(self, x: float, y: float) -> None:
        self._directives.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._directives.append(LineTo(x, y))

    def ellipse(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        self._directives.append(Ellipse(cx, cy, rx, ry, rotation, start_angle, end_angle))

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._directives.append(Rect(x, y, width, height))

    def close_path(self) -> None:
        self._directives.append(ClosePath())

    def path_data(self, d: str) -> None:
        self._directives.append(PathData(d))

    def add_path(self, other: PathGeometry) -> None:
        self._directives.extend(other._directives)

    def copy(self) -> PathGeometry:
        return PathGeometry(self.directives)

    def __iter__(self) -> Iterator[PathDirective]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self._directives)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathGeometry):
            return NotImplemented
        return self._directives == other._directives

    def __repr__(self) -> str:
        return f"PathGeometry({self._directives!r})"
