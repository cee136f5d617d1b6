from __future__ import annotations

from typing import Iterable

from .path import PathGeometry
from .style import Style, styles_equal


Shape = tuple[Style, PathGeometry]


def group_runs(shapes: Iterable[Shape]) -> list[Shape]:
    """Merge adjacent shapes that share a style into one path per run.

    Only neighbours are merged, so painter's order is preserved: a shape with a
    different style between two identical ones keeps them in separate runs.
    """
    runs: list[Shape] = []
    for style, path in shapes:
        if runs:
            prev_style, prev_path = runs[-1]
            if styles_equal(style, prev_style):
                merged = prev_path.copy()
                merged.add_path(path)
                runs[-1] = (prev_style, merged)
                continue
        runs.append((style, path))
    return runs
