from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def blend_span(dst: np.ndarray, y: int, x0: int, x1: int, color: RGBA) -> None:
    """Source-over blend `color` into row `y` for columns [x0, x1]."""
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y, xa : xb + 1], color)


def blend_mask(dst: np.ndarray, mask: np.ndarray, color: RGBA) -> None:
    """Source-over blend `color` once into every pixel where `mask` is set."""
    if not mask.any():
        return
    pixels = dst[mask]
    _blend(pixels, color)
    dst[mask] = pixels


def _blend(view: np.ndarray, color: RGBA) -> None:
    # Non-premultiplied source-over.
    a = color[3] / 255.0
    if a <= 0.0:
        return
    src = np.asarray(color[0:3], dtype=np.float32)
    dst_a = view[..., 3:4].astype(np.float32) / 255.0
    out_a = a + dst_a * (1.0 - a)
    rgb = (src * a + view[..., :3].astype(np.float32) * dst_a * (1.0 - a)) / np.maximum(out_a, 1e-6)
    view[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    view[..., 3] = np.clip(np.rint(out_a[..., 0] * 255.0), 0, 255).astype(np.uint8)
