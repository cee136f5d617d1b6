from .canvas import blend_mask, blend_span, new_canvas
from .flatten import Polyline, flatten_path
from .paint import resolve_paint
from .surface import RasterSurface

__all__ = [
    "Polyline",
    "RasterSurface",
    "blend_mask",
    "blend_span",
    "flatten_path",
    "new_canvas",
    "resolve_paint",
]
