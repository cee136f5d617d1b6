from __future__ import annotations


class SvgSceneError(ValueError):
    """Base class for conversion errors raised by svgscene."""


class FormatError(SvgSceneError):
    """Raised when a color string is not a strict `#RRGGBB` value."""


class StructureError(SvgSceneError):
    """Raised when the document root cannot be converted."""
