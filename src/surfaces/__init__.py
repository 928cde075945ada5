"""
Surfaces module - drawing targets for the board renderer.
"""
from .base import DrawSurface, TextAlign, TextStyle, aligned_start
from .recording import RecordingSurface, FillCommand, TextCommand
from .opencv_surface import OpenCVSurface
from .svg_surface import SvgSurface

__all__ = [
    "DrawSurface",
    "TextAlign",
    "TextStyle",
    "aligned_start",
    "RecordingSurface",
    "FillCommand",
    "TextCommand",
    "OpenCVSurface",
    "SvgSurface",
]
