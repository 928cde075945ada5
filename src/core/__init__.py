"""
Core module - board layout types, path primitive, I/O and configuration.
"""
from .types import (
    Color,
    RED,
    GREEN,
    BLACK,
    CREAM,
    WHITE,
    RingSpec,
    BoardLayout,
    DEFAULT_RINGS,
    DEFAULT_SEGMENT_NUMBERS,
    DEFAULT_LAYOUT,
    SurfaceSize,
    Rect,
)
from .path import (
    Path,
    Point,
    point_on_circle,
    point_on_oval,
)
from .io_utils import (
    atomic_write_yaml,
    atomic_write_bytes,
    load_yaml,
)
from .config_loader import Config

__all__ = [
    # Types
    "Color",
    "RED",
    "GREEN",
    "BLACK",
    "CREAM",
    "WHITE",
    "RingSpec",
    "BoardLayout",
    "DEFAULT_RINGS",
    "DEFAULT_SEGMENT_NUMBERS",
    "DEFAULT_LAYOUT",
    "SurfaceSize",
    "Rect",
    # Geometry
    "Path",
    "Point",
    "point_on_circle",
    "point_on_oval",
    # I/O
    "atomic_write_yaml",
    "atomic_write_bytes",
    "load_yaml",
    # Config
    "Config",
]
