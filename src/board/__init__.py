"""
Board module - dartboard wedge geometry and segment rendering.
"""
from .geometry import build_wedge_path, build_arc_path, preferred_text_size
from .renderer import SegmentRenderer

__all__ = [
    "build_wedge_path",
    "build_arc_path",
    "preferred_text_size",
    "SegmentRenderer",
]
