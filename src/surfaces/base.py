"""
Drawing surface contract used by the board renderer.

A surface needs only two primitives, so any backend (raster image,
SVG document, recorder) can be plugged in.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from src.core import Color, Path, WHITE


class TextAlign(Enum):
    """Horizontal text placement relative to the path."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class TextStyle:
    size: float  # Font size in surface units
    color: Color = WHITE
    align: TextAlign = TextAlign.CENTER


def aligned_start(align: TextAlign, path_length: float, text_width: float, h_offset: float) -> float:
    """
    Distance along the path where the text begins.

    LEFT starts at h_offset, CENTER centers the text on
    h_offset + path_length / 2, RIGHT ends at h_offset + path_length.
    """
    if align is TextAlign.CENTER:
        return h_offset + (path_length - text_width) / 2.0
    if align is TextAlign.RIGHT:
        return h_offset + path_length - text_width
    return h_offset


class DrawSurface(Protocol):
    def fill_path(self, path: Path, color: Color) -> None:
        ...

    def draw_text_on_path(
            self,
            text: str,
            path: Path,
            h_offset: float,
            v_offset: float,
            style: TextStyle
    ) -> None:
        ...
