"""
Dartboard segment renderer.
"""
from typing import List, Optional, Tuple
import logging

from src.core import BoardLayout, DEFAULT_LAYOUT, Path, Point, SurfaceSize
from src.surfaces import DrawSurface, TextAlign, TextStyle
from .geometry import build_arc_path, build_wedge_path, preferred_text_size

logger = logging.getLogger(__name__)


class SegmentRenderer:
    """
    Draws the board as filled ring wedges plus one curved label per segment.

    The board is inscribed in a circle whose diameter is the smaller surface
    dimension. Segments run clockwise from 0° (+x axis); each segment paints
    every ring from the center outward, then writes its number along an arc
    centered in the outermost ring.
    """

    def __init__(self, layout: Optional[BoardLayout] = None):
        """
        Initialize renderer.

        Args:
            layout: Board layout (default: DEFAULT_LAYOUT)
        """
        self.layout = layout or DEFAULT_LAYOUT

    def ring_radii(self, max_radius: float) -> List[Tuple[float, float]]:
        """
        Inner/outer radius of every ring for a given board radius.

        Returns:
            List of (inner_radius, outer_radius), center outward
        """
        radii = []
        inner = 0.0
        for ring in self.layout.rings:
            outer = max_radius * ring.outer_ratio
            radii.append((inner, outer))
            inner = outer
        return radii

    def preferred_text_size(self, inner_radius: float, outer_radius: float) -> float:
        return preferred_text_size(inner_radius, outer_radius, self.layout.sweep_angle)

    def render(self, surface_width: float, surface_height: float, surface: DrawSurface) -> None:
        """
        Draw the full board.

        Args:
            surface_width: Surface width (non-negative)
            surface_height: Surface height (non-negative)
            surface: Target implementing fill_path / draw_text_on_path
        """
        size = SurfaceSize(surface_width, surface_height)
        center = size.center
        radii = self.ring_radii(size.max_radius)
        sweep = self.layout.sweep_angle

        logger.debug(
            f"Rendering board: surface={size.width:.0f}x{size.height:.0f}, "
            f"radius={size.max_radius:.1f}"
        )

        # Scratch path, reset after every use
        path = Path()
        start_angle = 0.0

        for i, number in enumerate(self.layout.segment_numbers):
            self._draw_segment(surface, path, center, radii, i, start_angle, str(number))
            start_angle += sweep

    def _draw_segment(
            self,
            surface: DrawSurface,
            path: Path,
            center: Point,
            radii: List[Tuple[float, float]],
            segment_index: int,
            start_angle: float,
            label: str
    ) -> None:
        sweep = self.layout.sweep_angle

        for ring_index, (inner, outer) in enumerate(radii):
            color = self.layout.color_for(ring_index, segment_index)
            build_wedge_path(path, center, inner, outer, start_angle, sweep)
            surface.fill_path(path, color)
            path.reset()

        inner, outer = radii[-1]
        text_size = self.preferred_text_size(inner, outer)

        # Half the font size, not the glyph ascent, shifts the baseline inward
        centered_radius = (outer + inner) / 2.0 - text_size / 2.0

        build_arc_path(path, center, centered_radius, start_angle, sweep)
        surface.draw_text_on_path(
            label,
            path,
            0.0,
            0.0,
            TextStyle(size=text_size, color=self.layout.label_color, align=TextAlign.CENTER)
        )
        path.reset()
