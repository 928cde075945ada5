"""
Dartboard wedge and label-baseline geometry.
"""
import math

from src.core import Path, Point, Rect, point_on_circle


def build_wedge_path(
        path: Path,
        center: Point,
        inner_radius: float,
        outer_radius: float,
        start_angle: float,
        sweep_angle: float
) -> Path:
    """
    Append one ring wedge (annular sector) to ``path``.

    Inner start → outer start → outer arc → inner end → inner arc back.
    """
    cx, cy = center
    inner_circle = Rect.around(cx, cy, inner_radius)
    outer_circle = Rect.around(cx, cy, outer_radius)

    path.move_to(*point_on_circle(cx, cy, inner_radius, start_angle))
    path.line_to(*point_on_circle(cx, cy, outer_radius, start_angle))
    path.arc_to(outer_circle, start_angle, sweep_angle)
    path.line_to(*point_on_circle(cx, cy, inner_radius, start_angle + sweep_angle))
    path.arc_to(inner_circle, start_angle + sweep_angle, -sweep_angle)
    return path


def build_arc_path(
        path: Path,
        center: Point,
        radius: float,
        start_angle: float,
        sweep_angle: float
) -> Path:
    """Append an open arc, e.g. a text baseline."""
    cx, cy = center
    path.move_to(*point_on_circle(cx, cy, radius, start_angle))
    path.arc_to(Rect.around(cx, cy, radius), start_angle, sweep_angle)
    return path


def preferred_text_size(inner_radius: float, outer_radius: float, sweep_angle: float) -> float:
    """
    Label size that fits both the wedge's outer arc and its thickness.

    Returns:
        Half of the smaller of outer arc length and ring thickness
    """
    outer_arc_length = math.radians(sweep_angle) * outer_radius
    ring_thickness = outer_radius - inner_radius
    return min(outer_arc_length, ring_thickness) / 2.0
