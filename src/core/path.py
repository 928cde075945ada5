"""
Path primitive shared by the renderer and the drawing surfaces.

Angles are in degrees, 0° along +x, growing clockwise on a y-down surface:
    x = cx + r * cos(θ), y = cy + r * sin(θ)
"""
import math
from typing import List, Optional, Tuple

import numpy as np

from .types import Rect


Point = Tuple[float, float]

# Command tags stored in Path.commands
MOVE = "move"
LINE = "line"
ARC = "arc"
CLOSE = "close"


def point_on_circle(cx: float, cy: float, radius: float, angle_deg: float) -> Point:
    """Point at ``angle_deg`` on the circle (cx, cy, radius)."""
    theta = math.radians(angle_deg)
    return (cx + radius * math.cos(theta), cy + radius * math.sin(theta))


def point_on_oval(oval: Rect, angle_deg: float) -> Point:
    """Point at ``angle_deg`` on the oval inscribed in ``oval``."""
    cx, cy = oval.center
    rx, ry = oval.radii
    theta = math.radians(angle_deg)
    return (cx + rx * math.cos(theta), cy + ry * math.sin(theta))


class Path:
    """
    Mutable outline built from move/line/arc commands.

    Arcs follow canvas ``arcTo`` semantics: if the current point is not the
    arc start, a straight segment joins them. The path is meant to be
    reused: build, hand to a surface, ``reset()``.
    """

    def __init__(self):
        self._commands: List[tuple] = []
        self._current: Optional[Point] = None
        self._contour_start: Optional[Point] = None

    def move_to(self, x: float, y: float) -> "Path":
        self._commands.append((MOVE, float(x), float(y)))
        self._current = (float(x), float(y))
        self._contour_start = self._current
        return self

    def line_to(self, x: float, y: float) -> "Path":
        if self._current is None:
            # Implicit move to origin, as on a canvas
            self.move_to(0.0, 0.0)
        self._commands.append((LINE, float(x), float(y)))
        self._current = (float(x), float(y))
        return self

    def arc_to(self, oval: Rect, start_angle: float, sweep_angle: float) -> "Path":
        """
        Append an arc of the oval inscribed in ``oval``.

        Args:
            oval: Bounding box of the oval
            start_angle: Start angle in degrees
            sweep_angle: Signed sweep in degrees (positive = clockwise)
        """
        start = point_on_oval(oval, start_angle)
        if self._current is None:
            self.move_to(*start)
        self._commands.append((ARC, oval, float(start_angle), float(sweep_angle)))
        self._current = point_on_oval(oval, start_angle + sweep_angle)
        return self

    def close(self) -> "Path":
        if self._current is not None:
            self._commands.append((CLOSE,))
            self._current = self._contour_start
        return self

    def reset(self) -> None:
        """Drop all commands."""
        self._commands.clear()
        self._current = None
        self._contour_start = None

    @property
    def commands(self) -> Tuple[tuple, ...]:
        return tuple(self._commands)

    @property
    def is_empty(self) -> bool:
        return not self._commands

    @property
    def current_point(self) -> Optional[Point]:
        return self._current

    def copy(self) -> "Path":
        clone = Path()
        clone._commands = list(self._commands)
        clone._current = self._current
        clone._contour_start = self._contour_start
        return clone

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    def __repr__(self):
        return f"Path({len(self._commands)} commands)"

    def flatten(self, max_step_deg: float = 5.0) -> np.ndarray:
        """
        Approximate the outline with straight segments.

        Args:
            max_step_deg: Largest angular step used to sample arcs

        Returns:
            (N, 2) float64 array of points, in drawing order

        Raises:
            ValueError: If max_step_deg is not positive
        """
        if max_step_deg <= 0:
            raise ValueError(f"max_step_deg must be positive, got {max_step_deg}")

        points: List[Point] = []
        contour_start: Optional[Point] = None

        for command in self._commands:
            tag = command[0]
            if tag in (MOVE, LINE):
                points.append((command[1], command[2]))
                if tag == MOVE:
                    contour_start = points[-1]
            elif tag == ARC:
                _, oval, start, sweep = command
                steps = max(1, int(math.ceil(abs(sweep) / max_step_deg)))
                for k in range(steps + 1):
                    points.append(point_on_oval(oval, start + sweep * k / steps))
            elif tag == CLOSE and contour_start is not None:
                points.append(contour_start)

        if not points:
            return np.zeros((0, 2), dtype=np.float64)
        return np.asarray(points, dtype=np.float64)

    def length(self, max_step_deg: float = 1.0) -> float:
        """Length of the flattened outline."""
        pts = self.flatten(max_step_deg)
        if len(pts) < 2:
            return 0.0
        return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))

    def area(self, max_step_deg: float = 1.0) -> float:
        """Absolute enclosed area of the flattened outline (shoelace)."""
        pts = self.flatten(max_step_deg)
        if len(pts) < 3:
            return 0.0
        x, y = pts[:, 0], pts[:, 1]
        return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2.0)
