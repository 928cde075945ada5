"""
Core data types for the dartboard renderer.
Defines the fixed board layout and the per-paint geometry inputs.
"""
from dataclasses import dataclass
from typing import Tuple

# RGB color triple, 0-255 per channel
Color = Tuple[int, int, int]

RED: Color = (254, 50, 6)
GREEN: Color = (1, 172, 74)
BLACK: Color = (0, 0, 0)
CREAM: Color = (240, 219, 187)
WHITE: Color = (255, 255, 255)


@dataclass(frozen=True)
class RingSpec:
    """
    One concentric ring of the board.

    The ring ends at ``outer_ratio`` of the board radius; it starts where
    the previous ring ends (or at the center for the first ring).
    """
    color_when_even: Color  # Used for even segment indices
    color_when_odd: Color  # Used for odd segment indices
    outer_ratio: float  # Fraction of max radius, (0, 1]

    def __post_init__(self):
        if not 0.0 < self.outer_ratio <= 1.0:
            raise ValueError(
                f"Ring outer_ratio must be in (0, 1], got {self.outer_ratio}"
            )

    def color_for(self, segment_index: int) -> Color:
        """Pick the ring color for a segment index."""
        return self.color_when_even if segment_index % 2 == 0 else self.color_when_odd


DEFAULT_RINGS: Tuple[RingSpec, ...] = (
    RingSpec(RED, RED, 0.04),  # Bull
    RingSpec(GREEN, GREEN, 0.08),  # Outer bull
    RingSpec(BLACK, CREAM, 0.3),  # Inner single
    RingSpec(RED, GREEN, 0.34),  # Triple
    RingSpec(BLACK, CREAM, 0.64),  # Outer single
    RingSpec(RED, GREEN, 0.68),  # Double
    RingSpec(BLACK, BLACK, 1.0),  # Number ring
)

DEFAULT_SEGMENT_NUMBERS: Tuple[int, ...] = (20, 5, 15, 10, 20, 5, 15, 10, 20, 5, 15, 10)


@dataclass(frozen=True)
class BoardLayout:
    """
    Static board geometry: rings from the center outward plus the segment
    labels in clockwise order starting at angle 0.
    """
    rings: Tuple[RingSpec, ...] = DEFAULT_RINGS
    segment_numbers: Tuple[int, ...] = DEFAULT_SEGMENT_NUMBERS
    label_color: Color = WHITE

    def __post_init__(self):
        if not self.rings:
            raise ValueError("Board layout needs at least one ring")
        if not self.segment_numbers:
            raise ValueError("Board layout needs at least one segment")

        ratios = [ring.outer_ratio for ring in self.rings]
        if any(b <= a for a, b in zip(ratios, ratios[1:])):
            raise ValueError(f"Ring ratios must be strictly increasing: {ratios}")
        if ratios[-1] != 1.0:
            raise ValueError("Outermost ring must end at ratio 1.0")

    @property
    def num_segments(self) -> int:
        return len(self.segment_numbers)

    @property
    def sweep_angle(self) -> float:
        """Degrees covered by one segment."""
        return 360.0 / len(self.segment_numbers)

    def color_for(self, ring_index: int, segment_index: int) -> Color:
        return self.rings[ring_index].color_for(segment_index)


DEFAULT_LAYOUT = BoardLayout()


@dataclass
class SurfaceSize:
    """
    Drawing region handed in by the host for one paint pass.
    Negative dimensions are clamped to 0.
    """
    width: float
    height: float

    def __post_init__(self):
        self.width = max(0.0, float(self.width))
        self.height = max(0.0, float(self.height))

    @property
    def minor_size(self) -> float:
        return min(self.width, self.height)

    @property
    def max_radius(self) -> float:
        return self.minor_size / 2.0

    @property
    def center(self) -> Tuple[float, float]:
        """Board center (x, y), inscribed in the minor dimension."""
        c = self.minor_size / 2.0
        return (c, c)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box, used as the oval of an arc."""
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def around(cls, cx: float, cy: float, radius: float) -> "Rect":
        """Bounding box of the circle (cx, cy, radius)."""
        return cls(cx - radius, cy - radius, cx + radius, cy + radius)

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def radii(self) -> Tuple[float, float]:
        """Half extents (rx, ry) of the inscribed oval."""
        return (self.width / 2.0, self.height / 2.0)
