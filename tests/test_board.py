"""
Unit tests for board module.
"""
import math

import pytest

from src.core import (
    BLACK, CREAM, GREEN, RED, WHITE,
    DEFAULT_LAYOUT, Path, Rect,
)
from src.core.path import ARC, LINE, MOVE
from src.board import SegmentRenderer, build_wedge_path, build_arc_path, preferred_text_size
from src.surfaces import RecordingSurface, TextAlign

RINGS = len(DEFAULT_LAYOUT.rings)


def _render(width, height):
    surface = RecordingSurface()
    SegmentRenderer().render(width, height, surface)
    return surface


def _outer_arc(fill):
    """First arc command of a wedge (the outer circle)."""
    return next(c for c in fill.path.commands if c[0] == ARC)


def test_render_command_counts():
    """Test one fill per ring per segment and one label per segment."""
    surface = _render(300, 300)

    assert len(surface.fills) == 12 * RINGS
    assert len(surface.texts) == 12


def test_render_order_fills_before_label():
    """Test each segment paints its rings, then its label."""
    surface = _render(300, 300)
    block = RINGS + 1

    for i in range(12):
        kinds = [type(c).__name__ for c in surface.commands[i * block:(i + 1) * block]]
        assert kinds == ["FillCommand"] * RINGS + ["TextCommand"]


def test_max_radius_square():
    """Test board radius on a square surface."""
    surface = _render(300, 300)

    # Outermost ring of segment 0
    _, oval, _, _ = _outer_arc(surface.fills[RINGS - 1])
    assert oval == Rect.around(150, 150, 150)


def test_max_radius_uses_minor_dimension():
    """Test board is inscribed in the smaller dimension."""
    for width, height in [(300, 200), (200, 300)]:
        surface = _render(width, height)
        _, oval, _, _ = _outer_arc(surface.fills[RINGS - 1])

        assert oval.radii == (100.0, 100.0)
        assert oval.center == (100.0, 100.0)


def test_ring_radii():
    """Test ring radii are monotonic and end at max radius."""
    renderer = SegmentRenderer()
    radii = renderer.ring_radii(150.0)

    assert len(radii) == RINGS
    assert radii[0][0] == 0.0
    for (inner_a, outer_a), (inner_b, outer_b) in zip(radii, radii[1:]):
        assert outer_a <= outer_b
        assert inner_b == outer_a
    assert radii[-1][1] == 150.0


def test_segment_zero_outer_wedge_300():
    """Test segment 0 outer wedge on a 300x300 surface."""
    surface = _render(300, 300)
    fill = surface.fills[RINGS - 1]
    commands = fill.path.commands

    # Inner start point at radius 102 (0.68 * 150), angle 0
    assert commands[0][0] == MOVE
    assert commands[0][1] == pytest.approx(150 + 102)
    assert commands[0][2] == pytest.approx(150)

    # Out to the board edge
    assert commands[1][0] == LINE
    assert commands[1][1] == pytest.approx(300)

    tag, oval, start, sweep = commands[2]
    assert (tag, start, sweep) == (ARC, 0.0, 30.0)
    assert oval.radii == (150.0, 150.0)

    # Back along the inner circle
    tag, oval, start, sweep = commands[4]
    assert (tag, start, sweep) == (ARC, 30.0, -30.0)
    assert oval.radii[0] == pytest.approx(102.0)

    assert fill.color == BLACK


def test_segments_tile_full_circle():
    """Test sweep angles tile 360 degrees without gaps."""
    surface = _render(300, 300)

    for i in range(12):
        for j in range(RINGS):
            _, _, start, sweep = _outer_arc(surface.fills[i * RINGS + j])
            assert start == pytest.approx(i * 30.0)
            assert sweep == pytest.approx(30.0)

    assert sum(_outer_arc(surface.fills[i * RINGS])[3] for i in range(12)) == pytest.approx(360.0)


def test_color_alternation():
    """Test even/odd segments pick the matching ring colors."""
    surface = _render(300, 300)

    for i in range(12):
        for j, ring in enumerate(DEFAULT_LAYOUT.rings):
            expected = ring.color_when_even if i % 2 == 0 else ring.color_when_odd
            assert surface.fills[i * RINGS + j].color == expected


def test_specific_ring_colors():
    """Test fixed color pairs of the bull, triple, singles and number ring."""
    surface = _render(300, 300)

    def color(segment, ring):
        return surface.fills[segment * RINGS + ring].color

    # Bull and outer bull are solid
    assert color(0, 0) == RED and color(1, 0) == RED
    assert color(0, 1) == GREEN and color(1, 1) == GREEN

    # Singles alternate black/cream
    assert color(0, 2) == BLACK and color(1, 2) == CREAM
    assert color(0, 4) == BLACK and color(1, 4) == CREAM

    # Triple and double alternate red/green
    assert color(0, 3) == RED and color(1, 3) == GREEN
    assert color(0, 5) == RED and color(1, 5) == GREEN

    # Number ring is black everywhere
    assert color(0, 6) == BLACK and color(11, 6) == BLACK


def test_label_sequence():
    """Test segment labels in order."""
    surface = _render(300, 300)

    assert [t.text for t in surface.texts] == [
        "20", "5", "15", "10", "20", "5", "15", "10", "20", "5", "15", "10"
    ]


def test_label_placement():
    """Test label size, baseline radius and style for a 300x300 surface."""
    surface = _render(300, 300)
    label = surface.texts[0]

    # min(pi/6 * 150, 150 - 102) / 2
    assert label.style.size == pytest.approx(24.0)
    assert label.style.color == WHITE
    assert label.style.align is TextAlign.CENTER
    assert label.h_offset == 0.0
    assert label.v_offset == 0.0

    # (150 + 102) / 2 - 24 / 2
    move, arc = label.path.commands
    assert move[1] == pytest.approx(150 + 114)
    assert move[2] == pytest.approx(150)
    _, oval, start, sweep = arc
    assert oval.radii[0] == pytest.approx(114)
    assert (start, sweep) == (0.0, 30.0)

    # Later labels start at their own segment angle
    _, _, start, _ = surface.texts[5].path.commands[1]
    assert start == pytest.approx(150.0)


def test_zero_size_surface():
    """Test 0x0 surface draws only zero-area paths."""
    surface = _render(0, 0)

    assert len(surface.fills) == 12 * RINGS
    assert all(fill.path.area() == 0.0 for fill in surface.fills)
    assert all(text.style.size == 0.0 for text in surface.texts)


def test_negative_size_clamped():
    """Test negative dimensions behave like zero."""
    assert _render(-10, 50).commands == _render(0, 0).commands


def test_render_idempotent():
    """Test repeated renders produce identical command sequences."""
    renderer = SegmentRenderer()
    first, second = RecordingSurface(), RecordingSurface()

    renderer.render(300, 300, first)
    renderer.render(300, 300, second)

    assert first.commands == second.commands


def test_recorded_paths_survive_reset():
    """Test recording surface keeps copies of the scratch path."""
    surface = _render(100, 100)

    assert all(not c.path.is_empty for c in surface.commands)


def test_wedge_area():
    """Test wedge outline encloses the annular sector area."""
    path = build_wedge_path(Path(), (0.0, 0.0), 50.0, 100.0, 0.0, 30.0)
    expected = math.pi * (100.0 ** 2 - 50.0 ** 2) * 30.0 / 360.0

    assert path.area(max_step_deg=1.0) == pytest.approx(expected, rel=1e-3)


def test_bull_wedge_is_pie_slice():
    """Test zero inner radius produces a pie slice."""
    path = build_wedge_path(Path(), (10.0, 10.0), 0.0, 20.0, 90.0, 30.0)
    expected = math.pi * 20.0 ** 2 * 30.0 / 360.0

    assert path.commands[0][1:] == pytest.approx((10.0, 10.0))
    assert path.area(max_step_deg=1.0) == pytest.approx(expected, rel=1e-3)


def test_arc_path_length():
    """Test text baseline arc length."""
    path = build_arc_path(Path(), (0.0, 0.0), 100.0, 0.0, 90.0)

    assert path.length() == pytest.approx(math.pi * 50.0, rel=1e-3)
    assert path.current_point == pytest.approx((0.0, 100.0))


def test_preferred_text_size():
    """Test label size is capped by arc length or thickness."""
    # Thickness-limited
    assert preferred_text_size(102.0, 150.0, 30.0) == pytest.approx(24.0)

    # Arc-limited
    arc = math.radians(30.0) * 10.0
    assert preferred_text_size(0.0, 10.0, 30.0) == pytest.approx(arc / 2.0)


if __name__ == "__main__":
    print("Running board module tests...")
    test_render_command_counts()
    print("✓ Command count test passed")
    test_max_radius_square()
    test_max_radius_uses_minor_dimension()
    print("✓ Radius tests passed")
    test_segment_zero_outer_wedge_300()
    test_segments_tile_full_circle()
    print("✓ Wedge geometry tests passed")
    test_color_alternation()
    test_specific_ring_colors()
    print("✓ Color tests passed")
    test_label_sequence()
    test_label_placement()
    print("✓ Label tests passed")
    test_zero_size_surface()
    test_render_idempotent()
    print("✓ Degenerate and idempotence tests passed")
    print("\n✓ All board tests passed!")
