"""
Vector drawing surface that builds an SVG document.
"""
import math
from typing import List, Optional
from xml.sax.saxutils import escape, quoteattr
import logging

from src.core import Color, Path, point_on_oval
from src.core.path import ARC, CLOSE, LINE, MOVE
from .base import TextAlign, TextStyle, aligned_start

logger = logging.getLogger(__name__)

_ANCHORS = {
    TextAlign.LEFT: "start",
    TextAlign.CENTER: "middle",
    TextAlign.RIGHT: "end",
}


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def path_to_svg(path: Path) -> str:
    """
    Convert path commands to SVG path data.

    Arcs become elliptical ``A`` commands; sweeps of a full turn or more
    are split in two since SVG cannot draw a closed arc in one command.
    """
    parts: List[str] = []
    current = None

    for command in path.commands:
        tag = command[0]
        if tag == MOVE:
            current = (command[1], command[2])
            parts.append(f"M{_fmt(current[0])} {_fmt(current[1])}")
        elif tag == LINE:
            current = (command[1], command[2])
            parts.append(f"L{_fmt(current[0])} {_fmt(current[1])}")
        elif tag == ARC:
            _, oval, start, sweep = command
            sx, sy = point_on_oval(oval, start)
            if current is None or math.hypot(sx - current[0], sy - current[1]) > 1e-9:
                parts.append(f"L{_fmt(sx)} {_fmt(sy)}")

            rx, ry = oval.radii
            pieces = 2 if abs(sweep) >= 360.0 else 1
            for k in range(1, pieces + 1):
                step = sweep / pieces
                ex, ey = point_on_oval(oval, start + step * k)
                large = 1 if abs(step) > 180.0 else 0
                clockwise = 1 if step > 0 else 0
                parts.append(
                    f"A{_fmt(rx)} {_fmt(ry)} 0 {large} {clockwise} {_fmt(ex)} {_fmt(ey)}"
                )
            current = point_on_oval(oval, start + sweep)
        elif tag == CLOSE:
            parts.append("Z")

    return " ".join(parts)


class SvgSurface:
    """
    Collects fills as ``<path>`` elements and labels as ``<textPath>``.
    """

    def __init__(
            self,
            width: float,
            height: float,
            background: Optional[Color] = None,
            font_family: str = "sans-serif"
    ):
        self.width = max(0.0, float(width))
        self.height = max(0.0, float(height))
        self.background = background
        self.font_family = font_family

        self._defs: List[str] = []
        self._elements: List[str] = []
        self._text_paths = 0

    def fill_path(self, path: Path, color: Color) -> None:
        if path.area() <= 0.0:
            logger.debug(f"Skipping zero-area fill: {path!r}")
            return
        self._elements.append(f'<path d="{path_to_svg(path)}" fill="{to_hex(color)}"/>')

    def draw_text_on_path(
            self,
            text: str,
            path: Path,
            h_offset: float,
            v_offset: float,
            style: TextStyle
    ) -> None:
        if not text or style.size <= 0 or path.is_empty:
            return

        length = path.length()
        # text-anchor places the glyphs around startOffset
        start_offset = aligned_start(style.align, length, 0.0, h_offset)

        path_id = f"text-path-{self._text_paths}"
        self._text_paths += 1
        self._defs.append(f'<path id="{path_id}" d="{path_to_svg(path)}" fill="none"/>')

        self._elements.append(
            f'<text font-size="{_fmt(style.size)}" font-family={quoteattr(self.font_family)} '
            f'fill="{to_hex(style.color)}" text-anchor="{_ANCHORS[style.align]}" '
            f'dy="{_fmt(v_offset)}">'
            f'<textPath href="#{path_id}" xlink:href="#{path_id}" '
            f'startOffset="{_fmt(start_offset)}">{escape(text)}</textPath></text>'
        )

    @property
    def element_count(self) -> int:
        return len(self._elements)

    def to_string(self) -> str:
        """Serialize the document."""
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'xmlns:xlink="http://www.w3.org/1999/xlink" version="1.1" '
            f'width="{_fmt(self.width)}" height="{_fmt(self.height)}" '
            f'viewBox="0 0 {_fmt(self.width)} {_fmt(self.height)}">',
        ]
        if self._defs:
            lines.append("<defs>")
            lines.extend(self._defs)
            lines.append("</defs>")
        if self.background is not None:
            lines.append(
                f'<rect x="0" y="0" width="{_fmt(self.width)}" '
                f'height="{_fmt(self.height)}" fill="{to_hex(self.background)}"/>'
            )
        lines.extend(self._elements)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def encode(self, ext: str = ".svg") -> bytes:
        return self.to_string().encode("utf-8")
