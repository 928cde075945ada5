"""
Raster drawing surface backed by an OpenCV/numpy BGR image.
"""
import math
from typing import Optional, Tuple
import logging

import cv2
import numpy as np

from src.core import BLACK, Color, Path
from .base import TextStyle, aligned_start

logger = logging.getLogger(__name__)

# Cap height of a typical font relative to its em size
CAP_HEIGHT_RATIO = 0.7

# Fixed-point bits for sub-pixel polygon vertices
POLY_SHIFT = 4


def to_bgr(color: Color) -> Tuple[int, int, int]:
    """RGB triple → OpenCV BGR triple."""
    r, g, b = color
    return (int(b), int(g), int(r))


class OpenCVSurface:
    """
    Paints fills and curved text into ``self.image`` (H, W, 3) uint8 BGR.

    Zero-area paths are skipped, so a 0x0 surface is a valid target.
    """

    FONT = cv2.FONT_HERSHEY_SIMPLEX

    def __init__(
            self,
            width: float,
            height: float,
            background: Optional[Color] = BLACK,
            arc_step_deg: float = 2.0
    ):
        """
        Initialize surface.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            background: RGB fill color (None = black)
            arc_step_deg: Max angular step when flattening arcs

        Raises:
            ValueError: If arc_step_deg is not positive
        """
        if arc_step_deg <= 0:
            raise ValueError(f"arc_step_deg must be positive, got {arc_step_deg}")

        self.width = max(0, int(round(width)))
        self.height = max(0, int(round(height)))
        self.arc_step_deg = arc_step_deg

        self.image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        if background is not None:
            self.image[:] = to_bgr(background)

    def fill_path(self, path: Path, color: Color) -> None:
        if self.image.size == 0:
            return

        pts = path.flatten(self.arc_step_deg)
        if len(pts) < 3 or path.area(self.arc_step_deg) <= 0.0:
            logger.debug(f"Skipping zero-area fill: {path!r}")
            return

        fixed = np.round(pts * (1 << POLY_SHIFT)).astype(np.int32)
        cv2.fillPoly(
            self.image,
            [fixed],
            to_bgr(color),
            lineType=cv2.LINE_8,
            shift=POLY_SHIFT
        )

    def draw_text_on_path(
            self,
            text: str,
            path: Path,
            h_offset: float,
            v_offset: float,
            style: TextStyle
    ) -> None:
        """
        Lay ``text`` glyph by glyph along ``path``.

        Each glyph sits with its baseline on the path, rotated to the local
        tangent; positive ``v_offset`` moves it below the path.
        """
        if not text or style.size <= 0 or self.image.size == 0:
            return

        pts = path.flatten(self.arc_step_deg)
        if len(pts) < 2:
            return

        # Drop repeated vertices so every segment has a direction
        seg_len = np.linalg.norm(np.diff(pts, axis=0), axis=1)
        pts = pts[np.concatenate([[True], seg_len > 1e-9])]
        if len(pts) < 2:
            return

        segments = np.diff(pts, axis=0)
        cumulative = np.concatenate([[0.0], np.cumsum(np.linalg.norm(segments, axis=1))])
        total = float(cumulative[-1])

        thickness = max(1, int(round(style.size / 12.0)))
        pixel_height = max(1, int(round(style.size * CAP_HEIGHT_RATIO)))
        scale = cv2.getFontScaleFromHeight(self.FONT, pixel_height, thickness)

        widths = [cv2.getTextSize(ch, self.FONT, scale, thickness)[0][0] for ch in text]
        cursor = aligned_start(style.align, total, float(sum(widths)), h_offset)

        for ch, width in zip(text, widths):
            distance = cursor + width / 2.0
            cursor += width

            # Glyphs past either end of the path are dropped
            if distance < 0.0 or distance > total:
                continue

            k = int(np.clip(np.searchsorted(cumulative, distance, side="right") - 1,
                            0, len(segments) - 1))
            tx, ty = segments[k] / np.linalg.norm(segments[k])
            x = float(np.interp(distance, cumulative, pts[:, 0]))
            y = float(np.interp(distance, cumulative, pts[:, 1]))

            # Glyph "down" is (-ty, tx) once rotated onto the tangent
            x += -ty * v_offset
            y += tx * v_offset

            self._draw_glyph(ch, (x, y), math.degrees(math.atan2(ty, tx)),
                             scale, thickness, style.color)

    def _draw_glyph(
            self,
            ch: str,
            anchor: Tuple[float, float],
            angle_deg: float,
            scale: float,
            thickness: int,
            color: Color
    ) -> None:
        """Render one glyph into a mask, rotate it, and blend it at ``anchor``."""
        (w, h), baseline = cv2.getTextSize(ch, self.FONT, scale, thickness)
        pad = int(math.ceil(max(w, h + baseline))) + 2 * thickness + 2
        size = 2 * pad + 1

        # Baseline center of the glyph lands on the patch center
        mask = np.zeros((size, size), dtype=np.uint8)
        cv2.putText(mask, ch, (int(round(pad - w / 2.0)), pad),
                    self.FONT, scale, 255, thickness, cv2.LINE_AA)

        # OpenCV's positive angle turns counter-clockwise on screen
        rotation = cv2.getRotationMatrix2D((float(pad), float(pad)), -angle_deg, 1.0)
        mask = cv2.warpAffine(mask, rotation, (size, size), flags=cv2.INTER_LINEAR)

        x0 = int(round(anchor[0])) - pad
        y0 = int(round(anchor[1])) - pad
        ix0, iy0 = max(x0, 0), max(y0, 0)
        ix1, iy1 = min(x0 + size, self.width), min(y0 + size, self.height)
        if ix0 >= ix1 or iy0 >= iy1:
            return

        alpha = mask[iy0 - y0:iy1 - y0, ix0 - x0:ix1 - x0].astype(np.float32)[..., None] / 255.0
        region = self.image[iy0:iy1, ix0:ix1].astype(np.float32)
        ink = np.array(to_bgr(color), dtype=np.float32)
        blended = region * (1.0 - alpha) + ink * alpha
        self.image[iy0:iy1, ix0:ix1] = np.clip(np.round(blended), 0, 255).astype(np.uint8)

    def encode(self, ext: str = ".png") -> bytes:
        """
        Encode the image for writing to disk.

        Args:
            ext: Image extension understood by cv2.imencode (".png", ".jpg")

        Raises:
            IOError: If encoding fails (e.g. empty image)
        """
        if self.image.size == 0:
            raise IOError("Cannot encode an empty image")

        ok, buffer = cv2.imencode(ext, self.image)
        if not ok:
            raise IOError(f"Failed to encode image as {ext}")
        return buffer.tobytes()
