"""
Render the dartboard diagram to an image file.

Supports:
- PNG/JPG output through OpenCV
- SVG output (vector paths, curved labels as <textPath>)
- Preview window
- YAML settings (config/render.yaml style), overridden by flags

Usage:
    # Default 600x600 PNG
    python scripts/render_board.py

    # SVG at a custom size
    python scripts/render_board.py --width 800 --height 500 --output board.svg

    # Preview only
    python scripts/render_board.py --show --no-save
"""
import sys
import argparse
from pathlib import Path

import cv2

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core import Config, atomic_write_bytes, atomic_write_yaml
from src.board import SegmentRenderer
from src.surfaces import OpenCVSurface, SvgSurface
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DEFAULT_ARC_STEP_DEG = 2.0


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the dartboard segment diagram",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/render_board.py                          # dartboard.png, 600x600
  python scripts/render_board.py -o board.svg             # Vector output
  python scripts/render_board.py -W 300 -H 200 --show     # Wide surface, preview
        """
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Settings YAML (default: built-in defaults)"
    )
    parser.add_argument(
        "-W", "--width",
        type=int,
        default=None,
        help="Surface width in pixels"
    )
    parser.add_argument(
        "-H", "--height",
        type=int,
        default=None,
        help="Surface height in pixels"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file; .svg selects the vector backend"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Show the rendered board in a window"
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Don't write the output file"
    )
    parser.add_argument(
        "--save-config",
        type=str,
        default=None,
        help="Write the effective settings to this YAML file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )

    return parser.parse_args(argv)


def build_config(args) -> Config:
    """Load settings and apply command line overrides."""
    config = Config(Path(args.config) if args.config else None)

    if args.width is not None:
        config.set("render", "width", args.width)
    if args.height is not None:
        config.set("render", "height", args.height)
    if args.output is not None:
        config.set("render", "output", args.output)

    return config


def make_surface(config: Config, output: Path):
    """Pick the drawing backend from the output extension."""
    width = config.get("render", "width")
    height = config.get("render", "height")

    if output.suffix.lower() == ".svg":
        background = config.get("svg", "background")
        return SvgSurface(
            width,
            height,
            background=tuple(background) if background is not None else None,
            font_family=config.get("svg", "font_family", "sans-serif")
        )

    arc_step_deg = float(config.get("opencv", "arc_step_deg", DEFAULT_ARC_STEP_DEG))
    if arc_step_deg <= 0:
        logger.warning(
            f"Invalid opencv.arc_step_deg={arc_step_deg}, using {DEFAULT_ARC_STEP_DEG}"
        )
        arc_step_deg = DEFAULT_ARC_STEP_DEG

    background = config.get("opencv", "background")
    return OpenCVSurface(
        width,
        height,
        background=tuple(background) if background is not None else None,
        arc_step_deg=arc_step_deg
    )


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = build_config(args)
    output = Path(config.get("render", "output"))
    width = config.get("render", "width")
    height = config.get("render", "height")

    surface = make_surface(config, output)
    SegmentRenderer().render(width, height, surface)
    logger.info(f"Rendered board on {width}x{height} surface ({type(surface).__name__})")

    try:
        if args.save_config:
            atomic_write_yaml(Path(args.save_config), config.as_dict())
            logger.info(f"Settings saved to {args.save_config}")

        if not args.no_save:
            atomic_write_bytes(output, surface.encode(output.suffix or ".png"))
            logger.info(f"Board written to {output}")

    except IOError as e:
        logger.error(f"Could not write output: {e}")
        return 1

    if args.show:
        if isinstance(surface, OpenCVSurface) and surface.image.size:
            cv2.imshow("Dartboard", surface.image)
            logger.info("Press any key to close the preview")
            cv2.waitKey(0)
            cv2.destroyAllWindows()
        else:
            logger.warning("Preview is only available for raster output")

    return 0


if __name__ == "__main__":
    sys.exit(main())
