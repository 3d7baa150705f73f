from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from PIL import Image

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from frame_axis import AxisWidget, validate_axis_style
from frame_axis.raster import RasterAxisSurface


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a frame-number axis to PNG.")
    parser.add_argument("--start", type=int, default=0)
    parser.add_argument("--end", type=int, default=180)
    parser.add_argument("--width", type=float, default=800.0)
    parser.add_argument("--height", type=float, default=None)
    parser.add_argument("--scale", type=float, default=1.0, help="tick spacing scale")
    parser.add_argument("--font-size", type=float, default=13.0)
    parser.add_argument("--color", default="#FFFFFF")
    parser.add_argument("--out", default="frame_axis_demo.png")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    style = validate_axis_style(
        {"font_size_px": args.font_size, "text_color": args.color, "tick_spacing_scale": args.scale}
    )
    surface = RasterAxisSurface(background=(0, 0, 0, 255))
    axis = AxisWidget(surface, surface=surface, start_frame=args.start, end_frame=args.end, style=style)
    height = args.height if args.height is not None else axis.preferred_height
    axis.resize(args.width, height)

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if surface.rgba.size == 0:
        print("axis surface is empty; nothing written")
        return 1
    Image.fromarray(surface.rgba).save(out_path)
    print(f"{out_path} major_tick={axis.major_tick}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
