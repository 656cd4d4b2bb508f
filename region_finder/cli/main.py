#!/usr/bin/env python3
"""
Region Finder command line.

    region-finder recolor   photo.png --color 200,30,30 -o out.png
    region-finder highlight photo.png --pick 120,64
    region-finder highlight frames/   --color "#c81e1e" -o highlighted/
    region-finder paint     frames/   --pick 10,10 --paint-color 0,0,255
"""
import argparse
import itertools
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..models.color import Color
from ..models.image import Image
from ..models.region_engine import RegionEngine
from ..pipeline.paint_frames import paint_frames, highlight_frames, PAINT_COLOR
from ..pipeline.recolor_regions import recolor_regions, highlight_largest
from ..services.image_service import ImageService
from ..services.painting_service import PaintingService
from ..services.region_service import RegionService

logger = logging.getLogger(__name__)


def _parse_point(text: str) -> Tuple[int, int]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected integer X,Y, got {text!r}")


def _parse_color(text: str) -> Color:
    try:
        return Color.parse(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="region-finder",
        description="Find regions of similar color in still images.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser, source_help: str) -> None:
        p.add_argument("source", type=Path, help=source_help)
        target = p.add_mutually_exclusive_group(required=True)
        target.add_argument("--color", type=_parse_color, help="Target color as r,g,b or #RRGGBB")
        target.add_argument("--pick", type=_parse_point, help="Take the target color from pixel X,Y")
        p.add_argument("-o", "--output", type=Path, default=None, help="Output path")

    recolor = sub.add_parser("recolor", help="Give every region its own random color")
    add_common(recolor, "Image file")
    recolor.add_argument("--seed", type=int, default=None, help="Seed for the region colors")

    highlight = sub.add_parser("highlight", help="Paint only the largest region")
    add_common(highlight, "Image file or folder of frames")
    highlight.add_argument("--paint-color", type=_parse_color, default=PAINT_COLOR)

    paint = sub.add_parser("paint", help="Accumulate the largest region of every frame onto a canvas")
    add_common(paint, "Folder of frames")
    paint.add_argument("--paint-color", type=_parse_color, default=PAINT_COLOR)

    return parser


def _target_color(args, image_service: ImageService, img: Image) -> Color:
    if args.color is not None:
        return args.color
    x, y = args.pick
    return image_service.color_at(img, x, y)


def _run(args, image_service: ImageService) -> None:
    if args.command == "recolor":
        img = image_service.load(args.source)
        target = _target_color(args, image_service, img)
        service = RegionService(engine=RegionEngine(rng=args.seed)) if args.seed is not None else None
        result = recolor_regions(img, target, region_service=service, output_path=args.output)
        image_service.save(result)
        print(f"Saved recolored image to {result.path}")

    elif args.command == "highlight" and args.source.is_dir():
        frames = image_service.stream_frames(args.source)
        first = next(frames, None)
        if first is None:
            raise ValueError(f"No frames found in {args.source}")
        target = _target_color(args, image_service, first)
        kwargs = {"output_dir": args.output} if args.output else {}
        results = highlight_frames(itertools.chain([first], frames), target,
                                   paint_color=args.paint_color, **kwargs)
        image_service.save_gallery(results)
        print(f"Saved {len(results)} highlighted frame(s)")

    elif args.command == "highlight":
        img = image_service.load(args.source)
        target = _target_color(args, image_service, img)
        result = highlight_largest(img, target, paint_color=args.paint_color, output_path=args.output)
        image_service.save(result)
        print(f"Saved highlighted image to {result.path}")

    elif args.command == "paint":
        frames = image_service.stream_frames(args.source)
        first = next(frames, None)
        if first is None:
            raise ValueError(f"No frames found in {args.source}")
        target = _target_color(args, image_service, first)
        painting = paint_frames(itertools.chain([first], frames), target,
                                paint_color=args.paint_color, output_path=args.output)
        PaintingService().save(painting)
        print(f"Saved painting to {painting.path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        _run(args, ImageService())
    except (FileNotFoundError, NotADirectoryError, IndexError, ValueError) as err:
        logger.error(f"{args.command} failed: {err}")
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
