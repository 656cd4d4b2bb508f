# pipeline/paint_frames.py
from pathlib import Path
from typing import Iterable, List
import logging
import os

from dotenv import load_dotenv

from ..models.color import Color
from ..models.image import Image
from ..models.painting import Painting
from ..services.painting_service import PaintingService
from ..services.region_service import RegionService

# ------------------------------------------------------------------
# env-vars
load_dotenv()
OUTPUT_DIR  = os.getenv("OUTPUT_DIR_PATH", "pictures")
PAINT_COLOR = Color.parse(os.getenv("PAINT_COLOR", "255,0,0"))

logger = logging.getLogger(__name__)


def paint_frames(
    frames: Iterable[Image],
    target: Color,
    *,
    region_service: RegionService | None = None,
    painting_service: PaintingService = PaintingService(),
    paint_color: Color = PAINT_COLOR,
    painting: Painting | None = None,
    output_path: str | Path | None = None,
) -> Painting:
    """
    For every frame, in order:
        • find the regions close to target (fresh analysis per frame)
        • stamp the largest one onto the painting in paint_color
    Frames with no large enough region leave the painting untouched.
    The canvas is sized after the first frame unless a painting is passed in.
    """
    region_service = region_service or RegionService()
    output_path = Path(output_path or Path(OUTPUT_DIR) / "painting.png")

    painted_frames = 0
    for i, frame in enumerate(frames):
        if painting is None:
            painting = painting_service.blank_painting(frame.width, frame.height, output_path)

        region_service.analyze(frame, target)
        largest = region_service.largest_region()
        if largest is None:
            logger.info(f"Frame {i}: no large enough region found")
            continue

        count = painting_service.paint_region(painting, largest, paint_color)
        painted_frames += 1
        logger.info(f"Frame {i}: painted {count} points")

    if painting is None:
        raise ValueError("No frames to paint from")

    if painting.path is None:
        painting.path = output_path
    logger.info(f"Painted {painted_frames} frame(s)")
    return painting


def highlight_frames(
    frames: Iterable[Image],
    target: Color,
    *,
    region_service: RegionService | None = None,
    paint_color: Color = PAINT_COLOR,
    output_dir: str | Path = OUTPUT_DIR,
) -> List[Image]:
    """
    Highlight the largest region of every frame; each output keeps its
    frame's file name under output_dir.
    """
    region_service = region_service or RegionService()
    output_dir = Path(output_dir)

    highlighted = []
    for i, frame in enumerate(frames):
        new_img = region_service.highlight_largest(frame, target, paint_color)
        name = Path(frame.path).name if frame.path else f"frame_{i:04d}.png"
        new_img.path = output_dir / name
        highlighted.append(new_img)
    return highlighted
