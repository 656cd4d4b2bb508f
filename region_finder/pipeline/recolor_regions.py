# pipeline/recolor_regions.py
"""
Single-image pipelines: recolor every region, or highlight the largest one.
"""
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

from ..models.color import Color
from ..models.image import Image
from ..models.region_engine import RegionEngine
from ..services.image_service import ImageService
from ..services.region_service import RegionService

# ------------------------------------------------------------------
# env-vars
load_dotenv()
OUTPUT_DIR  = os.getenv("OUTPUT_DIR_PATH", "pictures")
PAINT_COLOR = Color.parse(os.getenv("PAINT_COLOR", "255,0,0"))
RANDOM_SEED = os.getenv("RANDOM_SEED")

logger = logging.getLogger(__name__)


def _default_region_service() -> RegionService:
    seed = int(RANDOM_SEED) if RANDOM_SEED else None
    return RegionService(engine=RegionEngine(rng=seed))


def recolor_regions(
    img: Image,
    target: Color,
    *,
    region_service: RegionService | None = None,
    output_path: str | Path | None = None,
) -> Image:
    """
    Find every region of img close to target and return a recolored copy
    (one random color per region), with its path set to output_path
    (default: <OUTPUT_DIR>/recolored.png).
    """
    region_service = region_service or _default_region_service()
    recolored = region_service.recolor(img, target)
    recolored.path = Path(output_path or Path(OUTPUT_DIR) / "recolored.png")

    largest = region_service.largest_region()
    if largest is None:
        logger.info("No large enough region found")
    else:
        logger.info(f"Largest region: {largest.size} points")
    return recolored


def highlight_largest(
    img: Image,
    target: Color,
    *,
    region_service: RegionService | None = None,
    paint_color: Color = PAINT_COLOR,
    output_path: str | Path | None = None,
) -> Image:
    """
    Return a copy of img with only its largest region painted in paint_color.
    """
    region_service = region_service or _default_region_service()
    highlighted = region_service.highlight_largest(img, target, paint_color)
    highlighted.path = Path(output_path or Path(OUTPUT_DIR) / "highlighted.png")
    return highlighted
