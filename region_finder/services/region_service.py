# services/region_service.py
import logging
from typing import List, Optional

from ..models.color import Color
from ..models.image import Image
from ..models.region import Region
from ..models.region_engine import RegionEngine
from .image_service import ImageService

logger = logging.getLogger(__name__)


class RegionService:
    """
    Business logic on top of one RegionEngine.

    • analyze() runs a fresh pass per image; nothing carries over between frames.
    • Callers must not share one service between threads.
    """

    def __init__(self, engine: RegionEngine | None = None, image_service: ImageService | None = None):
        self.engine = engine or RegionEngine()
        self.image_service = image_service or ImageService()

    def analyze(self, img: Image, target: Color) -> List[Region]:
        self.engine.set_image(img)
        regions = self.engine.find_regions(target)
        logger.info(f"Found {len(regions)} region(s) matching {target.to_hex()}")
        return regions

    def largest_region(self) -> Optional[Region]:
        return self.engine.largest_region()

    def recolor(self, img: Image, target: Color) -> Image:
        """
        Analyze img and return a copy with every region in its own random color.
        """
        self.analyze(img, target)
        return self.engine.recolor_image()

    def highlight_largest(self, img: Image, target: Color, paint_color: Color) -> Image:
        """
        Copy of img with only the largest region painted in paint_color.
        Falls back to an unmodified copy when no region is large enough.
        """
        self.analyze(img, target)
        largest = self.largest_region()
        if largest is None:
            logger.info("No large enough region found")
            return self.image_service.copy(img)

        height, width = self.image_service.get_image_dimensions(img)
        return self.image_service.paint_mask(img, largest.as_mask(height, width), paint_color)
