# models/region_engine.py
"""
Region-growing engine: finds and holds regions in an image.

• A region is a list of 8-connected points whose colors are all close to one
  target color (per-channel difference ≤ max_color_diff).
• Only regions of at least min_region points are kept.
• State is the last image and the region set of the last pass; every call to
  find_regions() replaces that set wholesale.
"""
from __future__ import annotations
import logging
import os
from collections import deque
from typing import List, Optional

import numpy as np
from dotenv import load_dotenv

from .color import Color
from .image import Image
from .region import Point, Region

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

MIN_REGION = int(os.getenv("REGION_MIN_SIZE", "50"))          # points needed for a region to count
MAX_COLOR_DIFF = int(os.getenv("REGION_MAX_COLOR_DIFF", "20"))  # per-channel similarity bound

# 8-adjacency, column offset outer, row offset inner
_NEIGHBOURS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class ImageNotSetError(RuntimeError):
    """Raised when an analysis is requested before any image was set."""


class InvalidImageError(ValueError):
    """Raised when the image pixel array is not shaped (H, W, 3+)."""


class RegionEngine:
    def __init__(
        self,
        image: Image | None = None,
        *,
        min_region: int = MIN_REGION,
        max_color_diff: int = MAX_COLOR_DIFF,
        rng: np.random.Generator | int | None = None,
    ):
        """
        Args:
            image: Optional image to analyse.
            min_region: Smallest region size worth keeping.
            max_color_diff: Per-channel tolerance of color_match().
            rng: Random source used by recolor_image(). A Generator, an int
                 seed, or None for a fresh unseeded generator.
        """
        self._image = image
        self.min_region = min_region
        self.max_color_diff = max_color_diff
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
        self._regions: List[Region] = []
        self._recolored_image: Image | None = None

    # ---------- accessors ----------
    @property
    def image(self) -> Image | None:
        return self._image

    @property
    def regions(self) -> List[Region]:
        return self._regions

    @property
    def recolored_image(self) -> Image | None:
        return self._recolored_image

    def set_image(self, image: Image) -> None:
        if image is None:
            raise ValueError("RegionEngine.set_image() requires an image, got None")
        self._image = image

    # ---------- similarity ----------
    def color_match(self, c1: Color, c2: Color) -> bool:
        """
        True if every channel of c1 is within max_color_diff of c2.
        """
        return (abs(int(c1[0]) - int(c2[0])) <= self.max_color_diff
                and abs(int(c1[1]) - int(c2[1])) <= self.max_color_diff
                and abs(int(c1[2]) - int(c2[2])) <= self.max_color_diff)

    def match_mask(self, pixels: np.ndarray, target: Color) -> np.ndarray:
        """
        Vectorised color_match() over a whole (H, W, 3) array → (H, W) bool.
        """
        diff = np.abs(pixels[:, :, :3].astype(np.int16) - np.asarray(target[:3], dtype=np.int16))
        return np.all(diff <= self.max_color_diff, axis=-1)

    # ---------- analysis ----------
    def _require_pixels(self) -> np.ndarray:
        if self._image is None:
            raise ImageNotSetError("No image set: call set_image() before analysing")
        pixels = self._image.pixels
        if pixels is None or pixels.ndim != 3 or pixels.shape[2] < 3:
            shape = None if pixels is None else pixels.shape
            raise InvalidImageError(f"Expected pixels shaped (H, W, 3), got {shape}")
        return pixels

    def find_regions(self, target_color: Color) -> List[Region]:
        """
        Sets regions to the flood-fill regions in the image that are similar
        enough to target_color, and returns them.
        """
        pixels = self._require_pixels()
        height, width = pixels.shape[:2]

        matches = self.match_mask(pixels, target_color)
        visited = np.zeros((height, width), dtype=bool)
        regions: List[Region] = []
        discarded = 0

        for x in range(width):
            for y in range(height):
                if visited[y, x] or not matches[y, x]:
                    continue
                visited[y, x] = True
                region = self._grow(x, y, matches, visited)
                if region.size >= self.min_region:
                    regions.append(region)
                else:
                    discarded += 1

        self._regions = regions
        logger.debug(
            f"find_regions({tuple(target_color)}) on {width}x{height}: "
            f"kept {len(regions)} region(s), discarded {discarded} small one(s)"
        )
        return regions

    @staticmethod
    def _grow(x: int, y: int, matches: np.ndarray, visited: np.ndarray) -> Region:
        """
        Breadth-first traversal from an already visited seed.
        """
        height, width = matches.shape
        region = Region()
        to_visit = deque([Point(x, y)])

        while to_visit:
            current = to_visit.popleft()
            region.add(current)

            for dx, dy in _NEIGHBOURS:
                nx, ny = current.x + dx, current.y + dy
                if 0 <= nx < width and 0 <= ny < height and not visited[ny, nx]:
                    if matches[ny, nx]:
                        visited[ny, nx] = True
                        to_visit.append(Point(nx, ny))
        return region

    # ---------- queries ----------
    def largest_region(self) -> Optional[Region]:
        """
        The region with the most points (first one on ties), or None if the
        last pass found nothing.
        """
        largest: Region | None = None
        for region in self._regions:
            if largest is None or region.size > largest.size:
                largest = region
        return largest

    def recolor_image(self) -> Image:
        """
        Copy of the image with each region painted a uniform random color.
        """
        pixels = self._require_pixels()
        height, width = pixels.shape[:2]
        recolored = pixels.copy()

        for region in self._regions:
            color = self.rng.integers(0, 256, size=3)
            recolored[region.as_mask(height, width), :3] = color

        self._recolored_image = Image(pixels=recolored)
        return self._recolored_image
