from pathlib import Path
from typing import Union

from ..models.color import Color
from ..models.painting import Painting
from ..models.region import Region
from ..repositories.painting_repository import PaintingRepository


class PaintingService:
    """
    Brush-style drawing: each call stamps one region onto a persistent canvas.
    """

    def __init__(self):
        self.repository = PaintingRepository()

    def blank_painting(self, width: int, height: int, path: Union[str, Path] = None) -> Painting:
        return self.repository.create_blank(width, height, path)

    def clear(self, painting: Painting) -> None:
        self.repository.reset_canvas(painting)

    def paint_region(self, painting: Painting, region: Region, color: Color) -> int:
        """
        Stamp region onto the canvas in an opaque color.
        Points outside the canvas are skipped; returns how many were painted.
        """
        inside = [p for p in region
                  if 0 <= p.x < painting.width and 0 <= p.y < painting.height]
        if not inside:
            return 0

        mask = Region(inside).as_mask(painting.height, painting.width)
        self.repository.stamp(painting, mask, (*color, 255))
        return len(inside)

    def save(self, painting: Painting) -> None:
        self.repository.save(painting)
