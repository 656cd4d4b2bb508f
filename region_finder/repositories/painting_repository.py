from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage

from ..models.painting import Painting


class PaintingRepository:
    """
    Canvas creation, pixel stamping and PNG export for Painting entities.
    """

    @staticmethod
    def create_blank(width: int, height: int, path: Union[str, Path] = None) -> Painting:
        return Painting.blank(width, height, Path(path) if path is not None else None)

    @staticmethod
    def reset_canvas(painting: Painting) -> None:
        painting.canvas[...] = 0

    @staticmethod
    def stamp(painting: Painting, mask: np.ndarray, rgba) -> None:
        painting.canvas[mask] = rgba

    @staticmethod
    def save(painting: Painting) -> None:
        if painting.path is None:
            raise ValueError("Cannot save a painting without a path")
        path = Path(painting.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(painting.canvas).save(path)
