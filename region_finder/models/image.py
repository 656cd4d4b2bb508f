from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: RGB pixels (+ optional path for bookkeeping).
    Pixel (x, y) lives at pixels[y, x].
    """
    pixels: np.ndarray # Shape (H, W, 3), dtype uint8, RGB order.
    path: Path | None = None # Source or destination of the image.

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]
