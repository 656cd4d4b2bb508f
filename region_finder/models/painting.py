from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Painting:
    """
    Transparent RGBA canvas that regions get stamped onto.
    """
    canvas: np.ndarray # Shape (H, W, 4), dtype uint8, RGBA order. Alpha 0 = unpainted.
    path: Path | None = None

    @classmethod
    def blank(cls, width: int, height: int, path: Path | None = None) -> "Painting":
        return cls(canvas=np.zeros((height, width, 4), dtype=np.uint8), path=path)

    @property
    def width(self) -> int:
        return self.canvas.shape[1]

    @property
    def height(self) -> int:
        return self.canvas.shape[0]
