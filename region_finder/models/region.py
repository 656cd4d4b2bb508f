from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple
import numpy as np


class Point(NamedTuple):
    x: int  # column
    y: int  # row


@dataclass
class Region:
    """
    One connected component: its points in discovery order.
    """
    points: List[Point] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.points)

    def add(self, point: Point) -> None:
        self.points.append(point)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __contains__(self, point) -> bool:
        return point in self.points

    def as_mask(self, height: int, width: int) -> np.ndarray:
        """
        Boolean (H, W) mask with True on every point of the region.
        """
        mask = np.zeros((height, width), dtype=bool)
        if self.points:
            xs, ys = zip(*self.points)
            mask[list(ys), list(xs)] = True
        return mask
