from collections import deque

import numpy as np
import pytest

from region_finder.models.color import Color
from region_finder.models.image import Image

RED = Color(255, 0, 0)
WHITE = Color(255, 255, 255)
BLUE = Color(0, 0, 255)


def blank_pixels(width: int, height: int, color: Color = WHITE) -> np.ndarray:
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = color
    return pixels


def fill_rect(pixels: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
    """Fill the inclusive rectangle (x0, y0)-(x1, y1)."""
    pixels[y0:y1 + 1, x0:x1 + 1] = color


def is_connected(points) -> bool:
    """True if the point set is a single 8-connected component."""
    remaining = set(points)
    if not remaining:
        return True
    start = next(iter(remaining))
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                n = (x + dx, y + dy)
                if n in remaining and n not in seen:
                    seen.add(n)
                    queue.append(n)
    return len(seen) == len(remaining)


@pytest.fixture
def red_square_image() -> Image:
    """10x10 white image with a 9x9 red square at (0,0)-(8,8)."""
    pixels = blank_pixels(10, 10)
    fill_rect(pixels, 0, 0, 8, 8, RED)
    return Image(pixels=pixels)


@pytest.fixture
def two_squares_image() -> Image:
    """40x20 white image: a 9x9 red square on the left, a 10x10 one on the right."""
    pixels = blank_pixels(40, 20)
    fill_rect(pixels, 0, 0, 8, 8, RED)
    fill_rect(pixels, 20, 5, 29, 14, RED)
    return Image(pixels=pixels)


@pytest.fixture
def short_run_image() -> Image:
    """40x10 white image whose only red run is 30 pixels long."""
    pixels = blank_pixels(40, 10)
    fill_rect(pixels, 5, 4, 34, 4, RED)
    return Image(pixels=pixels)
