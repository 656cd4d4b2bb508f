from pathlib import Path
from typing import Iterable, List, Union, Iterator, Tuple
import numpy as np

from ..models.color import Color
from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O and pixel helpers.  No region logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def stream_frames(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Image]:
        """
        Yield frames lazily, one still image per file.
        """
        return self.image_repository.iter_dir(folder,
                                              recursive=recursive,
                                              exts=exts)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)

    def save_gallery(self, gallery: Iterable[Image]):
        for img in gallery:
            self.save(img)

    def get_image_dimensions(self, img: Image) -> Tuple[int, int]:
        """(height, width) of the image."""
        return self.image_repository.retrieve_image_dimensions(img)

    def color_at(self, img: Image, x: int, y: int) -> Color:
        """
        Sample the color under pixel (x, y), e.g. to pick a target color.
        """
        return Color.from_pixel(self.image_repository.retrieve_pixel(img, x, y))

    def copy(self, img: Image, path: Union[str, Path] = None) -> Image:
        return self.create_image(img.pixels.copy(), path)

    def paint_mask(self, img: Image, mask: np.ndarray, color: Color) -> Image:
        """
        Return a *new* Image with every masked pixel set to color.
        """
        new_img = self.copy(img)
        new_img.pixels[mask, :3] = tuple(color)
        return new_img
