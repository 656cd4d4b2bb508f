from pathlib import Path
from typing import Union, Iterable, List, Iterator, Tuple
import logging
import os

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O and pixel access for Image entities.
    """
    def __init__(self):
        exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".png,.jpg,.jpeg,.bmp")
        self.VALID_EXTS = {ext.strip().lower() for ext in exts.split(",") if ext.strip()}

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        return img.pixels.shape[:2]

    @staticmethod
    def retrieve_pixel(img: Image, x: int, y: int) -> np.ndarray:
        height, width = img.pixels.shape[:2]
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"Pixel ({x}, {y}) outside {width}x{height} image")
        return img.pixels[y, x]

    @staticmethod
    def load(path: Union[str, Path], rgb: bool = True) -> Image:
        path = Path(path)
        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = np.ascontiguousarray(arr_bgr[:, :, ::-1]) if rgb else arr_bgr
        return Image(pixels=arr, path=path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Cannot save an image without a path")
        path = Path(image.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(image.pixels).save(path)

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Image]:
        """
        Yield Image objects one at a time, in file-name order.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if p.suffix.lower() not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            if not p.is_file():
                continue
            try:
                yield self.load(p)
            except FileNotFoundError as err:
                logger.warning(f"Skipping {p.name}: {err}")

    def load_dir(
        self, folder: Union[str, Path], *, recursive=False, exts=None
    ) -> List[Image]:
        return list(self.iter_dir(folder, recursive=recursive, exts=exts))
