"""Read and write non-PPM raster images through Pillow."""

from typing import Tuple

import numpy as np
from PIL import Image

from .errors import EmptyImage, LoadError

def read_image(path) -> Tuple[int, int, np.ndarray]:
    """Load any Pillow-readable image as RGB. Returns (width, height, pixels)."""
    try:
        with Image.open(path) as img:
            arr = np.array(img.convert("RGB"))
    except OSError as exc:
        raise LoadError(f"Error reading image {path}: {exc}") from exc
    h, w, c = arr.shape
    if arr.size == 0:
        raise EmptyImage(f"{path} holds no pixels")
    return w, h, arr.reshape(-1, c).astype(np.float64)

def write_image(path, width: int, height: int, pixels: np.ndarray) -> None:
    """Save pixels in the format implied by the path's suffix."""
    arr = np.clip(np.asarray(pixels), 0, 255).astype(np.uint8).reshape(height, width, 3)
    Image.fromarray(arr).save(path)
