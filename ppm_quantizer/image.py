"""Image container: owns the pixel buffer and its reduced palette."""

import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from . import ppm, raster
from .errors import ClusterError, ExportError, PixelIndexError
from .kmeans import DEFAULT_MAX_ITER, KMeansResult, kmeans, nearest_centroid
from .pixel import Pixel

logger = logging.getLogger(__name__)

PPM_SUFFIXES = {".ppm"}

def _is_ppm(path) -> bool:
    return Path(path).suffix.lower() in PPM_SUFFIXES

class Image:
    """A row-major RGB buffer of width * height pixels."""

    def __init__(self, width: int = 0, height: int = 0, pixels=None):
        self.width = max(int(width), 0)
        self.height = max(int(height), 0)
        n = self.width * self.height
        if pixels is None:
            pixels = np.zeros((n, 3), dtype=np.float64)
        else:
            pixels = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
            if len(pixels) != n:
                raise ValueError(f"expected {n} pixels for {self.width}x{self.height}, got {len(pixels)}")
        self.pixels = pixels
        self.palette: List[Pixel] = []
        self.result: Optional[KMeansResult] = None

    @classmethod
    def load(cls, path) -> "Image":
        """Read a P3 file, or any Pillow-readable image for other suffixes."""
        if _is_ppm(path):
            width, height, pixels = ppm.read_ppm(path)
        else:
            width, height, pixels = raster.read_image(path)
        return cls(width, height, pixels)

    def __len__(self) -> int:
        return len(self.pixels)

    def get_pixel(self, index: int) -> Pixel:
        if not 0 <= index < len(self.pixels):
            raise PixelIndexError(f"pixel index {index} out of bounds for {len(self.pixels)} pixels")
        return Pixel.from_array(self.pixels[index], index=index)

    def cluster(self, k: int, max_iter: int = DEFAULT_MAX_ITER,
                empty_policy: str = "reseed") -> List[Pixel]:
        """Run k-means over the buffer and keep the K centroids as the palette."""
        if len(self.pixels) == 0:
            raise ClusterError("image data not found (empty data set)")
        self.result = kmeans(self.pixels, k, max_iter=max_iter, empty_policy=empty_policy)
        self.palette = list(self.result.palette)
        return self.palette

    def remap(self) -> np.ndarray:
        """Every pixel replaced by its nearest palette color."""
        if not self.palette:
            raise ExportError("redux data not found (empty redux set)")
        palette = np.array([p.as_tuple() for p in self.palette], dtype=np.float64)
        return palette[nearest_centroid(self.pixels, palette)]

    def export_reduced(self, path) -> Path:
        """Write the remapped image to `path`; P3 text for .ppm, Pillow otherwise."""
        path = Path(path)
        reduced = self.remap()
        try:
            if _is_ppm(path):
                ppm.write_ppm(path, self.width, self.height, reduced)
            else:
                raster.write_image(path, self.width, self.height, reduced)
        except (OSError, ValueError) as exc:
            logger.warning("Error opening file %s: %s", path, exc)
            raise ExportError(f"could not write {path}: {exc}") from exc
        logger.info("Exported %dx%d image with %d colors to %s",
                    self.width, self.height, len(self.palette), path)
        return path

def load(path) -> Image:
    return Image.load(path)
