"""Pixel model, RGB distance and the convergence tolerance."""

import math
from dataclasses import dataclass

import numpy as np

# Per-channel slack when comparing centroids; absorbs truncation noise.
TOLERANCE = 1

@dataclass(frozen=True)
class Pixel:
    """One RGB sample. `index` is its position in the row-major buffer, or -1."""
    r: float
    g: float
    b: float
    index: int = -1

    @classmethod
    def from_array(cls, values, index: int = -1) -> "Pixel":
        return cls(float(values[0]), float(values[1]), float(values[2]), index)

    def to_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b)

    def distance(self, other: "Pixel") -> float:
        return distance(self, other)

    def approx_equal(self, other: "Pixel") -> bool:
        return approx_equal(self, other)

def distance(a: Pixel, b: Pixel) -> float:
    """Euclidean distance between two colors, no channel weighting."""
    return math.sqrt((a.r - b.r) ** 2 + (a.g - b.g) ** 2 + (a.b - b.b) ** 2)

def approx_equal(a: Pixel, b: Pixel, tolerance: float = TOLERANCE) -> bool:
    """True when every channel differs by at most `tolerance`."""
    # Checked channel by channel so one large difference is never averaged away
    return (abs(a.r - b.r) <= tolerance
            and abs(a.g - b.g) <= tolerance
            and abs(a.b - b.b) <= tolerance)

def pairwise_distances(pixels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """(N, K) matrix of distances from every pixel to every centroid."""
    return np.linalg.norm(pixels[:, None] - centroids[None, :], axis=2)
