"""K-means color reduction for plain-text PPM images."""

from .cluster import Cluster, compute_centroid
from .config import RunConfig
from .errors import (
    BadMagic,
    ClusterError,
    DidNotConverge,
    EmptyCluster,
    EmptyImage,
    ExportError,
    LoadError,
    PixelIndexError,
    QuantizerError,
    TruncatedData,
)
from .image import Image, load
from .kmeans import KMeansResult, kmeans, nearest_centroid, seed_indices
from .pixel import TOLERANCE, Pixel, approx_equal, distance

__version__ = "0.1.0"
