"""K-means palette reduction with deterministic, index-spaced seeding."""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from .cluster import Cluster
from .errors import ClusterError, DidNotConverge
from .pixel import Pixel, approx_equal, pairwise_distances

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 300
# Pixel rows per distance matrix
CHUNK_SIZE = 65536
EMPTY_POLICIES = ("reseed", "keep")

@dataclass
class KMeansResult:
    """Outcome of one clustering run."""
    palette: List[Pixel]
    labels: np.ndarray
    iterations: int
    converged: bool
    inertia: List[float] = field(default_factory=list)

def _as_array(centroids) -> np.ndarray:
    if len(centroids) and isinstance(centroids[0], Pixel):
        return np.array([c.as_tuple() for c in centroids], dtype=np.float64)
    return np.asarray(centroids, dtype=np.float64).reshape(-1, 3)

def seed_indices(n_pixels: int, k: int) -> List[int]:
    """Buffer indices of the K initial centroids, spaced evenly over the buffer."""
    if n_pixels == 0:
        raise ClusterError("image data not found (empty data set)")
    if k < 1 or k > n_pixels:
        raise ClusterError(f"k must be between 1 and {n_pixels}, got {k}")
    return [i * n_pixels // k for i in range(k)]

def seed_clusters(pixels: np.ndarray, k: int) -> List[Cluster]:
    clusters = []
    for i, index in enumerate(seed_indices(len(pixels), k)):
        logger.debug("Cluster %d seeded from pixel %d", i, index)
        clusters.append(Cluster(Pixel.from_array(pixels[index], index=index)))
    return clusters

def _nearest(pixels: np.ndarray, centroids: np.ndarray,
             chunk_size: int = CHUNK_SIZE) -> Tuple[np.ndarray, np.ndarray]:
    """Label of the nearest centroid for every pixel, and the distance to it.

    Rows go through `chunk_size` at a time, so the distance matrix never
    exceeds chunk_size x K.
    """
    if len(centroids) == 0:
        raise ClusterError("no centroids to compare against")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    labels = np.empty(len(pixels), dtype=np.intp)
    nearest = np.empty(len(pixels), dtype=np.float64)
    for start in range(0, len(pixels), chunk_size):
        stop = start + chunk_size
        distances = pairwise_distances(pixels[start:stop], centroids)
        # argmin returns the first minimum, so scan order breaks ties
        chunk_labels = np.argmin(distances, axis=1)
        labels[start:stop] = chunk_labels
        nearest[start:stop] = distances[np.arange(len(chunk_labels)), chunk_labels]
    return labels, nearest

def nearest_centroid(pixels: np.ndarray, centroids, chunk_size: int = CHUNK_SIZE) -> np.ndarray:
    """Index of the nearest centroid for every pixel. Ties go to the lowest index."""
    labels, _ = _nearest(pixels, _as_array(centroids), chunk_size)
    return labels

def assign(pixels: np.ndarray, clusters: Sequence[Cluster],
           chunk_size: int = CHUNK_SIZE) -> Tuple[np.ndarray, np.ndarray]:
    """Replace every cluster's members with its nearest pixels.

    Returns the label of each pixel and its distance to that label's centroid.
    """
    labels, nearest = _nearest(pixels, _as_array([c.centroid for c in clusters]), chunk_size)
    for j, cluster in enumerate(clusters):
        cluster.assign(np.flatnonzero(labels == j))
    return labels, nearest

def update(pixels: np.ndarray, clusters: Sequence[Cluster], nearest: np.ndarray,
           empty_policy: str = "reseed") -> int:
    """Recompute centroids from the current members. Returns how many moved."""
    changed = 0
    # Distance of each pixel to its own centroid; zeroed once a pixel seeds an empty cluster
    claimable = nearest.copy()
    for j, cluster in enumerate(clusters):
        if len(cluster):
            previous = cluster.update(pixels)
            if not approx_equal(previous, cluster.centroid):
                changed += 1
        elif empty_policy == "reseed":
            index = int(np.argmax(claimable))
            if claimable[index] > 0:
                logger.debug("Cluster %d empty, reseeded from pixel %d", j, index)
                cluster.centroid = Pixel.from_array(pixels[index], index=index)
                claimable[index] = 0.0
                changed += 1
    return changed

def _iterate(pixels: np.ndarray, clusters: List[Cluster], max_iter: int,
             empty_policy: str, chunk_size: int) -> KMeansResult:
    inertia = []
    for iteration in range(1, max_iter + 1):
        labels, nearest = assign(pixels, clusters, chunk_size)
        inertia.append(float(np.sum(nearest ** 2)))
        changed = update(pixels, clusters, nearest, empty_policy)
        logger.debug("Iteration %d: %d centroid(s) moved, inertia %.1f",
                     iteration, changed, inertia[-1])
        if not changed:
            logger.info("Converged after %d iteration(s)", iteration)
            return KMeansResult([c.centroid for c in clusters], labels, iteration, True, inertia)

    result = KMeansResult([c.centroid for c in clusters], labels, max_iter, False, inertia)
    raise DidNotConverge(f"no convergence after {max_iter} iteration(s)", result)

def kmeans(pixels, k: int, max_iter: int = DEFAULT_MAX_ITER,
           empty_policy: str = "reseed", chunk_size: int = CHUNK_SIZE) -> KMeansResult:
    """Cluster an (N, 3) RGB buffer into k colors.

    Centroids come back in seed order. If `max_iter` passes go by without
    every centroid settling, the last centroids are returned with
    `converged=False`.
    """
    if empty_policy not in EMPTY_POLICIES:
        raise ValueError(f"empty_policy must be one of {EMPTY_POLICIES}, got {empty_policy!r}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")

    pixels = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    clusters = seed_clusters(pixels, k)
    try:
        return _iterate(pixels, clusters, max_iter, empty_policy, chunk_size)
    except DidNotConverge as exc:
        logger.warning("%s, keeping best-effort palette", exc)
        return exc.result
