"""Clusters and centroid computation."""

import numpy as np

from .errors import EmptyCluster
from .pixel import Pixel

def compute_centroid(members) -> Pixel:
    """Mean color of `members`, each channel truncated toward zero.

    `members` is an (M, 3) array or a sequence of Pixels.
    """
    if len(members) and isinstance(members[0], Pixel):
        members = np.array([p.as_tuple() for p in members], dtype=np.float64)
    else:
        members = np.asarray(members, dtype=np.float64).reshape(-1, 3)
    if len(members) == 0:
        raise EmptyCluster("empty pixel set on centroid computation")
    return Pixel.from_array(np.trunc(members.mean(axis=0)))

class Cluster:
    """A centroid plus the buffer indices assigned to it during the current pass."""

    def __init__(self, centroid: Pixel):
        self.centroid = centroid
        self.members = np.empty(0, dtype=np.intp)

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.centroid.as_tuple()}, members={len(self.members)})"

    def assign(self, indices: np.ndarray) -> None:
        """Replace the members; called at the start of every assignment pass."""
        self.members = np.asarray(indices, dtype=np.intp)

    def update(self, pixels: np.ndarray) -> Pixel:
        """Recompute the centroid from the members' rows in `pixels`; returns the previous one."""
        previous = self.centroid
        self.centroid = compute_centroid(pixels[self.members])
        return previous
