"""Run configuration."""

from dataclasses import dataclass
from pathlib import Path

from .kmeans import DEFAULT_MAX_ITER, EMPTY_POLICIES

@dataclass
class RunConfig:
    """Where to read the image, how many colors to keep, where to write the result."""
    basename: str
    k: int = 2
    directory: str = "."
    extension: str = "ppm"
    output_dir: str = "."
    max_iter: int = DEFAULT_MAX_ITER
    empty_policy: str = "reseed"

    def __post_init__(self):
        self.extension = self.extension.lstrip(".")
        if not self.basename:
            raise ValueError("basename must not be empty")
        if not self.extension:
            raise ValueError("extension must not be empty")
        if self.k < 1:
            raise ValueError(f"k must be >= 1, got {self.k}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.empty_policy not in EMPTY_POLICIES:
            raise ValueError(f"empty_policy must be one of {EMPTY_POLICIES}, got {self.empty_policy!r}")

    @property
    def input_path(self) -> Path:
        return Path(self.directory) / f"{self.basename}.{self.extension}"

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / f"{self.basename}_K{self.k}_OUTPUT.{self.extension}"
