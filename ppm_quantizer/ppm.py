"""Read and write plain-text PPM (P3) images."""

import logging
from pathlib import Path
from typing import List, Tuple

import numpy as np

from .errors import BadMagic, EmptyImage, LoadError, TruncatedData

logger = logging.getLogger(__name__)

MAGIC = "P3"
MAX_VALUE = 255

def _tokens(text: str) -> List[str]:
    # '#' comments run to the end of the line
    tokens = []
    for line in text.splitlines():
        tokens.extend(line.split("#", 1)[0].split())
    return tokens

def parse_ppm(text: str) -> Tuple[int, int, int, np.ndarray]:
    """Parse P3 text into (width, height, max_value, pixels)."""
    tokens = _tokens(text)
    if not tokens or tokens[0] != MAGIC:
        found = tokens[0] if tokens else ""
        raise BadMagic(f"File is not of {MAGIC} magic number (found {found!r})")

    try:
        width, height, max_value = (int(t) for t in tokens[1:4])
    except ValueError as exc:
        raise TruncatedData("malformed header, expected width, height and max value") from exc
    if max_value <= 0:
        raise TruncatedData(f"max value must be positive, got {max_value}")
    width, height = max(width, 0), max(height, 0)

    count = width * height * 3
    samples = tokens[4:4 + count]
    if len(samples) < count:
        raise TruncatedData(f"Error reading pixel data: expected {count} samples, got {len(samples)}")
    try:
        data = np.array([int(t) for t in samples], dtype=np.float64)
    except ValueError as exc:
        raise TruncatedData(f"Error reading pixel data: {exc}") from exc
    if count == 0:
        raise EmptyImage("Empty pixel data set from input stream.")

    return width, height, max_value, data.reshape(-1, 3)

def read_ppm(path) -> Tuple[int, int, np.ndarray]:
    """Load a P3 file. Returns (width, height, pixels)."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise LoadError(f"Error reading file {path}: {exc}") from exc
    width, height, _, pixels = parse_ppm(text)
    logger.info("Loaded %s (%dx%d)", path, width, height)
    return width, height, pixels

def format_ppm(width: int, height: int, pixels: np.ndarray) -> str:
    """Render pixels as P3 text, one image row per line."""
    lines = [MAGIC, f"{width} {height}", str(MAX_VALUE)]
    rows = np.asarray(pixels).reshape(height, width * 3)
    for row in rows:
        lines.append(" ".join(str(int(v)) for v in row))
    return "\n".join(lines) + "\n"

def write_ppm(path, width: int, height: int, pixels: np.ndarray) -> None:
    # Rendered in full before the file is opened so a failure never leaves partial output
    text = format_ppm(width, height, pixels)
    Path(path).write_text(text, encoding="ascii")
