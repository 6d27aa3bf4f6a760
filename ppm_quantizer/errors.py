"""Exceptions raised by ppm_quantizer."""

class QuantizerError(Exception):
    """Base class for every error raised by this package."""

class LoadError(QuantizerError):
    """Image could not be read."""

class BadMagic(LoadError):
    """File does not start with the expected magic identifier."""

class TruncatedData(LoadError):
    """Header or pixel stream ended early or held a non-integer token."""

class EmptyImage(LoadError):
    """Image decoded to zero pixels."""

class ClusterError(QuantizerError):
    """Clustering could not run."""

class EmptyCluster(ClusterError):
    """Centroid requested for a cluster with no members."""

class DidNotConverge(ClusterError):
    """Iteration cap reached before every centroid settled."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result

class ExportError(QuantizerError):
    """Reduced image could not be written."""

class PixelIndexError(QuantizerError, IndexError):
    """Pixel index outside the buffer."""
