import pytest

def ppm_text(width, height, pixels, comment="# test image", max_value=255):
    body = " ".join(f"{r} {g} {b}" for r, g, b in pixels)
    return f"P3\n{comment}\n{width} {height}\n{max_value}\n{body}\n"

@pytest.fixture
def write_ppm(tmp_path):
    """Write a P3 file into tmp_path and return its path."""
    def _write(name, width, height, pixels, **kwargs):
        path = tmp_path / name
        path.write_text(ppm_text(width, height, pixels, **kwargs))
        return path
    return _write

@pytest.fixture
def two_groups():
    # Gray levels chosen so every cluster mean is an integer
    return [(v, v, v) for v in (0, 2, 4, 6, 100, 102)]
