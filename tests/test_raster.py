import numpy as np
import pytest
from PIL import Image as PILImage

from ppm_quantizer import load
from ppm_quantizer.errors import LoadError

@pytest.fixture
def png_path(tmp_path):
    arr = np.zeros((2, 3, 3), dtype=np.uint8)
    arr[0] = (250, 10, 10)
    arr[1] = (10, 10, 240)
    path = tmp_path / "stripes.png"
    PILImage.fromarray(arr).save(path)
    return path

def test_png_loads_through_pillow(png_path):
    img = load(png_path)
    assert (img.width, img.height) == (3, 2)
    assert img.get_pixel(0).as_tuple() == (250.0, 10.0, 10.0)
    assert img.get_pixel(5).as_tuple() == (10.0, 10.0, 240.0)

def test_png_export(png_path, tmp_path):
    img = load(png_path)
    img.cluster(1)
    out = img.export_reduced(tmp_path / "stripes_K1_OUTPUT.png")
    with PILImage.open(out) as result:
        assert result.size == (3, 2)
        colors = result.convert("RGB").getcolors()
    # mean of (250, 10, 10) x3 and (10, 10, 240) x3
    assert colors == [(6, (130, 10, 125))]

def test_unreadable_image(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(LoadError):
        load(path)
