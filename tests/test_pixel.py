import math

import numpy as np

from ppm_quantizer.pixel import TOLERANCE, Pixel, approx_equal, distance, pairwise_distances

def test_distance_is_euclidean():
    assert distance(Pixel(0, 0, 0), Pixel(3, 4, 0)) == 5.0
    assert distance(Pixel(1, 2, 3), Pixel(1, 2, 3)) == 0.0

def test_distance_accepts_fractional_channels():
    assert math.isclose(distance(Pixel(0.5, 0, 0), Pixel(0, 0, 0)), 0.5)
    assert math.isclose(Pixel(10, 10, 10).distance(Pixel(11.5, 10, 10)), 1.5)

def test_distance_is_symmetric():
    a, b = Pixel(12, 200, 7), Pixel(90, 3, 45)
    assert distance(a, b) == distance(b, a)

def test_approx_equal_within_tolerance():
    assert TOLERANCE == 1
    assert approx_equal(Pixel(10, 10, 10), Pixel(11, 9, 10))
    assert Pixel(10, 10, 10).approx_equal(Pixel(10, 10, 10))

def test_approx_equal_is_per_channel():
    # Euclidean distance here is about 1.73, but each channel is within tolerance
    assert approx_equal(Pixel(0, 0, 0), Pixel(1, 1, 1))
    # Euclidean distance 2 with one channel off by 2
    assert not approx_equal(Pixel(0, 0, 0), Pixel(2, 0, 0))

def test_pixel_array_round_trip():
    p = Pixel.from_array(np.array([1.0, 2.0, 3.0]), index=7)
    assert p == Pixel(1.0, 2.0, 3.0, 7)
    assert p.to_array().tolist() == [1.0, 2.0, 3.0]

def test_pairwise_distances_shape():
    pixels = np.array([[0, 0, 0], [3, 4, 0]], dtype=float)
    centroids = np.array([[0, 0, 0], [3, 4, 0], [6, 8, 0]], dtype=float)
    d = pairwise_distances(pixels, centroids)
    assert d.shape == (2, 3)
    assert d[1].tolist() == [5.0, 0.0, 5.0]
