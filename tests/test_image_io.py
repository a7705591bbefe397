"""Tests for OpenCV image IO."""

import cv2
import numpy as np
import pytest
from models.errors import ImageIOError
from utils.image_io import clamp_size, load_image, save_image
from utils.test_images import generate_gradient


def test_save_and_load_roundtrip(tmp_path):
    image = generate_gradient(20, 10)
    path = tmp_path / "gradient.png"
    save_image(image, str(path))
    loaded = load_image(str(path))
    assert loaded.shape == (10, 20, 3)
    assert np.array_equal(loaded, image)


def test_load_keeps_channel_order(tmp_path):
    """Pure red on disk comes back as RGB red."""
    bgr = np.zeros((4, 4, 3), dtype=np.uint8)
    bgr[..., 2] = 255
    path = tmp_path / "red.png"
    cv2.imwrite(str(path), bgr)
    loaded = load_image(str(path))
    assert np.all(loaded[..., 0] == 255)
    assert np.all(loaded[..., 2] == 0)


def test_load_rgba(tmp_path):
    rgba = np.zeros((5, 6, 4), dtype=np.uint8)
    rgba[..., 3] = 128
    path = tmp_path / "rgba.png"
    save_image(rgba, str(path))
    loaded = load_image(str(path))
    assert loaded.shape == (5, 6, 4)
    assert np.all(loaded[..., 3] == 128)


def test_load_grayscale_becomes_rgb(tmp_path):
    path = tmp_path / "gray.png"
    cv2.imwrite(str(path), np.full((3, 3), 77, dtype=np.uint8))
    loaded = load_image(str(path))
    assert loaded.shape == (3, 3, 3)
    assert np.all(loaded == 77)


def test_load_missing_file(tmp_path):
    with pytest.raises(ImageIOError):
        load_image(str(tmp_path / "missing.png"))


def test_load_with_max_size(tmp_path):
    path = tmp_path / "big.png"
    save_image(generate_gradient(200, 100), str(path))
    loaded = load_image(str(path), max_size=50)
    assert loaded.shape[:2] == (25, 50)


@pytest.mark.parametrize("size, max_size, expected", [
    ((200, 100), 50, (50, 25)),
    ((100, 200), 50, (25, 50)),
    ((40, 30), 50, (40, 30)),
    ((1000, 1), 10, (10, 1)),
])
def test_clamp_size(size, max_size, expected):
    assert clamp_size(*size, max_size) == expected


def test_save_unwritable(tmp_path):
    with pytest.raises(ImageIOError):
        save_image(generate_gradient(4, 4), str(tmp_path / "no_such_dir" / "out.png"))
