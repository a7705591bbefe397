"""Synthetic images for codec tests and demos."""

import numpy as np


def generate_solid(width: int = 4, height: int = 4, color=(200, 100, 50)) -> np.ndarray:
    """Uniform colour - only the DC term is non-zero."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = color
    return img


def generate_gradient(width: int = 64, height: int = 48) -> np.ndarray:
    """Horizontal red ramp over a vertical blue ramp."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :, 0] = np.linspace(0, 255, width).astype(np.uint8)[None, :]
    img[:, :, 1] = 96
    img[:, :, 2] = np.linspace(255, 0, height).astype(np.uint8)[:, None]
    return img


def generate_colored_checkerboard(size: int = 64, block_size: int = 16) -> np.ndarray:
    """High-contrast checkerboard - lots of AC energy."""
    idx = np.arange(size) // block_size
    mask = (idx[:, None] + idx[None, :]) % 2 == 0
    img = np.empty((size, size, 3), dtype=np.uint8)
    img[mask] = [30, 30, 30]
    img[~mask] = [220, 220, 220]
    return img


def generate_thin_stripes(size: int = 64, stripe_width: int = 4) -> np.ndarray:
    """Fine vertical stripes - energy above what few components can carry."""
    img = np.zeros((size, size, 3), dtype=np.uint8)
    cols = (np.arange(size) // stripe_width) % 2 == 0
    img[:, cols] = [200, 60, 60]
    img[:, ~cols] = [60, 180, 200]
    return img


SYNTHETIC_IMAGES = {
    'solid': generate_solid,
    'gradient': generate_gradient,
    'checkerboard': generate_colored_checkerboard,
    'stripes': generate_thin_stripes,
}
