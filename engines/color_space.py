"""sRGB <-> linear-light conversion."""

import numpy as np


def srgb_to_linear(value):
    """sRGB byte(s) 0-255 to linear float(s)."""
    v = np.asarray(value, dtype=np.float64) / 255.0
    linear = np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)
    if linear.ndim == 0:
        return float(linear)
    return linear


def linear_to_srgb(value):
    """Linear float(s) to sRGB byte(s), clamped to [0, 1] first."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        v <= 0.0031308,
        v * 12.92 * 255.0 + 0.5,
        (1.055 * v ** (1.0 / 2.4) - 0.055) * 255.0 + 0.5,
    )
    # Values are non-negative, so truncation matches floor.
    srgb = srgb.astype(np.int64)
    if srgb.ndim == 0:
        return int(srgb)
    return srgb


SRGB_TO_LINEAR_LUT = srgb_to_linear(np.arange(256))
SRGB_TO_LINEAR_LUT.setflags(write=False)


def image_to_linear(image: np.ndarray) -> np.ndarray:
    """HxWx3|4 uint8 image to a read-only HxWx3 float64 linear buffer."""
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected HxWx3 or HxWx4 image, got shape {image.shape}")
    if image.shape[0] < 1 or image.shape[1] < 1:
        raise ValueError(f"Image must be at least 1x1, got {image.shape[1]}x{image.shape[0]}")
    rgb = image[:, :, :3]
    if np.issubdtype(rgb.dtype, np.integer):
        if rgb.min() < 0 or rgb.max() > 255:
            raise ValueError("Pixel values must be in [0, 255]")
        linear = SRGB_TO_LINEAR_LUT[rgb.astype(np.intp)]
    else:
        linear = srgb_to_linear(np.clip(rgb, 0.0, 255.0))
    linear.setflags(write=False)
    return linear
