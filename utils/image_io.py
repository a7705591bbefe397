"""Image I/O using OpenCV."""

from typing import Optional, Tuple

import cv2
import numpy as np

from models.errors import ImageIOError


def clamp_size(width: int, height: int, max_size: int) -> Tuple[int, int]:
    """Fit (width, height) inside max_size on the longest side, keeping aspect."""
    if width >= height and width > max_size:
        return max_size, max(1, int(height / width * max_size))
    if height > width and height > max_size:
        return max(1, int(width / height * max_size)), max_size
    return width, height


def load_image(path: str, max_size: Optional[int] = None) -> np.ndarray:
    """Load image as RGB(A) uint8, optionally downscaled to max_size."""
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ImageIOError(f"Could not load image from {path}")

    if img.dtype == np.uint16:
        img = (img.astype(np.float64) / 65535.0 * 255.0 + 0.5).astype(np.uint8)
    elif img.dtype != np.uint8:
        raise ImageIOError(f"Unsupported pixel type {img.dtype} in {path}")

    if img.ndim == 2:
        img = cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    elif img.shape[2] == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    else:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)

    if max_size is not None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        h, w = img.shape[:2]
        new_w, new_h = clamp_size(w, h, max_size)
        if (new_w, new_h) != (w, h):
            img = cv2.resize(img, (new_w, new_h), interpolation=cv2.INTER_AREA)
    return img


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB or RGBA image."""
    if image.ndim == 3 and image.shape[2] == 4:
        bgr = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
    else:
        bgr = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    try:
        ok = cv2.imwrite(str(path), bgr)
    except cv2.error as e:
        raise ImageIOError(f"Could not write image to {path}: {e}") from e
    if not ok:
        raise ImageIOError(f"Could not write image to {path}")
