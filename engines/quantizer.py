"""DC/AC quantization and packing."""

from typing import Tuple

import numpy as np

from utils.constants import AC_LEVELS, AC_MAX_SCALE, QUANTIZED_MAX_LIMIT
from .color_space import srgb_to_linear, linear_to_srgb


def sign_pow(value, exponent: float):
    """sign(value) * |value| ** exponent."""
    return np.copysign(np.abs(value) ** exponent, value)


def encode_dc(value: np.ndarray) -> int:
    """Linear RGB triple to a packed 24-bit sRGB integer."""
    r, g, b = (int(c) for c in linear_to_srgb(value))
    return (r << 16) | (g << 8) | b


def decode_dc(value: int) -> np.ndarray:
    """Packed 24-bit sRGB integer to a linear RGB triple."""
    rgb = np.array([(value >> 16) & 255, (value >> 8) & 255, value & 255])
    return srgb_to_linear(rgb)


def quantize_ac(value: np.ndarray, max_value: float) -> np.ndarray:
    """Map linear AC channels to integer levels 0-18."""
    scaled = np.floor(sign_pow(np.asarray(value, dtype=np.float64) / max_value, 0.5) * 9.0 + 9.5)
    return np.clip(scaled, 0, AC_LEVELS - 1).astype(np.int64)


def encode_ac(value: np.ndarray, max_value: float) -> int:
    """Linear AC triple to a single base-19 packed integer."""
    qr, qg, qb = (int(q) for q in quantize_ac(value, max_value))
    return qr * AC_LEVELS * AC_LEVELS + qg * AC_LEVELS + qb


def decode_ac(value: int, max_value: float, punch: float = 1.0) -> np.ndarray:
    """Packed base-19 integer to a linear AC triple."""
    digits = np.array([
        value // (AC_LEVELS * AC_LEVELS),
        (value // AC_LEVELS) % AC_LEVELS,
        value % AC_LEVELS,
    ], dtype=np.float64)
    return sign_pow((digits - 9.0) / 9.0, 2.0) * max_value * punch


def quantize_max(ac: np.ndarray) -> Tuple[int, float]:
    """Derive (quantized_max, max) shared by every AC term.

    With no AC terms the hash still carries a max digit; it is 0 and the
    effective max is 1.0.
    """
    if ac.size == 0:
        return 0, 1.0
    real_max = float(np.max(np.abs(ac)))
    quantized = int(np.clip(np.floor(real_max * AC_MAX_SCALE - 0.5), 0, QUANTIZED_MAX_LIMIT))
    return quantized, dequantize_max(quantized)


def dequantize_max(quantized: int) -> float:
    return (quantized + 1) / AC_MAX_SCALE
