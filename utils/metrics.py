"""Metrics: timing and blur quality against the source image."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def compute_psnr_ssim(original_rgb: np.ndarray, reconstructed_rgb: np.ndarray) -> Dict[str, float]:
    """PSNR and SSIM of a decoded preview against its source, RGB only."""
    original = original_rgb[:, :, :3]
    reconstructed = reconstructed_rgb[:, :, :3]
    if original.shape != reconstructed.shape:
        raise ValueError(
            f"Shape mismatch: {original.shape} vs {reconstructed.shape}"
        )

    psnr = peak_signal_noise_ratio(original, reconstructed, data_range=255)
    # SSIM window must fit inside the image
    win_size = min(7, *original.shape[:2])
    if win_size % 2 == 0:
        win_size -= 1
    if win_size >= 3:
        ssim = structural_similarity(
            original, reconstructed, channel_axis=2, data_range=255, win_size=win_size
        )
    else:
        ssim = float('nan')

    return {
        'psnr_rgb': float(psnr),
        'ssim_rgb': float(ssim),
    }


class Timer:
    """Simple timer for encode/decode runtime."""

    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0

    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result

    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
