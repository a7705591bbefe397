"""Shared utilities."""

from .constants import BASE83_ALPHABET, MIN_COMPONENTS, MAX_COMPONENTS
from .metrics import compute_psnr_ssim, Timer
from .test_images import (
    generate_solid,
    generate_gradient,
    generate_colored_checkerboard,
    generate_thin_stripes,
    SYNTHETIC_IMAGES,
)
from .image_io import clamp_size, load_image, save_image

__all__ = [
    'BASE83_ALPHABET',
    'MIN_COMPONENTS',
    'MAX_COMPONENTS',
    'compute_psnr_ssim',
    'Timer',
    'generate_solid',
    'generate_gradient',
    'generate_colored_checkerboard',
    'generate_thin_stripes',
    'SYNTHETIC_IMAGES',
    'clamp_size',
    'load_image',
    'save_image',
]
