"""BlurHash encode/decode pipelines."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import numpy as np

from models.coefficient_grid import CoefficientGrid
from models.decode_params import DecodeParams
from models.encode_params import EncodeParams
from models.errors import MalformedHash, ThreadFailure
from engines import base83
from engines.color_space import image_to_linear, linear_to_srgb
from engines.dct_engine import forward_row, inverse_transform
from engines.quantizer import (
    encode_dc, decode_dc, encode_ac, decode_ac, quantize_max, dequantize_max,
)
from utils.constants import (
    AC_LENGTH, DC_LENGTH, HEADER_LENGTH, MAX_COMPONENTS,
)
from utils.metrics import Timer

logger = logging.getLogger(__name__)


# === ENCODING ===

def compute_coefficients(image: np.ndarray, params: EncodeParams) -> CoefficientGrid:
    """Run the forward transform with one worker per coefficient row."""
    linear = image_to_linear(image)
    y_components = params.y_components
    rows = [None] * y_components
    workers = params.max_workers or y_components

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='blurhash-row') as pool:
        futures = [
            pool.submit(forward_row, linear, cy, params.x_components, params.sample_stride)
            for cy in range(y_components)
        ]
        for cy, future in enumerate(futures):
            try:
                rows[cy] = future.result()
            except Exception as e:
                for pending in futures:
                    pending.cancel()
                raise ThreadFailure(f"Transform worker for row {cy} failed: {e}") from e

    factors = np.stack(rows)
    quantized_max, max_value = quantize_max(factors.reshape(-1, 3)[1:])
    return CoefficientGrid(factors=factors, quantized_max=quantized_max, max_value=max_value)


def assemble_hash(grid: CoefficientGrid, size_flag: int) -> str:
    """Size flag, max, DC and AC terms as one base-83 string."""
    parts = [
        base83.encode(size_flag, 1),
        base83.encode(grid.quantized_max, 1),
        base83.encode(encode_dc(grid.dc), DC_LENGTH),
    ]
    for value in grid.ac:
        parts.append(base83.encode(encode_ac(value, grid.max_value), AC_LENGTH))
    return ''.join(parts)


def encode_image(image: np.ndarray, params: Optional[EncodeParams] = None) -> str:
    """Encode an HxWx3|4 uint8 image to a BlurHash string."""
    params = params or EncodeParams()
    timer = Timer()

    grid = timer.measure_encode(compute_coefficients, image, params)
    blurhash = assemble_hash(grid, params.size_flag)

    logger.debug(
        "Encoded %dx%d image with %dx%d components (stride %d) in %.2f ms",
        image.shape[1], image.shape[0], params.x_components, params.y_components,
        params.sample_stride, timer.encode_time_ms,
    )
    return blurhash


# === DECODING ===

def expected_length(x_components: int, y_components: int) -> int:
    return HEADER_LENGTH + AC_LENGTH * (x_components * y_components - 1)


def components(blurhash: str) -> Tuple[int, int]:
    """(x_components, y_components) of a hash, after validating its length."""
    if len(blurhash) < HEADER_LENGTH:
        raise MalformedHash(
            f"BlurHash must be at least {HEADER_LENGTH} characters, got {len(blurhash)}"
        )
    if not base83.is_valid(blurhash):
        # Raises InvalidSymbol naming the first bad character
        base83.decode(blurhash)

    size_flag = base83.decode(blurhash[0])
    x_components = size_flag % MAX_COMPONENTS + 1
    y_components = size_flag // MAX_COMPONENTS + 1

    length = expected_length(x_components, y_components)
    if len(blurhash) != length:
        raise MalformedHash(
            f"BlurHash of {x_components}x{y_components} components must be "
            f"{length} characters, got {len(blurhash)}"
        )
    return x_components, y_components


def parse_hash(blurhash: str, punch: float = 1.0) -> CoefficientGrid:
    """Recover the coefficient grid from a hash string."""
    x_components, y_components = components(blurhash)

    quantized_max = base83.decode(blurhash[1])
    max_value = dequantize_max(quantized_max)

    factors = np.empty((y_components * x_components, 3), dtype=np.float64)
    factors[0] = decode_dc(base83.decode(blurhash[2:HEADER_LENGTH]))
    for i in range(1, len(factors)):
        start = HEADER_LENGTH + (i - 1) * AC_LENGTH
        value = base83.decode(blurhash[start:start + AC_LENGTH])
        factors[i] = decode_ac(value, max_value, punch)

    return CoefficientGrid(
        factors=factors.reshape(y_components, x_components, 3),
        quantized_max=quantized_max,
        max_value=max_value,
    )


def decode_hash(blurhash: str, params: Optional[DecodeParams] = None) -> np.ndarray:
    """Decode a BlurHash string to an (height, width, 3|4) uint8 image."""
    params = params or DecodeParams()
    timer = Timer()

    grid = parse_hash(blurhash, params.punch)
    linear = timer.measure_decode(inverse_transform, grid.factors, params.width, params.height)
    rgb = linear_to_srgb(linear).astype(np.uint8)

    if params.mode == 'RGBA':
        alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=np.uint8)
        rgb = np.concatenate([rgb, alpha], axis=2)

    logger.debug(
        "Decoded %dx%d components to %dx%d %s in %.2f ms",
        grid.x_components, grid.y_components, params.width, params.height,
        params.mode, timer.decode_time_ms,
    )
    return rgb
