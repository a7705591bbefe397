"""BlurHash codec engines - pure computation, no file IO."""

import logging

from .color_space import srgb_to_linear, linear_to_srgb, image_to_linear, SRGB_TO_LINEAR_LUT
from . import base83
from .dct_engine import cosine_basis, forward_row, forward_transform, inverse_transform
from .quantizer import (
    sign_pow,
    encode_dc,
    decode_dc,
    encode_ac,
    decode_ac,
    quantize_max,
    dequantize_max,
)
from .pipeline import (
    compute_coefficients,
    assemble_hash,
    encode_image,
    components,
    parse_hash,
    decode_hash,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'image_to_linear',
    'SRGB_TO_LINEAR_LUT',
    'base83',
    'cosine_basis',
    'forward_row',
    'forward_transform',
    'inverse_transform',
    'sign_pow',
    'encode_dc',
    'decode_dc',
    'encode_ac',
    'decode_ac',
    'quantize_max',
    'dequantize_max',
    'compute_coefficients',
    'assemble_hash',
    'encode_image',
    'components',
    'parse_hash',
    'decode_hash',
]
