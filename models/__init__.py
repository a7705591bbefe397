"""Data models for codec parameters, coefficients and errors."""

from .errors import (
    BlurHashError,
    InvalidComponentRange,
    MalformedHash,
    InvalidSymbol,
    ThreadFailure,
    ImageIOError,
)
from .encode_params import EncodeParams
from .decode_params import DecodeParams
from .coefficient_grid import CoefficientGrid

__all__ = [
    'BlurHashError',
    'InvalidComponentRange',
    'MalformedHash',
    'InvalidSymbol',
    'ThreadFailure',
    'ImageIOError',
    'EncodeParams',
    'DecodeParams',
    'CoefficientGrid',
]
