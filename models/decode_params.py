"""Decoding parameters."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class DecodeParams:
    """Output canvas for BlurHash decoding."""

    width: int = 32
    height: int = 32
    punch: float = 1.0
    mode: Literal['RGB', 'RGBA'] = 'RGB'

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Output size must be at least 1x1, got {self.width}x{self.height}")
        if self.punch <= 0:
            raise ValueError(f"punch must be > 0, got {self.punch}")
        if self.mode not in ('RGB', 'RGBA'):
            raise ValueError(f"mode must be 'RGB' or 'RGBA', got {self.mode!r}")
