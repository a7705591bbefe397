"""Encoding parameters."""

from dataclasses import dataclass
from typing import Optional

from utils.constants import MIN_COMPONENTS, MAX_COMPONENTS
from .errors import InvalidComponentRange


@dataclass(frozen=True)
class EncodeParams:
    """BlurHash encode configuration."""

    x_components: int = 4
    y_components: int = 4
    sample_stride: int = 1
    max_workers: Optional[int] = None

    def __post_init__(self):
        for name in ('x_components', 'y_components'):
            value = getattr(self, name)
            if not (MIN_COMPONENTS <= value <= MAX_COMPONENTS):
                raise InvalidComponentRange(
                    f"{name} must be in [{MIN_COMPONENTS}, {MAX_COMPONENTS}], got {value}"
                )
        if self.sample_stride < 1:
            raise ValueError(f"sample_stride must be >= 1, got {self.sample_stride}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    @property
    def size_flag(self) -> int:
        return (self.x_components - 1) + (self.y_components - 1) * MAX_COMPONENTS
