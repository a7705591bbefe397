"""Coefficient grid shared by the encode and decode paths."""

from dataclasses import dataclass

import numpy as np


@dataclass
class CoefficientGrid:
    """Linear-RGB cosine coefficients, shape (y_components, x_components, 3).

    `quantized_max` is the single max digit carried by the hash; `max_value`
    is the AC scale it stands for.
    """

    factors: np.ndarray
    quantized_max: int = 0
    max_value: float = 1.0

    @property
    def x_components(self) -> int:
        return self.factors.shape[1]

    @property
    def y_components(self) -> int:
        return self.factors.shape[0]

    @property
    def dc(self) -> np.ndarray:
        return self.factors[0, 0]

    @property
    def ac(self) -> np.ndarray:
        """AC terms in row-major grid order, shape (x*y - 1, 3)."""
        return self.factors.reshape(-1, 3)[1:]
