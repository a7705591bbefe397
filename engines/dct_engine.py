"""Cosine-basis forward/inverse transform over linear RGB."""

import numpy as np


def cosine_basis(components: int, length: int, positions: np.ndarray) -> np.ndarray:
    """(components, len(positions)) matrix of cos(pi * k * p / length)."""
    k = np.arange(components, dtype=np.float64)[:, None]
    p = np.asarray(positions, dtype=np.float64)[None, :]
    return np.cos(np.pi * k * p / length)


def sample_positions(length: int, stride: int) -> np.ndarray:
    """Pixel indices visited with the given sampling stride."""
    return np.arange(0, length, stride)


def forward_row(
    linear: np.ndarray,
    cy: int,
    x_components: int,
    sample_stride: int = 1,
) -> np.ndarray:
    """Coefficients (x_components, 3) for one cy row.

    `linear` is an HxWx3 float64 buffer and is only read. Cosines use the
    full image size while the scale uses the number of sampled pixels.
    """
    height, width = linear.shape[:2]
    xs = sample_positions(width, sample_stride)
    ys = sample_positions(height, sample_stride)
    samples = linear[ys[:, None], xs[None, :]]

    basis_x = cosine_basis(x_components, width, xs)
    basis_y = np.cos(np.pi * cy * ys.astype(np.float64) / height)
    scale = 1.0 / (len(xs) * len(ys))

    # Collapse y first, then project each cx
    column_sums = np.einsum('j,jic->ic', basis_y, samples)
    row = basis_x @ column_sums * scale

    normalisation = np.full((x_components, 1), 2.0)
    if cy == 0:
        normalisation[0] = 1.0
    return row * normalisation


def forward_transform(
    linear: np.ndarray,
    x_components: int,
    y_components: int,
    sample_stride: int = 1,
) -> np.ndarray:
    """Full (y_components, x_components, 3) coefficient grid, serially."""
    return np.stack([
        forward_row(linear, cy, x_components, sample_stride)
        for cy in range(y_components)
    ])


def inverse_transform(coefficients: np.ndarray, width: int, height: int) -> np.ndarray:
    """Linear (height, width, 3) image synthesised from a coefficient grid."""
    y_components, x_components = coefficients.shape[:2]
    basis_x = cosine_basis(x_components, width, np.arange(width))
    basis_y = cosine_basis(y_components, height, np.arange(height))
    return np.einsum('yj,xi,yxc->jic', basis_y, basis_x, coefficients)
