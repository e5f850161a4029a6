"""Synthetic one-dimensional columns with known grouping.

Generates blobs of values scattered around given centers, with ground
truth labels for evaluation.
"""

import numpy as np
from typing import Sequence, Tuple


def make_blobs(
    centers: Sequence[float],
    n_per_center: int = 10,
    spread: float = 0.1,
    seed: int = 42,
) -> Tuple[np.ndarray, np.ndarray]:
    """Generate a column of values drawn around each center.

    Args:
        centers: Blob centers.
        n_per_center: Number of values per blob.
        spread: Standard deviation of the Gaussian noise.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (values, labels), both of length
        ``len(centers) * n_per_center``, ordered blob by blob.
    """
    rng = np.random.default_rng(seed)

    values = np.concatenate([
        center + spread * rng.standard_normal(n_per_center)
        for center in centers
    ])
    labels = np.repeat(np.arange(len(centers)), n_per_center)

    return values, labels
