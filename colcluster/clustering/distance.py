"""Distance functions and addressing helpers shared by both engines.

A distance function is any binary callable ``(x, y) -> float`` over two
column elements. It is expected to be non-negative; symmetry is assumed
by affinity propagation but never checked.
"""

from typing import Any, Callable, Sequence, Sized

import numpy as np


DistanceFunction = Callable[[Any, Any], float]


def squared_difference(x: Any, y: Any) -> float:
    """Default metric: ``(x - y) * (x - y)``.

    Vector-valued elements (numpy arrays) are reduced with a sum so the
    result is always a scalar.
    """
    diff = x - y
    value = diff * diff
    if isinstance(value, np.ndarray):
        return float(value.sum())
    return float(value)


def effective_size(index: Sized, column: Sized) -> int:
    """Number of points processed: ``min(len(index), len(column))``."""
    return min(len(index), len(column))


def nearest_center(
    value: Any,
    centers: Sequence[Any],
    distance: DistanceFunction,
) -> int:
    """Position of the center closest to ``value``.

    Only a strictly smaller distance replaces the current best, so ties
    resolve to the lowest center index.

    Args:
        value: Column element.
        centers: Non-empty sequence of center values.
        distance: Distance function.

    Returns:
        Index into ``centers``.
    """
    best_idx = 0
    best_dist = np.inf
    for idx, center in enumerate(centers):
        dist = distance(value, center)
        if dist < best_dist:
            best_dist = dist
            best_idx = idx
    return best_idx


def assign_to_centers(
    column: Sequence[Any],
    n_points: int,
    centers: Sequence[Any],
    distance: DistanceFunction,
) -> np.ndarray:
    """Nearest-center label for each of the first ``n_points`` elements."""
    labels = np.zeros(n_points, dtype=int)
    for point in range(n_points):
        labels[point] = nearest_center(column[point], centers, distance)
    return labels
