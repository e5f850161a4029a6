"""Exemplar clustering (affinity propagation) over a single column.

Pairwise similarities are the negated distances, kept in packed upper
triangular form. Every self-similarity is set to the smallest
off-diagonal similarity, which keeps the number of exemplars low.
Message passing runs for a fixed number of damped rounds with no early
stop; the number of clusters is whatever the final messages elect.
"""

import logging
from typing import Any, List, Sequence, Sized, Tuple

import numpy as np

from .distance import (
    DistanceFunction,
    assign_to_centers,
    effective_size,
    squared_difference,
)
from .views import ClusterView, build_views
from ..config import AffinityPropConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Packed triangular similarity storage
# ---------------------------------------------------------------------------

def packed_size(n: int) -> int:
    """Number of stored entries for an n x n symmetric matrix."""
    return (n * (n + 1)) // 2


def packed_index(i: int, j: int, n: int) -> int:
    """Offset of entry (i, j) in row-major packed upper triangular storage.

    The matrix is symmetric, so (i, j) and (j, i) share one slot.
    """
    if i > j:
        i, j = j, i
    return i * n + j - ((i * (i + 1)) >> 1)


def compute_similarity(
    column: Sequence,
    n_points: int,
    distance: DistanceFunction = squared_difference,
) -> np.ndarray:
    """Packed similarity matrix of the first ``n_points`` column values.

    Args:
        column: Column of values.
        n_points: Number of points considered.
        distance: Distance function; similarity is its negation.

    Returns:
        Array of ``packed_size(n_points)`` similarities. Diagonal entries
        hold the minimum off-diagonal similarity (0.0 when there is no
        pair at all).
    """
    simil = np.zeros(packed_size(n_points))
    min_val = np.inf

    for i in range(n_points - 1):
        for j in range(i + 1, n_points):
            val = -distance(column[i], column[j])
            simil[packed_index(i, j, n_points)] = val
            if val < min_val:
                min_val = val

    if n_points < 2:
        min_val = 0.0
    for i in range(n_points):
        simil[packed_index(i, i, n_points)] = min_val

    return simil


def expand_similarity(packed: np.ndarray, n: int) -> np.ndarray:
    """Dense symmetric n x n matrix from packed storage."""
    rows, cols = np.triu_indices(n)
    dense = np.empty((n, n))
    dense[rows, cols] = packed
    dense[cols, rows] = packed
    return dense


# ---------------------------------------------------------------------------
# Message passing
# ---------------------------------------------------------------------------

def _update_responsibility(
    similarity: np.ndarray,
    availability: np.ndarray,
    responsibility: np.ndarray,
    damping: float,
) -> np.ndarray:
    """r(i,k) = s(i,k) - max_{k' != k} [a(i,k') + s(i,k')], damped.

    Rows are points, columns are candidate exemplars. Needs n >= 2.
    """
    n = similarity.shape[0]
    rows = np.arange(n)

    combined = availability + similarity
    best = np.argmax(combined, axis=1)
    first = combined[rows, best]
    combined[rows, best] = -np.inf
    second = np.max(combined, axis=1)

    # Every column competes with the row maximum except the maximum itself,
    # which competes with the runner-up.
    competing = np.repeat(first[:, np.newaxis], n, axis=1)
    competing[rows, best] = second

    return (1.0 - damping) * (similarity - competing) + damping * responsibility


def _update_availability(
    responsibility: np.ndarray,
    availability: np.ndarray,
    damping: float,
) -> np.ndarray:
    """Damped availability from the just-updated responsibilities.

    a(k,k) = sum_{i' != k} max(0, r(i',k))
    a(i,k) = min(0, r(k,k) + sum_{i' not in {i,k}} max(0, r(i',k)))
    """
    n = responsibility.shape[0]
    diag = np.arange(n)

    positive = np.maximum(responsibility, 0.0)
    positive[diag, diag] = responsibility[diag, diag]

    new_avail = positive.sum(axis=0)[np.newaxis, :] - positive
    self_avail = new_avail[diag, diag].copy()
    new_avail = np.minimum(new_avail, 0.0)
    new_avail[diag, diag] = self_avail

    return (1.0 - damping) * new_avail + damping * availability


def pass_messages(
    similarity: np.ndarray,
    n_iterations: int,
    damping: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Run exactly ``n_iterations`` synchronous message-passing rounds.

    Args:
        similarity: Dense n x n similarity matrix (n >= 2).
        n_iterations: Number of rounds.
        damping: Weight kept from the previous round.

    Returns:
        Tuple of (responsibility, availability) matrices.
    """
    n = similarity.shape[0]
    responsibility = np.zeros((n, n))
    availability = np.zeros((n, n))

    for _ in range(n_iterations):
        responsibility = _update_responsibility(
            similarity, availability, responsibility, damping,
        )
        availability = _update_availability(responsibility, availability, damping)

    return responsibility, availability


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class AffinityPropVisitor:
    """Affinity propagation engine; the cluster count emerges from the data.

    ``get_result`` returns the exemplar column positions. The matrices
    used during ``compute`` are discarded once exemplars are selected.
    """

    def __init__(
        self,
        n_iterations: int,
        distance: DistanceFunction = squared_difference,
        damping_factor: float = 0.9,
    ):
        """Initialize the engine.

        Args:
            n_iterations: Number of message-passing rounds.
            distance: Binary distance function; assumed symmetric.
            damping_factor: Blend weight of the previous round, in [0, 1).
        """
        if n_iterations < 1:
            raise ValueError(f"n_iterations must be >= 1, got {n_iterations}")
        if not 0.0 <= damping_factor < 1.0:
            raise ValueError(
                f"damping_factor must be in [0, 1), got {damping_factor}"
            )

        self.n_iterations = n_iterations
        self.distance = distance
        self.damping_factor = damping_factor

        self._exemplars: List[int] = []

    @classmethod
    def from_config(
        cls,
        config: AffinityPropConfig,
        distance: DistanceFunction = squared_difference,
    ) -> "AffinityPropVisitor":
        return cls(
            n_iterations=config.n_iterations,
            distance=distance,
            damping_factor=config.damping_factor,
        )

    def pre(self) -> None:
        pass

    def post(self) -> None:
        pass

    def compute(self, index: Sized, column: Sequence) -> None:
        """Elect exemplars among the first ``min(len(index), len(column))`` points.

        Args:
            index: Bounding index; only its length is used.
            column: Column of values.
        """
        n_points = effective_size(index, column)

        if n_points < 2:
            # No pair to compare: a lone point is its own exemplar.
            self._exemplars = list(range(n_points))
            return

        packed = compute_similarity(column, n_points, self.distance)
        similarity = expand_similarity(packed, n_points)
        responsibility, availability = pass_messages(
            similarity, self.n_iterations, self.damping_factor,
        )

        evidence = np.diag(responsibility) + np.diag(availability)
        self._exemplars = [int(i) for i in np.flatnonzero(evidence > 0.0)]
        logger.debug(
            "affinity propagation on %d points: %d exemplars after %d rounds",
            n_points, len(self._exemplars), self.n_iterations,
        )

    def get_result(self) -> List[int]:
        """Column positions of the elected exemplars (possibly empty)."""
        return list(self._exemplars)

    def get_exemplars(self, column: Sequence) -> List[Any]:
        """Exemplar values read from ``column``."""
        return [column[pos] for pos in self._exemplars]

    def get_labels(self, index: Sized, column: Sequence) -> np.ndarray:
        """Nearest-exemplar label per point; empty when there are no exemplars."""
        if not self._exemplars:
            return np.zeros(0, dtype=int)
        n_points = effective_size(index, column)
        return assign_to_centers(
            column, n_points, self.get_exemplars(column), self.distance,
        )

    def get_clusters(self, index: Sized, column: Sequence) -> List[ClusterView]:
        """Group every point with its nearest exemplar.

        Returns an empty list when no exemplar was elected.
        """
        if not self._exemplars:
            return []
        labels = self.get_labels(index, column)
        return build_views(column, labels, len(self._exemplars))


def affinity_propagation_fit(
    column: Sequence,
    n_iterations: int = 200,
    damping_factor: float = 0.9,
    distance: DistanceFunction = squared_difference,
) -> Tuple[List[int], np.ndarray]:
    """Convenience function for affinity propagation.

    Args:
        column: Column of values.
        n_iterations: Number of message-passing rounds.
        damping_factor: Damping factor.
        distance: Distance function.

    Returns:
        Tuple of (exemplar positions, labels).
    """
    engine = AffinityPropVisitor(
        n_iterations=n_iterations,
        distance=distance,
        damping_factor=damping_factor,
    )
    engine.compute(column, column)
    return engine.get_result(), engine.get_labels(column, column)
