"""Centroid clustering (K-means) over a single column.

Lloyd's algorithm with centroids seeded from uniformly random column
positions. Seeding samples with replacement, so duplicate seeds are
possible and are not corrected. A cluster that receives no points is
not reseeded: its new value is the zero element divided by one.
"""

import logging
from typing import Any, List, Optional, Sequence, Sized, Tuple

import numpy as np

from .distance import (
    DistanceFunction,
    assign_to_centers,
    effective_size,
    squared_difference,
)
from .views import ClusterView, build_views
from ..config import KMeansConfig

logger = logging.getLogger(__name__)

CONVERGENCE_THRESHOLD = 1e-7


class KMeansVisitor:
    """K-means clustering engine with a fixed cluster count.

    The engine is computed once per ``compute`` call; centroids then stay
    available to any number of ``get_result`` / ``get_clusters`` queries.
    """

    def __init__(
        self,
        n_clusters: int,
        n_iterations: int,
        distance: DistanceFunction = squared_difference,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize the engine.

        Args:
            n_clusters: Number of clusters (K).
            n_iterations: Maximum refinement iterations.
            distance: Binary distance function over column elements.
            rng: Random source for centroid seeding. Anything exposing
                ``integers(low, high, size=...)`` works.
        """
        if n_clusters < 1:
            raise ValueError(f"n_clusters must be >= 1, got {n_clusters}")
        if n_iterations < 1:
            raise ValueError(f"n_iterations must be >= 1, got {n_iterations}")

        self.n_clusters = n_clusters
        self.n_iterations = n_iterations
        self.distance = distance
        self.rng = rng if rng is not None else np.random.default_rng()

        self._centroids: List[Any] = []
        self.n_iterations_ = 0
        self.converged_ = False

    @classmethod
    def from_config(
        cls,
        config: KMeansConfig,
        distance: DistanceFunction = squared_difference,
        rng: Optional[np.random.Generator] = None,
    ) -> "KMeansVisitor":
        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls(
            n_clusters=config.n_clusters,
            n_iterations=config.n_iterations,
            distance=distance,
            rng=rng,
        )

    def _initialize_centroids(self, column: Sequence, n_points: int) -> List[Any]:
        """Pick K independent uniformly random points as seeds."""
        positions = self.rng.integers(0, n_points, size=self.n_clusters)
        return [column[int(pos)] for pos in positions]

    def _update_centroids(
        self,
        column: Sequence,
        n_points: int,
        labels: np.ndarray,
    ) -> List[Any]:
        """Mean of the points assigned to each cluster.

        Args:
            column: Column of values.
            n_points: Number of points considered.
            labels: Cluster assignment per point.

        Returns:
            New centroid values, one per cluster.
        """
        sums: List[Any] = [None] * self.n_clusters
        counts = [0] * self.n_clusters

        for point in range(n_points):
            cluster = labels[point]
            value = column[point]
            sums[cluster] = value if sums[cluster] is None else sums[cluster] + value
            counts[cluster] += 1

        zero = column[0] - column[0]
        new_centroids = []
        for cluster in range(self.n_clusters):
            # 0/0 becomes 0/1
            count = max(1, counts[cluster])
            total = zero if sums[cluster] is None else sums[cluster]
            new_centroids.append(total / count)
        return new_centroids

    def pre(self) -> None:
        pass

    def post(self) -> None:
        pass

    def compute(self, index: Sized, column: Sequence) -> None:
        """Run Lloyd's algorithm over the first ``min(len(index), len(column))`` points.

        Args:
            index: Bounding index; only its length is used.
            column: Column of values supporting ``+``, ``-`` and ``/``.
        """
        n_points = effective_size(index, column)
        if n_points < self.n_clusters:
            raise ValueError(
                f"Need at least {self.n_clusters} samples, got {n_points}"
            )

        centroids = self._initialize_centroids(column, n_points)
        self.converged_ = False

        iteration = 0
        for iteration in range(self.n_iterations):
            labels = assign_to_centers(column, n_points, centroids, self.distance)
            new_centroids = self._update_centroids(column, n_points, labels)

            done = True
            for cluster in range(self.n_clusters):
                shift = self.distance(new_centroids[cluster], centroids[cluster])
                if shift > CONVERGENCE_THRESHOLD:
                    done = False
                    centroids[cluster] = new_centroids[cluster]

            if done:
                self.converged_ = True
                break

        self._centroids = centroids
        self.n_iterations_ = iteration + 1
        logger.debug(
            "k-means on %d points: %d iterations, converged=%s",
            n_points, self.n_iterations_, self.converged_,
        )

    def get_result(self) -> List[Any]:
        """Centroid values; exactly K entries once computed."""
        return list(self._centroids)

    def get_labels(self, index: Sized, column: Sequence) -> np.ndarray:
        """Nearest-centroid label for each point, recomputed from scratch."""
        n_points = effective_size(index, column)
        if not self._centroids:
            return np.zeros(0, dtype=int)
        return assign_to_centers(column, n_points, self._centroids, self.distance)

    def get_clusters(self, index: Sized, column: Sequence) -> List[ClusterView]:
        """Split the column into K views, each led by its centroid value.

        Args:
            index: Bounding index; only its length is used.
            column: The column passed to ``compute``.

        Returns:
            K cluster views (empty before the first ``compute``).
        """
        if not self._centroids:
            return []
        labels = self.get_labels(index, column)
        return build_views(column, labels, self.n_clusters, self._centroids)


def kmeans_fit(
    column: Sequence,
    k: int,
    n_iterations: int = 100,
    seed: Optional[int] = None,
) -> Tuple[List[Any], np.ndarray]:
    """Convenience function for k-means clustering.

    Args:
        column: Column of values.
        k: Number of clusters.
        n_iterations: Maximum iterations.
        seed: Random seed.

    Returns:
        Tuple of (centroids, labels).
    """
    kmeans = KMeansVisitor(
        n_clusters=k,
        n_iterations=n_iterations,
        rng=np.random.default_rng(seed),
    )
    kmeans.compute(column, column)
    return kmeans.get_result(), kmeans.get_labels(column, column)
