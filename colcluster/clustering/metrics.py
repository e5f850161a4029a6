"""Clustering quality metrics for evaluation.

Provides metrics for:
- Overall distance (OD) - spread of points around their centers
- Silhouette score - cluster separation quality

Both take the same distance function the engines were built with.
"""

from typing import Any, List, Sequence

import numpy as np

from .distance import DistanceFunction, squared_difference
from .views import ClusterView


def labels_from_clusters(clusters: List[ClusterView], n_points: int) -> np.ndarray:
    """Label array from cluster views.

    Args:
        clusters: Views returned by ``get_clusters``.
        n_points: Number of clustered points.

    Returns:
        Cluster index per position; -1 for positions in no view.
    """
    labels = np.full(n_points, -1, dtype=int)
    for label, cluster in enumerate(clusters):
        for pos in cluster.positions:
            labels[pos] = label
    return labels


def overall_distance(
    column: Sequence,
    centers: Sequence[Any],
    labels: np.ndarray,
    distance: DistanceFunction = squared_difference,
) -> float:
    """Compute overall distance (OD) metric.

    OD = sqrt(mean(distance(x_i, c_{y_i})))

    With the default squared difference this is the root mean squared
    deviation. Lower is better.

    Args:
        column: Column of values.
        centers: Cluster centers.
        labels: Cluster assignments.
        distance: Distance function.

    Returns:
        Overall distance.
    """
    labels = np.asarray(labels)
    if len(labels) == 0:
        return 0.0

    total = 0.0
    for point, label in enumerate(labels):
        total += distance(column[point], centers[label])

    return float(np.sqrt(total / len(labels)))


def silhouette_score(
    column: Sequence,
    labels: np.ndarray,
    distance: DistanceFunction = squared_difference,
) -> float:
    """Compute silhouette score for clustering quality.

    Measures how similar points are to their own cluster vs other clusters.
    Range: [-1, 1], higher is better.

    Args:
        column: Column of values.
        labels: Cluster assignments.
        distance: Distance function.

    Returns:
        Mean silhouette coefficient.
    """
    labels = np.asarray(labels)
    n_samples = len(labels)
    unique_labels = np.unique(labels)

    if len(unique_labels) <= 1 or len(unique_labels) >= n_samples:
        return 0.0

    pairwise = np.zeros((n_samples, n_samples))
    for i in range(n_samples):
        for j in range(i + 1, n_samples):
            pairwise[i, j] = pairwise[j, i] = distance(column[i], column[j])

    silhouette_values = np.zeros(n_samples)

    for i in range(n_samples):
        same = labels == labels[i]
        same[i] = False

        # a(i) = mean distance to same cluster
        a_i = pairwise[i, same].mean() if np.any(same) else 0.0

        # b(i) = min mean distance to other clusters
        b_i = min(
            pairwise[i, labels == other].mean()
            for other in unique_labels
            if other != labels[i]
        )

        if max(a_i, b_i) > 0:
            silhouette_values[i] = (b_i - a_i) / max(a_i, b_i)

    return float(np.mean(silhouette_values))
