"""Clustering module: k-means and affinity propagation over one column."""

from .distance import (
    DistanceFunction,
    squared_difference,
    effective_size,
    nearest_center,
)
from .views import ClusterView
from .kmeans import (
    KMeansVisitor,
    kmeans_fit,
)
from .affinity import (
    AffinityPropVisitor,
    affinity_propagation_fit,
    compute_similarity,
    expand_similarity,
    packed_index,
)
from .metrics import (
    labels_from_clusters,
    overall_distance,
    silhouette_score,
)

__all__ = [
    "DistanceFunction",
    "squared_difference",
    "effective_size",
    "nearest_center",
    "ClusterView",
    "KMeansVisitor",
    "kmeans_fit",
    "AffinityPropVisitor",
    "affinity_propagation_fit",
    "compute_similarity",
    "expand_similarity",
    "packed_index",
    "labels_from_clusters",
    "overall_distance",
    "silhouette_score",
]
