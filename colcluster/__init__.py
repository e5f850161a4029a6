"""colcluster: k-means and affinity propagation over a single data column."""

from .config import AffinityPropConfig, ClusteringConfig, KMeansConfig
from .visitor import Visitor, visit
from .clustering import (
    AffinityPropVisitor,
    ClusterView,
    KMeansVisitor,
    squared_difference,
)

__version__ = "0.1.0"

__all__ = [
    "AffinityPropConfig",
    "ClusteringConfig",
    "KMeansConfig",
    "Visitor",
    "visit",
    "AffinityPropVisitor",
    "ClusterView",
    "KMeansVisitor",
    "squared_difference",
]
