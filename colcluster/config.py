"""Configuration dataclasses for colcluster."""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional


@dataclass
class KMeansConfig:
    """Configuration for the centroid clustering engine.

    Attributes:
        n_clusters: Number of centroids (K).
        n_iterations: Maximum refinement iterations.
        seed: Seed for the centroid sampling generator; None draws fresh
            entropy.
    """
    n_clusters: int = 2
    n_iterations: int = 100
    seed: Optional[int] = None


@dataclass
class AffinityPropConfig:
    """Configuration for the exemplar clustering engine.

    Attributes:
        n_iterations: Number of message-passing rounds (always all run).
        damping_factor: Weight kept from the previous round, in [0, 1).
    """
    n_iterations: int = 200
    damping_factor: float = 0.9


@dataclass
class ClusteringConfig:
    """Master configuration combining both engines."""
    kmeans: KMeansConfig = field(default_factory=KMeansConfig)
    affinity: AffinityPropConfig = field(default_factory=AffinityPropConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to nested dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ClusteringConfig":
        """Create config from dictionary."""
        return cls(
            kmeans=KMeansConfig(**d.get("kmeans", {})),
            affinity=AffinityPropConfig(**d.get("affinity", {})),
        )
