"""Index-based views of clusters over a caller-owned column.

A view stores column positions, never copies of the points. The column
must outlive every view built from it.
"""

from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np


_NO_CENTER = object()


class ClusterView(Sequence):
    """Read-only grouping of column positions.

    When built with a ``center`` (K-means), entry 0 is that synthetic
    center value and the column points follow. Exemplar clusters carry no
    synthetic entry.
    """

    __slots__ = ("_column", "_positions", "_center")

    def __init__(
        self,
        column: Sequence,
        positions: Iterable[int],
        center: Any = _NO_CENTER,
    ):
        self._column = column
        self._positions: Tuple[int, ...] = tuple(int(p) for p in positions)
        self._center = center

    @property
    def positions(self) -> Tuple[int, ...]:
        """Column positions of the member points, in column order."""
        return self._positions

    @property
    def has_center(self) -> bool:
        return self._center is not _NO_CENTER

    @property
    def center(self) -> Any:
        """Synthetic leading value, or None for exemplar clusters."""
        return self._center if self.has_center else None

    def values(self) -> Iterator[Any]:
        """Iterate member point values, excluding the synthetic center."""
        for pos in self._positions:
            yield self._column[pos]

    def __len__(self) -> int:
        return len(self._positions) + (1 if self.has_center else 0)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return [self[i] for i in range(*item.indices(len(self)))]
        if item < 0:
            item += len(self)
        if not 0 <= item < len(self):
            raise IndexError("cluster view index out of range")
        if self.has_center:
            if item == 0:
                return self._center
            item -= 1
        return self._column[self._positions[item]]

    def __repr__(self) -> str:
        if self.has_center:
            return f"ClusterView(center={self._center!r}, positions={list(self._positions)})"
        return f"ClusterView(positions={list(self._positions)})"


def build_views(
    column: Sequence,
    labels: np.ndarray,
    n_groups: int,
    centers: Optional[Sequence[Any]] = None,
) -> List[ClusterView]:
    """Group positions by label into ``n_groups`` views.

    Args:
        column: Column the labels refer to.
        labels: Group label per position.
        n_groups: Number of groups (empty groups are kept).
        centers: Optional per-group synthetic leading values.

    Returns:
        One view per group, in label order.
    """
    members: List[List[int]] = [[] for _ in range(n_groups)]
    for pos, label in enumerate(labels):
        members[label].append(pos)

    if centers is None:
        return [ClusterView(column, group) for group in members]
    return [
        ClusterView(column, group, center)
        for group, center in zip(members, centers)
    ]
