"""Tests for the uniform visitor invocation."""

import numpy as np

from colcluster import AffinityPropVisitor, KMeansVisitor, visit


class RecordingVisitor:
    """Visitor that logs the order of lifecycle calls."""

    def __init__(self):
        self.calls = []

    def pre(self):
        self.calls.append("pre")

    def compute(self, index, column):
        self.calls.append(("compute", len(index), len(column)))

    def post(self):
        self.calls.append("post")

    def get_result(self):
        return self.calls


class TestVisit:
    """Tests for visit()."""

    def test_call_order(self):
        result = visit(RecordingVisitor(), range(2), [1.0, 2.0, 3.0])
        assert result == ["pre", ("compute", 2, 3), "post"]

    def test_kmeans_visitor(self):
        column = [0, 0, 0, 10, 10, 10]
        centroids = visit(
            KMeansVisitor(2, 10, rng=np.random.default_rng(0)), column, column,
        )
        assert len(centroids) == 2

    def test_affinity_visitor(self):
        column = [3.0, 3.0, 3.0]
        assert visit(AffinityPropVisitor(10), column, column) == []
