"""Tests for index-based cluster views."""

import numpy as np
import pytest

from colcluster.clustering.views import ClusterView, build_views


class TestClusterView:
    """Tests for ClusterView access."""

    def test_center_is_first_entry(self):
        column = [10.0, 20.0, 30.0]
        view = ClusterView(column, [2, 0], center=15.0)

        assert len(view) == 3
        assert view[0] == 15.0
        assert list(view) == [15.0, 30.0, 10.0]
        assert list(view.values()) == [30.0, 10.0]
        assert view.has_center

    def test_without_center(self):
        column = [10.0, 20.0, 30.0]
        view = ClusterView(column, [1])

        assert len(view) == 1
        assert view[0] == 20.0
        assert view.center is None
        assert not view.has_center

    def test_reads_through_to_column(self):
        """Views hold positions, so they see later column contents"""
        column = np.array([1.0, 2.0, 3.0])
        view = ClusterView(column, [0, 2])
        column[2] = 99.0

        assert list(view.values()) == [1.0, 99.0]

    def test_negative_index_and_slice(self):
        view = ClusterView([1, 2, 3], [0, 1, 2], center=0)
        assert view[-1] == 3
        assert view[1:3] == [1, 2]

    def test_out_of_range(self):
        view = ClusterView([1, 2], [0])
        with pytest.raises(IndexError):
            view[1]


class TestBuildViews:
    """Tests for grouping labels into views."""

    def test_groups_in_label_order(self):
        column = [0.0, 1.0, 2.0, 3.0]
        views = build_views(column, np.array([1, 0, 1, 0]), 3, [5.0, 6.0, 7.0])

        assert [v.positions for v in views] == [(1, 3), (0, 2), ()]
        assert [v.center for v in views] == [5.0, 6.0, 7.0]
        # empty group still carries its center
        assert len(views[2]) == 1
