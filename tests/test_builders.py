"""Tests for ready-made trees and measurements (core/builders.py)."""

from __future__ import annotations

import pytest

from expr_tree.core.builders import count_nodes, left_chain, sample_tree, tree_depth
from expr_tree.core.models import Add, Number


class TestSampleTree:
    def test_shape(self) -> None:
        expected = Add(
            Add(Add(Number(1), Number(2)), Add(Number(3), Number(4))),
            Number(5),
        )
        assert sample_tree() == expected

    def test_measurements(self) -> None:
        tree = sample_tree()
        assert count_nodes(tree) == 9
        assert tree_depth(tree) == 3


class TestLeftChain:
    def test_depth_zero_is_leaf(self) -> None:
        assert left_chain(0) == Number(1)

    def test_small_chain(self) -> None:
        assert left_chain(2) == Add(Add(Number(1), Number(2)), Number(3))

    def test_start_offset(self) -> None:
        assert left_chain(1, start=10) == Add(Number(10), Number(11))

    @pytest.mark.parametrize("depth", [1, 5, 128, 2000])
    def test_depth_is_exact(self, depth: int) -> None:
        assert tree_depth(left_chain(depth)) == depth

    def test_node_count(self) -> None:
        assert count_nodes(left_chain(10)) == 21

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            left_chain(-1)


class TestMeasurements:
    def test_single_leaf(self) -> None:
        assert tree_depth(Number(1)) == 0
        assert count_nodes(Number(1)) == 1

    def test_right_leaning(self) -> None:
        tree = Add(Number(1), Add(Number(2), Add(Number(3), Number(4))))
        assert tree_depth(tree) == 3
        assert count_nodes(tree) == 7
