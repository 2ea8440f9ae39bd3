"""Tests for the high-level API helpers."""

import pytest

from bintreelib import build_tree, get_tree_stats, to_nested
from bintreelib.testing import duplicates_tree, empty_tree, one_node_tree


class TestNested:
    
    def test_build_duplicates(self):
        tree = build_tree(["1", ["2", "4", "5"], ["2", None, "1"]])
        assert tree == duplicates_tree()
    
    def test_build_leaf_and_empty(self):
        assert build_tree("1") == one_node_tree()
        assert build_tree(None).is_empty()
    
    def test_short_lists(self):
        assert build_tree(["1"]) == one_node_tree()
        assert build_tree(["1", "2"]).left.value == "2"
    
    @pytest.mark.parametrize("bad", [[], ["1", None, None, None], [1], 42])
    def test_malformed(self, bad):
        with pytest.raises(ValueError):
            build_tree(bad)
    
    def test_to_nested_inverse(self):
        nested = ["1", ["2", "4", "5"], ["2", None, "1"]]
        assert to_nested(duplicates_tree()) == nested
        assert to_nested(build_tree(nested)) == nested
        assert to_nested(empty_tree()) is None


class TestStats:
    
    def test_duplicates(self):
        assert get_tree_stats(duplicates_tree()) == {
            'node_count': 6,
            'leaf_count': 3,
            'height': 3,
            'null_slots': 7,
            'distinct_values': 4,
        }
    
    def test_empty(self):
        stats = get_tree_stats(empty_tree())
        assert stats['node_count'] == 0
        assert stats['null_slots'] == 0
