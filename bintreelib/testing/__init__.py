"""Testing helpers for bintreelib consumers."""

from .fixtures import (
    empty_tree,
    one_node_tree,
    mixed_values_tree,
    duplicates_tree,
    triple_duplicates_tree,
    left_skewed_tree,
    right_skewed_tree,
)

__all__ = [
    'empty_tree',
    'one_node_tree',
    'mixed_values_tree',
    'duplicates_tree',
    'triple_duplicates_tree',
    'left_skewed_tree',
    'right_skewed_tree',
]
