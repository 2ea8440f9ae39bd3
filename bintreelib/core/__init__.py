"""Core data model and traversal for bintreelib."""

from .node import BinaryTree, present, trees_equal
from .traverser import (
    BinaryTreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    'BinaryTree',
    'present',
    'trees_equal',
    'BinaryTreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
]
