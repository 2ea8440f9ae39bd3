"""High-level API for bintreelib.

This module provides simple, functional interfaces for the common cases:
encoding, decoding, comparing and inspecting trees.
"""

from typing import Any, Dict, Iterator, List, Optional, Union

from .config import CodecConfig, TraversalStrategy
from .core.node import BinaryTree, present, trees_equal
from .core.traverser import create_traverser
from .codec import encode, decode

# A nested tree is a value string (leaf), None (absent), or [value, left, right]
NestedTree = Union[None, str, List[Any]]


def equals(a: Optional[BinaryTree], b: Optional[BinaryTree]) -> bool:
    """Check whether two trees have the same shape and values.

    Args:
        a: First tree or None
        b: Second tree or None

    Returns:
        True if the trees are structurally equal
    """
    return trees_equal(a, b)


def round_trip(tree: Optional[BinaryTree],
               config: Optional[CodecConfig] = None) -> BinaryTree:
    """Encode a tree and decode the result.

    Args:
        tree: Tree to round-trip
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        A freshly built tree that should equal the input
    """
    return decode(encode(tree, config), config)


def build_tree(nested: NestedTree) -> BinaryTree:
    """Build a tree from nested lists.

    Args:
        nested: ``[value, left, right]`` lists where left/right are nested
            trees, a bare string for a leaf, or None for the empty tree

    Returns:
        The built tree

    Raises:
        ValueError: If the nesting is not well formed

    Example:
        >>> build_tree(["1", "2", ["3", None, "4"]])
        BinaryTree('1', left=BinaryTree('2'), right=BinaryTree('3', right=BinaryTree('4')))
    """
    root = _build_node(nested)
    return root if root is not None else BinaryTree()


def _build_node(nested: NestedTree) -> Optional[BinaryTree]:
    if nested is None:
        return None
    if isinstance(nested, str):
        return BinaryTree(nested)
    if not isinstance(nested, (list, tuple)) or not 1 <= len(nested) <= 3:
        raise ValueError(f"Expected [value, left, right], got {nested!r}")

    value = nested[0]
    if not isinstance(value, str):
        raise ValueError(f"Node value must be a string, got {value!r}")
    left = _build_node(nested[1]) if len(nested) > 1 else None
    right = _build_node(nested[2]) if len(nested) > 2 else None
    return BinaryTree(value, left, right)


def to_nested(tree: Optional[BinaryTree]) -> NestedTree:
    """Convert a tree to the nested form accepted by build_tree().

    Leaves become bare strings; the empty tree becomes None.
    """
    if present(tree) is None:
        return None
    if tree.is_leaf():
        return tree.value
    return [tree.value, to_nested(tree.left), to_nested(tree.right)]


def traverse_tree(root: Optional[BinaryTree],
                  strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
                  max_depth: Optional[int] = None,
                  min_depth: int = 0) -> Iterator[BinaryTree]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (pre, in, post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        BinaryTree nodes in the chosen order
    """
    traverser = create_traverser(strategy)
    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        yield node


def tree_values(root: Optional[BinaryTree],
                strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER) -> List[str]:
    """Return the node values in the chosen traversal order."""
    return [node.value for node in traverse_tree(root, strategy)]


def get_tree_stats(root: Optional[BinaryTree]) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Tree to analyze

    Returns:
        Dictionary with node_count, leaf_count, height, null_slots and
        distinct_values
    """
    stats = {
        'node_count': 0,
        'leaf_count': 0,
        'height': 0,
        'null_slots': 0,
        'distinct_values': 0,
    }
    values = set()

    traverser = create_traverser(TraversalStrategy.PRE_ORDER)
    for node, depth in traverser.traverse(root):
        stats['node_count'] += 1
        stats['height'] = max(stats['height'], depth + 1)
        if node.is_leaf():
            stats['leaf_count'] += 1
        values.add(node.value)

    stats['distinct_values'] = len(values)
    if stats['node_count']:
        # Every node has two slots; all but node_count - 1 of them are empty
        stats['null_slots'] = stats['node_count'] + 1
    return stats
