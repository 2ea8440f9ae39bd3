"""Tree traversal strategies for bintreelib.

Traversers walk a BinaryTree in a fixed order and yield (node, depth)
tuples. All of them use explicit stacks or queues, so very deep trees do
not hit the interpreter recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .node import BinaryTree, present
from ..config import TraversalStrategy


class BinaryTreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Optional[BinaryTree],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTree, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None or empty yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth

    @staticmethod
    def _is_absent(root: Optional[BinaryTree]) -> bool:
        return present(root) is None


class PreOrderTraverser(BinaryTreeTraverser):
    """Depth-first pre-order: node, then left subtree, then right subtree.

    This is the order the encoder writes values in.
    """

    def traverse(self,
                 root: Optional[BinaryTree],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTree, int]]:
        if self._is_absent(root):
            return
        stack: List[Tuple[BinaryTree, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                # Right pushed first so left is visited first
                for child in reversed(list(node.children())):
                    stack.append((child, depth + 1))


class InOrderTraverser(BinaryTreeTraverser):
    """Depth-first in-order: left subtree, then node, then right subtree.

    This is the order the decoder derives from the encoded stream.
    """

    def traverse(self,
                 root: Optional[BinaryTree],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTree, int]]:
        if self._is_absent(root):
            return
        stack: List[Tuple[BinaryTree, int]] = []
        node: Optional[BinaryTree] = root
        depth = 0
        while stack or node is not None:
            # Descend as far left as allowed
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    node = None
                    break
                node = present(node.left)
                depth += 1
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                node = present(node.right)
                depth += 1
            else:
                node = None


class PostOrderTraverser(BinaryTreeTraverser):
    """Depth-first post-order: left subtree, then right subtree, then node."""

    def traverse(self,
                 root: Optional[BinaryTree],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTree, int]]:
        if self._is_absent(root):
            return
        # (node, depth, children_done)
        stack: List[Tuple[BinaryTree, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, children_done = stack.pop()
            if children_done:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue
            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                for child in reversed(list(node.children())):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(BinaryTreeTraverser):
    """Breadth-first traversal, left to right within each level."""

    def traverse(self,
                 root: Optional[BinaryTree],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTree, int]]:
        if self._is_absent(root):
            return
        queue: Deque[Tuple[BinaryTree, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str]) -> BinaryTreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (pre, in, post, level)

    Returns:
        BinaryTreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'pre': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'in': InOrderTraverser,
        'in_order': InOrderTraverser,
        'post': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
