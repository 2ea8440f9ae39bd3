"""BinaryTree node for bintreelib.

A BinaryTree is both a node and the tree rooted at it. Each node owns its
left and right subtrees exclusively; an absent child is None. A node with
no value and no children is the empty tree, and stands for an absent child
wherever it is used as one.
"""

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from ..config import CodecConfig


class BinaryTree:
    """A binary tree node holding an opaque text value.

    Values must not contain the codec separator or equal the null marker.
    This is a caller precondition; it is only checked when the codec is
    configured with ``check_values=True``.

    The encoding of a tree is memoized on the node ``encode`` was called on.
    Mutating the tree afterwards does NOT clear that memo; call
    ``invalidate()`` after changing children or values.
    """

    def __init__(self,
                 value: Optional[str] = None,
                 left: Optional['BinaryTree'] = None,
                 right: Optional['BinaryTree'] = None):
        """Create a node.

        Args:
            value: Text payload (None makes this the empty tree)
            left: Left subtree or None
            right: Right subtree or None
        """
        self.value = value
        self.left = left
        self.right = right
        # (null_marker, separator, text) of the last encoding
        self._encoding: Optional[Tuple[str, str, str]] = None

    @property
    def cached_encoding(self) -> Optional[str]:
        """Memoized encoding of this tree, or None if never encoded."""
        if self._encoding is None:
            return None
        return self._encoding[2]

    def is_empty(self) -> bool:
        """Check if this is the empty tree (no value)."""
        return self.value is None

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        An empty BinaryTree() in a child slot counts as no child.
        """
        return present(self.left) is None and present(self.right) is None

    def children(self) -> Iterator['BinaryTree']:
        """Yield the present children, left first."""
        left = present(self.left)
        if left is not None:
            yield left
        right = present(self.right)
        if right is not None:
            yield right

    def encode(self, config: Optional['CodecConfig'] = None) -> Optional[str]:
        """Encode this tree, memoizing the result on this node.

        Args:
            config: Codec configuration (defaults to CodecConfig())

        Returns:
            Encoded text, or None for the empty tree
        """
        from ..codec.encoder import encode
        return encode(self, config)

    @classmethod
    def decode(cls, text: Optional[str],
               config: Optional['CodecConfig'] = None) -> 'BinaryTree':
        """Rebuild a tree from its encoded text.

        Args:
            text: Encoded text (None or "" for the empty tree)
            config: Codec configuration (defaults to CodecConfig())

        Returns:
            The reconstructed tree
        """
        from ..codec.decoder import decode
        return decode(text, config)

    def invalidate(self) -> None:
        """Forget the memoized encoding."""
        self._encoding = None

    def size(self) -> int:
        """Number of nodes holding a value."""
        if self.is_empty():
            return 0
        count = 0
        stack: List[BinaryTree] = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children())
        return count

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self.is_empty():
            return 0
        height = 0
        stack: List[Tuple[BinaryTree, int]] = [(self, 1)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            for child in node.children():
                stack.append((child, depth + 1))
        return height

    def equals(self, other: Optional['BinaryTree']) -> bool:
        """Structural equality, see trees_equal()."""
        return trees_equal(self, other)

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they have the same shape and values."""
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return trees_equal(self, other)

    # Mutable, so not hashable
    __hash__ = None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        if self.is_empty():
            return f"{self.__class__.__name__}()"
        parts = [repr(self.value)]
        if self.left is not None:
            parts.append(f"left={self.left!r}")
        if self.right is not None:
            parts.append(f"right={self.right!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"


def trees_equal(a: Optional[BinaryTree], b: Optional[BinaryTree]) -> bool:
    """Compare two trees by shape and values.

    Both absent is equal; one absent is unequal. None and the empty tree
    both mean "no tree" and compare equal to each other.

    Args:
        a: First tree or None
        b: Second tree or None

    Returns:
        True if every corresponding position matches
    """
    stack: List[Tuple[Optional[BinaryTree], Optional[BinaryTree]]] = [(present(a), present(b))]
    while stack:
        x, y = stack.pop()
        if x is None or y is None:
            if x is not y:
                return False
            continue
        if x is y:
            continue
        if x.value != y.value:
            return False
        stack.append((present(x.right), present(y.right)))
        stack.append((present(x.left), present(y.left)))
    return True


def present(tree: Optional[BinaryTree]) -> Optional[BinaryTree]:
    """Return tree, or None if it stands for "no tree".

    None and an empty BinaryTree() without children are both absent,
    at the root or in any child slot.
    """
    if tree is not None and tree.is_empty() and tree.is_leaf():
        return None
    return tree
