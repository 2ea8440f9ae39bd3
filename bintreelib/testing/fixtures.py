"""Sample trees for testing bintreelib and code built on it.

Each function returns a freshly built tree, so tests can mutate the
result without affecting each other.
"""

from ..core.node import BinaryTree


def empty_tree() -> BinaryTree:
    """The empty tree (no value, no children)."""
    return BinaryTree()


def one_node_tree() -> BinaryTree:
    """A single leaf with value "1"."""
    return BinaryTree("1")


def mixed_values_tree() -> BinaryTree:
    """Tree with long and punctuation-heavy values.

    Structure:
        1
        ├── aa
        │   ├── ABCDEFGHIJKLMNOPQRSTUVWXYZ
        │   └── +=_~!@$%^&*()_+"<>?:,./;'|[]{}
        └── abcdefghijklmnopqrstuvwxyz
            └── Hello!  (left)
    """
    tree = BinaryTree("1")
    tree.left = BinaryTree("aa")
    tree.right = BinaryTree("abcdefghijklmnopqrstuvwxyz")
    tree.left.left = BinaryTree("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    tree.left.right = BinaryTree("+=_~!@$%^&*()_+\"<>?:,./;'|[]{}")
    tree.right.left = BinaryTree("Hello!")
    return tree


def duplicates_tree() -> BinaryTree:
    """Tree where "1" and "2" each appear twice.

    Structure:
        1
        ├── 2
        │   ├── 4
        │   └── 5
        └── 2
            └── 1  (right)
    """
    tree = BinaryTree("1")
    tree.left = BinaryTree("2")
    tree.right = BinaryTree("2")
    tree.left.left = BinaryTree("4")
    tree.left.right = BinaryTree("5")
    tree.right.right = BinaryTree("1")
    return tree


def triple_duplicates_tree() -> BinaryTree:
    """Tree where "7" appears three times at depths 0, 1 and 3.

    Structure:
        7
        ├── 3
        │   └── 1  (left)
        └── 7
            ├── 5
            └── 9
                └── 7  (right)

    In-order is 1 3 7 5 7 9 7. Placing the second 7 must pick index 4,
    the next occurrence after the root's, not the last one.
    """
    tree = BinaryTree("7")
    tree.left = BinaryTree("3", left=BinaryTree("1"))
    tree.right = BinaryTree("7",
                            left=BinaryTree("5"),
                            right=BinaryTree("9", right=BinaryTree("7")))
    return tree


def left_skewed_tree(depth: int, value: str = "x") -> BinaryTree:
    """A chain of depth nodes, each the left child of the previous one."""
    root = BinaryTree(value)
    node = root
    for _ in range(depth - 1):
        node.left = BinaryTree(value)
        node = node.left
    return root


def right_skewed_tree(depth: int) -> BinaryTree:
    """A chain of depth nodes valued "0", "1", ... linked to the right."""
    root = BinaryTree("0")
    node = root
    for i in range(1, depth):
        node.right = BinaryTree(str(i))
        node = node.right
    return root
