"""bintreelib - Binary trees with a lossless text codec.

A tree is encoded as its pre-order values with an explicit null marker for
every absent child. Decoding derives the in-order sequence from that stream
and rebuilds the identical tree, duplicate values included.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import BinaryTree, encode, decode

    tree = BinaryTree("1", BinaryTree("2"), BinaryTree("2"))
    text = encode(tree)            # '1#2#-#-#2#-#-#'
    assert decode(text) == tree
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import (
    CodecConfig,
    ResolutionStrategy,
    TraversalStrategy,
    DEFAULT_NULL_MARKER,
    DEFAULT_SEPARATOR,
)
from .errors import (
    TreeCodecError,
    ConfigurationError,
    EncodingError,
    DecodingError,
    ReconstructionError,
)
from .core import (
    BinaryTree,
    present,
    BinaryTreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .codec import (
    encode,
    decode,
    serialize,
    deserialize,
    count_null_markers,
    Derivation,
    tokenize,
    validate_tokens,
    derive_in_order,
    resolve_index,
    build_from_in_and_pre,
)
from .api import (
    equals,
    round_trip,
    build_tree,
    to_nested,
    traverse_tree,
    tree_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Config
    "CodecConfig",
    "ResolutionStrategy",
    "TraversalStrategy",
    "DEFAULT_NULL_MARKER",
    "DEFAULT_SEPARATOR",
    # Errors
    "TreeCodecError",
    "ConfigurationError",
    "EncodingError",
    "DecodingError",
    "ReconstructionError",
    # Core
    "BinaryTree",
    "present",
    "BinaryTreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Codec
    "encode",
    "decode",
    "serialize",
    "deserialize",
    "count_null_markers",
    "Derivation",
    "tokenize",
    "validate_tokens",
    "derive_in_order",
    "resolve_index",
    "build_from_in_and_pre",
    # API
    "equals",
    "round_trip",
    "build_tree",
    "to_nested",
    "traverse_tree",
    "tree_values",
    "get_tree_stats",
]
