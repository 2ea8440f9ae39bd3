"""Encoder for bintreelib.

Walks a tree in pre-order and writes every value followed by the
separator. Every absent child slot is written as the null marker followed
by the separator, so a tree of N nodes always carries exactly N+1 markers.
"""

import logging
from typing import List, Optional

from ..config import CodecConfig, resolve_config
from ..core.node import BinaryTree, present
from ..errors import EncodingError

logger = logging.getLogger(__name__)


def encode(root: Optional[BinaryTree],
           config: Optional[CodecConfig] = None) -> Optional[str]:
    """Encode a tree as a flat pre-order token stream.

    The result is memoized on ``root``; a second call with the same wire
    tokens returns the cached text without walking the tree.

    Args:
        root: Tree to encode
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Encoded text, or None for the empty tree

    Raises:
        EncodingError: If a node below the root has children but no value,
            or check_values is on and a value collides with the
            wire tokens
        ConfigurationError: If config is invalid

    Example:
        >>> encode(BinaryTree("1", BinaryTree("2")))
        '1#2#-#-#-#'
    """
    config = resolve_config(config)
    if root is None or root.is_empty():
        return None

    # Checked encodes always walk the tree so every value is validated
    cached = root._encoding
    if (cached is not None and not config.check_values
            and cached[:2] == (config.null_marker, config.separator)):
        return cached[2]

    tokens: List[str] = []
    stack: List[Optional[BinaryTree]] = [root]
    while stack:
        node = present(stack.pop())
        if node is None:
            tokens.append(config.null_marker)
            continue
        if node.is_empty():
            raise EncodingError("Node without a value cannot have children")
        if config.check_values:
            _check_value(node.value, config)
        tokens.append(node.value)
        # Right pushed first so the left slot is written first
        stack.append(node.right)
        stack.append(node.left)

    sep = config.separator
    text = sep.join(tokens) + sep
    logger.debug("Encoded %d tokens into %d characters", len(tokens), len(text))

    root._encoding = (config.null_marker, config.separator, text)
    return text


def count_null_markers(text: Optional[str],
                       config: Optional[CodecConfig] = None) -> int:
    """Count the null-marker tokens in an encoding.

    Args:
        text: Encoded text (None counts as zero)
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Number of null-marker tokens
    """
    config = resolve_config(config)
    if not text:
        return 0
    return sum(1 for token in text.split(config.separator) if token == config.null_marker)


def _check_value(value: object, config: CodecConfig) -> None:
    if not isinstance(value, str):
        raise EncodingError(f"Node value must be a string, got {type(value).__name__}")
    if value == config.null_marker:
        raise EncodingError(f"Node value {value!r} equals the null marker")
    if config.separator in value:
        raise EncodingError(
            f"Node value {value!r} contains the separator {config.separator!r}"
        )
