"""Decoder for bintreelib.

Decoding is a chain of small stages:

1. tokenize()          - split the text on the separator
2. validate_tokens()   - (strict mode) check the full-slot grammar
3. derive_in_order()   - recover the in-order sequence with a stack
4. build_from_in_and_pre() - rebuild the tree from both sequences

Stages 3 and 4 are public so the in-order/pre-order reconstruction can be
used on its own.
"""

import logging
from collections import deque
from typing import Callable, Deque, List, NamedTuple, Optional, Sequence, Tuple

from ..config import CodecConfig, ResolutionStrategy, resolve_config
from ..core.node import BinaryTree
from ..errors import DecodingError, ReconstructionError

logger = logging.getLogger(__name__)

# (in_order, visited, value, start, end, pre_index) -> in-order index
IndexResolver = Callable[[Sequence[str], List[bool], str, int, int, int], int]


class Derivation(NamedTuple):
    """Result of deriving the in-order sequence from an encoded stream.

    Attributes:
        pre_order: Values in pre-order, null markers stripped
        in_order: Values in in-order
        slots: slots[k] is the in-order index of pre_order[k]
    """
    pre_order: List[str]
    in_order: List[str]
    slots: List[int]


def tokenize(text: str, config: Optional[CodecConfig] = None) -> List[str]:
    """Split encoded text into its ordered tokens.

    The terminating separator produces one trailing empty piece, which is
    dropped. Values and null markers are kept in order, duplicates included.

    Args:
        text: Encoded text
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        List of tokens

    Raises:
        DecodingError: In strict mode, if text does not end with the separator
    """
    config = resolve_config(config)
    sep = config.separator
    if not text.endswith(sep):
        if config.strict:
            raise DecodingError(
                f"Encoded text must end with the separator {sep!r}; stream looks truncated"
            )
        return text.split(sep)
    return text[:-len(sep)].split(sep)


def validate_tokens(tokens: Sequence[str], config: Optional[CodecConfig] = None) -> None:
    """Check that tokens form exactly one full-slot pre-order encoding.

    Every value opens two child slots and every token fills one slot; the
    stream must end exactly when the last open slot is filled.

    Args:
        tokens: Token sequence from tokenize()
        config: Codec configuration (defaults to CodecConfig())

    Raises:
        DecodingError: If the stream is truncated or has trailing tokens
    """
    config = resolve_config(config)
    open_slots = 1
    for position, token in enumerate(tokens):
        if open_slots == 0:
            raise DecodingError(
                f"Unexpected token {token!r} after the tree was complete",
                position=position,
            )
        open_slots -= 1
        if token != config.null_marker:
            open_slots += 2
    if open_slots:
        raise DecodingError(
            f"Encoded stream ended with {open_slots} unfilled child slot(s)",
            position=len(tokens),
        )


def derive_in_order(tokens: Sequence[str], config: Optional[CodecConfig] = None) -> Derivation:
    """Derive the in-order value sequence from a marked pre-order stream.

    Values are pushed on a stack. A null marker pops the most recently
    opened node (if any), which is the next node in in-order; the marker
    itself is discarded. No value comparisons are made, so duplicates are
    handled exactly.

    Args:
        tokens: Pre-order tokens including null markers
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Derivation with the stripped pre-order, the in-order and the slot map
    """
    config = resolve_config(config)
    pre_order: List[str] = []
    in_order: List[str] = []
    slots: List[int] = []
    stack: List[int] = []  # Indexes into pre_order

    for token in tokens:
        if token == config.null_marker:
            if stack:
                pre_index = stack.pop()
                slots[pre_index] = len(in_order)
                in_order.append(pre_order[pre_index])
        else:
            stack.append(len(pre_order))
            pre_order.append(token)
            slots.append(-1)

    logger.debug("Derived in-order sequence of %d values from %d tokens",
                 len(in_order), len(tokens))
    return Derivation(pre_order, in_order, slots)


def resolve_index(in_order: Sequence[str],
                  visited: List[bool],
                  value: str,
                  start: int,
                  end: int) -> int:
    """Find the in-order position of a value and mark it visited.

    Starts at the first occurrence of value within in_order[start..end]
    and steps left to right over successive occurrences, stopping at the
    first one not yet visited.

    Args:
        in_order: In-order value sequence
        visited: Per-index visited flags (updated in place)
        value: Value of the node being placed
        start: First in-order index of the current range
        end: Last in-order index of the current range

    Returns:
        The chosen in-order index

    Raises:
        ReconstructionError: If no unvisited occurrence exists in range
    """
    index = start
    while index <= end:
        try:
            index = in_order.index(value, index, end + 1)
        except ValueError:
            break
        if not visited[index]:
            visited[index] = True
            return index
        index += 1

    raise ReconstructionError(
        f"No unvisited occurrence of {value!r} in in-order range [{start}, {end}]"
    )


def _value_scan_resolver() -> IndexResolver:
    def resolve(in_order, visited, value, start, end, pre_index):
        return resolve_index(in_order, visited, value, start, end)
    return resolve


def _positional_resolver(slots: Sequence[int]) -> IndexResolver:
    def resolve(in_order, visited, value, start, end, pre_index):
        index = slots[pre_index]
        if not start <= index <= end or visited[index] or in_order[index] != value:
            raise ReconstructionError(
                f"Pre-order value {value!r} (#{pre_index}) does not fit "
                f"in-order range [{start}, {end}]"
            )
        visited[index] = True
        return index
    return resolve


def build_from_in_and_pre(in_order: Sequence[str],
                          pre_order: Sequence[str],
                          resolver: Optional[IndexResolver] = None) -> Optional[BinaryTree]:
    """Rebuild a tree from its in-order and pre-order value sequences.

    Pre-order values are consumed strictly left to right from a queue.
    Each node is placed in the in-order sequence by the resolver, which
    splits the current range into the left and right subtree ranges.
    The work runs on an explicit stack with the same visiting order as
    the textbook recursion.

    Both sequences must come from the same well-formed encoding.

    Args:
        in_order: In-order value sequence
        pre_order: Pre-order value sequence (no null markers)
        resolver: Index resolver (defaults to first unvisited occurrence)

    Returns:
        Root of the rebuilt tree, or None if the sequences are empty

    Raises:
        ReconstructionError: If the sequences are inconsistent
    """
    if len(in_order) != len(pre_order):
        raise ReconstructionError(
            f"In-order has {len(in_order)} values but pre-order has {len(pre_order)}"
        )
    if resolver is None:
        resolver = _value_scan_resolver()

    size = len(in_order)
    visited = [False] * size
    queue: Deque[str] = deque(pre_order)
    consumed = 0
    root: Optional[BinaryTree] = None

    # Frames are (start, end, parent, is_left); parent None means the root
    frames: List[Tuple[int, int, Optional[BinaryTree], bool]] = [(0, size - 1, None, True)]
    while frames:
        start, end, parent, is_left = frames.pop()
        if start > end:
            continue

        node = BinaryTree(queue.popleft())
        index = resolver(in_order, visited, node.value, start, end, consumed)
        consumed += 1

        if parent is None:
            root = node
        elif is_left:
            parent.left = node
        else:
            parent.right = node

        if start == end:
            continue
        # Right pushed first so the left subtree consumes pre-order first
        frames.append((index + 1, end, node, False))
        frames.append((start, index - 1, node, True))

    return root


def decode(text: Optional[str], config: Optional[CodecConfig] = None) -> BinaryTree:
    """Rebuild a tree from encoded text.

    Args:
        text: Encoded text (None or "" for the empty tree)
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        The reconstructed tree; the empty tree for empty input

    Raises:
        DecodingError: In strict mode, if the text is malformed
        ReconstructionError: If the derived sequences are inconsistent

    Example:
        >>> decode("1#2#-#-#-#")
        BinaryTree('1', left=BinaryTree('2'))
    """
    config = resolve_config(config)
    if not text:
        return BinaryTree()

    tokens = tokenize(text, config)
    if config.strict:
        validate_tokens(tokens, config)

    derivation = derive_in_order(tokens, config)
    if config.resolution == ResolutionStrategy.POSITIONAL:
        if -1 in derivation.slots:
            # Only reachable without strict validation
            raise DecodingError("Encoded stream ended before every value was placed")
        resolver = _positional_resolver(derivation.slots)
    else:
        resolver = _value_scan_resolver()

    root = build_from_in_and_pre(derivation.in_order, derivation.pre_order, resolver)
    logger.debug("Decoded %d nodes using %s resolution",
                 len(derivation.pre_order), config.resolution.value)
    return root if root is not None else BinaryTree()
