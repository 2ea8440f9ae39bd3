"""Text codec for binary trees.

Encoding writes a pre-order token stream with explicit null markers;
decoding derives the in-order sequence from that stream and rebuilds the
tree from both sequences.
"""

from .encoder import encode, count_null_markers
from .decoder import (
    Derivation,
    tokenize,
    validate_tokens,
    derive_in_order,
    resolve_index,
    build_from_in_and_pre,
    decode,
)

# Names used by the classic serializer
serialize = encode
deserialize = decode

__all__ = [
    'encode',
    'decode',
    'serialize',
    'deserialize',
    'count_null_markers',
    'Derivation',
    'tokenize',
    'validate_tokens',
    'derive_in_order',
    'resolve_index',
    'build_from_in_and_pre',
]
