"""Exceptions raised by bintreelib.

Everything derives from TreeCodecError so callers can catch codec failures
with a single except clause.
"""

from typing import Optional


class TreeCodecError(Exception):
    """Base class for all bintreelib errors."""
    pass


class ConfigurationError(TreeCodecError):
    """Raised when a CodecConfig is inconsistent."""
    pass


class EncodingError(TreeCodecError):
    """Raised when a node value collides with the wire tokens."""
    pass


class DecodingError(TreeCodecError):
    """Raised when encoded text is malformed.
    
    Attributes:
        position: Index of the offending token, or None when the problem
            is not tied to a single token
    """
    
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class ReconstructionError(TreeCodecError):
    """Raised when in-order and pre-order sequences do not describe one tree."""
    pass
