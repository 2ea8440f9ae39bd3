"""Configuration system for bintreelib.

This module defines how callers choose the wire tokens of the codec, how
strictly encoded text is checked, and how duplicate values are resolved
when a tree is rebuilt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import ConfigurationError


DEFAULT_NULL_MARKER = "-"
DEFAULT_SEPARATOR = "#"


class TraversalStrategy(Enum):
    """Order in which tree nodes are visited."""
    PRE_ORDER = "pre"       # Node, left, right
    IN_ORDER = "in"         # Left, node, right
    POST_ORDER = "post"     # Left, right, node
    LEVEL_ORDER = "level"   # Level by level, left to right


class ResolutionStrategy(Enum):
    """How the tree builder places a pre-order value in the in-order sequence.
    
    VALUE_SCAN only looks at values, so it cannot tell apart shapes that
    share both sequences (e.g. a node with an equal-valued left child vs.
    right child). POSITIONAL uses the exact slots recorded while deriving
    the in-order sequence from the encoded stream.
    """
    POSITIONAL = "positional"   # Exact in-order slots from the derivation
    VALUE_SCAN = "value_scan"   # First unvisited occurrence of the value


@dataclass
class CodecConfig:
    """Complete configuration for encoding and decoding.
    
    The defaults reproduce the classic wire format: ``-`` marks an absent
    child and ``#`` terminates every token.
    """
    
    # Wire tokens
    null_marker: str = DEFAULT_NULL_MARKER
    separator: str = DEFAULT_SEPARATOR
    
    # Decoding behavior
    strict: bool = True  # Fail fast on malformed text vs. best effort
    resolution: ResolutionStrategy = ResolutionStrategy.POSITIONAL
    
    # Encoding behavior
    check_values: bool = False  # Reject values that collide with wire tokens
    
    @classmethod
    def reference(cls) -> 'CodecConfig':
        """Create config matching the classic algorithm.
        
        No stream validation and value-scan duplicate resolution.
        
        Returns:
            CodecConfig for reference behavior
        """
        return cls(strict=False, resolution=ResolutionStrategy.VALUE_SCAN)
    
    @classmethod
    def checked(cls) -> 'CodecConfig':
        """Create config that validates in both directions.
        
        Returns:
            CodecConfig with strict decoding and value checking
        """
        return cls(strict=True, check_values=True)
    
    def validate(self) -> List[str]:
        """Validate configuration for consistency.
        
        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            errors.append("separator must be a single character")
        
        if not isinstance(self.null_marker, str) or not self.null_marker:
            errors.append("null_marker must be a non-empty string")
        elif isinstance(self.separator, str) and self.separator and self.separator in self.null_marker:
            errors.append("null_marker cannot contain the separator")
        
        if not isinstance(self.resolution, ResolutionStrategy):
            errors.append(f"unknown resolution strategy: {self.resolution!r}")
        
        return errors


def resolve_config(config: Optional[CodecConfig] = None) -> CodecConfig:
    """Return a usable config, falling back to the defaults.
    
    Args:
        config: Caller supplied config or None
        
    Returns:
        A validated CodecConfig
        
    Raises:
        ConfigurationError: If the config fails validation
    """
    if config is None:
        return CodecConfig()
    
    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )
    return config
