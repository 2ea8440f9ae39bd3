"""Tests for the pre-order encoder."""

import pytest

from bintreelib import (
    BinaryTree,
    CodecConfig,
    ConfigurationError,
    EncodingError,
    count_null_markers,
    encode,
    serialize,
)
from bintreelib.testing import (
    duplicates_tree,
    empty_tree,
    mixed_values_tree,
    one_node_tree,
    triple_duplicates_tree,
)


class TestEncodeFormat:
    
    def test_empty_tree_encodes_to_none(self):
        assert encode(empty_tree()) is None
        assert encode(None) is None
    
    def test_single_node(self):
        assert encode(one_node_tree()) == "1#-#-#"
    
    def test_duplicates(self):
        assert encode(duplicates_tree()) == "1#2#4#-#-#5#-#-#2#-#1#-#-#"
    
    def test_triple_duplicates(self):
        assert encode(triple_duplicates_tree()) == "7#3#1#-#-#-#7#5#-#-#9#-#7#-#-#"
    
    def test_special_characters(self):
        expected = (
            "1#aa#ABCDEFGHIJKLMNOPQRSTUVWXYZ#-#-#"
            "+=_~!@$%^&*()_+\"<>?:,./;'|[]{}#-#-#"
            "abcdefghijklmnopqrstuvwxyz#Hello!#-#-#-#"
        )
        assert encode(mixed_values_tree()) == expected
    
    def test_custom_tokens(self):
        config = CodecConfig(null_marker="~", separator="|")
        tree = BinaryTree("a", right=BinaryTree("b"))
        assert encode(tree, config) == "a|~|b|~|~|"
    
    def test_serialize_alias(self):
        assert serialize is encode


class TestNullMarkerInvariant:
    """A tree with N nodes always carries N+1 null markers."""
    
    @pytest.mark.parametrize("factory", [
        one_node_tree,
        mixed_values_tree,
        duplicates_tree,
        triple_duplicates_tree,
    ])
    def test_marker_count(self, factory):
        tree = factory()
        assert count_null_markers(encode(tree)) == tree.size() + 1
    
    def test_marker_count_of_none(self):
        assert count_null_markers(None) == 0


class TestMemoization:
    
    def test_idempotent(self):
        tree = mixed_values_tree()
        first = encode(tree)
        second = encode(tree)
        assert first == second
        assert second is first
    
    def test_cache_respects_tokens(self):
        tree = one_node_tree()
        assert encode(tree) == "1#-#-#"
        assert encode(tree, CodecConfig(null_marker="*", separator=",")) == "1,*,*,"
        assert tree.cached_encoding == "1,*,*,"
        assert encode(tree) == "1#-#-#"


class TestValueChecking:
    
    def test_unchecked_by_default(self):
        """Collisions are a caller precondition unless checking is on."""
        assert encode(BinaryTree("-")) == "-#-#-#"
    
    @pytest.mark.parametrize("value", ["-", "a#b", "#", 5])
    def test_checked_rejects_collisions(self, value):
        with pytest.raises(EncodingError):
            encode(BinaryTree(value), CodecConfig.checked())
    
    def test_checked_accepts_marker_substring(self):
        """Only an exact match with the marker collides."""
        assert encode(BinaryTree("a-b"), CodecConfig.checked()) == "a-b#-#-#"
    
    def test_checked_nested_value(self):
        tree = BinaryTree("ok", right=BinaryTree("bad#value"))
        with pytest.raises(EncodingError, match="separator"):
            encode(tree, CodecConfig.checked())

    def test_checked_after_unchecked_memo(self):
        """A memoized unchecked encoding must not bypass value checking."""
        tree = BinaryTree("ok", right=BinaryTree("bad#value"))
        assert encode(tree) == "ok#-#bad#value#-#-#"
        with pytest.raises(EncodingError, match="separator"):
            encode(tree, CodecConfig.checked())

    def test_checked_encode_still_memoizes(self):
        tree = one_node_tree()
        text = encode(tree, CodecConfig.checked())
        assert tree.cached_encoding == text
        assert encode(tree) is text


class TestEmptyChildren:
    """An empty BinaryTree() in a child slot is an absent child."""

    def test_empty_child_encodes_as_marker(self):
        tree = BinaryTree("1", left=BinaryTree())
        assert encode(tree) == "1#-#-#"
        assert count_null_markers(encode(tree)) == 2

    def test_nested_empty_children(self):
        tree = BinaryTree("1", right=BinaryTree("2", left=BinaryTree(), right=BinaryTree()))
        assert encode(tree) == "1#-#2#-#-#"

    def test_valueless_node_with_children(self):
        tree = BinaryTree("1", left=BinaryTree(None, left=BinaryTree("2")))
        with pytest.raises(EncodingError, match="without a value"):
            encode(tree)


class TestInvalidConfig:
    
    def test_rejects_bad_config(self):
        with pytest.raises(ConfigurationError):
            encode(one_node_tree(), CodecConfig(separator=""))
