"""Command line interface for bintreelib.

Usage:
    bintree encode '["1", ["2", "4", "5"], ["2", null, "1"]]'
    bintree decode '1#2#-#-#-#' --order in
    bintree check '1#2#-#-#-#'
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .api import build_tree, tree_values
from .codec import decode, encode
from .config import CodecConfig, ResolutionStrategy, TraversalStrategy
from .errors import TreeCodecError

logger = logging.getLogger(__name__)


def _config_from_args(args: argparse.Namespace) -> CodecConfig:
    return CodecConfig(
        null_marker=args.null_marker,
        separator=args.separator,
        strict=not args.lenient,
        resolution=ResolutionStrategy.VALUE_SCAN if args.value_scan else ResolutionStrategy.POSITIONAL,
    )


def cmd_encode(args: argparse.Namespace, config: CodecConfig) -> int:
    try:
        nested = json.loads(args.tree)
    except json.JSONDecodeError as e:
        print(f"ERROR: tree is not valid JSON: {e}", file=sys.stderr)
        return 2
    try:
        tree = build_tree(nested)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    text = encode(tree, config)
    if text is not None:
        print(text)
    return 0


def cmd_decode(args: argparse.Namespace, config: CodecConfig) -> int:
    tree = decode(args.text, config)
    values = tree_values(tree, TraversalStrategy(args.order))
    if values:
        print(" ".join(values))
    return 0


def cmd_check(args: argparse.Namespace, config: CodecConfig) -> int:
    tree = decode(args.text, config)
    again = encode(tree, config)
    original = args.text or None
    if again == original:
        print(f"OK: {tree.size()} nodes round-trip identically")
        return 0
    print(f"MISMATCH: re-encoded as {again!r}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bintree",
        description="Encode and decode binary trees as marked pre-order text",
    )
    parser.add_argument("--separator", default=CodecConfig.separator,
                        help="Token separator (default: %(default)s)")
    parser.add_argument("--null-marker", default=CodecConfig.null_marker,
                        help="Absent-child marker (default: %(default)s)")
    parser.add_argument("--value-scan", action="store_true",
                        help="Resolve duplicates by value instead of by position")
    parser.add_argument("--lenient", action="store_true",
                        help="Skip validation of the encoded stream")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_encode = subparsers.add_parser("encode", help="Encode a nested JSON tree")
    p_encode.add_argument("tree", help='Nested JSON, e.g. \'["1", "2", null]\'')
    p_encode.set_defaults(func=cmd_encode)

    p_decode = subparsers.add_parser("decode", help="Decode text and print its values")
    p_decode.add_argument("text", help="Encoded tree")
    p_decode.add_argument("--order", choices=[s.value for s in TraversalStrategy],
                          default=TraversalStrategy.PRE_ORDER.value,
                          help="Traversal order for output (default: %(default)s)")
    p_decode.set_defaults(func=cmd_decode)

    p_check = subparsers.add_parser("check", help="Verify that text round-trips")
    p_check.add_argument("text", help="Encoded tree")
    p_check.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    try:
        config = _config_from_args(args)
        return args.func(args, config)
    except TreeCodecError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
