"""
CLI interface for trie-density.

Usage:
    trie-density -k 关键字 -k 关键 '这段文字一共包括2个"关键"，1个"关键字"'
    trie-density --symbolic -f words.txt --replace "Hello World"
    echo "some text" | trie-density -f words.xml --check
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from trie_density import Trie, __version__
from trie_density.constants import DEFAULT_KEYWORD_TAG, DEFAULT_PLACEHOLDER
from trie_density.keywords import load_trie

logger = logging.getLogger(__name__)


# ============================================================================
# Output Formatting
# ============================================================================

def format_density(density: Dict[str, int]) -> str:
    """
    Tab-separated density table, most frequent first.

    Ties keep the order in which keywords were first found.
    """
    ranked = sorted(density.items(), key=lambda item: -item[1])
    return "\n".join(f"{word}\t{count}" for word, count in ranked)


def format_json(result) -> str:
    return json.dumps(result, ensure_ascii=False, indent=2)


# ============================================================================
# Trie Construction
# ============================================================================

def build_from_args(args: argparse.Namespace) -> Trie:
    """Build the trie from --file lists and --keyword words."""
    trie = load_trie(args.files, symbolic=args.symbolic, tag=args.tag)
    for word in args.keywords:
        trie.insert(word)
    logger.debug(f"Built {trie!r}")
    return trie


# ============================================================================
# Main
# ============================================================================

def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-density",
        description="Detect, count and mask keywords in text",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to scan (read from stdin if omitted)",
    )
    parser.add_argument(
        "--keyword", "-k",
        dest="keywords",
        action="append",
        default=[],
        help="Keyword to look for (repeatable)",
    )
    parser.add_argument(
        "--file", "-f",
        dest="files",
        action="append",
        default=[],
        help="Keyword list file: .txt, .xml or .marisa (repeatable)",
    )
    parser.add_argument(
        "--tag",
        default=DEFAULT_KEYWORD_TAG,
        help=f"XML element holding keywords (default: {DEFAULT_KEYWORD_TAG})",
    )
    parser.add_argument(
        "--symbolic", "-S",
        action="store_true",
        help="Only match on word boundaries (Western text)",
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--check", "-c",
        action="store_true",
        help="Print the first keyword found; exit 1 if none",
    )
    action.add_argument(
        "--replace", "-r",
        action="store_true",
        help="Print the text with keywords masked",
    )
    action.add_argument(
        "--dump",
        action="store_true",
        help="Print the trie structure and exit",
    )

    parser.add_argument(
        "--placeholder", "-p",
        default=DEFAULT_PLACEHOLDER,
        help=f"Mask character for --replace (default: {DEFAULT_PLACEHOLDER})",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"trie-density {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if not args.keywords and not args.files:
        parser.error("no keywords given; use --keyword or --file")

    try:
        trie = build_from_args(args)

        if args.dump:
            print(trie.dump())
            return

        if args.text is None:
            # Read from stdin
            text = sys.stdin.read().rstrip("\n")
        else:
            text = args.text

        if not text:
            parser.print_help()
            sys.exit(1)

        if args.check:
            found = trie.check(text)
            if args.json:
                print(format_json({"found": found}))
            elif found is not None:
                print(found)
            if found is None:
                sys.exit(1)
        elif args.replace:
            masked = trie.replace(text, args.placeholder)
            print(format_json({"text": masked}) if args.json else masked)
        else:
            density = trie.density(text)
            print(format_json(density) if args.json else format_density(density))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
