#!/usr/bin/env python3
"""
Keyword List Compiler for trie-density.

This script reads one or more keyword lists (plain text or XML), merges and
deduplicates them, and saves the result as a compact marisa_trie.Trie file
that trie-density can memory-map with `--file words.marisa`.

Usage:
    python scripts/build_keywords.py words.txt more.xml --output words.marisa
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import marisa_trie

from trie_density.constants import DEFAULT_KEYWORD_TAG
from trie_density.keywords import load_keywords

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


DEFAULT_OUTPUT = Path("keywords.marisa")


def collect_keywords(sources: List[Path], tag: str) -> List[str]:
    """Read every source list into one sorted, deduplicated list."""
    keywords = set()
    for source in sources:
        before = len(keywords)
        keywords.update(load_keywords(source, tag))
        logger.info(f"  {source}: {len(keywords) - before} new keywords")
    return sorted(keywords)


def build_keyword_file(keywords: List[str], output_path: Path) -> marisa_trie.Trie:
    """Build and save the compiled keyword list."""
    logger.info("Building marisa_trie.Trie...")
    trie = marisa_trie.Trie(keywords)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    trie.save(str(output_path))

    file_size = output_path.stat().st_size / 1024
    logger.info(f"Saved {len(trie)} keywords to {output_path} ({file_size:.1f} KB)")
    return trie


def main():
    parser = argparse.ArgumentParser(
        description="Compile trie-density keyword lists into a marisa file"
    )
    parser.add_argument(
        'sources',
        nargs='+',
        type=Path,
        help="Keyword list files (.txt or .xml)"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output keyword file (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        '--tag', '-t',
        default=DEFAULT_KEYWORD_TAG,
        help=f"XML element holding keywords (default: {DEFAULT_KEYWORD_TAG})"
    )

    args = parser.parse_args()

    for source in args.sources:
        if not source.exists():
            logger.error(f"Keyword list not found: {source}")
            sys.exit(1)

    start_time = time.time()

    logger.info("Reading keyword lists...")
    keywords = collect_keywords(args.sources, args.tag)
    if not keywords:
        logger.error("No keywords found")
        sys.exit(1)

    build_keyword_file(keywords, args.output)

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
