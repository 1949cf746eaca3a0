"""
Keyword list loading.

Keyword lists are read from plain text, XML or compiled marisa files and
held as a marisa_trie.Trie, which deduplicates them and keeps large lists
compact before they are inserted into a scanning Trie.

Formats (chosen by file suffix):
    .txt and others: one keyword per line; blank lines and '#' comments skipped
    .xml: the text of every <keyword> element (tag is configurable)
    .marisa: a list compiled by scripts/build_keywords.py, memory-mapped
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

import marisa_trie
from lxml import etree

from trie_density.constants import (
    COMMENT_PREFIX,
    DEFAULT_KEYWORD_TAG,
    MARISA_SUFFIXES,
    XML_SUFFIXES,
)
from trie_density.trie import Trie

logger = logging.getLogger(__name__)


# ============================================================================
# Readers
# ============================================================================

def read_text_keywords(path: Path) -> Iterator[str]:
    """Yield keywords from a text file, one per line."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith(COMMENT_PREFIX):
                yield word


def read_xml_keywords(path: Path, tag: str = DEFAULT_KEYWORD_TAG) -> Iterator[str]:
    """
    Yield the stripped text of every `tag` element in an XML file.

    The file is streamed, so large lists are not held as a tree.
    """
    context = etree.iterparse(
        str(path),
        events=('end',),
        tag=tag,
        no_network=True,
    )
    for event, elem in context:
        word = (elem.text or "").strip()
        if word:
            yield word
        elem.clear()
        while elem.getprevious() is not None:
            del elem.getparent()[0]


# ============================================================================
# Loading
# ============================================================================

def load_keywords(path: Union[str, Path], tag: str = DEFAULT_KEYWORD_TAG) -> marisa_trie.Trie:
    """
    Load a keyword list.

    Args:
        path: Keyword list file (.txt, .xml or .marisa)
        tag: Element name holding keywords in XML files

    Returns:
        The deduplicated keywords as a marisa_trie.Trie

    Raises:
        FileNotFoundError: If the file doesn't exist
        lxml.etree.XMLSyntaxError: If an XML list is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Keyword list not found at {path}")

    suffix = path.suffix.lower()
    if suffix in MARISA_SUFFIXES:
        keywords = marisa_trie.Trie()
        keywords.mmap(str(path))
    elif suffix in XML_SUFFIXES:
        keywords = marisa_trie.Trie(read_xml_keywords(path, tag))
    else:
        keywords = marisa_trie.Trie(read_text_keywords(path))

    logger.info(f"Loaded {len(keywords)} keywords from {path}")
    return keywords


def build_trie(keywords: Iterable[str], symbolic: bool = False) -> Trie:
    """
    Build a scanning Trie from keywords.

    Args:
        keywords: Any iterable of keywords, e.g. the result of load_keywords
        symbolic: Require word boundaries around matches

    Returns:
        A Trie holding every keyword

    Raises:
        InvalidInput: If a keyword is empty or not a string
    """
    return Trie(symbolic=symbolic, words=keywords)


def load_trie(paths: Iterable[Union[str, Path]], symbolic: bool = False,
              tag: str = DEFAULT_KEYWORD_TAG) -> Trie:
    """Build one Trie from several keyword list files."""
    trie = Trie(symbolic=symbolic)
    for path in paths:
        for word in load_keywords(path, tag):
            trie.insert(word)
    return trie
