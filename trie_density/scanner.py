"""
Single-pass multi-keyword scanner.

The scanner walks the text once, one code point at a time, and keeps a set
of drafts: prefixes matched so far together with the trie node each prefix
reached. Every character either extends a draft, completes a keyword, or
kills the draft. A new draft is seeded whenever the root has an edge for the
current character, so overlapping keywords are all reported.

Matches are yielded lazily; a consumer that stops iterating stops the scan.
"""

import logging
from typing import Dict, Iterator, NamedTuple, Optional

from trie_density.constants import DEAD_END, WORD_CHARACTER
from trie_density.errors import ensure_string
from trie_density.nodes import Branch, Edge, completes

logger = logging.getLogger(__name__)


class Match(NamedTuple):
    """A keyword found in the text, ending at index `end` (inclusive)."""
    word: str
    end: int

    @property
    def start(self) -> int:
        """Index of the first matched character."""
        return self.end - len(self.word) + 1


# ============================================================================
# Word Boundaries
# ============================================================================

def is_word_character(char: str) -> bool:
    return WORD_CHARACTER.match(char) is not None


def is_word_boundary(text: str, word: str, end: int) -> bool:
    """
    Check that a match is not glued to surrounding word characters.

    Used for symbolic (Western) text only, so that "eHello" does not
    yield "Hello".

    Args:
        text: The scanned text
        word: The matched keyword
        end: Index of the last matched character

    Returns:
        True if the characters on both sides of the match are absent
        or are not word characters
    """
    after = end + 1
    if after < len(text) and is_word_character(text[after]):
        return False
    before = end - len(word)
    if before >= 0 and is_word_character(text[before]):
        return False
    return True


# ============================================================================
# Scanning
# ============================================================================

def scan(root: Branch, text: str, symbolic: bool = False) -> Iterator[Match]:
    """
    Yield every keyword occurrence in text, ordered by end index.

    Matches sharing an end index come longest first.

    Args:
        root: Root node of the trie
        text: Text to scan (must be a non-empty string)
        symbolic: Reject matches that are not on word boundaries

    Yields:
        Match tuples

    Raises:
        InvalidInput: If text is empty or not a string
    """
    ensure_string(text, "text")

    drafts: Dict[str, Branch] = {}
    emitted = 0

    def accept(word: str, end: int) -> bool:
        return not symbolic or is_word_boundary(text, word, end)

    for index, char in enumerate(text):
        survivors: Dict[str, Branch] = {}

        for prefix, node in drafts.items():
            child = node.edges.get(char)
            if child is None:
                continue
            word = prefix + char
            if completes(child) and accept(word, index):
                emitted += 1
                yield Match(word, index)
            if child is not DEAD_END:
                survivors[word] = child

        # Matches are only tested on extension, so a one-character keyword
        # is never reported
        seed: Optional[Edge] = root.edges.get(char)
        if seed is not None and seed is not DEAD_END:
            survivors[char] = seed

        drafts = survivors

    logger.debug(f"Scanned {len(text)} characters, {emitted} matches")
