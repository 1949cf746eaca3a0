"""
Constants shared by the trie store, the scanner and the keyword loaders.
"""

import re
from enum import Enum


# ============================================================================
# Node Markers
# ============================================================================

class Terminal(Enum):
    """
    Marker stored as an edge value instead of a node.

    DEAD_END means the path completes exactly one keyword and nothing
    continues past it, so no Branch is allocated for it.
    """
    DEAD_END = 0

    def __repr__(self) -> str:
        return "DEAD_END"


DEAD_END = Terminal.DEAD_END

# Label for the open-end flag in dump() output
OPEN_END = "$$"


# ============================================================================
# Scanning
# ============================================================================

DEFAULT_PLACEHOLDER = "*"

# Characters that glue onto a match in symbolic mode (Unicode-aware \w)
WORD_CHARACTER = re.compile(r"\w")


# ============================================================================
# Keyword Lists
# ============================================================================

DEFAULT_KEYWORD_TAG = "keyword"

XML_SUFFIXES = {".xml"}
MARISA_SUFFIXES = {".marisa"}
COMMENT_PREFIX = "#"
