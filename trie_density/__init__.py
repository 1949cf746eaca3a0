"""
trie-density: Keyword Detection and Density over a Trie

Finds every occurrence of a set of keywords in a single pass over the text.
Works on pictographic scripts such as Chinese, where any substring may be a
word, and on Western text, where matches must sit on word boundaries.

Basic Usage:
    import trie_density

    trie = trie_density.Trie()
    trie.insert("关键字").insert("关键")

    trie.density('这段文字一共包括2个"关键"，1个"关键字"')
    # {'关键': 2, '关键字': 1}

    trie.check("没有")           # None
    trie.replace("关键字")       # '***'
"""

from trie_density.constants import DEAD_END, OPEN_END
from trie_density.errors import InvalidInput
from trie_density.nodes import Branch
from trie_density.scanner import Match
from trie_density.trie import Trie
from trie_density.keywords import build_trie, load_keywords, load_trie

__version__ = "0.1.0"


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Data classes
    "Trie",
    "Branch",
    "Match",
    # Markers
    "OPEN_END",
    "DEAD_END",
    # Keyword lists
    "load_keywords",
    "load_trie",
    "build_trie",
    # Exceptions
    "InvalidInput",
    # Version
    "get_version",
    "__version__",
]
