"""
Keyword trie with density calculation.

Keywords are stored in a character trie whose leaves are not allocated:
an edge ending exactly one keyword holds the DEAD_END marker, and a
Branch sets open_end when a keyword ends on it while longer ones continue.

Two modes are supported. Pictographic mode (the default) accepts any
substring match, which suits scripts without spaces between words.
Symbolic mode only accepts matches on word boundaries, for Western text.

Basic Usage:
    from trie_density import Trie

    trie = Trie(symbolic=True).insert("Hello").insert("World")
    trie.density('"Hello World", Hello')   # {'Hello': 2, 'World': 1}
    trie.replace("Hello there")            # '***** there'
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from trie_density.constants import DEAD_END, DEFAULT_PLACEHOLDER, OPEN_END
from trie_density.errors import InvalidInput, ensure_string
from trie_density.nodes import Branch, Edge, completes
from trie_density.scanner import Match, scan

logger = logging.getLogger(__name__)


class Trie:
    """Keyword trie supporting membership, scanning, density and masking."""

    OPEN_END = OPEN_END
    DEAD_END = DEAD_END

    def __init__(self, symbolic: bool = False, words: Optional[Iterable[str]] = None):
        self.root = Branch()
        self.symbolic = bool(symbolic)
        if words is not None:
            for word in words:
                self.insert(word)

    def __repr__(self) -> str:
        mode = "symbolic" if self.symbolic else "pictographic"
        return f"Trie({mode}, nodes={self.node_count()})"

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    # =========================================================================
    # Store
    # =========================================================================

    def insert(self, word: str) -> "Trie":
        """
        Add a keyword. Inserting an existing keyword changes nothing.

        Args:
            word: Keyword to add (non-empty string)

        Returns:
            The trie, for chaining

        Raises:
            InvalidInput: If word is empty or not a string
        """
        ensure_string(word)

        node = self.root
        last = len(word) - 1
        for index, char in enumerate(word):
            child = node.edges.get(char)
            if index == last:
                if child is None or child is DEAD_END:
                    node.edges[char] = DEAD_END
                else:
                    child.open_end = True
                break
            if child is None:
                child = node.edges[char] = Branch()
            elif child is DEAD_END:
                # A shorter keyword ends here; keep it while extending
                child = node.edges[char] = Branch(open_end=True)
            node = child
        return self

    def lookup(self, word: str) -> Optional[List[Branch]]:
        """
        Find the access path of a keyword.

        Args:
            word: Keyword to look up (non-empty string)

        Returns:
            The Branch nodes walked from the root, where path[i] holds the
            edge for word[i], or None if word is not a keyword

        Raises:
            InvalidInput: If word is empty or not a string
        """
        ensure_string(word)

        node = self.root
        path: List[Branch] = []
        for char in word:
            if node is DEAD_END:
                return None
            path.append(node)
            node = node.edges.get(char)
            if node is None:
                return None
        return path if completes(node) else None

    def contains(self, word: str) -> bool:
        """Check if word is a keyword."""
        return self.lookup(word) is not None

    def remove(self, word: str) -> "Trie":
        """
        Remove a keyword, pruning nodes no other keyword needs.

        Removing an absent keyword is a no-op.

        Args:
            word: Keyword to remove (non-empty string)

        Returns:
            The trie, for chaining

        Raises:
            InvalidInput: If word is empty or not a string
        """
        path = self.lookup(word)
        if path is None:
            logger.debug(f"remove: {word!r} is not a keyword")
            return self

        target = path[-1].edges[word[-1]]
        if target is not DEAD_END:
            # Longer keywords still pass through this node
            target.open_end = False
            return self

        for depth in range(len(path) - 1, -1, -1):
            node = path[depth]
            del node.edges[word[depth]]
            if node.edges or depth == 0:
                break
            if node.open_end:
                path[depth - 1].edges[word[depth - 1]] = DEAD_END
                break
        return self

    def node_count(self) -> int:
        """Number of Branch nodes in the trie, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in node.edges.values() if child is not DEAD_END)
        return count

    def dump(self, node: Optional[Edge] = None) -> str:
        """
        Render the node graph for debugging.

        One edge per line, indented one space per level. A Branch edge is
        followed by its children, a DEAD_END edge shows "0", and an open-end
        flag is listed as "$$: true" ahead of the node's edges. Passing
        DEAD_END itself renders "0".
        """
        if node is DEAD_END:
            return str(DEAD_END.value)

        lines: List[str] = []

        def walk(branch: Branch, depth: int) -> None:
            indent = " " * depth
            if branch.open_end:
                lines.append(f"{indent}{OPEN_END}: true")
            for char, child in branch.edges.items():
                if child is DEAD_END:
                    lines.append(f"{indent}{char}: {DEAD_END.value}")
                else:
                    lines.append(f"{indent}{char}:")
                    walk(child, depth + 1)

        walk(self.root if node is None else node, 0)
        return "\n".join(lines)

    # =========================================================================
    # Scanning
    # =========================================================================

    def scan(self, text: str) -> Iterator[Match]:
        """
        Iterate over keyword matches in text.

        Stop iterating to stop the scan.

        Raises:
            InvalidInput: If text is empty or not a string
        """
        ensure_string(text, "text")
        return scan(self.root, text, self.symbolic)

    def exec(self, text: str, callback: Callable[[str, int], Optional[bool]]) -> None:
        """
        Call callback(word, end) for every match; returning False stops the scan.
        """
        for match in self.scan(text):
            if callback(match.word, match.end) is False:
                return

    def check(self, text: str) -> Optional[str]:
        """
        Return the first keyword found in text, or None.

        The scan stops at the first match.
        """
        for match in self.scan(text):
            return match.word
        return None

    def density(self, text: str) -> Dict[str, int]:
        """
        Count keyword occurrences in text.

        Overlapping matches are all counted, e.g. both "关键" and "关键字"
        in "关键字".

        Returns:
            Mapping of keyword to occurrence count (empty if none)
        """
        result: Dict[str, int] = defaultdict(int)
        for match in self.scan(text):
            result[match.word] += 1
        return dict(result)

    def replace(self, text: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
        """
        Mask every matched character in text with placeholder.

        When a match overlaps the previous one, only its characters past
        the already masked run are masked, so a one-character placeholder
        keeps the text length.

        Args:
            text: Text to mask
            placeholder: Replacement for each matched character (default "*")

        Returns:
            The masked text

        Raises:
            InvalidInput: If text is empty or either argument is not a string
        """
        if not placeholder:
            placeholder = DEFAULT_PLACEHOLDER
        elif not isinstance(placeholder, str):
            raise InvalidInput(f"placeholder must be a string, got {type(placeholder).__name__}")

        parts: List[str] = []
        masked_until = -1
        for match in self.scan(text):
            start = match.start
            if start > masked_until:
                parts.append(text[masked_until + 1:start])
                width = len(match.word)
            else:
                width = match.end - masked_until
            parts.append(placeholder * max(width, 0))
            masked_until = max(masked_until, match.end)
        parts.append(text[masked_until + 1:])
        return "".join(parts)
