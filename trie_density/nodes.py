"""
Trie node types.

An edge value is either a Branch or the DEAD_END marker. DEAD_END stands
for a keyword that ends on that edge with no longer keyword passing through
it; a Branch is allocated only where the path continues.
"""

from __future__ import annotations

from typing import Dict, Union

from trie_density.constants import DEAD_END, Terminal


class Branch:
    """Node with character edges, optionally completing a keyword itself."""

    __slots__ = ("edges", "open_end")

    def __init__(self, open_end: bool = False):
        self.edges: Dict[str, Union[Branch, Terminal]] = {}
        self.open_end: bool = open_end

    def __repr__(self) -> str:
        return f"Branch({''.join(self.edges)!r}, open_end={self.open_end})"


Edge = Union[Branch, Terminal]


def completes(edge: Edge) -> bool:
    """True if reaching this edge spells a complete keyword."""
    return edge is DEAD_END or edge.open_end
