"""Tree-sitter access for Go sources."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree


@lru_cache(maxsize=1)
def go_language() -> Language:
    return Language(tree_sitter_go.language())


def parse_source(source: bytes) -> Tree:
    """Parse Go source bytes; comments are kept as ``comment`` nodes."""
    parser = Parser(go_language())
    return parser.parse(source)


def node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def first_error(node: Node) -> Optional[Node]:
    """Return the first ERROR or MISSING node in document order, if any."""
    if not node.has_error:
        return None
    for child in node.children:
        found = first_error(child)
        if found is not None:
            return found
    if node.type == "ERROR" or node.is_missing:
        return node
    return None


def named_children(node: Node) -> Iterator[Node]:
    """Yield named children, skipping comments."""
    for child in node.named_children:
        if child.type != "comment":
            yield child


__all__ = ["first_error", "go_language", "named_children", "node_text", "parse_source"]
