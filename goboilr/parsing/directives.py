"""Doc comment handling for ``gen:`` markers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List

from tree_sitter import Node

from .tree_sitter import node_text

CONSTRUCTOR_MARKER = "gen:new"
BUILDER_MARKER = "gen:builder"

_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.:/-]*")


@dataclass(frozen=True)
class GroupDirectives:
    """Markers found in the doc block of a type declaration group."""

    constructor: bool = False
    builder: bool = False


def comment_tokens(comment: str) -> List[str]:
    """Split a ``//`` or ``/* */`` comment into word-like tokens."""
    text = comment.strip()
    if text.startswith("//"):
        text = text[2:]
    elif text.startswith("/*"):
        text = text[2:]
        if text.endswith("*/"):
            text = text[:-2]
    return [token.rstrip(".:") or token for token in _TOKEN_PATTERN.findall(text)]


def scan_markers(comments: Iterable[str]) -> GroupDirectives:
    tokens: FrozenSet[str] = frozenset(
        token for comment in comments for token in comment_tokens(comment)
    )
    return GroupDirectives(
        constructor=CONSTRUCTOR_MARKER in tokens,
        builder=BUILDER_MARKER in tokens,
    )


def doc_comments(declaration: Node, source_bytes: bytes) -> List[str]:
    """Return the comment group attached to ``declaration`` as its documentation.

    The group is the run of comments ending on the line directly above the
    declaration, each separated by at most one line break from the next. A
    comment trailing code on the same line belongs to that code instead.
    """
    collected: List[str] = []
    next_row = declaration.start_point[0]
    sibling = declaration.prev_named_sibling
    while sibling is not None and sibling.type == "comment":
        # A group that runs onto the declaration line is never its documentation.
        if sibling.end_point[0] == declaration.start_point[0]:
            break
        if sibling.end_point[0] < next_row - 1:
            break
        previous = sibling.prev_named_sibling
        if (
            previous is not None
            and previous.type != "comment"
            and previous.end_point[0] == sibling.start_point[0]
        ):
            break
        collected.append(node_text(sibling, source_bytes))
        next_row = sibling.start_point[0]
        sibling = previous
    collected.reverse()
    return collected


def declaration_directives(declaration: Node, source_bytes: bytes) -> GroupDirectives:
    return scan_markers(doc_comments(declaration, source_bytes))


__all__ = [
    "BUILDER_MARKER",
    "CONSTRUCTOR_MARKER",
    "GroupDirectives",
    "comment_tokens",
    "declaration_directives",
    "doc_comments",
    "scan_markers",
]
