"""Struct tag parsing following the ``reflect.StructTag`` conventions."""

from __future__ import annotations

import re
from typing import Dict, Optional

DIRECTIVE_KEY = "gen"

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
}
_ESCAPE = re.compile(r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8}|[0-7]{3}|.)", re.DOTALL)


def unquote(literal: str) -> Optional[str]:
    """Decode a Go string literal; return None when it is malformed."""
    if len(literal) < 2:
        return None
    quote = literal[0]
    if quote != literal[-1] or quote not in {'"', "`"}:
        return None
    body = literal[1:-1]
    if quote == "`":
        return body.replace("\r", "")
    if "\n" in body:
        return None

    invalid = False

    def _decode(match: re.Match[str]) -> str:
        nonlocal invalid
        escape = match.group(1)
        if escape in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[escape]
        if escape[0] in "xuU":
            return chr(int(escape[1:], 16))
        if escape[0] in "01234567" and len(escape) == 3:
            return chr(int(escape, 8))
        invalid = True
        return ""

    decoded = _ESCAPE.sub(_decode, body)
    if invalid:
        return None
    # An unescaped quote inside the body means the literal was not a single string.
    if '"' in _ESCAPE.sub("", body):
        return None
    return decoded


def parse_struct_tag(tag: str) -> Dict[str, str]:
    """Split a struct tag into its ``key:"value"`` pairs.

    Parsing stops at the first malformed pair, mirroring ``StructTag.Lookup``;
    when a key repeats the first occurrence wins.
    """
    values: Dict[str, str] = {}
    rest = tag
    while rest:
        rest = rest.lstrip(" ")
        if not rest:
            break
        index = 0
        while index < len(rest) and rest[index] > " " and rest[index] not in ':"\x7f':
            index += 1
        if index == 0 or index + 1 >= len(rest) or rest[index] != ":" or rest[index + 1] != '"':
            break
        key = rest[:index]
        rest = rest[index + 1 :]

        index = 1
        while index < len(rest) and rest[index] != '"':
            if rest[index] == "\\":
                index += 1
            index += 1
        if index >= len(rest):
            break
        value = unquote(rest[: index + 1])
        rest = rest[index + 1 :]
        if value is None:
            break
        values.setdefault(key, value)
    return values


def lookup_directive(raw_tag_literal: Optional[str], key: str = DIRECTIVE_KEY) -> str:
    """Return the directive stored under ``key`` in a tag literal, or ``""``."""
    if not raw_tag_literal:
        return ""
    tag = unquote(raw_tag_literal)
    if tag is None:
        return ""
    return parse_struct_tag(tag).get(key, "")


__all__ = ["DIRECTIVE_KEY", "lookup_directive", "parse_struct_tag", "unquote"]
