"""Identifier helpers used when deriving generated names."""

from __future__ import annotations

GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)


def capitalize(value: str) -> str:
    if not value:
        return ""
    return value[0].upper() + value[1:]


def lower_first(value: str) -> str:
    if not value:
        return ""
    return value[0].lower() + value[1:]


def argument_name(field_name: str) -> str:
    """Parameter identifier for a field; keywords get a trailing underscore."""
    name = lower_first(field_name)
    if name in GO_KEYWORDS:
        return name + "_"
    return name


def extract_embedded_name(type_text: str) -> str:
    """Field name Go assigns to an embedded type (``*pkg.Base`` -> ``Base``)."""
    name = type_text[1:] if type_text.startswith("*") else type_text
    name, _, _ = name.partition("[")
    _, _, tail = name.rpartition(".")
    return tail


__all__ = [
    "GO_KEYWORDS",
    "argument_name",
    "capitalize",
    "extract_embedded_name",
    "lower_first",
]
