"""Canonical rendering of Go type expressions from tree-sitter nodes.

The output follows the spelling ``gofmt`` uses for types: no spaces inside
brackets, ``", "`` between list items, a single space between a function's
parameters and its result. Comments inside a type are dropped. Inline
struct and interface bodies are rendered on one line with ``"; "``
separators so the text can be pasted into a parameter list unchanged.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Tuple

from tree_sitter import Node

from .tree_sitter import named_children, node_text

_WHITESPACE = re.compile(r"\s+")


class TypePrinter:
    """Renders type nodes of a single source buffer."""

    def __init__(self, source_bytes: bytes) -> None:
        self._source = source_bytes
        self._handlers: Dict[str, Callable[[Node], str]] = {
            "qualified_type": self._qualified,
            "pointer_type": self._pointer,
            "slice_type": self._slice,
            "array_type": self._array,
            "map_type": self._map,
            "channel_type": self._channel,
            "function_type": self._function,
            "parameter_list": self._parameters,
            "parameter_declaration": self._parameter,
            "variadic_parameter_declaration": self._variadic_parameter,
            "generic_type": self._generic,
            "type_arguments": self._type_arguments,
            "type_elem": self._type_elem,
            "constraint_elem": self._type_elem,
            "type_constraint": self._type_elem,
            "parenthesized_type": self._parenthesized,
            "negated_type": self._negated,
            "struct_type": self._struct,
            "field_declaration": self._field,
            "interface_type": self._interface,
            "method_elem": self._method,
            "method_spec": self._method,
        }

    def render(self, node: Node) -> str:
        handler = self._handlers.get(node.type)
        if handler is not None:
            return handler(node)
        return self._flat(node)

    def _flat(self, node: Node) -> str:
        return _WHITESPACE.sub(" ", node_text(node, self._source)).strip()

    def _only_child(self, node: Node) -> Node:
        children = list(named_children(node))
        return children[-1]

    def _qualified(self, node: Node) -> str:
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        return f"{self._flat(package)}.{self._flat(name)}"

    def _pointer(self, node: Node) -> str:
        return "*" + self.render(self._only_child(node))

    def _slice(self, node: Node) -> str:
        return "[]" + self.render(node.child_by_field_name("element"))

    def _array(self, node: Node) -> str:
        length = self._flat(node.child_by_field_name("length"))
        return f"[{length}]" + self.render(node.child_by_field_name("element"))

    def _map(self, node: Node) -> str:
        key = self.render(node.child_by_field_name("key"))
        value = self.render(node.child_by_field_name("value"))
        return f"map[{key}]{value}"

    def _channel(self, node: Node) -> str:
        value = self.render(node.child_by_field_name("value"))
        tokens = [child.type for child in node.children if not child.is_named]
        if tokens[:2] == ["<-", "chan"]:
            return f"<-chan {value}"
        if tokens[:2] == ["chan", "<-"]:
            return f"chan<- {value}"
        return f"chan {value}"

    def _function(self, node: Node) -> str:
        rendered = "func" + self.render(node.child_by_field_name("parameters"))
        return rendered + self._result(node)

    def _result(self, node: Node) -> str:
        result = node.child_by_field_name("result")
        if result is None:
            return ""
        return " " + self.render(result)

    def _parameters(self, node: Node) -> str:
        items = [self.render(child) for child in named_children(node)]
        return "(" + ", ".join(items) + ")"

    def _parameter(self, node: Node) -> str:
        names = [self._flat(child) for child in node.children_by_field_name("name")]
        rendered = self.render(node.child_by_field_name("type"))
        if names:
            return ", ".join(names) + " " + rendered
        return rendered

    def _variadic_parameter(self, node: Node) -> str:
        name = node.child_by_field_name("name")
        rendered = "..." + self.render(node.child_by_field_name("type"))
        if name is not None:
            return f"{self._flat(name)} {rendered}"
        return rendered

    def _generic(self, node: Node) -> str:
        base = self.render(node.child_by_field_name("type"))
        return base + self.render(node.child_by_field_name("type_arguments"))

    def _type_arguments(self, node: Node) -> str:
        items = [self.render(child) for child in named_children(node)]
        return "[" + ", ".join(items) + "]"

    def _type_elem(self, node: Node) -> str:
        return " | ".join(self.render(child) for child in named_children(node))

    def _parenthesized(self, node: Node) -> str:
        return "(" + self.render(self._only_child(node)) + ")"

    def _negated(self, node: Node) -> str:
        return "~" + self.render(self._only_child(node))

    def _struct(self, node: Node) -> str:
        field_list = self._only_child(node)
        fields = [
            self.render(child)
            for child in named_children(field_list)
            if child.type == "field_declaration"
        ]
        if not fields:
            return "struct{}"
        return "struct{ " + "; ".join(fields) + " }"

    def _field(self, node: Node) -> str:
        names = [self._flat(child) for child in node.children_by_field_name("name")]
        parts: List[str] = []
        if names:
            parts.append(", ".join(names))
            parts.append(self.render(node.child_by_field_name("type")))
        else:
            parts.append(self.render_embedded(node))
        tag = node.child_by_field_name("tag")
        if tag is not None:
            parts.append(node_text(tag, self._source))
        return " ".join(parts)

    def render_embedded(self, field_node: Node) -> str:
        """Render the type of an embedded field, keeping its ``*`` marker."""
        rendered = self.render(field_node.child_by_field_name("type"))
        if any(child.type == "*" for child in field_node.children):
            return "*" + rendered
        return rendered

    def _interface(self, node: Node) -> str:
        elements = [self.render(child) for child in named_children(node)]
        if not elements:
            return "interface{}"
        return "interface{ " + "; ".join(elements) + " }"

    def _method(self, node: Node) -> str:
        name = self._flat(node.child_by_field_name("name"))
        rendered = name + self.render(node.child_by_field_name("parameters"))
        return rendered + self._result(node)

    def render_type_parameters(self, node: Node) -> Tuple[str, str]:
        """Return ``("[K comparable, V any]", "[K, V]")`` for a type parameter list."""
        declared: List[str] = []
        names: List[str] = []
        for child in named_children(node):
            if child.type != "type_parameter_declaration":
                continue
            group = [self._flat(name) for name in child.children_by_field_name("name")]
            names.extend(group)
            declared.append(", ".join(group) + " " + self.render(child.child_by_field_name("type")))
        return "[" + ", ".join(declared) + "]", "[" + ", ".join(names) + "]"


__all__ = ["TypePrinter"]
