"""Builds the structural model of annotated Go declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from tree_sitter import Node

from ..errors import ParseError
from ..logging import get_logger
from ..models import FieldModel, ImportSpec, ParsedFile, StructModel
from .directives import GroupDirectives, declaration_directives
from .naming import argument_name, capitalize, extract_embedded_name
from .printer import TypePrinter
from .tags import lookup_directive, unquote
from .tree_sitter import first_error, named_children, node_text, parse_source


def create_field(name: str, type_text: str, directive: str) -> FieldModel:
    if not directive:
        return FieldModel(name=name, arg_name=argument_name(name), type=type_text)
    return FieldModel(
        name=name,
        arg_name=argument_name(name),
        type=type_text,
        directive=directive,
        method_name=capitalize(name),
        has_getter="get" in directive,
        has_setter="set" in directive,
        has_validator="val" in directive,
    )


class SourceModelBuilder:
    """Parses one Go file into a :class:`ParsedFile`."""

    def __init__(self) -> None:
        self.logger = get_logger("parsing")

    def build(self, file_path: Path | str) -> ParsedFile:
        path = Path(file_path)
        try:
            source_bytes = path.read_bytes()
        except OSError as exc:
            raise ParseError(path, f"failed to read source: {exc.strerror or exc}") from exc
        return self.build_from_bytes(source_bytes, path)

    def build_from_bytes(self, source_bytes: bytes, path: Path | str = "<source>") -> ParsedFile:
        tree = parse_source(source_bytes)
        root = tree.root_node
        if root.has_error:
            error_node = first_error(root) or root
            row, column = error_node.start_point
            detail = "missing " + error_node.type if error_node.is_missing else "syntax error"
            raise ParseError(path, detail, line=row + 1, column=column + 1)

        package_name: Optional[str] = None
        imports: List[ImportSpec] = []
        declarations: List[StructModel] = []
        printer = TypePrinter(source_bytes)

        for node in named_children(root):
            if node.type == "package_clause":
                package_name = self._package_name(node, source_bytes)
            elif node.type == "import_declaration":
                imports.extend(self._imports(node, source_bytes))
            elif node.type == "type_declaration":
                directives = declaration_directives(node, source_bytes)
                declarations.extend(
                    self._structs(node, directives, printer, source_bytes)
                )

        if not package_name:
            raise ParseError(path, "expected package clause", line=1, column=1)

        self.logger.debug(
            "Parsed %s: package %s, %d imports, %d annotated structs",
            path,
            package_name,
            len(imports),
            len(declarations),
        )
        return ParsedFile(
            package_name=package_name,
            imports=tuple(imports),
            declarations=tuple(declarations),
        )

    @staticmethod
    def _package_name(node: Node, source_bytes: bytes) -> str:
        for child in named_children(node):
            if child.type == "package_identifier":
                return node_text(child, source_bytes)
        return ""

    def _imports(self, node: Node, source_bytes: bytes) -> Iterable[ImportSpec]:
        for child in named_children(node):
            if child.type == "import_spec_list":
                yield from self._imports(child, source_bytes)
            elif child.type == "import_spec":
                path_node = child.child_by_field_name("path")
                name_node = child.child_by_field_name("name")
                import_path = unquote(node_text(path_node, source_bytes)) or ""
                alias = node_text(name_node, source_bytes) if name_node is not None else None
                yield ImportSpec(path=import_path, alias=alias)

    def _structs(
        self,
        declaration: Node,
        directives: GroupDirectives,
        printer: TypePrinter,
        source_bytes: bytes,
    ) -> Iterable[StructModel]:
        for spec in named_children(declaration):
            if spec.type != "type_spec":
                continue
            type_node = spec.child_by_field_name("type")
            if type_node is None or type_node.type != "struct_type":
                continue
            name = node_text(spec.child_by_field_name("name"), source_bytes)
            type_params = type_args = ""
            parameters = spec.child_by_field_name("type_parameters")
            if parameters is not None:
                type_params, type_args = printer.render_type_parameters(parameters)
            all_fields: List[FieldModel] = []
            accessor_fields: List[FieldModel] = []
            for field in self._fields(type_node, printer, source_bytes):
                all_fields.append(field)
                if field.has_accessors:
                    accessor_fields.append(field)
            if not all_fields:
                self.logger.debug("Skipping struct %s without fields", name)
                continue
            self.logger.debug(
                "Struct %s%s: %d fields, %d with accessors, constructor=%s, builder=%s",
                name,
                type_params,
                len(all_fields),
                len(accessor_fields),
                directives.constructor,
                directives.builder,
            )
            yield StructModel(
                name=name,
                generate_constructor=directives.constructor,
                generate_builder=directives.builder,
                all_fields=tuple(all_fields),
                accessor_fields=tuple(accessor_fields),
                type_params=type_params,
                type_args=type_args,
            )

    @staticmethod
    def _fields(
        struct_node: Node, printer: TypePrinter, source_bytes: bytes
    ) -> Iterable[FieldModel]:
        field_list = next(
            (child for child in named_children(struct_node) if child.type == "field_declaration_list"),
            None,
        )
        if field_list is None:
            return
        for declaration in named_children(field_list):
            if declaration.type != "field_declaration":
                continue
            tag_node = declaration.child_by_field_name("tag")
            directive = lookup_directive(
                node_text(tag_node, source_bytes) if tag_node is not None else None
            )
            names = declaration.children_by_field_name("name")
            if names:
                type_text = printer.render(declaration.child_by_field_name("type"))
                for name_node in names:
                    yield create_field(node_text(name_node, source_bytes), type_text, directive)
            else:
                type_text = printer.render_embedded(declaration)
                yield create_field(extract_embedded_name(type_text), type_text, directive)


def build(file_path: Path | str) -> ParsedFile:
    """Parse ``file_path`` into a :class:`ParsedFile`."""
    return SourceModelBuilder().build(file_path)


__all__ = ["SourceModelBuilder", "build", "create_field"]
