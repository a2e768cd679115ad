"""Renders the parsed model into derived Go files."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..errors import GenerationError
from ..logging import get_logger
from ..models import FieldModel, ParsedFile, StructModel
from ..parsing.naming import capitalize, lower_first
from .imports import format_import, select_imports
from .writer import write_atomic

GENERATOR_NAME = "goboilr"
HEADER = f"// Code generated by {GENERATOR_NAME}. DO NOT EDIT."
EDITABLE_HEADER = f"// Code generated by {GENERATOR_NAME}."


class EmitMode(str, Enum):
    """Which derived file a call to :meth:`EmissionEngine.emit` produces."""

    ACCESSORS = "accessors"
    CONSTRUCTORS = "constructors"


def pick_identifier(candidates: Sequence[str], taken: Iterable[str]) -> str:
    """Return the first candidate not in ``taken``, suffixing ``_`` if all clash."""
    used = set(taken)
    for candidate in candidates:
        if candidate not in used:
            return candidate
    fallback = candidates[-1]
    while fallback in used:
        fallback += "_"
    return fallback


class EmissionEngine:
    """Writes accessor or constructor files for a :class:`ParsedFile`."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self.logger = get_logger("emit")

    def emit(self, parsed: ParsedFile, destination: Path | str, mode: EmitMode | str) -> Path:
        """Render ``mode`` for ``parsed`` and atomically write it to ``destination``."""
        mode = EmitMode(mode)
        path = Path(destination)
        content = self.render(parsed, mode)
        try:
            changed = write_atomic(path, content)
        except OSError as exc:
            raise GenerationError(path, mode.value, exc.strerror or str(exc)) from exc
        if changed:
            self.logger.info("Wrote %s (%s)", path, mode.value)
        else:
            self.logger.info("%s already up to date (%s)", path, mode.value)
        return path

    def render(self, parsed: ParsedFile, mode: EmitMode | str) -> str:
        mode = EmitMode(mode)
        if mode is EmitMode.ACCESSORS:
            structs = [self._accessor_view(struct) for struct in parsed.declarations]
            structs = [view for view in structs if view["fields"]]
            fields = [field for view in structs for field in view["fields"]]
            has_hooks = any(field.has_validator for field in fields)
            header = EDITABLE_HEADER if has_hooks else HEADER
            type_texts = [field.type for field in fields]
            template_name = "accessors.go.j2"
        else:
            structs = [
                self._constructor_view(struct)
                for struct in parsed.declarations
                if struct.generate_constructor or struct.generate_builder
            ]
            fields = [field for view in structs for field in view["fields"]]
            header = HEADER
            # Constraints of generic structs are repeated in the constructor file.
            type_texts = [field.type for field in fields]
            type_texts.extend(str(view["type_params"]) for view in structs)
            template_name = "constructors.go.j2"

        imports = select_imports(parsed.imports, type_texts)
        self.logger.debug(
            "Rendering %s for %d structs with %d of %d imports",
            mode.value,
            len(structs),
            len(imports),
            len(parsed.imports),
        )
        template = self._env.get_template(template_name)
        rendered = template.render(
            header=header,
            package=parsed.package_name,
            imports=[format_import(spec) for spec in imports],
            structs=structs,
        )
        return rendered.rstrip("\n") + "\n"

    @staticmethod
    def _accessor_view(struct: StructModel) -> Dict[str, object]:
        fields = [
            field
            for field in struct.accessor_fields
            if field.has_getter or field.has_setter or field.has_validator
        ]
        taken = [field.arg_name for field in fields if field.has_setter or field.has_validator]
        initial = lower_first(struct.name[:1])
        receiver = pick_identifier(
            [initial, lower_first(struct.name)], taken + _type_parameter_names(struct)
        )
        return {
            "name": struct.name,
            "type_ref": struct.type_ref,
            "receiver": receiver,
            "fields": fields,
        }

    @staticmethod
    def _constructor_view(struct: StructModel) -> Dict[str, object]:
        fields: List[FieldModel] = list(struct.all_fields)
        arg_names = [field.arg_name for field in fields]
        parameters = ", ".join(f"{field.arg_name} {field.type}" for field in fields)
        literal = f"&{struct.type_ref}{{{', '.join(arg_names)}}}"
        builder_name = f"{struct.name}Builder"
        builder_fields = [
            {
                "name": field.name,
                "method_name": capitalize(field.name),
                "arg_name": field.arg_name,
                "type": field.type,
            }
            for field in fields
        ]
        return {
            "name": struct.name,
            "type_params": struct.type_params,
            "type_ref": struct.type_ref,
            "constructor": struct.generate_constructor,
            "builder": struct.generate_builder,
            "parameters": parameters,
            "literal": literal,
            "builder_name": builder_name,
            "builder_ref": builder_name + struct.type_args,
            "builder_receiver": pick_identifier(
                ["b", "builder"], arg_names + _type_parameter_names(struct)
            ),
            "fields": fields,
            "builder_fields": builder_fields,
        }


def _type_parameter_names(struct: StructModel) -> List[str]:
    if not struct.type_args:
        return []
    return [name.strip() for name in struct.type_args[1:-1].split(",")]


def emit(parsed: ParsedFile, destination: Path | str, mode: EmitMode | str) -> Path:
    """Write the ``mode`` file for ``parsed`` to ``destination``."""
    return EmissionEngine().emit(parsed, destination, mode)


__all__ = ["EDITABLE_HEADER", "EmissionEngine", "EmitMode", "HEADER", "emit", "pick_identifier"]
