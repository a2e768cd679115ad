"""Core data models shared by the parser and the emitter."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ImportSpec:
    """Single import line of the source file."""

    path: str
    alias: Optional[str] = None


@dataclass(frozen=True)
class FieldModel:
    """One struct field as seen by the generators."""

    name: str
    arg_name: str
    type: str
    directive: str = ""
    method_name: str = ""
    has_getter: bool = False
    has_setter: bool = False
    has_validator: bool = False

    @property
    def has_accessors(self) -> bool:
        return bool(self.directive)


@dataclass(frozen=True)
class StructModel:
    """Struct declaration annotated for generation."""

    name: str
    generate_constructor: bool = False
    generate_builder: bool = False
    all_fields: Tuple[FieldModel, ...] = field(default_factory=tuple)
    accessor_fields: Tuple[FieldModel, ...] = field(default_factory=tuple)
    # Type parameter list as declared ("[K comparable, V any]") and as
    # instantiated by receivers and literals ("[K, V]"). Empty when not generic.
    type_params: str = ""
    type_args: str = ""

    @property
    def type_ref(self) -> str:
        return self.name + self.type_args


@dataclass(frozen=True)
class ParsedFile:
    """Structural view of one Go source file."""

    package_name: str
    imports: Tuple[ImportSpec, ...] = field(default_factory=tuple)
    declarations: Tuple[StructModel, ...] = field(default_factory=tuple)
