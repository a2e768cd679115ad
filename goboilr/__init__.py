"""Accessor and constructor generation for annotated Go structs."""

from .emit import EmissionEngine, EmitMode, emit
from .models import FieldModel, ImportSpec, ParsedFile, StructModel
from .parsing import SourceModelBuilder, build

__version__ = "0.1.0"

__all__ = [
    "EmissionEngine",
    "EmitMode",
    "FieldModel",
    "ImportSpec",
    "ParsedFile",
    "SourceModelBuilder",
    "StructModel",
    "build",
    "emit",
]
