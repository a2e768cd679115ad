"""Code emission engine for accessor and constructor files."""

from .engine import EmissionEngine, EmitMode, emit

__all__ = ["EmissionEngine", "EmitMode", "emit"]
