"""Source model builder for annotated Go files."""

from .builder import SourceModelBuilder, build

__all__ = ["SourceModelBuilder", "build"]
