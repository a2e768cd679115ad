"""Error taxonomy for goboilr runs."""

from __future__ import annotations

from pathlib import Path


class GoBoilrError(RuntimeError):
    """Base class for every failure that aborts a generation run."""


class ConfigurationError(GoBoilrError):
    """Raised when no input file can be resolved or the config file is invalid."""


class PathResolutionError(GoBoilrError):
    """Raised when the input path cannot be made absolute."""


class ParseError(GoBoilrError):
    """Raised when the input file cannot be read or is not valid Go source."""

    def __init__(
        self,
        path: Path | str,
        detail: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.path = Path(path)
        self.detail = detail
        self.line = line
        self.column = column
        location = str(self.path)
        if line is not None:
            location = f"{location}:{line}"
            if column is not None:
                location = f"{location}:{column}"
        super().__init__(f"{location}: {detail}")


class GenerationError(GoBoilrError):
    """Raised when a derived file cannot be written."""

    def __init__(self, path: Path | str, mode: str, detail: str) -> None:
        self.path = Path(path)
        self.mode = mode
        self.detail = detail
        super().__init__(f"cannot write {self.path}: {detail}")


__all__ = [
    "ConfigurationError",
    "GenerationError",
    "GoBoilrError",
    "ParseError",
    "PathResolutionError",
]
