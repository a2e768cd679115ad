"""Input resolution and configuration loading (.goboilr.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

from .errors import ConfigurationError, PathResolutionError

CONFIG_FILENAME = ".goboilr.yml"
INPUT_ENV_VAR = "GOFILE"


@dataclass
class OutputConfig:
    """Suffixes appended to the input base name for generated files."""

    accessors_suffix: str = "_accessors"
    constructors_suffix: str = "_constructors"


@dataclass
class GoBoilrConfig:
    """Settings read from .goboilr.yml next to the input file."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    source: Optional[Path] = None


@dataclass(frozen=True)
class OutputPaths:
    """Destinations derived for one input file."""

    accessors: Path
    constructors: Path


def resolve_input(
    file_flag: Optional[str], getenv: Callable[[str], Optional[str]] = os.environ.get
) -> Path:
    """Return the absolute input path from the flag, falling back to ``$GOFILE``."""
    target = file_flag or getenv(INPUT_ENV_VAR) or ""
    if not target:
        raise ConfigurationError(
            f"no input file specified; use --file or run via 'go generate' (${INPUT_ENV_VAR})"
        )
    try:
        return Path(target).expanduser().resolve()
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(f"cannot resolve {target}: {exc}") from exc


def derive_output_paths(input_path: Path, output: OutputConfig | None = None) -> OutputPaths:
    output = output or OutputConfig()
    base = input_path.stem
    directory = input_path.parent
    suffix = input_path.suffix or ".go"
    return OutputPaths(
        accessors=directory / f"{base}{output.accessors_suffix}{suffix}",
        constructors=directory / f"{base}{output.constructors_suffix}{suffix}",
    )


def load_config(config_path: Path) -> GoBoilrConfig:
    """Load configuration from a directory or an explicit config file path."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return GoBoilrConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file.name} must contain a mapping at the root")

    output = OutputConfig()
    output_data = data.get("output")
    if output_data is not None and not isinstance(output_data, dict):
        raise ConfigurationError(f"{config_file.name}: 'output' must be a mapping")
    for key in ("accessors_suffix", "constructors_suffix"):
        if output_data and key in output_data:
            setattr(output, key, _as_suffix(output_data[key], key, config_file))

    if output.accessors_suffix == output.constructors_suffix:
        raise ConfigurationError(
            f"{config_file.name}: accessors_suffix and constructors_suffix must differ"
        )

    return GoBoilrConfig(root=root, output=output, source=config_file)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_suffix(value: Any, key: str, path: Path) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"{path.name}: output.{key} must be a non-empty string")
    if "/" in value or "\\" in value or value in {".", ".."}:
        raise ConfigurationError(f"{path.name}: output.{key} must not contain path separators")
    return value


__all__ = [
    "CONFIG_FILENAME",
    "GoBoilrConfig",
    "INPUT_ENV_VAR",
    "OutputConfig",
    "OutputPaths",
    "derive_output_paths",
    "load_config",
    "resolve_input",
]
