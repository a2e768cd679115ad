"""Tests for goboilr.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from goboilr.config import (
    GoBoilrConfig,
    OutputConfig,
    derive_output_paths,
    load_config,
    resolve_input,
)
from goboilr.errors import ConfigurationError, PathResolutionError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GoBoilrConfig)
    assert config.root == tmp_path.resolve()
    assert config.output == OutputConfig()
    assert config.source is None


def test_load_config_parses_output_suffixes(tmp_path: Path) -> None:
    config_file = tmp_path / ".goboilr.yml"
    config_file.write_text(
        """
output:
  accessors_suffix: "_get"
  constructors_suffix: "_new"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.output.accessors_suffix == "_get"
    assert config.output.constructors_suffix == "_new"
    assert config.source == config_file.resolve()


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text("output:\n  accessors_suffix: _acc\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.output.accessors_suffix == "_acc"
    assert config.output.constructors_suffix == "_constructors"


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".goboilr.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).output == OutputConfig()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "output: nope\n",
        "output:\n  accessors_suffix: ''\n",
        "output:\n  accessors_suffix: 3\n",
        "output:\n  constructors_suffix: sub/dir\n",
        "output:\n  accessors_suffix: _x\n  constructors_suffix: _x\n",
        "output: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    (tmp_path / ".goboilr.yml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(tmp_path)


def test_resolve_input_prefers_flag(tmp_path: Path) -> None:
    env = {"GOFILE": "from_env.go"}
    resolved = resolve_input(str(tmp_path / "flag.go"), env.get)
    assert resolved == (tmp_path / "flag.go").resolve()


def test_resolve_input_falls_back_to_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    resolved = resolve_input(None, {"GOFILE": "model.go"}.get)
    assert resolved == (tmp_path / "model.go").resolve()
    assert resolved.is_absolute()


def test_resolve_input_without_sources_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        resolve_input(None, {}.get)
    with pytest.raises(ConfigurationError):
        resolve_input("", {"GOFILE": ""}.get)


def test_derive_output_paths_places_files_next_to_input(tmp_path: Path) -> None:
    source = tmp_path / "models" / "user.go"
    paths = derive_output_paths(source)
    assert paths.accessors == tmp_path / "models" / "user_accessors.go"
    assert paths.constructors == tmp_path / "models" / "user_constructors.go"

    custom = derive_output_paths(source, OutputConfig(accessors_suffix="_a", constructors_suffix="_c"))
    assert custom.accessors.name == "user_a.go"
    assert custom.constructors.name == "user_c.go"


def test_resolve_input_wraps_resolution_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    def _loop(self, strict=False):  # type: ignore[no-untyped-def]
        raise RuntimeError("Symlink loop from 'loop.go'")

    monkeypatch.setattr(Path, "resolve", _loop)
    with pytest.raises(PathResolutionError, match="cannot resolve loop.go"):
        resolve_input("loop.go", {}.get)
