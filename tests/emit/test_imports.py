"""Tests for import selection."""

from __future__ import annotations

from goboilr.emit.imports import format_import, package_name, select_imports
from goboilr.models import ImportSpec


def test_package_name_prefers_alias() -> None:
    assert package_name(ImportSpec(path="encoding/json", alias="j")) == "j"


def test_package_name_from_path() -> None:
    assert package_name(ImportSpec(path="encoding/json")) == "json"
    assert package_name(ImportSpec(path="github.com/jackc/pgx/v5")) == "pgx"
    assert package_name(ImportSpec(path="gopkg.in/yaml.v3")) == "yaml"
    assert package_name(ImportSpec(path="github.com/mattn/go-sqlite3")) == "sqlite3"


def test_select_imports_matches_qualifiers_only() -> None:
    imports = [
        ImportSpec(path="time"),
        ImportSpec(path="net/http"),
        ImportSpec(path="example.com/timeutil"),
    ]
    selected = select_imports(imports, ["map[string]time.Duration", "mytime.Value"])
    assert selected == [ImportSpec(path="time")]


def test_select_imports_skips_blank_dot_and_duplicates() -> None:
    imports = [
        ImportSpec(path="embed", alias="_"),
        ImportSpec(path="strings", alias="."),
        ImportSpec(path="time"),
        ImportSpec(path="time"),
    ]
    assert select_imports(imports, ["time.Time", "strings.Builder"]) == [ImportSpec(path="time")]


def test_format_import() -> None:
    assert format_import(ImportSpec(path="time")) == '"time"'
    assert format_import(ImportSpec(path="encoding/json", alias="j")) == 'j "encoding/json"'
