"""Import selection for generated files."""

from __future__ import annotations

import re
from typing import Iterable, List, Set

from ..models import ImportSpec

_MAJOR_VERSION = re.compile(r"^v\d+$")
_GOPKG_VERSION = re.compile(r"\.v\d+$")


def package_name(spec: ImportSpec) -> str:
    """Identifier an import is referenced by inside the importing file."""
    if spec.alias:
        return spec.alias
    segments = [segment for segment in spec.path.split("/") if segment]
    if not segments:
        return ""
    name = segments[-1]
    if _MAJOR_VERSION.match(name) and len(segments) > 1:
        name = segments[-2]
    name = _GOPKG_VERSION.sub("", name)
    if name.startswith("go-"):
        name = name[3:]
    if name.endswith("-go"):
        name = name[:-3]
    return name.replace("-", "_")


def _is_referenced(name: str, type_texts: Iterable[str]) -> bool:
    pattern = re.compile(rf"(?<![\w.]){re.escape(name)}\.")
    return any(pattern.search(text) for text in type_texts)


def select_imports(imports: Iterable[ImportSpec], type_texts: Iterable[str]) -> List[ImportSpec]:
    """Keep the imports whose package qualifier occurs in ``type_texts``.

    Blank and dot imports are never kept: nothing in a type expression can
    refer to them by name. Order follows the source file; duplicates are
    dropped.
    """
    texts = list(type_texts)
    selected: List[ImportSpec] = []
    seen: Set[ImportSpec] = set()
    for spec in imports:
        if spec in seen or spec.alias in {"_", "."}:
            continue
        name = package_name(spec)
        if name and _is_referenced(name, texts):
            selected.append(spec)
            seen.add(spec)
    return selected


def format_import(spec: ImportSpec) -> str:
    if spec.alias:
        return f'{spec.alias} "{spec.path}"'
    return f'"{spec.path}"'


__all__ = ["format_import", "package_name", "select_imports"]
