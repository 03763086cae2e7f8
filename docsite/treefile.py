"""Reads a symbol tree from a YAML or JSON document.

The expected shape mirrors the models::

    kind: Root
    children:
      - name: Acme
        kind: Namespace
        children:
          - name: Widget
            kind: Class
            doc: Draws a <c>Widget</c>.
            members:
              - name: Compute
                kind: Method
                parameter_types: [System.Int32]
                parameters: {count: Number of passes.}
                returns: The computed value.

Parameter order follows the ``parameters`` mapping order in the document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from .models import Container, Element, ElementKind, Leaf, Member, MemberKind


_RESERVED_SEGMENTS = (".", "..")
_PATH_SEPARATORS = ("/", "\\", "\0")


class TreeFormatError(ValueError):
    """Raised when a tree document does not describe a valid symbol tree."""


def load_tree(path: Path) -> Container:
    """Load the root container from ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TreeFormatError(f"Cannot read tree file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TreeFormatError(f"Failed to parse {Path(path).name}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise TreeFormatError("Tree document must contain a mapping at the root")
    data = dict(data)
    data.setdefault("kind", ElementKind.ROOT.value)
    data.setdefault("name", "")
    element = element_from_dict(data)
    if not isinstance(element, Container) or element.kind is not ElementKind.ROOT:
        raise TreeFormatError("Tree document root must have kind Root")
    return element


def element_from_dict(data: Mapping[str, Any], *, where: str = "root") -> Element:
    """Build an element (and its subtree) from a mapping."""
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"{where}: expected a mapping")
    name = _path_segment(_required_str(data, "name", where, allow_empty=True), where)
    where = f"{where}/{name}" if name else where
    kind = _enum(ElementKind, data.get("kind"), where)
    if not name and kind is not ElementKind.ROOT:
        raise TreeFormatError(f"{where}: 'name' must be a non-empty string")
    doc = _optional_str(data, "doc", where)

    has_children = "children" in data
    has_members = "members" in data
    if has_children and has_members:
        raise TreeFormatError(f"{where}: an element cannot have both children and members")

    try:
        if has_children or kind in (ElementKind.ROOT, ElementKind.NAMESPACE):
            children = [
                element_from_dict(child, where=where) for child in _list(data, "children", where)
            ]
            _check_unique([child.name for child in children], where)
            return Container(name, kind, children, doc_comment=doc)
        members = [_member_from_dict(item, where) for item in _list(data, "members", where)]
        return Leaf(name, kind, members, doc_comment=doc)
    except ValueError as exc:
        if isinstance(exc, TreeFormatError):
            raise
        raise TreeFormatError(f"{where}: {exc}") from exc


def _member_from_dict(data: Any, where: str) -> Member:
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"{where}: member entries must be mappings")
    name = _required_str(data, "name", where)
    where = f"{where}.{name}"
    parameters = data.get("parameters") or {}
    if not isinstance(parameters, Mapping):
        raise TreeFormatError(f"{where}: parameters must map names to comments")
    types = data.get("parameter_types") or []
    if not isinstance(types, list):
        raise TreeFormatError(f"{where}: parameter_types must be a list")
    return Member(
        name=name,
        kind=_enum(MemberKind, data.get("kind"), where),
        parameter_types=[str(item) for item in types],
        parameter_comments={str(key): "" if value is None else str(value) for key, value in parameters.items()},
        return_type=_optional_str(data, "return_type", where) or "System.Void",
        return_comment=_optional_str(data, "returns", where),
        doc_comment=_optional_str(data, "doc", where),
    )


def _enum(enum_type: Any, value: Any, where: str) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(item.value for item in enum_type)
        raise TreeFormatError(f"{where}: unknown kind '{value}' (expected one of {choices})") from None


def _required_str(data: Mapping[str, Any], key: str, where: str, *, allow_empty: bool = False) -> str:
    value = data.get(key, "" if allow_empty else None)
    if not isinstance(value, str) or (not value and not allow_empty):
        raise TreeFormatError(f"{where}: '{key}' must be a non-empty string")
    return value


def _path_segment(name: str, where: str) -> str:
    # Names become directory and file names under the output root.
    if name in _RESERVED_SEGMENTS or any(sep in name for sep in _PATH_SEPARATORS):
        raise TreeFormatError(f"{where}: element name '{name}' is not a valid path segment")
    return name


def _optional_str(data: Mapping[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TreeFormatError(f"{where}: '{key}' must be a string")
    return value


def _list(data: Mapping[str, Any], key: str, where: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise TreeFormatError(f"{where}: '{key}' must be a list")
    return value


def _check_unique(names: List[str], where: str) -> None:
    seen: Dict[str, int] = {}
    for name in names:
        seen[name] = seen.get(name, 0) + 1
    duplicates = sorted(name for name, count in seen.items() if count > 1)
    if duplicates:
        raise TreeFormatError(f"{where}: duplicate element name(s): {', '.join(duplicates)}")


__all__ = ["TreeFormatError", "element_from_dict", "load_tree"]
