"""Sitewide navigation menu."""

from __future__ import annotations

from typing import List

from markupsafe import Markup

from ..models import Container, Element, Leaf

_INDENT = "    "
PARENT_SEGMENT = "../"


def relative_prefix(depth: int) -> str:
    """Path from a page ``depth`` directories deep back to the output root."""
    if depth < 0:
        raise ValueError("depth must be non-negative")
    return PARENT_SEGMENT * depth


def page_href(leaf: Element, current_depth: int) -> str:
    """Link to ``leaf``'s page from a page ``current_depth`` levels deep."""
    segments = list(leaf.namespace) + [f"{leaf.name}.html"]
    return relative_prefix(current_depth) + "/".join(segments)


def build_menu(root: Container, current_depth: int) -> Markup:
    """Render the tree as nested lists linking every type page.

    Links are relative to the page embedding the menu, which sits
    ``current_depth`` directories below the output root.
    """
    lines: List[str] = ["<ul>"]
    for child in root.children:
        _append_item(lines, child, current_depth, _INDENT)
    lines.append("</ul>")
    return Markup("\n".join(lines) + "\n")


def _append_item(lines: List[str], element: Element, current_depth: int, indent: str) -> None:
    if isinstance(element, Container):
        lines.append(indent + Markup("<li>{0}").format(element.name))
        lines.append(indent + _INDENT + "<ul>")
        for child in element.children:
            _append_item(lines, child, current_depth, indent + _INDENT * 2)
        lines.append(indent + _INDENT + "</ul>")
        lines.append(indent + "</li>")
    elif isinstance(element, Leaf):
        lines.append(
            indent
            + Markup('<li><a href="{0}">{1}</a></li>').format(
                page_href(element, current_depth), element.name
            )
        )


__all__ = ["PARENT_SEGMENT", "build_menu", "page_href", "relative_prefix"]
