"""Tests for the navigation menu."""

from __future__ import annotations

import re

import pytest

from docsite.models import ElementKind, Leaf, root
from docsite.rendering import build_menu, page_href, relative_prefix
from tests._fixtures.tree_builder import TreeBuilder


def test_relative_prefix_repeats_parent_segment() -> None:
    assert relative_prefix(0) == ""
    assert relative_prefix(1) == "../"
    assert relative_prefix(3) == "../../../"
    with pytest.raises(ValueError):
        relative_prefix(-1)


def test_menu_links_are_relative_to_embedding_page() -> None:
    tree = TreeBuilder.widget_tree()
    menu = build_menu(tree, 1)
    assert '<a href="../Acme/Widget.html">Widget</a>' in menu

    top = build_menu(tree, 0)
    assert '<a href="Acme/Widget.html">Widget</a>' in top


def test_menu_nests_containers() -> None:
    menu = build_menu(TreeBuilder.nested_tree(), 2)
    assert menu.startswith("<ul>\n")
    assert menu.count("<ul>") == 3
    assert menu.count("</ul>") == 3
    assert "<li>Acme" in menu
    assert "<li>Tools" in menu
    hrefs = re.findall(r'href="([^"]+)"', menu)
    assert hrefs == [
        "../../Acme/Helper.html",
        "../../Acme/Tools/Gadget.html",
        "../../Acme/Tools/Mode.html",
    ]


def test_leaf_at_root_has_no_namespace_segment() -> None:
    tree = root(Leaf("Loose", ElementKind.CLASS))
    assert page_href(tree.children[0], 0) == "Loose.html"
    assert 'href="Loose.html"' in build_menu(tree, 0)


def test_menu_escapes_names() -> None:
    tree = root(Leaf("A<B>", ElementKind.CLASS))
    assert ">A&lt;B&gt;</a>" in build_menu(tree, 0)
