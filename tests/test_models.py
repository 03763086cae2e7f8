"""Tests for docsite.models."""

from __future__ import annotations

import pytest

from docsite.models import Container, ElementKind, Leaf, Member, MemberKind, root
from tests._fixtures.tree_builder import TreeBuilder


def test_namespaces_propagate_when_tree_is_built_bottom_up() -> None:
    tree = TreeBuilder.nested_tree()
    leaves = {leaf.name: leaf for leaf in tree.leaves()}

    assert leaves["Helper"].namespace == ("Acme",)
    assert leaves["Helper"].depth == 1
    assert leaves["Gadget"].namespace_path == "Acme.Tools"
    assert leaves["Gadget"].depth == 2
    assert tree.depth == 0
    assert tree.path_segments == ()


def test_walk_is_pre_order() -> None:
    tree = TreeBuilder.nested_tree()
    names = [element.name for element in tree.walk()]
    assert names == ["", "Acme", "Helper", "Tools", "Gadget", "Mode"]


def test_container_rejects_type_kinds_and_empty_namespaces() -> None:
    with pytest.raises(ValueError):
        Container("Widget", ElementKind.CLASS, [Leaf("Inner", ElementKind.CLASS)])
    with pytest.raises(ValueError):
        Container("Empty", ElementKind.NAMESPACE, [])


def test_leaf_rejects_container_kinds() -> None:
    with pytest.raises(ValueError):
        Leaf("Acme", ElementKind.NAMESPACE)


def test_empty_root_is_allowed() -> None:
    empty = root()
    assert empty.is_container
    assert list(empty.leaves()) == []


def test_title_and_callable_flags() -> None:
    leaf = Leaf("Widget", ElementKind.INTERFACE)
    assert leaf.title == "Widget Interface"
    assert Member("Ctor", MemberKind.CONSTRUCTOR).is_callable
    assert not Member("Ready", MemberKind.PROPERTY).is_callable
