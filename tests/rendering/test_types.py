"""Tests for type-name normalization."""

from __future__ import annotations

from docsite.rendering import resolve_type


def test_primitive_aliases() -> None:
    assert resolve_type("System.Int32") == "int"
    assert resolve_type("System.String") == "string"
    assert resolve_type("System.Byte") == "byte"
    assert resolve_type("System.Int64") == "long"
    assert resolve_type("System.Boolean") == "bool"


def test_generic_delimiters_become_entities_after_aliasing() -> None:
    raw = "System.Collections.Generic.Dictionary{System.String,System.Int32}"
    assert resolve_type(raw) == "System.Collections.Generic.Dictionary&lt;string,int&gt;"


def test_only_whole_type_names_are_aliased() -> None:
    assert resolve_type("System.StringComparison") == "System.StringComparison"
    assert resolve_type("My.System.Int32") == "My.System.Int32"
    assert resolve_type("System.Int32[]") == "int[]"


def test_unknown_types_pass_through_escaped() -> None:
    assert resolve_type("Acme.Widget") == "Acme.Widget"
    assert resolve_type("Acme.A&B") == "Acme.A&amp;B"
