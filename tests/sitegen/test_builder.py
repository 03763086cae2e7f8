"""Tests for docsite.sitegen.builder."""

from __future__ import annotations

import hashlib
import re
from pathlib import Path

import pytest

from docsite.config import SiteConfig
from docsite.models import ElementKind, Leaf, Member, MemberKind, root
from docsite.rendering import ParameterArityMismatchError
from docsite.sitegen import FileSystemError, LinkValidator, SiteBuilder
from tests._fixtures.tree_builder import TreeBuilder


def test_widget_example_layout(tree_builder: TreeBuilder) -> None:
    builder = SiteBuilder(tree_builder.output)
    result = builder.build(TreeBuilder.widget_tree())

    page = tree_builder.output / "Acme" / "Widget.html"
    assert (tree_builder.output / "Acme").is_dir()
    assert result.pages == [page]
    html = page.read_text(encoding="utf-8")
    anchor = hashlib.sha256(b"Compute(int count)").hexdigest()
    assert f'id="{anchor}"' in html
    assert 'href="../Acme/Widget.html"' in html
    assert (tree_builder.output / "css" / "docsite.css").is_file()
    assert result.link_issues == {}


def test_directories_mirror_namespaces(tree_builder: TreeBuilder) -> None:
    builder = SiteBuilder(tree_builder.output)
    created = builder.create_directories(TreeBuilder.nested_tree())

    assert created == [
        tree_builder.output,
        tree_builder.output / "Acme",
        tree_builder.output / "Acme" / "Tools",
    ]
    # idempotent
    builder.create_directories(TreeBuilder.nested_tree())
    assert not (tree_builder.output / "Acme" / "Helper").exists()


def test_render_tree_writes_one_file_per_leaf(tree_builder: TreeBuilder) -> None:
    builder = SiteBuilder(tree_builder.output, validate_links=False)
    result = builder.build(TreeBuilder.nested_tree())

    relative = sorted(path.relative_to(tree_builder.output).as_posix() for path in result.pages)
    assert relative == ["Acme/Helper.html", "Acme/Tools/Gadget.html", "Acme/Tools/Mode.html"]
    html_files = sorted(
        path.relative_to(tree_builder.output).as_posix()
        for path in tree_builder.output.rglob("*.html")
    )
    assert html_files == relative


def test_every_generated_link_resolves(tree_builder: TreeBuilder) -> None:
    SiteBuilder(tree_builder.output, validate_links=False).build(TreeBuilder.nested_tree())

    checked = 0
    for page in tree_builder.output.rglob("*.html"):
        html = page.read_text(encoding="utf-8")
        for href in re.findall(r'href="([^"#]+\.html)"', html):
            assert (page.parent / href).resolve().is_file(), f"{page}: {href}"
            checked += 1
    assert checked == 9
    assert LinkValidator().validate_site(tree_builder.output) == {}


def test_rebuild_overwrites_pages(tree_builder: TreeBuilder) -> None:
    builder = SiteBuilder(tree_builder.output)
    builder.build(TreeBuilder.widget_tree())
    page = tree_builder.output / "Acme" / "Widget.html"
    page.write_text("stale", encoding="utf-8")

    builder.build(TreeBuilder.widget_tree())
    assert "Widget Class" in page.read_text(encoding="utf-8")


def test_arity_error_aborts_build(tree_builder: TreeBuilder) -> None:
    bad = Member("Broken", MemberKind.METHOD, parameter_types=["System.Int32"])
    tree = root(Leaf("Bad", ElementKind.CLASS, [bad]))
    with pytest.raises(ParameterArityMismatchError):
        SiteBuilder(tree_builder.output).build(tree)


def test_write_failure_is_reported(tree_builder: TreeBuilder) -> None:
    tree_builder.output.mkdir()
    (tree_builder.output / "Acme").write_text("not a directory", encoding="utf-8")
    with pytest.raises(FileSystemError):
        SiteBuilder(tree_builder.output).build(TreeBuilder.widget_tree())


def test_from_config_uses_site_templates_and_assets(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    (templates / "assets").mkdir(parents=True)
    (templates / "assets" / "site.js").write_text("// js", encoding="utf-8")
    (templates / "property.html").write_text(
        '<p id="{{ PropertyHash }}">custom {{ PropertyName }}</p>\n', encoding="utf-8"
    )
    config = SiteConfig(
        root=tmp_path,
        output_dir=tmp_path / "out",
        templates_dir=templates,
        anchor_hash="md5",
    )

    result = SiteBuilder.from_config(config).build(TreeBuilder.widget_tree())

    html = (tmp_path / "out" / "Acme" / "Widget.html").read_text(encoding="utf-8")
    assert f'<p id="{hashlib.md5(b"Ready").hexdigest()}">custom Ready</p>' in html
    assert result.assets == [tmp_path / "out" / "site.js", tmp_path / "out" / "css" / "docsite.css"]
    assert result.link_issues == {}


def test_site_assets_override_packaged_files_one_by_one(tmp_path: Path) -> None:
    assets = tmp_path / "static"
    (assets / "css").mkdir(parents=True)
    (assets / "css" / "docsite.css").write_text("body { color: red; }\n", encoding="utf-8")
    (assets / "logo.svg").write_text("<svg/>", encoding="utf-8")

    builder = SiteBuilder(tmp_path / "out", assets_dir=assets)
    result = builder.build(TreeBuilder.widget_tree())

    assert result.assets == [tmp_path / "out" / "css" / "docsite.css", tmp_path / "out" / "logo.svg"]
    css = (tmp_path / "out" / "css" / "docsite.css").read_text(encoding="utf-8")
    assert css == "body { color: red; }\n"
    assert result.link_issues == {}
