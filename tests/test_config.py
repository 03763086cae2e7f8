"""Tests for docsite.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsite.config import ConfigError, SiteConfig, load_config
from docsite.sitegen import resolve_assets_dir


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SiteConfig)
    assert config.root == tmp_path.resolve()
    assert config.output_dir == tmp_path.resolve() / "site"
    assert config.templates_dir is None
    assert config.placeholders == "empty"
    assert config.anchor_hash == "sha256"
    assert config.skip_invalid_members is False
    assert config.validate_links is True


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".docsite.yml"
    config_file.write_text(
        """
output_dir: build/html
templates_dir: docs/templates
placeholders: verbatim
anchor_hash: sha1
skip_invalid_members: yes
validate_links: false
""",
        encoding="utf-8",
    )

    config = load_config(config_file)
    root = tmp_path.resolve()

    assert config.output_dir == root / "build" / "html"
    assert config.templates_dir == root / "docs" / "templates"
    assert config.assets_dir is None
    assert config.placeholders == "verbatim"
    assert config.anchor_hash == "sha1"
    assert config.skip_invalid_members is True
    assert config.validate_links is False


def test_load_config_rejects_bad_values(tmp_path: Path) -> None:
    config_file = tmp_path / ".docsite.yml"

    config_file.write_text("placeholders: loud\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)

    config_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)

    config_file.write_text("validate_links: sometimes\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)

    config_file.write_text("output_dir: [a, b]\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    config_file = tmp_path / ".docsite.yml"
    config_file.write_text("output_dir: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_assets_dir_resolution(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    config = SiteConfig(root=tmp_path, output_dir=tmp_path / "out", templates_dir=templates)
    assert resolve_assets_dir(config) is None

    (templates / "assets").mkdir(parents=True)
    assert resolve_assets_dir(config) == templates / "assets"

    explicit = tmp_path / "static"
    config.assets_dir = explicit
    assert resolve_assets_dir(config) == explicit
