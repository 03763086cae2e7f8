"""Configuration loading for docsite (.docsite.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .templating import PLACEHOLDER_POLICIES

CONFIG_FILENAME = ".docsite.yml"
DEFAULT_OUTPUT_DIR = "site"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SiteConfig:
    """Represents the settings defined in .docsite.yml."""

    root: Path
    output_dir: Path
    templates_dir: Optional[Path] = None
    assets_dir: Optional[Path] = None
    placeholders: str = "empty"
    anchor_hash: str = "sha256"
    skip_invalid_members: bool = False
    validate_links: bool = True


def default_config(root: Path) -> SiteConfig:
    return SiteConfig(root=root, output_dir=root / DEFAULT_OUTPUT_DIR)


def load_config(config_path: Path) -> SiteConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return default_config(root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output_dir = _as_path(root, data.get("output_dir"), "output_dir") or root / DEFAULT_OUTPUT_DIR
    templates_dir = _as_path(root, data.get("templates_dir"), "templates_dir")
    assets_dir = _as_path(root, data.get("assets_dir"), "assets_dir")

    placeholders = _as_str(data.get("placeholders")) or "empty"
    if placeholders not in PLACEHOLDER_POLICIES:
        raise ConfigError(
            f"placeholders must be one of {', '.join(PLACEHOLDER_POLICIES)}, got '{placeholders}'"
        )

    return SiteConfig(
        root=root,
        output_dir=output_dir,
        templates_dir=templates_dir,
        assets_dir=assets_dir,
        placeholders=placeholders,
        anchor_hash=_as_str(data.get("anchor_hash")) or "sha256",
        skip_invalid_members=_as_bool(data.get("skip_invalid_members"), "skip_invalid_members", False),
        validate_links=_as_bool(data.get("validate_links"), "validate_links", True),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path(root: Path, value: Any, key: str) -> Optional[Path]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty path string")
    return (root / Path(value).expanduser()).resolve()


def _as_bool(value: Any, key: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"{key} must be a boolean")


__all__ = ["CONFIG_FILENAME", "ConfigError", "SiteConfig", "default_config", "load_config"]
