"""Copies the static companion files next to the generated pages."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from ..logging import get_logger
from .errors import FileSystemError

_LOGGER = get_logger("sitegen.assets")


def clone_static_assets(assets_dir: Path | None, output_root: Path) -> List[Path]:
    """Mirror ``assets_dir`` into ``output_root`` without overwriting files.

    Returns the destination paths that were copied in this call.
    """
    if assets_dir is None or not assets_dir.is_dir():
        _LOGGER.debug("No static assets directory at %s", assets_dir)
        return []

    copied: List[Path] = []
    try:
        for source in sorted(assets_dir.rglob("*")):
            target = output_root / source.relative_to(assets_dir)
            if source.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue
            if target.exists():
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            copied.append(target)
            _LOGGER.debug("Copied asset %s", target)
    except OSError as exc:
        raise FileSystemError(f"Failed to copy static assets into {output_root}: {exc}") from exc
    return copied


__all__ = ["clone_static_assets"]
