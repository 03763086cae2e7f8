"""Site generation: directories, pages, assets and link checks."""

from .assets import clone_static_assets
from .builder import ASSETS_DIRNAME, DEFAULT_ASSETS_DIR, BuildResult, SiteBuilder, resolve_assets_dir
from .errors import FileSystemError
from .links import LinkValidator

__all__ = [
    "ASSETS_DIRNAME",
    "DEFAULT_ASSETS_DIR",
    "BuildResult",
    "FileSystemError",
    "LinkValidator",
    "SiteBuilder",
    "clone_static_assets",
    "resolve_assets_dir",
]
