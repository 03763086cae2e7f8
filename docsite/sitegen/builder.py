"""Maps the symbol tree onto directories and pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from markupsafe import Markup

from ..config import SiteConfig
from ..logging import get_logger
from ..models import Container, Element, Leaf
from ..rendering import AnchorResolver, PageRenderer, build_menu, hashlib_func
from ..templating import DEFAULT_TEMPLATES_DIR, TemplateLoader
from .assets import clone_static_assets
from .errors import FileSystemError
from .links import LinkValidator

ASSETS_DIRNAME = "assets"
DEFAULT_ASSETS_DIR = DEFAULT_TEMPLATES_DIR / ASSETS_DIRNAME


@dataclass
class BuildResult:
    """Summary of one site build."""

    output_root: Path
    directories: List[Path] = field(default_factory=list)
    pages: List[Path] = field(default_factory=list)
    assets: List[Path] = field(default_factory=list)
    link_issues: Dict[Path, List[str]] = field(default_factory=dict)


class SiteBuilder:
    """Writes one page per type into a directory tree mirroring the namespaces."""

    def __init__(
        self,
        output_root: Path,
        renderer: PageRenderer | None = None,
        *,
        assets_dir: Path | None = None,
        validate_links: bool = True,
    ) -> None:
        self.output_root = Path(output_root)
        self.renderer = renderer or PageRenderer()
        self.assets_dir = assets_dir
        self.validate_links = validate_links
        self.logger = get_logger("sitegen.builder")

    @classmethod
    def from_config(cls, config: SiteConfig) -> "SiteBuilder":
        loader = TemplateLoader(config.templates_dir, placeholders=config.placeholders)
        renderer = PageRenderer(
            loader,
            AnchorResolver(hashlib_func(config.anchor_hash)),
            skip_invalid_members=config.skip_invalid_members,
        )
        return cls(
            config.output_dir,
            renderer,
            assets_dir=resolve_assets_dir(config),
            validate_links=config.validate_links,
        )

    def build(self, root: Container) -> BuildResult:
        """Create every directory, then every page, then copy the assets."""
        self.logger.info("Building site into %s", self.output_root)
        result = BuildResult(output_root=self.output_root)
        result.directories = self.create_directories(root)
        result.pages = self.render_tree(root)
        result.assets = self.clone_static_assets()
        if self.validate_links:
            result.link_issues = LinkValidator().validate_site(self.output_root)
            for page, issues in result.link_issues.items():
                for issue in issues:
                    self.logger.warning("%s: %s", page.relative_to(self.output_root), issue)
        self.logger.info(
            "Wrote %d page(s) in %d director(ies), copied %d asset(s)",
            len(result.pages),
            len(result.directories),
            len(result.assets),
        )
        return result

    def create_directories(self, root: Container) -> List[Path]:
        created: List[Path] = []
        self._create_directories(root, self.output_root, created)
        return created

    def _create_directories(self, element: Element, path: Path, created: List[Path]) -> None:
        if not isinstance(element, Container):
            return
        try:
            path.mkdir(parents=path == self.output_root, exist_ok=True)
        except OSError as exc:
            raise FileSystemError(f"Cannot create directory {path}: {exc}") from exc
        self.logger.debug("Directory %s", path)
        created.append(path)
        for child in element.children:
            if isinstance(child, Container):
                self._create_directories(child, path / child.name, created)

    def render_tree(self, root: Container) -> List[Path]:
        written: List[Path] = []
        self._render_tree(root, root, self.output_root, written)
        return written

    def _render_tree(self, element: Element, root: Container, path: Path, written: List[Path]) -> None:
        if isinstance(element, Container):
            for child in element.children:
                child_path = path / child.name if isinstance(child, Container) else path
                self._render_tree(child, root, child_path, written)
            return
        if not isinstance(element, Leaf):
            return
        content = self.renderer.render_page(element.members, element, root)
        target = path / f"{element.name}.html"
        try:
            target.write_bytes(content)
        except OSError as exc:
            raise FileSystemError(f"Cannot write page {target}: {exc}") from exc
        self.logger.debug("Page %s", target)
        written.append(target)

    def build_menu(self, root: Container, current_depth: int) -> Markup:
        return build_menu(root, current_depth)

    def clone_static_assets(self) -> List[Path]:
        """Copy the site assets, then fill the gaps from the packaged ones."""
        copied: List[Path] = []
        for assets_dir in (self.assets_dir, DEFAULT_ASSETS_DIR):
            if assets_dir is not None:
                copied.extend(clone_static_assets(assets_dir, self.output_root))
        return copied


def resolve_assets_dir(config: SiteConfig) -> Path | None:
    """Return the site asset override, if any.

    The packaged assets are always cloned after it, so files missing here
    still come from the defaults.
    """
    if config.assets_dir is not None:
        return config.assets_dir
    if config.templates_dir is not None:
        candidate = config.templates_dir / ASSETS_DIRNAME
        if candidate.is_dir():
            return candidate
    return None


__all__ = ["ASSETS_DIRNAME", "DEFAULT_ASSETS_DIR", "BuildResult", "SiteBuilder", "resolve_assets_dir"]
