"""Template loading and placeholder substitution."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    Undefined,
    UndefinedError,
)
from jinja2 import Template as _JinjaTemplate
from markupsafe import Markup

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

PLACEHOLDER_POLICIES = ("empty", "verbatim", "strict")


class TemplateNotFoundError(LookupError):
    """Raised when neither the site nor the default directory holds a template."""

    def __init__(self, name: str, searched: Iterable[Path]) -> None:
        self.name = name
        self.searched = list(searched)
        locations = ", ".join(str(path) for path in self.searched) or "(none)"
        super().__init__(f"Template '{name}' not found in: {locations}")


class PlaceholderError(RuntimeError):
    """Raised in strict mode when a template uses an unassigned placeholder."""


class _VerbatimUndefined(Undefined):
    """Renders an unassigned placeholder back as its own token."""

    __slots__ = ()

    def __str__(self) -> str:
        return "{{ %s }}" % self._undefined_name


_UNDEFINED_BY_POLICY = {
    "empty": Undefined,
    "verbatim": _VerbatimUndefined,
    "strict": StrictUndefined,
}


def resolve_template_path(
    site_dir: Path | None, default_dir: Path, file_name: str
) -> Path:
    """Return the override template when present, else the shared default."""
    searched: List[Path] = []
    for directory in (site_dir, default_dir):
        if directory is None:
            continue
        candidate = directory / file_name
        searched.append(candidate)
        if candidate.is_file():
            return candidate
    raise TemplateNotFoundError(file_name, searched)


class Bindings:
    """Mutable placeholder table filled before each render."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def assign(self, key: str, value: Any, raw: bool = False) -> None:
        """Record ``key -> value``; raw values are inserted without escaping."""
        if raw:
            value = Markup("" if value is None else str(value))
        self._values[key] = value

    def reset(self) -> None:
        self._values.clear()

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __len__(self) -> int:
        return len(self._values)


class Template:
    """A loaded template; rendering never changes its state."""

    def __init__(self, name: str, source: _JinjaTemplate, path: Optional[Path] = None) -> None:
        self.name = name
        self.path = path
        self._source = source

    def render(self, bindings: Bindings | Mapping[str, Any]) -> str:
        values = bindings.as_dict() if isinstance(bindings, Bindings) else dict(bindings)
        try:
            return self._source.render(values)
        except UndefinedError as exc:
            raise PlaceholderError(f"Template '{self.name}': {exc}") from exc


def render_template(template: Template, bindings: Bindings | Mapping[str, Any]) -> str:
    """Render ``template`` with ``bindings``."""
    return template.render(bindings)


class TemplateLoader:
    """Loads templates from a site directory, falling back to the defaults."""

    def __init__(
        self,
        site_dir: Path | None = None,
        default_dir: Path | None = None,
        *,
        placeholders: str = "empty",
    ) -> None:
        if placeholders not in _UNDEFINED_BY_POLICY:
            raise ValueError(
                f"Unknown placeholder policy '{placeholders}'; expected one of {', '.join(PLACEHOLDER_POLICIES)}"
            )
        self.site_dir = site_dir
        self.default_dir = default_dir or DEFAULT_TEMPLATES_DIR
        self.placeholders = placeholders
        self._env = self._create_env()

    def load(self, name: str) -> Template:
        path = resolve_template_path(self.site_dir, self.default_dir, name)
        try:
            source = self._env.get_template(name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(name, [path]) from exc
        return Template(name, source, path)

    def _create_env(self) -> Environment:
        directories: List[str] = []
        if self.site_dir is not None:
            directories.append(str(self.site_dir))
        if str(self.default_dir) not in directories:
            directories.append(str(self.default_dir))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=_UNDEFINED_BY_POLICY[self.placeholders],
        )


__all__ = [
    "Bindings",
    "DEFAULT_TEMPLATES_DIR",
    "PLACEHOLDER_POLICIES",
    "PlaceholderError",
    "Template",
    "TemplateLoader",
    "TemplateNotFoundError",
    "render_template",
    "resolve_template_path",
]
