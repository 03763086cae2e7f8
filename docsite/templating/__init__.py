"""Template engine and inline markup helpers."""

from .engine import (
    DEFAULT_TEMPLATES_DIR,
    PLACEHOLDER_POLICIES,
    Bindings,
    PlaceholderError,
    Template,
    TemplateLoader,
    TemplateNotFoundError,
    render_template,
    resolve_template_path,
)
from .markup import CODE_SPAN_CLASS, normalize_code_spans

__all__ = [
    "Bindings",
    "CODE_SPAN_CLASS",
    "DEFAULT_TEMPLATES_DIR",
    "PLACEHOLDER_POLICIES",
    "PlaceholderError",
    "Template",
    "TemplateLoader",
    "TemplateNotFoundError",
    "normalize_code_spans",
    "render_template",
    "resolve_template_path",
]
