"""Static HTML documentation sites from documented symbol trees."""

from .config import ConfigError, SiteConfig, load_config
from .models import Container, Element, ElementKind, Leaf, Member, MemberKind, root
from .rendering import PageRenderer, ParameterArityMismatchError
from .sitegen import BuildResult, FileSystemError, SiteBuilder
from .templating import PlaceholderError, TemplateLoader, TemplateNotFoundError
from .treefile import TreeFormatError, load_tree

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "ConfigError",
    "Container",
    "Element",
    "ElementKind",
    "FileSystemError",
    "Leaf",
    "Member",
    "MemberKind",
    "PageRenderer",
    "ParameterArityMismatchError",
    "PlaceholderError",
    "SiteBuilder",
    "SiteConfig",
    "TemplateLoader",
    "TemplateNotFoundError",
    "TreeFormatError",
    "load_config",
    "load_tree",
    "root",
]
