"""Page, signature and navigation rendering."""

from .menu import build_menu, page_href, relative_prefix
from .page import PageRenderer
from .signatures import (
    AnchorResolver,
    ParameterArityMismatchError,
    build_parameter_list,
    declared_name,
    format_signature,
    hashlib_func,
    member_label,
    sha256_hex,
)
from .types import TYPE_ALIASES, resolve_type

__all__ = [
    "AnchorResolver",
    "PageRenderer",
    "ParameterArityMismatchError",
    "TYPE_ALIASES",
    "build_menu",
    "build_parameter_list",
    "declared_name",
    "format_signature",
    "hashlib_func",
    "member_label",
    "page_href",
    "relative_prefix",
    "resolve_type",
    "sha256_hex",
]
