"""Short names for fully-qualified primitive types."""

from __future__ import annotations

import re
from typing import Dict

from markupsafe import Markup, escape

TYPE_ALIASES: Dict[str, str] = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.Object": "object",
    "System.String": "string",
    "System.Void": "void",
}

# Whole type names only: System.StringComparison keeps its name.
_ALIAS_PATTERN = re.compile(
    r"(?<![\w.])("
    + "|".join(re.escape(name) for name in sorted(TYPE_ALIASES, key=len, reverse=True))
    + r")(?![\w.])"
)

_GENERIC_OPEN = "{"
_GENERIC_CLOSE = "}"


def resolve_type(raw: str) -> Markup:
    """Return the display form of ``raw`` as HTML."""
    aliased = _ALIAS_PATTERN.sub(lambda match: TYPE_ALIASES[match.group(1)], raw)
    escaped = str(escape(aliased))
    return Markup(escaped.replace(_GENERIC_OPEN, "&lt;").replace(_GENERIC_CLOSE, "&gt;"))


__all__ = ["TYPE_ALIASES", "resolve_type"]
