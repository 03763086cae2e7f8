"""Member signatures and the hash-based anchors derived from them."""

from __future__ import annotations

import hashlib
from typing import Callable, List, Tuple

from markupsafe import Markup

from ..models import Element, Member, MemberKind
from .types import resolve_type

HashFunc = Callable[[bytes], str]


class ParameterArityMismatchError(ValueError):
    """Raised when parameter types and parameter comments differ in length."""

    def __init__(self, member: Member) -> None:
        self.member = member
        super().__init__(
            f"Member '{member.name}' declares {len(member.parameter_types)} parameter type(s) "
            f"but documents {len(member.parameter_comments)} parameter(s)"
        )


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def hashlib_func(algorithm: str) -> HashFunc:
    """Return a ``bytes -> hex`` function for a hashlib algorithm name."""
    def _digest(data: bytes) -> str:
        return hashlib.new(algorithm, data).hexdigest()

    try:
        _digest(b"")
    except TypeError as exc:  # variable-length digests such as shake_128
        raise ValueError(f"Hash algorithm '{algorithm}' needs a digest length") from exc
    return _digest


def build_parameter_list(member: Member) -> List[Tuple[str, str]]:
    """Pair each parameter type with its documented name, in declaration order."""
    names = list(member.parameter_comments)
    if len(names) != len(member.parameter_types):
        raise ParameterArityMismatchError(member)
    return list(zip(member.parameter_types, names))


def format_signature(member: Member) -> Markup:
    """Return ``(Type name, ...)`` with display type names."""
    entries = [
        resolve_type(type_name) + Markup(" ") + name
        for type_name, name in build_parameter_list(member)
    ]
    return Markup("(") + Markup(", ").join(entries) + Markup(")")


def declared_name(member: Member, owner: Element) -> str:
    """Constructors are shown under the owning type's name."""
    if member.kind is MemberKind.CONSTRUCTOR:
        return owner.name
    return member.name


def member_label(member: Member, owner: Element) -> Markup:
    """Text shown in the table of contents and hashed for the anchor."""
    if member.is_callable:
        return Markup.escape(declared_name(member, owner)) + format_signature(member)
    return Markup.escape(member.name)


class AnchorResolver:
    """Derives stable in-page ids from member labels."""

    def __init__(self, hash_func: HashFunc | None = None) -> None:
        self._hash = hash_func or sha256_hex

    def anchor(self, text: str) -> str:
        return self._hash(str(text).encode("utf-8")).lower()

    def member_anchor(self, member: Member, owner: Element) -> str:
        return self.anchor(member_label(member, owner))


__all__ = [
    "AnchorResolver",
    "HashFunc",
    "ParameterArityMismatchError",
    "build_parameter_list",
    "declared_name",
    "format_signature",
    "hashlib_func",
    "member_label",
    "sha256_hex",
]
