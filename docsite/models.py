"""Symbol tree data models consumed by the site generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple


class ElementKind(str, Enum):
    """Kinds of nodes in the symbol tree."""

    ROOT = "Root"
    NAMESPACE = "Namespace"
    CLASS = "Class"
    STRUCT = "Struct"
    INTERFACE = "Interface"
    ENUM = "Enum"
    DELEGATE = "Delegate"

    def __str__(self) -> str:
        return self.value


class MemberKind(str, Enum):
    """Kinds of documented members owned by a type."""

    METHOD = "Method"
    CONSTRUCTOR = "Constructor"
    PROPERTY = "Property"
    ENUM_ITEM = "EnumItem"

    def __str__(self) -> str:
        return self.value


CONTAINER_KINDS = frozenset({ElementKind.ROOT, ElementKind.NAMESPACE})


@dataclass
class Member:
    """A documented method, constructor, property or enum item."""

    name: str
    kind: MemberKind
    parameter_types: List[str] = field(default_factory=list)
    parameter_comments: Dict[str, str] = field(default_factory=dict)
    return_type: str = "System.Void"
    return_comment: str = ""
    doc_comment: str = ""

    @property
    def is_callable(self) -> bool:
        return self.kind in (MemberKind.METHOD, MemberKind.CONSTRUCTOR)


@dataclass
class Element:
    """Common shape of every symbol tree node.

    ``namespace`` holds the names of the non-root ancestors. It is filled in
    when the enclosing :class:`Container` is constructed, so a tree built
    bottom-up ends with every node knowing its own path.
    """

    name: str
    kind: ElementKind
    doc_comment: str = field(default="", kw_only=True)
    namespace: Tuple[str, ...] = field(default=(), kw_only=True)

    @property
    def is_container(self) -> bool:
        return False

    @property
    def depth(self) -> int:
        """Directory levels between the output root and this node's file."""
        return len(self.namespace)

    @property
    def namespace_path(self) -> str:
        return ".".join(self.namespace)

    @property
    def title(self) -> str:
        return f"{self.name} {self.kind}"


@dataclass
class Container(Element):
    """Root or namespace node holding child elements and no members."""

    children: List[Element] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind not in CONTAINER_KINDS:
            raise ValueError(f"Container '{self.name}' cannot have kind {self.kind}")
        if self.kind is not ElementKind.ROOT and not self.children:
            raise ValueError(f"Namespace '{self.name}' has no children")
        self._propagate_namespace()

    @property
    def is_container(self) -> bool:
        return True

    @property
    def path_segments(self) -> Tuple[str, ...]:
        """Directory segments this container contributes, root excluded."""
        if self.kind is ElementKind.ROOT:
            return ()
        return self.namespace + (self.name,)

    def _propagate_namespace(self) -> None:
        prefix = self.path_segments
        for child in self.children:
            child.namespace = prefix
            if isinstance(child, Container):
                child._propagate_namespace()

    def walk(self) -> Iterator[Element]:
        """Yield this container and every descendant in pre-order."""
        yield self
        for child in self.children:
            if isinstance(child, Container):
                yield from child.walk()
            else:
                yield child

    def leaves(self) -> Iterator["Leaf"]:
        for element in self.walk():
            if isinstance(element, Leaf):
                yield element


@dataclass
class Leaf(Element):
    """A documented type rendered as one page."""

    members: List[Member] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind in CONTAINER_KINDS:
            raise ValueError(f"Type '{self.name}' cannot have kind {self.kind}")


def root(*children: Element) -> Container:
    """Return a root container holding ``children``."""
    return Container(name="", kind=ElementKind.ROOT, children=list(children))


__all__ = [
    "CONTAINER_KINDS",
    "Container",
    "Element",
    "ElementKind",
    "Leaf",
    "Member",
    "MemberKind",
    "root",
]
