"""Assembles one HTML page per documented type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence

from markupsafe import Markup

from ..logging import get_logger
from ..models import Container, Element, Member, MemberKind
from ..templating import Bindings, Template, TemplateLoader, normalize_code_spans
from .menu import build_menu, relative_prefix
from .signatures import (
    AnchorResolver,
    ParameterArityMismatchError,
    build_parameter_list,
    declared_name,
    format_signature,
    member_label,
)
from .types import resolve_type

PAGE_TEMPLATE = "base.html"
METHOD_TEMPLATE = "method.html"
PROPERTY_TEMPLATE = "property.html"
PARAMETER_TEMPLATE = "parameter.html"

# (kind, toc heading, page items placeholder, page section flag)
_SECTIONS = (
    (MemberKind.CONSTRUCTOR, "Constructor", "ConstructorItems", "HasConstructor"),
    (MemberKind.METHOD, "Methods", "MethodItems", "HasMethod"),
    (MemberKind.PROPERTY, "Properties", "PropertyItems", "HasProperty"),
    (MemberKind.ENUM_ITEM, "Enums", "EnumItems", "HasEnum"),
)


@dataclass
class _Templates:
    page: Template
    method: Template
    property: Template
    parameter: Template


@dataclass
class _Section:
    heading: str
    items: List[str] = field(default_factory=list)
    toc: List[str] = field(default_factory=list)


class PageRenderer:
    """Renders a type's members into a full page through the template set."""

    def __init__(
        self,
        loader: TemplateLoader | None = None,
        resolver: AnchorResolver | None = None,
        *,
        skip_invalid_members: bool = False,
        menu_builder: Callable[[Container, int], Markup] = build_menu,
    ) -> None:
        self.loader = loader or TemplateLoader()
        self.resolver = resolver or AnchorResolver()
        self.skip_invalid_members = skip_invalid_members
        self._menu_builder = menu_builder
        self._menus: Dict[tuple[int, int], tuple[Container, Markup]] = {}
        self.logger = get_logger("rendering.page")

    def render_page(self, members: Sequence[Member], owner: Element, root: Container) -> bytes:
        """Return the UTF-8 page for ``owner``."""
        templates = self._load_templates()
        members = self._checked_members(members, owner)

        sections = {kind: _Section(heading) for kind, heading, _, _ in _SECTIONS}
        for member in members:
            section = sections.get(member.kind)
            if section is None:
                continue
            anchor = self.resolver.member_anchor(member, owner)
            label = member_label(member, owner)
            if member.is_callable:
                section.items.append(self._render_method(templates, member, owner, anchor))
            else:
                section.items.append(self._render_property(templates, member, anchor))
            section.toc.append(Markup('    <li><a href="#{0}">{1}</a></li>').format(anchor, label))

        page = Bindings()
        page.assign("RelativePath", relative_prefix(owner.depth))
        page.assign("ClassName", owner.title)
        page.assign("Title", owner.title)
        page.assign("ClassComment", normalize_code_spans(owner.doc_comment))
        page.assign("Namespace", owner.namespace_path)
        page.assign("Menu", self._menu(root, owner.depth), raw=True)
        page.assign("Toc", self._build_toc(sections), raw=True)
        for kind, _, items_key, flag_key in _SECTIONS:
            items = sections[kind].items
            page.assign(items_key, "".join(items), raw=True)
            page.assign(flag_key, bool(items))

        return templates.page.render(page).encode("utf-8")

    def _render_method(
        self, templates: _Templates, member: Member, owner: Element, anchor: str
    ) -> str:
        parameters = self._render_parameter_rows(templates.parameter, member)
        fragment = Bindings()
        fragment.assign("MethodHash", anchor)
        fragment.assign("MethodName", declared_name(member, owner))
        fragment.assign("MethodParameters", format_signature(member))
        fragment.assign("MethodComment", normalize_code_spans(member.doc_comment))
        fragment.assign("MethodReturnComment", normalize_code_spans(member.return_comment))
        fragment.assign("HasReturn", bool(member.return_comment))
        fragment.assign("Parameters", parameters, raw=True)
        fragment.assign("HasParameter", bool(parameters))
        return templates.method.render(fragment)

    @staticmethod
    def _render_property(templates: _Templates, member: Member, anchor: str) -> str:
        fragment = Bindings()
        fragment.assign("PropertyHash", anchor)
        fragment.assign("PropertyName", member.name)
        fragment.assign("PropertyComment", normalize_code_spans(member.doc_comment))
        return templates.property.render(fragment)

    @staticmethod
    def _render_parameter_rows(template: Template, member: Member) -> str:
        rows: List[str] = []
        row = Bindings()
        comments = list(member.parameter_comments.values())
        for (type_name, name), comment in zip(build_parameter_list(member), comments):
            row.assign("Type", resolve_type(type_name))
            row.assign("TypeName", name)
            row.assign("TypeComment", normalize_code_spans(comment))
            rows.append(template.render(row))
            row.reset()
        return "".join(rows)

    @staticmethod
    def _build_toc(sections: Dict[MemberKind, _Section]) -> str:
        blocks: List[str] = []
        for kind, _, _, _ in _SECTIONS:
            section = sections[kind]
            if not section.toc:
                continue
            blocks.append(Markup("<h3>{0}</h3>\n").format(section.heading))
            blocks.append("<ol>\n" + "\n".join(section.toc) + "\n</ol>\n")
        return "".join(blocks)

    def _checked_members(self, members: Sequence[Member], owner: Element) -> List[Member]:
        checked: List[Member] = []
        for member in members:
            if member.is_callable:
                try:
                    build_parameter_list(member)
                except ParameterArityMismatchError:
                    if not self.skip_invalid_members:
                        raise
                    self.logger.error(
                        "Skipping %s.%s: %d parameter type(s) but %d documented parameter(s)",
                        owner.name,
                        member.name,
                        len(member.parameter_types),
                        len(member.parameter_comments),
                    )
                    continue
            checked.append(member)
        return checked

    def _menu(self, root: Container, depth: int) -> Markup:
        key = (id(root), depth)
        cached = self._menus.get(key)
        if cached is None or cached[0] is not root:
            cached = (root, self._menu_builder(root, depth))
            self._menus[key] = cached
        return cached[1]

    def _load_templates(self) -> _Templates:
        return _Templates(
            page=self.loader.load(PAGE_TEMPLATE),
            method=self.loader.load(METHOD_TEMPLATE),
            property=self.loader.load(PROPERTY_TEMPLATE),
            parameter=self.loader.load(PARAMETER_TEMPLATE),
        )


__all__ = [
    "METHOD_TEMPLATE",
    "PAGE_TEMPLATE",
    "PARAMETER_TEMPLATE",
    "PROPERTY_TEMPLATE",
    "PageRenderer",
]
