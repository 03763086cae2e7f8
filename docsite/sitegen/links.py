"""Link validation for generated pages."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Set


class LinkValidator:
    """Ensures every relative link and in-page anchor in the site resolves."""

    _HREF_PATTERN = re.compile(r"""href=["']([^"']*)["']""")
    _ID_PATTERN = re.compile(r"""\bid=["']([^"']+)["']""")

    def __init__(self) -> None:
        self._ids: Dict[Path, Set[str]] = {}

    def validate(self, html: str, *, page: Path) -> List[str]:
        """Return issues for links in ``html``, which lives at ``page``."""

        issues: List[str] = []
        for match in self._HREF_PATTERN.finditer(html):
            target = match.group(1).strip()
            if not target:
                issues.append("Empty link target detected")
                continue
            if target.startswith(("http://", "https://", "mailto:", "//")):
                continue
            path_part, _, fragment = target.partition("#")
            path_part = path_part.split("?", 1)[0]
            if path_part:
                candidate = (page.parent / path_part).resolve()
                if not candidate.exists():
                    issues.append(f"Link target not found: {target}")
                    continue
                ids = self._ids_for(candidate) if fragment else set()
            else:
                ids = set(self._ID_PATTERN.findall(html))
            if fragment and fragment not in ids:
                issues.append(f"Anchor not found: {target}")
        return issues

    def validate_site(self, output_root: Path) -> Dict[Path, List[str]]:
        """Validate every page below ``output_root``; pages without issues are omitted."""

        results: Dict[Path, List[str]] = {}
        for page in sorted(output_root.rglob("*.html")):
            issues = self.validate(page.read_text(encoding="utf-8"), page=page)
            if issues:
                results[page] = issues
        return results

    def _ids_for(self, path: Path) -> Set[str]:
        if path not in self._ids:
            if path.suffix == ".html" and path.is_file():
                self._ids[path] = set(self._ID_PATTERN.findall(path.read_text(encoding="utf-8")))
            else:
                self._ids[path] = set()
        return self._ids[path]


__all__ = ["LinkValidator"]
