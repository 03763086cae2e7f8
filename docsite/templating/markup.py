"""Inline documentation markup normalization."""

from __future__ import annotations

import re
from typing import List

from markupsafe import Markup, escape

CODE_SPAN_CLASS = "specific-element"

_CODE_TOKEN = re.compile(r"<c>|</c>")
_OPEN = "<c>"


def normalize_code_spans(text: str | None) -> Markup:
    """Rewrite ``<c>...</c>`` spans to styled HTML spans.

    The text between delimiters is HTML-escaped. Nested spans nest in the
    output, a span left open is closed at the end of the text and a stray
    closing delimiter is kept as escaped text.

    A plain ``str`` is always documentation text and is escaped. A ``Markup``
    value is already HTML: its delimiters are still rewritten but the rest is
    kept as is. Output is ``Markup`` without delimiters, so feeding it back
    changes nothing. Converting it to ``str`` first turns it back into text.
    """
    if not text:
        return Markup("")
    as_text = str if isinstance(text, Markup) else escape

    parts: List[str] = []
    depth = 0
    position = 0
    for match in _CODE_TOKEN.finditer(text):
        parts.append(as_text(text[position:match.start()]))
        token = match.group(0)
        if token == _OPEN:
            parts.append(f'<span class="{CODE_SPAN_CLASS}">')
            depth += 1
        elif depth:
            parts.append("</span>")
            depth -= 1
        else:
            parts.append(escape(token))
        position = match.end()
    parts.append(as_text(text[position:]))
    parts.append("</span>" * depth)
    return Markup("".join(parts))


__all__ = ["CODE_SPAN_CLASS", "normalize_code_spans"]
