"""Simple DOM model for embedding rendered fields in larger markup."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .attributes import stringify_attributes


@dataclass
class DomNode:
    tag: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    children: List["DomContent"] = field(default_factory=list)
    text: str | None = None
    raw_html: str | None = None
    self_closing: bool = False

    def add(self, child: "DomContent") -> "DomNode":
        self.children.append(child)
        return self

    def add_raw(self, markup: str) -> "DomNode":
        """Append trusted markup, e.g. a rendered options element."""
        self.children.append(RawHtml(markup))
        return self


@dataclass
class RawHtml:
    markup: str


DomContent = DomNode | RawHtml | str


def _render_children(children: Sequence[DomContent]) -> str:
    html_parts: List[str] = []
    for child in children:
        if isinstance(child, DomNode):
            html_parts.append(dom_to_html([child]))
        elif isinstance(child, RawHtml):
            html_parts.append(child.markup)
        else:
            html_parts.append(html.escape(str(child)))
    return "".join(html_parts)


def dom_to_html(dom: List[DomNode]) -> str:
    parts: List[str] = []
    for node in dom:
        attrs = stringify_attributes(node.attrs)
        if node.self_closing:
            parts.append(f"<{node.tag}{attrs}/>")
            continue
        parts.append(f"<{node.tag}{attrs}>")
        if node.raw_html is not None:
            # Raw HTML insertion assumes content is trusted.
            parts.append(node.raw_html)
        elif node.text is not None:
            parts.append(html.escape(node.text))
        if node.children:
            parts.append(_render_children(node.children))
        parts.append(f"</{node.tag}>")
    return "".join(parts)


__all__ = ["DomContent", "DomNode", "RawHtml", "dom_to_html"]
