"""Markdown to HTML rendering with Python-Markdown, sanitized by bleach."""

from __future__ import annotations

import bleach
import markdown

from folio.application.ports.rendering import MarkdownRenderer

MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "sane_lists")

ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "blockquote",
        "br",
        "code",
        "del",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "strong",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "ul",
    },
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel"],
    "abbr": ["title"],
    "code": ["class"],
    "img": ["src", "alt", "title"],
    "td": ["align"],
    "th": ["align"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


class PythonMarkdownRenderer(MarkdownRenderer):
    """Render blog bodies for the detail view.

    Raw HTML inside the markdown survives only if it is on the allow list;
    everything else is stripped, so stored posts can never inject scripts.
    """

    def render(self, markdown_text: str) -> str:
        if not markdown_text:
            return ""
        html = markdown.markdown(markdown_text, extensions=list(MARKDOWN_EXTENSIONS))
        return bleach.clean(
            html,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
        )
