"""Markdown rendering port."""

from abc import ABC, abstractmethod


class MarkdownRenderer(ABC):
    """Turn a markdown document into HTML that is safe to embed."""

    @abstractmethod
    def render(self, markdown_text: str) -> str:
        """Render markdown to sanitized HTML."""
