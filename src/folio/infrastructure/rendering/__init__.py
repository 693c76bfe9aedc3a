from folio.infrastructure.rendering.markdown_renderer import PythonMarkdownRenderer

__all__ = ["PythonMarkdownRenderer"]
