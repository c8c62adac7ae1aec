"""Markdown rendering for Gallerypress.

Article bodies are rendered with mistune. Fenced code blocks are highlighted
by Pygments with inline styles in a fixed dark theme, so generated pages
need no extra stylesheet for code.

Key classes:
- MarkdownRenderer: Renders Markdown to HTML with footnotes and highlighting.
"""

from __future__ import annotations

import mistune
from mistune.util import striptags
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from .html_utils import escape_html, rewrite_markdown_links

HIGHLIGHT_STYLE = "monokai"
MARKDOWN_PLUGINS = ["footnotes", "strikethrough", "table", "url"]


def _literal_quotes(html: str) -> str:
    """Turn ``&quot;`` in element content back into ``"``.

    Only used on text content, where a bare ``"`` is valid HTML. Keeping
    quotes literal lets the ``.md"`` rewrite reach prose and code alike.
    """
    return html.replace("&quot;", '"')


class _HighlightRenderer(mistune.HTMLRenderer):
    """Custom Markdown renderer with Pygments syntax highlighting.

    Attributes:
        style: Name of the Pygments style used for every code block.
    """

    def __init__(self, style: str = HIGHLIGHT_STYLE):
        """Initialize the renderer.

        Args:
            style: Pygments style name.
        """
        super().__init__(escape=False)
        self.style = style

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a fenced code block with Pygments syntax highlighting.

        The language is the first word of the fence info string. Unknown or
        missing languages are rendered with the plain text lexer, still
        inside the themed block. Leading indentation is preserved.

        Args:
            code: The code content.
            info: Fence info string (e.g., 'python', 'rust title="main"').

        Returns:
            HTML string with highlighted code.
        """
        language = info.split()[0] if info and info.strip() else ""
        lexer = TextLexer()
        if language:
            try:
                lexer = get_lexer_by_name(language)
            except ClassNotFound:
                pass
        formatter = HtmlFormatter(
            style=self.style, noclasses=True, cssclass="highlight"
        )
        return _literal_quotes(highlight(code, lexer, formatter))

    def codespan(self, text: str) -> str:
        """Render inline code, leaving double quotes literal."""
        return _literal_quotes(super().codespan(text))

    def text(self, text: str) -> str:
        """Render prose text, leaving double quotes literal."""
        return _literal_quotes(super().text(text))

    def image(self, text: str, url: str, title: str | None = None) -> str:
        """Render an image, re-escaping quotes in the alt text.

        Args:
            text: Rendered alt text, already HTML-safe apart from quotes.
            url: Image source URL.
            title: Title attribute.

        Returns:
            HTML image tag string.
        """
        alt = striptags(text).replace('"', "&quot;")
        html = f'<img src="{self.safe_url(url)}" alt="{alt}"'
        if title:
            html += f' title="{escape_html(title)}"'
        return html + " />"


class MarkdownRenderer:
    """Renders Markdown article bodies to HTML.

    Footnotes, strikethrough, tables and bare URLs are recognized. After
    rendering, every ``.md"`` in the output becomes ``.html"`` so links
    between articles point at the generated pages.

    Attributes:
        style: Pygments style name applied to fenced code blocks.
    """

    def __init__(self, style: str = HIGHLIGHT_STYLE):
        self.style = style

    def render(self, content: str) -> str:
        """Render Markdown content to HTML.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML with Markdown links rewritten.
        """
        markdown = mistune.create_markdown(
            renderer=_HighlightRenderer(self.style), plugins=MARKDOWN_PLUGINS
        )
        return rewrite_markdown_links(markdown(content))
