"""HTML string utilities for Gallerypress.

This module holds the plain string transformations applied to generated
HTML. None of them parse markup; they operate on raw text.

Functions:
    escape_html: Escape special HTML characters in a string.
    escape_attribute_quotes: Make text safe inside a double-quoted attribute.
    rewrite_markdown_links: Point ``.md"`` references at generated pages.
"""

from __future__ import annotations

MARKDOWN_LINK_SUFFIX = '.md"'
HTML_LINK_SUFFIX = '.html"'


def escape_html(text: str) -> str:
    """Escape special HTML characters in a string.

    Converts the following characters to their HTML entity equivalents:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;

    Args:
        text: The string to escape.

    Returns:
        The escaped string, safe for inclusion in HTML.

    Examples:
        >>> escape_html('<script>alert("XSS")</script>')
        '&lt;script&gt;alert(&quot;XSS&quot;)&lt;/script&gt;'

        >>> escape_html('Tom & Jerry')
        'Tom &amp; Jerry'
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def escape_attribute_quotes(text: str) -> str:
    """Replace double quotes so text can sit inside a ``"..."`` attribute.

    Only ``"`` is touched; everything else is embedded verbatim.

    Examples:
        >>> escape_attribute_quotes('name = "seahorse"')
        'name = &quot;seahorse&quot;'
    """
    return text.replace('"', "&quot;")


def rewrite_markdown_links(html: str) -> str:
    """Rewrite every literal ``.md"`` in rendered HTML to ``.html"``.

    This is a blind substitution over the whole string, so it also changes
    matching text outside of links (code spans, raw HTML attributes, prose).
    Existing content relies on exactly this behaviour.

    Examples:
        >>> rewrite_markdown_links('<a href="intro.md">Intro</a>')
        '<a href="intro.html">Intro</a>'
    """
    return html.replace(MARKDOWN_LINK_SUFFIX, HTML_LINK_SUFFIX)
