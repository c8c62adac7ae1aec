"""Article processing for Gallerypress.

This module discovers Markdown articles in the content directory, parses
their front matter, renders their bodies, and produces the summary entries
shown on the article index page.

Key classes:
- Article: Dataclass representing a parsed and rendered article.
- ArticleLoader: Discovers and builds Article instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .extractors import ArticleMetadata, extract_frontmatter
from .html_utils import escape_html
from .renderers import MarkdownRenderer
from .utils import is_markdown


@dataclass(frozen=True)
class Article:
    """A content file after parsing and rendering.

    Attributes:
        slug: File name without extension; also the output page name.
        metadata: Parsed front matter.
        body_html: Rendered article body.
        path: Source file the article was read from.
    """

    slug: str
    metadata: ArticleMetadata
    body_html: str
    path: Path

    @property
    def filename(self) -> str:
        """Name of the generated page, e.g. ``intro.html``."""
        return f"{self.slug}.html"


def render_article_summary(article: Article) -> str:
    """Render the article index entry for an article.

    Args:
        article: Article to summarize.

    Returns:
        HTML fragment linking to the article with its date and tagline.
    """
    meta = article.metadata
    return (
        '<div class="article-item">\n'
        '    <div class="article-header">\n'
        f'        <h2><a href="{article.filename}">{escape_html(meta.title)}</a></h2>\n'
        f'        <span class="article-date">{escape_html(meta.date)}</span>\n'
        "    </div>\n"
        '    <div class="article-excerpt">\n'
        f"        <p>{escape_html(meta.tagline)}</p>\n"
        "    </div>\n"
        "</div>"
    )


class ArticleLoader:
    """Loads Markdown articles from a content directory.

    Attributes:
        content_dir: Directory holding ``*.md`` articles.
        renderer: Markdown renderer used for article bodies.
    """

    def __init__(self, content_dir: Path, renderer: MarkdownRenderer | None = None):
        """Initialize the loader.

        Args:
            content_dir: Path to the content directory.
            renderer: Optional custom Markdown renderer.
        """
        self.content_dir = content_dir
        self.renderer = renderer or MarkdownRenderer()

    def iter_files(self) -> list[Path]:
        """List article files, sorted by file name.

        Only direct children with a ``.md`` extension are returned; other
        entries are ignored.

        Returns:
            List of paths to Markdown files.

        Raises:
            OSError: If the content directory can't be listed.
        """
        files = [
            path
            for path in self.content_dir.iterdir()
            if is_markdown(path) and not path.is_dir()
        ]
        return sorted(files, key=lambda p: p.name)

    def build(self, path: Path) -> Article:
        """Parse and render a single article.

        Args:
            path: Path to the Markdown source.

        Returns:
            Article instance.

        Raises:
            FrontmatterError: If the front matter is malformed.
            OSError: If the file can't be read.
        """
        raw = path.read_text(encoding="utf-8")
        metadata, body = extract_frontmatter(raw)
        return Article(
            slug=path.stem,
            metadata=metadata,
            body_html=self.renderer.render(body),
            path=path,
        )
