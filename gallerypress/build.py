"""Site building functionality for Gallerypress.

This module contains the build driver. A build runs strictly in order:

1. reset the output directory;
2. copy the stylesheet and gallery tree;
3. render the gallery as the home page;
4. render every Markdown article to ``<slug>.html``;
5. render the article index.

Any failure aborts the build with a BuildError naming the file involved.

Key names:
- build_site: Main function to build the entire site.
- SiteLayout: The fixed input and output paths for a project root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .assets import AssetPipeline
from .content import Article, ArticleLoader, render_article_summary
from .extractors import FrontmatterError
from .gallery import build_gallery
from .templates import Page, PageRenderer
from .utils import ensure_clean_dir

SITE_NAME = "Nic Ball"
ARTICLES_TITLE = "Articles"
OUTPUT_DIR = "public"
CONTENT_DIR = "content"
STYLESHEET = "style.css"
GALLERY_DIR = "static/mandelbrot-gallery"
HOME_PAGE = "index.html"
ARTICLES_PAGE = "articles.html"


class BuildError(Exception):
    """Error during site build with file context.

    Attributes:
        source_path: Path to the file or directory that caused the error.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")


@dataclass(frozen=True)
class SiteLayout:
    """Input and output locations for one build.

    Attributes:
        project_root: Directory all inputs are resolved against.
        output_dir: Directory that is recreated and populated.
        content_dir: Directory holding Markdown articles.
        stylesheet: Stylesheet path relative to project_root.
        gallery_dir: Gallery path relative to project_root.
    """

    project_root: Path
    output_dir: Path
    content_dir: Path
    stylesheet: Path
    gallery_dir: Path

    @classmethod
    def from_root(cls, project_root: Path) -> SiteLayout:
        """Build the standard layout for a project root."""
        return cls(
            project_root=project_root,
            output_dir=project_root / OUTPUT_DIR,
            content_dir=project_root / CONTENT_DIR,
            stylesheet=Path(STYLESHEET),
            gallery_dir=Path(GALLERY_DIR),
        )


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        articles: Articles rendered, in index order.
        pages: Paths of every HTML page written.
        output_dir: Directory where the site was built.
    """

    articles: list[Article]
    pages: list[Path]
    output_dir: Path


def build_site(project_root: Path) -> BuildResult:
    """Build the entire static site.

    Args:
        project_root: Root directory of the project.

    Returns:
        BuildResult describing the articles and pages written.

    Raises:
        BuildError: If any step fails.
    """
    layout = SiteLayout.from_root(project_root)
    renderer = PageRenderer(SITE_NAME)
    pages: list[Path] = []

    _reset_output(layout.output_dir)
    _copy_assets(layout)

    gallery_html = _build_home_gallery(layout)
    pages.append(
        _write_page(
            renderer, Page(SITE_NAME, gallery_html, layout.output_dir / HOME_PAGE)
        )
    )

    loader = ArticleLoader(layout.content_dir)
    try:
        sources = loader.iter_files()
    except OSError as exc:
        raise BuildError(
            layout.content_dir,
            f"Cannot list content: {_format_error_message(exc)}",
            exc,
        ) from exc

    articles: list[Article] = []
    summaries: list[str] = []
    for path in sources:
        article = _build_article(loader, path)
        pages.append(
            _write_page(
                renderer,
                Page(
                    article.metadata.title,
                    article.body_html,
                    layout.output_dir / article.filename,
                ),
            )
        )
        articles.append(article)
        summaries.append(render_article_summary(article))

    pages.append(
        _write_page(
            renderer,
            Page(
                ARTICLES_TITLE,
                "\n".join(summaries),
                layout.output_dir / ARTICLES_PAGE,
            ),
        )
    )
    return BuildResult(articles=articles, pages=pages, output_dir=layout.output_dir)


def _format_error_message(exc: Exception) -> str:
    """Format an exception into a user-friendly error message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    error_type = type(exc).__name__
    if isinstance(exc, FrontmatterError):
        return f"Invalid front matter: {exc}"
    if isinstance(exc, FileNotFoundError):
        return f"File not found: {exc.filename or exc}"
    if isinstance(exc, OSError) and exc.strerror:
        return f"{error_type}: {exc.strerror}"
    return f"{error_type}: {exc}"


def _source_of(exc: Exception, fallback: Path) -> Path:
    """Return the path an exception refers to, or fallback."""
    filename = getattr(exc, "filename", None)
    return Path(filename) if filename else fallback


def _reset_output(output_dir: Path) -> None:
    try:
        ensure_clean_dir(output_dir)
    except OSError as exc:
        raise BuildError(
            _source_of(exc, output_dir),
            f"Cannot recreate output directory: {_format_error_message(exc)}",
            exc,
        ) from exc


def _copy_assets(layout: SiteLayout) -> None:
    pipeline = AssetPipeline(
        layout.project_root,
        layout.output_dir,
        layout.stylesheet,
        [layout.gallery_dir],
    )
    try:
        pipeline.run()
    except OSError as exc:
        raise BuildError(
            _source_of(exc, layout.project_root / layout.stylesheet),
            f"Cannot copy assets: {_format_error_message(exc)}",
            exc,
        ) from exc


def _build_home_gallery(layout: SiteLayout) -> str:
    gallery_dir = layout.project_root / layout.gallery_dir
    try:
        return build_gallery(gallery_dir, layout.gallery_dir.as_posix())
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(
            _source_of(exc, gallery_dir),
            f"Cannot read gallery config: {_format_error_message(exc)}",
            exc,
        ) from exc


def _build_article(loader: ArticleLoader, path: Path) -> Article:
    try:
        return loader.build(path)
    except (FrontmatterError, OSError, UnicodeDecodeError) as exc:
        raise BuildError(path, _format_error_message(exc), exc) from exc


def _write_page(renderer: PageRenderer, page: Page) -> Path:
    """Write a rendered page, wrapping failures in BuildError.

    Args:
        renderer: Page renderer holding the shell.
        page: Page to write.

    Returns:
        The path written.
    """
    try:
        return renderer.write(page)
    except OSError as exc:
        raise BuildError(
            page.output_path, f"Cannot write page: {_format_error_message(exc)}", exc
        ) from exc
