"""Page rendering for Gallerypress.

Every generated page shares one fixed shell: head, navigation header,
footer, clipboard toast and the ``copyToml`` script used by the gallery.
The shell lives in ``templates/page.html`` and is rendered with Jinja2.

Key names:
- Page: A title, body fragment and output path.
- PageRenderer: Wraps bodies in the page shell and writes them to disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "page.html"
PROFILE_URL = "https://github.com/void-scape"
COPYRIGHT_YEAR = 2026
TOAST_DURATION_MS = 3000


@dataclass(frozen=True)
class Page:
    """A page to emit.

    Attributes:
        title: Document title.
        body_html: HTML fragment placed inside ``<main>``.
        output_path: File the rendered document is written to.
    """

    title: str
    body_html: str
    output_path: Path


class PageRenderer:
    """Renders pages into the shared HTML shell.

    Attributes:
        site_name: Name shown in the header and footer.
        profile_url: External profile linked from the navigation bar.
        copyright_year: Year shown in the footer.
        toast_duration_ms: How long the "copied" toast stays visible.
        env: Jinja2 environment loading the shell template.
    """

    def __init__(
        self,
        site_name: str,
        profile_url: str = PROFILE_URL,
        copyright_year: int = COPYRIGHT_YEAR,
        toast_duration_ms: int = TOAST_DURATION_MS,
    ):
        self.site_name = site_name
        self.profile_url = profile_url
        self.copyright_year = copyright_year
        self.toast_duration_ms = toast_duration_ms
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html", "xml"]),
            enable_async=False,
        )

    def render(self, page: Page) -> str:
        """Render a page to a complete HTML document.

        The title is escaped; the body fragment is inserted as-is.

        Args:
            page: Page to render.

        Returns:
            Rendered HTML string.
        """
        template = self.env.get_template(PAGE_TEMPLATE)
        return template.render(
            title=page.title,
            content=Markup(page.body_html),
            site_name=self.site_name,
            profile_url=self.profile_url,
            copyright_year=self.copyright_year,
            toast_duration_ms=self.toast_duration_ms,
        )

    def write(self, page: Page) -> Path:
        """Render a page and write it, replacing any existing file.

        Args:
            page: Page to render.

        Returns:
            The path written.

        Raises:
            OSError: If the file can't be written.
        """
        rendered = self.render(page)
        with open(page.output_path, "w", encoding="utf-8") as f:
            f.write(rendered)
        return page.output_path
