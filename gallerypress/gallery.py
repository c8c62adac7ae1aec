"""Image gallery generation for Gallerypress.

A gallery directory holds rendered images in ``frames/`` and one text
configuration per image in ``configs/<image-stem>.toml``. The gallery
fragment lists every frame as a lazily loaded ``<img>`` whose configuration
text is embedded in a ``data-toml`` attribute and copied to the clipboard
when the image is clicked.

Failure handling is deliberately asymmetric:
- a missing or unlistable ``frames/`` directory yields an empty grid;
- a frame entry that cannot be stat'ed is skipped;
- a frame without a readable config raises.

Key names:
- GalleryEntry: One image and its escaped configuration text.
- collect_entries: Gather entries in display order.
- build_gallery: Render the complete gallery fragment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .html_utils import escape_attribute_quotes

GALLERY_TITLE = "Mandelbrot Set Gallery"
IMAGE_ALT = "Mandelbrot Fractal"
CONFIG_SUFFIX = ".toml"


@dataclass(frozen=True)
class GalleryEntry:
    """A single gallery image.

    Attributes:
        image_path: Image URL relative to the site root.
        config_text: Configuration text with ``"`` escaped as ``&quot;``.
    """

    image_path: str
    config_text: str

    def to_html(self) -> str:
        """Render this entry as an ``<img>`` element."""
        return (
            f'<img src="{self.image_path}" '
            'class="gallery-item loading" '
            f'data-toml="{self.config_text}" '
            'onclick="copyToml(this)" '
            "onload=\"this.classList.remove('loading')\" "
            'loading="lazy" '
            f'alt="{IMAGE_ALT}">'
        )


def _list_frames(frames_dir: Path) -> list[Path]:
    """List frame entries sorted by full path.

    Args:
        frames_dir: Directory containing gallery images.

    Returns:
        Sorted list of readable entries, empty if the directory can't be listed.
    """
    if not frames_dir.is_dir():
        print(f"Gallery frames not found at {frames_dir}; rendering an empty gallery.")
        return []
    try:
        candidates = list(frames_dir.iterdir())
    except OSError:
        return []
    frames: list[Path] = []
    for path in candidates:
        try:
            path.stat()
        except OSError:
            continue
        frames.append(path)
    return sorted(frames, key=str)


def collect_entries(gallery_dir: Path, url_prefix: str) -> list[GalleryEntry]:
    """Collect gallery entries in display order.

    Args:
        gallery_dir: Directory containing ``frames/`` and ``configs/``.
        url_prefix: URL path of gallery_dir relative to the site root
            (e.g. ``static/mandelbrot-gallery``).

    Returns:
        List of GalleryEntry objects sorted by image path.

    Raises:
        OSError: If a frame's configuration file can't be read.
    """
    configs_dir = gallery_dir / "configs"
    prefix = url_prefix.rstrip("/")
    entries: list[GalleryEntry] = []
    for frame in _list_frames(gallery_dir / "frames"):
        config_path = configs_dir / f"{frame.stem}{CONFIG_SUFFIX}"
        config_text = config_path.read_text(encoding="utf-8")
        entries.append(
            GalleryEntry(
                image_path=f"{prefix}/frames/{frame.name}",
                config_text=escape_attribute_quotes(config_text),
            )
        )
    return entries


def build_gallery(gallery_dir: Path, url_prefix: str) -> str:
    """Render the gallery fragment for the home page.

    Args:
        gallery_dir: Directory containing ``frames/`` and ``configs/``.
        url_prefix: URL path of gallery_dir relative to the site root.

    Returns:
        HTML fragment with the gallery heading and image grid.

    Raises:
        OSError: If a frame's configuration file can't be read.
    """
    entries = collect_entries(gallery_dir, url_prefix)
    html_parts = [
        f'<h3 class="gallery-title">{GALLERY_TITLE}</h3>',
        '<div class="gallery-grid">',
    ]
    html_parts.extend(entry.to_html() for entry in entries)
    html_parts.append("</div>")
    return "\n".join(html_parts)
