"""Front matter extraction for Gallerypress.

Every article starts with a YAML metadata block fenced by ``---`` markers:

    ---
    title: Rendering the Mandelbrot set
    date: March 2025
    tagline: Escape-time coloring on the GPU
    ---
    # Body starts here

Anything before the first marker is ignored. The metadata block must carry
``title``, ``date`` and ``tagline``; malformed front matter is fatal.

Key names:
- ArticleMetadata: The three required metadata fields.
- FrontmatterError: Raised for any malformed front matter.
- extract_frontmatter: Split raw text into metadata and body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

FRONTMATTER_DELIMITER = "---"
REQUIRED_FIELDS = ("title", "date", "tagline")


class FrontmatterError(ValueError):
    """Raised when an article's front matter is missing or malformed."""


class _TextLoader(yaml.SafeLoader):
    """SafeLoader that keeps every plain scalar as text.

    Without implicit resolvers ``date: 2024-01-01`` stays ``"2024-01-01"``
    and ``title: 1984`` stays ``"1984"``. A bare empty value
    (``title:``) still loads as null so it can be told apart from ``""``.
    """


_TextLoader.yaml_implicit_resolvers = {}
_TextLoader.add_implicit_resolver("tag:yaml.org,2002:null", re.compile(r"^$"), [""])


@dataclass(frozen=True)
class ArticleMetadata:
    """Metadata parsed from an article's front matter.

    Attributes:
        title: Article title, used for the page title and index link.
        date: Free-form display date, shown verbatim.
        tagline: One-line summary shown on the article index.
    """

    title: str
    date: str
    tagline: str

    @classmethod
    def from_mapping(cls, data: Any) -> ArticleMetadata:
        """Build metadata from a decoded YAML document.

        Args:
            data: Result of loading the metadata block.

        Returns:
            ArticleMetadata instance.

        Raises:
            FrontmatterError: If data is not a mapping, or a required field
                is absent, left blank or not a string. A quoted empty
                string (``title: ""``) is accepted.
        """
        if not isinstance(data, dict):
            raise FrontmatterError(
                "Front matter must be a mapping with title, date and tagline"
            )
        missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            raise FrontmatterError(
                "Front matter is missing required field(s) (absent or left blank): "
                f"{', '.join(missing)}"
            )
        for name in REQUIRED_FIELDS:
            if not isinstance(data[name], str):
                raise FrontmatterError(
                    f"Front matter field '{name}' must be text, "
                    f"got {type(data[name]).__name__}"
                )
        return cls(title=data["title"], date=data["date"], tagline=data["tagline"])


def split_frontmatter(text: str) -> tuple[str, str]:
    """Split raw article text into its metadata block and body.

    The text is split on the first two delimiters only; further ``---``
    markers (horizontal rules) belong to the body.

    Args:
        text: Raw file content.

    Returns:
        Tuple of (metadata block, body).

    Raises:
        FrontmatterError: If fewer than two delimiters are present.
    """
    parts = text.split(FRONTMATTER_DELIMITER, 2)
    if len(parts) != 3:
        raise FrontmatterError(
            f"Expected front matter delimited by two '{FRONTMATTER_DELIMITER}' "
            f"markers, found {len(parts) - 1}"
        )
    return parts[1], parts[2]


def parse_metadata(block: str) -> ArticleMetadata:
    """Decode a YAML metadata block.

    Args:
        block: Text between the two delimiters.

    Returns:
        ArticleMetadata instance.

    Raises:
        FrontmatterError: If the YAML is invalid or fields are malformed.
    """
    try:
        data = yaml.load(block, Loader=_TextLoader)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML front matter: {exc}") from exc
    return ArticleMetadata.from_mapping(data)


def extract_frontmatter(text: str) -> tuple[ArticleMetadata, str]:
    """Extract front matter from article text.

    Args:
        text: Raw file content.

    Returns:
        Tuple of (metadata, unparsed Markdown body).

    Raises:
        FrontmatterError: If the front matter is missing or malformed.
    """
    block, body = split_frontmatter(text)
    return parse_metadata(block), body
