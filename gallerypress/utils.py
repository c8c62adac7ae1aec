"""Filesystem helpers for Gallerypress.

These are the small path utilities the build driver leans on: resetting the
output directory, copying asset trees, and classifying content files.

Key functions:
    ensure_clean_dir: Ensure a directory exists and is empty.
    copy_tree: Copy a directory tree into the output directory.
    is_markdown: Check if a path is a Markdown content file.
"""

from __future__ import annotations

import shutil
from pathlib import Path


def ensure_clean_dir(path: Path) -> None:
    """Ensure a directory exists and is empty.

    If the directory exists, removes all contents. Creates the
    directory if it doesn't exist. Errors from the initial removal are
    ignored; a directory that still cannot be emptied or created raises.

    Args:
        path: Directory path to clean or create.

    Raises:
        OSError: If the directory cannot be emptied or recreated.
    """
    if path.exists():
        shutil.rmtree(str(path), ignore_errors=True)
        if path.exists():
            # Fallback for stubborn directories
            for item in path.rglob("*"):
                if item.is_file() or item.is_symlink():
                    item.unlink()
            for item in sorted(
                [p for p in path.rglob("*") if p.is_dir()], reverse=True
            ):
                item.rmdir()
            path.rmdir()
    path.mkdir(parents=True, exist_ok=True)


def copy_tree(source: Path, dest: Path) -> None:
    """Copy a directory tree verbatim, creating missing parents of dest.

    Args:
        source: Directory to copy.
        dest: Destination directory.

    Raises:
        OSError: If the source is missing or any file fails to copy.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, dest, dirs_exist_ok=True)


def is_markdown(path: Path) -> bool:
    """Check if a path is a Markdown file.

    The match is exact: ``notes.md`` qualifies, ``notes.MD`` and
    ``notes.markdown`` do not.

    Args:
        path: Path to check.

    Returns:
        True if the file has a .md extension.
    """
    return path.suffix == ".md"
