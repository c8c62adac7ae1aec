"""Command-line interface for Gallerypress.

The site is always built from the current working directory; the command
takes no build options.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__


@click.command()
@click.version_option(version=__version__, prog_name="gallerypress")
def cli():
    """Build the site from the current directory into public/."""
    project_root = Path.cwd()
    from .build import BuildError, build_site

    try:
        result = build_site(project_root)
    except BuildError as exc:
        rel_path = _display_path(exc.source_path, project_root)
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  File: {rel_path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo(
        f"Built {len(result.articles)} articles ({len(result.pages)} pages) "
        f"into {result.output_dir}"
    )


def _display_path(path: Path, project_root: Path) -> Path:
    """Show a path relative to the project root when it lies inside it."""
    try:
        return path.relative_to(project_root)
    except ValueError:
        return path


def main():
    """Entry point for the CLI application."""
    cli()
