"""Gallerypress static site generator.

Builds a small personal site from a fixed project layout: Markdown articles
with YAML front matter in ``content/``, a stylesheet, and a Mandelbrot image
gallery under ``static/mandelbrot-gallery``. Output is written to ``public/``,
which is recreated on every build.

The main entry point is the CLI module; ``build.build_site`` is the
programmatic entry point.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
