from pathlib import Path

import pytest

ARTICLE = """---
title: First Light
date: March 2025
tagline: Escape-time coloring
---
# Hi

See the [next post](second.md) for more.
"""


def create_project(tmp_path: Path) -> Path:
    project = tmp_path
    gallery = project / "static" / "mandelbrot-gallery"
    (gallery / "frames").mkdir(parents=True)
    (gallery / "configs").mkdir()
    (project / "content").mkdir()

    (project / "style.css").write_text("body { color: white; }", encoding="utf-8")
    (gallery / "frames" / "b.png").write_bytes(b"\x89PNG-b")
    (gallery / "frames" / "a.png").write_bytes(b"\x89PNG-a")
    (gallery / "configs" / "a.toml").write_text(
        'name = "seahorse"\nzoom = 2.5\n', encoding="utf-8"
    )
    (gallery / "configs" / "b.toml").write_text("zoom = 1.0\n", encoding="utf-8")

    (project / "content" / "first.md").write_text(ARTICLE, encoding="utf-8")
    (project / "content" / "notes.txt").write_text("ignore me", encoding="utf-8")
    return project


@pytest.fixture
def project(tmp_path):
    return create_project(tmp_path)
