from pathlib import Path

import pytest

from gallerypress.build import (
    ARTICLES_TITLE,
    SITE_NAME,
    BuildError,
    BuildResult,
    SiteLayout,
    _format_error_message,
    build_site,
)
from gallerypress.extractors import FrontmatterError


def snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


def test_build_site_writes_expected_tree(project):
    result = build_site(project)
    output = project / "public"

    assert isinstance(result, BuildResult)
    assert result.output_dir == output
    assert [a.slug for a in result.articles] == ["first"]
    assert result.pages == [
        output / "index.html",
        output / "first.html",
        output / "articles.html",
    ]
    assert set(snapshot(output)) == {
        "style.css",
        "index.html",
        "first.html",
        "articles.html",
        "static/mandelbrot-gallery/frames/a.png",
        "static/mandelbrot-gallery/frames/b.png",
        "static/mandelbrot-gallery/configs/a.toml",
        "static/mandelbrot-gallery/configs/b.toml",
    }
    assert (output / "style.css").read_text(encoding="utf-8") == "body { color: white; }"
    assert (output / "static/mandelbrot-gallery/frames/a.png").read_bytes() == b"\x89PNG-a"


def test_home_page_renders_gallery(project):
    build_site(project)
    home = (project / "public" / "index.html").read_text(encoding="utf-8")
    assert f"<title>{SITE_NAME}</title>" in home
    assert home.index("frames/a.png") < home.index("frames/b.png")
    assert 'src="static/mandelbrot-gallery/frames/a.png"' in home
    assert 'data-toml="name = &quot;seahorse&quot;' in home


def test_article_page_and_index(project):
    build_site(project)
    output = project / "public"

    article = (output / "first.html").read_text(encoding="utf-8")
    assert "<title>First Light</title>" in article
    assert "<h1>Hi</h1>" in article
    assert 'href="second.html"' in article

    index = (output / "articles.html").read_text(encoding="utf-8")
    assert f"<title>{ARTICLES_TITLE}</title>" in index
    assert '<a href="first.html">First Light</a>' in index
    assert "March 2025" in index
    assert "Escape-time coloring" in index


def test_articles_are_indexed_by_file_name(project):
    content = project / "content"
    (content / "a-first.md").write_text(
        "---\ntitle: Alpha\ndate: D\ntagline: G\n---\nx", encoding="utf-8"
    )
    result = build_site(project)
    assert [a.slug for a in result.articles] == ["a-first", "first"]
    index = (project / "public" / "articles.html").read_text(encoding="utf-8")
    assert index.index("Alpha") < index.index("First Light")


def test_no_articles_gives_empty_index(project):
    for path in (project / "content").iterdir():
        path.unlink()
    result = build_site(project)
    assert result.articles == []
    assert (project / "public" / "articles.html").exists()


def test_build_is_idempotent(project):
    build_site(project)
    first = snapshot(project / "public")
    build_site(project)
    assert snapshot(project / "public") == first


def test_stale_output_is_removed(project):
    stale = project / "public" / "old.html"
    stale.parent.mkdir()
    stale.write_text("old", encoding="utf-8")
    build_site(project)
    assert not stale.exists()


def test_malformed_front_matter_aborts_before_writing(project):
    bad = project / "content" / "broken.md"
    bad.write_text("# no front matter here\n", encoding="utf-8")
    with pytest.raises(BuildError) as excinfo:
        build_site(project)
    assert excinfo.value.source_path == bad
    assert isinstance(excinfo.value.original_error, FrontmatterError)
    assert "Invalid front matter" in excinfo.value.message
    assert not (project / "public" / "broken.html").exists()
    assert not (project / "public" / "articles.html").exists()


def test_missing_metadata_field_aborts(project):
    (project / "content" / "partial.md").write_text(
        "---\ntitle: T\ndate: D\n---\nbody", encoding="utf-8"
    )
    with pytest.raises(BuildError, match="tagline"):
        build_site(project)


def test_missing_gallery_config_aborts(project):
    gallery = project / "static" / "mandelbrot-gallery"
    (gallery / "configs" / "b.toml").unlink()
    with pytest.raises(BuildError) as excinfo:
        build_site(project)
    assert excinfo.value.source_path == gallery / "configs" / "b.toml"
    assert isinstance(excinfo.value.original_error, FileNotFoundError)


def test_missing_frames_dir_gives_empty_home_page(project):
    frames = project / "static" / "mandelbrot-gallery" / "frames"
    for path in frames.iterdir():
        path.unlink()
    frames.rmdir()
    build_site(project)
    home = (project / "public" / "index.html").read_text(encoding="utf-8")
    assert '<div class="gallery-grid">' in home
    assert "<img" not in home


def test_missing_stylesheet_aborts(project):
    (project / "style.css").unlink()
    with pytest.raises(BuildError) as excinfo:
        build_site(project)
    assert excinfo.value.source_path == project / "style.css"
    assert "Cannot copy assets" in excinfo.value.message


def test_missing_gallery_tree_aborts(project):
    import shutil

    shutil.rmtree(project / "static")
    with pytest.raises(BuildError, match="Cannot copy assets"):
        build_site(project)


def test_missing_content_dir_aborts(project):
    import shutil

    shutil.rmtree(project / "content")
    with pytest.raises(BuildError) as excinfo:
        build_site(project)
    assert excinfo.value.source_path == project / "content"


def test_site_layout_from_root(tmp_path):
    layout = SiteLayout.from_root(tmp_path)
    assert layout.output_dir == tmp_path / "public"
    assert layout.content_dir == tmp_path / "content"
    assert layout.stylesheet == Path("style.css")
    assert layout.gallery_dir == Path("static/mandelbrot-gallery")


def test_format_error_message():
    assert _format_error_message(FrontmatterError("bad")) == "Invalid front matter: bad"
    missing = FileNotFoundError(2, "No such file or directory", "x.toml")
    assert _format_error_message(missing) == "File not found: x.toml"
    assert _format_error_message(PermissionError(13, "Permission denied")) == (
        "PermissionError: Permission denied"
    )
    assert _format_error_message(RuntimeError("boom")) == "RuntimeError: boom"


def test_build_error_str():
    err = BuildError(Path("content/x.md"), "Invalid front matter: nope")
    assert str(err) == "content/x.md: Invalid front matter: nope"
    assert err.original_error is None
