from gallerypress.templates import (
    COPYRIGHT_YEAR,
    PROFILE_URL,
    TOAST_DURATION_MS,
    Page,
    PageRenderer,
)


def test_render_wraps_body_in_shell(tmp_path):
    renderer = PageRenderer("Test Site")
    html = renderer.render(Page("Hello", "<p>Body</p>", tmp_path / "x.html"))

    assert html.startswith("<!DOCTYPE html>")
    assert '<meta charset="UTF-8">' in html
    assert '<meta name="color-scheme" content="dark">' in html
    assert "<title>Hello</title>" in html
    assert '<link rel="stylesheet" href="style.css">' in html
    assert "<h3>Test Site</h3>" in html
    assert '<a href="index.html">Home</a>' in html
    assert '<a href="articles.html">Articles</a>' in html
    assert f'href="{PROFILE_URL}"' in html
    assert "<main><p>Body</p></main>" in html
    assert f"&copy; Test Site {COPYRIGHT_YEAR}" in html
    assert 'href="#top"' in html
    assert 'id="top"' in html


def test_shell_includes_clipboard_script(tmp_path):
    html = PageRenderer("S").render(Page("t", "", tmp_path / "x.html"))
    assert "function copyToml(img)" in html
    assert "navigator.clipboard.writeText(toml)" in html
    assert 'id="toast"' in html
    assert f"}}, {TOAST_DURATION_MS});" in html
    assert "console.error" in html


def test_title_is_escaped_but_body_is_not(tmp_path):
    html = PageRenderer("S").render(
        Page("Fish & <Chips>", "<em>raw</em>", tmp_path / "x.html")
    )
    assert "<title>Fish &amp; &lt;Chips&gt;</title>" in html
    assert "<em>raw</em>" in html


def test_custom_shell_values(tmp_path):
    renderer = PageRenderer(
        "S", profile_url="https://example.com/me", copyright_year=1999, toast_duration_ms=500
    )
    html = renderer.render(Page("t", "", tmp_path / "x.html"))
    assert 'href="https://example.com/me"' in html
    assert "&copy; S 1999" in html
    assert "}, 500);" in html


def test_write_overwrites_existing_file(tmp_path):
    target = tmp_path / "page.html"
    target.write_text("old content", encoding="utf-8")
    written = PageRenderer("S").write(Page("New", "<p>new</p>", target))
    assert written == target
    text = target.read_text(encoding="utf-8")
    assert "old content" not in text
    assert "<p>new</p>" in text
