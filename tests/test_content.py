"""Tests for reading and rendering page sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from docgen._concurrency import gather
from docgen.content import load_sources, read_source
from docgen.errors import SourceLoadError
from docgen.generator.renderer import HtmlContentRenderer
from docgen.metadata import PageEntry


def test_byte_order_mark_is_stripped(tmp_path: Path) -> None:
    path = tmp_path / "page.md"
    path.write_text("\ufeff# Title\n", encoding="utf-8")

    assert read_source(path) == "# Title\n"


def test_html_pages_pass_through_verbatim(tmp_path: Path) -> None:
    raw = "<div class='x'># not a heading</div>\n"
    (tmp_path / "raw.html").write_text(raw, encoding="utf-8")

    sources = load_sources(tmp_path, [PageEntry("Raw", "raw.html", html=True)])

    assert sources == {"raw.html": raw}


def test_markdown_is_rendered_in_declaration_order(tmp_path: Path) -> None:
    (tmp_path / "b.md").write_text("# Bee\n", encoding="utf-8")
    (tmp_path / "a.md").write_text("| x |\n| --- |\n| 1 |\n", encoding="utf-8")

    sources = load_sources(tmp_path, [PageEntry("B", "b.md"), PageEntry("A", "a.md")])

    assert list(sources) == ["b.md", "a.md"]
    assert "<h1>Bee</h1>" in sources["b.md"]
    assert "<table>" in sources["a.md"]


def test_file_links_survive_rendering(tmp_path: Path) -> None:
    (tmp_path / "links.md").write_text(
        "[share](file:///srv/share/doc.pdf)\n", encoding="utf-8"
    )

    html = load_sources(tmp_path, [PageEntry("Links", "links.md")])["links.md"]

    assert 'href="file:///srv/share/doc.pdf"' in html


def test_fenced_code_is_highlighted() -> None:
    html = HtmlContentRenderer().markdown("```python\nprint('hi')\n```\n")

    assert '<pre class="codehilite"><code class="language-python">' in html
    assert "<span" in html, "pygments should emit highlighted tokens"


def test_unknown_fence_language_renders_plain_code() -> None:
    html = HtmlContentRenderer().markdown("```nosuchlang\n<x>\n```\n")

    assert "codehilite" not in html
    assert "&lt;x&gt;" in html


def test_list_directly_after_paragraph() -> None:
    html = HtmlContentRenderer().markdown("Steps:\n- one\n- two\n")

    assert "<p>Steps:</p>" in html
    assert "<ul>" in html, "a list may interrupt a paragraph"
    assert html.count("<li>") == 2


def test_two_space_nested_list() -> None:
    html = HtmlContentRenderer().markdown("- a\n  - b\n")

    assert html.count("<ul>") == 2, "the inner list should stay nested"


def test_tables_are_enabled() -> None:
    html = HtmlContentRenderer().markdown("| a | b |\n| --- | --- |\n| 1 | 2 |\n")

    assert "<table>" in html
    assert "<td>1</td>" in html


def test_empty_source_renders_empty_fragment() -> None:
    assert HtmlContentRenderer().markdown("  \n") == ""


def test_missing_source_names_the_path(tmp_path: Path) -> None:
    with pytest.raises(SourceLoadError, match="missing.md"):
        load_sources(
            tmp_path,
            [PageEntry("Missing", "missing.md")],
        )


def test_gather_raises_first_failure() -> None:
    def boom() -> str:
        msg = "broken"
        raise SourceLoadError(msg)

    with pytest.raises(SourceLoadError, match="broken"):
        gather({"ok": lambda: "fine", "bad": boom})


def test_gather_preserves_key_order() -> None:
    assert list(gather({"z": lambda: 1, "a": lambda: 2})) == ["z", "a"]
    assert gather({}) == {}
