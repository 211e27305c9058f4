"""Tests for the Cyclopts commands and the build orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from conftest import make_contents, write_source_tree

from docgen import cli
from docgen.errors import BuildOptionsError
from docgen.pipeline import BuildOptions, DocumentBuilder


def test_run_builds_site(source_tree: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "out"

    cli.run(input_dir=source_tree, output_dir=output)

    for name in ("intro.html", "release-notes.html", "ownership.html"):
        assert (output / name).is_file(), name
    assert (output / "require" / "docgen.css").is_file()
    assert (output / "require" / "codehilite.css").is_file()
    assert "wrote" in capsys.readouterr().out


def test_run_replaces_stale_output(source_tree: Path, tmp_path: Path) -> None:
    output = tmp_path / "out"
    output.mkdir()
    (output / "stale.html").write_text("old", encoding="utf-8")

    cli.run(input_dir=source_tree, output_dir=output)

    assert not (output / "stale.html").exists()


def test_invalid_metadata_exits_non_zero(tmp_path: Path) -> None:
    contents = make_contents()
    del contents[0]["heading"]
    source = write_source_tree(tmp_path / "src", contents=contents)
    output = tmp_path / "out"

    with pytest.raises(SystemExit) as excinfo:
        cli.run(input_dir=source, output_dir=output)

    assert excinfo.value.code == 1
    assert not (output / "intro.html").exists()


def test_missing_source_exits_non_zero(tmp_path: Path) -> None:
    source = write_source_tree(tmp_path / "src")
    (source / "intro.md").unlink()

    with pytest.raises(SystemExit) as excinfo:
        cli.run(input_dir=source, output_dir=tmp_path / "out", verbose=True)

    assert excinfo.value.code == 1


def test_both_math_engines_are_rejected(source_tree: Path, tmp_path: Path) -> None:
    output = tmp_path / "out"

    with pytest.raises(SystemExit):
        cli.run(
            input_dir=source_tree,
            output_dir=output,
            math_katex=True,
            math_mathjax=True,
        )
    assert not output.exists(), "options are checked before touching the output"


def test_build_options_reject_negative_delay(tmp_path: Path) -> None:
    with pytest.raises(BuildOptionsError, match="negative"):
        BuildOptions(input_dir=tmp_path, output_dir=tmp_path / "out", pdf_delay=-1)


def test_overrides_and_page_toc(source_tree: Path, tmp_path: Path) -> None:
    (source_tree / "intro.md").write_text(
        "# Intro\n\n## Usage Notes\n\ntext\n", encoding="utf-8"
    )
    options = BuildOptions(
        input_dir=source_tree,
        output_dir=tmp_path / "out",
        set_version="9.9",
        set_release_date="tomorrow",
        page_toc=True,
        math_mathjax=True,
    )

    result = DocumentBuilder(options).run()

    page = BeautifulSoup(
        (options.output_dir / "intro.html").read_text(encoding="utf-8"), "html.parser"
    )
    assert page.select_one("#dg-web-title-version").get_text() == "(9.9)"
    assert page.select_one("#dg-web-footer").get_text() == (
        "Version 9.9 released on tomorrow."
    )
    assert page.select_one('.dg-pageToc a[href="#usage-notes"]') is not None
    assert "MathJax.js" in str(page.head)
    assert result.pdf is None
    assert result.redirect is None


def test_redirect_is_written_beside_output(source_tree: Path, tmp_path: Path) -> None:
    output = tmp_path / "public" / "site"

    cli.run(input_dir=source_tree, output_dir=output, redirect=True)

    redirect = BeautifulSoup(
        (tmp_path / "public" / "index.html").read_text(encoding="utf-8"),
        "html.parser",
    )
    assert redirect.select_one("a")["href"] == "site/intro.html"


def test_katex_bundle_is_copied(source_tree: Path, tmp_path: Path) -> None:
    output = tmp_path / "out"

    cli.run(input_dir=source_tree, output_dir=output, math_katex=True)

    assert (output / "require" / "katex").is_dir()
    page = (output / "intro.html").read_text(encoding="utf-8")
    assert "require/katexInjector.js" in page


def test_scaffold_creates_buildable_project(tmp_path: Path) -> None:
    project = tmp_path / "docs"

    cli.scaffold(output_dir=project)

    assert (project / "parameters.json").is_file()
    assert (project / "contents.json").is_file()
    assert (project / "release-notes.txt").is_file()
    output = tmp_path / "out"
    cli.run(input_dir=project, output_dir=output)
    assert (output / "custom.html").is_file()
    assert (output / "intro.html").is_file()


def test_empty_first_section_exits_non_zero(tmp_path: Path) -> None:
    contents = [{"heading": "Empty", "column": 1, "pages": []}, *make_contents()]
    source = write_source_tree(tmp_path / "src", contents=contents)
    output = tmp_path / "out"

    with pytest.raises(SystemExit) as excinfo:
        cli.run(input_dir=source, output_dir=output)

    assert excinfo.value.code == 1
    assert list(output.iterdir()) == [], "nothing is written after invalid metadata"
