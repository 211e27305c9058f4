"""Tests for the redirect stub and transient file cleanup."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from docgen.finalize import cleanup, redirect_target, write_redirect

REDIRECT = (
    '<html><head><meta http-equiv="REFRESH" content="0;url=x"></head>'
    '<body><a href="x">home</a></body></html>'
)


def test_redirect_target_uses_output_dir_name(tmp_path: Path) -> None:
    assert redirect_target(tmp_path / "site", "intro.html") == "site/intro.html"


def test_write_redirect_next_to_output(tmp_path: Path) -> None:
    output = tmp_path / "site"
    output.mkdir()
    template = BeautifulSoup(REDIRECT, "html.parser")

    path = write_redirect(template, output, "intro.html")

    assert path == tmp_path / "index.html"
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
    assert soup.select_one("meta")["content"] == "0;url=site/intro.html"
    assert soup.select_one("a")["href"] == "site/intro.html"
    assert template.select_one("a")["href"] == "x", "template must not be mutated"


def test_redirect_write_failure_is_not_fatal(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    output = tmp_path / "missing-parent" / "site"
    template = BeautifulSoup(REDIRECT, "html.parser")

    with caplog.at_level("ERROR"):
        assert write_redirect(template, output, "intro.html") is None
    assert "Error writing redirect file" in caplog.text


def test_cleanup_removes_temp_dir(tmp_path: Path) -> None:
    temp = tmp_path / "temp"
    temp.mkdir()
    (temp / "pdfCover.html").write_text("x", encoding="utf-8")

    cleanup(tmp_path)

    assert not temp.exists()


def test_cleanup_tolerates_missing_temp_dir(tmp_path: Path) -> None:
    cleanup(tmp_path)

    assert list(tmp_path.iterdir()) == []
