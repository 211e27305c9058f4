"""Shared fixtures that build small docgen source trees on disk."""

from __future__ import annotations

import json
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

FAKE_RENDERER = """#!/bin/sh
if [ "$1" = "-V" ]; then
  echo "{version}"
  exit 0
fi
for last; do :; done
printf '%%PDF-1.4\\n' > "$last"
exit {exit_code}
"""


def make_parameters(**overrides: typ.Any) -> dict[str, typ.Any]:
    """Return a valid ``parameters.json`` payload with optional overrides."""
    parameters: dict[str, typ.Any] = {
        "title": "Widget Guide",
        "name": "Widget",
        "version": "1.0",
        "date": "01/02/2026",
        "organization": {"name": "Acme", "url": "https://acme.invalid"},
        "author": {"name": "Ada", "url": ""},
        "owner": {"name": "Docs Team", "url": "https://acme.invalid/docs"},
        "contributors": [
            {"name": "Bo", "url": ""},
            {"name": "Cy", "url": "https://acme.invalid/cy"},
        ],
        "website": {"name": "acme.invalid", "url": "https://acme.invalid"},
        "backlink": {"name": "Home", "url": ""},
        "module": "Widgets",
        "id": "DOC-1",
        "summary": "All about widgets.",
        "marking": "Internal",
        "legalese": "No warranty.",
    }
    parameters.update(overrides)
    return parameters


def make_contents() -> list[dict[str, typ.Any]]:
    """Return a single-section ``contents.json`` payload."""
    return [
        {
            "heading": "Guide",
            "column": 1,
            "pages": [{"title": "Intro", "source": "intro.md"}],
        }
    ]


def write_source_tree(
    root: Path,
    *,
    parameters: typ.Any = None,
    contents: typ.Any = None,
    pages: dict[str, str] | None = None,
) -> Path:
    """Write a complete source tree under ``root`` and return it."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "parameters.json").write_text(
        json.dumps(make_parameters() if parameters is None else parameters),
        encoding="utf-8",
    )
    (root / "contents.json").write_text(
        json.dumps(make_contents() if contents is None else contents),
        encoding="utf-8",
    )
    sources = {"intro.md": "# Intro\n\nHello widgets.\n"}
    sources.update(pages or {})
    sources.setdefault("release-notes.txt", "## 1.0\n\n- First release.\n")
    for name, text in sources.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def write_fake_renderer(
    directory: Path, *, version: str, exit_code: int = 0
) -> Path:
    """Write a POSIX shell stand-in for wkhtmltopdf and return its path."""
    script = directory / "fake-wkhtmltopdf"
    script.write_text(
        FAKE_RENDERER.format(version=version, exit_code=exit_code), encoding="utf-8"
    )
    script.chmod(0o755)
    return script


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Return a minimal valid source tree inside ``tmp_path``."""
    return write_source_tree(tmp_path / "source")
