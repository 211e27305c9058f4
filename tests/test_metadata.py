"""Tests for loading and validating the JSON metadata files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import make_contents, make_parameters, write_source_tree

from docgen._constants import EXTRA_COLUMN, RELEASE_NOTES_SOURCE
from docgen.errors import MetadataError
from docgen.metadata import load_metadata, validate_document


def test_load_metadata_appends_extra_section_once(source_tree: Path) -> None:
    metadata = load_metadata(source_tree)

    extras = [section for section in metadata.contents if section.heading == "Extra"]
    assert len(extras) == 1, "the release notes section must be appended once"
    assert metadata.contents[-1].column == EXTRA_COLUMN
    assert metadata.contents[-1].pages[0].source == RELEASE_NOTES_SOURCE
    assert [page.source for page in metadata.pages] == [
        "intro.md",
        RELEASE_NOTES_SOURCE,
    ]


def test_load_metadata_types_people(source_tree: Path) -> None:
    params = load_metadata(source_tree).parameters

    assert params.organization.name == "Acme"
    assert params.author.url == ""
    assert [person.name for person in params.contributors] == ["Bo", "Cy"]


def test_pdf_name_is_lowercased(tmp_path: Path) -> None:
    root = write_source_tree(tmp_path / "src", parameters=make_parameters(name="WiDGet"))

    assert load_metadata(root).pdf_name == "widget.pdf"


def test_backlink_is_optional(tmp_path: Path) -> None:
    parameters = make_parameters()
    del parameters["backlink"]
    root = write_source_tree(tmp_path / "src", parameters=parameters)

    assert load_metadata(root).parameters.backlink.name == ""


def test_missing_required_field_names_file(tmp_path: Path) -> None:
    parameters = make_parameters()
    del parameters["version"]
    root = write_source_tree(tmp_path / "src", parameters=parameters)

    with pytest.raises(MetadataError, match=r"parameters\.json") as excinfo:
        load_metadata(root)
    assert "version" in str(excinfo.value)


def test_invalid_json_is_reported(tmp_path: Path) -> None:
    root = write_source_tree(tmp_path / "src")
    (root / "contents.json").write_text("[{", encoding="utf-8")

    with pytest.raises(MetadataError, match=r"contents\.json \(invalid JSON\)"):
        load_metadata(root)


def test_missing_file_is_fatal(tmp_path: Path) -> None:
    root = write_source_tree(tmp_path / "src")
    (root / "parameters.json").unlink()

    with pytest.raises(MetadataError, match="Error loading required JSON"):
        load_metadata(root)


def test_byte_order_mark_is_accepted(tmp_path: Path) -> None:
    root = write_source_tree(tmp_path / "src")
    payload = json.dumps(make_contents()).encode("utf-8")
    (root / "contents.json").write_bytes(b"\xef\xbb\xbf" + payload)

    assert load_metadata(root).contents[0].heading == "Guide"


@pytest.mark.parametrize("column", [0, 5, 6])
def test_contents_column_outside_visible_grid_is_rejected(column: int) -> None:
    contents = make_contents()
    contents[0]["column"] = column

    with pytest.raises(MetadataError, match="contents.json"):
        validate_document("contents", contents)


def test_html_flag_must_be_boolean() -> None:
    contents = make_contents()
    contents[0]["pages"][0]["html"] = "yes"

    with pytest.raises(MetadataError):
        validate_document("contents", contents)


def test_section_without_pages_is_rejected(tmp_path: Path) -> None:
    contents = [{"heading": "Empty", "column": 1, "pages": []}, *make_contents()]
    root = write_source_tree(tmp_path / "src", contents=contents)

    with pytest.raises(MetadataError, match=r"contents\.json"):
        load_metadata(root)
