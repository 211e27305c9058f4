"""Typed dataclasses describing validated docgen metadata."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docgen._constants import EXTRA_COLUMN, PDF_NAME_TEMPLATE, RELEASE_NOTES_SOURCE


@dc.dataclass(slots=True, frozen=True)
class Person:
    """A name with an optional URL (empty string when absent)."""

    name: str
    url: str = ""

    @classmethod
    def from_mapping(cls, data: typ.Mapping[str, typ.Any] | None) -> Person:
        if not data:
            return cls(name="")
        return cls(name=str(data.get("name", "")), url=str(data.get("url", "")))


@dc.dataclass(slots=True, frozen=True)
class Parameters:
    """Site-wide parameters loaded from ``parameters.json``.

    Attributes
    ----------
    title : str
        Document title shown in the page header and ``<title>``.
    name : str
        Short name; its lowercased form names the generated PDF.
    version : str
        Release version, overridable at build time.
    date : str
        Release date, overridable at build time.
    organization, author, owner, website, backlink : Person
        Link-or-text fields; ``backlink`` is optional in the source JSON.
    contributors : tuple[Person, ...]
        Ordered list of contributors.
    module, id, summary, marking, legalese : str
        Free-text fields copied verbatim into the templates.
    """

    title: str
    name: str
    version: str
    date: str
    organization: Person
    author: Person
    owner: Person
    website: Person
    backlink: Person
    contributors: tuple[Person, ...]
    module: str
    id: str
    summary: str
    marking: str
    legalese: str

    @classmethod
    def from_mapping(cls, data: typ.Mapping[str, typ.Any]) -> Parameters:
        return cls(
            title=data["title"],
            name=data["name"],
            version=data["version"],
            date=data["date"],
            organization=Person.from_mapping(data["organization"]),
            author=Person.from_mapping(data["author"]),
            owner=Person.from_mapping(data["owner"]),
            website=Person.from_mapping(data["website"]),
            backlink=Person.from_mapping(data.get("backlink")),
            contributors=tuple(
                Person.from_mapping(item) for item in data["contributors"]
            ),
            module=data["module"],
            id=data["id"],
            summary=data["summary"],
            marking=data["marking"],
            legalese=data["legalese"],
        )


@dc.dataclass(slots=True, frozen=True)
class PageEntry:
    """A page descriptor inside a contents section."""

    title: str
    source: str
    html: bool = False


@dc.dataclass(slots=True, frozen=True)
class Section:
    """A navigation heading placed in one of the five columns."""

    heading: str
    column: int
    pages: tuple[PageEntry, ...]

    @classmethod
    def from_mapping(cls, data: typ.Mapping[str, typ.Any]) -> Section:
        pages = tuple(
            PageEntry(
                title=page["title"],
                source=page["source"],
                html=page.get("html") is True,
            )
            for page in data["pages"]
        )
        return cls(heading=data["heading"], column=data["column"], pages=pages)


def extra_section() -> Section:
    """Return the generated section that links the release notes."""
    return Section(
        heading="Extra",
        column=EXTRA_COLUMN,
        pages=(PageEntry(title="Release notes", source=RELEASE_NOTES_SOURCE),),
    )


@dc.dataclass(slots=True, frozen=True)
class Metadata:
    """Validated parameters plus the contents list (with the Extra section)."""

    parameters: Parameters
    contents: tuple[Section, ...]

    @property
    def pages(self) -> list[PageEntry]:
        """Every page descriptor in declaration order."""
        return [page for section in self.contents for page in section.pages]

    @property
    def pdf_name(self) -> str:
        """File name of the generated PDF, e.g. ``widget.pdf``."""
        return PDF_NAME_TEMPLATE.format(name=self.parameters.name.lower())


__all__ = [
    "Metadata",
    "PageEntry",
    "Parameters",
    "Person",
    "Section",
    "extra_section",
]
