"""Derive the column-grouped navigation shared by the web TOC and the PDF.

The same :class:`Navigation` value drives both the visible table of contents
and the page order handed to the PDF renderer, so the two always agree.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from docgen._constants import COLUMNS, EXTRA_COLUMN

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docgen.metadata import PageEntry, Section

WHITESPACE_PATTERN = re.compile(r"\s+")


def page_output_path(source: str) -> str:
    """Return the output file name for a page source identifier.

    The identifier is cut at its last ``.`` and ``.html`` appended, so
    ``guide/intro.md`` becomes ``guide/intro.html`` and ``a.b.md`` becomes
    ``a.b.html``. An identifier without any ``.`` is kept whole.
    """
    index = source.rfind(".")
    name = source if index == -1 else source[:index]
    return f"{name}.html"


def anchor_slug(label: str) -> str:
    """Lowercase ``label`` and replace whitespace runs with hyphens."""
    return WHITESPACE_PATTERN.sub("-", label.lower())


def home_page(contents: cabc.Sequence[Section]) -> str:
    """Return the output path of the first page of the first declared section."""
    return page_output_path(contents[0].pages[0].source)


@dc.dataclass(slots=True, frozen=True)
class TocLink:
    """A single page link in the table of contents."""

    title: str
    href: str


@dc.dataclass(slots=True, frozen=True)
class TocSection:
    """A heading and its page links inside one TOC column."""

    heading: str
    links: tuple[TocLink, ...]


@dc.dataclass(slots=True, frozen=True)
class Navigation:
    """Sections bucketed by column, preserving declaration order per column.

    Attributes
    ----------
    columns : dict[int, tuple[Section, ...]]
        Mapping of every column number (1-5) to its sections.
    """

    columns: dict[int, tuple[Section, ...]]

    @classmethod
    def from_contents(cls, contents: cabc.Iterable[Section]) -> Navigation:
        """Group ``contents`` into the five column buckets."""
        buckets: dict[int, list[Section]] = {column: [] for column in COLUMNS}
        for section in contents:
            if section.column in buckets:
                buckets[section.column].append(section)
        return cls(columns={key: tuple(value) for key, value in buckets.items()})

    def iter_sections(
        self, *, include_extra: bool = True
    ) -> cabc.Iterator[tuple[int, tuple[Section, ...]]]:
        """Yield ``(column, sections)`` pairs in column order."""
        for column in COLUMNS:
            if column == EXTRA_COLUMN and not include_extra:
                continue
            yield column, self.columns[column]

    def ordered_pages(self) -> list[PageEntry]:
        """Return every page in column-major order, including column 5."""
        return [
            page
            for _column, sections in self.iter_sections()
            for section in sections
            for page in section.pages
        ]

    def toc_columns(self) -> list[tuple[TocSection, ...]]:
        """Return the visible TOC grid (columns 1-4) as link sections."""
        return [
            tuple(
                TocSection(
                    heading=section.heading,
                    links=tuple(
                        TocLink(title=page.title, href=page_output_path(page.source))
                        for page in section.pages
                    ),
                )
                for section in sections
            )
            for _column, sections in self.iter_sections(include_extra=False)
        ]


__all__ = [
    "Navigation",
    "TocLink",
    "TocSection",
    "anchor_slug",
    "home_page",
    "page_output_path",
]
