"""Merge rendered content fragments into clones of the main page template.

Example
-------
>>> from docgen.generator.compositor import PageCompositor
>>> compositor = PageCompositor(templates, page_toc=True)  # doctest: +SKIP
>>> site = compositor.compose_site(metadata, sources)  # doctest: +SKIP
>>> site.pages["intro.md"].output_path  # doctest: +SKIP
'intro.html'
"""

from __future__ import annotations

import copy
import logging
import typing as typ

from bs4 import BeautifulSoup

from docgen.generator.models import ComposedPage, ComposedSite
from docgen.generator.navigation import anchor_slug, page_output_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4 import Tag

    from docgen.generator.templates import TemplateSet
    from docgen.metadata import Metadata, PageEntry

logger = logging.getLogger(__name__)

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
TABLE_CLASSES = ("w-table", "w-fixed", "w-stripe")
AUTO_TITLE_ID = "dg-autoTitle"
HIDDEN_TITLE_CLASS = "dg-hiddenTitle"


class PageCompositor:
    """Build one finished document tree per page from the template set."""

    def __init__(self, templates: TemplateSet, *, page_toc: bool = False) -> None:
        self.templates = templates
        self.page_toc = page_toc

    def compose_site(
        self, metadata: Metadata, sources: cabc.Mapping[str, str]
    ) -> ComposedSite:
        """Compose every declared page plus the ownership page.

        Parameters
        ----------
        metadata : Metadata
            Validated contents; every page descriptor is composed in
            declaration order.
        sources : Mapping[str, str]
            Rendered HTML fragments keyed by source identifier.

        Returns
        -------
        ComposedSite
            Composed documents ready for the writer.
        """
        logger.info("Generating the static web content")
        pages: dict[str, ComposedPage] = {}
        for entry in metadata.pages:
            pages[entry.source] = ComposedPage(
                entry=entry,
                output_path=page_output_path(entry.source),
                document=self.compose(entry, sources[entry.source]),
            )
        return ComposedSite(pages=pages, ownership=self.compose_ownership())

    def compose(self, entry: PageEntry, content: str) -> BeautifulSoup:
        """Return a new document for ``entry`` with ``content`` injected."""
        document = self.templates.clone_main()
        inner = _content_container(document, confined=not entry.html)
        fragment = BeautifulSoup(content, "html.parser")
        inner.extend(list(fragment.contents))

        page_toc = _anchor_headings(document, inner)
        if page_toc is not None and self.page_toc and not entry.html:
            inner.insert(0, page_toc)

        title = document.new_tag("h1", attrs={"id": AUTO_TITLE_ID})
        title.string = entry.title
        if entry.html:
            title["class"] = [HIDDEN_TITLE_CLASS]
        inner.insert(0, title)

        _style_tables(document)
        return document

    def compose_ownership(self) -> BeautifulSoup:
        """Return the ownership page: the web cover inside the main shell."""
        document = self.templates.clone_main()
        inner = _content_container(document, confined=True)
        cover = copy.copy(self.templates.web_cover)
        body = cover.body or cover
        inner.extend(list(body.contents))
        return document


def _content_container(document: BeautifulSoup, *, confined: bool) -> Tag:
    """Replace ``#dg-content`` children with a wrapper and return the inner div."""
    content = document.select_one("#dg-content")
    if content is None:
        msg = "Main template has no #dg-content element"
        raise ValueError(msg)
    content.clear()
    inner = document.new_tag("div", attrs={"id": "dg-innerContent"})
    if confined:
        wrapper = document.new_tag("div", attrs={"class": "w-fixed-width"})
        wrapper.append(inner)
        content.append(wrapper)
    else:
        content.append(inner)
    return inner


def _anchor_headings(document: BeautifulSoup, inner: Tag) -> Tag | None:
    """Give every content heading a slug id; return the in-page TOC list."""
    headings = inner.find_all(HEADING_TAGS)
    if not headings:
        return None
    toc = document.new_tag("ul", attrs={"class": "dg-pageToc"})
    for heading in headings:
        label = heading.get_text()
        anchor = anchor_slug(label)
        heading["id"] = anchor
        item = document.new_tag("li")
        link = document.new_tag("a", attrs={"href": f"#{anchor}"})
        link.string = label
        item.append(link)
        toc.append(item)
    return toc


def _style_tables(document: BeautifulSoup) -> None:
    for table in document.select("table:not(.unstyled)"):
        classes = list(table.get("class") or [])
        classes.extend(name for name in TABLE_CLASSES if name not in classes)
        table["class"] = classes


__all__ = ["PageCompositor"]
