"""Shared dataclasses used by the page composition pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup

    from docgen.metadata import PageEntry


@dc.dataclass(slots=True)
class ComposedPage:
    """A page whose template clone carries its navigation and content.

    Attributes
    ----------
    entry : PageEntry
        Page descriptor the document was built from.
    output_path : str
        Path of the HTML file relative to the output root.
    document : BeautifulSoup
        Fully composed document tree, ready for serialization.
    """

    entry: PageEntry
    output_path: str
    document: BeautifulSoup


@dc.dataclass(slots=True)
class ComposedSite:
    """Every composed page keyed by source identifier, plus the ownership page."""

    pages: dict[str, ComposedPage]
    ownership: BeautifulSoup


__all__ = ["ComposedPage", "ComposedSite"]
