"""Load the page template set and inject the global site parameters.

Templates are Jinja files shipped in ``docgen/templates``. They are read once
at the start of a build (:class:`TemplateLoader`) and rendered once with the
site-wide context (:meth:`TemplateLoader.render`), which yields a
:class:`TemplateSet` of parsed document trees. The ``main`` tree is never
mutated directly; every output page works on its own deep copy.
"""

from __future__ import annotations

import copy
import dataclasses as dc
import datetime as dt
import logging
import re
import typing as typ

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, TemplateError
from markupsafe import Markup, escape
from PIL import Image

from docgen._constants import DOCGEN_VERSION, LOGO_PATH, TEMPLATES_DIR
from docgen.errors import TemplateLoadError
from docgen.generator.navigation import home_page

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from jinja2 import Template

    from docgen.generator.navigation import Navigation
    from docgen.metadata import Metadata, Person

logger = logging.getLogger(__name__)

TEMPLATE_FILES: dict[str, str] = {
    "main": "main.jinja",
    "redirect": "redirect.jinja",
    "web_cover": "web_cover.jinja",
    "pdf_cover": "pdf_cover.jinja",
    "pdf_header": "pdf_header.jinja",
    "pdf_footer": "pdf_footer.jinja",
}
MATH_ENGINES = ("katex", "mathjax")
LOGO_PADDING = 25
TRAILING_SEPARATOR = re.compile(r",\s*$")


@dc.dataclass(slots=True, frozen=True)
class Logo:
    """Pixel dimensions of the optional site logo."""

    width: int
    height: int
    url: str = LOGO_PATH

    @property
    def style(self) -> str:
        """Inline CSS that sizes the header around the logo."""
        return (
            f"background-image: url({self.url}); height: {self.height}px; "
            f"line-height: {self.height}px; "
            f"padding-left: {self.width + LOGO_PADDING}px;"
        )


NO_LOGO_STYLE = "padding-left: 0;"


def read_logo(input_dir: Path) -> Logo | None:
    """Return the logo dimensions, or ``None`` when no usable logo exists."""
    path = input_dir / LOGO_PATH
    try:
        with Image.open(path) as image:
            width, height = image.size
    except OSError:
        logger.warning("No usable logo at %s; the logo is not shown", path)
        return None
    return Logo(width=width, height=height)


def link_or_text(person: Person) -> Markup:
    """Render ``person`` as a link when it has a URL, otherwise as plain text."""
    if person.url:
        return Markup('<a href="{}">{}</a>').format(person.url, person.name)
    return escape(person.name)


def join_people(people: cabc.Iterable[Person]) -> Markup:
    """Comma-join link-or-text entries, dropping the trailing separator."""
    joined = "".join(f"{link_or_text(person)}, " for person in people)
    return Markup(TRAILING_SEPARATOR.sub("", joined))


def build_template_context(
    metadata: Metadata,
    navigation: Navigation,
    *,
    input_dir: Path,
    pdf: bool = False,
    set_version: str | None = None,
    set_release_date: str | None = None,
    math: str | None = None,
    now: dt.datetime | None = None,
) -> dict[str, typ.Any]:
    """Return the global parameters shared by every template.

    Parameters
    ----------
    metadata : Metadata
        Validated parameters and contents.
    navigation : Navigation
        Column-grouped sections used for the table of contents.
    input_dir : Path
        Source root, searched for ``files/images/logo.png``.
    pdf : bool, optional
        When true the table of contents links the generated PDF.
    set_version, set_release_date : str or None, optional
        Overrides for the release version and date; ``None`` keeps the values
        from ``parameters.json``.
    math : {"katex", "mathjax"} or None, optional
        Math rendering engine to reference from the page head.
    now : datetime, optional
        Local time used for the copyright year and attribution line.

    Returns
    -------
    dict[str, Any]
        Context passed to every Jinja template.
    """
    if math is not None and math not in MATH_ENGINES:
        msg = f"Unknown math engine {math!r}; expected one of {MATH_ENGINES}"
        raise ValueError(msg)
    params = metadata.parameters
    moment = now or dt.datetime.now()
    release_version = params.version if set_version is None else set_version
    release_date = params.date if set_release_date is None else set_release_date
    organization = link_or_text(params.organization)
    logo = read_logo(input_dir)
    attribution = (
        f"Created by DocGen {DOCGEN_VERSION} on {moment:%d/%m/%Y} "
        f"at {moment:%H:%M:%S}."
    )
    return {
        "title": params.title,
        "homelink": home_page(metadata.contents),
        "owner": link_or_text(params.owner),
        "author": link_or_text(params.author),
        "organization": organization,
        "website": link_or_text(params.website),
        "backlink": link_or_text(params.backlink),
        "contributors": join_people(params.contributors),
        "module": params.module,
        "id": params.id,
        "summary": params.summary,
        "marking": params.marking,
        "legalese": params.legalese,
        "version": release_version,
        "release_date": release_date,
        "web_title_version": f"({release_version})",
        "web_footer": f"Version {release_version} released on {release_date}.",
        "copyright": Markup("&copy; {} ").format(moment.year) + organization,
        "attribution": attribution,
        "logo_style": logo.style if logo else NO_LOGO_STYLE,
        "toc_columns": navigation.toc_columns(),
        "pdf_name": metadata.pdf_name if pdf else None,
        "math": math,
    }


@dc.dataclass(slots=True)
class TemplateSet:
    """Parsed document trees for every template kind."""

    main: BeautifulSoup
    redirect: BeautifulSoup
    web_cover: BeautifulSoup
    pdf_cover: BeautifulSoup
    pdf_header: BeautifulSoup
    pdf_footer: BeautifulSoup

    def clone_main(self) -> BeautifulSoup:
        """Return an independent deep copy of the main page shell."""
        return copy.copy(self.main)


class TemplateLoader:
    """Read the template files once and render them with the site context."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Load every template file from ``templates_dir``.

        Raises
        ------
        TemplateLoadError
            If any template is missing or has a syntax error.
        """
        logger.info("Loading templates")
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._templates: dict[str, Template] = {}
        for key, filename in TEMPLATE_FILES.items():
            try:
                self._templates[key] = self.env.get_template(filename)
            except TemplateError as exc:
                msg = f"Error loading template: {self.templates_dir / filename}"
                raise TemplateLoadError(msg) from exc

    def render(self, context: cabc.Mapping[str, typ.Any]) -> TemplateSet:
        """Render every template with ``context`` and parse the results."""
        trees: dict[str, BeautifulSoup] = {}
        for key, template in self._templates.items():
            try:
                html = template.render(**context)
            except TemplateError as exc:
                msg = f"Error rendering template: {TEMPLATE_FILES[key]}"
                raise TemplateLoadError(msg) from exc
            trees[key] = BeautifulSoup(html, "html.parser")
        return TemplateSet(**trees)


__all__ = [
    "Logo",
    "TemplateLoader",
    "TemplateSet",
    "build_template_context",
    "join_people",
    "link_or_text",
    "read_logo",
]
