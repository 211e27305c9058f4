"""High-level orchestration of a docgen build.

:class:`DocumentBuilder` threads one :class:`BuildOptions` value through the
pipeline stages in order: recreate the output root, load templates, validate
metadata, load sources, compose pages, write the site, optionally produce the
PDF, then write the redirect stub and remove transient files. Every stage
receives only what it needs and returns its results; nothing is held in
module-level state.

Example
-------
>>> from pathlib import Path
>>> from docgen.pipeline import BuildOptions, DocumentBuilder
>>> options = BuildOptions(input_dir=Path("source"), output_dir=Path("out"))
>>> result = DocumentBuilder(options).run()  # doctest: +SKIP
>>> [path.name for path in result.written][:2]  # doctest: +SKIP
['intro.html', 'release-notes.html']
"""

from __future__ import annotations

import dataclasses as dc
import logging
from pathlib import Path

from docgen._constants import DOCGEN_VERSION
from docgen.content import load_sources
from docgen.errors import BuildOptionsError
from docgen.finalize import cleanup, write_redirect
from docgen.generator.compositor import PageCompositor
from docgen.generator.navigation import Navigation, home_page
from docgen.generator.renderer import HtmlContentRenderer
from docgen.generator.templates import TemplateLoader, build_template_context
from docgen.metadata import load_metadata
from docgen.pdf import DEFAULT_JAVASCRIPT_DELAY, PdfArguments, generate_pdf
from docgen.writer import copy_assets, remake_dir, write_site

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildOptions:
    """Options for a single build run.

    Attributes
    ----------
    input_dir : Path
        Source root holding the metadata, page sources, and ``files/``.
    output_dir : Path
        Output root; deleted and recreated at the start of every run.
    wkhtmltopdf_path : str
        Renderer executable, either a path or a name resolved via ``PATH``.
    pdf : bool
        Generate ``<name>.pdf`` alongside the web pages.
    pdf_delay : int
        Milliseconds the renderer waits for page scripts.
    set_version, set_release_date : str or None
        Overrides for the version and release date in ``parameters.json``.
    redirect : bool
        Write an ``index.html`` redirect next to the output root.
    page_toc : bool
        Prepend an in-page contents list to Markdown pages.
    math_katex, math_mathjax : bool
        Enable one math rendering engine (mutually exclusive).
    verbose : bool
        Surface underlying error detail and the renderer's own output.
    """

    input_dir: Path
    output_dir: Path
    wkhtmltopdf_path: str = "wkhtmltopdf"
    pdf: bool = False
    pdf_delay: int = DEFAULT_JAVASCRIPT_DELAY
    set_version: str | None = None
    set_release_date: str | None = None
    redirect: bool = False
    page_toc: bool = False
    math_katex: bool = False
    math_mathjax: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        self.input_dir = Path(self.input_dir).expanduser().resolve()
        self.output_dir = Path(self.output_dir).expanduser().resolve()
        if self.math_katex and self.math_mathjax:
            msg = "Only one math engine can be enabled: choose KaTeX or MathJax."
            raise BuildOptionsError(msg)
        if self.pdf_delay < 0:
            msg = f"PDF script delay must not be negative, got {self.pdf_delay}"
            raise BuildOptionsError(msg)

    @property
    def math(self) -> str | None:
        if self.math_katex:
            return "katex"
        if self.math_mathjax:
            return "mathjax"
        return None


@dc.dataclass(slots=True)
class BuildResult:
    """Files produced by a successful build."""

    written: list[Path]
    pdf: Path | None = None
    redirect: Path | None = None


class DocumentBuilder:
    """Run the full site (and optional PDF) build for one set of options."""

    def __init__(self, options: BuildOptions) -> None:
        self.options = options
        self.renderer = HtmlContentRenderer()

    def run(self) -> BuildResult:
        """Build the site and return the produced files.

        Raises
        ------
        DocgenError
            On any fatal condition; stages after the failing one never run
            and files already written stay on disk.
        """
        opts = self.options
        logger.info("DocGen version %s", DOCGEN_VERSION)
        remake_dir(opts.output_dir)
        loader = TemplateLoader()

        metadata = load_metadata(opts.input_dir)
        sources = load_sources(opts.input_dir, metadata.pages, self.renderer)
        navigation = Navigation.from_contents(metadata.contents)

        context = build_template_context(
            metadata,
            navigation,
            input_dir=opts.input_dir,
            pdf=opts.pdf,
            set_version=opts.set_version,
            set_release_date=opts.set_release_date,
            math=opts.math,
        )
        templates = loader.render(context)
        compositor = PageCompositor(templates, page_toc=opts.page_toc)
        site = compositor.compose_site(metadata, sources)

        written = write_site(site, templates, opts.output_dir, pdf=opts.pdf)
        copy_assets(
            opts.input_dir,
            opts.output_dir,
            katex=opts.math_katex,
            code_stylesheet=self.renderer.stylesheet,
        )

        result = BuildResult(written=written)
        if opts.pdf:
            arguments = PdfArguments.from_navigation(
                navigation,
                opts.output_dir,
                metadata.pdf_name,
                javascript_delay=opts.pdf_delay,
            )
            result.pdf = generate_pdf(
                opts.wkhtmltopdf_path, arguments, verbose=opts.verbose
            )

        if opts.redirect:
            result.redirect = write_redirect(
                templates.redirect, opts.output_dir, home_page(metadata.contents)
            )
        if opts.pdf:
            cleanup(opts.output_dir)
            result.written = [path for path in written if path.exists()]
        logger.info("Done!")
        return result


__all__ = ["BuildOptions", "BuildResult", "DocumentBuilder"]
