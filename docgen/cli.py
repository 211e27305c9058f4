"""Cyclopts CLI entrypoint for building docgen sites.

The ``docgen`` console script turns a source tree (``parameters.json``,
``contents.json``, Markdown/HTML pages, ``release-notes.txt``) into a static
web site and, optionally, a single PDF rendered by ``wkhtmltopdf``. Every
option can also be supplied through a ``DOCGEN_<OPTION>`` environment
variable.

Examples
--------
Build a site from ``./source`` into ``./output``:

>>> from docgen.cli import app
>>> app(["run", "--input-dir", "source", "--output-dir", "output"])  # doctest: +SKIP

Start a new project from the bundled example:

>>> app(["scaffold", "--output-dir", "my-docs"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .errors import BuildOptionsError, DocgenError
from .pdf import DEFAULT_JAVASCRIPT_DELAY
from .pipeline import BuildOptions, DocumentBuilder
from .scaffold import scaffold as scaffold_project

logger = logging.getLogger("docgen")

app = App(name="docgen", config=cyclopts.config.Env("DOCGEN_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(format="%(message)s")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _fail(exc: Exception, *, verbose: bool) -> typ.NoReturn:
    """Report a fatal error and exit with status 1."""
    logger.error("%s", exc)
    if verbose and exc.__cause__ is not None:
        logger.error("%s", exc.__cause__)
    raise SystemExit(1) from exc


@app.command(help="Build the static web site (and optional PDF) from a source tree.")
def run(
    *,
    input_dir: typ.Annotated[
        Path, Parameter(help="Source directory with parameters.json and contents.json")
    ] = Path("."),
    output_dir: typ.Annotated[
        Path, Parameter(help="Output directory (deleted and recreated)")
    ] = Path("output"),
    wkhtmltopdf_path: typ.Annotated[
        str, Parameter(help="Path to the wkhtmltopdf executable")
    ] = "wkhtmltopdf",
    pdf: typ.Annotated[bool, Parameter(help="Also create a PDF copy")] = False,
    pdf_delay: typ.Annotated[
        int, Parameter(help="Milliseconds wkhtmltopdf waits for page scripts")
    ] = DEFAULT_JAVASCRIPT_DELAY,
    set_version: typ.Annotated[
        str | None, Parameter(help="Override the version in parameters.json")
    ] = None,
    release_date: typ.Annotated[
        str | None, Parameter(help="Override the release date in parameters.json")
    ] = None,
    redirect: typ.Annotated[
        bool, Parameter(help="Write index.html next to the output redirecting to it")
    ] = False,
    page_toc: typ.Annotated[
        bool, Parameter(help="Add an in-page table of contents to Markdown pages")
    ] = False,
    math_katex: typ.Annotated[
        bool, Parameter(help="Render math with the bundled KaTeX")
    ] = False,
    math_mathjax: typ.Annotated[
        bool, Parameter(help="Render math with MathJax from its CDN")
    ] = False,
    verbose: typ.Annotated[
        bool, Parameter(name=["--verbose", "-v"], help="Show detailed diagnostics")
    ] = False,
) -> None:
    """Build the site described by ``input_dir`` into ``output_dir``.

    Parameters
    ----------
    input_dir : Path, optional
        Source root; defaults to the current directory.
    output_dir : Path, optional
        Output root; fully replaced on every run.
    wkhtmltopdf_path : str, optional
        Renderer executable used when ``pdf`` is set.
    pdf : bool, optional
        Generate ``<name>.pdf`` in the output root.
    pdf_delay : int, optional
        Script delay handed to the renderer, in milliseconds.
    set_version, release_date : str or None, optional
        Overrides for the release version and date.
    redirect, page_toc, math_katex, math_mathjax : bool, optional
        Feature toggles; the two math engines are mutually exclusive.
    verbose : bool, optional
        Show underlying error detail and the renderer's own output.

    Raises
    ------
    SystemExit
        With status 1 on any fatal error.
    """
    _configure_logging(verbose=verbose)
    try:
        options = BuildOptions(
            input_dir=input_dir,
            output_dir=output_dir,
            wkhtmltopdf_path=wkhtmltopdf_path,
            pdf=pdf,
            pdf_delay=pdf_delay,
            set_version=set_version,
            set_release_date=release_date,
            redirect=redirect,
            page_toc=page_toc,
            math_katex=math_katex,
            math_mathjax=math_mathjax,
            verbose=verbose,
        )
        result = DocumentBuilder(options).run()
    except (DocgenError, BuildOptionsError) as exc:
        _fail(exc, verbose=verbose)
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    if result.pdf:
        print(f"wrote {_format_path(result.pdf)}")
    if result.redirect:
        print(f"wrote {_format_path(result.redirect)}")


@app.command(help="Copy an example source tree to start a new project.")
def scaffold(
    *,
    output_dir: typ.Annotated[
        Path, Parameter(help="Directory to create the example project in")
    ],
    verbose: typ.Annotated[
        bool, Parameter(name=["--verbose", "-v"], help="Show detailed diagnostics")
    ] = False,
) -> None:
    """Copy the bundled example project into ``output_dir``."""
    _configure_logging(verbose=verbose)
    try:
        created = scaffold_project(output_dir)
    except DocgenError as exc:
        _fail(exc, verbose=verbose)
    print(f"wrote {_format_path(created)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docgen`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
