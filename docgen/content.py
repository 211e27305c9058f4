"""Read every declared source document and render it to an HTML fragment.

Sources are read and rendered concurrently; the stage returns only once every
document is ready, and the first failure aborts the whole build.

Example
-------
>>> from pathlib import Path
>>> from docgen.content import load_sources
>>> from docgen.metadata import PageEntry
>>> load_sources(Path("source"), [PageEntry("Intro", "intro.md")])  # doctest: +SKIP
{'intro.md': '<p>...</p>'}
"""

from __future__ import annotations

import logging
import typing as typ

from docgen._concurrency import gather
from docgen.errors import SourceLoadError
from docgen.generator.renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docgen.metadata import PageEntry

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def read_source(path: Path) -> str:
    """Return the UTF-8 text of ``path`` without a leading byte-order mark."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Error reading file: {path}"
        raise SourceLoadError(msg) from exc
    return text.removeprefix(BYTE_ORDER_MARK)


def render_source(
    input_dir: Path, page: PageEntry, renderer: HtmlContentRenderer
) -> str:
    """Read one page source and return its HTML fragment.

    Raw HTML pages (``html: true``) are returned verbatim; everything else is
    rendered as Markdown.
    """
    path = input_dir / page.source
    text = read_source(path)
    if page.html:
        return text
    try:
        return renderer.markdown(text)
    except Exception as exc:  # noqa: BLE001 - any renderer failure is fatal
        msg = f"Error parsing Markdown file: {path}"
        raise SourceLoadError(msg) from exc


def load_sources(
    input_dir: Path,
    pages: cabc.Iterable[PageEntry],
    renderer: HtmlContentRenderer | None = None,
) -> dict[str, str]:
    """Load and render every page concurrently, keyed by source identifier.

    Parameters
    ----------
    input_dir : Path
        Source root that page identifiers are relative to.
    pages : Iterable[PageEntry]
        Page descriptors in declaration order, including the release notes.
    renderer : HtmlContentRenderer, optional
        Markdown renderer; a default instance is created when omitted.

    Returns
    -------
    dict[str, str]
        HTML fragment per source identifier, in declaration order.

    Raises
    ------
    SourceLoadError
        If any source cannot be read or rendered.
    """
    logger.info("Loading source files")
    active = renderer or HtmlContentRenderer()
    tasks: dict[str, cabc.Callable[[], str]] = {}
    for page in pages:
        tasks[page.source] = _bind(input_dir, page, active)
    return gather(tasks)


def _bind(
    input_dir: Path, page: PageEntry, renderer: HtmlContentRenderer
) -> cabc.Callable[[], str]:
    def _task() -> str:
        return render_source(input_dir, page, renderer)

    return _task


__all__ = ["load_sources", "read_source", "render_source"]
