"""Serialize composed pages and copy the static asset trees into the output.

All page writes run concurrently and the stage completes only when every
write has succeeded. Asset trees are copied afterwards; any failure in either
step is fatal to the build.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

from docgen._concurrency import gather
from docgen._constants import (
    CODEHILITE_STYLESHEET,
    FILES_DIR,
    KATEX_DIR,
    OWNERSHIP_PAGE,
    PDF_TEMP_DIR,
    REQUIRE_DIR,
)
from docgen.errors import AssetCopyError, OutputWriteError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from bs4 import BeautifulSoup

    from docgen.generator.models import ComposedSite
    from docgen.generator.templates import TemplateSet

logger = logging.getLogger(__name__)

PDF_TEMPLATE_FILES: dict[str, str] = {
    "pdf_cover": "pdfCover.html",
    "pdf_header": "pdfHeader.html",
    "pdf_footer": "pdfFooter.html",
}


def remake_dir(path: Path) -> None:
    """Delete ``path`` (if present) and recreate it empty."""
    try:
        if path.exists():
            shutil.rmtree(path)
        path.mkdir(parents=True)
    except OSError as exc:
        msg = f"Error recreating directory: {path}"
        raise OutputWriteError(msg) from exc


def write_document(path: Path, document: BeautifulSoup) -> Path:
    """Serialize ``document`` to ``path`` as UTF-8 HTML."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.decode(), encoding="utf-8")
    except OSError as exc:
        msg = f"Error writing file: {path}"
        raise OutputWriteError(msg) from exc
    return path


def pdf_temp_dir(output_dir: Path) -> Path:
    """Directory holding the transient PDF cover, header, and footer."""
    return output_dir / PDF_TEMP_DIR


def write_site(
    site: ComposedSite,
    templates: TemplateSet,
    output_dir: Path,
    *,
    pdf: bool = False,
) -> list[Path]:
    """Write every composed page (and the PDF fragments when requested).

    Parameters
    ----------
    site : ComposedSite
        Composed pages plus the ownership page.
    templates : TemplateSet
        Template set supplying the PDF cover, header, and footer documents.
    output_dir : Path
        Output root; page paths are resolved relative to it.
    pdf : bool, optional
        When true the PDF cover/header/footer are written to ``temp/``.

    Returns
    -------
    list[Path]
        Paths of every written file, pages first.

    Raises
    ------
    OutputWriteError
        If any single write fails.
    """
    logger.info("Writing the web page files")
    documents: dict[Path, BeautifulSoup] = {
        output_dir / page.output_path: page.document for page in site.pages.values()
    }
    documents[output_dir / OWNERSHIP_PAGE] = site.ownership
    if pdf:
        temp_dir = pdf_temp_dir(output_dir)
        for key, filename in PDF_TEMPLATE_FILES.items():
            documents[temp_dir / filename] = getattr(templates, key)
    written = gather(_write_tasks(documents))
    return list(written.values())


def _write_tasks(
    documents: cabc.Mapping[Path, BeautifulSoup],
) -> dict[Path, cabc.Callable[[], Path]]:
    tasks: dict[Path, cabc.Callable[[], Path]] = {}
    for path, document in documents.items():
        tasks[path] = _bind_write(path, document)
    return tasks


def _bind_write(path: Path, document: BeautifulSoup) -> cabc.Callable[[], Path]:
    def _task() -> Path:
        return write_document(path, document)

    return _task


def copy_tree(source: Path, destination: Path) -> None:
    """Copy ``source`` into ``destination``, merging with existing content."""
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        msg = f"Error copying directory: {source} to {destination}"
        raise AssetCopyError(msg) from exc


def copy_assets(
    input_dir: Path,
    output_dir: Path,
    *,
    katex: bool = False,
    code_stylesheet: str | None = None,
) -> None:
    """Copy the bundled and user-supplied asset trees into ``output_dir``.

    The bundled ``require`` tree is always copied; the input ``files`` tree is
    copied when it exists; the KaTeX bundle only when ``katex`` is set.

    Raises
    ------
    AssetCopyError
        If any copy fails.
    """
    copy_tree(REQUIRE_DIR, output_dir / "require")
    user_files = input_dir / FILES_DIR
    if user_files.is_dir():
        copy_tree(user_files, output_dir / FILES_DIR)
    if katex:
        copy_tree(KATEX_DIR, output_dir / "require" / "katex")
    if code_stylesheet is not None:
        target = output_dir / CODEHILITE_STYLESHEET
        try:
            target.write_text(code_stylesheet, encoding="utf-8")
        except OSError as exc:
            msg = f"Error writing file: {target}"
            raise AssetCopyError(msg) from exc


__all__ = [
    "copy_assets",
    "copy_tree",
    "pdf_temp_dir",
    "remake_dir",
    "write_document",
    "write_site",
]
