"""Final build steps: the optional redirect stub and transient file cleanup."""

from __future__ import annotations

import copy
import logging
import shutil
import typing as typ

from docgen._constants import REDIRECT_PAGE
from docgen.writer import pdf_temp_dir

if typ.TYPE_CHECKING:
    from pathlib import Path

    from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def redirect_target(output_dir: Path, home: str) -> str:
    """Return the link from the output's parent directory to the home page."""
    return f"{output_dir.name}/{home}"


def write_redirect(
    template: BeautifulSoup, output_dir: Path, home: str
) -> Path | None:
    """Write ``index.html`` next to ``output_dir`` redirecting to ``home``.

    Failures are logged and otherwise ignored; the redirect is a convenience,
    not part of the generated site.

    Returns
    -------
    Path or None
        The redirect file, or ``None`` when it could not be written.
    """
    link = redirect_target(output_dir, home)
    document = copy.copy(template)
    for anchor in document.find_all("a"):
        anchor["href"] = link
    for meta in document.select("meta[http-equiv]"):
        if meta["http-equiv"].lower() == "refresh":
            meta["content"] = f"0;url={link}"
    path = output_dir.parent / REDIRECT_PAGE
    try:
        path.write_text(document.decode(), encoding="utf-8")
    except OSError as exc:
        logger.error("Error writing redirect file: %s", path)
        logger.debug("%s", exc)
        return None
    return path


def cleanup(output_dir: Path) -> None:
    """Remove the transient PDF fragments directory."""
    temp_dir = pdf_temp_dir(output_dir)
    try:
        shutil.rmtree(temp_dir)
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.warning("Error removing directory: %s", temp_dir)
        logger.debug("%s", exc)


__all__ = ["cleanup", "redirect_target", "write_redirect"]
