"""Drive the external ``wkhtmltopdf`` renderer that produces the PDF copy.

This module checks that the renderer is installed (and warns when its version
differs from the tested one), builds its argument list as discrete tokens,
and runs it as a child process. Only a renderer that cannot be invoked at all
is fatal; a non-zero exit status is reported as a warning because the PDF is
often still usable.

Example
-------
>>> from pathlib import Path
>>> from docgen.pdf import PdfArguments
>>> args = PdfArguments(
...     output_dir=Path("out"), pages=["intro.html"], pdf_name="widget.pdf"
... )
>>> args.to_args()[-2:]
['out/intro.html', 'out/widget.pdf']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import subprocess
import sys
import time
import typing as typ
from pathlib import Path

from tqdm import tqdm

from docgen._constants import PDF_CONTENTS_XSL, PDF_STYLESHEET, WKHTMLTOPDF_VERSION
from docgen.errors import RendererUnavailableError
from docgen.generator.navigation import page_output_path
from docgen.writer import PDF_TEMPLATE_FILES, pdf_temp_dir

if typ.TYPE_CHECKING:
    from docgen.generator.navigation import Navigation

logger = logging.getLogger(__name__)

FIXED_OPTIONS: tuple[str, ...] = (
    "--zoom",
    "1.0",
    "--image-quality",
    "100",
    "--print-media-type",
    "--orientation",
    "portrait",
    "--page-size",
    "A4",
    "--margin-top",
    "25",
    "--margin-right",
    "15",
    "--margin-bottom",
    "16",
    "--margin-left",
    "15",
    "--header-spacing",
    "5",
    "--footer-spacing",
    "5",
    "--no-stop-slow-scripts",
)
DEFAULT_JAVASCRIPT_DELAY = 1000
POLL_INTERVAL = 0.1


def check_renderer_version(
    executable: str, *, expected: str = WKHTMLTOPDF_VERSION
) -> str:
    """Return the renderer's reported version, warning when it is unexpected.

    Raises
    ------
    RendererUnavailableError
        If ``<executable> -V`` cannot be run or exits with an error.
    """
    try:
        result = subprocess.run(  # noqa: S603
            [executable, "-V"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        msg = (
            "Unable to call wkhtmltopdf. Is it installed and in path? "
            "See http://wkhtmltopdf.org"
        )
        raise RendererUnavailableError(msg) from exc
    detected = result.stdout.strip()
    if detected != expected:
        logger.warning(
            "Warning: unexpected version of wkhtmltopdf, which may work but is "
            "not tested or supported\n   expected version: %s\n   detected version: %s",
            expected,
            detected,
        )
    return detected


@dc.dataclass(slots=True)
class PdfArguments:
    """Typed builder for the renderer's command-line tokens.

    Attributes
    ----------
    output_dir : Path
        Output root holding the written pages and the ``temp/`` fragments.
    pages : list[str]
        Page output paths (relative to ``output_dir``) in navigation order.
    pdf_name : str
        File name of the PDF written into ``output_dir``.
    javascript_delay : int
        Milliseconds the renderer waits for page scripts before printing.
    stylesheet : Path
        User stylesheet applied to every page.
    contents_xsl : Path
        XSL stylesheet used for the generated table of contents.
    """

    output_dir: Path
    pages: list[str]
    pdf_name: str
    javascript_delay: int = DEFAULT_JAVASCRIPT_DELAY
    stylesheet: Path = PDF_STYLESHEET
    contents_xsl: Path = PDF_CONTENTS_XSL

    @classmethod
    def from_navigation(
        cls,
        navigation: Navigation,
        output_dir: Path,
        pdf_name: str,
        *,
        javascript_delay: int = DEFAULT_JAVASCRIPT_DELAY,
    ) -> PdfArguments:
        """Build arguments whose page order follows ``navigation``."""
        pages = [page_output_path(page.source) for page in navigation.ordered_pages()]
        return cls(
            output_dir=output_dir,
            pages=pages,
            pdf_name=pdf_name,
            javascript_delay=javascript_delay,
        )

    @property
    def pdf_path(self) -> Path:
        return self.output_dir / self.pdf_name

    def to_args(self) -> list[str]:
        """Return the full argument list, one token per element."""
        temp_dir = pdf_temp_dir(self.output_dir)
        args = list(FIXED_OPTIONS)
        args += ["--javascript-delay", str(self.javascript_delay)]
        args += ["--user-style-sheet", str(self.stylesheet)]
        args += ["--header-html", str(temp_dir / PDF_TEMPLATE_FILES["pdf_header"])]
        args += ["--footer-html", str(temp_dir / PDF_TEMPLATE_FILES["pdf_footer"])]
        args += ["cover", str(temp_dir / PDF_TEMPLATE_FILES["pdf_cover"])]
        args += ["toc", "--xsl-style-sheet", str(self.contents_xsl)]
        args += [str(self.output_dir / page) for page in self.pages]
        args.append(str(self.pdf_path))
        return args


def run_renderer(
    executable: str, arguments: list[str], *, verbose: bool = False
) -> int | None:
    """Run the renderer to completion and return its exit status.

    The renderer reports progress on stderr. With ``verbose`` that stream is
    copied to stdout as it arrives; otherwise an indeterminate progress
    indicator is shown. Returns ``None`` when the process cannot be launched.
    """
    command = [executable, *arguments]
    stderr = subprocess.PIPE if verbose else subprocess.DEVNULL
    try:
        process = subprocess.Popen(  # noqa: S603
            command,
            stdout=subprocess.DEVNULL,
            stderr=stderr,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        logger.error("Error calling wkhtmltopdf to generate the PDF")
        if verbose:
            logger.error("%s", exc)
        return None
    with process:
        if verbose and process.stderr is not None:
            for line in process.stderr:
                sys.stdout.write(line)
            sys.stdout.flush()
        else:
            _wait_with_progress(process)
        return process.wait()


def _wait_with_progress(process: subprocess.Popen[str]) -> None:
    with tqdm(
        desc="   Processing", total=None, bar_format="{desc}... {elapsed}", leave=False
    ) as progress:
        while process.poll() is None:
            time.sleep(POLL_INTERVAL)
            progress.update()


def generate_pdf(
    executable: str,
    arguments: PdfArguments,
    *,
    verbose: bool = False,
) -> Path | None:
    """Check the renderer, run it, and return the PDF path when one exists.

    Raises
    ------
    RendererUnavailableError
        If the renderer's version check cannot run.
    """
    check_renderer_version(executable)
    logger.info("Creating the PDF copy (may take some time)")
    code = run_renderer(executable, arguments.to_args(), verbose=verbose)
    if code is not None and code != 0:
        logger.warning(
            "wkhtmltopdf exited with a warning or error: try the -v option for details"
        )
    if arguments.pdf_path.exists():
        return arguments.pdf_path
    return None


__all__ = [
    "FIXED_OPTIONS",
    "PdfArguments",
    "check_renderer_version",
    "generate_pdf",
    "run_renderer",
]
