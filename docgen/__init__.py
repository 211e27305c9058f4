"""Build static documentation sites (and an optional PDF) from Markdown.

A docgen source tree holds ``parameters.json`` (site metadata),
``contents.json`` (the navigation structure), one Markdown or HTML file per
page, and ``release-notes.txt``. The pipeline validates the metadata, renders
every page into a shared template with a generated table of contents, writes
the web tree, and can hand the same pages to ``wkhtmltopdf`` to produce a
single paginated PDF.

Exports
-------
- ``app``: Cyclopts application with the ``run`` and ``scaffold`` commands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``BuildOptions`` / ``DocumentBuilder``: programmatic entry points.

Examples
--------
>>> from docgen import BuildOptions, DocumentBuilder
>>> from pathlib import Path
>>> DocumentBuilder(
...     BuildOptions(input_dir=Path("source"), output_dir=Path("out"))
... ).run()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .pipeline import BuildOptions, DocumentBuilder

__all__ = ["BuildOptions", "DocumentBuilder", "app", "main"]
