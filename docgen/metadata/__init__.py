"""Load and validate the metadata that drives a docgen build.

This subpackage parses ``parameters.json`` and ``contents.json`` from a source
root, validates both against fixed JSON schemas, and produces typed
dataclasses (:class:`Metadata`, :class:`Parameters`, :class:`Section`, ...)
that the later pipeline stages consume. The primary entry point is
:func:`load_metadata`, which also appends the generated "Extra" section
pointing at the release notes.

Examples
--------
>>> from pathlib import Path
>>> from docgen.metadata import load_metadata
>>> meta = load_metadata(Path("source"))  # doctest: +SKIP
>>> meta.contents[-1].heading  # doctest: +SKIP
'Extra'
"""

from docgen.errors import MetadataError

from .loader import load_metadata, validate_document
from .models import Metadata, PageEntry, Parameters, Person, Section, extra_section
from .schemas import CONTENTS_SCHEMA, PARAMETERS_SCHEMA

__all__ = [
    "CONTENTS_SCHEMA",
    "PARAMETERS_SCHEMA",
    "Metadata",
    "MetadataError",
    "PageEntry",
    "Parameters",
    "Person",
    "Section",
    "extra_section",
    "load_metadata",
    "validate_document",
]
