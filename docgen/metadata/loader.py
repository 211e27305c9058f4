"""Load and validate the JSON metadata files of a docgen source tree."""

from __future__ import annotations

import logging
import typing as typ

import jsonschema
import msgspec
import msgspec.json as msgspec_json

from docgen._constants import CONTENTS_FILE, PARAMETERS_FILE
from docgen.errors import MetadataError

from .models import Metadata, Parameters, Section, extra_section
from .schemas import SCHEMAS

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_metadata(input_dir: Path) -> Metadata:
    """Read, validate, and type ``parameters.json`` and ``contents.json``.

    Parameters
    ----------
    input_dir : Path
        Source root containing both metadata files.

    Returns
    -------
    Metadata
        Validated parameters and the contents list with the generated
        "Extra" (release notes) section appended exactly once.

    Raises
    ------
    MetadataError
        If either file is unreadable, is not valid JSON, or fails schema
        validation. Nothing is rendered when this is raised.
    """
    logger.info("Loading required JSON metadata files")
    parameters = _load_validated(input_dir / PARAMETERS_FILE, "parameters")
    contents = _load_validated(input_dir / CONTENTS_FILE, "contents")
    sections = [Section.from_mapping(item) for item in contents]
    sections.append(extra_section())
    return Metadata(
        parameters=Parameters.from_mapping(parameters),
        contents=tuple(sections),
    )


def validate_document(key: str, document: typ.Any) -> None:
    """Validate ``document`` against the named schema.

    Raises
    ------
    MetadataError
        When the document does not satisfy the schema; the message names the
        offending file and the most relevant validation error.
    """
    validator = jsonschema.Draft7Validator(SCHEMAS[key])
    error = jsonschema.exceptions.best_match(validator.iter_errors(document))
    if error is None:
        return
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    msg = (
        f"Error parsing required file: {key}.json (failed schema validation "
        f"at {location}: {error.message})"
    )
    raise MetadataError(msg)


def _load_validated(path: Path, key: str) -> typ.Any:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        msg = f"Error loading required JSON metadata file: {path}"
        raise MetadataError(msg) from exc
    try:
        document = msgspec_json.decode(raw.removeprefix(b"\xef\xbb\xbf"))
    except msgspec.DecodeError as exc:
        msg = f"Error parsing required file: {key}.json (invalid JSON)"
        raise MetadataError(msg) from exc
    validate_document(key, document)
    return document


__all__ = ["load_metadata", "validate_document"]
