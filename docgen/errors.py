"""Exception types raised by the docgen build pipeline.

Every condition that must halt a run derives from :class:`DocgenError`, so the
CLI boundary can report it once and exit with a non-zero status. Conditions
that are only worth a warning (missing logo, unexpected renderer version,
renderer exit status, redirect write failures) are logged where they occur and
never raised.
"""

from __future__ import annotations


class DocgenError(RuntimeError):
    """Base class for fatal errors raised while building a site."""


class MetadataError(DocgenError, ValueError):
    """Raised when ``parameters.json`` or ``contents.json`` is unusable."""


class TemplateLoadError(DocgenError):
    """Raised when a bundled page template cannot be loaded."""


class SourceLoadError(DocgenError):
    """Raised when a source document cannot be read or rendered."""


class OutputWriteError(DocgenError):
    """Raised when the output tree cannot be recreated or written."""


class AssetCopyError(DocgenError):
    """Raised when a static asset tree cannot be copied into the output."""


class RendererUnavailableError(DocgenError):
    """Raised when the external PDF renderer cannot be invoked at all."""


class BuildOptionsError(ValueError):
    """Raised when the requested build options are contradictory."""


__all__ = [
    "AssetCopyError",
    "BuildOptionsError",
    "DocgenError",
    "MetadataError",
    "OutputWriteError",
    "RendererUnavailableError",
    "SourceLoadError",
    "TemplateLoadError",
]
