"""Common literal values used across docgen.

These constants keep filenames, fixed output names, and version pins
centralized so the pipeline stages and tests import the same values without
drifting. Intended for internal use within the docgen package.

Examples
--------
>>> from docgen import _constants
>>> _constants.PDF_NAME_TEMPLATE.format(name="widget")
'widget.pdf'
>>> _constants.RELEASE_NOTES_SOURCE
'release-notes.txt'
"""

from pathlib import Path

DOCGEN_VERSION = "2.1.3"
WKHTMLTOPDF_VERSION = "wkhtmltopdf 0.12.2.1 (with patched qt)"

PACKAGE_ROOT = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_ROOT / "templates"
REQUIRE_DIR = PACKAGE_ROOT / "require"
KATEX_DIR = PACKAGE_ROOT / "optional" / "katex"
EXAMPLE_DIR = PACKAGE_ROOT / "example"
PDF_STYLESHEET = PACKAGE_ROOT / "pdf_style" / "pdf-stylesheet.css"
PDF_CONTENTS_XSL = PACKAGE_ROOT / "pdf_style" / "pdf-contents.xsl"

PARAMETERS_FILE = "parameters.json"
CONTENTS_FILE = "contents.json"
RELEASE_NOTES_SOURCE = "release-notes.txt"
LOGO_PATH = "files/images/logo.png"
FILES_DIR = "files"

OWNERSHIP_PAGE = "ownership.html"
PDF_TEMP_DIR = "temp"
PDF_NAME_TEMPLATE = "{name}.pdf"
REDIRECT_PAGE = "index.html"
CODEHILITE_STYLESHEET = "require/codehilite.css"

EXTRA_COLUMN = 5
COLUMNS = (1, 2, 3, 4, 5)
