"""JSON schemas for the two metadata files every docgen source tree carries."""

from __future__ import annotations

import typing as typ

_PERSON: dict[str, typ.Any] = {
    "type": "object",
    "required": ["name", "url"],
    "properties": {
        "name": {"type": "string"},
        "url": {"type": "string"},
    },
}

PARAMETERS_SCHEMA: dict[str, typ.Any] = {
    "title": "DocGen Parameters Schema",
    "type": "object",
    "required": [
        "title",
        "name",
        "version",
        "date",
        "organization",
        "author",
        "owner",
        "contributors",
        "website",
        "module",
        "id",
        "summary",
        "marking",
        "legalese",
    ],
    "properties": {
        "title": {"type": "string"},
        "name": {"type": "string"},
        "version": {"type": "string"},
        "date": {"type": "string"},
        "organization": _PERSON,
        "author": _PERSON,
        "owner": _PERSON,
        "contributors": {"type": "array", "items": _PERSON},
        "website": _PERSON,
        "backlink": _PERSON,
        "module": {"type": "string"},
        "id": {"type": "string"},
        "summary": {"type": "string"},
        "marking": {"type": "string"},
        "legalese": {"type": "string"},
    },
}

# Column 5 is reserved for the generated "Extra" section, so declared sections
# may only use columns 1-4.
CONTENTS_SCHEMA: dict[str, typ.Any] = {
    "title": "DocGen Table of Contents Schema",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["heading", "column", "pages"],
        "properties": {
            "heading": {"type": "string"},
            "column": {"type": "integer", "minimum": 1, "maximum": 4},
            "pages": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "required": ["title", "source"],
                    "properties": {
                        "title": {"type": "string"},
                        "source": {"type": "string"},
                        "html": {"type": "boolean"},
                    },
                },
            },
        },
    },
}

SCHEMAS: dict[str, dict[str, typ.Any]] = {
    "parameters": PARAMETERS_SCHEMA,
    "contents": CONTENTS_SCHEMA,
}

__all__ = ["CONTENTS_SCHEMA", "PARAMETERS_SCHEMA", "SCHEMAS"]
