"""Token document contract.

The token document is the JSON written by `export_tokens.py` and imported by
design tools. This module defines:
- A JSON Schema for the shape we emit (ten category keys, typed token records)
- A helper returning human-readable validation errors

Important:
- This only checks our own output shape. It is not a general Design Tokens
  Format validator (no aliases, groups or $description handling).
"""

from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from themetokens.tokens.document import CATEGORY_ORDER


COLOR_TOKEN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["$type", "$value"],
    "properties": {
        "$type": {"const": "color"},
        "$value": {
            "type": "object",
            "required": ["colorSpace", "components", "hex"],
            "properties": {
                "colorSpace": {"const": "srgb"},
                "components": {
                    "type": "array",
                    "minItems": 3,
                    "maxItems": 3,
                    "items": {"type": "number", "minimum": 0, "maximum": 1},
                },
                "hex": {"type": "string", "pattern": "^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}

NUMBER_TOKEN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["$type", "$value"],
    "properties": {
        "$type": {"const": "number"},
        "$value": {"type": "number"},
    },
    "additionalProperties": False,
}

STRING_TOKEN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["$type", "$value"],
    "properties": {
        "$type": {"const": "string"},
        "$value": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}

_CATEGORY_TOKEN_SCHEMAS = {
    "Color": COLOR_TOKEN_SCHEMA,
    "Spacing": NUMBER_TOKEN_SCHEMA,
    "Radius": NUMBER_TOKEN_SCHEMA,
    "Shadow": STRING_TOKEN_SCHEMA,
    "Container": NUMBER_TOKEN_SCHEMA,
    "Breakpoint": NUMBER_TOKEN_SCHEMA,
    "Text": NUMBER_TOKEN_SCHEMA,
    "Font Weight": NUMBER_TOKEN_SCHEMA,
    "Tracking": STRING_TOKEN_SCHEMA,
    "Leading": NUMBER_TOKEN_SCHEMA,
}

TOKEN_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": list(CATEGORY_ORDER),
    "properties": {
        name: {"type": "object", "additionalProperties": _CATEGORY_TOKEN_SCHEMAS[name]}
        for name in CATEGORY_ORDER
    },
    "additionalProperties": False,
}


_VALIDATOR = Draft202012Validator(TOKEN_DOCUMENT_SCHEMA)


def validate_token_document(payload: Dict[str, Any]) -> List[str]:
    """Return a list of human-readable validation errors (empty means valid)."""
    errors = []
    for e in sorted(_VALIDATOR.iter_errors(payload), key=lambda x: [str(p) for p in x.path]):
        path = ".".join(str(p) for p in e.path) if e.path else "<root>"
        errors.append(f"{path}: {e.message}")
    return errors
