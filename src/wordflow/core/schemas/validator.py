"""
Schema Validation Utilities

Validates content payloads before they are turned into models.

Two levels:
- Basic checks (always): shape of lines_data/pages/content, text present
  and newline-free, sizes positive
- Strict checks (opt-in): full JSON Schema validation with jsonschema
  against the schema bundled next to this module
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


LAYOUT_SCHEMA_VERSION = 1

# Keys holding pages of styled lines, in precedence order
STYLED_PAGE_KEYS = ("lines_data", "pages")

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a payload fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_content(data: Any, *, strict: bool = False) -> None:
    """
    Validate a content payload.

    Accepts:
    1. Structured: {"lines_data": [[{"text", "font_size"?}, ...], ...]}
    2. Saved layout: {"pages": [[...]], ...} (same line shape)
    3. Flat: {"content": ["block", ...]}
    A payload with none of these keys is valid and means "no content".

    Args:
        data: Decoded JSON payload
        strict: If True, also validate against the bundled JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Content payload must be an object, got {type(data).__name__}",
        )

    for key in STYLED_PAGE_KEYS:
        if key in data:
            _validate_styled_pages(data[key], key)

    if "content" in data:
        _validate_blocks(data["content"], "content")

    if strict:
        schema = _load_schema("content")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_styled_pages(pages: Any, path: str) -> None:
    """Validate pages of styled lines."""
    if not isinstance(pages, list):
        raise ValidationError(f"{path} must be a list of pages", path=path)

    for i, page in enumerate(pages):
        page_path = f"{path}[{i}]"
        if not isinstance(page, list):
            raise ValidationError("Page must be a list of lines", path=page_path)
        for j, line in enumerate(page):
            _validate_line(line, f"{page_path}[{j}]")


def _validate_line(line: Any, path: str) -> None:
    """Validate one styled line."""
    if not isinstance(line, dict):
        raise ValidationError("Line must be an object", path=path)

    text = line.get("text")
    if not isinstance(text, str):
        raise ValidationError(
            f"Invalid text: {text!r} (must be a string)",
            path=f"{path}.text",
        )
    if "\n" in text:
        raise ValidationError("Line text must not contain a newline", path=f"{path}.text")

    # font_size may be absent; that makes the payload flat
    if "font_size" in line:
        size = line["font_size"]
        if isinstance(size, bool) or not isinstance(size, (int, float)) or size <= 0:
            raise ValidationError(
                f"Invalid font_size: {size!r} (must be a positive number)",
                path=f"{path}.font_size",
            )


def _validate_blocks(blocks: Any, path: str) -> None:
    """Validate flat text blocks."""
    if not isinstance(blocks, list):
        raise ValidationError(f"{path} must be a list of strings", path=path)

    bad = [i for i, block in enumerate(blocks) if not isinstance(block, str)]
    if bad:
        raise ValidationError(
            f"Text blocks must be strings (bad entries: {bad})",
            path=f"{path}[{bad[0]}]",
            errors=[f"{path}[{i}] is not a string" for i in bad],
        )
