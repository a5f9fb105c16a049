"""
Serialization Utilities

To/from JSON for content payloads and reflow results.

- `deserialize_content` turns a validated payload into a ContentSource,
  dispatching on which variant the payload carries
- `serialize_result` writes pages, the profile used and the context key
- A saved result can be read back as Structured content, so a layout made
  for one context can be reflowed for another
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..models.content import ContentSource
from ..models.lines import Page, StyledLine
from ..schemas.validator import (
    LAYOUT_SCHEMA_VERSION,
    STYLED_PAGE_KEYS,
    ValidationError,
    validate_content,
)

if TYPE_CHECKING:
    from wordflow.layout.controller import ReflowResult

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Content Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_content(content: ContentSource) -> dict[str, Any]:
    """
    Serialize a ContentSource to a payload dictionary.

    Structured content is written under "lines_data", Flat content under
    "content"; an empty source becomes an empty object.
    """
    if content.structured is not None:
        return {"lines_data": _serialize_pages(content.structured)}
    if content.flat is not None:
        return {"content": list(content.flat)}
    return {}


def deserialize_content(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> ContentSource:
    """
    Deserialize a content payload.

    Precedence: "lines_data", then "pages" (a saved result), then "content".
    Styled pages where any line lacks a font_size are treated as Flat: every
    line's text becomes one block, in order.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate first
        strict: Use full JSON Schema validation

    Returns:
        ContentSource (empty if the payload names no content)

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_content(data, strict=strict)

    for key in STYLED_PAGE_KEYS:
        if key in data:
            return _styled_pages_to_content(data[key], key)

    if "content" in data:
        return ContentSource.from_blocks(data["content"])

    logger.warning("Payload has no lines_data, pages or content")
    return ContentSource.empty()


def _styled_pages_to_content(raw_pages: list[list[dict[str, Any]]], key: str) -> ContentSource:
    """Structured content, or Flat when sizes are missing."""
    if all("font_size" in line for page in raw_pages for line in page):
        return ContentSource.from_pages(
            [StyledLine.from_dict(line) for line in page] for page in raw_pages
        )

    logger.info(f"{key} has lines without font_size, treating content as flat")
    return ContentSource.from_blocks(line["text"] for page in raw_pages for line in page)


def _serialize_pages(pages: tuple[Page, ...]) -> list[list[dict[str, Any]]]:
    return [[line.to_dict() for line in page] for page in pages]


# ─────────────────────────────────────────────────────────────────────────────
# Result Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_result(result: ReflowResult) -> dict[str, Any]:
    """
    Serialize a ReflowResult to a dictionary.

    Args:
        result: Reflow output

    Returns:
        Dictionary with schema_version, context, profile, source_kind, pages
    """
    context = result.context
    if isinstance(context, Enum):
        context = context.value
    elif context is not None and not isinstance(context, str):
        context = str(context)

    return {
        "schema_version": LAYOUT_SCHEMA_VERSION,
        "context": context,
        "profile": result.profile.to_dict(),
        "source_kind": str(result.source_kind),
        "pages": _serialize_pages(result.pages),
    }


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_content_json(path: Path, *, strict: bool = False) -> ContentSource:
    """
    Load a content payload from a JSON file.

    Args:
        path: Path to payload file
        strict: Use full JSON Schema validation

    Returns:
        ContentSource

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or not a valid payload
    """
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON in {path.name}: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e

    return deserialize_content(data, strict=strict)


def save_content_json(content: ContentSource, path: Path) -> None:
    """Save a ContentSource as a payload file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_content(content), f, indent=2, ensure_ascii=False)


def save_result_json(result: ReflowResult, path: Path) -> None:
    """
    Save a reflow result to a JSON file.

    Args:
        result: Reflow output
        path: Output path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_result(result), f, indent=2, ensure_ascii=False)
