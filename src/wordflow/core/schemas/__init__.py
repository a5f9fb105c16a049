"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_content,
    ValidationError,
    LAYOUT_SCHEMA_VERSION,
    STYLED_PAGE_KEYS,
)

__all__ = [
    "validate_content",
    "ValidationError",
    "LAYOUT_SCHEMA_VERSION",
    "STYLED_PAGE_KEYS",
]
