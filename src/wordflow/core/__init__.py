"""
wordflow Core Package

Shared data models, payload validation and serialization.

Models are frozen dataclasses: a reflow never mutates its input, and its
output can be cached or shared between callers without copying.
"""

from .models import StyledLine, Page, ContentSource, ContentKind

__all__ = [
    "StyledLine",
    "Page",
    "ContentSource",
    "ContentKind",
]
