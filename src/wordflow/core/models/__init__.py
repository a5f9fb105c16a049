"""
Core Models Package

Immutable data models shared by the layout, template and I/O code.

All models are frozen dataclasses, so a reflow result can be handed to any
caller (or thread) without copying and never aliases registry state.
"""

from .lines import StyledLine, Page
from .content import ContentSource, ContentKind

__all__ = [
    "StyledLine",
    "Page",
    "ContentSource",
    "ContentKind",
]
