"""
Module: content

Purpose:
    Provides ContentSource - the inbound text of a reflow request.
    Content arrives either Structured (pages of StyledLines from a previous
    authoring layout) or Flat (plain text blocks with no sizing).

Key Classes:
    - ContentKind: Which variant a source carries
    - ContentSource: Immutable holder for exactly one variant

Dependencies:
    - dataclasses (std)
    - .lines: StyledLine, Page

Used By:
    - core.utils.serialization
    - layout.controller
    - templates.engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from .lines import Page, StyledLine


class ContentKind(str, Enum):
    """Variant carried by a ContentSource."""
    STRUCTURED = "structured"  # Pages of sized lines
    FLAT = "flat"              # Plain text blocks
    EMPTY = "empty"            # Neither variant supplied

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ContentSource:
    """
    Content to be reflowed (immutable).

    Normally exactly one of ``structured`` or ``flat`` is set. A source with
    neither is accepted and reflows to a single blank page; a source with
    both is treated as Structured.

    Attributes:
        structured: Pages of StyledLines from an earlier layout
        flat: Plain text blocks in reading order

    Example:
        >>> ContentSource.from_blocks(["first", "second"]).kind
        <ContentKind.FLAT: 'flat'>
    """

    structured: Optional[tuple[Page, ...]] = None
    flat: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        """Normalize to tuples so sources hash and compare by value."""
        if self.structured is not None:
            object.__setattr__(self, "structured", _normalize_pages(self.structured))
        if self.flat is not None:
            blocks = (self.flat,) if isinstance(self.flat, str) else tuple(self.flat)
            object.__setattr__(self, "flat", blocks)

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_pages(cls, pages: Iterable[Page | Sequence[StyledLine]]) -> ContentSource:
        """
        Create Structured content.

        Args:
            pages: Pages, or plain sequences of StyledLines

        Returns:
            ContentSource with only ``structured`` set
        """
        return cls(structured=_normalize_pages(pages))

    @classmethod
    def from_blocks(cls, blocks: Iterable[str]) -> ContentSource:
        """Create Flat content from text blocks."""
        return cls(flat=tuple(blocks))

    @classmethod
    def from_text(cls, text: str) -> ContentSource:
        """Create Flat content holding a single block."""
        return cls(flat=(text,))

    @classmethod
    def empty(cls) -> ContentSource:
        """Source with neither variant."""
        return cls()

    # ─────────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def kind(self) -> ContentKind:
        """Variant used for dispatch; Structured takes precedence."""
        if self.structured is not None:
            return ContentKind.STRUCTURED
        if self.flat is not None:
            return ContentKind.FLAT
        return ContentKind.EMPTY

    @property
    def lines(self) -> tuple[StyledLine, ...]:
        """All Structured lines flattened in reading order (empty otherwise)."""
        if self.structured is None:
            return ()
        return tuple(line for page in self.structured for line in page.lines)

    def joined_text(self) -> str:
        """
        Text body handed to the paginator.

        Structured lines and Flat blocks are both joined with a newline,
        preserving original order. Empty content joins to "".
        """
        kind = self.kind
        if kind is ContentKind.STRUCTURED:
            return "\n".join(line.text for line in self.lines)
        if kind is ContentKind.FLAT:
            return "\n".join(self.flat or ())
        return ""


def _normalize_pages(pages: Iterable[Page | Sequence[StyledLine]]) -> tuple[Page, ...]:
    """Pages as a tuple; plain line sequences are wrapped in Page."""
    return tuple(
        page if isinstance(page, Page) else Page.from_lines(page)
        for page in pages
    )
