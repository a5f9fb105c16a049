"""
Module: layout.controller

Purpose:
    Orchestrate a complete reflow.
    Resolve profile → Join content → Paginate → Restyle

Key Functions:
    - process(): Main entry point for reflowing content
    - clear_layout_cache(): Drop memoized layouts

Key Classes:
    - ReflowResult: Styled pages plus the profile they were laid out for

Dependencies:
    - layout.registry: Profile lookup
    - layout.paginator: Page/line boundaries
    - layout.restyle: Font sizes
    - core.models: ContentSource, Page

Used By:
    - cli: `reflow` and `compose` commands
    - templates.engine callers that re-target a styled layout
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Hashable, Optional

from wordflow.common.thresholds import STYLE
from wordflow.core.models import ContentKind, ContentSource, Page

from .paginator import paginate
from .profiles import LayoutProfile
from .registry import get_layout
from .restyle import restyle

logger = logging.getLogger(__name__)

LAYOUT_CACHE_SIZE = 128


@dataclass(frozen=True)
class ReflowResult:
    """
    Reflowed content ready to draw (immutable).

    Attributes:
        pages: Styled pages in reading order (never empty)
        profile: Profile the pages were laid out for
        context: Context key that was requested
        source_kind: Which content variant was reflowed

    Example:
        >>> result = process(ContentSource.from_text("hello"), "Night")
        >>> result.page_count
        1
    """

    pages: tuple[Page, ...]
    profile: LayoutProfile
    context: Optional[Hashable] = None
    source_kind: ContentKind = ContentKind.FLAT

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def line_count(self) -> int:
        """Total display lines across all pages."""
        return sum(page.line_count for page in self.pages)


def process(
    content: ContentSource,
    context_key: Optional[Hashable],
    *,
    default_font_size: float = STYLE.default_font_size,
) -> ReflowResult:
    """
    Reflow content for a presentation context.

    Pipeline:
    1. Look up the profile (unknown keys fall back to the default)
    2. Join Structured lines or Flat blocks with newlines
    3. Paginate under the profile
    4. Restyle: Structured content resamples its own size envelope,
       Flat content gets ``default_font_size``

    Never raises for a valid ContentSource. A source with neither variant
    reflows to a single blank page.

    Args:
        content: Text to reflow
        context_key: Presentation context (opaque key)
        default_font_size: Size for Flat content

    Returns:
        ReflowResult with pages and the profile used
    """
    profile = get_layout(context_key)
    kind = content.kind

    if kind is ContentKind.EMPTY:
        logger.warning("Content source has neither structured nor flat text, reflowing as empty")
    elif content.structured is not None and content.flat is not None:
        logger.debug("Content source has both variants, using structured lines")

    original = content.structured if kind is ContentKind.STRUCTURED else None
    pages = _layout(content.joined_text(), profile, original, default_font_size)

    logger.info(
        f"Reflowed {kind} content for context {context_key!r}: "
        f"{len(pages)} pages, {sum(len(p) for p in pages)} lines"
    )

    return ReflowResult(
        pages=pages,
        profile=profile,
        context=context_key,
        source_kind=kind,
    )


@lru_cache(maxsize=LAYOUT_CACHE_SIZE)
def _layout(
    text: str,
    profile: LayoutProfile,
    original: Optional[tuple[Page, ...]],
    default_font_size: float,
) -> tuple[Page, ...]:
    """Paginate and restyle; memoized since every input is immutable."""
    line_pages = paginate(text, profile)
    return tuple(restyle(line_pages, original, default_font_size))


def clear_layout_cache() -> None:
    """Forget memoized layouts."""
    _layout.cache_clear()
