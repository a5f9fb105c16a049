"""
Module: layout.restyle

Purpose:
    Give reflowed display lines a font size. Flat content gets one default
    size; content that was styled before has its old min/max size envelope
    resampled down each new page as a gentle top-to-bottom taper.

Key Functions:
    - size_envelope(): (min, max) sizes of an earlier styled corpus
    - restyle(): Sized Pages for reflowed line texts

Note:
    Only the envelope of the original is reused. Its line count, text and
    page boundaries play no part, so content can reflow freely between
    presentation contexts.

Dependencies:
    - core.models: StyledLine, Page
    - common.thresholds: STYLE

Used By:
    - layout.controller: Reflow pipeline
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from wordflow.common.thresholds import STYLE
from wordflow.core.models import Page, StyledLine

logger = logging.getLogger(__name__)


def size_envelope(original: Iterable[Iterable[StyledLine]]) -> Tuple[float, float]:
    """
    Smallest and largest font size among non-blank original lines.

    Args:
        original: Pages (or any nested iterable) of StyledLines

    Returns:
        (min_size, max_size); the fallback envelope if no line has text
    """
    sizes = [line.font_size for page in original for line in page if line.text]
    if not sizes:
        logger.warning(
            "Original layout has no text lines, using fallback size envelope "
            f"({STYLE.fallback_min_size:g}, {STYLE.fallback_max_size:g})"
        )
        return (STYLE.fallback_min_size, STYLE.fallback_max_size)
    return (min(sizes), max(sizes))


def tapered_size(index: int, count: int, min_size: float, max_size: float) -> float:
    """
    Size for the line at ``index`` of ``count`` on one page.

    The first line gets ``max_size``; the last shrinks by the damped share
    of the envelope. A lone line sits at the midpoint of the taper.
    """
    progress = index / (count - 1) if count > 1 else STYLE.single_line_progress
    return max_size - progress * (max_size - min_size) * STYLE.taper_damping


def restyle(
    pages: Sequence[Sequence[str]],
    original: Optional[Iterable[Iterable[StyledLine]]] = None,
    default_font_size: float = STYLE.default_font_size,
) -> List[Page]:
    """
    Attach font sizes to reflowed pages.

    Args:
        pages: Paginated line texts
        original: Styled pages the text came from, if any
        default_font_size: Size for every line when ``original`` is None

    Returns:
        One Page per input page, lines in the same order

    Example:
        >>> sized = restyle([["a", "b", "c", "d"]], original=[[StyledLine("x", 16), StyledLine("y", 28)]])
        >>> [round(s, 1) for s in sized[0].font_sizes]
        [28.0, 25.6, 23.2, 20.8]
    """
    if original is None:
        return [Page.uniform(texts, default_font_size) for texts in pages]

    min_size, max_size = size_envelope(original)
    logger.debug(f"Restyling {len(pages)} pages within envelope ({min_size:g}, {max_size:g})")

    styled: List[Page] = []
    for texts in pages:
        count = len(texts)
        styled.append(Page.from_lines(
            StyledLine(text, min_size if not text else tapered_size(i, count, min_size, max_size))
            for i, text in enumerate(texts)
        ))
    return styled
