"""
Module: templates.engine

Purpose:
    Style freshly authored text: split it into pages, pick a sizing
    template from the post's moods and give every line a font size.
    The output is Structured content that can then be reflowed for any
    presentation context.

Key Functions:
    - generate_styled_layout(): Main entry point
    - select_template(): Mood-weighted template choice
    - template_font_size(): Size for one line under a template

Key Classes:
    - StyledLayout: Styled pages plus the seed and template used

Dependencies:
    - templates.moods: Mood, LayoutTemplate, ranges
    - templates.rng: SeededRandom
    - core.models: StyledLine, Page, ContentSource

Used By:
    - cli: `compose` command
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from wordflow.common.thresholds import TEMPLATE
from wordflow.core.models import ContentSource, Page, StyledLine

from .moods import LayoutTemplate, Mood, font_size_range, preferred_templates
from .rng import SeededRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyledLayout:
    """
    Result of template styling (immutable).

    Attributes:
        pages: Styled pages; pages with no text are dropped
        seed: Seed that reproduces this layout
        template: Template that sized the lines
    """

    pages: tuple[Page, ...]
    seed: int
    template: LayoutTemplate

    @property
    def template_name(self) -> str:
        return self.template.value

    def to_content(self) -> ContentSource:
        """Structured content ready for reflow."""
        return ContentSource.from_pages(self.pages)


def select_template(moods: Sequence[Mood], rng: SeededRandom) -> LayoutTemplate:
    """Pick a template, weighted by how many moods favour it."""
    candidates = preferred_templates(moods)
    return candidates[rng.randrange(len(candidates))]


def _length_multiplier(text: str) -> float:
    """Shorter lines may be drawn larger."""
    length = len(text)
    if length < TEMPLATE.short_line_chars:
        return TEMPLATE.short_line_multiplier
    if length < TEMPLATE.medium_line_chars:
        return TEMPLATE.medium_line_multiplier
    if length < TEMPLATE.long_line_chars:
        return TEMPLATE.long_line_multiplier
    return TEMPLATE.very_long_line_multiplier


def _round_to_even(size: float) -> float:
    """Nearest even size, halves rounded up."""
    return float(math.floor(size / 2 + 0.5) * 2)


def template_font_size(
    text: str,
    index: int,
    total: int,
    template: LayoutTemplate,
    min_size: float,
    max_size: float,
    rng: SeededRandom,
) -> float:
    """
    Font size for line ``index`` of ``total`` under a template.

    The template curve is scaled by a line-length multiplier, clamped to
    [min_size, max_size] and rounded to an even size. Only SCATTERED and
    MINIMAL draw from ``rng``.

    Args:
        text: Line text (its length affects the size)
        index: Zero-based line position on the page
        total: Lines on the page
        template: Sizing curve
        min_size: Smallest allowed size
        max_size: Largest allowed size
        rng: Generator for the random templates

    Returns:
        Even font size within the range
    """
    span = max_size - min_size
    progress = index / (total - 1) if total > 1 else 0.5

    if template is LayoutTemplate.CASCADE:
        size = max_size - progress * span
    elif template is LayoutTemplate.EMPHASIS:
        size = max_size if index == 0 else min_size + span * 0.4
    elif template is LayoutTemplate.RHYTHM:
        size = max_size * 0.9 if index % 2 == 0 else min_size + span * 0.3
    elif template is LayoutTemplate.CLIMAX:
        middle = total / 2
        distance = abs(index - middle) / middle
        size = max_size - distance * span * 0.7
    elif template is LayoutTemplate.SCATTERED:
        size = min_size + span * rng.uniform(0.3, 1.0)
    elif template is LayoutTemplate.MINIMAL:
        variation = rng.uniform(-0.1, 0.1)
        base = min_size + span * 0.5
        size = base + base * variation
    elif template is LayoutTemplate.DRAMATIC:
        size = max_size if index % 3 == 0 else min_size
    elif template is LayoutTemplate.WAVE:
        wave = math.sin(progress * math.pi * 2)
        size = min_size + span * (0.5 + wave * 0.5)
    elif template is LayoutTemplate.STAIRCASE:
        steps = min(TEMPLATE.staircase_max_steps, total)
        step = index * steps // total
        size = min_size + (step / (steps - 1)) * span if steps > 1 else min_size
    else:  # BALANCED
        if index == 0 or index == total - 1:
            size = max_size * 0.8
        else:
            size = min_size + span * 0.5

    final = min(max_size, max(min_size, size * _length_multiplier(text)))
    return _round_to_even(final)


def _split_pages(content: str) -> List[List[str]]:
    """Three returns start a page; blank lines inside a page are dropped."""
    pages = []
    for chunk in content.split(TEMPLATE.page_break):
        lines = [line for line in chunk.split("\n") if line]
        if lines:
            pages.append(lines)
    return pages


def generate_styled_layout(
    content: str,
    moods: Iterable[Mood] = (),
    seed: Optional[int] = None,
) -> StyledLayout:
    """
    Style authored text with a mood-driven template.

    Pipeline:
    1. Split into pages on three newlines, drop blank lines
    2. Pick a template from the moods (seeded)
    3. Size each line under the mood font range

    The same content, moods and seed always give the same layout.

    Args:
        content: Authored text
        moods: Mood tags for the post
        seed: Layout seed; drawn at random when omitted

    Returns:
        StyledLayout with pages, seed and template

    Example:
        >>> layout = generate_styled_layout("one\\ntwo", [Mood.PEACEFUL], seed=7)
        >>> layout == generate_styled_layout("one\\ntwo", [Mood.PEACEFUL], seed=7)
        True
    """
    moods = tuple(moods)
    layout_seed = seed if seed is not None else random.randint(0, TEMPLATE.max_seed)
    rng = SeededRandom(layout_seed)

    template = select_template(moods, rng)
    min_size, max_size = font_size_range(moods)

    pages: List[Page] = []
    for lines in _split_pages(content):
        total = len(lines)
        pages.append(Page.from_lines(
            StyledLine(text, template_font_size(text, i, total, template, min_size, max_size, rng))
            for i, text in enumerate(lines)
        ))

    logger.info(
        f"Styled {len(pages)} pages with template {template} "
        f"(seed={layout_seed}, sizes {min_size:g}-{max_size:g})"
    )

    return StyledLayout(pages=tuple(pages), seed=layout_seed, template=template)
