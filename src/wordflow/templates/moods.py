"""
Module: templates.moods

Purpose:
    Moods a post can be tagged with, the sizing templates they favour,
    and how each mood narrows or widens the font size range.

Key Classes:
    - Mood: Post moods
    - LayoutTemplate: Per-line sizing curves

Key Functions:
    - preferred_templates(): Candidate templates for a set of moods
    - font_size_range(): (min, max) font size for a set of moods
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from wordflow.common.thresholds import TEMPLATE


class Mood(str, Enum):
    """Mood tags, in the order the app lists them."""
    MOTIVATIONAL = "Motivational"
    PEACEFUL = "Peaceful"
    HOPECORE = "Hopecore"
    MELANCHOLY = "Melancholy"
    EXISTENTIAL = "Existential"
    HEALING = "Healing"
    UNFILTERED = "Unfiltered"
    GROUNDING = "Grounding"
    PLAYFUL = "Playful"
    SURREAL = "Surreal"

    def __str__(self) -> str:
        return self.value


class LayoutTemplate(str, Enum):
    """How font size varies from line to line on a page."""
    CASCADE = "Cascade"
    EMPHASIS = "Emphasis"
    RHYTHM = "Rhythm"
    CLIMAX = "Climax"
    SCATTERED = "Scattered"
    MINIMAL = "Minimal"
    DRAMATIC = "Dramatic"
    WAVE = "Wave"
    STAIRCASE = "Staircase"
    BALANCED = "Balanced"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    LayoutTemplate.CASCADE: "Gradually decreasing sizes",
    LayoutTemplate.EMPHASIS: "Bold first line",
    LayoutTemplate.RHYTHM: "Alternating sizes",
    LayoutTemplate.CLIMAX: "Build to middle",
    LayoutTemplate.SCATTERED: "Random variation",
    LayoutTemplate.MINIMAL: "Subtle differences",
    LayoutTemplate.DRAMATIC: "High contrast",
    LayoutTemplate.WAVE: "Flowing pattern",
    LayoutTemplate.STAIRCASE: "Step-like progression",
    LayoutTemplate.BALANCED: "Harmonious sizing",
}

_T = LayoutTemplate
_PREFERENCES = {
    Mood.PEACEFUL: (_T.MINIMAL, _T.WAVE, _T.BALANCED),
    Mood.MOTIVATIONAL: (_T.EMPHASIS, _T.DRAMATIC, _T.CLIMAX),
    Mood.MELANCHOLY: (_T.CASCADE, _T.WAVE, _T.SCATTERED),
    Mood.HOPECORE: (_T.CLIMAX, _T.STAIRCASE, _T.RHYTHM),
    Mood.EXISTENTIAL: (_T.SCATTERED, _T.MINIMAL, _T.WAVE),
    Mood.PLAYFUL: (_T.RHYTHM, _T.SCATTERED, _T.STAIRCASE),
    Mood.HEALING: (_T.BALANCED, _T.MINIMAL, _T.WAVE),
    Mood.GROUNDING: (_T.BALANCED, _T.MINIMAL, _T.EMPHASIS),
    Mood.SURREAL: (_T.SCATTERED, _T.DRAMATIC, _T.WAVE),
    Mood.UNFILTERED: (_T.DRAMATIC, _T.EMPHASIS, _T.SCATTERED),
}

# (minimum floor, maximum bound, whether the bound widens or caps the max)
_SIZE_RULES = {
    Mood.PEACEFUL: (16, 24, False),
    Mood.MOTIVATIONAL: (18, 36, True),
    Mood.PLAYFUL: (16, 32, True),
    Mood.MELANCHOLY: (16, 28, False),
    Mood.EXISTENTIAL: (14, 26, False),
    Mood.HEALING: (18, 26, False),
    Mood.GROUNDING: (20, 28, False),
    Mood.HOPECORE: (18, 32, True),
    Mood.SURREAL: (14, 34, True),
    Mood.UNFILTERED: (16, 32, True),
}


def preferred_templates(moods: Iterable[Mood]) -> List[LayoutTemplate]:
    """
    Candidate templates for a set of moods.

    Each mood contributes its three favourites, so templates shared by
    several moods are proportionally more likely. No moods means every
    template is a candidate.
    """
    candidates = [template for mood in moods for template in _PREFERENCES[mood]]
    return candidates or list(LayoutTemplate)


def font_size_range(moods: Iterable[Mood]) -> Tuple[float, float]:
    """
    Font size range for a set of moods.

    Starts from the base range; each mood raises the minimum to its floor
    and either caps or widens the maximum. Conflicting moods that leave
    min above max are re-centred on their midpoint.

    Example:
        >>> font_size_range([Mood.PEACEFUL])
        (16.0, 24.0)
    """
    min_size = TEMPLATE.base_min_size
    max_size = TEMPLATE.base_max_size

    for mood in moods:
        floor, bound, widens = _SIZE_RULES[mood]
        min_size = max(min_size, floor)
        max_size = max(max_size, bound) if widens else min(max_size, bound)

    if min_size > max_size:
        avg = (min_size + max_size) / 2
        min_size = avg - TEMPLATE.recenter_half_span
        max_size = avg + TEMPLATE.recenter_half_span

    return (float(min_size), float(max_size))
