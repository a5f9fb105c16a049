"""Centralized size and styling constants.

Every magic number used by the styling and preview code lives here so the
feel of a layout can be tuned in one place.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StyleThresholds:
    """Font sizes used when restyling reflowed pages."""

    default_font_size: float = 20.0  # Size for flat content with no prior styling
    fallback_min_size: float = 16.0  # Envelope used when the original has no text
    fallback_max_size: float = 28.0
    taper_damping: float = 0.6  # Fraction of the envelope a page tapers through
    single_line_progress: float = 0.5  # Position assigned to a lone line


@dataclass
class TemplateThresholds:
    """Font ranges and multipliers for mood-driven template styling."""

    base_min_size: float = 16.0
    base_max_size: float = 32.0
    recenter_half_span: float = 4.0  # Half-width of the range when moods conflict

    # Shorter lines are allowed to grow, longer ones shrink
    short_line_chars: int = 20
    medium_line_chars: int = 40
    long_line_chars: int = 60
    short_line_multiplier: float = 1.2
    medium_line_multiplier: float = 1.0
    long_line_multiplier: float = 0.9
    very_long_line_multiplier: float = 0.8

    staircase_max_steps: int = 5
    page_break: str = "\n\n\n"  # Three returns start a new page
    max_seed: int = 99999


@dataclass
class PreviewThresholds:
    """Geometry for debug preview images."""

    viewport_width: int = 390
    viewport_height: int = 844
    line_spacing_ratio: float = 1.25  # Line advance as a multiple of font size
    box_outline_width: int = 2
    box_outline_color: tuple[int, int, int] = (255, 0, 128)


STYLE = StyleThresholds()
TEMPLATE = TemplateThresholds()
PREVIEW = PreviewThresholds()
