"""
Module: layout.registry

Purpose:
    Static table mapping a presentation context (the viewer's background
    theme) to the LayoutProfile that governs reflow under it.

Key Functions:
    - get_layout(): Profile for a context key, default when unknown
    - resolve_context(): Normalize a key to a PresentationContext
    - available_contexts(): Registered contexts in display order

Key Classes:
    - PresentationContext: Known background themes

Dependencies:
    - layout.profiles: LayoutProfile, DEFAULT_PROFILE

Used By:
    - layout.controller: Profile resolution
    - cli: `contexts` listing
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Hashable, Mapping, Optional

from .profiles import DEFAULT_PROFILE, LayoutProfile

logger = logging.getLogger(__name__)


class PresentationContext(str, Enum):
    """Background themes a post can be viewed on."""

    # Gradient backgrounds
    PAPER = "Paper"
    FOG = "Fog"
    SUNSET = "Sunset"
    NIGHT = "Night"
    OCEAN = "Ocean"
    FOREST = "Forest"
    LAVENDER = "Lavender"
    MINT = "Mint"

    # Video backgrounds
    RAIN_FOREST = "Rain Forest"
    NORTHERN_LIGHTS = "Northern Lights"
    OCEAN_WAVES = "Ocean Waves"
    CLOUDY_SKY = "Cloudy Sky"
    FIREPLACE = "Fireplace"
    SNOWFALL = "Snowfall"
    CITY_NIGHT = "City Night"
    GALAXY_SPACE = "Galaxy Space"

    def __str__(self) -> str:
        return self.value

    @property
    def is_video(self) -> bool:
        """Video themes keep text in a smaller box so the footage shows."""
        return self in _VIDEO_CONTEXTS


_VIDEO_CONTEXTS = frozenset({
    PresentationContext.RAIN_FOREST,
    PresentationContext.NORTHERN_LIGHTS,
    PresentationContext.OCEAN_WAVES,
    PresentationContext.CLOUDY_SKY,
    PresentationContext.FIREPLACE,
    PresentationContext.SNOWFALL,
    PresentationContext.CITY_NIGHT,
    PresentationContext.GALAXY_SPACE,
})


def _profile(origin: tuple[float, float], size: tuple[float, float],
             lines: int, chars: int, preserve: bool = True) -> LayoutProfile:
    return LayoutProfile(
        origin_x=origin[0],
        origin_y=origin[1],
        width=size[0],
        height=size[1],
        max_lines_per_page=lines,
        max_characters_per_line=chars,
        preserve_empty_lines=preserve,
    )


# Built at import so an invalid entry fails here, never during reflow
_PROFILES: Mapping[PresentationContext, LayoutProfile] = MappingProxyType({
    PresentationContext.PAPER: _profile((0.1, 0.15), (0.8, 0.7), 16, 36),
    PresentationContext.FOG: _profile((0.1, 0.25), (0.8, 0.5), 12, 40),
    PresentationContext.SUNSET: _profile((0.1, 0.35), (0.8, 0.45), 10, 34),
    PresentationContext.NIGHT: _profile((0.15, 0.2), (0.7, 0.6), 14, 32),
    PresentationContext.OCEAN: _profile((0.1, 0.3), (0.8, 0.4), 9, 38),
    PresentationContext.FOREST: _profile((0.12, 0.25), (0.76, 0.5), 12, 36),
    PresentationContext.LAVENDER: _profile((0.1, 0.2), (0.8, 0.6), 14, 40),
    PresentationContext.MINT: _profile((0.1, 0.2), (0.8, 0.6), 14, 40, preserve=False),
    PresentationContext.RAIN_FOREST: _profile((0.1, 0.55), (0.8, 0.35), 8, 34, preserve=False),
    PresentationContext.NORTHERN_LIGHTS: _profile((0.1, 0.6), (0.8, 0.3), 6, 36, preserve=False),
    PresentationContext.OCEAN_WAVES: _profile((0.1, 0.15), (0.8, 0.3), 6, 36, preserve=False),
    PresentationContext.CLOUDY_SKY: _profile((0.1, 0.2), (0.8, 0.4), 10, 40),
    PresentationContext.FIREPLACE: _profile((0.1, 0.1), (0.8, 0.35), 8, 32, preserve=False),
    PresentationContext.SNOWFALL: _profile((0.15, 0.3), (0.7, 0.4), 10, 30),
    PresentationContext.CITY_NIGHT: _profile((0.1, 0.5), (0.8, 0.4), 10, 36, preserve=False),
    PresentationContext.GALAXY_SPACE: _profile((0.2, 0.25), (0.6, 0.5), 12, 28),
})


def resolve_context(context_key: Hashable) -> Optional[PresentationContext]:
    """
    Normalize a context key.

    Args:
        context_key: A PresentationContext or its string value

    Returns:
        Matching PresentationContext, or None for anything unknown
    """
    if isinstance(context_key, PresentationContext):
        return context_key
    if isinstance(context_key, str):
        try:
            return PresentationContext(context_key)
        except ValueError:
            return None
    return None


def get_layout(context_key: Hashable) -> LayoutProfile:
    """
    Profile for a presentation context.

    Never fails: keys without an entry get DEFAULT_PROFILE with a warning.
    None means "no context chosen" and gets DEFAULT_PROFILE quietly.
    Returned profiles are shared, immutable registry values.

    Args:
        context_key: PresentationContext, its string value, or any opaque key

    Returns:
        LayoutProfile to reflow under

    Example:
        >>> get_layout("Night").max_characters_per_line
        32
        >>> get_layout("nonexistent") is DEFAULT_PROFILE
        True
    """
    if context_key is None:
        return DEFAULT_PROFILE

    context = resolve_context(context_key)
    if context is None:
        logger.warning(f"No layout registered for context {context_key!r}, using default")
        return DEFAULT_PROFILE
    return _PROFILES[context]


def available_contexts() -> tuple[PresentationContext, ...]:
    """Registered contexts in declaration order."""
    return tuple(_PROFILES)
