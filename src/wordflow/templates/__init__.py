"""
Module: templates

Purpose:
    Mood-driven font sizing for newly authored posts.
    Produces the Structured content that later reflows resample.

Key Functions:
    - generate_styled_layout(): Style authored text
    - font_size_range(): Size range for a set of moods

Key Classes:
    - Mood, LayoutTemplate: Tags and sizing curves
    - StyledLayout: Styled pages with seed and template
    - SeededRandom: Reproducible generator
"""

from .moods import Mood, LayoutTemplate, font_size_range, preferred_templates
from .rng import SeededRandom
from .engine import StyledLayout, generate_styled_layout, select_template, template_font_size

__all__ = [
    # Tags
    "Mood",
    "LayoutTemplate",
    # Engine
    "StyledLayout",
    "generate_styled_layout",
    "select_template",
    "template_font_size",
    "font_size_range",
    "preferred_templates",
    "SeededRandom",
]
