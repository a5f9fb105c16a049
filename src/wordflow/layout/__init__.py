"""
Module: layout

Purpose:
    Text reflow for fixed-size viewports.
    Converts a flat or previously styled text body into sized pages
    under the LayoutProfile of a presentation context.

Key Functions:
    - process(): Main entry point for reflow
    - get_layout(): Profile for a presentation context
    - wrap_line(): Word-aware line wrapping
    - paginate(): Arrange text onto pages
    - restyle(): Font sizes for reflowed pages

Key Classes:
    - LayoutProfile: Geometry and capacity constraints
    - PresentationContext: Known background themes
    - ReflowResult: Styled pages plus profile used

Used By:
    - cli
    - utils.visualizer
"""

from .profiles import LayoutProfile, DEFAULT_PROFILE
from .registry import PresentationContext, get_layout, resolve_context, available_contexts
from .wrapper import wrap_line
from .paginator import paginate
from .restyle import restyle, size_envelope
from .controller import process, ReflowResult, clear_layout_cache

__all__ = [
    # Profiles
    "LayoutProfile",
    "DEFAULT_PROFILE",
    "PresentationContext",
    "get_layout",
    "resolve_context",
    "available_contexts",
    # Functions
    "wrap_line",
    "paginate",
    "restyle",
    "size_envelope",
    "process",
    "clear_layout_cache",
    # Results
    "ReflowResult",
]
