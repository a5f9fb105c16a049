"""Debug utilities."""

from .visualizer import render_page_preview, save_previews

__all__ = [
    "render_page_preview",
    "save_previews",
]
