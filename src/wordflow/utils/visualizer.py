"""
Module: utils.visualizer

Purpose:
    Debug previews of a reflow. Draws each page the way a viewer would
    roughly see it: the context's background colour, the profile's text
    box and every line at its font size. Useful for eyeballing a new
    profile; it is not the app's renderer.

Key Functions:
    - render_page_preview(): Draw one page into a new image
    - save_previews(): Write one PNG per page of a ReflowResult

Dependencies:
    - PIL: Image drawing
    - layout: LayoutProfile, ReflowResult, resolve_context

Used By:
    - cli: `reflow --preview-dir`
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Hashable, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from wordflow.common.thresholds import PREVIEW
from wordflow.core.models import Page
from wordflow.layout import LayoutProfile, PresentationContext, ReflowResult, resolve_context

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

PREVIEW_FONT = "DejaVuSerif.ttf"
DEFAULT_BACKGROUND: RGB = (255, 255, 255)
DEFAULT_TEXT: RGB = (0, 0, 0)

_BLACK: RGB = (0, 0, 0)
_WHITE: RGB = (255, 255, 255)

# (background, text) per theme; backgrounds are the first gradient stop
COLORS: dict[PresentationContext, Tuple[RGB, RGB]] = {
    PresentationContext.PAPER: ((0xF5, 0xF5, 0xDC), _BLACK),
    PresentationContext.FOG: ((0xE0, 0xE0, 0xE0), _BLACK),
    PresentationContext.SUNSET: ((0xFF, 0x6B, 0x6B), _WHITE),
    PresentationContext.NIGHT: ((0x2C, 0x3E, 0x50), _WHITE),
    PresentationContext.OCEAN: ((0x4C, 0xA1, 0xAF), _WHITE),
    PresentationContext.FOREST: ((0x13, 0x4E, 0x5E), _WHITE),
    PresentationContext.LAVENDER: ((0xE8, 0xD5, 0xE8), _BLACK),
    PresentationContext.MINT: ((0xA8, 0xE6, 0xCF), _BLACK),
    PresentationContext.RAIN_FOREST: ((0x0F, 0x20, 0x27), _WHITE),
    PresentationContext.NORTHERN_LIGHTS: ((0x00, 0xC9, 0xFF), _WHITE),
    PresentationContext.OCEAN_WAVES: ((0x2E, 0x31, 0x92), _WHITE),
    PresentationContext.CLOUDY_SKY: ((0x75, 0x7F, 0x9A), _BLACK),
    PresentationContext.FIREPLACE: ((0xF8, 0x36, 0x00), _WHITE),
    PresentationContext.SNOWFALL: ((0xE6, 0xDA, 0xDA), _WHITE),
    PresentationContext.CITY_NIGHT: ((0x0F, 0x0C, 0x29), _WHITE),
    PresentationContext.GALAXY_SPACE: ((0x00, 0x04, 0x28), _WHITE),
}


@lru_cache(maxsize=32)
def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Serif font at ``size`` px, Pillow's bundled font if none installed."""
    try:
        return ImageFont.truetype(PREVIEW_FONT, size)
    except OSError:
        return ImageFont.load_default(size=size)


def render_page_preview(
    page: Page,
    profile: LayoutProfile,
    viewport: Optional[Tuple[int, int]] = None,
    context: Optional[Hashable] = None,
) -> Image.Image:
    """
    Draw one page for visual inspection.

    Lines start at the top of the profile's box and advance by a fixed
    multiple of their font size. Text running past the box is drawn
    anyway so overflow is visible.

    Args:
        page: Styled page to draw
        profile: Profile the page was laid out for
        viewport: (width, height) in pixels; phone-sized by default
        context: Presentation context, selects colours

    Returns:
        New RGB image

    Example:
        >>> img = render_page_preview(result.pages[0], result.profile, context="Night")
        >>> img.size
        (390, 844)
    """
    width, height = viewport or (PREVIEW.viewport_width, PREVIEW.viewport_height)
    theme = resolve_context(context) if context is not None else None
    background, text_color = COLORS.get(theme, (DEFAULT_BACKGROUND, DEFAULT_TEXT))

    img = Image.new("RGB", (width, height), color=background)
    draw = ImageDraw.Draw(img)

    left, top, right, bottom = profile.box(width, height)
    draw.rectangle(
        (left, top, right, bottom),
        outline=PREVIEW.box_outline_color,
        width=PREVIEW.box_outline_width,
    )

    y = float(top)
    for line in page.lines:
        size = max(1, round(line.font_size))
        if line.text:
            draw.text((left, y), line.text, fill=text_color, font=_font(size))
        y += size * PREVIEW.line_spacing_ratio

    if y > bottom:
        logger.debug(f"Preview text runs {y - bottom:.0f}px past the profile box")

    return img


def save_previews(
    result: ReflowResult,
    output_dir: Path,
    stem: str = "page",
    viewport: Optional[Tuple[int, int]] = None,
) -> List[Path]:
    """
    Write a PNG preview for every page of a reflow.

    Args:
        result: Reflow to draw
        output_dir: Directory for the images (created if missing)
        stem: File name prefix
        viewport: (width, height) in pixels

    Returns:
        Paths of the written images, in page order
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: List[Path] = []
    for index, page in enumerate(result.pages, start=1):
        img = render_page_preview(page, result.profile, viewport, result.context)
        path = output_dir / f"{stem}_{index:02d}.png"
        img.save(path, "PNG")
        paths.append(path)

    logger.info(f"Saved {len(paths)} preview pages to {output_dir}")
    return paths
