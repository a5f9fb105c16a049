"""
Module: layout.paginator

Purpose:
    Reflow a text body into pages of display lines under a LayoutProfile.
    Newlines are hard breaks; long lines are wrapped; pages close when
    they hold max_lines_per_page lines.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    1. Split the body on "\\n", keeping empty lines
    2. Before each raw line, close the current page if it is full
    3. Blank lines are kept (or dropped) per preserve_empty_lines
    4. Lines within budget go in unchanged; longer ones are wrapped and
       their fragments may continue onto following pages
    5. An empty body still yields one page with one blank line

Dependencies:
    - layout.profiles: LayoutProfile
    - layout.wrapper: wrap_line

Used By:
    - layout.controller: Reflow pipeline
"""

from __future__ import annotations

import logging
from typing import List

from .profiles import LayoutProfile
from .wrapper import wrap_line

logger = logging.getLogger(__name__)


def paginate(content: str, profile: LayoutProfile) -> List[List[str]]:
    """
    Arrange a text body onto pages.

    Rules:
    1. The line budget is checked before a raw line's first fragment and
       again before every further fragment of a wrapped line, so no
       fragment is ever dropped.
    2. Every returned page holds at least one line and at most
       ``profile.max_lines_per_page`` lines.

    Args:
        content: Full text body, newline separated
        profile: Layout constraints to apply

    Returns:
        Pages in reading order, each a list of display lines

    Example:
        >>> paginate("a\\n\\nb", DEFAULT_PROFILE)
        [['a', '', 'b']]
    """
    max_lines = profile.max_lines_per_page
    max_chars = profile.max_characters_per_line

    pages: List[List[str]] = []
    current_page: List[str] = []

    def close_page_if_full() -> None:
        nonlocal current_page
        if len(current_page) >= max_lines:
            logger.debug(f"Closing page {len(pages)} at {len(current_page)} lines")
            pages.append(current_page)
            current_page = []

    for raw_line in content.split("\n"):
        close_page_if_full()

        if not raw_line:
            if profile.preserve_empty_lines:
                current_page.append("")
            continue

        if len(raw_line) <= max_chars:
            current_page.append(raw_line)
            continue

        for fragment in wrap_line(raw_line, max_chars):
            close_page_if_full()
            current_page.append(fragment)

    if current_page:
        pages.append(current_page)

    if not pages:
        return [[""]]

    logger.debug(f"Paginated {len(content)} chars onto {len(pages)} pages")
    return pages
