"""
Module: layout.wrapper

Purpose:
    Break one logical line into display lines no wider than a character
    budget. Words are kept whole where possible; a word longer than the
    budget is cut into budget-sized chunks.

Key Functions:
    - wrap_line(): Word-aware wrapping with forced splits

Algorithm:
    Greedy:
    1. Split on every single space (runs of spaces give empty tokens)
    2. Append each token to the current line while it still fits
    3. Otherwise emit the current line and start again with the token
    4. While the current line is over budget, emit its first max_chars
       characters and keep the rest

Used By:
    - layout.paginator: Oversized raw lines
"""

from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


def wrap_line(line: str, max_chars: int) -> List[str]:
    """
    Wrap a single line of text to ``max_chars`` characters.

    Empty input, or a non-positive budget, is returned unchanged as a
    one-element list. The result is never empty.

    Args:
        line: Text without newlines
        max_chars: Character budget per display line

    Returns:
        Display lines in reading order

    Example:
        >>> wrap_line("the quick brown fox", 10)
        ['the quick', 'brown fox']
        >>> wrap_line("supercalifragilistic", 6)
        ['superc', 'alifra', 'gilist', 'ic']
    """
    if not line or max_chars <= 0:
        return [line]

    lines: List[str] = []
    current = ""

    for token in line.split(" "):
        if not current:
            current = token
        elif len(current) + 1 + len(token) <= max_chars:
            current = f"{current} {token}"
        else:
            lines.append(current)
            current = token

        # Token wider than the whole budget
        while len(current) > max_chars:
            logger.debug(f"Forced split of {current[:max_chars]!r} at {max_chars} chars")
            lines.append(current[:max_chars])
            current = current[max_chars:]

    if current:
        lines.append(current)

    return lines or [""]
