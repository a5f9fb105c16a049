"""
Module: lines

Purpose:
    Provides StyledLine and Page - the output shape of every reflow.
    A StyledLine is one display line plus the size it should be drawn at;
    a Page is the ordered run of lines that fits one viewport.

Key Classes:
    - StyledLine: Text + font size (immutable)
    - Page: Ordered, never-empty sequence of StyledLines (immutable)

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.content.ContentSource
    - layout.restyle
    - layout.controller
    - templates.engine
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence


@dataclass(frozen=True, slots=True)
class StyledLine:
    """
    One line of display text and its intended rendering size.

    Attributes:
        text: Line text, never containing a newline
        font_size: Rendering size in points

    Invariants:
        - font_size > 0

    Example:
        >>> line = StyledLine("hello", 24.0)
        >>> line.is_blank
        False
    """

    text: str
    font_size: float

    def __post_init__(self) -> None:
        """Validate line on construction."""
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")

    @property
    def is_blank(self) -> bool:
        """True for an empty display line (a preserved paragraph gap)."""
        return self.text == ""

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "font_size": self.font_size}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StyledLine:
        """Create from a {"text", "font_size"} mapping."""
        return cls(text=data["text"], font_size=float(data["font_size"]))

    def __repr__(self) -> str:
        return f"StyledLine({self.text!r}, {self.font_size:g})"


@dataclass(frozen=True, slots=True)
class Page:
    """
    Ordered lines shown together in one viewport.

    Insertion order is reading order. A page produced by the layout code
    always holds at least one line; an empty body becomes a single blank line.

    Attributes:
        lines: Tuple of StyledLines in reading order

    Example:
        >>> page = Page.from_lines([StyledLine("a", 20), StyledLine("b", 18)])
        >>> page.texts
        ('a', 'b')
    """

    lines: tuple[StyledLine, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def from_lines(cls, lines: Iterable[StyledLine]) -> Page:
        """Build a page from any iterable of lines."""
        return cls(lines=tuple(lines))

    @classmethod
    def uniform(cls, texts: Sequence[str], font_size: float) -> Page:
        """Build a page where every line shares one size."""
        return cls(lines=tuple(StyledLine(text, font_size) for text in texts))

    @property
    def texts(self) -> tuple[str, ...]:
        """Line texts in reading order."""
        return tuple(line.text for line in self.lines)

    @property
    def font_sizes(self) -> tuple[float, ...]:
        """Line sizes in reading order."""
        return tuple(line.font_size for line in self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[StyledLine]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> StyledLine:
        return self.lines[index]
