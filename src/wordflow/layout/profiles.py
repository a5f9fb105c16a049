"""
Module: layout.profiles

Purpose:
    Geometry and capacity constraints for one presentation context.
    The reflow code only reads the line and character budgets; the
    fractional box is passed through for whoever draws the pages.

Key Classes:
    - LayoutProfile: Immutable layout profile

Dependencies:
    - dataclasses (std)

Used By:
    - layout.registry: Static profile table
    - layout.paginator: Page and line budgets
    - utils.visualizer: Content box placement
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LayoutProfile:
    """
    Layout constraints for a presentation context (immutable).

    Attributes:
        origin_x: Left edge of the text box, as a fraction of viewport width
        origin_y: Top edge of the text box, as a fraction of viewport height
        width: Box width as a fraction of viewport width
        height: Box height as a fraction of viewport height
        max_lines_per_page: Display lines allowed on one page
        max_characters_per_line: Characters allowed on one display line
        preserve_empty_lines: Keep blank input lines as blank display lines

    Example:
        >>> profile = LayoutProfile(0.1, 0.25, 0.8, 0.5, 12, 40)
        >>> profile.box(1000, 2000)
        (100, 500, 900, 1500)
    """

    # Geometry (fractions of the viewport)
    origin_x: float
    origin_y: float
    width: float
    height: float

    # Capacity
    max_lines_per_page: int
    max_characters_per_line: int

    # Behavior
    preserve_empty_lines: bool = True

    def __post_init__(self) -> None:
        """Validate profile on construction."""
        for name in ("origin_x", "origin_y", "width", "height"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1]: {value}")
        if self.max_lines_per_page < 1:
            raise ValueError(f"max_lines_per_page must be positive: {self.max_lines_per_page}")
        if self.max_characters_per_line < 1:
            raise ValueError(
                f"max_characters_per_line must be positive: {self.max_characters_per_line}"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def origin(self) -> tuple[float, float]:
        return (self.origin_x, self.origin_y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def box(self, viewport_width: int, viewport_height: int) -> tuple[int, int, int, int]:
        """
        Text box in viewport pixels.

        Args:
            viewport_width: Destination width in pixels
            viewport_height: Destination height in pixels

        Returns:
            (left, top, right, bottom) rounded to whole pixels
        """
        left = round(self.origin_x * viewport_width)
        top = round(self.origin_y * viewport_height)
        right = round((self.origin_x + self.width) * viewport_width)
        bottom = round((self.origin_y + self.height) * viewport_height)
        return (left, top, right, bottom)


DEFAULT_PROFILE = LayoutProfile(
    origin_x=0.1,
    origin_y=0.25,
    width=0.8,
    height=0.5,
    max_lines_per_page=12,
    max_characters_per_line=40,
    preserve_empty_lines=True,
)
