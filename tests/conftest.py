import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import wordflow
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from wordflow.core.models import Page, StyledLine
from wordflow.layout import LayoutProfile, clear_layout_cache


@pytest.fixture(autouse=True)
def _fresh_layout_cache():
    """Each test sees an empty reflow memo."""
    clear_layout_cache()
    yield
    clear_layout_cache()


@pytest.fixture
def make_profile():
    """Factory for profiles with the geometry fixed."""
    def _create(lines: int = 12, chars: int = 40, preserve: bool = True) -> LayoutProfile:
        return LayoutProfile(
            origin_x=0.1,
            origin_y=0.25,
            width=0.8,
            height=0.5,
            max_lines_per_page=lines,
            max_characters_per_line=chars,
            preserve_empty_lines=preserve,
        )
    return _create


@pytest.fixture
def styled_corpus():
    """Two authored pages spanning sizes 16-28."""
    return (
        Page.from_lines([StyledLine("morning light", 28), StyledLine("on the water", 20)]),
        Page.from_lines([StyledLine("", 12), StyledLine("and then", 24), StyledLine("quiet", 16)]),
    )
