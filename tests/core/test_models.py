"""
Unit Tests for Core Models

Tests for StyledLine, Page and ContentSource.
"""

import pytest

from wordflow.core.models import ContentKind, ContentSource, Page, StyledLine


class TestStyledLine:
    """Tests for StyledLine dataclass."""

    def test_init_when_valid_values_then_creates_line(self):
        """Valid line should be created successfully."""
        line = StyledLine("hello", 24.0)
        assert line.text == "hello"
        assert line.font_size == 24.0

    def test_init_when_zero_size_then_raises_error(self):
        """Non-positive sizes are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            StyledLine("hello", 0)

    def test_init_when_frozen_then_immutable(self):
        """StyledLine should be immutable (frozen)."""
        line = StyledLine("hello", 20)
        with pytest.raises(AttributeError):
            line.text = "bye"  # type: ignore

    def test_is_blank_when_empty_text_then_true(self):
        assert StyledLine("", 16).is_blank
        assert not StyledLine(" ", 16).is_blank

    def test_from_dict_when_int_size_then_float(self):
        """Sizes from JSON may be ints."""
        line = StyledLine.from_dict({"text": "a", "font_size": 20})
        assert line == StyledLine("a", 20.0)
        assert isinstance(line.font_size, float)

    def test_to_dict_when_called_then_plain_mapping(self):
        assert StyledLine("a", 18.5).to_dict() == {"text": "a", "font_size": 18.5}


class TestPage:
    """Tests for Page dataclass."""

    def test_uniform_when_texts_given_then_same_size_in_order(self):
        page = Page.uniform(["a", "", "b"], 20.0)

        assert page.texts == ("a", "", "b")
        assert page.font_sizes == (20.0, 20.0, 20.0)
        assert page.line_count == 3
        assert len(page) == 3

    def test_iter_when_lines_then_reading_order(self):
        lines = [StyledLine("one", 20), StyledLine("two", 18)]
        page = Page.from_lines(lines)

        assert list(page) == lines
        assert page[1].text == "two"

    def test_init_when_list_of_lines_then_stored_as_tuple(self):
        page = Page([StyledLine("a", 20)])

        assert page.lines == (StyledLine("a", 20),)
        hash(page)

    def test_hash_when_equal_pages_then_equal_hashes(self):
        """Pages are hashable so reflows can be memoized."""
        a = Page.uniform(["x", "y"], 20)
        b = Page.uniform(["x", "y"], 20)
        assert a == b
        assert hash(a) == hash(b)


class TestContentSource:
    """Tests for ContentSource dataclass."""

    def test_kind_when_blocks_then_flat(self):
        assert ContentSource.from_blocks(["a"]).kind is ContentKind.FLAT

    def test_kind_when_pages_then_structured(self):
        content = ContentSource.from_pages([[StyledLine("a", 20)]])
        assert content.kind is ContentKind.STRUCTURED
        assert isinstance(content.structured[0], Page)

    def test_kind_when_nothing_then_empty(self):
        content = ContentSource.empty()
        assert content.kind is ContentKind.EMPTY
        assert content.joined_text() == ""

    def test_kind_when_both_variants_then_structured_wins(self):
        content = ContentSource(
            structured=(Page.uniform(["styled"], 20),),
            flat=("plain",),
        )
        assert content.kind is ContentKind.STRUCTURED
        assert content.joined_text() == "styled"

    def test_joined_text_when_structured_then_lines_across_pages(self, styled_corpus):
        content = ContentSource.from_pages(styled_corpus)
        assert content.joined_text() == "morning light\non the water\n\nand then\nquiet"

    def test_joined_text_when_flat_then_blocks_joined_by_newline(self):
        content = ContentSource.from_blocks(["first block", "second\nblock"])
        assert content.joined_text() == "first block\nsecond\nblock"

    def test_lines_when_flat_then_empty(self):
        assert ContentSource.from_text("abc").lines == ()

    def test_empty_structured_when_no_pages_then_still_structured(self):
        content = ContentSource.from_pages([])
        assert content.kind is ContentKind.STRUCTURED
        assert content.joined_text() == ""

    def test_init_when_list_of_pages_then_tuple(self):
        page = Page.uniform(["hi"], 20)
        content = ContentSource(structured=[page])

        assert content.structured == (page,)
        hash(content)

    def test_init_when_plain_line_sequences_then_wrapped_in_pages(self):
        content = ContentSource(structured=((StyledLine("hi", 20),),))

        assert content.structured == (Page.uniform(["hi"], 20),)
        assert content.lines == (StyledLine("hi", 20),)

    def test_init_when_flat_is_bare_string_then_single_block(self):
        content = ContentSource(flat="whole text")

        assert content.flat == ("whole text",)
        assert content.joined_text() == "whole text"

    def test_init_when_flat_list_then_tuple(self):
        content = ContentSource(flat=["a", "b"])

        assert content.flat == ("a", "b")
        assert content == ContentSource.from_blocks(["a", "b"])
