"""
Unit Tests for Serialization

Tests for payload and result serialization.
"""

import json
import logging

import pytest

from wordflow.core.models import ContentKind, ContentSource, Page, StyledLine
from wordflow.core.schemas import ValidationError
from wordflow.core.utils.serialization import (
    deserialize_content,
    load_content_json,
    save_content_json,
    save_result_json,
    serialize_content,
    serialize_result,
)
from wordflow.layout import PresentationContext, process


class TestDeserializeContent:
    """Tests for deserialize_content."""

    def test_deserialize_when_lines_data_then_structured(self):
        data = {"lines_data": [[{"text": "a", "font_size": 28}], [{"text": "b", "font_size": 16}]]}

        content = deserialize_content(data)

        assert content.kind is ContentKind.STRUCTURED
        assert content.structured == (
            Page.from_lines([StyledLine("a", 28.0)]),
            Page.from_lines([StyledLine("b", 16.0)]),
        )

    def test_deserialize_when_content_then_flat(self):
        content = deserialize_content({"content": ["one", "two"]})

        assert content.kind is ContentKind.FLAT
        assert content.flat == ("one", "two")

    def test_deserialize_when_missing_font_size_then_flat(self):
        data = {"lines_data": [[{"text": "a", "font_size": 20}, {"text": "b"}], [{"text": "c"}]]}

        content = deserialize_content(data)

        assert content.kind is ContentKind.FLAT
        assert content.flat == ("a", "b", "c")

    def test_deserialize_when_both_keys_then_lines_data_wins(self):
        data = {
            "lines_data": [[{"text": "styled", "font_size": 20}]],
            "content": ["plain"],
        }

        content = deserialize_content(data)

        assert content.kind is ContentKind.STRUCTURED
        assert content.joined_text() == "styled"

    def test_deserialize_when_saved_result_then_structured(self):
        """A saved result's pages can be fed back in for another context."""
        result = process(ContentSource.from_text("hello there"), "Night")
        data = json.loads(json.dumps(serialize_result(result)))

        content = deserialize_content(data, strict=True)

        assert content.kind is ContentKind.STRUCTURED
        assert content.structured == result.pages

    def test_deserialize_when_no_keys_then_empty_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            content = deserialize_content({})

        assert content.kind is ContentKind.EMPTY
        assert "no lines_data" in caplog.text

    def test_deserialize_when_invalid_then_raises(self):
        with pytest.raises(ValidationError):
            deserialize_content({"content": "not a list"})

    def test_deserialize_when_validate_disabled_then_skips_checks(self):
        content = deserialize_content({"content": ["a"]}, validate=False)
        assert content.flat == ("a",)


class TestSerializeContent:
    """Tests for serialize_content."""

    def test_serialize_when_structured_then_lines_data(self, styled_corpus):
        data = serialize_content(ContentSource.from_pages(styled_corpus))

        assert list(data) == ["lines_data"]
        assert data["lines_data"][1][0] == {"text": "", "font_size": 12}

    def test_serialize_when_flat_then_content(self):
        assert serialize_content(ContentSource.from_blocks(["x", "y"])) == {"content": ["x", "y"]}

    def test_serialize_when_empty_then_empty_object(self):
        assert serialize_content(ContentSource.empty()) == {}


class TestSerializeResult:
    """Tests for serialize_result."""

    def test_serialize_when_enum_context_then_value_string(self):
        result = process(ContentSource.from_text("a b c"), PresentationContext.GALAXY_SPACE)

        data = serialize_result(result)

        assert data["schema_version"] == 1
        assert data["context"] == "Galaxy Space"
        assert data["source_kind"] == "flat"
        assert data["profile"]["max_characters_per_line"] == 28
        assert data["pages"] == [[{"text": "a b c", "font_size": 20.0}]]

    def test_serialize_when_no_context_then_null(self):
        result = process(ContentSource.from_text("a"), None)
        assert serialize_result(result)["context"] is None

    def test_serialize_when_dumped_then_json_safe(self, styled_corpus):
        result = process(ContentSource.from_pages(styled_corpus), "Paper")
        json.dumps(serialize_result(result))


class TestFileUtilities:
    """Tests for load/save helpers."""

    def test_load_when_file_missing_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_content_json(tmp_path / "missing.json")

    def test_load_when_bad_json_then_validation_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_content_json(path)

    def test_save_then_load_when_structured_then_equal(self, tmp_path, styled_corpus):
        content = ContentSource.from_pages(styled_corpus)
        path = tmp_path / "nested" / "post.json"

        save_content_json(content, path)

        assert load_content_json(path, strict=True) == content

    def test_save_result_when_called_then_writes_pages(self, tmp_path):
        result = process(ContentSource.from_blocks(["one", "", "two"]), "Fog")
        path = tmp_path / "out" / "result.json"

        save_result_json(result, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["context"] == "Fog"
        assert [line["text"] for line in data["pages"][0]] == ["one", "", "two"]
