"""Tests for the wordflow command line."""

import json
import logging

import pytest

from wordflow.cli import main


@pytest.fixture
def styled_payload(tmp_path):
    path = tmp_path / "post.json"
    path.write_text(json.dumps({
        "lines_data": [
            [{"text": "morning light", "font_size": 28}, {"text": "on the water", "font_size": 20}],
            [{"text": "quiet", "font_size": 16}],
        ]
    }), encoding="utf-8")
    return path


class TestContextsCommand:

    def test_contexts_when_run_then_lists_every_theme(self, capsys):
        assert main(["contexts"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 16
        assert lines[0].startswith("Paper")
        assert any(line.startswith("Mint") and "drops blank lines" in line for line in lines)


class TestReflowCommand:

    def test_reflow_when_json_payload_then_prints_result(self, styled_payload, capsys):
        assert main(["reflow", str(styled_payload), "--context", "Night"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["context"] == "Night"
        assert data["source_kind"] == "structured"
        assert [line["text"] for line in data["pages"][0]] == ["morning light", "on the water", "quiet"]

    def test_reflow_when_text_file_then_flat_to_output(self, tmp_path):
        source = tmp_path / "post.txt"
        source.write_text("one\n\ntwo", encoding="utf-8")
        output = tmp_path / "out" / "night.json"

        assert main(["reflow", str(source), "--context", "Night", "--output", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["source_kind"] == "flat"
        assert data["pages"] == [[
            {"text": "one", "font_size": 20.0},
            {"text": "", "font_size": 20.0},
            {"text": "two", "font_size": 20.0},
        ]]

    def test_reflow_when_no_context_then_default_profile_without_warning(self, styled_payload, capsys, caplog):
        with caplog.at_level(logging.WARNING):
            assert main(["reflow", str(styled_payload)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["context"] is None
        assert data["profile"]["max_lines_per_page"] == 12
        assert "No layout registered" not in caplog.text

    def test_reflow_when_invalid_payload_then_exit_code_one(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"content": [1, 2]}), encoding="utf-8")

        assert main(["reflow", str(path)]) == 1

    def test_reflow_when_missing_file_then_exit_code_one(self, tmp_path):
        assert main(["reflow", str(tmp_path / "missing.txt")]) == 1

    def test_reflow_when_preview_dir_then_writes_pngs(self, styled_payload, tmp_path, capsys):
        previews = tmp_path / "previews"

        assert main(["reflow", str(styled_payload), "--preview-dir", str(previews)]) == 0

        assert sorted(p.name for p in previews.iterdir()) == ["page_01.png"]


class TestComposeCommand:

    def test_compose_when_seeded_then_reproducible(self, tmp_path, capsys):
        source = tmp_path / "post.txt"
        source.write_text("first line\nsecond line\n\n\nnext page", encoding="utf-8")
        args = ["compose", str(source), "--mood", "Peaceful", "--seed", "42", "--context", "Fog"]

        assert main(args) == 0
        first = capsys.readouterr().out
        assert main(args) == 0
        second = capsys.readouterr().out

        assert first == second
        assert json.loads(first)["source_kind"] == "structured"

    def test_compose_when_styled_output_then_saves_payload(self, tmp_path, capsys):
        source = tmp_path / "post.txt"
        source.write_text("a\nb\n\n\nc", encoding="utf-8")
        styled = tmp_path / "styled.json"

        assert main(["compose", str(source), "--seed", "3", "--styled-output", str(styled)]) == 0

        data = json.loads(styled.read_text(encoding="utf-8"))
        assert [[line["text"] for line in page] for page in data["lines_data"]] == [["a", "b"], ["c"]]

    def test_compose_when_unknown_mood_then_usage_error(self, tmp_path):
        source = tmp_path / "post.txt"
        source.write_text("a", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["compose", str(source), "--mood", "Grumpy"])

        assert exc_info.value.code == 2
