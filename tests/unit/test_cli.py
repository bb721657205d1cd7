"""
Unit tests for the conversion CLI (cli/convert.py).
"""

import json

import pytest

from emlx2json.cli.convert import find_message_files, main, process_directory, process_single_file
from tests.fixtures.messages import SAMPLE_MESSAGES


@pytest.fixture
def mailbox(tmp_path):
    """Directory with two messages, one nested, plus an unrelated file."""
    (tmp_path / "Messages").mkdir()
    (tmp_path / "1.emlx").write_text(SAMPLE_MESSAGES["simple"], encoding="utf-8")
    (tmp_path / "Messages" / "2.emlx").write_text(SAMPLE_MESSAGES["multipart_alternative"], encoding="utf-8")
    (tmp_path / "Info.plist").write_text("<plist/>", encoding="utf-8")
    return tmp_path


class TestProcessing:
    """Tests for file and directory processing."""

    @pytest.mark.unit
    def test_single_file_structured(self, tmp_emlx_file):
        result = process_single_file(tmp_emlx_file)
        assert result["headers"]["Subject"] == "Lunch tomorrow"
        assert len(result["parts"]) == 1

    @pytest.mark.unit
    def test_single_file_flat_with_summary(self, tmp_emlx_file):
        result = process_single_file(tmp_emlx_file, flat=True, include_summary=True)
        assert result["Subject"] == "Lunch tomorrow"
        assert result["summary"]["from_email"] == "anna@example.com"
        assert "headers" not in result

    @pytest.mark.unit
    def test_find_message_files(self, mailbox):
        names = [path.name for path in find_message_files(mailbox)]
        assert names == ["1.emlx", "2.emlx"]

    @pytest.mark.unit
    def test_process_directory(self, mailbox):
        results = process_directory(mailbox)
        assert [len(result["parts"]) for result in results] == [1, 2]

    @pytest.mark.unit
    def test_process_empty_directory(self, tmp_path):
        assert process_directory(tmp_path) == []


class TestMain:
    """Tests for main() entry point."""

    @pytest.mark.unit
    def test_jsonl_to_stdout(self, tmp_emlx_file, capsys):
        main([tmp_emlx_file])
        out = capsys.readouterr().out.strip().splitlines()
        assert len(out) == 1
        assert json.loads(out[0])["headers"]["Subject"] == "Lunch tomorrow"

    @pytest.mark.unit
    def test_json_file_output(self, mailbox, tmp_path):
        output = tmp_path / "out" / "messages.json"
        main([str(mailbox), "--output", str(output), "--flat"])
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [item["Subject"] for item in data] == ["Hi", "Opening hours"]

    @pytest.mark.unit
    def test_missing_input(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["/nonexistent/mailbox"])
        assert exc_info.value.code == 1
        assert "Path not found" in capsys.readouterr().err
