"""Tests for exporters."""

import json

import yaml

from model.table import WordTable
from scanner.builder import build_table
from exporters.ascii_exporter import render_word, to_ascii
from exporters.json_exporter import to_json
from exporters.lines_exporter import to_lines
from exporters.yaml_exporter import to_yaml


def sample_table():
    """Words "ab" and "c^,d" split on comma with caret escapes."""
    return build_table(b"ab,c^,d", b",", b"^")


EXPECTED_PAYLOAD = {
    "delimiter": 44,
    "escape": 94,
    "count": 2,
    "words": [
        {"text": "ab", "start": 0, "end": 2},
        {"text": "c^,d", "start": 3, "end": 7},
    ],
}


class TestLinesExporter:
    """Tests for raw lines exporter."""

    def test_empty_table(self):
        """Test exporting empty table."""
        table = WordTable(b"", 44, 94)
        assert to_lines(table) == b""

    def test_words(self):
        """Test that words are written verbatim."""
        assert to_lines(sample_table()) == b"ab\nc^,d\n"

    def test_terminator(self):
        """Test a custom terminator."""
        assert to_lines(sample_table(), terminator=b"\0") == b"ab\0c^,d\0"


class TestASCIIExporter:
    """Tests for ASCII exporter."""

    def test_empty_table(self):
        """Test exporting empty table."""
        table = WordTable(b"", 44, 94)
        assert to_ascii(table) == ""

    def test_plain(self):
        """Test plain listing."""
        assert to_ascii(sample_table()) == "ab\nc^,d"

    def test_numbered_with_spans(self):
        """Test numbered listing with offsets."""
        output = to_ascii(sample_table(), style="numbered", show_spans=True)
        assert output == "1  ab  [0, 2)\n2  c^,d  [3, 7)"

    def test_render_word(self):
        """Test escaping of non-printable bytes."""
        assert render_word(b"a\tb\n\xff") == "a\\tb\\n\\xff"
        assert render_word(b"a\\ b") == "a\\ b"


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_valid_json(self):
        """Test that output is valid JSON."""
        data = json.loads(to_json(sample_table()))
        assert data == EXPECTED_PAYLOAD

    def test_without_spans(self):
        """Test leaving out offsets."""
        data = json.loads(to_json(sample_table(), include_spans=False))
        assert data["words"] == [{"text": "ab"}, {"text": "c^,d"}]

    def test_undecodable_bytes(self):
        """Test that invalid UTF-8 is backslash-escaped."""
        table = build_table(b"\xff\xfe ok", b" ", b"\\")
        data = json.loads(to_json(table))
        assert data["words"][0]["text"] == "\\xff\\xfe"
        assert data["words"][1]["text"] == "ok"


class TestYAMLExporter:
    """Tests for YAML exporter."""

    def test_valid_yaml(self):
        """Test that output parses back to the JSON payload."""
        data = yaml.safe_load(to_yaml(sample_table()))
        assert data == EXPECTED_PAYLOAD

    def test_key_order(self):
        """Test that keys keep their natural order."""
        output = to_yaml(sample_table())
        assert output.index("delimiter") < output.index("words")

    def test_empty_table(self):
        """Test exporting empty table."""
        data = yaml.safe_load(to_yaml(WordTable(b"", 44, 94)))
        assert data["count"] == 0
        assert data["words"] == []
