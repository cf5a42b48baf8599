"""Tests for the command line interface."""

import io
import json
import sys

from cli import main


def write_input(tmp_path, data=b"a\\ b c"):
    """Write an input file and return its path as a string."""
    path = tmp_path / "input.txt"
    path.write_bytes(data)
    return str(path)


class TestMain:
    """Tests for main()."""

    def test_default_split(self, tmp_path, capsysbinary):
        """Test splitting on spaces with backslash escapes."""
        assert main([write_input(tmp_path)]) == 0
        assert capsysbinary.readouterr().out == b"a\\ b\nc\n"

    def test_reverse(self, tmp_path, capsysbinary):
        """Test reverse order."""
        assert main([write_input(tmp_path), "-r"]) == 0
        assert capsysbinary.readouterr().out == b"c\na\\ b\n"

    def test_alternate(self, tmp_path, capsysbinary):
        """Test alternating order."""
        path = write_input(tmp_path, b"1 2 3 4")
        assert main([path, "--order", "alternate"]) == 0
        assert capsysbinary.readouterr().out == b"1\n4\n2\n3\n"

    def test_custom_bytes_json(self, tmp_path, capsysbinary):
        """Test custom delimiter and escape with JSON output."""
        path = write_input(tmp_path, b"ab,c^,d")
        assert main([path, "-d", "comma", "-e", "^", "-f", "json"]) == 0

        data = json.loads(capsysbinary.readouterr().out)
        assert [word["text"] for word in data["words"]] == ["ab", "c^,d"]
        assert "start" not in data["words"][0]

    def test_ascii_with_spans(self, tmp_path, capsysbinary):
        """Test numbered ASCII output with offsets."""
        assert main([write_input(tmp_path), "-f", "ascii", "--spans"]) == 0
        assert capsysbinary.readouterr().out == b"1  a\\ b  [0, 4)\n2  c  [5, 6)\n"

    def test_yaml(self, tmp_path, capsysbinary):
        """Test YAML output."""
        assert main([write_input(tmp_path), "-f", "yaml"]) == 0
        assert b"count: 2" in capsysbinary.readouterr().out

    def test_stdin(self, monkeypatch, capsysbinary):
        """Test reading from standard input."""
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"x  y")))
        assert main([]) == 0
        assert capsysbinary.readouterr().out == b"x\ny\n"

    def test_output_file(self, tmp_path, capsysbinary):
        """Test writing to an output file."""
        output = tmp_path / "out.txt"
        assert main([write_input(tmp_path), "-o", str(output)]) == 0
        assert output.read_bytes() == b"a\\ b\nc\n"
        assert b"Output written to" in capsysbinary.readouterr().err

    def test_config_file(self, tmp_path, capsysbinary):
        """Test defaults from a config file."""
        config = tmp_path / "escsplit.toml"
        config.write_text('[escsplit]\ndelimiter = "comma"\nescape = "^"\n', encoding="utf-8")
        path = write_input(tmp_path, b"ab,c^,d")

        assert main([path, "--config", str(config)]) == 0
        assert capsysbinary.readouterr().out == b"ab\nc^,d\n"

    def test_command_line_overrides_config(self, tmp_path, capsysbinary):
        """Test that options win over config values."""
        config = tmp_path / "escsplit.yaml"
        config.write_text("delimiter: comma\n", encoding="utf-8")
        path = write_input(tmp_path, b"a;b,c")

        assert main([path, "--config", str(config), "-d", ";"]) == 0
        assert capsysbinary.readouterr().out == b"a\nb,c\n"

    def test_invalid_byte_spec(self, tmp_path, capsysbinary):
        """Test an unusable delimiter."""
        assert main([write_input(tmp_path), "-d", "abc"]) == 1
        assert b"Error" in capsysbinary.readouterr().err

    def test_invalid_config_value(self, tmp_path, capsysbinary):
        """Test an unusable order from a config file."""
        config = tmp_path / "escsplit.json"
        config.write_text('{"order": "sideways"}', encoding="utf-8")

        assert main([write_input(tmp_path), "--config", str(config)]) == 1
        assert b"unknown order" in capsysbinary.readouterr().err

    def test_non_boolean_spans_in_config(self, tmp_path, capsysbinary):
        """Test that a string spans value is rejected instead of enabling offsets."""
        config = tmp_path / "escsplit.json"
        config.write_text('{"spans": "false", "format": "json"}', encoding="utf-8")

        assert main([write_input(tmp_path), "--config", str(config)]) == 1
        captured = capsysbinary.readouterr()
        assert b"invalid spans value" in captured.err
        assert captured.out == b""

    def test_boolean_spans_in_config(self, tmp_path, capsysbinary):
        """Test a boolean spans value from a config file."""
        config = tmp_path / "escsplit.json"
        config.write_text('{"spans": true, "format": "json"}', encoding="utf-8")

        assert main([write_input(tmp_path), "--config", str(config)]) == 0
        data = json.loads(capsysbinary.readouterr().out)
        assert data["words"][0] == {"text": "a\\ b", "start": 0, "end": 4}

    def test_missing_config(self, tmp_path, capsysbinary):
        """Test a config file that cannot be loaded."""
        assert main([write_input(tmp_path), "--config", str(tmp_path / "nope.toml")]) == 1
        assert b"could not load config" in capsysbinary.readouterr().err

    def test_missing_input(self, tmp_path, capsysbinary):
        """Test an input file that does not exist."""
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert b"Error reading input" in capsysbinary.readouterr().err
