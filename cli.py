#!/usr/bin/env python3
"""
escsplit CLI

Split a file or standard input into words on a delimiter byte, honouring an
escape byte, and print the words in various formats.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from scanner.builder import ORDERS, build_table
from scanner.bytespec import format_byte, parse_byte_spec
from scanner.config import load_config
from exporters import to_lines, to_ascii, to_json, to_yaml

logger = logging.getLogger("escsplit")

FORMATS = ["lines", "ascii", "json", "yaml"]

DEFAULTS: Dict[str, Any] = {
    "delimiter": " ",
    "escape": "\\",
    "order": "forward",
    "format": "lines",
    "spans": False,
}


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="escsplit",
        description="Split input into words on a delimiter byte, honouring an escape byte.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  escsplit args.txt                  # Split on spaces, backslash escapes
  escsplit -d comma -e '^' data.csv  # Split on commas, caret escapes
  escsplit -d '\\t' -f json in.tsv   # Tab-separated, JSON output
  escsplit -r -f ascii --spans       # Last word first, with offsets
  escsplit --config escsplit.toml    # Defaults from a config file
        """,
    )

    # Positional arguments
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file (default: '-' for stdin)",
    )

    # Splitting options
    parser.add_argument(
        "-d", "--delimiter",
        default=None,
        help="Delimiter byte: a character, alias (space, comma, tab), \\xNN or number (default: space)",
    )

    parser.add_argument(
        "-e", "--escape",
        default=None,
        help="Escape byte, same syntax as --delimiter (default: backslash)",
    )

    parser.add_argument(
        "--order",
        choices=list(ORDERS),
        default=None,
        help="Order in which words are pulled (default: forward)",
    )

    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Shorthand for --order reverse",
    )

    # Output options
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: lines)",
    )

    parser.add_argument(
        "--spans",
        action="store_true",
        default=None,
        help="Include word offsets in ascii, json and yaml output",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="TOML, YAML or JSON file providing default settings",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(args)


def resolve_settings(parsed, config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge defaults, config file values and command line options.

    Command line options win over the config file, which wins over defaults.
    """
    settings = dict(DEFAULTS)
    if config:
        settings.update(config)

    if parsed.delimiter is not None:
        settings["delimiter"] = parsed.delimiter
    if parsed.escape is not None:
        settings["escape"] = parsed.escape
    if parsed.order is not None:
        settings["order"] = parsed.order
    if parsed.reverse:
        settings["order"] = "reverse"
    if parsed.format is not None:
        settings["format"] = parsed.format
    if parsed.spans is not None:
        settings["spans"] = parsed.spans

    return settings


def _to_byte(value: Any) -> int:
    """Convert a setting value (int or byte spec string) to a byte."""
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a valid byte spec")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"{value} is out of byte range (0-255)")
        return value
    return parse_byte_spec(str(value))


def _read_input(source: str) -> bytes:
    """Read the whole input file, or stdin for '-', as bytes."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    # Load config file
    config: Optional[Dict[str, Any]] = None
    if parsed.config:
        config = load_config(Path(parsed.config))
        if config is None:
            print(f"Error: could not load config file '{parsed.config}'", file=sys.stderr)
            return 1
        logger.debug(f"Loaded settings from {parsed.config}: {sorted(config)}")

    settings = resolve_settings(parsed, config)

    # Validate settings
    try:
        delimiter = _to_byte(settings["delimiter"])
        escape = _to_byte(settings["escape"])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings["order"] not in ORDERS:
        print(f"Error: unknown order '{settings['order']}'", file=sys.stderr)
        return 1
    if settings["format"] not in FORMATS:
        print(f"Error: unknown format '{settings['format']}'", file=sys.stderr)
        return 1
    if not isinstance(settings["spans"], bool):
        print(f"Error: invalid spans value {settings['spans']!r}, expected true or false", file=sys.stderr)
        return 1

    logger.debug(f"Delimiter {format_byte(delimiter)}, escape {format_byte(escape)}")

    # Read input
    try:
        data = _read_input(parsed.input)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    table = build_table(data, delimiter, escape, order=settings["order"])

    # Generate output
    spans = settings["spans"]
    if settings["format"] == "json":
        output = (to_json(table, include_spans=spans) + "\n").encode("utf-8")
    elif settings["format"] == "yaml":
        output = to_yaml(table, include_spans=spans).encode("utf-8")
    elif settings["format"] == "ascii":
        text = to_ascii(table, style="numbered", show_spans=spans)
        output = (text + "\n").encode("ascii") if text else b""
    else:  # lines (default)
        output = to_lines(table)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_bytes(output)
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
