"""JSON exporter for word tables (machine-friendly format)."""

import json
from typing import Any, Dict, List

from model.table import WordTable


def to_json(
    table: WordTable,
    indent: int = 2,
    include_spans: bool = True,
) -> str:
    """
    Convert a word table to JSON format.

    Args:
        table: The word table to export.
        indent: JSON indentation level.
        include_spans: If True, include each word's start and end offsets.

    Returns:
        JSON string representation of the table.
    """
    return json.dumps(build_payload(table, include_spans), indent=indent)


def build_payload(table: WordTable, include_spans: bool = True) -> Dict[str, Any]:
    """
    Build the serializable structure shared by the JSON and YAML exporters.

    Word text is decoded as UTF-8, with undecodable bytes written as
    backslash escapes.
    """
    words: List[Dict[str, Any]] = []
    for (start, end), word in table.iter_words():
        entry: Dict[str, Any] = {"text": _get_word_str(word)}
        if include_spans:
            entry["start"] = start
            entry["end"] = end
        words.append(entry)

    return {
        "delimiter": table.delimiter,
        "escape": table.escape,
        "count": len(words),
        "words": words,
    }


def _get_word_str(word: bytes) -> str:
    """Get the string representation of a word."""
    return word.decode("utf-8", errors="backslashreplace")
