"""Raw exporter writing each word's bytes unchanged."""

from model.table import WordTable


def to_lines(table: WordTable, terminator: bytes = b"\n") -> bytes:
    """
    Concatenate the words of a table, each followed by ``terminator``.

    Words are written byte for byte, escapes included.
    """
    return b"".join(word + terminator for word in table.words)
