"""ASCII listing exporter for word tables (human-friendly format)."""

from typing import List

from model.table import WordTable


# Readable forms for common control bytes
CONTROL_ESCAPES = {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
}


def to_ascii(
    table: WordTable,
    style: str = "plain",
    show_spans: bool = False,
) -> str:
    """
    Convert a word table to a pure-ASCII listing, one word per line.

    Args:
        table: The word table to export.
        style: Output style - "plain" (words only) or "numbered" (index prefix).
        show_spans: If True, append each word's [start, end) offsets.

    Returns:
        ASCII listing string.
    """
    lines: List[str] = []
    width = len(str(len(table)))

    for i, ((start, end), word) in enumerate(table.iter_words()):
        line = render_word(word)
        if style == "numbered":
            line = f"{i + 1:>{width}}  {line}"
        if show_spans:
            line = f"{line}  [{start}, {end})"
        lines.append(line)

    return "\n".join(lines)


def render_word(word: bytes) -> str:
    """Render word bytes with non-printable bytes escaped."""
    parts: List[str] = []
    for byte in word:
        if 0x20 <= byte <= 0x7E:
            parts.append(chr(byte))
        elif byte in CONTROL_ESCAPES:
            parts.append(CONTROL_ESCAPES[byte])
        else:
            parts.append(f"\\x{byte:02x}")
    return "".join(parts)
