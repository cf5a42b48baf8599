"""Parsing of user-supplied delimiter and escape byte specifications."""

import re
from typing import Dict


# Names accepted in place of a literal byte
BYTE_ALIASES: Dict[str, int] = {
    "space": 0x20,
    "tab": 0x09,
    "newline": 0x0A, "nl": 0x0A,
    "cr": 0x0D,
    "nul": 0x00,
    "comma": 0x2C,
    "semicolon": 0x3B,
    "colon": 0x3A,
    "pipe": 0x7C,
    "backslash": 0x5C,
    "slash": 0x2F,
    "caret": 0x5E,
    "tilde": 0x7E,
}

# C-style escapes for bytes that are awkward to type
SIMPLE_ESCAPES: Dict[str, int] = {
    "\\t": 0x09,
    "\\n": 0x0A,
    "\\r": 0x0D,
    "\\0": 0x00,
    "\\\\": 0x5C,
}

_HEX_ESCAPE = re.compile(r"^\\x([0-9a-fA-F]{2})$")
_HEX_NUMBER = re.compile(r"^0[xX]([0-9a-fA-F]{1,2})$")
_DEC_NUMBER = re.compile(r"^[0-9]{2,3}$")


def parse_byte_spec(text: str) -> int:
    """
    Convert a byte specification into a byte value.

    Accepts, in order of precedence:
    - a single character that encodes to one UTF-8 byte (",", "|", "\\");
    - a named alias such as "space" or "comma" (case-insensitive);
    - a C-style escape: "\\t", "\\n", "\\r", "\\0", "\\\\" or "\\xNN";
    - a decimal ("44") or hexadecimal ("0x2c") number of at least two characters.

    Args:
        text: The specification as typed by the user.

    Returns:
        Byte value in range(256).

    Raises:
        ValueError: If the text does not name exactly one byte.
    """
    if not isinstance(text, str):
        raise ValueError(f"byte spec must be a string, got {text!r}")

    if len(text) == 1:
        encoded = text.encode("utf-8")
        if len(encoded) != 1:
            raise ValueError(f"'{text}' is not a single-byte character")
        return encoded[0]

    alias = BYTE_ALIASES.get(text.lower())
    if alias is not None:
        return alias

    if text in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[text]

    match = _HEX_ESCAPE.match(text) or _HEX_NUMBER.match(text)
    if match:
        return int(match.group(1), 16)

    if _DEC_NUMBER.match(text):
        value = int(text, 10)
        if value > 255:
            raise ValueError(f"'{text}' is out of byte range (0-255)")
        return value

    raise ValueError(f"'{text}' is not a valid byte spec")


def format_byte(value: int) -> str:
    """Render a byte value for display, e.g. ``0x2c ','``."""
    if 0x21 <= value <= 0x7E:
        return f"0x{value:02x} '{chr(value)}'"
    for name, alias in BYTE_ALIASES.items():
        if alias == value:
            return f"0x{value:02x} ({name})"
    return f"0x{value:02x}"
