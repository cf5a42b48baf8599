"""Scanner module for escape-aware splitting of byte buffers."""

from .iterator import Scanner, iter_words, split_words, rsplit_words
from .bytespec import parse_byte_spec, format_byte
from .builder import build_table

__all__ = [
    "Scanner",
    "iter_words",
    "split_words",
    "rsplit_words",
    "parse_byte_spec",
    "format_byte",
    "build_table",
]
