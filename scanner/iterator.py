"""
Double-ended word iterator over a byte buffer.

Splits a buffer into words separated by a delimiter byte, where a delimiter
preceded by an odd run of escape bytes is kept inside the word verbatim.
Words can be pulled from either end, in any interleaving, and always fall on
the same boundaries.

Example:
    >>> scanner = Scanner(b"a^,b,,c^^,d", b",", b"^")
    >>> [bytes(word) for word in scanner]
    [b'a^,b', b'c^^', b'd']
"""

import logging
from typing import Iterator, List, Optional, Tuple, Union

from .backward import rfind_bow, rfind_eow
from .forward import find_bow, find_eow

logger = logging.getLogger(__name__)

ByteLike = Union[int, bytes, bytearray, memoryview]

Span = Tuple[int, int]


def _coerce_byte(value: ByteLike, name: str) -> int:
    """Normalize a byte argument given as an int or a length-1 bytes-like."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int or a single byte, not bool")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} must be in range(256), got {value}")
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != 1:
            raise ValueError(f"{name} must be exactly one byte, got {raw!r}")
        return raw[0]
    raise TypeError(f"{name} must be an int or a single byte, not {type(value).__name__}")


class Scanner:
    """
    A cursor over a byte buffer yielding escape-aware words from both ends.

    The buffer is wrapped in a ``memoryview`` and never copied. Returned words
    are ``memoryview`` slices of it, so they stay valid as long as the buffer
    does. Only the remaining ``[start, stop)`` range changes as words are
    pulled.

    If ``delimiter == escape`` the split is unspecified.

    A scanner is not thread-safe; confine each one to a single thread.
    """

    def __init__(self, buffer, delimiter: ByteLike, escape: ByteLike):
        self._buffer = memoryview(buffer).cast("B")
        self._delimiter = _coerce_byte(delimiter, "delimiter")
        self._escape = _coerce_byte(escape, "escape")
        self._start = 0
        self._stop = len(self._buffer)
        self._exhausted = False

        if self._delimiter == self._escape:
            logger.warning(
                f"delimiter and escape are both 0x{self._delimiter:02x}; "
                "word boundaries are unspecified"
            )

    @property
    def delimiter(self) -> int:
        """The delimiter byte value."""
        return self._delimiter

    @property
    def escape(self) -> int:
        """The escape byte value."""
        return self._escape

    @property
    def exhausted(self) -> bool:
        """True once a pull from either end has found no word."""
        return self._exhausted

    @property
    def remaining_span(self) -> Span:
        """Absolute ``(start, stop)`` offsets of the unconsumed view."""
        return self._start, self._stop

    def remaining_view(self) -> memoryview:
        """Return the unconsumed part of the buffer without consuming it."""
        return self._buffer[self._start:self._stop]

    peek_remaining = remaining_view

    def pull_front_span(self) -> Optional[Span]:
        """
        Consume the first remaining word and return its buffer offsets.

        Returns:
            ``(start, end)`` of the word, or None once exhausted.
        """
        if self._exhausted:
            return None

        buf = self._buffer
        begin = find_bow(buf, self._start, self._stop, self._delimiter)
        self._start = begin

        end = find_eow(buf, begin, self._stop, self._delimiter, self._escape)
        if end is None:
            self._exhausted = True
            return None

        self._start = end
        return begin, end

    def pull_back_span(self) -> Optional[Span]:
        """
        Consume the last remaining word and return its buffer offsets.

        Returns:
            ``(start, end)`` of the word, or None once exhausted.
        """
        if self._exhausted:
            return None

        buf = self._buffer
        end = rfind_eow(buf, self._start, self._stop, self._delimiter, self._escape)
        if end is None:
            self._exhausted = True
            return None
        self._stop = end

        begin = rfind_bow(buf, self._start, end, self._delimiter, self._escape)
        self._stop = begin
        return begin, end

    def pull_front(self) -> Optional[memoryview]:
        """Consume and return the first remaining word, or None once exhausted."""
        span = self.pull_front_span()
        if span is None:
            return None
        return self._buffer[span[0]:span[1]]

    def pull_back(self) -> Optional[memoryview]:
        """Consume and return the last remaining word, or None once exhausted."""
        span = self.pull_back_span()
        if span is None:
            return None
        return self._buffer[span[0]:span[1]]

    def __iter__(self) -> "Scanner":
        return self

    def __next__(self) -> memoryview:
        word = self.pull_front()
        if word is None:
            raise StopIteration
        return word

    def __reversed__(self) -> Iterator[memoryview]:
        while True:
            word = self.pull_back()
            if word is None:
                return
            yield word

    def copy(self) -> "Scanner":
        """Return an independent scanner at the same position over the same buffer."""
        clone = Scanner.__new__(Scanner)
        clone._buffer = self._buffer
        clone._delimiter = self._delimiter
        clone._escape = self._escape
        clone._start = self._start
        clone._stop = self._stop
        clone._exhausted = self._exhausted
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scanner):
            return NotImplemented
        return (
            self._delimiter == other._delimiter
            and self._escape == other._escape
            and self._exhausted == other._exhausted
            and self.remaining_view() == other.remaining_view()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Scanner(delimiter=0x{self._delimiter:02x}, escape=0x{self._escape:02x}, "
            f"remaining={bytes(self.remaining_view())!r})"
        )


def iter_words(buffer, delimiter: ByteLike, escape: ByteLike) -> Scanner:
    """Create a Scanner over ``buffer``."""
    return Scanner(buffer, delimiter, escape)


def split_words(buffer, delimiter: ByteLike, escape: ByteLike) -> List[bytes]:
    """Split ``buffer`` into words, first to last, as ``bytes`` copies."""
    return [bytes(word) for word in Scanner(buffer, delimiter, escape)]


def rsplit_words(buffer, delimiter: ByteLike, escape: ByteLike) -> List[bytes]:
    """Split ``buffer`` into words, last to first, as ``bytes`` copies."""
    return [bytes(word) for word in reversed(Scanner(buffer, delimiter, escape))]
