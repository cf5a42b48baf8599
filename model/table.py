"""Word table recording the words split out of one buffer."""

from typing import Iterator, List, Tuple

Span = Tuple[int, int]


class WordTable:
    """
    The words of a buffer, stored as ``(start, end)`` spans.

    Spans are kept in the order they were emitted, which for a reverse or
    alternating drain differs from buffer order. The bytes between words
    (the separators) are derived from the spans on demand.
    """

    def __init__(self, buffer: bytes, delimiter: int, escape: int):
        self._buffer = bytes(buffer)
        self._delimiter = delimiter
        self._escape = escape
        self._spans: List[Span] = []

    @property
    def buffer(self) -> bytes:
        """Return the buffer the words were taken from."""
        return self._buffer

    @property
    def delimiter(self) -> int:
        return self._delimiter

    @property
    def escape(self) -> int:
        return self._escape

    @property
    def spans(self) -> List[Span]:
        """Return word spans in emitted order."""
        return list(self._spans)

    @property
    def words(self) -> List[bytes]:
        """Return word bytes in emitted order."""
        return [self._buffer[start:end] for start, end in self._spans]

    def add_word(self, start: int, end: int) -> None:
        """
        Record a word.

        Args:
            start: Offset of the first byte of the word.
            end: Offset just past the last byte of the word.

        Raises:
            ValueError: If the span is empty or out of bounds.
        """
        if not 0 <= start < end <= len(self._buffer):
            raise ValueError(f"invalid word span ({start}, {end})")
        self._spans.append((start, end))

    def iter_words(self) -> Iterator[Tuple[Span, bytes]]:
        """Iterate over ``(span, word)`` pairs in emitted order."""
        for start, end in self._spans:
            yield (start, end), self._buffer[start:end]

    def in_buffer_order(self) -> List[Span]:
        """Return word spans sorted by position in the buffer."""
        return sorted(self._spans)

    def separators(self) -> List[bytes]:
        """
        Get the bytes around and between words, in buffer order.

        The result always has one more element than there are words: the
        leading bytes, the gap after each word but the last, and the trailing
        bytes. Each may be empty.
        """
        gaps: List[bytes] = []
        cursor = 0
        for start, end in self.in_buffer_order():
            gaps.append(self._buffer[cursor:start])
            cursor = end
        gaps.append(self._buffer[cursor:])
        return gaps

    def reconstruct(self) -> bytes:
        """Rejoin words and separators in buffer order."""
        gaps = self.separators()
        parts: List[bytes] = [gaps[0]]
        for (start, end), gap in zip(self.in_buffer_order(), gaps[1:]):
            parts.append(self._buffer[start:end])
            parts.append(gap)
        return b"".join(parts)

    def __len__(self) -> int:
        """Return the number of words."""
        return len(self._spans)

    def __contains__(self, span: object) -> bool:
        """Check if a span was recorded."""
        return span in self._spans

    def __repr__(self) -> str:
        return (
            f"WordTable(words={len(self._spans)}, bytes={len(self._buffer)}, "
            f"delimiter=0x{self._delimiter:02x}, escape=0x{self._escape:02x})"
        )
