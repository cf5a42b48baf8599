"""Forward word finders: locate words scanning left to right."""

from typing import Optional, Sequence


def find_bow(buf: Sequence[int], lo: int, hi: int, delimiter: int) -> int:
    """
    Find the beginning of the next word in ``buf[lo:hi]``.

    Leading delimiters are always separators, never escaped content.

    Returns:
        Index of the first non-delimiter byte, or ``hi`` if there is none.
    """
    i = lo
    while i < hi and buf[i] == delimiter:
        i += 1
    return i


def find_eow(
    buf: Sequence[int],
    lo: int,
    hi: int,
    delimiter: int,
    escape: int,
) -> Optional[int]:
    """
    Find the end of the word starting at ``lo``.

    An escape byte toggles the active-escape flag, so consecutive escapes
    cancel in pairs. Any other byte clears it.

    Args:
        buf: Buffer being scanned.
        lo: Start of the word (must not be a delimiter).
        hi: End of the view.
        delimiter: The delimiter byte value.
        escape: The escape byte value.

    Returns:
        Exclusive end index of the word, or None if the view is empty.
    """
    if lo >= hi:
        return None

    active = False
    for i in range(lo, hi):
        byte = buf[i]
        if byte == delimiter and not active:
            return i
        if byte == escape:
            active = not active
        else:
            active = False

    return hi
