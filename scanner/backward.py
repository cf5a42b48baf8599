"""
Backward word finders: locate words scanning right to left.

Escapes sit before the delimiter they suppress, so scanning backward sees a
delimiter before it knows whether it is escaped. Both finders settle that
from the parity of the escape run once the run has been walked past.
"""

from typing import Optional, Sequence

from .parity import escape_run_start, iso_parity, run_is_odd


def rfind_eow(
    buf: Sequence[int],
    lo: int,
    hi: int,
    delimiter: int,
    escape: int,
) -> Optional[int]:
    """
    Find the end of the last word in ``buf[lo:hi]``.

    Trailing delimiters are skipped unconditionally, except that the first of
    them belongs to the word when an odd escape run precedes it.

    Returns:
        Exclusive end index of the word, or None if only delimiters remain.
    """
    i = hi - 1
    while i >= lo and buf[i] == delimiter:
        i -= 1

    if i < lo:
        return None

    if buf[i] != escape or i == hi - 1:
        return i + 1

    # [^ESCAPE] ESCAPE ... ESCAPE DELIM
    #           ^          ^
    #           j          i
    j = escape_run_start(buf, lo, i, escape)
    if run_is_odd(j, i + 1):
        # Odd run: the delimiter at i + 1 is escaped.
        return i + 2
    return i + 1


def rfind_bow(
    buf: Sequence[int],
    lo: int,
    hi: int,
    delimiter: int,
    escape: int,
) -> int:
    """
    Find the beginning of the word ending at ``hi``.

    Args:
        buf: Buffer being scanned.
        lo: Start of the view.
        hi: End of the word, as returned by ``rfind_eow``.
        delimiter: The delimiter byte value.
        escape: The escape byte value.

    Returns:
        Index just past the nearest unescaped delimiter, or ``lo``.
    """
    candidate: Optional[int] = None

    for i in range(hi - 1, lo - 1, -1):
        byte = buf[i]
        if candidate is not None and byte != escape:
            # [^ESCAPE] ESCAPE* DELIM
            #     ^               ^
            #     i           candidate
            if iso_parity(i, candidate):
                # Odd number of escapes, the candidate is content.
                candidate = None
            else:
                return candidate + 1
        if byte == delimiter:
            candidate = i

    # The run below the candidate reaches the start of the view.
    if candidate is not None and iso_parity(candidate, lo):
        return candidate + 1
    return lo
