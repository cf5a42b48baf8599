"""Escape-run parity helpers shared by the forward and backward finders."""

from typing import Sequence


def iso_parity(i: int, j: int) -> bool:
    """
    Check whether two indices have the same parity.

    When every byte strictly between ``i`` and ``j`` is an escape byte, the
    run between them has odd length exactly when this returns True.
    """
    return (i & 1) == (j & 1)


def run_is_odd(start: int, stop: int) -> bool:
    """Return True if the run ``[start, stop)`` has an odd number of bytes."""
    return (stop - start) & 1 == 1


def escape_run_start(buf: Sequence[int], lo: int, i: int, escape: int) -> int:
    """
    Find where the escape run ending at ``i`` begins.

    Args:
        buf: Buffer being scanned.
        lo: Lowest index the run may extend to.
        i: Index of an escape byte.
        escape: The escape byte value.

    Returns:
        Smallest index ``j >= lo`` such that ``buf[j:i + 1]`` is all escapes.
    """
    j = i
    while j > lo and buf[j - 1] == escape:
        j -= 1
    return j
