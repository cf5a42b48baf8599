"""Table builder that drains a Scanner into a WordTable."""

import logging

from model.table import WordTable
from .iterator import ByteLike, Scanner

logger = logging.getLogger(__name__)

ORDERS = ("forward", "reverse", "alternate")


def build_table(
    buffer,
    delimiter: ByteLike,
    escape: ByteLike,
    order: str = "forward",
) -> WordTable:
    """
    Split a buffer and record every word with its span.

    Args:
        buffer: Bytes-like object to split.
        delimiter: Delimiter byte (int or single byte).
        escape: Escape byte (int or single byte).
        order: "forward" pulls from the front, "reverse" from the back, and
               "alternate" switches ends after every word.

    Returns:
        WordTable holding the words in the order they were pulled.

    Raises:
        ValueError: If order is not one of ORDERS.
    """
    if order not in ORDERS:
        raise ValueError(f"unknown order '{order}', expected one of {', '.join(ORDERS)}")

    scanner = Scanner(buffer, delimiter, escape)
    table = WordTable(bytes(scanner.remaining_view()), scanner.delimiter, scanner.escape)

    from_front = order != "reverse"
    while True:
        if from_front:
            span = scanner.pull_front_span()
        else:
            span = scanner.pull_back_span()
        if span is None:
            break
        table.add_word(*span)
        if order == "alternate":
            from_front = not from_front

    logger.debug(f"Split {len(table.buffer)} bytes into {len(table)} words ({order})")
    return table
