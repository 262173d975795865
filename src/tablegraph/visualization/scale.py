"""Map table row counts to node sizes."""

import math

import humanize


def dot_area(row_count: int) -> int:
    """Decade of the row count, used as node width and height in DOT output."""
    if row_count <= 1:
        return 0
    return int(math.floor(math.log10(row_count)))


def d3_radius(row_count: int) -> int:
    """Circle radius for the D3 page: ``floor(2 * ln(row_count))``."""
    if row_count <= 1:
        return 0
    return int(math.floor(2 * math.log(row_count)))


def size_label(row_count: int) -> str:
    # Row count rendered as a byte size; display only.
    row_count = max(row_count, 0)
    if row_count < 1024:
        return f"{row_count} B"
    return humanize.naturalsize(row_count, binary=True)
