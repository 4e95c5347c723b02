"""Table layout - delimited rows rendered as aligned columns.

Row 0 is treated as the header whenever there is more than one row::

    Name  | Age
    ------+----
    Alice | 30

Tables never reject input for being too wide: columns are compressed
proportionally and overflowing cells are truncated with an ellipsis.
"""

from __future__ import annotations

from rolo.layout.config import DEFAULT_WIDTH, MIN_COLUMN_WIDTH
from rolo.layout.splitter import split_rows
from rolo.width import ELLIPSIS, display_width, pad_to_width, truncate_to_width

CELL_SEPARATOR = " | "
HEADER_JOINT = "-+-"


def measure_columns(grid: list[list[str]]) -> list[int]:
    """Widest cell per column; short rows do not contribute to missing columns."""
    column_count = max((len(row) for row in grid), default=0)
    widths = [0] * column_count
    for row in grid:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], display_width(cell))
    return widths


def fit_columns(widths: list[int], max_width: int) -> list[int]:
    """
    Shrink column widths proportionally so the table fits max_width.

    Widths never grow. Scaled columns keep a floor of 3 so none collapses
    to nothing, which means very narrow targets can still be exceeded.
    """
    separator_total = len(CELL_SEPARATOR) * (len(widths) - 1)
    content_total = sum(widths)
    required = content_total + separator_total
    if required <= max_width or max_width <= separator_total or content_total == 0:
        return list(widths)

    available = max_width - separator_total
    return [
        min(width, max(MIN_COLUMN_WIDTH, width * available // content_total))
        for width in widths
    ]


def render_cell(cell: str, width: int) -> str:
    """Pad cell to width, or cut it down and mark the cut with '...'."""
    if display_width(cell) > width:
        if width < len(ELLIPSIS):
            return ELLIPSIS
        cell = truncate_to_width(cell, width - len(ELLIPSIS)) + ELLIPSIS
    return pad_to_width(cell, width)


def separator_line(widths: list[int]) -> str:
    return HEADER_JOINT.join('-' * width for width in widths)


def format_table(text: str, delimiter: str = "\t", max_width: int = DEFAULT_WIDTH) -> str:
    """
    Format delimited text as a table no wider than max_width where possible.

    Args:
        text: Raw row-oriented input, one row per line
        delimiter: Cell delimiter within a row (default: TAB)
        max_width: Target total width of each rendered line

    Returns:
        Rendered table, or an empty string for blank input
    """
    grid = split_rows(text, delimiter)
    widths = measure_columns(grid)
    if not widths:
        return ""

    widths = fit_columns(widths, max_width)

    lines = [
        CELL_SEPARATOR.join(render_cell(cell, widths[index]) for index, cell in enumerate(row))
        for row in grid
    ]
    if len(lines) > 1:
        lines.insert(1, separator_line(widths))

    return '\n'.join(lines)
