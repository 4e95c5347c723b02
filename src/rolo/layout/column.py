"""Column layout - column-major distribution of items, like pr(1) and column(1).

Items fill down the first column before starting the next::

    a  d
    b  e
    c  f

Cells are padded by display width, so ANSI-colored and wide-glyph items
line up. Column mode pads but never truncates.
"""

from __future__ import annotations

import math
from typing import Optional

from rolo.errors import ColumnTooNarrow, InvalidColumnCount, WidthTooSmall
from rolo.layout.config import MIN_COLUMN_WIDTH, LayoutConfig
from rolo.layout.splitter import split_items
from rolo.width import pad_to_width


def column_width(columns: int, config: LayoutConfig) -> int:
    """
    Width available to each column after gap space is taken out.

    Raises the layout error describing why the configuration cannot work.
    """
    if columns <= 0:
        raise InvalidColumnCount(columns)
    gap_total = config.gap * (columns - 1)
    if config.width <= gap_total:
        raise WidthTooSmall(config.width, gap_total)
    width = (config.width - gap_total) // columns
    if width < MIN_COLUMN_WIDTH:
        raise ColumnTooNarrow(width, MIN_COLUMN_WIDTH)
    return width


def layout_columns(items: list[str], columns: int, config: LayoutConfig) -> str:
    """Arrange already-split items into a column-major grid."""
    width = column_width(columns, config)
    if not items:
        return ""

    rows = math.ceil(len(items) / columns)
    gap = ' ' * config.gap
    lines: list[str] = []

    for row in range(rows):
        cells = [
            items[index]
            for index in (row + col * rows for col in range(columns))
            if index < len(items)
        ]
        # Last populated cell is left unpadded so lines carry no trailing space
        padded = [pad_to_width(cell, width) + gap for cell in cells[:-1]]
        lines.append(''.join(padded) + cells[-1])

    return '\n'.join(lines)


def format_columns(
    text: str,
    columns: int,
    config: Optional[LayoutConfig] = None,
    delimiter: Optional[str] = None,
) -> str:
    """
    Format text into columns.

    Args:
        text: Raw input; one item per line, or per delimited field
        columns: Number of columns (must be positive)
        config: Width and gap settings (default: 80 wide, gap 2)
        delimiter: Optional field delimiter applied within each line

    Raises:
        InvalidColumnCount: columns is zero
        WidthTooSmall: width cannot hold the gaps
        ColumnTooNarrow: resulting columns would be narrower than 3
    """
    config = config or LayoutConfig()
    return layout_columns(split_items(text, delimiter), columns, config)
