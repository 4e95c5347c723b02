"""List layout - one item per line with optional markers and alignment."""

from __future__ import annotations

from typing import Optional

from rolo.layout.config import LIST_MARKERS, MIN_LIST_WIDTH, ListAlignment, ListConfig, ListStyle
from rolo.layout.splitter import split_lines
from rolo.width import (
    ELLIPSIS,
    display_width,
    pad_to_width,
    truncate_tail_to_width,
    truncate_to_width,
)


def _marker(number: int, count: int, config: ListConfig) -> str:
    """Marker text (including its trailing space) for the given 1-based item."""
    if config.line_numbers or config.list_style == ListStyle.NUMBERS:
        digits = len(str(count))
        return f"{number:>{digits}}. "
    if config.list_style is not None:
        return LIST_MARKERS[config.list_style] + " "
    return ""


def available_width(count: int, config: ListConfig) -> int:
    """Columns left for content once the marker is placed."""
    marker_width = display_width(_marker(count, count, config))
    available = config.width - marker_width
    return available if available > 0 else MIN_LIST_WIDTH


def fit_item(text: str, width: int, alignment: ListAlignment) -> str:
    """
    Truncate and align one item within width.

    Right-aligned items keep their tail when cut (``...the end``); left and
    center keep their head (``the start...``).
    """
    if display_width(text) > width:
        if width < len(ELLIPSIS):
            return ELLIPSIS
        keep = width - len(ELLIPSIS)
        if alignment == ListAlignment.RIGHT:
            text = ELLIPSIS + truncate_tail_to_width(text, keep)
        else:
            text = truncate_to_width(text, keep) + ELLIPSIS

    if alignment == ListAlignment.RIGHT:
        return pad_to_width(text, width, "right")
    if alignment == ListAlignment.CENTER:
        # Leading space only; trailing padding is noise in a pipeline
        return ' ' * ((width - display_width(text)) // 2) + text
    return text


def format_list(text: str, config: Optional[ListConfig] = None) -> str:
    """
    Format text as a list, one non-blank line per item.

    Examples (line numbers on, 10 items)::

         1. apple
         ...
        10. mango
    """
    config = config or ListConfig()
    lines = split_lines(text)
    if not lines:
        return ""

    count = len(lines)
    width = available_width(count, config)

    return '\n'.join(
        _marker(number, count, config) + fit_item(line, width, config.alignment)
        for number, line in enumerate(lines, start=1)
    )
