"""Layout engine - column, table and list formatting."""

from rolo.layout.config import (
    LayoutConfig,
    ListAlignment,
    ListConfig,
    ListStyle,
)
from rolo.layout.splitter import split_items, split_rows
from rolo.layout.column import format_columns, layout_columns
from rolo.layout.table import format_table
from rolo.layout.lists import format_list

__all__ = [
    "LayoutConfig",
    "ListAlignment",
    "ListConfig",
    "ListStyle",
    "split_items",
    "split_rows",
    "format_columns",
    "layout_columns",
    "format_table",
    "format_list",
]
