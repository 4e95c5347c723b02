"""
rolo: text layout tool for Unix pipelines

Reformat text into columns, tables, or lists for terminal display. ANSI
escape sequences are zero-width and wide Unicode glyphs take two columns,
so colored and CJK text line up.

Quick Start:
    >>> import rolo
    >>> print(rolo.format_columns("a\\nb\\nc\\nd", 2, rolo.LayoutConfig(width=10)))
    a     c
    b     d
    >>> print(rolo.format_list("x\\ny", rolo.ListConfig(line_numbers=True)))
    1. x
    2. y
"""

__version__ = "0.1.0"

# Width primitive
from rolo.width import display_width

# Layout engine
from rolo.layout import (
    LayoutConfig,
    ListAlignment,
    ListConfig,
    ListStyle,
    format_columns,
    format_list,
    format_table,
    split_items,
)

# Errors
from rolo.errors import (
    ColumnTooNarrow,
    InvalidColumnCount,
    LayoutError,
    RoloError,
    WidthTooSmall,
)

# Collaborators
from rolo.terminal import get_terminal_width, validate_width

__all__ = [
    # Version
    "__version__",
    # Width
    "display_width",
    # Layout
    "LayoutConfig",
    "ListAlignment",
    "ListConfig",
    "ListStyle",
    "format_columns",
    "format_list",
    "format_table",
    "split_items",
    # Errors
    "ColumnTooNarrow",
    "InvalidColumnCount",
    "LayoutError",
    "RoloError",
    "WidthTooSmall",
    # Terminal
    "get_terminal_width",
    "validate_width",
]
