"""Layout configuration values.

Configuration is always passed explicitly into each layout call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_WIDTH = 80
MIN_COLUMN_WIDTH = 3
MIN_LIST_WIDTH = 10


class ListAlignment(str, Enum):
    """Alignment of list content within the available width."""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class ListStyle(str, Enum):
    """Marker placed before each list item."""
    NUMBERS = "numbers"
    BULLETS = "bullets"
    STARS = "stars"
    DOTS = "dots"
    DASH = "dash"


# Glyphs for the non-numbered styles
LIST_MARKERS = {
    ListStyle.BULLETS: "•",
    ListStyle.STARS: "*",
    ListStyle.DOTS: "·",
    ListStyle.DASH: "-",
}


@dataclass(frozen=True)
class LayoutConfig:
    """
    Column layout configuration.

    Attributes:
        width: Total output width in terminal columns
        gap: Spaces between adjacent columns
        padding: Validated but not read by column layout
    """
    width: int = DEFAULT_WIDTH
    gap: int = 2
    padding: int = 1

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.gap < 0:
            raise ValueError(f"gap must be non-negative, got {self.gap}")
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")


@dataclass(frozen=True)
class ListConfig:
    """List layout configuration."""
    width: int = DEFAULT_WIDTH
    line_numbers: bool = False
    list_style: Optional[ListStyle] = None
    alignment: ListAlignment = ListAlignment.LEFT

    def __post_init__(self) -> None:
        # Accept plain strings ("bullets", "right") as the CLI produces them
        if self.list_style is not None and not isinstance(self.list_style, ListStyle):
            object.__setattr__(self, "list_style", ListStyle(self.list_style))
        if not isinstance(self.alignment, ListAlignment):
            object.__setattr__(self, "alignment", ListAlignment(self.alignment))
