"""Terminal width detection and width validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from rolo.errors import InvalidWidth

logger = logging.getLogger(__name__)

FALLBACK_WIDTH = 80
FALLBACK_HEIGHT = 24
MIN_WIDTH = 10
MAX_WIDTH = 200

# Checked in order before asking the OS
WIDTH_ENV_VARS = ("COLUMNS", "TERM_WIDTH")


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal queries used to pick default layout widths."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(FALLBACK_HEIGHT, FALLBACK_WIDTH)


def _width_from_env(name: str) -> int | None:
    value = os.environ.get(name)
    if value is None:
        return None
    try:
        width = int(value)
    except ValueError:
        logger.debug("Ignoring %s=%r: not a number", name, value)
        return None
    if width < MIN_WIDTH:
        logger.debug("Ignoring %s=%d: below minimum of %d", name, width, MIN_WIDTH)
        return None
    return width


def get_terminal_width() -> int:
    """
    Detect the terminal width in columns.

    Tries COLUMNS, then TERM_WIDTH, then the OS terminal size, and falls
    back to 80 when nothing usable is found.
    """
    for name in WIDTH_ENV_VARS:
        width = _width_from_env(name)
        if width is not None:
            return width

    cols = Terminal.size().cols
    if cols >= MIN_WIDTH:
        return cols
    return FALLBACK_WIDTH


def validate_width(value: str) -> int:
    """Parse a user-supplied width, accepting integers from 10 to 200."""
    try:
        width = int(value.strip())
    except ValueError:
        raise InvalidWidth(f"Width must be a number: {value!r}") from None
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise InvalidWidth(f"Width {width} out of range ({MIN_WIDTH}-{MAX_WIDTH})")
    return width
