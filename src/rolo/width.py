"""Display width utilities - measuring, truncating and padding terminal text.

Every measurement here is in terminal columns, not characters or bytes:
ANSI escape sequences are zero-width and wide glyphs (CJK, fullwidth forms,
emoji) take two columns.
"""

from __future__ import annotations

from typing import Iterator

import wcwidth

__all__ = [
    "ELLIPSIS",
    "RESET",
    "display_width",
    "strip_ansi",
    "truncate_to_width",
    "truncate_tail_to_width",
    "pad_to_width",
]

ESC = '\x1b'
RESET = '\x1b[0m'
ELLIPSIS = '...'


def _is_final_byte(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _tokens(text: str) -> Iterator[tuple[str, int]]:
    """
    Split text into (chunk, width) pairs.

    An escape sequence ``ESC [ ... <letter>`` is a single zero-width chunk.
    An unterminated sequence runs to the end of the input.
    """
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == ESC and i + 1 < n and text[i + 1] == '[':
            j = i + 2
            while j < n and not _is_final_byte(text[j]):
                j += 1
            if j < n:
                j += 1  # Include terminator
            yield text[i:j], 0
            i = j
        else:
            yield ch, _char_width(ch)
            i += 1


def _char_width(ch: str) -> int:
    w = wcwidth.wcwidth(ch)
    # Control characters report -1
    return w if w > 0 else 0


def display_width(text: str) -> int:
    """Get rendered column width of text (escape codes excluded)."""
    return sum(width for _, width in _tokens(text))


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences from text."""
    return ''.join(chunk for chunk, width in _tokens(text)
                   if not (width == 0 and chunk.startswith(ESC + '[')))


def _fit(tokens: list[tuple[str, int]], max_width: int) -> tuple[list[str], bool]:
    """Take tokens in order while they fit; report whether anything was cut."""
    kept: list[str] = []
    used = 0
    for index, (chunk, width) in enumerate(tokens):
        if used + width > max_width:
            # Still keep trailing escape sequences so styling is not lost
            kept.extend(c for c, _ in tokens[index:] if c.startswith(ESC + '['))
            return kept, True
        kept.append(chunk)
        used += width
    return kept, False


def truncate_to_width(text: str, max_width: int) -> str:
    """
    Truncate text to at most max_width visible columns, keeping the head.

    Escape sequences are preserved. A wide glyph that would straddle the
    limit is dropped rather than split. When a styled string is cut, a reset
    sequence is appended to prevent color bleed.
    """
    if max_width <= 0:
        return ""
    tokens = list(_tokens(text))
    kept, was_truncated = _fit(tokens, max_width)
    output = ''.join(kept)
    if was_truncated and ESC in output and not output.endswith(RESET):
        output += RESET
    return output


def truncate_tail_to_width(text: str, max_width: int) -> str:
    """Truncate text to at most max_width visible columns, keeping the tail."""
    if max_width <= 0:
        return ""
    tokens = list(_tokens(text))
    kept, was_truncated = _fit(tokens[::-1], max_width)
    output = ''.join(kept[::-1])
    if was_truncated and ESC in output and not output.endswith(RESET):
        output += RESET
    return output


def pad_to_width(text: str, width: int, align: str = "left") -> str:
    """
    Pad text with spaces to reach width visible columns.

    Text already at or beyond width is returned unchanged.
    """
    current = display_width(text)
    if current >= width:
        return text
    padding = width - current
    if align == "right":
        return ' ' * padding + text
    if align == "center":
        left = padding // 2
        return ' ' * left + text + ' ' * (padding - left)
    return text + ' ' * padding
