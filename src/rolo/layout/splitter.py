"""Split raw input text into layout items."""

from __future__ import annotations

from typing import Iterator, Optional


def _lines(text: str) -> Iterator[str]:
    """Lines split on LF only, with a trailing CR removed (form feeds stay inside a line)."""
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def split_items(text: str, delimiter: Optional[str] = None) -> list[str]:
    """
    Turn raw text into an ordered list of trimmed, non-empty items.

    Without a delimiter every non-blank line is an item. With one, each line
    is split by it and every non-blank field becomes an item; fields from
    all lines end up in one flat list.
    """
    items: list[str] = []
    for line in _lines(text):
        fields = line.split(delimiter) if delimiter else [line]
        for field in fields:
            field = field.strip()
            if field:
                items.append(field)
    return items


def split_rows(text: str, delimiter: str) -> list[list[str]]:
    """
    Split text into a ragged grid of trimmed cells, one row per non-blank line.

    Unlike split_items this keeps row structure, and empty cells inside a row
    are kept so columns stay in place.
    """
    rows: list[list[str]] = []
    for line in _lines(text):
        if not line.strip():
            continue
        cells = line.split(delimiter) if delimiter else [line]
        rows.append([cell.strip() for cell in cells])
    return rows


def split_lines(text: str) -> list[str]:
    """Non-blank lines of text, trimmed."""
    return split_items(text)
