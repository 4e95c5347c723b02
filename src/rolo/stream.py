"""Reading pipeline input and writing formatted output."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional, TextIO

from rolo.errors import StreamError

logger = logging.getLogger(__name__)


class LineEnding(Enum):
    """Line ending appended after output."""
    UNIX = "\n"
    WINDOWS = "\r\n"
    MAC = "\r"


@dataclass(frozen=True)
class StreamConfig:
    """Input/output handling settings."""
    max_buffer_size: int = 10 * 1024 * 1024  # 10MB
    handle_sigpipe: bool = True
    line_ending: LineEnding = LineEnding.UNIX


def read_input(source: Optional[BinaryIO] = None, config: Optional[StreamConfig] = None) -> str:
    """
    Read input text, at most max_buffer_size bytes.

    Invalid UTF-8 is replaced with U+FFFD rather than rejected.
    """
    config = config or StreamConfig()
    source = source if source is not None else sys.stdin.buffer
    try:
        data = source.read(config.max_buffer_size + 1)
    except OSError as e:
        raise StreamError(f"Failed to read input: {e}") from e

    if len(data) > config.max_buffer_size:
        logger.warning("Input truncated at %d bytes", config.max_buffer_size)
        data = data[:config.max_buffer_size]

    return data.decode("utf-8", errors="replace")


def write_output(text: str, sink: Optional[TextIO] = None, config: Optional[StreamConfig] = None) -> None:
    """
    Write formatted text followed by a line ending.

    Empty text writes nothing. A closed pipe (``rolo ... | head``) is not an
    error when handle_sigpipe is set.
    """
    config = config or StreamConfig()
    sink = sink if sink is not None else sys.stdout
    if not text:
        return
    ending = config.line_ending.value
    try:
        sink.write(text.replace("\n", ending) + ending)
        sink.flush()
    except BrokenPipeError as e:
        if not config.handle_sigpipe:
            raise StreamError(f"Pipe broken: {e}") from e
        logger.debug("Output pipe closed early")
        if sink is sys.stdout:
            # Keep the interpreter's final flush from raising again
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
    except OSError as e:
        raise StreamError(f"Failed to write output: {e}") from e
