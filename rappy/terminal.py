"""ANSI escape sequences for moving the cursor and clearing the screen."""

from __future__ import annotations

import sys
from typing import TextIO


def _write(text: str, flush: bool, stream: TextIO | None) -> None:
    target = stream if stream is not None else sys.stdout
    target.write(text)
    if flush:
        target.flush()


def clear(flush: bool = True, stream: TextIO | None = None) -> None:
    """Clear the screen and move the cursor to the top left."""
    _write("\033[2J", False, stream)
    gotoxy(0, 0, flush, stream)


def delete_line(flush: bool = True, stream: TextIO | None = None) -> None:
    """Erase the current line and return to its start."""
    _write("\033[2K\r", flush, stream)


def gotoxy(x: int, y: int, flush: bool = True, stream: TextIO | None = None) -> None:
    """Move the cursor to zero-based column ``x`` and row ``y``."""
    _write(f"\033[{y + 1};{x + 1}H", flush, stream)


def up(n: int, flush: bool = True, stream: TextIO | None = None) -> None:
    _write(f"\033[{n}A", flush, stream)


def down(n: int, flush: bool = True, stream: TextIO | None = None) -> None:
    _write(f"\033[{n}B", flush, stream)


def left(n: int, flush: bool = True, stream: TextIO | None = None) -> None:
    _write(f"\033[{n}D", flush, stream)


def right(n: int, flush: bool = True, stream: TextIO | None = None) -> None:
    _write(f"\033[{n}C", flush, stream)