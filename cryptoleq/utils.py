"""Small helpers: number parsing, character display and file access."""

from __future__ import annotations

import os
import time
from pathlib import Path

from .arith import parse_decimal
from .cell import make_cell

MAX_FILE_SIZE = 100_000_000


def make_unumber(value: str, default: int) -> int:
    """Parse a decimal number; empty gives ``default``, ``"time"`` the clock."""
    if not value:
        return default
    if value == "time":
        return int(time.time())
    return parse_decimal(value)


def print_char(c: str) -> str:
    """Show a printable character as itself, any other as ``\\xNN``."""
    if " " <= c <= "~":
        return c
    code = ord(c)
    if 128 <= code < 256:
        code = (code - 256) & 0xFFFFFFFF
    return "\\x" + format(code, "02x")


def str2ts(s: str, n: int):
    """Build a cell from ``"t"`` or ``"t.s"`` written in decimal."""
    t, sep, rest = s.partition(".")
    if not sep:
        return make_cell(n, parse_decimal(s), 0)
    return make_cell(n, parse_decimal(t), parse_decimal(rest))


def file2str(path: str | os.PathLike) -> str:
    """Return a file's bytes as text (one character per byte), or ``""`` if unreadable."""
    try:
        with open(path, "rb") as fh:
            size = os.fstat(fh.fileno()).st_size
            if size > MAX_FILE_SIZE:
                raise ValueError(f"too big file {path}")
            return fh.read().decode("latin-1")
    except OSError:
        return ""


def isfile(path: str | os.PathLike) -> bool:
    """Tell whether ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def cwd() -> str:
    """Return the current working directory."""
    return str(Path.cwd())