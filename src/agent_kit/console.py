"""Terminal output helpers (respects NO_COLOR and non-TTY)."""

from __future__ import annotations

import os
import sys


def color_enabled() -> bool:
    return (
        sys.stdout.isatty()
        and os.environ.get("NO_COLOR") is None
        and os.environ.get("TERM") != "dumb"
    )


_USE_COLOR = color_enabled()


def _ansi(code: str) -> str:
    return f"\033[{code}m" if _USE_COLOR else ""


class C:
    """ANSI escape sequences, empty strings when color is disabled."""
    RESET = _ansi("0")
    DIM = _ansi("2")
    GREEN = _ansi("32")
    YELLOW = _ansi("33")
    BLUE = _ansi("34")
    RED = _ansi("31")


def log(msg: str, color: str = "") -> None:
    """Print one line, wrapped in the given color code."""
    if color:
        print(f"{color}{msg}{C.RESET}")
    else:
        print(msg)


def error(msg: str) -> None:
    print(f"{C.RED}ERROR: {msg}{C.RESET}", file=sys.stderr)
