"""Console UI helpers (color, status lines, and screen clearing).

Small, dependency-free printers used by every command:
 - ANSI color codes gated by a conservative capability check
 - ``info``/``ok``/``warn``/``err`` with consistent prefixes
 - ``step`` lines that announce each launch stage
 - A best-effort terminal clear before handing the TTY to ``claude``

Colors are only emitted when stdout is a TTY and ``NO_COLOR`` is unset.
"""

from __future__ import annotations
import os
import sys

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"
GRAY = "\033[90m"


def supports_color() -> bool:
    """Return True when ANSI colors are likely supported.

    Honors ``NO_COLOR`` and requires ``sys.stdout`` to be a TTY. Detection
    errors result in ``False``.
    """
    try:
        if os.environ.get("NO_COLOR"):
            return False
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    except Exception:
        return False


def c(s: str, color: str) -> str:
    """Wrap ``s`` in ``color`` when the terminal supports it."""
    return f"{color}{s}{RESET}" if supports_color() else s


def clear_screen() -> None:
    """Clear the terminal; falls back to blank lines when that fails."""
    try:
        rc = os.system("cls" if os.name == "nt" else "clear")
    except Exception:
        rc = 1
    if rc != 0:
        print("\n" * 50)


def title(msg: str) -> None:
    print(c(msg, BOLD + BLUE))
    print(c("=" * 32, GRAY))


def step(msg: str) -> None:
    """Announce a launch stage."""
    print(c("→ ", CYAN) + msg)


def info(msg: str) -> None:
    print(c("ℹ ", BLUE) + msg)


def ok(msg: str) -> None:
    print(c("✓ ", GREEN) + msg)


def warn(msg: str) -> None:
    print(c("! ", YELLOW) + msg)


def err(msg: str) -> None:
    """Print an error to stderr prefixed with "✗"."""
    print(c("✗ ", RED) + msg, file=sys.stderr)


def hint(msg: str) -> None:
    print(c(msg, GRAY))


__all__ = [
    "supports_color",
    "c",
    "clear_screen",
    "title",
    "step",
    "info",
    "ok",
    "warn",
    "err",
    "hint",
    "RESET",
    "BOLD",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "CYAN",
    "GRAY",
]
