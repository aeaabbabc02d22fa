"""Console output helpers for one-shot CLI commands."""

import sys

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


def _mark(symbol: str, color: str) -> str:
    """Color a status symbol when stdout is a terminal."""
    if getattr(sys.stdout, "isatty", None) and sys.stdout.isatty():
        return f"{color}{symbol}{RESET}"
    return symbol


def success(message: str) -> None:
    print(f"{_mark('✓', GREEN)} {message}")


def info(message: str) -> None:
    print(f"{_mark('•', YELLOW)} {message}")


def error(message: str) -> None:
    print(f"{_mark('✗', RED)} {message}", file=sys.stderr)
