"""
Terminal colorization of diff text.

TerminalConsole decides whether escape sequences are emitted at all;
colorize() only decides which lines get which color.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, Protocol, TextIO


class AnsiColor(Enum):
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


_RESET = "\033[0m"

COLOR_MODES = ("auto", "always", "never")


class Console(Protocol):
    def colorize(self, color: AnsiColor, text: str) -> str:
        ...


class TerminalConsole:
    """
    Console that emits ANSI colors when the output stream supports them.

    color is one of "auto", "always" or "never". In "auto" mode colors are
    used only if the stream is a tty.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: str = "auto") -> None:
        if color not in COLOR_MODES:
            raise ValueError(
                f"Invalid color mode '{color}': expected one of {', '.join(COLOR_MODES)}"
            )
        self.stream = stream if stream is not None else sys.stdout
        if color == "auto":
            isatty = getattr(self.stream, "isatty", None)
            self.use_color = bool(isatty and isatty())
        else:
            self.use_color = color == "always"

    def colorize(self, color: AnsiColor, text: str) -> str:
        if not self.use_color:
            return text
        return f"{color.value}{text}{_RESET}"


def colorize(console: Console, diff_text: str) -> str:
    """
    Return diff_text with added lines in green and removed lines in red.

    Every line, including the first, is emitted after a newline, so the
    result starts with "\\n". A trailing newline in the input shows up as
    a trailing empty line.
    """

    parts = []
    for line in diff_text.split("\n"):
        parts.append("\n")
        if line.startswith("+"):
            parts.append(console.colorize(AnsiColor.GREEN, line))
        elif line.startswith("-"):
            parts.append(console.colorize(AnsiColor.RED, line))
        else:
            parts.append(line)
    return "".join(parts)
