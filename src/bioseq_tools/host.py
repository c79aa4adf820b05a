"""Editor host collaborators: selection, search and display."""

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class SelectionSource(ABC):
    @abstractmethod
    def get_selection(self) -> str:
        """Return the highlighted text, lines joined with '\\n'."""
        raise NotImplementedError


class SearchTarget(ABC):
    @abstractmethod
    def search(self, pattern: str) -> None:
        """Start an incremental search for an escaped pattern."""
        raise NotImplementedError


class DisplaySurface(ABC):
    @abstractmethod
    def show(self, lines: list[str]) -> None:
        """Show lines in a transient, dismissable view."""
        raise NotImplementedError

    def error(self, message: str) -> None:
        """Report an error to the user."""
        self.show(message.splitlines())


def escape_search_pattern(text: str) -> str:
    """
    Turn literal text into a very-nomagic (\\V) search pattern.

    In \\V mode only the backslash and the search delimiter are special,
    so those are escaped. Newlines are written as \\n.

    Args:
        text: Literal text to find

    Returns:
        Pattern matching exactly `text`
    """
    escaped = text.replace("\\", "\\\\").replace("/", "\\/").replace("\n", "\\n")
    return "\\V" + escaped


def popup_size(lines: list[str]) -> tuple[int, int]:
    """Width and height of a view that fits `lines`."""
    width = max((len(line) for line in lines), default=0)
    return max(width, 1), max(len(lines), 1)


class TerminalHost(SelectionSource, SearchTarget, DisplaySurface):
    """Host backed by plain text streams, used by the command line."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def get_selection(self) -> str:
        return self.stdin.read().rstrip("\n")

    def search(self, pattern: str) -> None:
        print(pattern, file=self.stdout)

    def show(self, lines: list[str]) -> None:
        """Print lines inside a rounded box sized to fit them."""
        width, height = popup_size(lines)
        body = list(lines) or [""] * height
        print("\u256d" + "\u2500" * width + "\u256e", file=self.stdout)
        for line in body:
            print("\u2502" + line.ljust(width) + "\u2502", file=self.stdout)
        print("\u2570" + "\u2500" * width + "\u256f", file=self.stdout)

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=self.stderr)


def read_sequence(value: str, stream: TextIO | None = None) -> str:
    """Return a sequence argument, reading it from `stream` (stdin) when it is '-'."""
    if value == "-":
        return TerminalHost(stdin=stream).get_selection()
    return value
