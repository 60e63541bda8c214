"""
Console input with validation.

Every prompt in the menu reads through a Console so that bad integers,
out-of-range choices and malformed yes/no answers are retried in place and
never reach a query.
"""

import re
import sys
from typing import Optional, TextIO

import typer

from customer_tracker.core.logging import get_logger

logger = get_logger("customer_tracker.console")

WHITESPACE = " \t\n\r\f\v"

_INT_RE = re.compile(r"^[+-]?\d+$")

# SQLite INTEGER is a signed 64-bit value.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def trim_whitespace(text: str) -> str:
    """
    Strip leading and trailing whitespace.

    Empty or all-whitespace input cannot be trimmed; the failure is logged and
    the text is returned unchanged.
    """
    trimmed = text.strip(WHITESPACE)
    if not trimmed:
        logger.warning("Trimming of whitespace failed for %r", text)
        return text
    return trimmed


class Console:
    """
    Line-oriented operator console.

    Args:
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)

    Raises EOFError from any read once the input stream is exhausted.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def echo(self, message: str = "") -> None:
        typer.echo(message, file=self.stdout)

    def read_line(self) -> str:
        """Read one raw line without its terminator. May be empty."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("console input exhausted")
        return line.rstrip("\r\n")

    def _read_nonblank(self) -> str:
        while True:
            line = self.read_line()
            if line.strip(WHITESPACE):
                return line

    def read_text(self) -> str:
        """Read required free text: blank lines are skipped, the result is trimmed."""
        return trim_whitespace(self._read_nonblank())

    def read_int(self) -> int:
        """Read lines until one holds a valid integer that fits a database INTEGER."""
        while True:
            line = self._read_nonblank().strip(WHITESPACE)
            if _INT_RE.match(line):
                try:
                    value = int(line)
                except ValueError:
                    # past the interpreter's digit limit
                    value = None
                if value is not None and INT_MIN <= value <= INT_MAX:
                    return value
            self.echo("Error. Please enter a valid integer value.")

    def read_int_between(self, low: int, high: int) -> int:
        """Read an integer in the inclusive range [low, high]."""
        while True:
            value = self.read_int()
            if low <= value <= high:
                return value
            self.echo("Please enter a number which corresponds to one of the options.")

    def read_yes_no(self) -> bool:
        """Read a y/n answer (case-insensitive, first character decides)."""
        while True:
            answer = self._read_nonblank().strip(WHITESPACE)[0]
            if answer in ("y", "Y"):
                return True
            if answer in ("n", "N"):
                return False
            self.echo("Error. Please enter a valid answer. [y/n]")
