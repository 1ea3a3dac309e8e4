"""Operator confirmation helpers."""

import sys
from typing import Callable, TextIO

from rich.console import Console

AFFIRMATIVE = {"y", "yes"}


def yes_no(stream: TextIO = None) -> bool:
    """
    Read one line from stream and return True only for an affirmative answer.

    Empty input, end of file and anything other than "y" or "yes" count as no.
    """
    stream = stream or sys.stdin
    line = stream.readline()
    return line.strip().lower() in AFFIRMATIVE


def console_confirm(console: Console, stream: TextIO = None) -> Callable[[str], bool]:
    """Build a confirmation oracle that prints the prompt and reads the answer."""

    def confirm(prompt: str) -> bool:
        console.print(prompt, end="", markup=False)
        return yes_no(stream)

    return confirm
