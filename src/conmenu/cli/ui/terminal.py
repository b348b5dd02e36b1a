"""Console I/O for line-oriented menus."""

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.traceback import Traceback

from conmenu.utils.exceptions import InputClosedError

console = Console()
err_console = Console(stderr=True)


class Terminal:
    """One console session: rich output consoles plus a line source.

    Menus and readers never touch sys.stdin or print() directly, so a
    session can be driven from a script in tests.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        out: Optional[Console] = None,
        err: Optional[Console] = None,
    ):
        self._stdin = stdin
        self.out = out or console
        self.err = err or err_console

    @property
    def stdin(self) -> TextIO:
        # Resolved late so pytest's capture and CliRunner see the live stream
        return self._stdin if self._stdin is not None else sys.stdin

    def write(self, text: str = "", end: str = "\n") -> None:
        """Write menu text verbatim: tabs, emoji codes and brackets untouched."""
        self.out.file.write(text + end)

    def warn(self, text: str) -> None:
        """Print a diagnostic to the error console."""
        self.err.print(text, markup=False, highlight=False, soft_wrap=True, style="red")

    def show_exception(self, exc: BaseException) -> None:
        """Render an exception with its full traceback."""
        self.err.print(
            Traceback.from_exception(type(exc), exc, exc.__traceback__)
        )

    def read_line(self, prompt: str) -> str:
        """Print prompt without newline and read one raw line.

        Raises:
            InputClosedError: if the input stream is exhausted
        """
        self.write(prompt, end="")
        self.out.file.flush()
        line = self.stdin.readline()
        if not line:
            raise InputClosedError("Console input closed")
        return line.rstrip("\r\n")
