"""UI components for the line-oriented console."""

from conmenu.cli.ui.terminal import Terminal, console, err_console

__all__ = [
    "Terminal",
    "console",
    "err_console",
]
