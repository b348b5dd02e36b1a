"""Shared pytest fixtures."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from conmenu.cli.ui.terminal import Terminal
from conmenu.core.session import Session


class ScriptedConsole:
    """A session whose input comes from a list of lines.

    Output written to the session is collected in out/err buffers.
    """

    def __init__(self, lines=()):
        self.stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        self._out = io.StringIO()
        self._err = io.StringIO()
        self.terminal = Terminal(
            stdin=self.stdin,
            out=Console(file=self._out, width=200, color_system=None),
            err=Console(file=self._err, width=200, color_system=None),
        )
        self.session = Session(terminal=self.terminal)

    @property
    def out(self) -> str:
        return self._out.getvalue()

    @property
    def err(self) -> str:
        return self._err.getvalue()

    def remaining_input(self) -> str:
        return self.stdin.read()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_conmenu_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/conmenu directory."""
    conmenu_dir = temp_dir / ".conmenu"
    conmenu_dir.mkdir()
    monkeypatch.setenv("CONMENU_DIR", str(conmenu_dir))
    for key in ("CONMENU_ATTEMPTS", "CONMENU_DEFAULT_PROMPT", "CONMENU_DEBUG", "CONMENU_ERROR_LOG"):
        monkeypatch.delenv(key, raising=False)
    return conmenu_dir


@pytest.fixture(autouse=True)
def isolated_logs(mock_conmenu_dir):
    """Keep debug and error logs out of the real config directory."""
    from conmenu.utils.debug import reload_config

    reload_config()
    yield mock_conmenu_dir
    reload_config()


@pytest.fixture
def scripted():
    """Factory for sessions fed from scripted input lines."""

    def make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return make
