"""Per-console session state shared by readers and the dispatcher."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Protocol, Union, runtime_checkable

from conmenu.cli.ui.terminal import Terminal
from conmenu.utils.config import normalize_attempts
from conmenu.utils.constants import DEFAULT_ATTEMPTS, DEFAULT_PROMPT

if TYPE_CHECKING:
    from conmenu.utils.config import Config


@runtime_checkable
class Finalizable(Protocol):
    """Objects that need clean-up when the user exits with X.

    Example:
        class AddressBook:
            def finalize(self) -> None:
                self.save()
    """

    def finalize(self) -> None:
        """Run clean-up tasks before the process terminates."""
        ...


FinalizeHook = Union[Callable[[], None], Finalizable]


class ErrorKind(Enum):
    """Why a menu item could not complete."""

    NOT_FOUND = "not_found"
    INACCESSIBLE = "inaccessible"
    BAD_ARGUMENT = "bad_argument"
    RUNTIME_FAULT = "runtime_fault"


@dataclass(frozen=True)
class CapturedError:
    """A failed invocation, kept for the ERR command.

    Attributes:
        kind: Dispatcher-level failure or fault raised by the operation
        message: Short description shown to the user
        cause: The underlying exception, if any
    """

    kind: ErrorKind
    message: str
    cause: Optional[BaseException] = None

    @property
    def category(self) -> str:
        """Exception class name, or the kind label when there is no cause."""
        if self.cause is not None:
            return type(self.cause).__name__
        return self.kind.value

    def summary(self) -> str:
        return f"{self.category}: {self.message}"


@dataclass
class Session:
    """Mutable state for one interactive console run.

    Owned by the caller and passed to every reader and dispatcher, so
    independent sessions (and tests) never share state.

    Attributes:
        terminal: Console input/output
        default_prompt: Sticky message shown above menu options
        finalizer: Hook run once when the user exits with X
        last_error: Most recent operation fault, shown by ERR
    """

    terminal: Terminal = field(default_factory=Terminal)
    default_prompt: str = DEFAULT_PROMPT
    finalizer: Optional[FinalizeHook] = None
    last_error: Optional[CapturedError] = None
    _attempts: int = field(default=DEFAULT_ATTEMPTS, repr=False)

    @classmethod
    def from_config(cls, config: "Config", terminal: Optional[Terminal] = None) -> "Session":
        """Build a session from persisted configuration."""
        session = cls(terminal=terminal or Terminal(), default_prompt=config.default_prompt)
        session.attempts = config.attempts
        return session

    @property
    def attempts(self) -> int:
        """Tries allowed for each typed read."""
        return self._attempts

    @attempts.setter
    def attempts(self, value: int) -> None:
        self._attempts = normalize_attempts(value)

    def set_finalizer(self, hook: Optional[FinalizeHook]) -> None:
        """Register the exit hook. Accepts a callable or a Finalizable."""
        self.finalizer = hook

    def run_finalizer(self) -> None:
        if self.finalizer is None:
            return
        if callable(self.finalizer):
            self.finalizer()
        else:
            self.finalizer.finalize()

    def reset(self) -> None:
        """Restore defaults, keeping the terminal."""
        self.default_prompt = DEFAULT_PROMPT
        self.finalizer = None
        self.last_error = None
        self._attempts = DEFAULT_ATTEMPTS
