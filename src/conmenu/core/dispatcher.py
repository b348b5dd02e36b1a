"""Menu dispatcher for routing console selections to operations."""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from conmenu.core.items import MenuItem
from conmenu.core.reader import ValidatedReader
from conmenu.core.session import CapturedError, ErrorKind, FinalizeHook, Session
from conmenu.utils.constants import (
    CONTINUE_PROMPT,
    FAREWELL,
    SELECTION_PROMPT,
    DispatchMessage,
    Reserved,
)
from conmenu.utils.debug import debug_dispatch, log_error
from conmenu.utils.exceptions import (
    BadInvocationArguments,
    DispatchError,
    OperationInaccessible,
    OperationNotFound,
)


class Outcome(Enum):
    """How a one-shot menu finished."""

    VALUE = "value"
    VOID = "void"
    FAULTED = "faulted"
    RETURNED = "returned"


@dataclass(frozen=True)
class DispatchResult:
    """Result of one menu cycle.

    Attributes:
        outcome: VALUE or VOID after a clean run, FAULTED if the item could
            not be invoked or raised, RETURNED if the user chose R
        item: The dispatched item (None when RETURNED)
        value: Whatever the operation returned
        error: Failure details when FAULTED
    """

    outcome: Outcome
    item: Optional[MenuItem] = None
    value: Any = None
    error: Optional[CapturedError] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.VALUE, Outcome.VOID)


# Dispatcher-level failures: reported, never kept for ERR
_DISPATCH_FAILURES: dict[type[DispatchError], tuple[ErrorKind, str]] = {
    OperationNotFound: (ErrorKind.NOT_FOUND, DispatchMessage.NOT_FOUND),
    OperationInaccessible: (ErrorKind.INACCESSIBLE, DispatchMessage.INACCESSIBLE),
    BadInvocationArguments: (ErrorKind.BAD_ARGUMENT, DispatchMessage.BAD_ARGUMENTS),
}


class MenuDispatcher:
    """Renders menus, reads selections and runs the chosen operations.

    The dispatcher is the boundary between operations and the console:
    nothing an operation raises (short of SystemExit/KeyboardInterrupt)
    escapes run(). Faults raised by an operation are kept on the session
    and can be inspected with ERR until the next dispatch.

    Attributes:
        session: State shared with the readers (prompt, last error, finalizer)
        reader: Reader used for the selection and continue prompts

    Example:
        dispatcher = MenuDispatcher(session)
        dispatcher.display_menu(
            MenuItem("A", "Add contact", book.add),
            MenuItem.bound("L", "List contacts", book, "list_contacts"),
            finalizer=book,
        )
    """

    def __init__(self, session: Session, reader: Optional[ValidatedReader] = None):
        self.session = session
        self.reader = reader or ValidatedReader(session)

    @property
    def terminal(self):
        return self.session.terminal

    # Entry points

    def display_menu(self, *items: MenuItem, finalizer: Optional[FinalizeHook] = None) -> None:
        """Show the menu until the user returns (R) or exits (X).

        A finalizer, if given, is registered on the session and runs only
        when the user exits with X.
        """
        if finalizer is not None:
            self.session.set_finalizer(finalizer)
        self.run(items, continuous=True)

    def display_once(self, *items: MenuItem, prompt: Optional[str] = None) -> DispatchResult:
        """Show the menu until one item has been dispatched, then return."""
        return self.run(items, continuous=False, prompt=prompt)

    def display_once_and_return(self, *items: MenuItem, prompt: Optional[str] = None) -> Any:
        """Like display_once, returning the operation's value (None otherwise)."""
        return self.display_once(*items, prompt=prompt).value

    # State machine

    def run(
        self,
        items: Sequence[Optional[MenuItem]],
        continuous: bool = True,
        prompt: Optional[str] = None,
    ) -> DispatchResult:
        """Render, select and dispatch until R, X or (one-shot) one dispatch.

        Args:
            items: Menu items; None entries are skipped
            continuous: Keep showing the menu after each dispatch
            prompt: One-time message shown instead of the default prompt

        Returns:
            The last dispatch result, or a RETURNED result on R
        """
        items = [item for item in items if item is not None]
        while True:
            self._render(items, prompt)
            item = self._await_selection(items, prompt)
            if item is None:
                self.terminal.write()
                return DispatchResult(Outcome.RETURNED)

            result = self._dispatch(item)
            if not continuous:
                return result
            self.reader.read_line(f"{item.description} completed!\n{CONTINUE_PROMPT}")

    def _render(self, items: Sequence[MenuItem], prompt: Optional[str]) -> None:
        self.terminal.write()
        self.terminal.write(prompt if prompt else self.session.default_prompt)
        for item in items:
            self.terminal.write(str(item))
        if self.session.last_error is not None:
            self.terminal.write(f"{Reserved.ERROR}:\tView error details")
        self.terminal.write()
        self.terminal.write(f"{Reserved.RETURN}:\tReturn")
        self.terminal.write(f"{Reserved.EXIT}:\tExit")

    def _await_selection(
        self, items: Sequence[MenuItem], prompt: Optional[str]
    ) -> Optional[MenuItem]:
        """Read selections until one names an item. Returns None for R."""
        while True:
            option = self.reader.read_line(SELECTION_PROMPT).upper()
            debug_dispatch("Selection", option=option)

            if option == Reserved.RETURN:
                return None
            if option == Reserved.EXIT:
                self._exit()
            if option == Reserved.ERROR and self.session.last_error is not None:
                self._show_last_error()
                self._render(items, prompt)
                continue

            item = self._search(option, items)
            if item is not None:
                return item
            self.terminal.warn(DispatchMessage.NO_SUCH_MENU)

    @staticmethod
    def _search(option: str, items: Sequence[MenuItem]) -> Optional[MenuItem]:
        for item in items:
            if item.code == option:
                return item
        return None

    def _exit(self) -> None:
        debug_dispatch("Exit requested", finalizer=self.session.finalizer is not None)
        self.session.run_finalizer()
        self.terminal.write(f"\n{FAREWELL}\n")
        sys.exit(0)

    def _show_last_error(self) -> None:
        error = self.session.last_error
        self.terminal.write("\n*****Error details*****")
        if error.cause is not None:
            self.terminal.show_exception(error.cause)
        else:
            self.terminal.warn(error.summary())
        self.terminal.write()

    def _dispatch(self, item: MenuItem) -> DispatchResult:
        self.terminal.write(f"\n*****{item.description}*****")
        self.session.last_error = None
        debug_dispatch("Dispatching", code=item.code, target=item.target)

        try:
            operation = item.resolve()
        except DispatchError as e:
            kind, message = _DISPATCH_FAILURES.get(
                type(e), (ErrorKind.BAD_ARGUMENT, DispatchMessage.BAD_ARGUMENTS)
            )
            self.terminal.warn(message)
            debug_dispatch("Dispatch failed", code=item.code, kind=kind.value, error=str(e))
            return DispatchResult(
                Outcome.FAULTED, item=item, error=CapturedError(kind, str(e), e)
            )

        try:
            value = operation()
        except Exception as e:
            error = CapturedError(ErrorKind.RUNTIME_FAULT, str(e), e)
            self.session.last_error = error
            self.terminal.warn(DispatchMessage.FAULT)
            self.terminal.warn(error.summary())
            log_error("dispatch", f"{item.code} ({item.description}) raised", e, echo=False)
            return DispatchResult(Outcome.FAULTED, item=item, error=error)

        if value is None:
            return DispatchResult(Outcome.VOID, item=item)
        return DispatchResult(Outcome.VALUE, item=item, value=value)
