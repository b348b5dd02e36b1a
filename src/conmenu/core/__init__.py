"""Core modules for conmenu.

This package provides:
- Session: Per-console state (attempts, prompt, last error, finalizer)
- ValidatedReader: Typed console reads with bounded retries
- SelectionReader: Enum, single and multi-object choices
- MenuItem: Code, description and operation of one menu line
- MenuDispatcher: The render/select/dispatch loop
"""

from conmenu.core.dispatcher import DispatchResult, MenuDispatcher, Outcome
from conmenu.core.items import MenuItem, OperationRef
from conmenu.core.reader import ValidatedReader, ValidationKind
from conmenu.core.selection import SelectionReader
from conmenu.core.session import CapturedError, ErrorKind, Finalizable, Session

__all__ = [
    "CapturedError",
    "DispatchResult",
    "ErrorKind",
    "Finalizable",
    "MenuDispatcher",
    "MenuItem",
    "OperationRef",
    "Outcome",
    "SelectionReader",
    "Session",
    "ValidatedReader",
    "ValidationKind",
]
