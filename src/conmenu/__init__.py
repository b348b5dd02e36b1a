"""conmenu - Text-driven menus and validated input for console applications."""

from importlib.metadata import version

__version__ = version("conmenu")

from conmenu.core import (
    DispatchResult,
    MenuDispatcher,
    MenuItem,
    OperationRef,
    Outcome,
    SelectionReader,
    Session,
    ValidatedReader,
)

__all__ = [
    "DispatchResult",
    "MenuDispatcher",
    "MenuItem",
    "OperationRef",
    "Outcome",
    "SelectionReader",
    "Session",
    "ValidatedReader",
]
