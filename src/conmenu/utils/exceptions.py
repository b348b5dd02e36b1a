"""Custom exceptions for conmenu.

This module defines a hierarchy of exceptions for different error types:
- ConmenuError: Base exception for all conmenu errors
- ValidationExhausted: Typed console read ran out of attempts
- InvalidArgumentError: Reader called with unusable arguments
- BadPatternError: Regular expression passed to a reader is malformed
- InputClosedError: The console input stream has no more lines
- DispatchError: A menu item's operation could not be invoked
- ConfigurationError: Configuration related errors
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from conmenu.core.reader import ValidationKind


class ConmenuError(Exception):
    """Base exception for all conmenu errors.

    All conmenu-specific exceptions inherit from this class, allowing
    callers to catch all conmenu errors with a single except clause.
    """

    pass


class ValidationExhausted(ConmenuError):
    """The user failed to enter valid input within the attempt budget.

    Attributes:
        kind: The validation that kept failing (integer, email, ...)
    """

    def __init__(self, kind: "ValidationKind", message: Optional[str] = None):
        super().__init__(message or kind.failure_message)
        self.kind = kind


class InvalidArgumentError(ConmenuError, ValueError):
    """A reader was called with arguments it cannot work with.

    Raised before any prompt is shown, such as:
    - Digit length boundaries below one
    - Empty candidate collections
    - Enum classes without members
    """

    pass


class BadPatternError(InvalidArgumentError):
    """The regular expression given to a pattern read does not compile."""

    pass


class InputClosedError(ConmenuError, EOFError):
    """The console input stream was closed while a line was expected."""

    pass


class DispatchError(ConmenuError):
    """Base exception for operations that could not be invoked.

    These indicate wiring mistakes in the menu definition. The dispatcher
    reports them and moves on; they are never kept for later inspection.
    """

    pass


class OperationNotFound(DispatchError):
    """The receiver has no callable attribute with the requested name."""

    pass


class OperationInaccessible(DispatchError):
    """The requested operation is private to its receiver."""

    pass


class BadInvocationArguments(DispatchError):
    """The operation cannot be called without arguments."""

    pass


class ConfigurationError(ConmenuError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Non-integer attempt counts
    - Unknown setting names
    """

    pass
