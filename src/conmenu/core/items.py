"""Menu items and the operations they launch."""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Union

from conmenu.utils.exceptions import (
    BadInvocationArguments,
    OperationInaccessible,
    OperationNotFound,
)


def _require_no_arguments(func: Callable[..., Any], label: str) -> None:
    """Raise BadInvocationArguments if func cannot be called with no arguments."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature; let the call decide
        return
    try:
        signature.bind()
    except TypeError as e:
        raise BadInvocationArguments(f"{label} requires arguments: {e}") from e


@dataclass(frozen=True)
class OperationRef:
    """A method on a receiver, looked up by name when the item is chosen.

    Lookup happens at invocation time, so items built before a method is
    renamed or rebound still resolve to whatever the receiver holds then.
    Failures surface as DispatchError subclasses, one invocation at a time.

    Example:
        ref = OperationRef(book, "list_contacts")
        ref.resolve()()
    """

    receiver: Any
    name: str

    def resolve(self) -> Callable[[], Any]:
        """Look up the operation and check it takes no arguments.

        Raises:
            OperationInaccessible: name is private (leading underscore)
            OperationNotFound: no callable attribute with that name
            BadInvocationArguments: the method requires arguments
        """
        if self.name.startswith("_"):
            raise OperationInaccessible(f"{self.name} is not a public operation")
        try:
            func = getattr(self.receiver, self.name)
        except AttributeError as e:
            raise OperationNotFound(
                f"{type(self.receiver).__name__} has no operation {self.name}"
            ) from e
        if not callable(func):
            raise OperationNotFound(f"{self.name} is not callable")
        _require_no_arguments(func, self.name)
        return func

    def __str__(self) -> str:
        return f"{type(self.receiver).__name__}.{self.name}"


Target = Union[Callable[[], Any], OperationRef]


def resolve_target(target: Target) -> Callable[[], Any]:
    """Turn an item target into a zero-argument callable."""
    if isinstance(target, OperationRef):
        return target.resolve()
    if not callable(target):
        raise OperationNotFound(f"{target!r} is not callable")
    _require_no_arguments(target, getattr(target, "__name__", repr(target)))
    return target


@dataclass(frozen=True, eq=False)
class MenuItem:
    """One menu line: a short code, its description and the operation to run.

    Codes are stripped and upper-cased so selection is case-insensitive.
    R, X and ERR are used by the dispatcher and shadow items with those
    codes; they are not rejected here.

    Attributes:
        code: Short identifier the user types (e.g. "A")
        description: Text shown next to the code
        target: Zero-argument callable or late-bound OperationRef
    """

    code: str
    description: str
    target: Target

    def __post_init__(self):
        code = (self.code or "").strip().upper()
        if not code:
            raise ValueError("Menu item code cannot be empty")
        object.__setattr__(self, "code", code)

    @classmethod
    def bound(cls, code: str, description: str, receiver: Any, method_name: str) -> "MenuItem":
        """Create an item whose operation is looked up on receiver at run time."""
        return cls(code, description, OperationRef(receiver, method_name))

    def resolve(self) -> Callable[[], Any]:
        return resolve_target(self.target)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MenuItem):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return f"{self.code}:\t{self.description}"
