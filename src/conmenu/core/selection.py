"""Choosing from enumerations and candidate collections.

All choices follow a present, select, confirm cycle. The numbered list is
shown, an option number is read with ValidatedReader.read_int, the choice
is echoed and the user confirms it. The cycle repeats until confirmed;
only the inner number and yes/no reads are bounded by the attempt budget.
"""

from enum import Enum
from typing import Iterable, Optional, TypeVar

from conmenu.core.reader import ValidatedReader
from conmenu.utils.constants import (
    ANOTHER_ITEM_PROMPT,
    CONFIRM_PROMPT,
    OPTION_NUMBER_PROMPT,
)
from conmenu.utils.debug import debug_reader
from conmenu.utils.exceptions import InvalidArgumentError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def _indent(obj: object) -> str:
    """Render obj so continuation lines stay under the option column."""
    return str(obj).replace("\n", "\n\t")


class SelectionReader:
    """Option pickers built on a ValidatedReader.

    Example:
        chooser = SelectionReader(reader)
        colour = chooser.choose_enum("Pick a colour", Colour)
        contact = chooser.choose_one("Which contact?", book.contacts)
    """

    def __init__(self, reader: ValidatedReader):
        self.reader = reader

    @property
    def terminal(self):
        return self.reader.terminal

    def choose_enum(self, prompt: Optional[str], enum_cls: type[E]) -> E:
        """Pick one member of an Enum class.

        Raises:
            InvalidArgumentError: enum_cls is not an Enum or has no members
        """
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise InvalidArgumentError("Enum class required!")
        members = list(enum_cls)
        if not members:
            raise InvalidArgumentError(
                f"The enum, {enum_cls.__name__}, contains no values"
            )

        while True:
            self.terminal.write(prompt or "Please select an option")
            for number, member in enumerate(members, start=1):
                self.terminal.write(f"{number}\t{member.name}")
            index = self.reader.read_int(OPTION_NUMBER_PROMPT, 1, len(members))
            selection = members[index - 1]
            self.terminal.write(f'You have selected "{selection.name}"')
            if self.reader.read_bool(CONFIRM_PROMPT):
                return selection

    def choose_one(self, prompt: Optional[str], candidates: Iterable[T]) -> T:
        """Pick one candidate. A single candidate is returned without asking.

        Raises:
            InvalidArgumentError: candidates is None or empty
        """
        options = list(candidates) if candidates is not None else []
        if not options:
            raise InvalidArgumentError("Collection is null or empty!")
        if len(options) == 1:
            return options[0]

        while True:
            self.terminal.write(prompt or "Please select an object")
            self.terminal.write()
            for number, option in enumerate(options, start=1):
                self.terminal.write(f"{number}:\t{_indent(option)}\n")
            index = self.reader.read_int(OPTION_NUMBER_PROMPT, 1, len(options))
            selection = options[index - 1]
            self.terminal.write(f"You have selected...\n{selection}")
            if self.reader.read_bool(CONFIRM_PROMPT):
                return selection

    def choose_many(self, prompt: Optional[str], candidates: Iterable[T]) -> list[T]:
        """Pick several candidates, one at a time, from a shrinking pool.

        Stops when the pool is empty or the user declines to pick another.
        The result keeps selection order and never repeats a candidate.

        Raises:
            InvalidArgumentError: candidates is None or empty
        """
        options = list(candidates) if candidates is not None else []
        if not options:
            raise InvalidArgumentError("Collection is null or empty!")
        if len(options) == 1:
            return options

        pool: list[T] = []
        for option in options:
            if option not in pool:
                pool.append(option)

        selection: list[T] = []
        while True:
            chosen = self.choose_one(prompt, pool)
            pool.remove(chosen)
            selection.append(chosen)
            debug_reader("Item selected", picked=len(selection), remaining=len(pool))

            self.terminal.write("\nCurrently selected items: ")
            for item in selection:
                self.terminal.write(str(item))
            self.terminal.write()

            if not pool or not self.reader.read_bool(ANOTHER_ITEM_PROMPT):
                return selection
