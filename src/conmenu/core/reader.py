"""Validated console input with a bounded number of attempts.

Every typed read follows the same protocol: prompt, read one line, try to
parse and validate it, and on failure print a diagnostic and ask again. The
"please try again" hint is left off the last diagnostic. Once the session's
attempt budget is spent, ValidationExhausted is raised to the caller.
"""

import math
import re
from enum import Enum
from typing import Callable, Optional, TypeVar

from conmenu.core.session import Session
from conmenu.utils.constants import FALLBACK_PROMPT
from conmenu.utils.debug import debug_reader
from conmenu.utils.exceptions import (
    BadPatternError,
    InvalidArgumentError,
    ValidationExhausted,
)

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,6}$")
NAME_PATTERN = re.compile(r"[A-Za-z]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

TRUE_WORDS = {"TRUE", "T", "Y", "YES"}
FALSE_WORDS = {"FALSE", "F", "N", "NO"}

TRY_AGAIN = " Please try again!"


class ValidationKind(Enum):
    """What a typed read was validating, with its exhaustion message."""

    TEXT_LENGTH = ("text_length", "Invalid text length!")
    INTEGER = ("integer", "Invalid integer format!")
    NUMBER = ("number", "Invalid number format!")
    BOOLEAN = ("boolean", "Invalid boolean format!")
    EMAIL = ("email", "Invalid email format!")
    NAME = ("name", "Invalid name format!")
    DIGITS = ("digits", "Invalid number format!")
    PATTERN = ("pattern", "Invalid string format!")

    def __init__(self, label: str, failure_message: str):
        self.label = label
        self.failure_message = failure_message


class Invalid(Exception):
    """Raised by a parser when one line fails validation.

    Attributes:
        message: Diagnostic shown to the user
        hint: Extra guidance, shown only if another attempt follows
    """

    def __init__(self, message: str, hint: str = TRY_AGAIN):
        super().__init__(message)
        self.message = message
        self.hint = hint


def _ordered(lo, hi):
    return (hi, lo) if lo > hi else (lo, hi)


def _range_hint(noun: str, lo, hi) -> str:
    if lo is not None and hi is not None:
        return f" Please enter {noun} between {lo} and {hi}."
    if lo is not None:
        return f" Please enter {noun} of at least {lo}."
    return f" Please enter {noun} of at most {hi}."


class ValidatedReader:
    """Typed line readers bound to one session.

    Example:
        reader = ValidatedReader(session)
        age = reader.read_int("Enter your age", 0, 130)
    """

    def __init__(self, session: Session):
        self.session = session

    @property
    def terminal(self):
        return self.session.terminal

    def read_line(self, prompt: Optional[str] = None) -> str:
        """Show prompt on a new line and return the stripped reply.

        ": " is appended when the prompt ends with a letter or digit,
        otherwise a single space.
        """
        prompt = (prompt or "").strip() or FALLBACK_PROMPT
        suffix = ": " if prompt[-1].isalnum() else " "
        return self.terminal.read_line("\n" + prompt + suffix).strip()

    def _read_valid(
        self,
        prompt: Optional[str],
        kind: ValidationKind,
        parse: Callable[[str], T],
    ) -> T:
        """Run the bounded-retry loop around a parser.

        parse raises Invalid for a rejected line and returns the value
        otherwise.
        """
        remaining = self.session.attempts
        while remaining > 0:
            remaining -= 1
            text = self.read_line(prompt)
            try:
                return parse(text)
            except Invalid as e:
                self.terminal.warn(e.message + (e.hint if remaining > 0 else ""))
        debug_reader("Attempts exhausted", kind=kind.label, attempts=self.session.attempts)
        raise ValidationExhausted(kind)

    # Free text

    def read_fixed(self, prompt: Optional[str], length: int) -> str:
        """Read text of exactly length characters."""

        def parse(text: str) -> str:
            if len(text) != length:
                raise Invalid(
                    "Invalid text length!",
                    f" Text must have {length} character(s)!",
                )
            return text

        return self._read_valid(prompt, ValidationKind.TEXT_LENGTH, parse)

    def read_ranged(self, prompt: Optional[str], lo: int, hi: int) -> str:
        """Read text whose length is between lo and hi (either order)."""
        lo, hi = _ordered(lo, hi)

        def parse(text: str) -> str:
            if not lo <= len(text) <= hi:
                raise Invalid(
                    "Invalid text length!",
                    f" Text length must be between {lo} and {hi}.",
                )
            return text

        return self._read_valid(prompt, ValidationKind.TEXT_LENGTH, parse)

    def read_match(self, prompt: Optional[str], pattern: str) -> str:
        """Read text that fully matches a regular expression.

        Raises:
            BadPatternError: pattern does not compile (before any prompt)
        """
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise BadPatternError(f"Invalid pattern {pattern!r}: {e}") from e

        def parse(text: str) -> str:
            if not regex.fullmatch(text):
                raise Invalid("Invalid string format.")
            return text

        return self._read_valid(prompt, ValidationKind.PATTERN, parse)

    # Numbers

    def read_int(
        self,
        prompt: Optional[str],
        lo: Optional[int] = None,
        hi: Optional[int] = None,
    ) -> int:
        """Read an integer, optionally within [lo, hi] (bounds may be swapped)."""
        if lo is not None and hi is not None:
            lo, hi = _ordered(lo, hi)

        def parse(text: str) -> int:
            if not INTEGER_PATTERN.fullmatch(text):
                raise Invalid("That's not an integer.")
            value = int(text)
            if (lo is not None and value < lo) or (hi is not None and value > hi):
                raise Invalid("Integer out of range.", _range_hint("an integer", lo, hi))
            return value

        return self._read_valid(prompt, ValidationKind.INTEGER, parse)

    def read_float(
        self,
        prompt: Optional[str],
        lo: Optional[float] = None,
        hi: Optional[float] = None,
    ) -> float:
        """Read a finite number, optionally within [lo, hi] (bounds may be swapped)."""
        if lo is not None and hi is not None:
            lo, hi = _ordered(lo, hi)

        def parse(text: str) -> float:
            if not NUMBER_PATTERN.fullmatch(text):
                raise Invalid("That's not a number.")
            value = float(text)
            if not math.isfinite(value):
                raise Invalid("That's not a number.")
            if (lo is not None and value < lo) or (hi is not None and value > hi):
                raise Invalid("Number out of range.", _range_hint("a number", lo, hi))
            return value

        return self._read_valid(prompt, ValidationKind.NUMBER, parse)

    # Words

    def read_bool(self, prompt: Optional[str]) -> bool:
        """Read yes/no style input: true, t, y, yes / false, f, n, no."""

        def parse(text: str) -> bool:
            word = text.upper()
            if word in TRUE_WORDS:
                return True
            if word in FALSE_WORDS:
                return False
            raise Invalid("Not a valid boolean.")

        return self._read_valid(prompt, ValidationKind.BOOLEAN, parse)

    def read_email(self, prompt: Optional[str]) -> str:
        """Read an email address, returned lower-cased."""

        def parse(text: str) -> str:
            email = text.lower()
            if not EMAIL_PATTERN.fullmatch(email):
                raise Invalid("Invalid email format.")
            return email

        return self._read_valid(prompt, ValidationKind.EMAIL, parse)

    def read_name(self, prompt: Optional[str]) -> str:
        """Read a single alphabetic word, returned capitalized."""

        def parse(text: str) -> str:
            if not NAME_PATTERN.fullmatch(text):
                raise Invalid("Invalid name format.")
            return text[0].upper() + text[1:].lower()

        return self._read_valid(prompt, ValidationKind.NAME, parse)

    def read_digits(
        self,
        prompt: Optional[str],
        length: Optional[int] = None,
        lo: Optional[int] = None,
        hi: Optional[int] = None,
    ) -> str:
        """Read a string of digits (phone numbers, PINs, IDs).

        Pass length for an exact digit count, or lo and hi for a range.

        Raises:
            InvalidArgumentError: length or range bounds below one
        """
        if length is not None and (lo is not None or hi is not None):
            raise InvalidArgumentError("Give either length or lo/hi, not both")
        hint = TRY_AGAIN
        if length is not None:
            if length < 1:
                raise InvalidArgumentError("Length must be greater than zero")
            lo = hi = length
            hint = f" Please enter a number with {length} digit(s)!"
        elif lo is not None or hi is not None:
            if lo is None or hi is None:
                raise InvalidArgumentError("Both length boundaries are required")
            lo, hi = _ordered(lo, hi)
            if lo < 1:
                raise InvalidArgumentError("Length boundaries must be greater than zero")
            hint = f" Digits must be between {lo} and {hi}."

        def parse(text: str) -> str:
            if not DIGITS_PATTERN.fullmatch(text):
                raise Invalid("Invalid number format.")
            if lo is not None and not lo <= len(text) <= hi:
                raise Invalid("Invalid number length.", hint)
            return text

        return self._read_valid(prompt, ValidationKind.DIGITS, parse)
