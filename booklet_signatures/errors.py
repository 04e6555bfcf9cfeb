"""
Errors reported when command line input can't be turned into a page range.

Every error subclasses ValidationError (itself a ValueError) and keeps the
offending values as attributes, so callers can tell them apart by type.
"""

from typing import List, Sequence


class ValidationError(ValueError):
    """Base class for invalid page range input."""


class InsufficientArguments(ValidationError):
    """Fewer than two page numbers were given."""

    def __init__(self, received: Sequence[str]):
        self.received: List[str] = list(received)
        super().__init__(f"Need at least two arguments to run! Got: {self.received}")


class MalformedNumber(ValidationError):
    """An argument is not a non-negative whole number."""

    FIRST = 'first'
    SECOND = 'second'

    def __init__(self, which: str, raw: str):
        if which not in (self.FIRST, self.SECOND):
            raise ValueError(f"which must be 'first' or 'second', got '{which}'")
        self.which = which
        self.raw = raw
        super().__init__(f"{which.capitalize()} argument not a valid number! {raw}")


class ZeroPageError(ValidationError):
    """The first page number is 0."""

    def __init__(self):
        super().__init__("There is no page zero! Received 0 as the first page number.")


class RangeOrderError(ValidationError):
    """The second page number comes before the first."""

    def __init__(self, first: int, second: int):
        self.first = first
        self.second = second
        super().__init__(
            "The second number must be greater than or equal to the first! "
            f"{first} > {second}."
        )
