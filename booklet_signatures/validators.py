"""
Input validation for the signature calculator.

This module is the only gate in front of calculate_layout(): it turns raw
command line strings into a PageRange, or reports exactly what is wrong
with them as a typed ValidationError inside a ValidationResult.
"""

import logging
from typing import Optional, Sequence

from .errors import (
    InsufficientArguments,
    MalformedNumber,
    RangeOrderError,
    ZeroPageError,
)
from .models import PageRange, ValidationResult

logger = logging.getLogger(__name__)


class PageRangeValidator:
    """Validates raw page numbers into a page range."""

    @staticmethod
    def parse_page_number(raw: str) -> Optional[int]:
        """
        Parse a non-negative whole number.

        Accepts ASCII digits with at most one leading '+'. No minus sign,
        whitespace or decimal point.

        Args:
            raw: String to parse

        Returns:
            The number, or None if raw is not a valid non-negative integer
        """
        digits = raw[1:] if raw.startswith('+') else raw
        if not digits or not digits.isascii() or not digits.isdigit():
            return None
        return int(digits)

    @staticmethod
    def validate_page_numbers(raw_first: str, raw_second: str) -> ValidationResult:
        """
        Validate the first and last page numbers.

        Checks run in order and stop at the first failure:
        both are numbers, the first page isn't 0, the second page
        isn't before the first.

        Args:
            raw_first: First page number as typed by the user
            raw_second: Last page number as typed by the user

        Returns:
            ValidationResult holding a PageRange, or the error found

        Example:
            >>> PageRangeValidator.validate_page_numbers("0", "60").error
            ZeroPageError('There is no page zero! Received 0 as the first page number.')
        """
        first = PageRangeValidator.parse_page_number(raw_first)
        if first is None:
            return ValidationResult(error=MalformedNumber(MalformedNumber.FIRST, raw_first))

        second = PageRangeValidator.parse_page_number(raw_second)
        if second is None:
            return ValidationResult(error=MalformedNumber(MalformedNumber.SECOND, raw_second))

        if first == 0:
            return ValidationResult(error=ZeroPageError())

        if second < first:
            return ValidationResult(error=RangeOrderError(first, second))

        logger.debug("Validated page range %d-%d", first, second)
        return ValidationResult(page_range=PageRange(first, second))

    @staticmethod
    def validate_args(args: Sequence[str]) -> ValidationResult:
        """
        Validate command line arguments.

        Args:
            args: Arguments after the program name. The first two are the
                first and last page; anything after them is ignored.

        Returns:
            ValidationResult holding a PageRange, or the error found
        """
        if len(args) < 2:
            return ValidationResult(error=InsufficientArguments(args))

        if len(args) > 2:
            logger.debug("Ignoring extra arguments: %s", list(args[2:]))

        return PageRangeValidator.validate_page_numbers(args[0], args[1])
