"""
Tests for the validators module.
"""

import pytest

from booklet_signatures.errors import (
    InsufficientArguments,
    MalformedNumber,
    RangeOrderError,
    ValidationError,
    ZeroPageError,
)
from booklet_signatures.models import PageRange
from booklet_signatures.validators import PageRangeValidator


class TestValidatePageNumbers:
    """Tests for PageRangeValidator.validate_page_numbers."""

    def test_valid_range(self):
        """Test that a normal range is accepted."""
        result = PageRangeValidator.validate_page_numbers("1", "60")

        assert result.is_valid
        assert result.error is None
        assert result.page_range == PageRange(1, 60)

    def test_same_number_twice(self):
        """Test that a single page range is accepted."""
        result = PageRangeValidator.validate_page_numbers("33", "33")

        assert result.is_valid
        assert result.page_range == PageRange(33, 33)

    def test_first_page_zero(self):
        """Test that page zero is rejected."""
        result = PageRangeValidator.validate_page_numbers("0", "60")

        assert not result.is_valid
        assert isinstance(result.error, ZeroPageError)
        assert str(result.error).startswith("There is no page zero!")

    def test_second_smaller(self):
        """Test that a backwards range is rejected."""
        result = PageRangeValidator.validate_page_numbers("33", "32")

        assert not result.is_valid
        assert isinstance(result.error, RangeOrderError)
        assert result.error.first == 33
        assert result.error.second == 32
        assert str(result.error).startswith("The second number must be greater than")

    def test_first_not_number(self):
        """Test that a malformed first number is reported as 'first'."""
        result = PageRangeValidator.validate_page_numbers("abc", "60")

        assert isinstance(result.error, MalformedNumber)
        assert result.error.which == MalformedNumber.FIRST
        assert result.error.raw == "abc"
        assert str(result.error).startswith("First argument not a valid number!")

    def test_second_not_number(self):
        """Test that a malformed second number is reported as 'second'."""
        result = PageRangeValidator.validate_page_numbers("345", "asdfa60")

        assert isinstance(result.error, MalformedNumber)
        assert result.error.which == MalformedNumber.SECOND
        assert result.error.raw == "asdfa60"

    def test_malformed_checked_before_zero(self):
        """Test that number parsing runs before the zero check."""
        result = PageRangeValidator.validate_page_numbers("0", "x")

        assert isinstance(result.error, MalformedNumber)
        assert result.error.which == MalformedNumber.SECOND

    def test_zero_checked_before_order(self):
        """Test that page zero is reported even when the order is also wrong."""
        result = PageRangeValidator.validate_page_numbers("0", "0")

        assert isinstance(result.error, ZeroPageError)

    @pytest.mark.parametrize("raw", ["", "-5", "+", "++5", "+-5", "-+5", " 5", "5 ", "1.0", "1e3", "٣", "²"])
    def test_rejects_non_plain_digits(self, raw):
        """Test that only plain non-negative whole numbers parse."""
        assert PageRangeValidator.parse_page_number(raw) is None

        result = PageRangeValidator.validate_page_numbers(raw, "60")
        assert isinstance(result.error, MalformedNumber)

    def test_leading_plus_allowed(self):
        """Test that a single leading '+' is accepted on either number."""
        assert PageRangeValidator.parse_page_number("+5") == 5

        result = PageRangeValidator.validate_page_numbers("+5", "+60")

        assert result.is_valid
        assert result.page_range == PageRange(5, 60)

    def test_plus_zero_is_page_zero(self):
        """Test that '+0' parses to 0 and hits the zero page check."""
        result = PageRangeValidator.validate_page_numbers("+0", "60")

        assert isinstance(result.error, ZeroPageError)

    def test_leading_zeros_allowed(self):
        """Test that leading zeros parse as the plain number."""
        result = PageRangeValidator.validate_page_numbers("007", "010")

        assert result.page_range == PageRange(7, 10)

    def test_errors_are_value_errors(self):
        """Test that every error can be caught as ValueError."""
        result = PageRangeValidator.validate_page_numbers("33", "32")

        assert isinstance(result.error, ValidationError)
        assert isinstance(result.error, ValueError)


class TestValidateArgs:
    """Tests for PageRangeValidator.validate_args."""

    def test_two_args(self):
        """Test the normal case."""
        result = PageRangeValidator.validate_args(["1", "60"])

        assert result.page_range == PageRange(1, 60)

    def test_extra_args_ignored(self):
        """Test that trailing arguments don't matter."""
        result = PageRangeValidator.validate_args(["5", "185", "asdfasdfad"])

        assert result.is_valid
        assert result.page_range == PageRange(5, 185)

    def test_insufficient_args(self):
        """Test that one argument isn't enough."""
        result = PageRangeValidator.validate_args(["5"])

        assert not result.is_valid
        assert isinstance(result.error, InsufficientArguments)
        assert result.error.received == ["5"]
        assert str(result.error).startswith("Need at least two arguments to run!")

    def test_no_args(self):
        """Test that no arguments is reported as insufficient."""
        result = PageRangeValidator.validate_args([])

        assert isinstance(result.error, InsufficientArguments)
        assert result.error.received == []

    def test_errors_pass_through(self):
        """Test that page number errors come back unchanged."""
        result = PageRangeValidator.validate_args(["0", "60", "extra"])

        assert isinstance(result.error, ZeroPageError)
