"""
Data models for the signature calculator.

Frozen dataclasses for the validated page range, each signature's page
window and the finished document layout, plus the validation result.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import ValidationError


@dataclass(frozen=True)
class PageRange:
    """
    Inclusive range of document pages to print.

    Built by PageRangeValidator once the raw input has been checked.
    """
    first: int  # First page to print (1-indexed)
    last: int   # Last page to print, inclusive

    def __post_init__(self):
        """Validate range."""
        if self.first < 1:
            raise ValueError(f"first page must be >= 1, got {self.first}")
        if self.last < self.first:
            raise ValueError(
                f"last page must be >= first page, got {self.first}-{self.last}"
            )

    @property
    def page_count(self) -> int:
        """Number of pages in the range."""
        return self.last - self.first + 1

    def __repr__(self):
        return f"PageRange({self.first}, {self.last})"


@dataclass(frozen=True)
class SignatureWindow:
    """
    Pages covered by a single signature.

    The final signature of a document may hold fewer pages than a full
    signature; it always ends on the document's last page.
    """
    key: str         # Signature label ("A", "B", ..., "AA", ...)
    first_page: int  # First document page in this signature
    last_page: int   # Last document page in this signature, inclusive

    def __post_init__(self):
        """Validate window."""
        if not self.key:
            raise ValueError("Signature key must not be empty")
        if self.last_page < self.first_page:
            raise ValueError(
                f"Signature {self.key} ends before it starts: "
                f"{self.first_page}-{self.last_page}"
            )

    @property
    def page_count(self) -> int:
        """Number of pages in this signature."""
        return self.last_page - self.first_page + 1

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'key': self.key,
            'first_page': self.first_page,
            'last_page': self.last_page,
        }

    def as_tuple(self) -> tuple:
        """Return (key, first_page, last_page)."""
        return (self.key, self.first_page, self.last_page)


@dataclass(frozen=True)
class DocumentLayout:
    """
    Print layout of a document.

    Holds the page, sheet and signature counts together with the ordered
    signature windows. Created by calculate_layout().
    """
    page_count: int
    sheet_count: int
    signature_count: int
    signatures: Tuple[SignatureWindow, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate that the signature list matches the signature count."""
        if len(self.signatures) != self.signature_count:
            raise ValueError(
                f"Expected {self.signature_count} signature(s), "
                f"got {len(self.signatures)}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'page_count': self.page_count,
            'sheet_count': self.sheet_count,
            'signature_count': self.signature_count,
            'signatures': [signature.to_dict() for signature in self.signatures],
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validating page range input.

    Holds the PageRange when the input is valid, otherwise the first
    ValidationError found. Exactly one of the two is set.
    """
    page_range: Optional[PageRange] = None
    error: Optional[ValidationError] = None

    def __post_init__(self):
        """Validate that exactly one outcome is present."""
        if (self.page_range is None) == (self.error is None):
            raise ValueError("ValidationResult needs exactly one of page_range or error")

    @property
    def is_valid(self) -> bool:
        """True when the input produced a page range."""
        return self.error is None

    def get_summary(self) -> str:
        """Get a human-readable summary of the validation outcome."""
        if self.is_valid:
            return f"Pages {self.page_range.first}-{self.page_range.last}"
        return str(self.error)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, {self.get_summary()})"
