"""
Document layout calculation.

Turns a validated page range into page, sheet and signature counts plus
the signature list. Expects input that has already been through
PageRangeValidator and does no checking of its own.
"""

import logging

from .config import PAGES_PER_SHEET, PAGES_PER_SIGNATURE
from .models import DocumentLayout, PageRange
from .partitioner import get_signatures

logger = logging.getLogger(__name__)


def ceil_div(numerator: int, divisor: int) -> int:
    """Integer division rounding up, so any remainder costs one more unit."""
    return (numerator + divisor - 1) // divisor


def calculate_layout(page_range: PageRange) -> DocumentLayout:
    """
    Calculate the number of pages, sheets and signatures in the document.

    Args:
        page_range: Validated range of pages to print

    Returns:
        DocumentLayout with counts and one SignatureWindow per signature

    Example:
        >>> layout = calculate_layout(PageRange(12, 30))
        >>> layout.page_count, layout.sheet_count, layout.signature_count
        (19, 5, 2)
    """
    num_pages = page_range.last - page_range.first + 1
    num_sheets = ceil_div(num_pages, PAGES_PER_SHEET)
    num_signatures = ceil_div(num_pages, PAGES_PER_SIGNATURE)

    logger.debug(
        "%r: %d page(s), %d sheet(s), %d signature(s)",
        page_range, num_pages, num_sheets, num_signatures
    )

    signatures = get_signatures(page_range.first, num_pages, num_signatures)

    return DocumentLayout(
        page_count=num_pages,
        sheet_count=num_sheets,
        signature_count=num_signatures,
        signatures=tuple(signatures),
    )
