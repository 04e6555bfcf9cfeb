"""
Pytest configuration and fixtures.
"""

import pytest

from booklet_signatures.models import PageRange


@pytest.fixture
def sixty_page_range():
    """Pages 1-60: four signatures, the last one short."""
    return PageRange(1, 60)


@pytest.fixture
def offset_page_range():
    """Pages 12-30: a range that doesn't start on page 1."""
    return PageRange(12, 30)


@pytest.fixture
def sample_ranges():
    """Assorted valid ranges covering full, partial and long documents."""
    return [
        PageRange(1, 1),
        PageRange(1, 4),
        PageRange(7, 8),
        PageRange(1, 16),
        PageRange(1, 17),
        PageRange(5, 23),
        PageRange(12, 30),
        PageRange(1, 60),
        PageRange(100, 611),
        PageRange(3, 16 * 30 + 2),
    ]
