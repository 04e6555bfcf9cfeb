"""
Booklet signature calculator.

Works out how many sheets and 16-page signatures a page range needs and
which pages go into each lettered signature.
"""

from .calculator import calculate_layout
from .models import DocumentLayout, PageRange, SignatureWindow
from .validators import PageRangeValidator

__version__ = "1.0.0"

__all__ = [
    'calculate_layout',
    'DocumentLayout',
    'PageRange',
    'PageRangeValidator',
    'SignatureWindow',
]
