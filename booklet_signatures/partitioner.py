"""
Splits a document's pages into consecutive signatures.
"""

import logging
from typing import List

from .config import PAGES_PER_SIGNATURE
from .models import SignatureWindow
from .signature_keys import get_signature_key

logger = logging.getLogger(__name__)


def get_signatures(
    first_page_of_document: int,
    num_pages: int,
    num_signatures: int
) -> List[SignatureWindow]:
    """
    Get the first and last page of each signature in the document.

    Every signature holds PAGES_PER_SIGNATURE pages except the last one,
    which stops at the document's last page instead of being padded out.

    Args:
        first_page_of_document: Page number the document starts on
        num_pages: Number of pages in the document
        num_signatures: Number of signatures to split the pages into

    Returns:
        SignatureWindow list in document order, one per signature
        (empty if num_signatures is 0)
    """
    last_page_of_document = first_page_of_document + num_pages - 1
    signatures = []

    for i in range(num_signatures):
        last_page_of_signature = first_page_of_document + (i + 1) * PAGES_PER_SIGNATURE - 1
        signatures.append(SignatureWindow(
            key=get_signature_key(i),
            first_page=first_page_of_document + i * PAGES_PER_SIGNATURE,
            last_page=min(last_page_of_signature, last_page_of_document),
        ))

    logger.debug(
        "Split pages %d-%d into %d signature(s)",
        first_page_of_document, last_page_of_document, len(signatures)
    )
    return signatures
