"""
Alphabetic signature keys.

Signatures are labelled A..Z, then AA..ZZ, then AAA and so on. This is
bijective base-26: there is no zero digit, so after taking each remainder
the quotient is reduced by one before the next round.
"""

from .config import SIGNATURE_ALPHABET


def get_signature_key(signature_index: int) -> str:
    """
    Get the letter code that identifies a signature.

    Args:
        signature_index: Zero-based position of the signature in the document

    Returns:
        Key such as "A" (index 0), "Z" (25), "AA" (26) or "AAA" (702)

    Raises:
        ValueError: If signature_index is negative

    Example:
        >>> [get_signature_key(i) for i in (0, 25, 26, 701, 702)]
        ['A', 'Z', 'AA', 'ZZ', 'AAA']
    """
    if signature_index < 0:
        raise ValueError(f"signature_index must be >= 0, got {signature_index}")

    base = len(SIGNATURE_ALPHABET)
    letters = []
    i = signature_index
    while True:
        letters.append(SIGNATURE_ALPHABET[i % base])
        i //= base
        if i == 0:
            break
        i -= 1

    # Built right to left
    return ''.join(reversed(letters))
