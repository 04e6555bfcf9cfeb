#!/usr/bin/env python3
"""
Booklet Signature Maker

Works out how to print and bind a range of document pages as booklet
signatures: how many sheets to print, how many 4-sheet signatures to bind,
and which pages belong to each lettered signature.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from booklet_signatures.calculator import calculate_layout
from booklet_signatures.config import REPORT_SEPARATOR, SHEETS_PER_SIGNATURE
from booklet_signatures.models import DocumentLayout
from booklet_signatures.validators import PageRangeValidator

logger = logging.getLogger(__name__)


def format_layout(layout: DocumentLayout) -> List[str]:
    """
    Render a document layout as the lines of the text report.

    Args:
        layout: Calculated document layout

    Returns:
        Report lines, without trailing newlines
    """
    lines = [
        f"Number of document pages to print: {layout.page_count}",
        f"Number of sheets to print: {layout.sheet_count}",
        f"Number of {SHEETS_PER_SIGNATURE}-sheet signatures to bind: {layout.signature_count}",
        REPORT_SEPARATOR,
    ]
    for signature in layout.signatures:
        lines.append(
            f"Signature {signature.key}. "
            f"First page: {signature.first_page}, last page: {signature.last_page}"
        )
    lines.append(REPORT_SEPARATOR)
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        usage="%(prog)s FIRST LAST [extra ...] [--json] [--verbose]",
        description="Calculate the sheets and 16-page signatures needed to print and bind a page range.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
FIRST and LAST are the first and last page to print. Options may appear
anywhere; every other value, including unrecognised options, is read as a
page argument in the order given, and anything after the first two is ignored.

Examples:
  %(prog)s 1 60             # Pages 1 through 60
  %(prog)s 12 30            # Pages 12 through 30
  %(prog)s 1 60 --json      # Machine-readable output
        """
    )

    parser.add_argument('--json', action='store_true',
                        help='Print the layout as JSON')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show debug logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments after the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on invalid input
    """
    parser = build_parser()
    # Everything that isn't a known option stays in order as a page argument
    args, page_args = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    result = PageRangeValidator.validate_args(page_args)
    if not result.is_valid:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    layout = calculate_layout(result.page_range)

    if args.json:
        print(json.dumps(layout.to_dict(), indent=2))
    else:
        for line in format_layout(layout):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
