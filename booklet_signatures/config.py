"""
Centralized constants for the signature calculator.

Sheet and signature sizes are fixed properties of the binding style
(one sheet folded once gives 4 pages, four nested sheets make one signature),
so they live here rather than being exposed as options.
"""

# Logical pages printed on one physical sheet (two per side, folded once)
PAGES_PER_SHEET = 4

# Logical pages bound together in one signature
PAGES_PER_SIGNATURE = 16

# Sheets nested into one signature (4 for the sizes above)
SHEETS_PER_SIGNATURE = PAGES_PER_SIGNATURE // PAGES_PER_SHEET

# Symbols used for signature keys, in order
SIGNATURE_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'

# Separator printed around the signature list in text output
REPORT_SEPARATOR = '#' * 37
