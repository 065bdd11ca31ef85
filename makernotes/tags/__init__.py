"""
Tag definitions
"""

from . import makernote

# field type descriptions as (length, abbreviation, full name) tuples
FIELD_TYPES = (
    (0, 'X', 'Proprietary'),  # no such type
    (1, 'B', 'Byte'),
    (1, 'A', 'ASCII'),
    (2, 'S', 'Short'),
    (4, 'L', 'Long'),
    (8, 'R', 'Ratio'),
    (1, 'SB', 'Signed Byte'),
    (1, 'U', 'Undefined'),
    (2, 'SS', 'Signed Short'),
    (4, 'SL', 'Signed Long'),
    (8, 'SR', 'Signed Ratio'),
    (4, 'F', 'Single-Precision Floating Point (32-bit)'),
    (8, 'D', 'Double-Precision Floating Point (64-bit)'),
    (4, 'L', 'IFD'),
)

FIELD_TYPE_BYTE = 1
FIELD_TYPE_ASCII = 2
FIELD_TYPE_SHORT = 3
FIELD_TYPE_LONG = 4
FIELD_TYPE_RATIONAL = 5
FIELD_TYPE_SIGNED_BYTE = 6
FIELD_TYPE_UNDEFINED = 7
FIELD_TYPE_SIGNED_SHORT = 8
FIELD_TYPE_SIGNED_LONG = 9
FIELD_TYPE_SIGNED_RATIONAL = 10
FIELD_TYPE_FLOAT = 11
FIELD_TYPE_DOUBLE = 12
FIELD_TYPE_IFD = 13
