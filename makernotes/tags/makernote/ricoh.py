"""
Makernote (proprietary) tag definitions for Ricoh.
"""

from ...classes import MakernoteFormat

TAGS = {
    0x0001: ('Makernote Data Type', ),
    0x0002: ('Version', ),
    0x0E00: ('Print Image Matching (PIM) Info', ),
    0x2001: ('Ricoh Camera Info Makernote Sub-IFD', ),
}

MAKERNOTE = MakernoteFormat('Ricoh Makernote', TAGS)
