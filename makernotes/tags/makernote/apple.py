"""
Makernote (proprietary) tag definitions for Apple iOS devices.
"""

from ...classes import MakernoteFormat
from ...descriptor import indexed

TAGS = {
    0x0003: ('Run Time', ),
    0x000A: ('HDR Image Type', indexed('HDR Image', 'Original Image', base=3)),
    0x000B: ('Burst UUID', ),
}

MAKERNOTE = MakernoteFormat('Apple Makernote', TAGS)
