"""
Makernote (proprietary) tag definitions for Kyocera / Contax.
"""

from ...classes import MakernoteFormat
from ...descriptor import TagDescriptor

TAGS = {
    0x0001: ('Proprietary Thumbnail Format Data', TagDescriptor.get_byte_length_description),
    0x0E00: ('Print Image Matching (PIM) Info', ),
}

MAKERNOTE = MakernoteFormat('Kyocera/Contax Makernote', TAGS)
