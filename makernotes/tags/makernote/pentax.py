"""
Makernote (proprietary) tag definitions for Pentax / Asahi.

Offsets are relative to the start of the makernote.
"""

from ...classes import MakernoteFormat
from ...descriptor import indexed


def _digital_zoom(descriptor, tag):
    value = descriptor.directory.get_float(tag)
    if value is None:
        return None
    if value == 0:
        return 'Off'
    return str(value)


TAGS = {
    0x0001: ('Capture Mode', indexed('Auto', 'Night-scene', 'Manual', None, 'Multiple')),
    0x0002: ('Quality Level', indexed('Good', 'Better', 'Best')),
    0x0003: ('Focus Mode', indexed('Custom', 'Auto', base=2)),
    0x0004: ('Flash Mode', indexed('Auto', 'Flash On', None, 'Flash Off', None, 'Red-eye Reduction', base=1)),
    0x0007: ('White Balance', indexed('Auto', 'Daylight', 'Shade', 'Tungsten', 'Fluorescent', 'Manual')),
    0x000A: ('Digital Zoom', _digital_zoom),
    0x000B: ('Sharpness', indexed('Normal', 'Soft', 'Hard')),
    0x000C: ('Contrast', indexed('Normal', 'Low', 'High')),
    0x000D: ('Saturation', indexed('Normal', 'Low', 'High')),
    0x0014: ('ISO Speed', {
        10: 'ISO 100',
        16: 'ISO 200',
        100: 'ISO 100',
        200: 'ISO 200',
    }),
    0x0017: ('Colour', indexed('Normal', 'Black & White', 'Sepia', base=1)),
    0x0E00: ('Print Image Matching (PIM) Info', ),
    0x1000: ('Time Zone', ),
    0x1001: ('Daylight Savings', ),
}

MAKERNOTE = MakernoteFormat('Pentax Makernote', TAGS)
