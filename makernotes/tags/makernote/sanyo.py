"""
Makernote (proprietary) tag definitions for Sanyo.
"""

from ...classes import MakernoteFormat
from ...descriptor import indexed

OFF_ON = indexed('Off', 'On')


def _quality(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    # high byte is the compression, low byte the resolution
    compression = {
        0: 'Normal',
        1: 'Fine',
        2: 'Super Fine',
    }.get(value >> 8)
    resolution = {
        0: 'Very Low',
        1: 'Low',
        2: 'Medium Low',
        3: 'Medium',
        4: 'Medium High',
        5: 'High',
        6: 'Very High',
        7: 'Super High',
    }.get(value & 0xFF)
    if compression is None or resolution is None:
        return 'Unknown (%d)' % value
    return '%s/%s' % (compression, resolution)


def _digital_zoom(descriptor, tag):
    return descriptor.get_decimal_rational(tag, 3)


TAGS = {
    0x00FF: ('Makernote Offset', ),
    0x0100: ('Sanyo Thumbnail', ),
    0x0200: ('Special Mode', ),
    0x0201: ('Sanyo Quality', _quality),
    0x0202: ('Macro', indexed('Normal', 'Macro', 'View', 'Manual')),
    0x0204: ('Digital Zoom', _digital_zoom),
    0x0207: ('Software Version', ),
    0x0208: ('Pict Info', ),
    0x0209: ('Camera ID', ),
    0x020E: ('Sequential Shot', indexed('None', 'Standard', 'Best', 'Adjust Exposure')),
    0x020F: ('Wide Range', OFF_ON),
    0x0210: ('Color Adjustment Node', OFF_ON),
    0x0213: ('Quick Shot', OFF_ON),
    0x0214: ('Self Timer', OFF_ON),
    0x0216: ('Voice Memo', OFF_ON),
    0x0217: ('Record Shutter Release', indexed('Record while down', 'Press start, press stop')),
    0x0218: ('Flicker Reduce', OFF_ON),
    0x0219: ('Optical Zoom On', OFF_ON),
    0x021B: ('Digital Zoom On', OFF_ON),
    0x021D: ('Light Source Special', OFF_ON),
    0x021E: ('Resaved', indexed('No', 'Yes')),
    0x021F: ('Scene Select', indexed('Off', 'Sport', 'TV', 'Night', 'User 1', 'User 2', 'Lamp')),
    0x0223: ('Manual Focus Distance or Face Info', ),
    0x0224: ('Sequence Shot Interval', indexed('5 frames/sec', '10 frames/sec', '15 frames/sec', '20 frames/sec')),
    0x0225: ('Flash Mode', indexed('Auto', 'Force', 'Disabled', 'Red eye')),
    0x0E00: ('Print IM', ),
    0x0F00: ('Data Dump', ),
}

MAKERNOTE = MakernoteFormat('Sanyo Makernote', TAGS)
