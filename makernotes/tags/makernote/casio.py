"""
Makernote (proprietary) tag definitions for Casio.

Two unrelated layouts exist: the older type 1 with no header, and type 2
which starts with "QVC\\0\\0\\0".
"""

from ...classes import MakernoteFormat
from ...descriptor import focal_length_description, indexed


def _object_distance(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    return focal_length_description(value)


def _thumbnail_dimensions(descriptor, tag):
    dimensions = descriptor.directory.get_int_array(tag)
    if dimensions is None or len(dimensions) != 2:
        return descriptor.directory.get_string(tag)
    return '%d x %d pixels' % (dimensions[0], dimensions[1])


def _thumbnail_size(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    return '%d bytes' % value


def _focal_length(descriptor, tag):
    value = descriptor.directory.get_float(tag)
    if value is None:
        return None
    return focal_length_description(value / 10.0)


def _preview_thumbnail(descriptor, tag):
    data = descriptor.directory.get_byte_array(tag)
    if data is None:
        return None
    return '<%d bytes of image data>' % len(data)


def _object_distance_mm(descriptor, tag):
    return descriptor.get_formatted_int(tag, '%d mm')


TAGS_TYPE1 = {
    0x0001: ('Recording Mode', indexed('Single shutter', 'Panorama', 'Night scene', 'Portrait', 'Landscape', base=1)),
    0x0002: ('Quality', indexed('Economy', 'Normal', 'Fine', base=1)),
    0x0003: ('Focusing Mode', indexed('Macro', 'Auto focus', 'Manual focus', 'Infinity', base=2)),
    0x0004: ('Flash Mode', indexed('Auto', 'On', 'Off', 'Red eye reduction', base=1)),
    0x0005: ('Flash Intensity', {
        11: 'Weak',
        13: 'Normal',
        15: 'Strong',
    }),
    0x0006: ('Object Distance', _object_distance),
    0x0007: ('White Balance', {
        1: 'Auto',
        2: 'Tungsten',
        3: 'Daylight',
        4: 'Florescent',
        5: 'Shade',
        129: 'Manual',
    }),
    0x0008: ('Makernote Unknown 1', ),
    0x0009: ('Makernote Unknown 2', ),
    0x000A: ('Digital Zoom', {
        0x10000: 'No digital zoom',
        0x10001: '2x digital zoom',
        0x20000: '2x digital zoom',
        0x40000: '4x digital zoom',
    }),
    0x000B: ('Sharpness', indexed('Normal', 'Soft', 'Hard')),
    0x000C: ('Contrast', indexed('Normal', 'Low', 'High')),
    0x000D: ('Saturation', indexed('Normal', 'Low', 'High')),
    0x000E: ('Makernote Unknown 3', ),
    0x000F: ('Makernote Unknown 4', ),
    0x0010: ('Makernote Unknown 5', ),
    0x0011: ('Makernote Unknown 6', ),
    0x0012: ('Makernote Unknown 7', ),
    0x0013: ('Makernote Unknown 8', ),
    0x0014: ('CCD Sensitivity', {
        64: 'Normal',
        125: '+1.0',
        250: '+2.0',
        244: '+3.0',
        80: 'Normal (ISO 80 equivalent)',
        100: 'High',
    }),
}

TAGS_TYPE2 = {
    0x0002: ('Thumbnail Dimensions', _thumbnail_dimensions),
    0x0003: ('Thumbnail Size', _thumbnail_size),
    0x0004: ('Thumbnail Offset', ),
    0x0008: ('Quality Mode', indexed('Fine', 'Super Fine', base=1)),
    0x0009: ('Image Size', {
        0: '640 x 480 pixels',
        4: '1600 x 1200 pixels',
        5: '2048 x 1536 pixels',
        20: '2288 x 1712 pixels',
        21: '2592 x 1944 pixels',
        22: '2304 x 1728 pixels',
        36: '3008 x 2008 pixels',
    }),
    0x000D: ('Focus Mode', indexed('Normal', 'Macro')),
    0x0014: ('ISO Sensitivity', {
        3: '50',
        4: '64',
        6: '100',
        9: '200',
    }),
    0x0019: ('White Balance', indexed('Auto', 'Daylight', 'Shade', 'Tungsten', 'Florescent', 'Manual')),
    0x001D: ('Focal Length', _focal_length),
    0x001F: ('Saturation', indexed('-1', 'Normal', '+1')),
    0x0020: ('Contrast', indexed('-1', 'Normal', '+1')),
    0x0021: ('Sharpness', indexed('-1', 'Normal', '+1')),
    0x0E00: ('Print Image Matching (PIM) Info', ),
    0x2000: ('Casio Preview Thumbnail', _preview_thumbnail),
    0x2011: ('White Balance Bias', ),
    0x2012: ('White Balance', {
        0: 'Manual',
        1: 'Auto',
        4: 'Flash',
        12: 'Flash',
    }),
    0x2022: ('Object Distance', _object_distance_mm),
    0x2034: ('Flash Distance', indexed('Off')),
    0x3000: ('Record Mode', indexed('Normal', base=2)),
    0x3001: ('Self Timer', indexed('Off', base=1)),
    0x3002: ('Quality', indexed('Fine', base=3)),
    0x3003: ('Focus Mode', {
        1: 'Fixation',
        6: 'Multi-Area Focus',
    }),
    0x3006: ('Time Zone', ),
    0x3007: ('BestShot Mode', ),
    0x3014: ('CCD ISO Sensitivity', indexed('Off', 'On')),
    0x3015: ('Colour Mode', indexed('Off')),
    0x3016: ('Enhancement', indexed('Off')),
    0x3017: ('Filter', indexed('Off')),
}

TYPE1 = MakernoteFormat('Casio Makernote', TAGS_TYPE1)
TYPE2 = MakernoteFormat('Casio Makernote', TAGS_TYPE2)
