"""
Makernote (proprietary) tag definitions for Nikon.

Type 1 is the layout of the early Coolpix models (E700/E800/E900/E990/D1),
type 2 covers everything since, with or without the "Nikon\\0" label and
embedded TIFF header.
"""

from ...arrays import expand_sub_tags
from ...classes import MakernoteFormat
from ...decrypt import get_decrypted_int_array
from ...descriptor import TagDescriptor, bit_flags, decimal_format, formatted_string, indexed, version_bytes

LENS_DATA = 0x0098
LENS_DATA_OFFSET = 0xE000
LENS_FOCUS_DISTANCE = LENS_DATA_OFFSET + 10


def _digital_zoom_type1(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    if value.numerator == 0:
        return 'No digital zoom'
    return '%sx digital zoom' % value.to_simple_string(True)


def _focus(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    if value.numerator == 1 and value.denominator == 0:
        return 'Infinite'
    return value.to_simple_string(True)


TAGS_TYPE1 = {
    0x0002: ('Makernote Unknown 1', ),
    0x0003: ('Quality', indexed('VGA Basic', 'VGA Normal', 'VGA Fine', 'SXGA Basic', 'SXGA Normal', 'SXGA Fine',
                                base=1)),
    0x0004: ('Color Mode', indexed('Color', 'Monochrome', base=1)),
    0x0005: ('Image Adjustment', indexed('Normal', 'Bright +', 'Bright -', 'Contrast +', 'Contrast -')),
    0x0006: ('CCD Sensitivity', indexed('ISO80', None, 'ISO160', None, 'ISO320', 'ISO100')),
    0x0007: ('White Balance', indexed('Auto', 'Preset', 'Daylight', 'Incandescence', 'Florescence', 'Cloudy',
                                      'SpeedLight')),
    0x0008: ('Focus', _focus),
    0x0009: ('Makernote Unknown 2', ),
    0x000A: ('Digital Zoom', _digital_zoom_type1),
    0x000B: ('Fisheye Converter', indexed('None', 'Fisheye converter')),
    0x0F00: ('Makernote Unknown 3', ),
}


def _ev(descriptor, tag):
    # numerator, multiplier, denominator
    values = descriptor.directory.get_int_array(tag)
    if values is None or len(values) < 3 or values[2] == 0:
        return None
    # the numerator is a signed byte
    numerator = values[0] - 256 if values[0] > 127 else values[0]
    return '%s EV' % decimal_format(numerator * values[1] / float(values[2]), 2)


def _iso_setting(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if values is None:
        return None
    if len(values) < 2 or values[0] != 0 or values[1] == 0:
        return 'Unknown (%s)' % descriptor.directory.get_string(tag)
    return 'ISO %d' % values[1]


def _digital_zoom(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    if not value.is_zero and value.to_int() == 1:
        return 'No digital zoom'
    return '%sx digital zoom' % value.to_simple_string(True)


def _af_focus_position(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if values is None:
        return None
    if len(values) != 4 or values[0] != 0 or values[2] != 0 or values[3] != 0:
        return 'Unknown (%s)' % descriptor.directory.get_string(tag)
    return {
        0: 'Centre',
        1: 'Top',
        2: 'Bottom',
        3: 'Left',
        4: 'Right',
    }.get(values[1], 'Unknown (%d)' % values[1])


def _color_mode(descriptor, tag):
    value = descriptor.directory.get_string(tag)
    if value is None:
        return None
    if value.startswith('MODE1'):
        return 'Mode I (sRGB)'
    return value


def _power_up_time(descriptor, tag):
    # 2 byte big-endian year, then month, day, hour, minute, second
    values = descriptor.directory.get_byte_array(tag)
    if values is None or len(values) < 7:
        return descriptor.get_default_description(tag)
    year = int.from_bytes(values[0:2], 'big', signed=True)
    return '%04d:%02d:%02d %02d:%02d:%02d' % ((year, ) + tuple(values[2:7]))


def _lens_focus_distance(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value < 0:
        value += 256
    return '%.2fm' % (0.01 * 10 ** (value / 40.0))


ACTIVE_D_LIGHTING = {
    0: 'Off',
    1: 'Light',
    3: 'Normal',
    5: 'High',
    7: 'Extra High',
    65535: 'Auto',
}

VIGNETTE_CONTROL = {
    0: 'Off',
    1: 'Low',
    3: 'Normal',
    5: 'High',
}

FLASH_USED = indexed('Flash Not Used', 'Manual Flash', None, 'Flash Not Ready', None, None, None,
                     'External Flash', 'Fired, Commander Mode', 'Fired, TTL Mode')

LENS_TYPE = bit_flags(('AF', 'MF'), 'D', 'G', 'VR')

SHOOTING_MODE = bit_flags(('Single Frame', 'Continuous'), 'Delay', None, 'PC Control', 'Exposure Bracketing',
                          'Auto ISO', 'White-Balance Bracketing', 'IR Control')

NEF_COMPRESSION = indexed('Lossy (Type 1)', None, 'Uncompressed', None, None, None, 'Lossless', 'Lossy (Type 2)',
                          base=1)

HIGH_ISO_NOISE_REDUCTION = indexed('Off', 'Minimal', 'Low', None, 'Normal', None, 'High')

TAGS_TYPE2 = {
    0x0001: ('Firmware Version', version_bytes(2)),
    0x0002: ('ISO', _iso_setting),
    0x0003: ('Color Mode', ),
    0x0004: ('Quality & File Format', ),
    0x0005: ('White Balance', ),
    0x0006: ('Sharpening', ),
    0x0007: ('AF Type', ),
    0x0008: ('Flash Sync Mode', ),
    0x0009: ('Auto Flash Mode', ),
    0x000B: ('White Balance Fine', ),
    0x000C: ('White Balance RB Coefficients', ),
    0x000D: ('Program Shift', _ev),
    0x000E: ('Exposure Difference', _ev),
    0x000F: ('ISO Mode', ),
    0x0010: ('Data Dump', ),
    0x0011: ('Preview IFD', ),
    0x0012: ('Auto Flash Compensation', _ev),
    0x0013: ('ISO', ),
    0x0016: ('Image Boundary', ),
    0x0017: ('Flash Exposure Compensation', _ev),
    0x0018: ('Flash Bracket Compensation', _ev),
    0x0019: ('AE Bracket Compensation', ),
    0x001A: ('Flash Mode', ),
    0x001B: ('Crop High Speed', ),
    0x001C: ('Exposure Tuning', _ev),
    0x001D: ('Camera Serial Number', ),
    0x001E: ('Color Space', indexed('sRGB', 'Adobe RGB', base=1)),
    0x001F: ('VR Info', ),
    0x0020: ('Image Authentication', ),
    0x0021: ('Unknown 35', ),
    0x0022: ('Active D-Lighting', ACTIVE_D_LIGHTING),
    0x0023: ('Picture Control', ),
    0x0024: ('World Time', ),
    0x0025: ('ISO Info', ),
    0x0026: ('Unknown 36', ),
    0x0027: ('Unknown 37', ),
    0x0028: ('Unknown 38', ),
    0x0029: ('Unknown 39', ),
    0x002A: ('Vignette Control', VIGNETTE_CONTROL),
    0x002B: ('Unknown 40', ),
    0x002C: ('Unknown 41', ),
    0x002D: ('Unknown 42', ),
    0x002E: ('Unknown 43', ),
    0x002F: ('Unknown 44', ),
    0x0030: ('Unknown 45', ),
    0x0031: ('Unknown 46', ),
    0x0080: ('Image Adjustment', ),
    0x0081: ('Tone Compensation', ),
    0x0082: ('Adapter', ),
    0x0083: ('Lens Type', LENS_TYPE),
    0x0084: ('Lens', TagDescriptor.get_lens_specification_description),
    0x0085: ('Manual Focus Distance', ),
    0x0086: ('Digital Zoom', _digital_zoom),
    0x0087: ('Flash Used', FLASH_USED),
    0x0088: ('AF Focus Position', _af_focus_position),
    0x0089: ('Shooting Mode', SHOOTING_MODE),
    0x008A: ('Unknown 20', ),
    0x008B: ('Lens Stops', _ev),
    0x008C: ('Contrast Curve', ),
    0x008D: ('Colour Mode', _color_mode),
    0x008E: ('Unknown 47', ),
    0x008F: ('Scene Mode', ),
    0x0090: ('Light source', ),
    0x0091: ('Shot Info', ),
    0x0092: ('Camera Hue Adjustment', formatted_string('%s degrees')),
    0x0093: ('NEF Compression', NEF_COMPRESSION),
    0x0094: ('Saturation', ),
    0x0095: ('Noise Reduction', ),
    0x0096: ('Linearization Table', ),
    0x0097: ('Color Balance', ),
    0x0098: ('Lens Data', ),
    0x0099: ('NEF Thumbnail Size', ),
    0x009A: ('Sensor Pixel Size', ),
    0x009B: ('Unknown 10', ),
    0x009C: ('Scene Assist', ),
    0x009D: ('Unknown 11', ),
    0x009E: ('Retouch History', ),
    0x009F: ('Unknown 12', ),
    0x00A0: ('Camera Serial Number', ),
    0x00A2: ('Image Data Size', ),
    0x00A3: ('Unknown 27', ),
    0x00A4: ('Unknown 28', ),
    0x00A5: ('Image Count', ),
    0x00A6: ('Deleted Image Count', ),
    0x00A7: ('Exposure Sequence Number', ),
    0x00A8: ('Flash Info', ),
    0x00A9: ('Image Optimisation', ),
    0x00AA: ('Saturation', ),
    0x00AB: ('Digital Vari Program', ),
    0x00AC: ('Image Stabilisation', ),
    0x00AD: ('AF Response', ),
    0x00AE: ('Unknown 29', ),
    0x00AF: ('Unknown 30', ),
    0x00B0: ('Multi Exposure', ),
    0x00B1: ('High ISO Noise Reduction', HIGH_ISO_NOISE_REDUCTION),
    0x00B2: ('Unknown 31', ),
    0x00B3: ('Unknown 32', ),
    0x00B4: ('Unknown 33', ),
    0x00B5: ('Unknown 48', ),
    0x00B6: ('Power Up Time', _power_up_time),
    0x00B7: ('AF Info 2', ),
    0x00B8: ('File Info', ),
    0x00B9: ('AF Tune', ),
    0x00BB: ('Unknown 49', ),
    0x00BD: ('Unknown 50', ),
    0x0103: ('Unknown 51', ),
    0x0E00: ('Print IM', ),
    0x0E01: ('Nikon Capture Data', ),
    0x0E05: ('Unknown 52', ),
    0x0E08: ('Unknown 53', ),
    0x0E09: ('Nikon Capture Version', ),
    0x0E0E: ('Nikon Capture Offsets', ),
    0x0E10: ('Nikon Scan', ),
    0x0E19: ('Unknown 54', ),
    0x0E22: ('NEF Bit Depth', ),
    0x0E23: ('Unknown 55', ),
    # decrypted lens data, see expand_lens_data
    LENS_FOCUS_DISTANCE: ('Lens Focus Distance', _lens_focus_distance),
}


def expand_lens_data(directory):
    """
    Decrypt the lens data record and store its bytes as sub-tags.

    The key material (serial number, shutter count) is usually written after
    the lens data, so this can only happen once the whole IFD has been read.
    """
    if not directory.contains_tag(LENS_DATA):
        return
    values = get_decrypted_int_array(directory, LENS_DATA)
    if values is None:
        return
    expand_sub_tags(directory, LENS_DATA_OFFSET, values)


TYPE1 = MakernoteFormat('Nikon Makernote', TAGS_TYPE1)
TYPE2 = MakernoteFormat('Nikon Makernote', TAGS_TYPE2, post_processors=(expand_lens_data, ))
