"""
Makernote (proprietary) tag definitions for Canon.

Most of the interesting values are packed into short arrays (camera settings,
focal length, shot info, panorama, AF info). These are split into synthetic
tags at 0xC100, 0xC200, 0xC400, 0xC500 and 0xD200 while the makernote is
read, see ``ARRAY_TAGS``.
"""

from ... import arrays
from ...classes import MakernoteFormat
from ...descriptor import apex_to_f_stop, decimal_format, decode_canon_ev, f_stop_description, indexed

CAMERA_SETTINGS_OFFSET = 0xC100
FOCAL_LENGTH_OFFSET = 0xC200
SHOT_INFO_OFFSET = 0xC400
PANORAMA_OFFSET = 0xC500
AF_INFO_OFFSET = arrays.AF_INFO_OFFSET

SELF_TIMER_DELAY = CAMERA_SETTINGS_OFFSET + 0x02
FOCAL_UNITS_PER_MM = CAMERA_SETTINGS_OFFSET + 0x19

LENS_TYPES = {
    1: 'Canon EF 50mm f/1.8',
    2: 'Canon EF 28mm f/2.8',
    3: 'Canon EF 135mm f/2.8 Soft',
    4: 'Canon EF 35-105mm f/3.5-4.5 or Sigma Lens',
    5: 'Canon EF 35-70mm f/3.5-4.5',
    6: 'Canon EF 28-70mm f/3.5-4.5 or Sigma or Tokina Lens',
    7: 'Canon EF 100-300mm f/5.6L',
    8: 'Canon EF 100-300mm f/5.6 or Sigma or Tokina Lens',
    9: 'Canon EF 70-210mm f/4',
    10: 'Canon EF 50mm f/2.5 Macro or Sigma Lens',
    11: 'Canon EF 35mm f/2',
    13: 'Canon EF 15mm f/2.8 Fisheye',
    14: 'Canon EF 50-200mm f/3.5-4.5L',
    15: 'Canon EF 50-200mm f/3.5-4.5',
    16: 'Canon EF 35-135mm f/3.5-4.5',
    17: 'Canon EF 35-70mm f/3.5-4.5A',
    18: 'Canon EF 28-70mm f/3.5-4.5',
    20: 'Canon EF 100-200mm f/4.5A',
    21: 'Canon EF 80-200mm f/2.8L',
    22: 'Canon EF 20-35mm f/2.8L or Tokina Lens',
    23: 'Canon EF 35-105mm f/3.5-4.5',
    24: 'Canon EF 35-80mm f/4-5.6 Power Zoom',
    25: 'Canon EF 35-80mm f/4-5.6 Power Zoom',
    26: 'Canon EF 100mm f/2.8 Macro or Other Lens',
    27: 'Canon EF 35-80mm f/4-5.6',
    28: 'Canon EF 80-200mm f/4.5-5.6 or Tamron Lens',
    29: 'Canon EF 50mm f/1.8 II',
    30: 'Canon EF 35-105mm f/4.5-5.6',
    31: 'Canon EF 75-300mm f/4-5.6 or Tamron Lens',
    32: 'Canon EF 24mm f/2.8 or Sigma Lens',
    33: 'Voigtlander or Carl Zeiss Lens',
    35: 'Canon EF 35-80mm f/4-5.6',
    36: 'Canon EF 38-76mm f/4.5-5.6',
    37: 'Canon EF 35-80mm f/4-5.6 or Tamron Lens',
    38: 'Canon EF 80-200mm f/4.5-5.6',
    39: 'Canon EF 75-300mm f/4-5.6',
    40: 'Canon EF 28-80mm f/3.5-5.6',
    41: 'Canon EF 28-90mm f/4-5.6',
    42: 'Canon EF 28-200mm f/3.5-5.6 or Tamron Lens',
    43: 'Canon EF 28-105mm f/4-5.6',
    44: 'Canon EF 90-300mm f/4.5-5.6',
    45: 'Canon EF-S 18-55mm f/3.5-5.6 [II]',
    46: 'Canon EF 28-90mm f/4-5.6',
    47: 'Zeiss Milvus 35mm f/2 or 50mm f/2',
    48: 'Canon EF-S 18-55mm f/3.5-5.6 IS',
    49: 'Canon EF-S 55-250mm f/4-5.6 IS',
    50: 'Canon EF-S 18-200mm f/3.5-5.6 IS',
    51: 'Canon EF-S 18-135mm f/3.5-5.6 IS',
    52: 'Canon EF-S 18-55mm f/3.5-5.6 IS II',
    53: 'Canon EF-S 18-55mm f/3.5-5.6 III',
    54: 'Canon EF-S 55-250mm f/4-5.6 IS II',
    94: 'Canon TS-E 17mm f/4L',
    95: 'Canon TS-E 24.0mm f/3.5 L II',
    124: 'Canon MP-E 65mm f/2.8 1-5x Macro Photo',
    125: 'Canon TS-E 24mm f/3.5L',
    126: 'Canon TS-E 45mm f/2.8',
    127: 'Canon TS-E 90mm f/2.8',
    129: 'Canon EF 300mm f/2.8L',
    130: 'Canon EF 50mm f/1.0L',
    131: 'Canon EF 28-80mm f/2.8-4L or Sigma Lens',
    132: 'Canon EF 1200mm f/5.6L',
    134: 'Canon EF 600mm f/4L IS',
    135: 'Canon EF 200mm f/1.8L',
    136: 'Canon EF 300mm f/2.8L',
    137: 'Canon EF 85mm f/1.2L or Sigma or Tamron Lens',
    138: 'Canon EF 28-80mm f/2.8-4L',
    139: 'Canon EF 400mm f/2.8L',
    140: 'Canon EF 500mm f/4.5L',
    141: 'Canon EF 500mm f/4.5L',
    142: 'Canon EF 300mm f/2.8L IS',
    143: 'Canon EF 500mm f/4L IS or Sigma Lens',
    144: 'Canon EF 35-135mm f/4-5.6 USM',
    145: 'Canon EF 100-300mm f/4.5-5.6 USM',
    146: 'Canon EF 70-210mm f/3.5-4.5 USM',
    147: 'Canon EF 35-135mm f/4-5.6 USM',
    148: 'Canon EF 28-80mm f/3.5-5.6 USM',
    149: 'Canon EF 100mm f/2 USM',
    150: 'Canon EF 14mm f/2.8L or Sigma Lens',
    151: 'Canon EF 200mm f/2.8L',
    152: 'Canon EF 300mm f/4L IS or Sigma Lens',
    153: 'Canon EF 35-350mm f/3.5-5.6L or Sigma or Tamron Lens',
    154: 'Canon EF 20mm f/2.8 USM or Zeiss Lens',
    155: 'Canon EF 85mm f/1.8 USM',
    156: 'Canon EF 28-105mm f/3.5-4.5 USM or Tamron Lens',
    160: 'Canon EF 20-35mm f/3.5-4.5 USM or Tamron or Tokina Lens',
    161: 'Canon EF 28-70mm f/2.8L or Sigma or Tamron Lens',
    162: 'Canon EF 200mm f/2.8L',
    163: 'Canon EF 300mm f/4L',
    164: 'Canon EF 400mm f/5.6L',
    165: 'Canon EF 70-200mm f/2.8 L',
    166: 'Canon EF 70-200mm f/2.8 L + 1.4x',
    167: 'Canon EF 70-200mm f/2.8 L + 2x',
    168: 'Canon EF 28mm f/1.8 USM or Sigma Lens',
    169: 'Canon EF 17-35mm f/2.8L or Sigma Lens',
    170: 'Canon EF 200mm f/2.8L II',
    171: 'Canon EF 300mm f/4L',
    172: 'Canon EF 400mm f/5.6L or Sigma Lens',
    173: 'Canon EF 180mm Macro f/3.5L or Sigma Lens',
    174: 'Canon EF 135mm f/2L or Other Lens',
    175: 'Canon EF 400mm f/2.8L',
    176: 'Canon EF 24-85mm f/3.5-4.5 USM',
    177: 'Canon EF 300mm f/4L IS',
    178: 'Canon EF 28-135mm f/3.5-5.6 IS',
    179: 'Canon EF 24mm f/1.4L',
    180: 'Canon EF 35mm f/1.4L or Other Lens',
    181: 'Canon EF 100-400mm f/4.5-5.6L IS + 1.4x or Sigma Lens',
    182: 'Canon EF 100-400mm f/4.5-5.6L IS + 2x or Sigma Lens',
    183: 'Canon EF 100-400mm f/4.5-5.6L IS or Sigma Lens',
    184: 'Canon EF 400mm f/2.8L + 2x',
    185: 'Canon EF 600mm f/4L IS',
    186: 'Canon EF 70-200mm f/4L',
    187: 'Canon EF 70-200mm f/4L + 1.4x',
    188: 'Canon EF 70-200mm f/4L + 2x',
    189: 'Canon EF 70-200mm f/4L + 2.8x',
    190: 'Canon EF 100mm f/2.8 Macro USM',
    191: 'Canon EF 400mm f/4 DO IS',
    193: 'Canon EF 35-80mm f/4-5.6 USM',
    194: 'Canon EF 80-200mm f/4.5-5.6 USM',
    195: 'Canon EF 35-105mm f/4.5-5.6 USM',
    196: 'Canon EF 75-300mm f/4-5.6 USM',
    197: 'Canon EF 75-300mm f/4-5.6 IS USM',
    198: 'Canon EF 50mm f/1.4 USM or Zeiss Lens',
    199: 'Canon EF 28-80mm f/3.5-5.6 USM',
    200: 'Canon EF 75-300mm f/4-5.6 USM',
    201: 'Canon EF 28-80mm f/3.5-5.6 USM',
    202: 'Canon EF 28-80mm f/3.5-5.6 USM IV',
    208: 'Canon EF 22-55mm f/4-5.6 USM',
    209: 'Canon EF 55-200mm f/4.5-5.6',
    210: 'Canon EF 28-90mm f/4-5.6 USM',
    211: 'Canon EF 28-200mm f/3.5-5.6 USM',
    212: 'Canon EF 28-105mm f/4-5.6 USM',
    213: 'Canon EF 90-300mm f/4.5-5.6 USM or Tamron Lens',
    214: 'Canon EF-S 18-55mm f/3.5-5.6 USM',
    215: 'Canon EF 55-200mm f/4.5-5.6 II USM',
    217: 'Tamron AF 18-270mm f/3.5-6.3 Di II VC PZD',
    224: 'Canon EF 70-200mm f/2.8L IS',
    225: 'Canon EF 70-200mm f/2.8L IS + 1.4x',
    226: 'Canon EF 70-200mm f/2.8L IS + 2x',
    227: 'Canon EF 70-200mm f/2.8L IS + 2.8x',
    228: 'Canon EF 28-105mm f/3.5-4.5 USM',
    229: 'Canon EF 16-35mm f/2.8L',
    230: 'Canon EF 24-70mm f/2.8L',
    231: 'Canon EF 17-40mm f/4L',
    232: 'Canon EF 70-300mm f/4.5-5.6 DO IS USM',
    233: 'Canon EF 28-300mm f/3.5-5.6L IS',
    234: 'Canon EF-S 17-85mm f/4-5.6 IS USM or Tokina Lens',
    235: 'Canon EF-S 10-22mm f/3.5-4.5 USM',
    236: 'Canon EF-S 60mm f/2.8 Macro USM',
    237: 'Canon EF 24-105mm f/4L IS',
    238: 'Canon EF 70-300mm f/4-5.6 IS USM',
    239: 'Canon EF 85mm f/1.2L II',
    240: 'Canon EF-S 17-55mm f/2.8 IS USM',
    241: 'Canon EF 50mm f/1.2L',
    242: 'Canon EF 70-200mm f/4L IS',
    243: 'Canon EF 70-200mm f/4L IS + 1.4x',
    244: 'Canon EF 70-200mm f/4L IS + 2x',
    245: 'Canon EF 70-200mm f/4L IS + 2.8x',
    246: 'Canon EF 16-35mm f/2.8L II',
    247: 'Canon EF 14mm f/2.8L II USM',
    248: 'Canon EF 200mm f/2L IS or Sigma Lens',
    249: 'Canon EF 800mm f/5.6L IS',
    250: 'Canon EF 24mm f/1.4L II or Sigma Lens',
    251: 'Canon EF 70-200mm f/2.8L IS II USM',
    252: 'Canon EF 70-200mm f/2.8L IS II USM + 1.4x',
    253: 'Canon EF 70-200mm f/2.8L IS II USM + 2x',
    254: 'Canon EF 100mm f/2.8L Macro IS USM',
    255: 'Sigma 24-105mm f/4 DG OS HSM | A or Other Sigma Lens',
    488: 'Canon EF-S 15-85mm f/3.5-5.6 IS USM',
    489: 'Canon EF 70-300mm f/4-5.6L IS USM',
    490: 'Canon EF 8-15mm f/4L Fisheye USM',
    491: 'Canon EF 300mm f/2.8L IS II USM',
    492: 'Canon EF 400mm f/2.8L IS II USM',
    493: 'Canon EF 500mm f/4L IS II USM or EF 24-105mm f4L IS USM',
    494: 'Canon EF 600mm f/4.0L IS II USM',
    495: 'Canon EF 24-70mm f/2.8L II USM',
    496: 'Canon EF 200-400mm f/4L IS USM',
    499: 'Canon EF 200-400mm f/4L IS USM + 1.4x',
    502: 'Canon EF 28mm f/2.8 IS USM',
    503: 'Canon EF 24mm f/2.8 IS USM',
    504: 'Canon EF 24-70mm f/4L IS USM',
    505: 'Canon EF 35mm f/2 IS USM',
    506: 'Canon EF 400mm f/4 DO IS II USM',
    507: 'Canon EF 16-35mm f/4L IS USM',
    508: 'Canon EF 11-24mm f/4L USM',
    747: 'Canon EF 100-400mm f/4.5-5.6L IS II USM',
    750: 'Canon EF 35mm f/1.4L II USM',
    4142: 'Canon EF-S 18-135mm f/3.5-5.6 IS STM',
    4143: 'Canon EF-M 18-55mm f/3.5-5.6 IS STM or Tamron Lens',
    4144: 'Canon EF 40mm f/2.8 STM',
    4145: 'Canon EF-M 22mm f/2 STM',
    4146: 'Canon EF-S 18-55mm f/3.5-5.6 IS STM',
    4147: 'Canon EF-M 11-22mm f/4-5.6 IS STM',
    4148: 'Canon EF-S 55-250mm f/4-5.6 IS STM',
    4149: 'Canon EF-M 55-200mm f/4.5-6.3 IS STM',
    4150: 'Canon EF-S 10-18mm f/4.5-5.6 IS STM',
    4152: 'Canon EF 24-105mm f/3.5-5.6 IS STM',
    4153: 'Canon EF-M 15-45mm f/3.5-6.3 IS STM',
    4154: 'Canon EF-S 24mm f/2.8 STM',
    4156: 'Canon EF 50mm f/1.8 STM',
    36912: 'Canon EF-S 18-135mm f/3.5-5.6 IS USM',
    65535: 'N/A',
}


def _serial_number(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    return '%04X%05d' % ((value >> 8) & 0xFF, value & 0xFF)


def _low_normal_high(descriptor, tag):
    return descriptor.get_mapped_description(tag, {
        0xFFFF: 'Low',
        0x0000: 'Normal',
        0x0001: 'High',
    })


def _self_timer_delay(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value == 0:
        return 'Self timer not used'
    return '%s sec' % decimal_format(value * 0.1, 2)


def _continuous_drive_mode(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value == 0:
        delay = descriptor.directory.get_int(SELF_TIMER_DELAY)
        if delay is None:
            return 'Continuous'
        return 'Single shot' if delay == 0 else 'Single shot with self-timer'
    if value == 1:
        return 'Continuous'
    return 'Unknown (%d)' % value


def _iso(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    # set when the value is the ISO speed itself
    if value & 0x4000:
        return str(value & ~0x4000)
    return {
        0: 'Not specified (see ISOSpeedRatings tag)',
        15: 'Auto',
        16: '50',
        17: '100',
        18: '200',
        19: '400',
    }.get(value, 'Unknown (%d)' % value)


def _lens_type(descriptor, tag):
    return descriptor.get_mapped_description(tag, LENS_TYPES)


def _focal_units(directory):
    value = directory.get_int(FOCAL_UNITS_PER_MM)
    if value is None:
        return None
    return str(value) if value != 0 else ''


def _focal_units_per_mm(descriptor, tag):
    return _focal_units(descriptor.directory)


def _focal_length(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    return '%d %s' % (value, _focal_units(descriptor.directory))


def _aperture(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value > 512:
        return 'Unknown (%d)' % value
    return f_stop_description(apex_to_f_stop(decode_canon_ev(value)))


def _flash_details(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value >> 14 & 1:
        return 'External E-TTL'
    if value >> 13 & 1:
        return 'Internal flash'
    if value >> 11 & 1:
        return 'FP sync used'
    if value >> 4 & 1:
        return 'FP sync enabled'
    return 'Unknown (%d)' % value


def _display_aperture(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value == 0xFFFF:
        return str(value)
    return f_stop_description(value / 10.0)


def _color_tone(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    if value == 0x7FFF:
        return 'n/a'
    return str(value)


def _af_point_used(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    return {
        0: 'Right',
        1: 'Centre',
        2: 'Left',
    }.get(value & 0x7, 'Unknown (%d)' % value)


def _flash_bias(descriptor, tag):
    value = descriptor.directory.get_int(tag)
    if value is None:
        return None
    sign = ''
    # two's complement of a 16 bit value
    if value > 0xF000:
        sign = '-'
        value = 0xFFFF - value + 1
    return '%s%s EV' % (sign, value / 32.0)


def _af_points_in_focus(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if values is None:
        return None
    points = []
    for i, value in enumerate(values):
        for bit in range(16):
            if value & (1 << bit):
                points.append(str(i * 16 + bit))
    if not points:
        return 'None'
    return ','.join(points)


TAGS = {
    0x0001: ('Camera Settings', ),
    0x0002: ('Focal Length', ),
    0x0004: ('Shot Info', ),
    0x0005: ('Panorama', ),
    0x0006: ('Image Type', ),
    0x0007: ('Firmware Version', ),
    0x0008: ('Image Number', ),
    0x0009: ('Owner Name', ),
    0x000C: ('Camera Serial Number', _serial_number),
    0x000D: ('Camera Info Array', ),
    0x000E: ('File Length', ),
    0x000F: ('Custom Functions', ),
    0x0010: ('Canon Model ID', ),
    0x0011: ('Movie Info Array', ),
    0x0012: ('AF Info', ),
    0x0013: ('Thumbnail Image Valid Area', ),
    0x0015: ('Serial Number Format', ),
    0x001A: ('Super Macro', ),
    0x001C: ('Date Stamp Mode', ),
    0x001D: ('My Colors', ),
    0x001E: ('Firmware Revision', ),
    0x0023: ('Categories', ),
    0x0024: ('Face Detect Array 1', ),
    0x0025: ('Face Detect Array 2', ),
    0x0026: ('AF Info Array 2', ),
    0x0028: ('Image Unique ID', ),
    0x0081: ('Raw Data Offset', ),
    0x0083: ('Original Decision Data Offset', ),
    0x0090: ('Custom Functions (1D) Array', ),
    0x0091: ('Personal Functions Array', ),
    0x0092: ('Personal Function Values Array', ),
    0x0093: ('File Info Array', ),
    0x0094: ('AF Points in Focus (1D)', ),
    0x0095: ('Lens Model', ),
    0x0096: ('Serial Info Array', ),
    0x0097: ('Dust Removal Data', ),
    0x0098: ('Crop Info', ),
    0x0099: ('Custom Functions Array 2', ),
    0x009A: ('Aspect Information Array', ),
    0x00A0: ('Processing Information Array', ),
    0x00A1: ('Tone Curve Table', ),
    0x00A2: ('Sharpness Table', ),
    0x00A3: ('Sharpness Frequency Table', ),
    0x00A4: ('White Balance Table', ),
    0x00A9: ('Color Balance Array', ),
    0x00AA: ('Measured Color Array', ),
    0x00AE: ('Color Temperature', ),
    0x00B0: ('Canon Flags Array', ),
    0x00B1: ('Modified Information Array', ),
    0x00B2: ('Tone Curve Matching', ),
    0x00B3: ('White Balance Matching', ),
    0x00B4: ('Color Space', ),
    0x00B6: ('Preview Image Info Array', ),
    0x00D0: ('VRD Offset', ),
    0x00E0: ('Sensor Information Array', ),
    0x4001: ('Color Data Array 1', ),
    0x4002: ('CRW Parameters', ),
    0x4003: ('Color Data Array 2', ),
    0x4008: ('Black Level', ),
    0x4010: ('Custom Picture Style File Name', ),
    0x4013: ('Color Info Array', ),
    0x4015: ('Vignetting Correction Array 1', ),
    0x4016: ('Vignetting Correction Array 2', ),
    0x4018: ('Lighting Optimizer Array', ),
    0x4019: ('Lens Info Array', ),
    0x4020: ('Ambiance Info Array', ),
    0x4024: ('Filter Info Array', ),

    # camera settings
    0xC101: ('Macro Mode', indexed('Macro', 'Normal', base=1)),
    0xC102: ('Self Timer Delay', _self_timer_delay),
    0xC103: ('Quality', indexed('Normal', 'Fine', None, 'Superfine', base=2)),
    0xC104: ('Flash Mode', {
        0: 'No flash fired',
        1: 'Auto',
        2: 'On',
        3: 'Red-eye reduction',
        4: 'Slow-synchro',
        5: 'Auto and red-eye reduction',
        6: 'On and red-eye reduction',
        16: 'External flash',  # not set on D30
    }),
    0xC105: ('Continuous Drive Mode', _continuous_drive_mode),
    0xC106: ('Unknown Camera Setting 2', ),
    0xC107: ('Focus Mode', indexed('One-shot', 'AI Servo', 'AI Focus', 'Manual Focus', 'Single', 'Continuous',
                                   'Manual Focus')),
    0xC108: ('Unknown Camera Setting 3', ),
    0xC109: ('Record Mode', indexed('JPEG', 'CRW+THM', 'AVI+THM', 'TIF', 'TIF+JPEG', 'CR2', 'CR2+JPEG', None, 'MOV',
                                    'MP4', base=1)),
    0xC10A: ('Image Size', indexed('Large', 'Medium', 'Small')),
    0xC10B: ('Easy Shooting Mode', indexed('Full auto', 'Manual', 'Landscape', 'Fast shutter', 'Slow shutter',
                                           'Night', 'B&W', 'Sepia', 'Portrait', 'Sports', 'Macro / Closeup',
                                           'Pan focus')),
    0xC10C: ('Digital Zoom', indexed('No digital zoom', '2x', '4x')),
    0xC10D: ('Contrast', _low_normal_high),
    0xC10E: ('Saturation', _low_normal_high),
    0xC10F: ('Sharpness', _low_normal_high),
    0xC110: ('Iso', _iso),
    0xC111: ('Metering Mode', indexed('Evaluative', 'Partial', 'Centre weighted', base=3)),
    0xC112: ('Focus Type', {
        0: 'Manual',
        1: 'Auto',
        3: 'Close-up (Macro)',
        8: 'Locked (Pan Mode)',
    }),
    0xC113: ('AF Point Selected', indexed('None (MF)', 'Auto selected', 'Right', 'Centre', 'Left', base=0x3000)),
    0xC114: ('Exposure Mode', indexed('Easy shooting', 'Program', 'Tv-priority', 'Av-priority', 'Manual', 'A-DEP')),
    0xC115: ('Unknown Camera Setting 7', ),
    0xC116: ('Lens Type', _lens_type),
    0xC117: ('Long Focal Length', _focal_length),
    0xC118: ('Short Focal Length', _focal_length),
    0xC119: ('Focal Units per mm', _focal_units_per_mm),
    0xC11A: ('Max Aperture', _aperture),
    0xC11B: ('Min Aperture', _aperture),
    0xC11C: ('Flash Activity', indexed('Flash did not fire', 'Flash fired')),
    0xC11D: ('Flash Details', _flash_details),
    0xC11E: ('Focus Continuous', indexed('Single', 'Continuous', None, None, None, None, None, None, 'Manual')),
    0xC11F: ('AE Setting', indexed('Normal AE', 'Exposure Compensation', 'AE Lock', 'AE Lock + Exposure Comp.',
                                   'No AE')),
    0xC120: ('Focus Mode', indexed('Single', 'Continuous')),
    0xC121: ('Display Aperture', _display_aperture),
    0xC122: ('Zoom Source Width', ),
    0xC123: ('Zoom Target Width', ),
    0xC125: ('Spot Metering Mode', indexed('Center', 'AF Point')),
    0xC126: ('Photo Effect', {
        0: 'Off',
        1: 'Vivid',
        2: 'Neutral',
        3: 'Smooth',
        4: 'Sepia',
        5: 'B&W',
        6: 'Custom',
        100: 'My Color Data',
    }),
    0xC127: ('Manual Flash Output', {
        0: 'n/a',
        0x500: 'Full',
        0x502: 'Medium',
        0x504: 'Low',
        0x7FFF: 'n/a',  # EOS models
    }),
    0xC129: ('Color Tone', _color_tone),
    0xC12D: ('SRAW Quality', indexed('n/a', 'sRAW1 (mRAW)', 'sRAW2 (sRAW)')),

    # focal length
    0xC207: ('White Balance', indexed('Auto', 'Sunny', 'Cloudy', 'Tungsten', 'Florescent', 'Flash', 'Custom')),
    0xC209: ('Sequence Number', ),
    0xC20E: ('AF Point Used', _af_point_used),
    0xC20F: ('Flash Bias', _flash_bias),
    0xC210: ('Auto Exposure Bracketing', ),
    0xC211: ('AEB Bracket Value', ),
    0xC213: ('Subject Distance', ),

    # shot info
    0xC401: ('Auto ISO', ),
    0xC402: ('Base ISO', ),
    0xC403: ('Measured EV', ),
    0xC404: ('Target Aperture', ),
    0xC405: ('Target Exposure Time', ),
    0xC406: ('Exposure Compensation', ),
    0xC407: ('White Balance', ),
    0xC408: ('Slow Shutter', ),
    0xC409: ('Sequence Number', ),
    0xC40A: ('Optical Zoom Code', ),
    0xC40C: ('Camera Temperature', ),
    0xC40D: ('Flash Guide Number', ),
    0xC40E: ('AF Points in Focus', ),
    0xC40F: ('Flash Exposure Compensation', ),
    0xC410: ('Auto Exposure Bracketing', ),
    0xC411: ('AEB Bracket Value', ),
    0xC412: ('Control Mode', ),
    0xC413: ('Focus Distance Upper', ),
    0xC414: ('Focus Distance Lower', ),
    0xC415: ('F Number', ),
    0xC416: ('Exposure Time', ),
    0xC417: ('Measured EV 2', ),
    0xC418: ('Bulb Duration', ),
    0xC41A: ('Camera Type', ),
    0xC41B: ('Auto Rotate', ),
    0xC41C: ('ND Filter', ),
    0xC41D: ('Self Timer 2', ),
    0xC421: ('Flash Output', ),

    # panorama
    0xC502: ('Panorama Frame Number', ),
    0xC505: ('Panorama Direction', ),

    # AF info
    0xD200: ('AF Point Count', ),
    0xD201: ('Valid AF Point Count', ),
    0xD202: ('Image Width', ),
    0xD203: ('Image Height', ),
    0xD204: ('AF Image Width', ),
    0xD205: ('AF Image Height', ),
    0xD206: ('AF Area Width', ),
    0xD207: ('AF Area Height', ),
    0xD208: ('AF Area X Positions', ),
    0xD209: ('AF Area Y Positions', ),
    0xD20A: ('AF Points in Focus', _af_points_in_focus),
    0xD20B: ('Primary AF Point 1', ),
    0xD20C: ('Primary AF Point 2', ),
}

ARRAY_TAGS = {
    0x0001: arrays.sub_tags(CAMERA_SETTINGS_OFFSET),
    0x0002: arrays.sub_tags(FOCAL_LENGTH_OFFSET),
    0x0004: arrays.sub_tags(SHOT_INFO_OFFSET),
    0x0005: arrays.sub_tags(PANORAMA_OFFSET),
    0x0012: arrays.canon_af_info,
}

MAKERNOTE = MakernoteFormat('Canon Makernote', TAGS, ARRAY_TAGS)
