"""
Makernote (proprietary) tag definitions for Olympus.

Also used for Epson, Agfa and Minolta, which share the layout. The Minolta
style camera settings (tags 0x0001 and 0x0003) are opaque blobs of big-endian
int32 values, split into synthetic tags from 0xF000.
"""

import datetime

from ... import arrays
from ...classes import MakernoteFormat
from ...descriptor import apex_to_f_stop, decimal_format, f_stop_description, focal_length_description, indexed, \
    version_bytes

CAMERA_SETTINGS_OFFSET = 0xF000
SHOOTING_MODE = CAMERA_SETTINGS_OFFSET + 7
INTERVAL_SHOOTING_MODE = 5


def _get_int(descriptor, tag):
    return descriptor.directory.get_int(tag)


def _apex_film_speed(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return decimal_format((value / 8.0 - 1) ** 2 * 3.125, 2)


def _apex_shutter_speed(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return decimal_format(((49 - value) / 8.0) ** 2, 3) + ' sec'


def _apex_aperture(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return f_stop_description((value / 16.0 - 0.5) ** 2)


def _ev_offset(offset, divisor):
    def describe(descriptor, tag):
        value = _get_int(descriptor, tag)
        if value is None:
            return None
        return '%s EV' % decimal_format((value - offset) / divisor, 2)
    return describe


def _is_interval_mode(directory):
    return directory.get_int(SHOOTING_MODE) == INTERVAL_SHOOTING_MODE


def _interval_length(descriptor, tag):
    if not _is_interval_mode(descriptor.directory):
        return 'N/A'
    return descriptor.get_formatted_int(tag, '%d min')


def _interval_number(descriptor, tag):
    if not _is_interval_mode(descriptor.directory):
        return 'N/A'
    return descriptor.get_formatted_int(tag, '%d')


def _camera_focal_length(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return focal_length_description(value / 256.0)


def _camera_focus_distance(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    if value == 0:
        return 'Infinity'
    return '%d mm' % value


def _date(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    day = value & 0xFF
    month = (value >> 16) & 0xFF
    year = ((value >> 8) & 0xFF) + 1970
    try:
        datetime.date(year, month + 1, day)
    except ValueError:
        return 'Invalid date'
    return '%04d-%02d-%02d' % (year, month + 1, day)


def _time(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    hours = (value >> 8) & 0xFF
    minutes = (value >> 16) & 0xFF
    seconds = value & 0xFF
    if hours > 23 or minutes > 59 or seconds > 59:
        return 'Invalid time'
    return '%02d:%02d:%02d' % (hours, minutes, seconds)


def _last_file_number(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    if value == 0:
        return 'File Number Memory Off'
    return str(value)


def _white_balance_factor(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return decimal_format(value / 256.0, 2)


def _minus_three(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return str(value - 3)


def _apex_brightness(descriptor, tag):
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    return decimal_format(value / 8.0 - 6, 2)


def _colour_matrix(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if not values:
        return None
    return ' '.join(str(value) for value in values)


def _wb_mode(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if values is None or len(values) < 2:
        return None
    return {
        (1, 0): 'Auto',
        (1, 2): 'Auto (2)',
        (1, 4): 'Auto (4)',
        (2, 2): '3000 Kelvin',
        (2, 3): '3700 Kelvin',
        (2, 4): '4000 Kelvin',
        (2, 5): '4500 Kelvin',
        (2, 6): '5500 Kelvin',
        (2, 7): '6500 Kelvin',
        (2, 8): '7500 Kelvin',
        (3, 0): 'One-touch',
    }.get((values[0], values[1]), 'Unknown %d %d' % (values[0], values[1]))


def _balance(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if not values:
        return None
    # signed 16 bit
    value = values[0] & 0xFFFF
    if value & 0x8000:
        value -= 0x10000
    return str(value / 256.0)


def _digital_zoom(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    return value.to_simple_string(False)


def _focal_plane_diagonal(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    return decimal_format(value.decimal(), 3) + ' mm'


def _camera_id(descriptor, tag):
    data = descriptor.directory.get_byte_array(tag)
    if data is None:
        return None
    return data.decode('latin-1')


def _iso_value(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    return str(int(round(2 ** (value.decimal() - 5) * 100)))


def _aperture_value(descriptor, tag):
    value = descriptor.directory.get_float(tag)
    if value is None:
        return None
    return f_stop_description(apex_to_f_stop(value))


def _jpeg_quality(descriptor, tag):
    camera_type = descriptor.directory.get_string(0x0207)
    if camera_type is None:
        return descriptor.get_indexed_description(tag, 1, 'Standard Quality', 'High Quality', 'Super High Quality')
    value = _get_int(descriptor, tag)
    if value is None:
        return None
    qualities = {
        0: 'Standard Quality (Low)',
        1: 'High Quality (Normal)',
        2: 'Super High Quality (Fine)',
    }
    if (camera_type.startswith('SX') and not camera_type.startswith('SX151')) or camera_type.startswith('D4322'):
        qualities[6] = 'RAW'
    else:
        qualities.update({
            4: 'RAW',
            5: 'Medium-Fine',
            6: 'Small-Fine',
            33: 'Uncompressed',
        })
    return qualities.get(value, 'Unknown (%d)' % value)


def _special_mode(descriptor, tag):
    values = descriptor.directory.get_int_array(tag)
    if values is None:
        return None
    if not values:
        return ''
    description = {
        0: 'Normal picture taking mode',
        2: 'Fast picture taking mode',
        3: 'Panorama picture taking mode',
    }.get(values[0], 'Unknown picture taking mode')
    if len(values) >= 2:
        sequence = values[1]
        if sequence == 1:
            description += ' / 1st in a sequence'
        elif sequence == 2:
            description += ' / 2nd in a sequence'
        elif sequence == 3:
            description += ' / 3rd in a sequence'
        elif sequence != 0:
            description += ' / %dth in a sequence' % sequence
    if len(values) >= 3:
        direction = {
            1: 'Left to right',
            2: 'Right to left',
            3: 'Bottom to top',
            4: 'Top to bottom',
        }.get(values[2])
        if direction:
            description += ' / %s panorama direction' % direction
    return description


TAGS = {
    0x0000: ('Makernote Version', version_bytes(2)),
    0x0001: ('Camera Settings', ),
    0x0003: ('Camera Settings', ),
    0x0040: ('Compressed Image Size', ),
    0x0081: ('Thumbnail Offset', ),
    0x0088: ('Thumbnail Offset', ),
    0x0089: ('Thumbnail Length', ),
    0x0100: ('Thumbnail Image', ),
    0x0101: ('Colour Mode', indexed('Natural Colour', 'Black & White', 'Vivid Colour', 'Solarization', 'AdobeRGB')),
    0x0102: ('Image Quality', indexed('Raw', 'Super Fine', 'Fine', 'Standard', 'Extra Fine')),
    0x0103: ('Image Quality', indexed('Raw', 'Super Fine', 'Fine', 'Standard', 'Extra Fine')),
    0x0104: ('Body Firmware Version', ),
    0x0200: ('Special Mode', _special_mode),
    0x0201: ('JPEG Quality', _jpeg_quality),
    0x0202: ('Macro', indexed('Normal (no macro)', 'Macro')),
    0x0203: ('BW Mode', indexed('Off', 'On')),
    0x0204: ('Digital Zoom', _digital_zoom),
    0x0205: ('Focal Plane Diagonal', _focal_plane_diagonal),
    0x0206: ('Lens Distortion Parameters', ),
    0x0207: ('Camera Type', ),
    0x0208: ('Pict Info', ),
    0x0209: ('Camera Id', _camera_id),
    0x020B: ('Image Width', ),
    0x020C: ('Image Height', ),
    0x020D: ('Original Manufacturer Model', ),
    0x0280: ('Preview Image', ),
    0x0300: ('Pre Capture Frames', ),
    0x0301: ('White Board', ),
    0x0302: ('One Touch WB', indexed('Off', 'On', 'On (Preset)')),
    0x0303: ('White Balance Bracket', ),
    0x0304: ('White Balance Bias', ),
    0x0403: ('Scene Mode', ),
    0x0404: ('Serial Number', ),
    0x0405: ('Firmware', ),
    0x0E00: ('Print Image Matching (PIM) Info', ),
    0x0F00: ('Data Dump', ),
    0x0F01: ('Data Dump 2', ),
    0x1000: ('Shutter Speed Value', ),
    0x1001: ('ISO Value', _iso_value),
    0x1002: ('Aperture Value', _aperture_value),
    0x1003: ('Brightness Value', ),
    0x1004: ('Flash Mode', indexed(None, None, 'On', 'Off')),
    0x1005: ('Flash Device', ),
    0x1006: ('Bracket', ),
    0x1007: ('Sensor Temperature', ),
    0x1008: ('Lens Temperature', ),
    0x1009: ('Light Condition', ),
    0x100A: ('Focus Range', indexed('Normal', 'Macro')),
    0x100B: ('Focus Mode', indexed('Auto', 'Manual')),
    0x100C: ('Focus Distance', ),
    0x100D: ('Zoom', ),
    0x100E: ('Macro Focus', ),
    0x100F: ('Sharpness', indexed('Normal', 'Hard', 'Soft')),
    0x1010: ('Flash Charge Level', ),
    0x1011: ('Colour Matrix', _colour_matrix),
    0x1012: ('Black Level', ),
    0x1013: ('Color Temperature BG', ),
    0x1014: ('Color Temperature RG', ),
    0x1015: ('White Balance Mode', _wb_mode),
    0x1017: ('Red Balance', _balance),
    0x1018: ('Blue Balance', _balance),
    0x1019: ('Color Matrix Number', ),
    0x101A: ('Serial Number', ),
    0x101B: ('External Flash AE1 0', ),
    0x101C: ('External Flash AE2 0', ),
    0x101D: ('Internal Flash AE1 0', ),
    0x101E: ('Internal Flash AE2 0', ),
    0x101F: ('External Flash AE1', ),
    0x1020: ('External Flash AE2', ),
    0x1021: ('Internal Flash AE1', ),
    0x1022: ('Internal Flash AE2', ),
    0x1023: ('Flash Bias', ),
    0x1024: ('Internal Flash Table', ),
    0x1025: ('External Flash G Value', ),
    0x1026: ('External Flash Bounce', ),
    0x1027: ('External Flash Zoom', ),
    0x1028: ('External Flash Mode', ),
    0x1029: ('Contrast', indexed('High', 'Normal', 'Low')),
    0x102A: ('Sharpness Factor', ),
    0x102B: ('Colour Control', ),
    0x102C: ('Valid Bits', ),
    0x102D: ('Coring Filter', ),
    0x102E: ('Olympus Image Width', ),
    0x102F: ('Olympus Image Height', ),
    0x1030: ('Scene Detect', ),
    0x1031: ('Scene Area', ),
    0x1033: ('Scene Detect Data', ),
    0x1034: ('Compression Ratio', ),
    0x1035: ('Preview Image Valid', indexed('No', 'Yes')),
    0x1036: ('Preview Image Start', ),
    0x1037: ('Preview Image Length', ),
    0x1038: ('AF Result', ),
    0x1039: ('CCD Scan Mode', ),
    0x103A: ('Noise Reduction', ),
    0x103B: ('Infinity Lens Step', ),
    0x103C: ('Near Lens Step', ),
    0x103D: ('Light Value Center', ),
    0x103E: ('Light Value Periphery', ),
    0x103F: ('Field Count', ),
    0x2010: ('Equipment', ),
    0x2020: ('Camera Settings', ),
    0x2030: ('Raw Development', ),
    0x2031: ('Raw Development 2', ),
    0x2040: ('Image Processing', ),
    0x2050: ('Focus Info', ),
    0x3000: ('Raw Info', ),
    0x4000: ('Main Info', ),

    # Minolta camera settings
    0xF002: ('Exposure Mode', indexed('P', 'A', 'S', 'M')),
    0xF003: ('Flash Mode', indexed('Normal', 'Red-eye reduction', 'Rear flash sync', 'Wireless')),
    0xF004: ('White Balance', indexed('Auto', 'Daylight', 'Cloudy', 'Tungsten', None, 'Custom', None, 'Fluorescent',
                                      'Fluorescent 2', None, None, 'Custom 2', 'Custom 3')),
    0xF005: ('Image Size', indexed('2560 x 1920', '1600 x 1200', '1280 x 960', '640 x 480')),
    0xF006: ('Image Quality', indexed('Raw', 'Super Fine', 'Fine', 'Standard', 'Economy', 'Extra Fine')),
    0xF007: ('Shooting Mode', indexed('Single', 'Continuous', 'Self Timer', None, 'Bracketing', 'Interval',
                                      'UHS Continuous', 'HS Continuous')),
    0xF008: ('Metering Mode', indexed('Multi-Segment', 'Centre Weighted', 'Spot')),
    0xF009: ('Apex Film Speed Value', _apex_film_speed),
    0xF00A: ('Apex Shutter Speed Time Value', _apex_shutter_speed),
    0xF00B: ('Apex Aperture Value', _apex_aperture),
    0xF00C: ('Macro Mode', indexed('Off', 'On')),
    0xF00D: ('Digital Zoom', indexed('Off', 'Electronic magnification', 'Digital zoom 2x')),
    0xF00E: ('Exposure Compensation', _ev_offset(6, 3.0)),
    0xF00F: ('Bracket Step', indexed('1/3 EV', '2/3 EV', '1 EV')),
    0xF011: ('Interval Length', _interval_length),
    0xF012: ('Interval Number', _interval_number),
    0xF013: ('Focal Length', _camera_focal_length),
    0xF014: ('Focus Distance', _camera_focus_distance),
    0xF015: ('Flash Fired', indexed('No', 'Yes')),
    0xF016: ('Date', _date),
    0xF017: ('Time', _time),
    0xF018: ('Max Aperture at Focal Length', _apex_aperture),
    0xF01B: ('File Number Memory', indexed('Off', 'On')),
    0xF01C: ('Last File Number', _last_file_number),
    0xF01D: ('White Balance Red', _white_balance_factor),
    0xF01E: ('White Balance Green', _white_balance_factor),
    0xF01F: ('White Balance Blue', _white_balance_factor),
    0xF020: ('Saturation', _minus_three),
    0xF021: ('Contrast', _minus_three),
    0xF022: ('Sharpness', indexed('Hard', 'Normal', 'Soft')),
    0xF023: ('Subject Program', indexed('None', 'Portrait', 'Text', 'Night Portrait', 'Sunset', 'Sports Action')),
    0xF024: ('Flash Compensation', _ev_offset(6, 3.0)),
    0xF025: ('ISO Setting', indexed('100', '200', '400', '800', 'Auto', '64')),
    0xF026: ('Camera Model', indexed('DiMAGE 7', 'DiMAGE 5', 'DiMAGE S304', 'DiMAGE S404', 'DiMAGE 7i',
                                     'DiMAGE 7Hi', 'DiMAGE A1', 'DiMAGE S414')),
    0xF027: ('Interval Mode', indexed('Still Image', 'Time Lapse Movie')),
    0xF028: ('Folder Name', indexed('Standard Form', 'Data Form')),
    0xF029: ('Color Mode', indexed('Natural Color', 'Black & White', 'Vivid Color', 'Solarization', 'AdobeRGB')),
    0xF02A: ('Color Filter', _minus_three),
    0xF02B: ('Black and White Filter', ),
    0xF02C: ('Internal Flash', indexed('Did Not Fire', 'Fired')),
    0xF02D: ('Apex Brightness Value', _apex_brightness),
    0xF02E: ('Spot Focus Point X Coordinate', ),
    0xF02F: ('Spot Focus Point Y Coordinate', ),
    0xF030: ('Wide Focus Zone', indexed('No Zone or AF Failed', 'Center Zone (Horizontal Orientation)',
                                        'Center Zone (Vertical Orientation)', 'Left Zone', 'Right Zone')),
    0xF031: ('Focus Mode', indexed('Auto Focus', 'Manual Focus')),
    0xF032: ('Focus Area', indexed('Wide Focus (Normal)', 'Spot Focus')),
    0xF033: ('DEC Switch Position', indexed('Exposure', 'Contrast', 'Saturation', 'Filter')),
}

ARRAY_TAGS = {
    0x0001: arrays.big_endian_ints(CAMERA_SETTINGS_OFFSET),
    0x0003: arrays.big_endian_ints(CAMERA_SETTINGS_OFFSET),
}

MAKERNOTE = MakernoteFormat('Olympus Makernote', TAGS, ARRAY_TAGS)
