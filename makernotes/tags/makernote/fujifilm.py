"""
Makernote (proprietary) tag definitions for Fujifilm.

The IFD offset is stored little-endian at byte 8 of the "FUJIFILM" header and
every offset inside the makernote is relative to the makernote start.
"""

from ...classes import MakernoteFormat
from ...descriptor import indexed, version_bytes


def _flash_strength(descriptor, tag):
    value = descriptor.directory.get_rational(tag)
    if value is None:
        return None
    return '%s EV (Apex)' % value.to_simple_string(False)


TAGS = {
    0x0000: ('Makernote Version', version_bytes(2)),
    0x0010: ('Serial Number', ),
    0x1000: ('Quality', ),
    0x1001: ('Sharpness', {
        1: 'Softest',
        2: 'Soft',
        3: 'Normal',
        4: 'Hard',
        5: 'Hardest',
        0x82: 'Medium Soft',
        0x84: 'Medium Hard',
        0x8000: 'Film Simulation',
        0xFFFF: 'N/A',
    }),
    0x1002: ('White Balance', {
        0x000: 'Auto',
        0x100: 'Daylight',
        0x200: 'Cloudy',
        0x300: 'Daylight Fluorescent',
        0x301: 'Day White Fluorescent',
        0x302: 'White Fluorescent',
        0x303: 'Warm White Fluorescent',
        0x304: 'Living Room Warm White Fluorescent',
        0x400: 'Incandescence',
        0x500: 'Flash',
        0xF00: 'Custom White Balance',
        0xF01: 'Custom White Balance 2',
        0xF02: 'Custom White Balance 3',
        0xF03: 'Custom White Balance 4',
        0xF04: 'Custom White Balance 5',
        0xFF0: 'Kelvin',
    }),
    0x1003: ('Color Saturation', {
        0x000: 'Normal',
        0x080: 'Medium High',
        0x100: 'High',
        0x180: 'Medium Low',
        0x200: 'Low',
        0x300: 'None (B&W)',
        0x301: 'B&W Green Filter',
        0x302: 'B&W Yellow Filter',
        0x303: 'B&W Blue Filter',
        0x304: 'B&W Sepia',
        0x8000: 'Film Simulation',
    }),
    0x1004: ('Tone (Contrast)', {
        0x000: 'Normal',
        0x080: 'Medium High',
        0x100: 'High',
        0x180: 'Medium Low',
        0x200: 'Low',
        0x300: 'None (B&W)',
        0x8000: 'Film Simulation',
    }),
    0x1005: ('Color Temperature', ),
    0x1006: ('Contrast', {
        0x000: 'Normal',
        0x100: 'High',
        0x300: 'Low',
    }),
    0x100A: ('White Balance Fine Tune', ),
    0x100B: ('Noise Reduction', {
        0x040: 'Low',
        0x080: 'Normal',
        0x100: 'N/A',
    }),
    0x100E: ('High ISO Noise Reduction', {
        0x000: 'Normal',
        0x100: 'Strong',
        0x200: 'Weak',
    }),
    0x1010: ('Flash Mode', indexed('Auto', 'On', 'Off', 'Red-eye Reduction', 'External')),
    0x1011: ('Flash Strength', _flash_strength),
    0x1020: ('Macro', indexed('Off', 'On')),
    0x1021: ('Focus Mode', indexed('Auto Focus', 'Manual Focus')),
    0x1023: ('Focus Pixel', ),
    0x1030: ('Slow Sync', indexed('Off', 'On')),
    0x1031: ('Picture Mode', {
        0x000: 'Auto',
        0x001: 'Portrait scene',
        0x002: 'Landscape scene',
        0x003: 'Macro',
        0x004: 'Sports scene',
        0x005: 'Night scene',
        0x006: 'Program AE',
        0x007: 'Natural Light',
        0x008: 'Anti-blur',
        0x009: 'Beach & Snow',
        0x00A: 'Sunset',
        0x00B: 'Museum',
        0x00C: 'Party',
        0x00D: 'Flower',
        0x00E: 'Text',
        0x00F: 'Natural Light & Flash',
        0x010: 'Beach',
        0x011: 'Snow',
        0x012: 'Fireworks',
        0x013: 'Underwater',
        0x014: 'Portrait with Skin Correction',
        0x016: 'Panorama',
        0x017: 'Night (Tripod)',
        0x018: 'Pro Low-light',
        0x019: 'Pro Focus',
        0x01B: 'Dog Face Detection',
        0x01C: 'Cat Face Detection',
        0x100: 'Aperture priority AE',
        0x200: 'Shutter priority AE',
        0x300: 'Manual exposure',
    }),
    0x1033: ('EXR Auto', indexed('Auto', 'Manual')),
    0x1034: ('EXR Mode', {
        0x100: 'HR (High Resolution)',
        0x200: 'SN (Signal to Noise Priority)',
        0x300: 'DR (Dynamic Range Priority)',
    }),
    0x1100: ('Auto Bracketing', indexed('Off', 'On', 'No Flash & Flash')),
    0x1101: ('Sequence Number', ),
    0x1210: ('FinePix Color Setting', {
        0x00: 'Standard',
        0x10: 'Chrome',
        0x30: 'B&W',
    }),
    0x1300: ('Blur Warning', indexed('No Blur Warning', 'Blur warning')),
    0x1301: ('Focus Warning', indexed('Good Focus', 'Out Of Focus')),
    0x1302: ('AE Warning', indexed('AE Good', 'Over Exposed')),
    0x1304: ('GE Image Size', ),
    0x1400: ('Dynamic Range', indexed('Standard', None, 'Wide', base=1)),
    0x1401: ('Film Mode', {
        0x000: 'F0/Standard (Provia) ',
        0x100: 'F1/Studio Portrait',
        0x110: 'F1a/Studio Portrait Enhanced Saturation',
        0x120: 'F1b/Studio Portrait Smooth Skin Tone (Astia)',
        0x130: 'F1c/Studio Portrait Increased Sharpness',
        0x200: 'F2/Fujichrome (Velvia)',
        0x300: 'F3/Studio Portrait Ex',
        0x400: 'F4/Velvia',
        0x500: 'Pro Neg. Std',
        0x501: 'Pro Neg. Hi',
    }),
    0x1402: ('Dynamic Range Setting', {
        0x000: 'Auto (100-400%)',
        0x001: 'Manual',
        0x100: 'Standard (100%)',
        0x200: 'Wide 1 (230%)',
        0x201: 'Wide 2 (400%)',
        0x8000: 'Film Simulation',
    }),
    0x1403: ('Development Dynamic Range', ),
    0x1404: ('Minimum Focal Length', ),
    0x1405: ('Maximum Focal Length', ),
    0x1406: ('Maximum Aperture at Minimum Focal Length', ),
    0x1407: ('Maximum Aperture at Maximum Focal Length', ),
    0x140B: ('Auto Dynamic Range', ),
    0x4100: ('Faces Detected', ),
    0x4103: ('Face Positions', ),
    0x4282: ('Face Detection Data', ),
    0x8000: ('File Source', ),
    0x8002: ('Order Number', ),
    0x8003: ('Frame Number', ),
    0xB211: ('Parallax', ),
}

MAKERNOTE = MakernoteFormat('Fujifilm Makernote', TAGS)
