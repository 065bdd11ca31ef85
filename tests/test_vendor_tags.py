from makernotes.directory import Directory
from makernotes.tags.makernote import canon, nikon, olympus


def describe(makernote_format, tag, value):
    directory = Directory.for_format(makernote_format)
    directory.set_object(tag, value)
    return directory.get_description(tag)


def test_canon_formatters():
    assert describe(canon.MAKERNOTE, 0xC110, 0x4000 | 200) == '200'
    assert describe(canon.MAKERNOTE, 0xC110, 15) == 'Auto'
    assert describe(canon.MAKERNOTE, 0xC116, 1) == 'Canon EF 50mm f/1.8'
    assert describe(canon.MAKERNOTE, 0xC11A, 0x40) == 'f/2.0'
    assert describe(canon.MAKERNOTE, 0xC11A, 600) == 'Unknown (600)'
    assert describe(canon.MAKERNOTE, 0xC20F, 0xFFE0) == '-1.0 EV'
    assert describe(canon.MAKERNOTE, 0xC20F, 0x0010) == '0.5 EV'
    assert describe(canon.MAKERNOTE, 0x000C, 0x1234) == '001200052'


def test_canon_continuous_drive_uses_self_timer():
    directory = Directory.for_format(canon.MAKERNOTE)
    directory.set_int_array(0x0001, [0, 0, 20, 0, 0, 0])
    assert directory.get_description(0xC102) == '2 sec'
    assert directory.get_description(0xC105) == 'Single shot with self-timer'


def test_nikon_formatters():
    assert describe(nikon.TYPE2, 0x000E, b'\xfa\x01\x06\x00') == '-1 EV'
    assert describe(nikon.TYPE2, 0x0083, 0b0110) == 'AF, D, G'
    assert describe(nikon.TYPE2, 0x0088, b'\x00\x03\x00\x00') == 'Left'
    assert describe(nikon.TYPE2, 0x00B6, b'\x07\xd5\x01\x02\x03\x04\x05') == '2005:01:02 03:04:05'


def test_olympus_formatters():
    assert describe(olympus.MAKERNOTE, 0xF016, (2 << 16) | (34 << 8) | 15) == '2004-03-15'
    assert describe(olympus.MAKERNOTE, 0xF017, (30 << 16) | (13 << 8) | 5) == '13:30:05'
    assert describe(olympus.MAKERNOTE, 0xF014, 0) == 'Infinity'
    assert describe(olympus.MAKERNOTE, 0x0200, [0, 1, 1]) == \
        'Normal picture taking mode / 1st in a sequence / Left to right panorama direction'


def test_olympus_interval_fields_depend_on_shooting_mode():
    directory = Directory.for_format(olympus.MAKERNOTE)
    directory.set_int(0xF011, 10)
    assert directory.get_description(0xF011) == 'N/A'
    directory.set_int(olympus.SHOOTING_MODE, olympus.INTERVAL_SHOOTING_MODE)
    assert directory.get_description(0xF011) == '10 min'
