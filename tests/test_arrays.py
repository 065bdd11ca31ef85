import struct

from makernotes.directory import Directory
from makernotes.tags.makernote import canon, olympus


def canon_directory():
    return Directory.for_format(canon.MAKERNOTE)


def test_canon_camera_settings():
    directory = canon_directory()
    directory.set_int_array(0x0001, [68, 1, 0, 3])
    assert not directory.contains_tag(0x0001)
    assert directory.get_int(0xC100) == 68
    assert directory.get_description(0xC101) == 'Macro'
    assert directory.get_description(0xC102) == 'Self timer not used'
    assert directory.get_description(0xC103) == 'Fine'
    assert directory.get_tag_name(0xC103) == 'Quality'


def test_canon_array_that_is_not_ints_stays_whole():
    directory = canon_directory()
    directory.set_string(0x0001, 'garbage')
    assert directory.contains_tag(0x0001)
    assert directory.get_tag_name(0x0001) == 'Camera Settings'


def test_canon_af_info_positions():
    directory = canon_directory()
    values = [2, 2, 640, 480, 640, 480, 50, 50, 11, 12, 21, 22, 0b10, 1, 0]
    directory.set_int_array(0x0012, values)
    assert directory.get_int(0xD200) == 2
    assert directory.get_int(0xD207) == 50
    assert directory.get_int_array(0xD208) == [11, 12]
    assert directory.get_int_array(0xD209) == [21, 22]
    assert directory.get_int_array(0xD20A) == [0b10]
    assert directory.get_description(0xD20A) == '1'
    assert directory.get_int(0xD20B) == 1
    assert directory.get_int(0xD20C) == 0


def test_canon_af_info_many_points():
    directory = canon_directory()
    count = 19
    values = [count, count, 0, 0, 0, 0, 0, 0]
    values += list(range(count)) + list(range(count))
    values += [0x8001, 0x0004]
    directory.set_int_array(0x0012, values)
    assert len(directory.get_int_array(0xD208)) == count
    assert directory.get_description(0xD20A) == '0,15,18'
    assert not directory.contains_tag(0xD20B)


def test_canon_af_info_truncated():
    directory = canon_directory()
    values = [9] + [0] * 24
    directory.set_int_array(0x0012, values)
    assert directory.get_int(0xD200) == 9
    assert len(directory.get_int_array(0xD208)) == 9
    # not enough values left for the Y positions
    assert not directory.contains_tag(0xD209)
    assert not directory.contains_tag(0xD20A)
    assert not directory.has_errors()


def test_olympus_camera_settings():
    directory = Directory.for_format(olympus.MAKERNOTE)
    directory.set_byte_array(0x0001, struct.pack('>4i', 0, 0, 3, 1))
    assert not directory.contains_tag(0x0001)
    assert directory.get_int(0xF002) == 3
    assert directory.get_description(0xF002) == 'M'
    assert directory.get_description(0xF003) == 'Red-eye reduction'


def test_olympus_camera_settings_ignores_trailing_bytes():
    directory = Directory.for_format(olympus.MAKERNOTE)
    directory.set_byte_array(0x0003, struct.pack('>2i', -1, 2) + b'\x00\x01')
    assert directory.get_int(0xF000) == -1
    assert directory.get_int(0xF001) == 2
    assert not directory.contains_tag(0xF002)
