import struct

import pytest

from makernotes import process_makernote
from makernotes.decrypt import decrypt_ints
from makernotes.ifd import MakerNote
from makernotes.tags import FIELD_TYPE_ASCII, FIELD_TYPE_LONG, FIELD_TYPE_RATIONAL, FIELD_TYPE_SHORT, \
    FIELD_TYPE_UNDEFINED
from makernotes.tags.makernote import casio, nikon
from makernotes.utils import InvalidMakernote

from .conftest import build_ifd, longs, shorts


@pytest.mark.parametrize('sensitivity, expected', [
    (64, 'Normal'),
    (125, '+1.0'),
    (999, 'Unknown (999)'),
])
def test_casio_type1(sensitivity, expected):
    data = build_ifd([
        (0x0002, FIELD_TYPE_SHORT, 1, shorts(2)),
        (0x0014, FIELD_TYPE_SHORT, 1, shorts(sensitivity)),
    ])
    directory = process_makernote(data, 'CASIO COMPUTER CO.,LTD.', 'M')
    assert directory.name == 'Casio Makernote'
    assert directory.get_description(0x0002) == 'Normal'
    assert directory.get_tag_name(0x0014) == 'CCD Sensitivity'
    assert directory.get_description(0x0014) == expected
    assert not directory.has_errors()


def test_canon_little_endian():
    data = build_ifd([
        (0x0001, FIELD_TYPE_SHORT, 4, shorts(68, 1, 0, 3, endian='I')),
        (0x0006, FIELD_TYPE_ASCII, 12, b'IMG:EOS JPG\x00'),
    ], endian='I')
    directory = process_makernote(data, 'Canon', 'I')
    assert directory.get_description(0xC101) == 'Macro'
    assert directory.get_description(0xC103) == 'Fine'
    assert directory.get_string(0x0006) == 'IMG:EOS JPG'
    assert directory.tag_count == 5


def test_nikon_type1():
    data = build_ifd([
        (0x0003, FIELD_TYPE_SHORT, 1, shorts(2)),
        (0x0008, FIELD_TYPE_RATIONAL, 1, longs(1, 0)),
        (0x000A, FIELD_TYPE_RATIONAL, 1, longs(2, 1)),
    ], prefix=b'Nikon\x00\x01\x00')
    directory = process_makernote(data, 'NIKON', 'M')
    assert directory.get_description(0x0003) == 'VGA Normal'
    assert directory.get_description(0x0008) == 'Infinite'
    assert directory.get_description(0x000A) == '2x digital zoom'


def test_nikon_type2_with_tiff_header():
    header = b'Nikon\x00\x02\x10\x00\x00' + b'II*\x00' + struct.pack('<I', 8)
    data = build_ifd([
        (0x0002, FIELD_TYPE_SHORT, 2, shorts(0, 200, endian='I')),
        (0x0004, FIELD_TYPE_ASCII, 8, b'NORMAL\x00\x00'),
        (0x0086, FIELD_TYPE_RATIONAL, 1, longs(1, 1, endian='I')),
    ], endian='I', prefix=header, relative_to=10)
    # the byte order of the enclosing file does not matter
    directory = process_makernote(data, 'NIKON CORPORATION', 'M')
    assert directory.get_description(0x0002) == 'ISO 200'
    assert directory.get_description(0x0004) == 'NORMAL'
    assert directory.get_description(0x0086) == 'No digital zoom'


def test_nikon_type2_lens_data():
    plain = [0x30, 0x32, 0x30, 0x31] + [0] * 6 + [80, 0, 0]
    data = build_ifd([
        (0x001D, FIELD_TYPE_ASCII, 2, b'7\x00'),
        (0x0098, FIELD_TYPE_UNDEFINED, len(plain), bytes(decrypt_ints(plain, 7, 9))),
        (0x00A7, FIELD_TYPE_LONG, 1, longs(9)),
    ])
    directory = process_makernote(data, 'NIKON CORPORATION', 'M')
    assert directory.contains_tag(nikon.LENS_DATA)
    assert directory.get_int(nikon.LENS_FOCUS_DISTANCE) == 80
    assert directory.get_description(nikon.LENS_FOCUS_DISTANCE) == '1.00m'


def test_olympus_camera_settings():
    data = build_ifd([
        (0x0001, FIELD_TYPE_UNDEFINED, 16, struct.pack('>4i', 0, 0, 3, 1)),
    ], prefix=b'OLYMP\x00\x01\x00')
    directory = process_makernote(data, 'OLYMPUS IMAGING CORP.', 'M')
    assert directory.get_description(0xF002) == 'M'
    assert directory.get_description(0xF003) == 'Red-eye reduction'


def test_pointers_relative_to_tiff_header():
    data = build_ifd([
        (0x0001, FIELD_TYPE_UNDEFINED, 16, struct.pack('>4i', 0, 0, 2, 0)),
    ], prefix=b'\x00' * 100 + b'OLYMP\x00\x01\x00')
    directory = process_makernote(data, 'OLYMPUS', 'M', makernote_offset=100)
    assert directory.get_description(0xF002) == 'S'


def test_fujifilm_relative_offsets():
    data = build_ifd([
        (0x1001, FIELD_TYPE_SHORT, 1, shorts(3, endian='I')),
    ], endian='I', prefix=b'FUJIFILM' + struct.pack('<I', 12))
    directory = process_makernote(data, 'FUJIFILM', 'M')
    assert directory.get_description(0x1001) == 'Normal'


def test_unknown_field_type():
    data = build_ifd([
        (0x0002, 99, 1, shorts(1)),
        (0x0014, FIELD_TYPE_SHORT, 1, shorts(64)),
    ])
    directory = MakerNote(data, casio.TYPE1, 0, 'M').directory
    assert directory.errors == ['Invalid TIFF tag format code 99 for tag 0x0002']
    assert directory.get_description(0x0014) == 'Normal'

    with pytest.raises(InvalidMakernote):
        MakerNote(data, casio.TYPE1, 0, 'M', strict=True)


def test_pointer_past_end():
    data = build_ifd([
        (0x0014, FIELD_TYPE_SHORT, 1, shorts(64)),
        (0x2000, FIELD_TYPE_UNDEFINED, 20, b'\xff' * 20),
    ])[:-10]
    directory = MakerNote(data, casio.TYPE2, 0, 'M').directory
    assert directory.error_count == 1
    assert 'Illegal TIFF tag pointer offset' in directory.errors[0]
    assert not directory.contains_tag(0x2000)
    assert directory.contains_tag(0x0014)


def test_truncated_ifd():
    data = shorts(5) + b'\x00' * 12
    directory = MakerNote(data, casio.TYPE1, 0, 'M').directory
    assert directory.tag_count == 0
    assert directory.errors[0].startswith('Illegal IFD size')

    with pytest.raises(InvalidMakernote):
        MakerNote(data, casio.TYPE1, 0, 'M', strict=True)


def test_empty_data():
    directory = MakerNote(b'', casio.TYPE1, 0, 'M').directory
    assert directory.has_errors()
