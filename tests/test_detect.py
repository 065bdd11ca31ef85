import pytest

from makernotes import process_makernote
from makernotes.ifd import detect_makernote
from makernotes.tags.makernote import apple, canon, casio, kyocera, nikon, olympus, pentax, ricoh, sanyo, sigma
from makernotes.utils import MakernoteNotFound

PAD = b'\x00' * 32


@pytest.mark.parametrize('header, make, expected', [
    (b'OLYMP\x00\x01\x00', 'OLYMPUS', (olympus.MAKERNOTE, 8, 'M', 0)),
    (b'EPSON\x00\x01\x00', 'SEIKO EPSON CORP.', (olympus.MAKERNOTE, 8, 'M', 0)),
    (b'OLYMPUS\x00II\x03\x00', 'OLYMPUS', (olympus.MAKERNOTE, 12, 'I', 0)),
    (b'', 'Minolta Co., Ltd.', (olympus.MAKERNOTE, 0, 'M', 0)),
    (b'Nikon\x00\x01\x00', 'NIKON', (nikon.TYPE1, 8, 'M', 0)),
    (b'Nikon\x00\x02\x10\x00\x00II*\x00', 'NIKON CORPORATION', (nikon.TYPE2, 18, 'I', 10)),
    (b'', 'NIKON', (nikon.TYPE2, 0, 'M', 0)),
    (b'SIGMA\x00\x00\x00', 'SIGMA', (sigma.MAKERNOTE, 10, 'M', 0)),
    (b'FOVEON\x00\x00', 'SIGMA', (sigma.MAKERNOTE, 10, 'M', 0)),
    (b'', 'Canon', (canon.MAKERNOTE, 0, 'M', 0)),
    (b'QVC\x00\x00\x00', 'CASIO', (casio.TYPE2, 6, 'M', 0)),
    (b'', 'CASIO COMPUTER CO.,LTD.', (casio.TYPE1, 0, 'M', 0)),
    (b'KYOCERA', 'KYOCERA', (kyocera.MAKERNOTE, 22, 'M', 0)),
    (b'AOC\x00', 'PENTAX Corporation', (casio.TYPE2, 6, 'M', 0)),
    (b'', 'PENTAX Corporation', (pentax.MAKERNOTE, 0, 'M', 0)),
    (b'', 'Asahi Optical Co.,Ltd', (pentax.MAKERNOTE, 0, 'M', 0)),
    (b'SANYO\x00\x01\x00', 'SANYO Electric Co.,Ltd.', (sanyo.MAKERNOTE, 8, 'M', 0)),
    (b'Ricoh\x00\x00\x00', 'RICOH', (ricoh.MAKERNOTE, 8, 'M', 0)),
    (b'Apple iOS\x00', 'Apple', (apple.MAKERNOTE, 14, 'M', 0)),
])
def test_detect(header, make, expected):
    assert detect_makernote(header + PAD, make, 'M') == expected


def test_detect_fujifilm():
    data = b'FUJIFILM\x0c\x00\x00\x00' + PAD
    makernote_format, ifd_offset, endian, base_offset = detect_makernote(data, 'FUJIFILM', 'M')
    assert makernote_format.name == 'Fujifilm Makernote'
    assert (ifd_offset, endian, base_offset) == (12, 'I', 0)


def test_detect_relative_base():
    data = PAD + b'SANYO\x00\x01\x00' + PAD
    assert detect_makernote(data, 'SANYO', 'I', makernote_offset=32) == (sanyo.MAKERNOTE, 40, 'I', 32)
    data = PAD + b'OLYMP\x00\x01\x00' + PAD
    assert detect_makernote(data, 'OLYMPUS', 'I', makernote_offset=32) == (olympus.MAKERNOTE, 40, 'I', 0)


@pytest.mark.parametrize('header, make', [
    (b'Nikon\x00\x03\x00', 'NIKON'),
    (b'Rev0103', 'RICOH'),
    (b'Rv0103', 'RICOH'),
    (b'', 'RICOH'),
    (b'', 'Leica Camera AG'),
    (b'', ''),
])
def test_detect_unsupported(header, make):
    assert detect_makernote(header + PAD, make, 'M') is None


def test_process_unknown_makernote():
    assert process_makernote(PAD, 'Leica Camera AG') is None
    with pytest.raises(MakernoteNotFound):
        process_makernote(PAD, 'Leica Camera AG', strict=True)


def test_process_truncated_fujifilm_header():
    assert process_makernote(b'FUJIFILM', 'FUJIFILM') is None
