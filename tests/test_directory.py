import struct

import pytest

from makernotes import process_makernote
from makernotes.arrays import sub_tags
from makernotes.classes import MakernoteFormat
from makernotes.directory import Directory
from makernotes.tags import FIELD_TYPE_FLOAT
from makernotes.utils import Rational

from .conftest import build_ifd


def make_directory(**kwargs):
    tags = {
        0x0001: ('Mode', ),
        0x0002: ('Settings', ),
        0x0100: ('First Setting', ),
    }
    return Directory('Test', tags, **kwargs)


def test_tag_names():
    directory = make_directory()
    assert directory.get_tag_name(0x0001) == 'Mode'
    assert directory.has_tag_name(0x0001)
    assert directory.get_tag_name(0x0BAD) == 'Unknown tag (0x0BAD)'
    assert not directory.has_tag_name(0x0BAD)


def test_empty_directory():
    directory = make_directory()
    assert directory.is_empty
    assert directory.tag_count == 0
    assert directory.get_int(0x0001) is None
    assert directory.get_string(0x0001) is None
    assert directory.get_description(0x0001) is None


def test_int_coercion():
    directory = make_directory()
    directory.set_string(0x0001, ' 42 ')
    assert directory.get_int(0x0001) == 42
    directory.set_float(0x0001, 3.9)
    assert directory.get_int(0x0001) == 3
    directory.set_int_array(0x0001, [7])
    assert directory.get_int(0x0001) == 7
    directory.set_int_array(0x0001, [7, 8])
    assert directory.get_int(0x0001) is None
    assert not directory.has_errors()


def test_unparseable_string_is_an_error():
    directory = make_directory()
    directory.set_string(0x0001, 'abc')
    assert directory.get_int(0x0001) is None
    assert directory.error_count == 1
    assert 'Mode' in directory.errors[0]
    assert not directory.is_empty


def test_zero_denominator_is_an_error():
    directory = make_directory()
    directory.set_rational(0x0001, 5, 0)
    assert directory.get_int(0x0001) is None
    assert directory.has_errors()
    assert directory.get_string(0x0001) == '5/0'


@pytest.mark.parametrize('value', [float('nan'), float('inf'), float('-inf')])
def test_non_finite_float_is_an_error(value):
    directory = make_directory()
    directory.set_float(0x0001, value)
    assert directory.get_int(0x0001) is None
    assert directory.error_count == 1
    assert 'Mode' in directory.errors[0]
    directory.set_object(0x0002, [1.0, value])
    assert directory.get_int_array(0x0002) is None
    assert directory.error_count == 2


@pytest.mark.parametrize('value', [float('nan'), float('inf')])
def test_non_finite_float_entry(value):
    data = build_ifd([(0x0014, FIELD_TYPE_FLOAT, 1, struct.pack('>f', value))])
    directory = process_makernote(data, 'CASIO COMPUTER CO.,LTD.', 'M')
    assert [tag.printable for tag in directory.tags] == [str(value)]
    assert directory.has_errors()


def test_large_rational_truncates_exactly():
    directory = make_directory()
    directory.set_rational(0x0001, 2 ** 60 + 3, 1)
    assert directory.get_int(0x0001) == 2 ** 60 + 3
    assert directory.get_string(0x0001) == str(2 ** 60 + 3)
    directory.set_rational_array(0x0002, [Rational(2 ** 53 + 1, 1)])
    assert directory.get_int_array(0x0002) == [2 ** 53 + 1]


def test_rational_getters():
    directory = make_directory()
    directory.set_int(0x0001, 3)
    assert directory.get_rational(0x0001) == Rational(3, 1)
    directory.set_rational(0x0001, Rational(1, 4))
    assert directory.get_float(0x0001) == 0.25
    assert directory.get_string(0x0001) == '0.25'
    directory.set_rational_array(0x0002, [Rational(1, 2), Rational(3, 1)])
    assert directory.get_rational_array(0x0002) == [Rational(1, 2), Rational(3, 1)]
    assert directory.get_string(0x0002) == '1/2 3/1'


def test_byte_arrays():
    directory = make_directory()
    directory.set_byte_array(0x0001, b'\x01\xff')
    assert directory.get_int_array(0x0001) == [1, 255]
    assert directory.get_byte_array(0x0001) == b'\x01\xff'
    assert directory.get_string(0x0001) == '1 255'


def test_string_bytes_and_encoding():
    directory = make_directory()
    directory.set_string_bytes(0x0001, b'caf\xc3\xa9')
    assert directory.get_string(0x0001) == 'caf\xe9'
    assert directory.get_string_with_encoding(0x0001, 'latin-1') == 'caf\xc3\xa9'
    assert directory.get_string_with_encoding(0x0001, 'no-such-codec') is None


def test_float_strings():
    directory = make_directory()
    directory.set_float(0x0001, 1.5)
    assert directory.get_string(0x0001) == '1.5'
    directory.set_object_array(0x0002, [1.0, 0.25])
    assert directory.get_string(0x0002) == '1 0.25'


def test_array_expansion():
    directory = make_directory(array_tags={0x0002: sub_tags(0x0100)})
    directory.set_int_array(0x0002, [10, 20, 30])
    assert not directory.contains_tag(0x0002)
    assert directory.get_int(0x0100) == 10
    assert directory.get_int(0x0102) == 30
    assert directory.tag_count == 3
    names = [tag.tag_name for tag in directory.tags]
    assert names == ['First Setting', 'Unknown tag (0x0101)', 'Unknown tag (0x0102)']


def test_array_expansion_ignores_other_values():
    directory = make_directory(array_tags={0x0002: sub_tags(0x0100)})
    directory.set_rational_array(0x0002, [Rational(1, 2)])
    assert directory.contains_tag(0x0002)
    assert not directory.contains_tag(0x0100)


def test_tag_view():
    directory = make_directory()
    directory.set_int(0x0001, 4)
    tag = directory.tags[0]
    assert tag.tag_id == '0x0001'
    assert tag.values == 4
    assert tag.printable == '4'
    assert str(tag) == '[Test] Mode - 4'
    assert str(directory) == 'Test Directory (1 tag)'


def test_format_without_array_tags():
    plain = MakernoteFormat('Plain', {0x0001: ('Mode', )})
    assert plain.array_tags is None
    directory = Directory.for_format(plain)
    directory.set_int_array(0x0001, [1, 2])
    assert directory.get_int_array(0x0001) == [1, 2]
