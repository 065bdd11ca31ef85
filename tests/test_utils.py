import io

import pytest

from makernotes.utils import InvalidMakernote, Rational, StringValue, s2n


def test_rational_keeps_zero_denominator():
    value = Rational(5, 0)
    assert value.num == 5
    assert value.den == 0
    assert value.is_zero
    assert value.decimal() == float('inf')
    with pytest.raises(ZeroDivisionError):
        value.to_int()


def test_rational_zero_over_zero():
    value = Rational(0, 0)
    assert value.is_zero
    assert value.is_integer_value
    assert value.to_int() == 0
    assert value.to_simple_string() == '0'


def test_rational_to_int_truncates():
    assert Rational(7, 2).to_int() == 3
    assert Rational(-7, 2).to_int() == -3
    assert Rational(2 ** 53 + 1, 1).to_int() == 2 ** 53 + 1
    assert Rational(-(2 ** 62 + 1), 2).to_int() == -(2 ** 61)


@pytest.mark.parametrize('numerator, denominator, allow_decimal, expected', [
    (4, 2, True, '2'),
    (1, 2, True, '0.5'),
    (1, 3, True, '1/3'),
    (1, 2, False, '1/2'),
    (5, 0, True, '5/0'),
])
def test_rational_simple_string(numerator, denominator, allow_decimal, expected):
    assert Rational(numerator, denominator).to_simple_string(allow_decimal) == expected


def test_s2n_endianness():
    fh = io.BytesIO(b'\x01\x02\xff\xfe')
    assert s2n(fh, 0, 0, 2, 'M') == 0x0102
    assert s2n(fh, 0, 0, 2, 'I') == 0x0201
    assert s2n(fh, 2, 0, 2, 'M', signed=True) == -2


def test_s2n_out_of_range():
    fh = io.BytesIO(b'\x00\x01')
    with pytest.raises(InvalidMakernote):
        s2n(fh, 0, 1, 2, 'M')
    with pytest.raises(InvalidMakernote):
        s2n(fh, 0, -1, 1, 'M')


def test_string_value_encoding():
    assert str(StringValue(b'caf\xe9', 'latin-1')) == 'caf\xe9'
    assert str(StringValue(b'abc')) == 'abc'
    assert len(StringValue(b'abc')) == 3

