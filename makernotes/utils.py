"""
Misc utilities.
"""

from fractions import Fraction
import math
import struct
from typing import BinaryIO, Optional

from .exif_log import get_logger

logger = get_logger()


class InvalidMakernote(Exception):
    pass


class MakernoteNotFound(Exception):
    pass


def s2n(fh: BinaryIO, initial_offset: int, offset: int, length: int, endian: str, signed=False) -> int:
    """
    Convert slice to integer, based on sign and endian flags.

    The offset is relative to ``initial_offset``, which for most makernotes
    is the start of the enclosing TIFF header and for the relative formats
    (Fujifilm, Pentax, Apple...) is the start of the makernote itself.
    """
    # Little-endian if Intel, big-endian if Motorola
    fmt = '<' if endian == 'I' else '>'
    try:
        fmt += {
            (1, False): 'B',
            (1, True):  'b',
            (2, False): 'H',
            (2, True):  'h',
            (4, False): 'I',
            (4, True):  'i',
            (8, False): 'Q',
            (8, True):  'q',
            }[(length, signed)]
    except KeyError:
        raise ValueError('unexpected unpacking length: %d' % length)
    position = initial_offset + offset
    if position < 0:
        raise InvalidMakernote('Negative offset %d' % position)
    fh.seek(position)
    buf = fh.read(length)
    if len(buf) != length:
        raise InvalidMakernote('Read of %d bytes past end of data at %d' % (length, position))
    return struct.unpack(fmt, buf)[0]


class StringValue:
    """
    Raw bytes of a string tag plus the encoding they should be decoded with.
    """

    def __init__(self, data: bytes, encoding: Optional[str] = None):
        self.bytes = bytes(data)
        self.encoding = encoding

    def __str__(self) -> str:
        if self.encoding is not None:
            try:
                return self.bytes.decode(self.encoding)
            except (LookupError, UnicodeDecodeError):
                logger.debug('Could not decode %r as %s', self.bytes, self.encoding)
        return self.bytes.decode('utf-8', 'replace')

    def __repr__(self) -> str:
        return '<{}.{} {!r} encoding={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.bytes,
            self.encoding,
            hex(id(self))
        )

    def __eq__(self, other) -> bool:
        if isinstance(other, StringValue):
            return self.bytes == other.bytes and self.encoding == other.encoding
        return NotImplemented

    def __len__(self) -> int:
        return len(self.bytes)


class Rational(Fraction):
    """
    Exact numerator/denominator pair as stored by the TIFF RATIONAL types.

    A zero denominator is kept as read rather than raising, since several
    cameras write 0/0 or n/0 for "not set".
    """

    # We're immutable, so use __new__ not __init__
    def __new__(cls, numerator=0, denominator=None):
        try:
            self = super(Rational, cls).__new__(cls, numerator, denominator)
        except ZeroDivisionError:
            self = super(Rational, cls).__new__(cls)
            self._numerator = numerator
            self._denominator = denominator
        return self

    def __repr__(self) -> str:
        return str(self)

    @property
    def num(self):
        return self.numerator

    @property
    def den(self):
        return self.denominator

    def decimal(self) -> float:
        if self.numerator == 0:
            return 0.0
        if self.denominator == 0:
            return float('inf') if self.numerator > 0 else float('-inf')
        return float(self)

    def to_int(self) -> int:
        """Truncate towards zero, raises ZeroDivisionError for n/0."""
        if self.numerator == 0:
            return 0
        if self.denominator == 0:
            raise ZeroDivisionError('Rational(%d, 0) has no integer value' % self.numerator)
        return math.trunc(self)

    @property
    def is_integer_value(self) -> bool:
        if self.denominator == 0:
            return self.numerator == 0
        return self.numerator % self.denominator == 0

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0 or self.denominator == 0

    def to_simple_string(self, allow_decimal: bool = True) -> str:
        """
        Shortest readable form: an integer when exact, a short decimal when
        ``allow_decimal`` and it fits in four characters, else ``n/d``.
        """
        if self.denominator == 0 and self.numerator != 0:
            return '%d/%d' % (self.numerator, self.denominator)
        if self.is_integer_value:
            return str(self.to_int())
        if allow_decimal:
            decimal = str(self.decimal())
            if len(decimal) < 5:
                return decimal
        return '%d/%d' % (self.numerator, self.denominator)
