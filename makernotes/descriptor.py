"""
Turn stored tag values into human readable descriptions.

Vendor tag tables attach a formatter as the second element of each entry:
either a ``{value: label}`` dict, or a callable taking ``(descriptor, tag)``.
The callables are usually built from the factories at the bottom of this
module or are plain functions in the vendor module.
"""

from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP
import math
from typing import Any, Callable, List, Optional, TYPE_CHECKING

from .exif_log import get_logger

if TYPE_CHECKING:
    from .directory import Directory

logger = get_logger()


def decimal_format(value: float, max_places: int, min_places: int = 0, rounding=ROUND_HALF_EVEN) -> str:
    """
    Render ``value`` like a ``0.##`` style pattern: at most ``max_places``
    decimals, trailing zeros dropped down to ``min_places``.
    """
    if not math.isfinite(value):
        return str(value)
    quantum = Decimal(1).scaleb(-max_places)
    string = format(Decimal(repr(float(value))).quantize(quantum, rounding=rounding), 'f')
    if '.' in string:
        whole, fraction = string.split('.')
        fraction = fraction.rstrip('0')
        if len(fraction) < min_places:
            fraction += '0' * (min_places - len(fraction))
        string = whole + '.' + fraction if fraction else whole
    return string


def f_stop_description(f_stop: float) -> str:
    return 'f/' + decimal_format(f_stop, 1, 1, ROUND_HALF_UP)


def focal_length_description(mm: float) -> str:
    return decimal_format(mm, 1, 0, ROUND_HALF_UP) + ' mm'


def apex_to_f_stop(apex_value: float) -> float:
    """APEX aperture value to an f-number: 2 ** (Av / 2)."""
    return math.exp(apex_value * math.log(2.0) / 2.0)


def decode_canon_ev(value: int) -> float:
    """
    Decode a Canon EV value, where the low five bits are 1/32 EV steps
    except 0x0C and 0x14 which stand for one and two thirds.
    """
    sign = 1
    if value < 0:
        value = -value
        sign = -1
    frac = value & 0x1F
    value -= frac
    if frac == 0x0C:
        frac = 0x20 / 3
    elif frac == 0x14:
        frac = 0x40 / 3
    return sign * (value + frac) / 0x20


def convert_bytes_to_version_string(components: Optional[List[int]], major_digits: int) -> Optional[str]:
    if components is None:
        return None
    version = ''
    for i, component in enumerate(components[:4]):
        if i == major_digits:
            version += '.'
        if component < ord('0'):
            component += ord('0')
        if i == 0 and component == ord('0'):
            continue
        version += chr(component)
    return version


class TagDescriptor:
    """
    Formatting layer bound to one :class:`Directory`.
    """

    def __init__(self, directory: 'Directory'):
        self._directory = directory

    @property
    def directory(self) -> 'Directory':
        return self._directory

    def __repr__(self) -> str:
        return '<{}.{} for {} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self._directory.name,
            hex(id(self))
        )

    def get_description(self, tag: int) -> Optional[str]:
        tag_entry = self._directory.tag_entry(tag)
        if tag_entry and len(tag_entry) > 1 and tag_entry[1] is not None:
            formatter = tag_entry[1]
            if callable(formatter):
                return formatter(self, tag)
            if isinstance(formatter, dict):
                return self.get_mapped_description(tag, formatter)
            logger.debug('Ignoring formatter of type %s for tag 0x%04X', type(formatter), tag)
        return self.get_default_description(tag)

    def get_default_description(self, tag: int) -> Optional[str]:
        value = self._directory.get_object(tag)
        if value is None:
            return None
        if isinstance(value, (list, tuple, bytes)) and len(value) > 16:
            return '[%d values]' % len(value)
        return self._directory.get_string(tag)

    def get_mapped_description(self, tag: int, mapping: dict) -> Optional[str]:
        value = self._directory.get_int(tag)
        if value is None:
            return None
        label = mapping.get(value)
        if label is None:
            return 'Unknown (%d)' % value
        return label

    def get_indexed_description(self, tag: int, base_index: int, *labels: Optional[str]) -> Optional[str]:
        index = self._directory.get_int(tag)
        if index is None:
            return None
        array_index = index - base_index
        if 0 <= array_index < len(labels):
            label = labels[array_index]
            if label is not None:
                return label
        return 'Unknown (%d)' % index

    def get_bit_flag_description(self, tag: int, *labels: Any) -> Optional[str]:
        """
        One label per bit, least significant first. A string is listed when
        its bit is set, a ``(clear, set)`` pair always contributes one side.
        """
        value = self._directory.get_int(tag)
        if value is None:
            return None
        parts = []
        for label in labels:
            is_bit_set = value & 1 == 1
            if isinstance(label, tuple):
                parts.append(label[1] if is_bit_set else label[0])
            elif is_bit_set and isinstance(label, str):
                parts.append(label)
            value >>= 1
        return ', '.join(parts)

    def get_version_bytes_description(self, tag: int, major_digits: int) -> Optional[str]:
        return convert_bytes_to_version_string(self._directory.get_int_array(tag), major_digits)

    def get_byte_length_description(self, tag: int) -> Optional[str]:
        data = self._directory.get_byte_array(tag)
        if data is None:
            return None
        return '(%d byte%s)' % (len(data), '' if len(data) == 1 else 's')

    def get_simple_rational(self, tag: int) -> Optional[str]:
        value = self._directory.get_rational(tag)
        if value is None:
            return None
        return value.to_simple_string(True)

    def get_decimal_rational(self, tag: int, places: int) -> Optional[str]:
        value = self._directory.get_rational(tag)
        if value is None:
            return None
        return '%.*f' % (places, value.decimal())

    def get_formatted_int(self, tag: int, fmt: str) -> Optional[str]:
        value = self._directory.get_int(tag)
        if value is None:
            return None
        return fmt % value

    def get_formatted_string(self, tag: int, fmt: str) -> Optional[str]:
        value = self._directory.get_string(tag)
        if value is None:
            return None
        return fmt % value

    def get_rational_or_double_string(self, tag: int) -> Optional[str]:
        rational = self._directory.get_rational(tag)
        if rational is not None:
            return rational.to_simple_string(True)
        value = self._directory.get_float(tag)
        if value is not None:
            return decimal_format(value, 3)
        return None

    def get_lens_specification_description(self, tag: int) -> Optional[str]:
        values = self._directory.get_rational_array(tag)
        if values is None or len(values) != 4 or (values[0].is_zero and values[2].is_zero):
            return None
        if values[0] == values[1]:
            description = values[0].to_simple_string(True) + 'mm'
        else:
            description = '%s-%smm' % (values[0].to_simple_string(True), values[1].to_simple_string(True))
        if not values[2].is_zero:
            if values[2] == values[3]:
                description += ' ' + f_stop_description(values[2].decimal())
            else:
                description += ' f/%s-%s' % (
                    decimal_format(values[2].decimal(), 1, 1, ROUND_HALF_UP),
                    decimal_format(values[3].decimal(), 1, 1, ROUND_HALF_UP),
                )
        return description

    def get_7bit_string(self, tag: int) -> Optional[str]:
        data = self._directory.get_byte_array(tag)
        if data is None:
            return None
        length = len(data)
        for index, char in enumerate(data):
            if char == 0 or char > 0x7F:
                length = index
                break
        return data[:length].decode('ascii')


Formatter = Callable[[TagDescriptor, int], Optional[str]]


def indexed(*labels: Optional[str], base: int = 0) -> Formatter:
    def describe(descriptor: TagDescriptor, tag: int) -> Optional[str]:
        return descriptor.get_indexed_description(tag, base, *labels)
    return describe


def bit_flags(*labels: Any) -> Formatter:
    def describe(descriptor: TagDescriptor, tag: int) -> Optional[str]:
        return descriptor.get_bit_flag_description(tag, *labels)
    return describe


def version_bytes(major_digits: int) -> Formatter:
    def describe(descriptor: TagDescriptor, tag: int) -> Optional[str]:
        return descriptor.get_version_bytes_description(tag, major_digits)
    return describe


def formatted_string(fmt: str) -> Formatter:
    def describe(descriptor: TagDescriptor, tag: int) -> Optional[str]:
        return descriptor.get_formatted_string(tag, fmt)
    return describe
