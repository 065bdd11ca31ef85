"""
Generic makernote tag store.

Every vendor shares this one engine; the vendor modules under
``makernotes.tags.makernote`` only contribute a name table, formatters and
the array expanders that split one array tag into many synthetic sub-tags.
"""

import math
from typing import Any, Callable, Dict, List, Optional, Union

from .classes import MakernoteFormat, Tag
from .descriptor import TagDescriptor
from .exif_log import get_logger
from .utils import Rational, StringValue

logger = get_logger()

ArrayExpander = Callable[['Directory', Any], bool]


def _format_float(value: float) -> str:
    string = ('%.3f' % value).rstrip('0').rstrip('.')
    if string == '-0':
        return '0'
    return string


def _format_item(value: Any) -> str:
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Rational):
        return '%d/%d' % (value.numerator, value.denominator)
    return str(value)


class Directory:
    """
    Typed key/value store for the tags of one makernote.

    Writes never fail, whatever is handed in gets stored. Conversion to the
    requested type happens in the getters, which return ``None`` for absent
    or unconvertible values and record the latter in :attr:`errors`.
    """

    def __init__(
        self,
        name: str,
        tag_dict: dict,
        array_tags: Optional[Dict[int, ArrayExpander]] = None,
        parent: Optional['Directory'] = None,
    ):
        self.name = name
        self._tag_dict = tag_dict
        self._array_tags = array_tags or {}
        self.parent = parent

        self._tags = {}  # type: Dict[int, Any]
        self._errors = []  # type: List[str]

        self.descriptor = TagDescriptor(self)

    @classmethod
    def for_format(cls, makernote_format: MakernoteFormat, parent: Optional['Directory'] = None) -> 'Directory':
        """Build an empty directory for one of the makernote layouts."""
        return cls(makernote_format.name, makernote_format.tags, makernote_format.array_tags, parent)

    def __str__(self) -> str:
        return '%s Directory (%d %s)' % (
            self.name,
            len(self._tags),
            'tag' if len(self._tags) == 1 else 'tags'
        )

    def __repr__(self) -> str:
        return '<{}.{} {} tags={}, errors={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.name,
            len(self._tags),
            len(self._errors),
            hex(id(self))
        )

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: int) -> bool:
        return tag in self._tags

    # Tag names

    def tag_entry(self, tag: int) -> Optional[tuple]:
        return self._tag_dict.get(tag)

    def has_tag_name(self, tag: int) -> bool:
        return tag in self._tag_dict

    def get_tag_name(self, tag: int) -> str:
        tag_entry = self._tag_dict.get(tag)
        if tag_entry:
            return tag_entry[0]
        return 'Unknown tag (0x%04X)' % tag

    # Errors

    def add_error(self, message: str) -> None:
        logger.warning('%s: %s', self.name, message)
        self._errors.append(message)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    # Tags

    def contains_tag(self, tag: int) -> bool:
        return tag in self._tags

    @property
    def tags(self) -> List[Tag]:
        return [Tag(tag, self) for tag in self._tags]

    @property
    def tag_count(self) -> int:
        return len(self._tags)

    @property
    def is_empty(self) -> bool:
        return not self._tags and not self._errors

    def get_description(self, tag: int) -> Optional[str]:
        return self.descriptor.get_description(tag)

    # Setters

    def set_object(self, tag: int, value: Any) -> None:
        self._tags[tag] = value

    def set_object_array(self, tag: int, values: Any) -> None:
        expander = self._array_tags.get(tag)
        if expander is not None and expander(self, values):
            return
        self.set_object(tag, values)

    def set_int(self, tag: int, value: int) -> None:
        self.set_object(tag, value)

    def set_int_array(self, tag: int, values: List[int]) -> None:
        self.set_object_array(tag, list(values))

    def set_float(self, tag: int, value: float) -> None:
        self.set_object(tag, value)

    def set_string(self, tag: int, value: str) -> None:
        self.set_object(tag, value)

    def set_string_bytes(self, tag: int, data: bytes, encoding: Optional[str] = None) -> None:
        self.set_object(tag, StringValue(data, encoding))

    def set_rational(self, tag: int, numerator: Union[int, Rational], denominator: Optional[int] = None) -> None:
        if isinstance(numerator, Rational):
            self.set_object(tag, numerator)
        else:
            self.set_object(tag, Rational(numerator, denominator))

    def set_rational_array(self, tag: int, values: List[Rational]) -> None:
        self.set_object_array(tag, list(values))

    def set_byte_array(self, tag: int, data: bytes) -> None:
        self.set_object_array(tag, bytes(data))

    # Getters

    def get_object(self, tag: int) -> Any:
        return self._tags.get(tag)

    def get_int(self, tag: int) -> Optional[int]:
        value = self._tags.get(tag)
        if value is None:
            return None
        if isinstance(value, (list, tuple, bytes)):
            if len(value) != 1:
                return None
            value = value[0]
        if isinstance(value, Rational):
            try:
                return value.to_int()
            except ZeroDivisionError:
                self.add_error("Tag '%s' has a zero denominator" % self.get_tag_name(tag))
                return None
        if isinstance(value, float) and not math.isfinite(value):
            self.add_error(
                "Tag '%s' cannot be converted to int: '%s'" % (self.get_tag_name(tag), value)
            )
            return None
        if isinstance(value, (int, float)):
            return int(value)
        if isinstance(value, (str, StringValue)):
            try:
                return int(str(value).strip())
            except ValueError:
                self.add_error(
                    "Tag '%s' cannot be converted to int: '%s'" % (self.get_tag_name(tag), value)
                )
                return None
        return None

    def get_float(self, tag: int) -> Optional[float]:
        value = self._tags.get(tag)
        if isinstance(value, list) and len(value) == 1:
            value = value[0]
        if isinstance(value, Rational):
            return value.decimal()
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, (str, StringValue)):
            try:
                return float(str(value))
            except ValueError:
                return None
        return None

    def get_rational(self, tag: int) -> Optional[Rational]:
        value = self._tags.get(tag)
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Rational(value, 1)
        return None

    def get_rational_array(self, tag: int) -> Optional[List[Rational]]:
        value = self._tags.get(tag)
        if isinstance(value, list) and all(isinstance(item, Rational) for item in value):
            return list(value)
        return None

    def get_int_array(self, tag: int) -> Optional[List[int]]:
        value = self._tags.get(tag)
        if value is None:
            return None
        if isinstance(value, bytes):
            return list(value)
        if isinstance(value, StringValue):
            return list(value.bytes)
        if isinstance(value, str):
            return [ord(char) for char in value]
        if isinstance(value, (list, tuple)):
            ints = []
            for item in value:
                if isinstance(item, Rational):
                    ints.append(item.to_int() if item.denominator else 0)
                elif isinstance(item, float) and not math.isfinite(item):
                    self.add_error(
                        "Tag '%s' cannot be converted to int: '%s'" % (self.get_tag_name(tag), item)
                    )
                    return None
                elif isinstance(item, (int, float)):
                    ints.append(int(item))
                else:
                    return None
            return ints
        if isinstance(value, int):
            return [value]
        return None

    def get_byte_array(self, tag: int) -> Optional[bytes]:
        value = self._tags.get(tag)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value
        if isinstance(value, StringValue):
            return value.bytes
        if isinstance(value, str):
            return bytes(ord(char) & 0xFF for char in value)
        if isinstance(value, int):
            return bytes([value & 0xFF])
        ints = self.get_int_array(tag)
        if ints is None:
            return None
        return bytes(item & 0xFF for item in ints)

    def get_string(self, tag: int) -> Optional[str]:
        value = self._tags.get(tag)
        if value is None:
            return None
        if isinstance(value, Rational):
            return value.to_simple_string(True)
        if isinstance(value, StringValue):
            return str(value)
        if isinstance(value, bytes):
            return ' '.join(str(item) for item in value)
        if isinstance(value, (list, tuple)):
            return ' '.join(_format_item(item) for item in value)
        if isinstance(value, float):
            return _format_float(value)
        return str(value)

    def get_string_with_encoding(self, tag: int, encoding: str) -> Optional[str]:
        data = self.get_byte_array(tag)
        if data is None:
            return None
        try:
            return data.decode(encoding)
        except (LookupError, UnicodeDecodeError):
            return None
