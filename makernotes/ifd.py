import io
import struct
from typing import Any, List, Optional, Tuple

from .classes import MakernoteFormat
from .directory import Directory
from .exif_log import get_logger
from .tags import FIELD_TYPES, FIELD_TYPE_ASCII, FIELD_TYPE_BYTE, FIELD_TYPE_DOUBLE, FIELD_TYPE_FLOAT, \
    FIELD_TYPE_RATIONAL, FIELD_TYPE_SIGNED_BYTE, FIELD_TYPE_SIGNED_RATIONAL, FIELD_TYPE_UNDEFINED, makernote
from .utils import InvalidMakernote, Rational, s2n

logger = get_logger()

SIGNED_FIELD_TYPES = (6, 8, 9, 10)


class MakerNote:
    """
    A MakerNote

    MakerNotes are not an actual SubIFD but a tag in the EXIF SubIFD whose
    value follows the EXIF format. ``ifd_offset`` is the position of the
    entry count within ``data``; values too wide to be inlined are read from
    ``base_offset`` plus the stored pointer.
    """
    def __init__(
        self,
        data: bytes,
        makernote_format: MakernoteFormat,
        ifd_offset: int,
        endian: str,
        base_offset: int = 0,
        strict: bool = False,
        parent: Optional[Directory] = None,
    ):
        self.offset = ifd_offset
        self._endian = endian
        self._base_offset = base_offset
        self._strict = strict
        self._length = len(data)

        self._file_handle = io.BytesIO(data)
        self.directory = Directory.for_format(makernote_format, parent)

        self._dump_ifd()
        for post_processor in makernote_format.post_processors:
            post_processor(self.directory)

    @property
    def name(self) -> str:
        return self.directory.name

    def __str__(self) -> str:
        return '{} @ {}'.format(self.name, self.offset)

    def __repr__(self) -> str:
        return '<{}.{} {} offset={}, endian={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            self.name,
            self.offset,
            self._endian,
            hex(id(self))
        )

    def _error(self, message: str) -> None:
        if self._strict:
            raise InvalidMakernote(message)
        self.directory.add_error(message)

    def _read(self, offset: int, length: int, signed=False) -> int:
        return s2n(self._file_handle, 0, offset, length, self._endian, signed)

    def _process_field(self, count: int, field_type: int, type_length: int, offset: int) -> List[Any]:
        values = []  # type: List[Any]
        signed = field_type in SIGNED_FIELD_TYPES
        for _ in range(count):
            if field_type in (FIELD_TYPE_RATIONAL, FIELD_TYPE_SIGNED_RATIONAL):
                # a ratio
                value = Rational(
                    self._read(offset, 4, signed),
                    self._read(offset + 4, 4, signed)
                )  # type: Any
            elif field_type in (FIELD_TYPE_FLOAT, FIELD_TYPE_DOUBLE):
                # a float or double
                unpack_format = '<' if self._endian == 'I' else '>'
                unpack_format += 'f' if field_type == FIELD_TYPE_FLOAT else 'd'
                self._file_handle.seek(offset)
                value = struct.unpack(unpack_format, self._file_handle.read(type_length))[0]
            else:
                value = self._read(offset, type_length, signed)
            values.append(value)
            offset = offset + type_length
        return values

    def _process_field2(self, tag: int, count: int, offset: int) -> bytes:
        # special case: null-terminated ASCII string
        self._file_handle.seek(offset)
        values = self._file_handle.read(count)
        # Drop any garbage after a null.
        values = values.split(b'\x00', 1)[0]
        try:
            values.decode('utf-8')
        except UnicodeDecodeError:
            logger.warning('Possibly corrupted field 0x%04X in %s', tag, self.name)
        return values

    def _store(self, tag: int, field_type: int, count: int, values: List[Any]) -> None:
        directory = self.directory
        if field_type in (FIELD_TYPE_BYTE, FIELD_TYPE_UNDEFINED):
            if count == 1 and field_type == FIELD_TYPE_BYTE:
                directory.set_int(tag, values[0])
            else:
                directory.set_byte_array(tag, bytes(values))
        elif field_type in (FIELD_TYPE_RATIONAL, FIELD_TYPE_SIGNED_RATIONAL):
            if count == 1:
                directory.set_rational(tag, values[0])
            else:
                directory.set_rational_array(tag, values)
        elif field_type in (FIELD_TYPE_FLOAT, FIELD_TYPE_DOUBLE):
            if count == 1:
                directory.set_float(tag, values[0])
            else:
                directory.set_object_array(tag, values)
        elif count == 1 and field_type != FIELD_TYPE_SIGNED_BYTE:
            directory.set_int(tag, values[0])
        else:
            directory.set_int_array(tag, values)

    def _process_tag(self, tag: int, entry: int) -> None:
        field_type = self._read(entry + 2, 2)

        # unknown field type
        if not 0 < field_type < len(FIELD_TYPES):
            self._error('Invalid TIFF tag format code %d for tag 0x%04X' % (field_type, tag))
            return

        type_length = FIELD_TYPES[field_type][0]
        count = self._read(entry + 4, 4)
        byte_count = count * type_length
        # Adjust for tag id/type/count (2+2+4 bytes)
        # Now we point at either the data or the 2nd level offset
        offset = entry + 8

        # If the value fits in 4 bytes, it is inlined, else we
        # need to jump ahead again.
        if byte_count > 4:
            # offset is not the value; it's a pointer to the value
            offset = self._base_offset + self._read(offset, 4)

        if offset < 0 or offset + byte_count > self._length:
            self._error('Illegal TIFF tag pointer offset for tag 0x%04X: %d + %d bytes' % (tag, offset, byte_count))
            return

        if field_type == FIELD_TYPE_ASCII:
            self.directory.set_string_bytes(tag, self._process_field2(tag, count, offset))
        else:
            self._store(tag, field_type, count, self._process_field(count, field_type, type_length, offset))

        logger.debug(' %s: %s', self.directory.get_tag_name(tag), repr(self.directory.get_object(tag)))

    def _dump_ifd(self) -> None:
        """Populate makernote tags."""
        try:
            entries = self._read(self.offset, 2)
        except InvalidMakernote:
            self._error('Possibly corrupted IFD: %s' % self.offset)
            return

        if self.offset + 2 + 12 * entries > self._length:
            self._error('Illegal IFD size: %d entries at %d' % (entries, self.offset))
            return

        for i in range(entries):
            # entry is index of start of this IFD in the data
            entry = self.offset + 2 + 12 * i
            tag = self._read(entry, 2)
            self._process_tag(tag, entry)


def _make_string(data: bytes, offset: int, length: int) -> str:
    return data[offset:offset + length].decode('latin-1')


def detect_makernote(
    data: bytes,
    make: str = '',
    endian: str = 'M',
    makernote_offset: int = 0,
) -> Optional[Tuple[MakernoteFormat, int, str, int]]:
    """
    Decode all the camera-specific MakerNote formats

    Works out the layout from the makernote header and the camera make, and
    returns ``(makernote_format, ifd_offset, endian, base_offset)``, or
    ``None`` for data we have no description for.

    ``data`` starts at the TIFF header the makernote's pointers refer to
    (just the makernote itself works as well), with the makernote at
    ``makernote_offset``. Newer formats use addressing relative to the
    makernote so it can be moved by picture software; for these
    ``base_offset`` is ``makernote_offset``.
    """
    note = makernote_offset
    make = (make or '').strip()
    upper_make = make.upper()

    def prefix(length: int) -> str:
        return _make_string(data, note, length)

    # Olympus, Epson and Agfa share the Olympus format
    if prefix(6) == 'OLYMP\x00' or prefix(5) == 'EPSON' or prefix(4) == 'AGFA':
        return makernote.olympus.MAKERNOTE, note + 8, endian, 0

    if prefix(10) == 'OLYMPUS\x00II':
        return makernote.olympus.MAKERNOTE, note + 12, 'I', note

    # capitalised MINOLTA models carry an Olympus makernote with no header
    if upper_make.startswith('MINOLTA'):
        return makernote.olympus.MAKERNOTE, note, endian, 0

    # Nikon
    # The maker note usually starts with the word Nikon, followed by the
    # type of the makernote (1 or 2, as a short).  If the word Nikon is
    # not at the start of the makernote, it's probably type 2, since some
    # cameras work that way.
    if upper_make.startswith('NIKON'):
        if prefix(5) == 'Nikon':
            version = data[note + 6] if len(data) > note + 6 else None
            if version == 1:
                logger.debug('Looks like a type 1 Nikon MakerNote.')
                return makernote.nikon.TYPE1, note + 8, endian, 0
            if version == 2:
                logger.debug('Looks like a labeled type 2 Nikon MakerNote')
                # skip the Makernote label, the TIFF header sets the byte order
                header = data[note + 10:note + 12]
                if header == b'II':
                    endian = 'I'
                elif header == b'MM':
                    endian = 'M'
                else:
                    logger.warning('Missing TIFF header in Nikon MakerNote')
                return makernote.nikon.TYPE2, note + 18, endian, note + 10
            logger.warning('Unsupported Nikon makernote data ignored.')
            return None
        # E99x or D1
        logger.debug('Looks like an unlabeled type 2 Nikon MakerNote')
        return makernote.nikon.TYPE2, note, endian, 0

    if prefix(8) in ('SIGMA\x00\x00\x00', 'FOVEON\x00\x00'):
        return makernote.sigma.MAKERNOTE, note + 10, endian, 0

    # Canon
    if upper_make == 'CANON':
        return makernote.canon.MAKERNOTE, note, endian, 0

    # Casio
    if upper_make.startswith('CASIO'):
        if prefix(6) == 'QVC\x00\x00\x00':
            return makernote.casio.TYPE2, note + 6, endian, 0
        return makernote.casio.TYPE1, note, endian, 0

    # Fujifilm
    if prefix(8) == 'FUJIFILM' or upper_make == 'FUJIFILM':
        # IFD offsets are from beginning of MakerNote, not beginning of
        # file header. Everything else is "Motorola" endian, but the
        # MakerNote is "Intel" endian
        ifd_start = s2n(io.BytesIO(data), note, 8, 4, 'I')
        return makernote.fujifilm.MAKERNOTE, note + ifd_start, 'I', note

    if prefix(7) == 'KYOCERA':
        return makernote.kyocera.MAKERNOTE, note + 22, endian, 0

    # Casio type 2 tags with relative offsets, seen on the Pentax *ist D
    if prefix(4) == 'AOC\x00':
        return makernote.casio.TYPE2, note + 6, endian, note

    # Pentax
    if upper_make.startswith('PENTAX') or upper_make.startswith('ASAHI'):
        return makernote.pentax.MAKERNOTE, note, endian, note

    if prefix(8) == 'SANYO\x00\x01\x00':
        return makernote.sanyo.MAKERNOTE, note + 8, endian, note

    # Ricoh
    if upper_make.startswith('RICOH'):
        if prefix(2) == 'Rv' or prefix(3) == 'Rev':
            logger.debug('Textual Ricoh makernote is not supported')
            return None
        if prefix(5).upper() == 'RICOH':
            return makernote.ricoh.MAKERNOTE, note + 8, 'M', note
        return None

    # Apple
    if prefix(10) == 'Apple iOS\x00':
        return makernote.apple.MAKERNOTE, note + 14, 'M', note

    return None
