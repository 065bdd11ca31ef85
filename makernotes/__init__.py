"""
Decode camera makernotes into named, described tags.
"""
from typing import Optional

from .directory import Directory
from .exif_log import get_logger
from .ifd import MakerNote, detect_makernote
from .utils import InvalidMakernote, MakernoteNotFound

__version__ = '1.0.0'

logger = get_logger()


def process_makernote(
    data: bytes,
    make: str = '',
    endian: str = 'M',
    strict: bool = False,
    makernote_offset: int = 0,
    parent: Optional[Directory] = None,
) -> Optional[Directory]:
    """
    Process the raw bytes of a makernote.

    ``make`` is the camera make from the primary IFD and ``endian`` the byte
    order of the enclosing TIFF structure ('I' or 'M'). When ``data`` holds
    the whole TIFF structure, ``makernote_offset`` is where the makernote
    starts in it.

    Returns ``None`` when the makernote layout is not recognised. Problems
    found while decoding are recorded in the directory's errors, or raised
    as :class:`InvalidMakernote` in strict mode.
    """
    try:
        layout = detect_makernote(data, make, endian, makernote_offset)
    except InvalidMakernote:
        if strict:
            raise
        logger.warning('Makernote header is truncated')
        return None

    if layout is None:
        if strict:
            raise MakernoteNotFound('No known makernote layout for make %r' % make)
        logger.debug('No known makernote layout for make %r', make)
        return None

    makernote_format, ifd_offset, endian, base_offset = layout
    logger.debug('Decoding %s at offset %d (base %d)', makernote_format.name, ifd_offset, base_offset)
    note = MakerNote(data, makernote_format, ifd_offset, endian, base_offset, strict=strict, parent=parent)
    return note.directory
