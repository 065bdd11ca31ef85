"""
Split array tags into synthetic sub-tags.

Several vendors pack a whole record of settings into one array tag. Each
element is re-stored as its own tag at ``offset + index`` so it can be named
and described like any other tag.
"""

import struct
from typing import Any, Callable, List

from .exif_log import get_logger

logger = get_logger()

# Canon AF info sub-tags, see tags.makernote.canon
AF_INFO_OFFSET = 0xD200
AF_AREA_X_POSITIONS = AF_INFO_OFFSET + 8
AF_AREA_Y_POSITIONS = AF_INFO_OFFSET + 9
AF_POINTS_IN_FOCUS = AF_INFO_OFFSET + 10


def _is_int_array(values: Any) -> bool:
    if not isinstance(values, (list, tuple)):
        return False
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            return False
    return True


def expand_sub_tags(directory, offset: int, values: List[int]) -> None:
    """Store ``values[i]`` at ``offset + i``."""
    for i, value in enumerate(values):
        directory.set_int(offset + i, value)
    logger.debug(' Expanded %d values to 0x%04X-0x%04X', len(values), offset, offset + len(values) - 1)


def expand_canon_af_info(directory, values: List[int]) -> None:
    """
    Canon AF info: the first value is the number of AF points, which sets the
    width of the X/Y position runs and of the points-in-focus bitmask (16
    points per value). All other fields take one value each.
    """
    num_af_points = values[0]
    tag_number = 0
    i = 0
    while i < len(values):
        tag = AF_INFO_OFFSET + tag_number
        if tag in (AF_AREA_X_POSITIONS, AF_AREA_Y_POSITIONS):
            run = num_af_points
        elif tag == AF_POINTS_IN_FOCUS:
            run = (num_af_points + 15) // 16
        else:
            run = None

        if run is None:
            directory.set_int(tag, values[i])
            i += 1
        else:
            # Truncated or corrupt records are common on older bodies; drop
            # the run but keep the following fields aligned.
            if i + run <= len(values):
                directory.set_object(tag, list(values[i:i + run]))
            else:
                logger.debug(' AF info run 0x%04X needs %d values, %d left', tag, run, len(values) - i)
            i += run
        tag_number += 1


def expand_big_endian_ints(directory, offset: int, data: bytes) -> None:
    """Store each big-endian int32 of ``data`` at ``offset + index``."""
    count = len(data) // 4
    values = struct.unpack('>%di' % count, data[:count * 4])
    expand_sub_tags(directory, offset, list(values))


def sub_tags(offset: int) -> Callable[[Any, Any], bool]:
    """Array expander for a plain ``offset + index`` record of ints."""
    def expander(directory, values) -> bool:
        if not _is_int_array(values):
            return False
        expand_sub_tags(directory, offset, values)
        return True
    return expander


def canon_af_info(directory, values) -> bool:
    if not _is_int_array(values) or not values:
        return False
    expand_canon_af_info(directory, values)
    return True


def big_endian_ints(offset: int) -> Callable[[Any, Any], bool]:
    """Array expander for a byte blob of big-endian int32 values."""
    def expander(directory, values) -> bool:
        if not isinstance(values, bytes):
            return False
        expand_big_endian_ints(directory, offset, values)
        return True
    return expander
