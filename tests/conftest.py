import logging
import struct

import pytest


def build_ifd(entries, endian='M', prefix=b'', relative_to=0):
    """
    Assemble a makernote: ``prefix`` followed by an IFD holding ``entries``.

    Each entry is ``(tag, field_type, count, payload)``. Payloads wider than
    four bytes are appended after the IFD and referenced by a pointer counted
    from ``relative_to``.
    """
    fmt = '<' if endian == 'I' else '>'
    start = len(prefix)
    table_length = 2 + 12 * len(entries) + 4
    body = struct.pack(fmt + 'H', len(entries))
    extra = b''
    for tag, field_type, count, payload in entries:
        if len(payload) <= 4:
            value = payload.ljust(4, b'\x00')
        else:
            value = struct.pack(fmt + 'I', start + table_length + len(extra) - relative_to)
            extra += payload
        body += struct.pack(fmt + 'HHI', tag, field_type, count) + value
    body += b'\x00' * 4
    return prefix + body + extra


def shorts(*values, endian='M'):
    return struct.pack(('<' if endian == 'I' else '>') + '%dH' % len(values), *values)


def longs(*values, endian='M'):
    return struct.pack(('<' if endian == 'I' else '>') + '%dI' % len(values), *values)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger('makernotes')
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
