"""
PRVHASH42 — Endianness Correction

Digests, message words and initialization vectors are exchanged in the
canonical (little-endian) byte order. The hash engine keeps its working
buffer in host order; these helpers convert between the two.

On a little-endian host ec_buffer() is a no-op, and u32ec()/u64ec() are
plain little-endian reads on every host.
"""

import struct
import sys

HOST_BYTEORDER = sys.byteorder

_U32_STRUCT = struct.Struct('<I')
_U64_STRUCT = struct.Struct('<Q')


def check_byteorder(byteorder):
    """Raise ValueError unless byteorder is 'little' or 'big'."""
    if byteorder not in ('little', 'big'):
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")


def ec_buffer(buf, length, byteorder=HOST_BYTEORDER):
    """
    Convert the first `length` bytes of `buf` between canonical and
    `byteorder` word order, in place. Self-inverse.

    Args:
        buf: Writable bytes-like object (bytearray, memoryview)
        length: Number of bytes to convert, a multiple of 4
        byteorder: Host representation, 'little' or 'big'
    """
    check_byteorder(byteorder)
    if length & 3:
        raise ValueError(f"length must be a multiple of 4, got {length}")

    if byteorder == 'little' or length == 0:
        return

    count = length >> 2
    words = struct.unpack_from(f'<{count}I', buf, 0)
    struct.pack_into(f'>{count}I', buf, 0, *words)


def u32ec(buf, offset=0):
    """Read a 32-bit canonical word."""
    return _U32_STRUCT.unpack_from(buf, offset)[0]


def u64ec(buf, offset=0):
    """Read a 64-bit canonical word."""
    return _U64_STRUCT.unpack_from(buf, offset)[0]


def u32ec_words(buf, count, offset=0):
    """Read `count` consecutive 32-bit canonical words as a tuple."""
    return struct.unpack_from(f'<{count}I', buf, offset)
