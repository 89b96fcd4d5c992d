"""
PRVHASH42 — Python Implementation

Pseudo-random-generator-based hash function with 64-bit state and 32-bit
hash words. Digest length is any multiple of 4 bytes. Not cryptographic.

Usage:
    from prvhash import prvhash42, prvhash42_hex, prvhash42_into

    digest = prvhash42(b"Hello")                # 8 bytes
    digest = prvhash42(b"Hello", hash_len=32)   # 32 bytes
    hex_str = prvhash42_hex(b"Hello", seed_xor=0x1234)

    # Resumable hashing over a caller-owned state buffer
    buf = bytearray(2 * 16)
    prvhash42_into(b"part 1", buf, 16)
    prvhash42_into(b"part 2", buf, 16, init_vec=iv)   # iv: 16 random bytes
"""

from .prvhash42 import (
    DEFAULT_HASH_LEN,
    PRVHASH42_LCG,
    PRVHASH42_SEED,
    prvhash42,
    prvhash42_hex,
    prvhash42_into,
)

__all__ = [
    'DEFAULT_HASH_LEN',
    'PRVHASH42_LCG',
    'PRVHASH42_SEED',
    'prvhash42',
    'prvhash42_hex',
    'prvhash42_into',
]
__version__ = '2.20.0'
