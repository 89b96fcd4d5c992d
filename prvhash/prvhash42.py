"""
PRVHASH42 — Pure Python Implementation

PRVHASH is a pseudo-random-generator-based hash: a 64-bit "Seed" and a
self-modifying multiplier ("lcg") are stepped once per 32-bit message
word, and every step deposits 32 bits into a hash word. Digest length is
any multiple of 4 bytes.

This is NOT a cryptographic hash.

Structure:
  Init:     zero-filled buffer + default constants, or caller state
            (buffer + 16-byte initialization vector) for resumed hashing
  Padding:  message extended with ~last_byte so the buffer gets at least
            one full pass after the message ends
  Loop:     Seed *= lcg; Seed = ~Seed; lcg += Seed; hash word ^= Seed >> 32
  Folding:  for hash_len > 4 the buffer holds two lanes, XORed together
  Finalize: first hash_len bytes converted to canonical (LE) order
"""

import logging
import struct

from .prvhash42ec import HOST_BYTEORDER, check_byteorder, ec_buffer, u32ec_words, u64ec

logger = logging.getLogger(__name__)

MASK64 = 0xFFFFFFFFFFFFFFFF

PRVHASH42_LCG = 0xD3AA63F78D7F7FEF   # 15252113002925621231
PRVHASH42_SEED = 0xF1A62E14388D23D4  # 17412655673657598932

DEFAULT_HASH_LEN = 8
INIT_VEC_LEN = 16


def _buffer_len(hash_len):
    if hash_len < 4 or hash_len & 3:
        raise ValueError(f"hash_len must be >= 4 and a multiple of 4, got {hash_len}")
    return hash_len if hash_len == 4 else hash_len << 1


def _round_count(msg_len, hash_len, hlm):
    mlext = msg_len + ((4 - (msg_len & 3)) & 3)
    return mlext + hash_len + (hlm - mlext % hlm)


def prvhash42_into(msg, hash_buf, hash_len, seed_xor=0, init_vec=None,
                   byteorder=HOST_BYTEORDER) -> bytes:
    """
    Compute PRVHASH42 of `msg` into the caller-supplied `hash_buf`.

    The buffer is the working state of the hash: it must be writable and
    hold 2 * hash_len bytes (hash_len bytes when hash_len == 4). On return
    its first hash_len bytes are the digest in canonical order; the rest
    is scratch left in host order.

    Args:
        msg: Message bytes
        hash_buf: Writable bytes-like buffer (bytearray, memoryview)
        hash_len: Digest length in bytes, >= 4 and a multiple of 4
        seed_xor: Value XORed into the default seed (low 64 bits used).
            Ignored when init_vec is given.
        init_vec: Optional 16 bytes, "lcg" then "Seed" as little-endian
            64-bit words. When given, hash_buf is not reset and is taken
            as pre-initialized (e.g. a previous call's output), which
            allows resumable hashing.
        byteorder: Host representation of the working buffer

    Returns:
        The hash_len-byte digest
    """
    if not isinstance(msg, (bytes, bytearray, memoryview)):
        raise TypeError(f"msg must be bytes-like, not {type(msg).__name__}")

    check_byteorder(byteorder)
    hlm = _buffer_len(hash_len)
    if len(hash_buf) < hlm:
        raise ValueError(f"hash_buf must hold at least {hlm} bytes, got {len(hash_buf)}")
    if init_vec is not None and len(init_vec) != INIT_VEC_LEN:
        raise ValueError(f"init_vec must be {INIT_VEC_LEN} bytes, got {len(init_vec)}")

    if init_vec is None:
        hash_buf[:hlm] = bytes(hlm)
        lcg = PRVHASH42_LCG
        seed = PRVHASH42_SEED ^ (seed_xor & MASK64)
    else:
        ec_buffer(hash_buf, hlm, byteorder)
        lcg = u64ec(init_vec, 0)
        seed = u64ec(init_vec, 8)

    msg = bytes(msg)
    msg_len = len(msg)
    lb = (~msg[-1] & 0xFF) if msg_len > 0 else 0xFF
    c = _round_count(msg_len, hash_len, hlm)

    logger.debug("prvhash42: mode=%s msg_len=%d hash_len=%d hlm=%d rounds=%d",
                 'default' if init_vec is None else 'resume',
                 msg_len, hash_len, hlm, c >> 2)

    # Bytes past the message read as lb; the top byte of a partial word is
    # always past the message, so plain padding gives the same words.
    padded = msg + bytes([lb]) * (c - msg_len)
    msg_words = u32ec_words(padded, c >> 2)

    word_count = hlm >> 2
    words_struct = struct.Struct(('<' if byteorder == 'little' else '>') + f'{word_count}I')
    hw = list(words_struct.unpack_from(hash_buf, 0))

    mask = MASK64
    hpos = 0

    for msgw in msg_words:
        seed = ((seed * lcg) & mask) ^ mask
        hl = (lcg >> 32) ^ msgw
        lcg = (lcg + seed) & mask
        ph = hw[hpos] ^ (seed >> 32)
        seed ^= ph ^ hl
        hw[hpos] = ph

        hpos += 1
        if hpos == word_count:
            hpos = 0

    if hlm > hash_len:
        lane = hash_len >> 2
        for j in range(lane):
            hw[j] ^= hw[lane + j]

    words_struct.pack_into(hash_buf, 0, *hw)
    ec_buffer(hash_buf, hash_len, byteorder)

    return bytes(hash_buf[:hash_len])


def prvhash42(msg, hash_len=DEFAULT_HASH_LEN, seed_xor=0) -> bytes:
    """Compute PRVHASH42 of the given message. Returns hash_len bytes."""
    hash_buf = bytearray(_buffer_len(hash_len))
    return prvhash42_into(msg, hash_buf, hash_len, seed_xor)


def prvhash42_hex(msg, hash_len=DEFAULT_HASH_LEN, seed_xor=0) -> str:
    """Return hex string representation of PRVHASH42."""
    return prvhash42(msg, hash_len, seed_xor).hex()
