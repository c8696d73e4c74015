"""dgen pattern functions.

Every 8-byte word of a pattern file is derived from its absolute offset
alone, so any region can be regenerated without reading what precedes it.
"""
from __future__ import annotations

import struct

from .errors import InternalInvariantViolation
from .protocol import PATTERN_BASE, WORD_LEN, WORD_MASK


def word_at(offset: int) -> int:
    """Pattern word whose first byte sits at ``offset``."""
    return (PATTERN_BASE + offset) & WORD_MASK


def fill_aligned(buf: bytearray | memoryview, offset: int) -> None:
    """Fill ``buf`` with consecutive big-endian words starting at ``offset``.

    Both ``offset`` and ``len(buf)`` must be multiples of the word size.
    """
    if offset % WORD_LEN != 0:
        raise InternalInvariantViolation(f"FATAL: unaligned offset {offset} passed to aligned filler")
    if len(buf) % WORD_LEN != 0:
        raise InternalInvariantViolation(f"FATAL: unaligned size {len(buf)} passed to aligned filler")

    count = len(buf) // WORD_LEN
    if count == 0:
        return
    words = [word_at(offset + i * WORD_LEN) for i in range(count)]
    struct.pack_into(f">{count}Q", buf, 0, *words)


def fill_block(buf: bytearray | memoryview, offset: int) -> None:
    """Fill ``buf`` with the pattern bytes found at ``offset`` in any file.

    Offset and size may be arbitrary. Unaligned requests are served from an
    aligned scratch buffer that covers the requested window.
    """
    size = len(buf)
    if offset % WORD_LEN == 0 and size % WORD_LEN == 0:
        fill_aligned(buf, offset)
        return

    aligned_offset = (offset // WORD_LEN) * WORD_LEN
    scratch = bytearray(2 * WORD_LEN + (size // WORD_LEN) * WORD_LEN)
    fill_aligned(scratch, aligned_offset)
    skip = offset - aligned_offset
    buf[:size] = scratch[skip:skip + size]


def expected_block(offset: int, size: int) -> bytes:
    """Return the ``size`` pattern bytes starting at ``offset``."""
    buf = bytearray(size)
    fill_block(buf, offset)
    return bytes(buf)


def check_block_size(block_size: int) -> int:
    if block_size < 1:
        raise ValueError(f"block size must be positive, got {block_size}")
    return int(block_size)
