import struct

import pytest


def reference_bytes(size: int) -> bytes:
    """Build a whole pattern file the slow, obvious way."""
    out = bytearray(struct.pack(">Q", size))
    off = 8
    while len(out) < size:
        out += struct.pack(">Q", (0x0807060504030201 + off) % 2**64)
        off += 8
    return bytes(out[:size])


@pytest.fixture
def reference():
    return reference_bytes
