from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import BinaryIO

from dgen_core.errors import InvalidSize, NotFound, StorageError
from dgen_core.pattern import check_block_size, fill_block
from dgen_core.protocol import (
    DEFAULT_BLOCK_SIZE,
    HEADER_FMT,
    HEADER_LEN,
    MAX_FILE_SIZE,
    MIN_FILE_SIZE,
)


def _check_size(size: int) -> int:
    if size < MIN_FILE_SIZE:
        raise InvalidSize(size, f"file size {size} is below the {MIN_FILE_SIZE}-byte header")
    if size > MAX_FILE_SIZE:
        raise InvalidSize(size, f"file size {size} does not fit in the size header")
    return int(size)


def _fill_stream(f: BinaryIO, size: int, block_size: int) -> None:
    """Write header + pattern data from the start of ``f``."""
    f.write(struct.pack(HEADER_FMT, size))

    remaining = size - HEADER_LEN
    offset = HEADER_LEN
    buf = bytearray(min(block_size, remaining))
    view = memoryview(buf)
    while remaining > 0:
        n = min(remaining, len(buf))
        chunk = view[:n]
        fill_block(chunk, offset)
        f.write(chunk)
        remaining -= n
        offset += n

    f.flush()
    # Durability: commit data before close
    os.fdatasync(f.fileno()) if hasattr(os, "fdatasync") else os.fsync(f.fileno())


def create_file(path: str | os.PathLike, size: int, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
    """Create (or truncate) ``path`` and fill it with ``size`` bytes of pattern."""
    size = _check_size(size)
    block_size = check_block_size(block_size)
    path = Path(path)

    try:
        f = open(path, "wb")
    except OSError as e:
        raise NotFound(path, f"{path}: cannot create ({e.strerror or e})") from e

    with f:
        try:
            _fill_stream(f, size, block_size)
        except OSError as e:
            raise StorageError(path, f"{path}: write failed ({e.strerror or e})") from e


def overwrite_file(path: str | os.PathLike, block_size: int = DEFAULT_BLOCK_SIZE) -> int:
    """Re-stamp an existing file in place, keeping its current length.

    Returns the size that was written.
    """
    block_size = check_block_size(block_size)
    path = Path(path)

    try:
        size = path.stat().st_size
    except FileNotFoundError as e:
        raise NotFound(path) from e
    except OSError as e:
        raise StorageError(path, f"{path}: stat failed ({e.strerror or e})") from e
    size = _check_size(size)

    try:
        f = open(path, "r+b")
    except OSError as e:
        raise NotFound(path, f"{path}: cannot open for writing ({e.strerror or e})") from e

    with f:
        try:
            _fill_stream(f, size, block_size)
        except OSError as e:
            raise StorageError(path, f"{path}: write failed ({e.strerror or e})") from e
    return size
