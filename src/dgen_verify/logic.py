from __future__ import annotations

import os
import struct
from pathlib import Path
from warnings import warn

from dgen_core.errors import (
    CorruptionFound,
    InternalInvariantViolation,
    NotFound,
    PatternFileError,
    SizeMismatch,
    StorageError,
    TooShort,
    size_note,
)
from dgen_core.pattern import check_block_size, fill_block
from dgen_core.protocol import DEFAULT_BLOCK_SIZE, HEADER_FMT, HEADER_LEN
from .hexdump import first_difference, hex_window


def validate_file(path: str | os.PathLike, block_size: int = DEFAULT_BLOCK_SIZE) -> int:
    """Check that ``path`` holds exactly the pattern a writer would produce.

    Raises a PatternFileError subclass describing the first problem found.
    Returns the validated file size on success.
    """
    block_size = check_block_size(block_size)
    path = Path(path)

    try:
        f = open(path, "rb")
    except OSError as e:
        raise NotFound(path, f"{path}: cannot open ({e.strerror or e})") from e

    with f:
        try:
            actual_size = os.fstat(f.fileno()).st_size
            header = f.read(HEADER_LEN)
        except OSError as e:
            raise StorageError(path, f"{path}: read failed ({e.strerror or e})") from e

        # The rest of the checks are meaningless without a complete header
        if len(header) < HEADER_LEN:
            raise TooShort(actual_size)

        (expected_size,) = struct.unpack(HEADER_FMT, header)
        note = ""
        if expected_size != actual_size:
            note = size_note(expected_size, actual_size)
            warn(f"Size mismatch in {path}: {note.strip()}. Checking remaining data.")

        remaining = actual_size - HEADER_LEN
        offset = HEADER_LEN
        proper = bytearray(min(block_size, remaining))
        proper_view = memoryview(proper)
        while remaining > 0:
            n = min(remaining, len(proper))
            expected = proper_view[:n]
            fill_block(expected, offset)
            try:
                actual = f.read(n)
            except OSError as e:
                raise StorageError(path, f"{path}: read failed ({e.strerror or e})") from e

            if len(actual) != n:
                # File shrank underneath us
                present = offset + len(actual)
                raise SizeMismatch(expected_size, present, f"{note}file shrank to {present} bytes while reading")

            # Fast path: whole-chunk comparison
            if expected == actual:
                remaining -= n
                offset += n
                continue

            i = first_difference(expected, actual)
            if i < 0:
                raise InternalInvariantViolation(
                    f"FATAL: chunk at offset {offset} compared unequal but no differing byte was found"
                )
            raise CorruptionFound(
                i,
                offset + i,
                hex_window(expected, i),
                hex_window(actual, i),
                prefix=note,
            )

    if note:
        raise SizeMismatch(expected_size, actual_size, note + "The rest of the file is OK")
    return actual_size


def verify_file(path: str | os.PathLike, block_size: int = DEFAULT_BLOCK_SIZE) -> dict:
    """Run validate_file and summarize the outcome as a result document."""
    errors = []
    try:
        size = validate_file(path, block_size)
    except PatternFileError as e:
        errors.append(e.to_dict())
        return {"status": "FAIL", "error_count": len(errors), "errors": errors, "path": str(path)}

    return {"status": "PASS", "error_count": 0, "errors": [], "path": str(path), "size": size}
