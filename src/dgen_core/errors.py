"""dgen error kinds.

Recoverable data and I/O failures derive from PatternFileError and carry a
stable code plus the detail fields a caller needs to pinpoint the problem.
InternalInvariantViolation sits outside that hierarchy: it means
the codec itself is broken and must not be reported as a validation result.
"""
from __future__ import annotations

ERRORS = {
  "E_NOT_FOUND": "File missing or cannot be opened",
  "E_INVALID_SIZE": "Requested size cannot hold a pattern file",
  "E_TOO_SHORT": "File shorter than the size header",
  "E_SIZE_MISMATCH": "Size header does not match file length",
  "E_CORRUPTION": "Pattern data mismatch",
  "E_IO": "Read or write failed",
}


class PatternFileError(Exception):
    code = "E_PATTERN"

    def __init__(self, reason: str, **detail):
        super().__init__(reason)
        self.reason = reason
        self.detail = detail

    def to_dict(self) -> dict:
        out = {"code": self.code, "message": ERRORS.get(self.code, self.code), "detail": self.reason}
        out.update(self.detail)
        return out


class NotFound(PatternFileError):
    code = "E_NOT_FOUND"

    def __init__(self, path, reason: str | None = None):
        super().__init__(reason or f"{path}: no such file", path=str(path))
        self.path = str(path)


class InvalidSize(PatternFileError):
    code = "E_INVALID_SIZE"

    def __init__(self, size: int, reason: str | None = None):
        super().__init__(reason or f"invalid file size {size}", size=int(size))
        self.size = int(size)


class TooShort(PatternFileError):
    code = "E_TOO_SHORT"

    def __init__(self, actual_size: int):
        super().__init__(f"file too short ({actual_size} bytes)", actual_size=int(actual_size))
        self.actual_size = int(actual_size)


class SizeMismatch(PatternFileError):
    code = "E_SIZE_MISMATCH"

    def __init__(self, expected_size: int, actual_size: int, reason: str | None = None):
        super().__init__(
            reason or size_note(expected_size, actual_size),
            expected_size=int(expected_size),
            actual_size=int(actual_size),
        )
        self.expected_size = int(expected_size)
        self.actual_size = int(actual_size)


class CorruptionFound(PatternFileError):
    code = "E_CORRUPTION"

    def __init__(self, offset: int, file_offset: int, expected_hex: str, actual_hex: str, prefix: str = ""):
        reason = (
            f"{prefix}data mismatch at offset {offset} (file offset {file_offset}). Expected/actual:\n"
            f"{expected_hex}\n{actual_hex}"
        )
        super().__init__(
            reason,
            offset=int(offset),
            file_offset=int(file_offset),
            expected_hex=expected_hex,
            actual_hex=actual_hex,
        )
        self.offset = int(offset)
        self.file_offset = int(file_offset)
        self.expected_hex = expected_hex
        self.actual_hex = actual_hex


class StorageError(PatternFileError):
    code = "E_IO"

    def __init__(self, path, reason: str):
        super().__init__(reason, path=str(path))
        self.path = str(path)


class InternalInvariantViolation(AssertionError):
    """The codec contradicted itself; its results cannot be trusted."""


def size_note(expected_size: int, actual_size: int) -> str:
    return f"file should be {expected_size} bytes long, but is {actual_size} bytes long\n"
