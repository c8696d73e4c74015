"""dgen Core - Pattern function and shared error kinds."""
from .pattern import word_at, fill_aligned, fill_block, expected_block, check_block_size
from .errors import (
    PatternFileError,
    NotFound,
    InvalidSize,
    TooShort,
    SizeMismatch,
    CorruptionFound,
    StorageError,
    InternalInvariantViolation,
)

__all__ = [
    "word_at", "fill_aligned", "fill_block", "expected_block", "check_block_size",
    "PatternFileError", "NotFound", "InvalidSize", "TooShort", "SizeMismatch",
    "CorruptionFound", "StorageError", "InternalInvariantViolation",
]
