"""dgen on-disk protocol constants.

Single source of truth for the header layout and the pattern seed.
Keep this file stable. Writer and Verifier must remain synchronized.
"""

# Header: [FileSize(8)] = 8 bytes, unsigned big-endian, header included
HEADER_FMT = ">Q"
HEADER_LEN = 8

# Pattern: one big-endian word per 8 bytes, (PATTERN_BASE + offset) mod 2^64
PATTERN_BASE = 0x0807060504030201
WORD_FMT = ">Q"
WORD_LEN = 8
WORD_MASK = (1 << 64) - 1

# Smallest valid file is a bare header; largest must fit in the header
MIN_FILE_SIZE = HEADER_LEN
MAX_FILE_SIZE = WORD_MASK

# Default I/O chunk size; does not affect the on-disk format
DEFAULT_BLOCK_SIZE = 64 * 1024  # 64 KiB

# Corruption report window
HEX_WINDOW = 32
